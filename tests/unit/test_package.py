"""Tests for voice-cal package structure and imports."""

from __future__ import annotations

import re


def test_package_is_importable() -> None:
    """``import voice_cal`` must succeed without errors."""
    import voice_cal  # noqa: F401


def test_package_has_version() -> None:
    """``voice_cal.__version__`` must be defined."""
    import voice_cal

    assert hasattr(voice_cal, "__version__")
    assert voice_cal.__version__ == "0.1.0"


def test_package_version_is_semver() -> None:
    """Version string must match semantic versioning format."""
    import voice_cal

    assert re.match(r"^\d+\.\d+\.\d+$", voice_cal.__version__)


def test_main_module_importable() -> None:
    """``python -m voice_cal`` entry point must be importable."""
    from voice_cal.__main__ import build_poller, main  # noqa: F401


def test_config_module_importable() -> None:
    """Core config exports must be importable."""
    from voice_cal.config import ConfigError, load_settings  # noqa: F401


def test_logging_module_importable() -> None:
    """Core logging exports must be importable."""
    from voice_cal.log import setup_logging  # noqa: F401


def test_public_exports() -> None:
    import voice_cal

    for name in voice_cal.__all__:
        assert hasattr(voice_cal, name)
