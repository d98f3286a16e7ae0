"""Pipeline orchestrator for the voice-to-calendar workflow.

Chains the stages for a single voice message: download, transcription,
event extraction and calendar insert (which normalizes the times
internally).  The top-level entry point is :meth:`VoicePipeline.run`,
which returns a :class:`PipelineResult` for the reply composer.

Each stage raises on failure and nothing is retried; the caller decides
what the user sees.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime

from voice_cal.bot.api import TelegramClient
from voice_cal.bot.voice import retrieve_voice
from voice_cal.calendar.client import GoogleCalendarClient
from voice_cal.calendar.event_mapper import event_title
from voice_cal.llm import OpenAIEventClient
from voice_cal.models.event import EventProposal
from voice_cal.speech import WhisperClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a successful pipeline run.

    Attributes:
        transcript: Text returned by the speech-to-text service.
        proposal: Event proposal decoded from the language model.
        calendar_event: The created Google Calendar event resource.
        duration_seconds: Wall-clock time for the full run.
    """

    transcript: str
    proposal: EventProposal
    calendar_event: dict
    duration_seconds: float = 0.0

    @property
    def title(self) -> str:
        """Title the event was created with."""
        return event_title(self.proposal)


class VoicePipeline:
    """Runs one voice message through every stage.

    Args:
        telegram: Client used to resolve and download voice files.
        transcriber: Speech-to-text client.
        extractor: Language model client.
        calendar: Calendar writer.
    """

    def __init__(
        self,
        telegram: TelegramClient,
        transcriber: WhisperClient,
        extractor: OpenAIEventClient,
        calendar: GoogleCalendarClient,
    ) -> None:
        self._telegram = telegram
        self._transcriber = transcriber
        self._extractor = extractor
        self._calendar = calendar

    def run(self, file_id: str, now: datetime | None = None) -> PipelineResult:
        """Turn the voice message *file_id* into a calendar event.

        Executes four stages:

        1. **Retrieve** -- resolve and download the voice file.
        2. **Transcribe** -- send the audio to the speech-to-text service.
        3. **Extract** -- ask the language model for an event proposal.
        4. **Write** -- normalize the times and insert the event.

        Args:
            file_id: ``file_id`` of the voice attachment.
            now: Override for the current time (useful for testing).

        Returns:
            A :class:`PipelineResult` describing the created event.

        Raises:
            RetrievalError: Stage 1 failed.
            TranscriptionError: Stage 2 failed.
            ExtractionError: Stage 3 failed or a proposed time is invalid.
            CalendarError: Stage 4 failed.
        """
        start_time = time.monotonic()

        logger.info("Stage 1: Retrieving voice file %s", file_id)
        audio = retrieve_voice(self._telegram, file_id)

        logger.info("Stage 2: Transcribing voice message")
        transcript = self._transcriber.transcribe(audio)

        logger.info("Stage 3: Extracting event proposal")
        proposal = self._extractor.propose_event(transcript)

        logger.info("Stage 4: Writing event to calendar %s", self._calendar.calendar_id)
        calendar_event = self._calendar.create_event(proposal, now=now)

        duration = time.monotonic() - start_time
        logger.info("Pipeline complete in %.1fs", duration)

        return PipelineResult(
            transcript=transcript,
            proposal=proposal,
            calendar_event=calendar_event,
            duration_seconds=duration,
        )
