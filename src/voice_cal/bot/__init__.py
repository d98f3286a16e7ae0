"""Telegram transport: Bot API client, voice retrieval, dispatch and polling.

Submodules are imported directly (``voice_cal.bot.dispatcher`` etc.); the
dispatcher depends on :mod:`voice_cal.pipeline`, which in turn uses the
API client, so nothing is re-exported here.
"""
