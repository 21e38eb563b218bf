"""
Test doubles for MindfulPause Bot
=================================

Classes:
    ManualClock: deterministic call_later scheduler
    RecordingNarrator: narrator that records requests and stops
    FakeSpeech: speech source returning canned base64 PCM
    RecordingSink: audio sink that records played buffers
    FakeChatClient: chat client returning canned replies
    RecordingBot: Telegram Bot stand-in recording API calls
"""

from tests.mocks.clock import ManualClock, ManualTimerHandle
from tests.mocks.audio import FakeSpeech, RecordingNarrator, RecordingSink, pcm_base64
from tests.mocks.telegram import FakeChatClient, RecordingBot

__all__ = [
    'ManualClock',
    'ManualTimerHandle',
    'FakeSpeech',
    'RecordingNarrator',
    'RecordingSink',
    'pcm_base64',
    'FakeChatClient',
    'RecordingBot',
]
