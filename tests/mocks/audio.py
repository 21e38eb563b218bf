"""
Mock Audio Components
=====================

Stand-ins for the speech synthesizer, the playback sink and the narrator
used by the breathing controller.
"""

import asyncio
import base64
import struct
from typing import List, Optional, Sequence

import numpy as np


def pcm_base64(values: Sequence[int]) -> str:
    """Encode int16 samples as base64 little-endian PCM."""
    return base64.b64encode(struct.pack(f'<{len(values)}h', *values)).decode('ascii')


class RecordingNarrator:
    """Narrator that records what the controller asked for."""

    def __init__(self):
        self.requests: List[str] = []
        self.stops = 0

    def request(self, text: str):
        self.requests.append(text)

    def stop(self):
        self.stops += 1


class FakeSpeech:
    """
    Speech source with canned output.

    If gate is set, generate_speech waits for it before answering, which
    lets tests act while narration is loading.
    """

    def __init__(self, audio: Optional[str] = None, error: Optional[Exception] = None):
        self.audio = audio
        self.error = error
        self.calls: List[str] = []
        self.gate: Optional[asyncio.Event] = None

    async def generate_speech(self, text: str) -> Optional[str]:
        self.calls.append(text)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.audio


class RecordingPlayback:
    def __init__(self):
        self.stopped = False

    def stop(self):
        self.stopped = True


class RecordingSink:
    """Audio sink that keeps every buffer it was asked to play."""

    def __init__(self):
        self.played: List[np.ndarray] = []
        self.sample_rates: List[int] = []
        self.handles: List[RecordingPlayback] = []

    def play(self, samples: np.ndarray, sample_rate: int) -> RecordingPlayback:
        self.played.append(samples)
        self.sample_rates.append(sample_rate)
        handle = RecordingPlayback()
        self.handles.append(handle)
        return handle
