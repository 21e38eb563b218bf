"""
Озвучка дыхательных техник
"""

import asyncio
import base64
import binascii
import io
import logging
import wave
from typing import Awaitable, Optional, Protocol, Union

import numpy as np

from models import AudioDecodeError

logger = logging.getLogger('mindfulpause')

SAMPLE_RATE = 24000
PCM_SCALE = 32768.0

def decode_pcm16(data: Union[str, bytes]) -> np.ndarray:
    """base64 PCM (int16 LE, моно, 24 кГц) -> float32 в диапазоне [-1.0, 1.0]"""
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AudioDecodeError(f"Некорректный base64: {e}") from e

    usable = len(raw) - len(raw) % 2
    samples = np.frombuffer(raw[:usable], dtype='<i2')
    return samples.astype(np.float32) / PCM_SCALE

def encode_wav(samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> bytes:
    """Нормализованные сэмплы обратно в 16-битный WAV"""
    pcm = np.clip(np.round(samples * PCM_SCALE), -32768, 32767).astype('<i2')
    buffer = io.BytesIO()
    with wave.open(buffer, 'wb') as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm.tobytes())
    return buffer.getvalue()

class SpeechSource(Protocol):
    async def generate_speech(self, text: str) -> Optional[str]: ...

class PlaybackHandle(Protocol):
    def stop(self) -> None: ...

class AudioSink(Protocol):
    def play(self, samples: np.ndarray, sample_rate: int) -> Union[PlaybackHandle, Awaitable[PlaybackHandle]]: ...

class NarrationPlayer:
    """Одновременно звучит не больше одной озвучки.

    Новая озвучка останавливает текущую. Ошибки синтеза и декодирования
    просто пропускают воспроизведение.
    """

    def __init__(self, speech: SpeechSource, sink: AudioSink, muted: bool = False,
                 sample_rate: int = SAMPLE_RATE):
        self.speech = speech
        self.sink = sink
        self.muted = muted
        self.sample_rate = sample_rate
        self.is_loading = False
        self._current: Optional[PlaybackHandle] = None
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def is_playing(self) -> bool:
        return self._current is not None

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self.stop()
        return self.muted

    async def play_guide_audio(self, text: str) -> bool:
        """Синтез и воспроизведение. True, если озвучка запущена"""
        if self.muted:
            return False
        if self.is_loading:
            logger.debug("🔇 Озвучка уже загружается, запрос отклонён")
            return False

        self.is_loading = True
        generation = self._generation
        try:
            audio = await self.speech.generate_speech(text)
            if not audio:
                logger.debug("🔇 Синтез речи не вернул аудио")
                return False
            try:
                samples = decode_pcm16(audio)
            except AudioDecodeError as e:
                logger.warning(f"⚠️ Не удалось декодировать озвучку: {e}")
                return False
            if samples.size == 0:
                return False
            if generation != self._generation:
                logger.debug("🔇 Озвучка остановлена во время загрузки")
                return False

            self.stop()
            generation = self._generation
            handle = self.sink.play(samples, self.sample_rate)
            if asyncio.iscoroutine(handle):
                handle = await handle
            if generation != self._generation:
                # stop() пришёл, пока sink запускал воспроизведение
                handle.stop()
                return False
            self._current = handle
            logger.info(f"🔊 Озвучка запущена ({samples.size / self.sample_rate:.1f} с)")
            return True
        except Exception as e:
            logger.warning(f"⚠️ Озвучка пропущена: {e}")
            return False
        finally:
            self.is_loading = False

    def request(self, text: str):
        """Запуск озвучки в фоне из синхронного кода"""
        if self.muted:
            return
        self._task = asyncio.get_running_loop().create_task(self.play_guide_audio(text))

    def stop(self):
        """Остановка и освобождение текущей озвучки"""
        self._generation += 1
        current, self._current = self._current, None
        if current is not None:
            try:
                current.stop()
            except Exception as e:
                logger.debug(f"Ошибка остановки озвучки: {e}")
