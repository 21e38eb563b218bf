"""
Воспроизведение озвучки в чате Telegram
"""

import asyncio
import io
import logging

from telegram import Bot, InputFile
from telegram.error import TelegramError

from services.narration import encode_wav

logger = logging.getLogger('mindfulpause')

class TelegramPlayback:
    """Отправленная озвучка; остановка удаляет сообщение с аудио"""

    def __init__(self, bot: Bot, chat_id: int, message_id: int):
        self.bot = bot
        self.chat_id = chat_id
        self.message_id = message_id

    def stop(self):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        loop.create_task(self._delete())

    async def _delete(self):
        try:
            await self.bot.delete_message(chat_id=self.chat_id, message_id=self.message_id)
        except TelegramError as e:
            logger.debug(f"Не удалось удалить озвучку {self.message_id}: {e}")

class TelegramAudioSink:
    """Отправляет озвучку владельцу как WAV"""

    def __init__(self, bot: Bot, chat_id: int, title: str = 'Guia de respiração'):
        self.bot = bot
        self.chat_id = chat_id
        self.title = title

    async def play(self, samples, sample_rate: int) -> TelegramPlayback:
        wav = encode_wav(samples, sample_rate)
        message = await self.bot.send_audio(
            chat_id=self.chat_id,
            audio=InputFile(io.BytesIO(wav), filename='guia.wav'),
            title=self.title,
            performer='Gizele Anastacio',
            disable_notification=True
        )
        return TelegramPlayback(self.bot, self.chat_id, message.message_id)
