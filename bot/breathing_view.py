"""
Отображение дыхательной сессии одним редактируемым сообщением
"""

import asyncio
import logging
from typing import Optional

from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from models import BreathingPattern, BreathingPhase
from ui.keyboards import breathing_session_keyboard
from ui.messages import breathing_phase_message

logger = logging.getLogger('mindfulpause')

class BreathingView:
    def __init__(self, bot: Bot, chat_id: int):
        self.bot = bot
        self.chat_id = chat_id
        self.message_id: Optional[int] = None
        self.closed = True
        self._lock = asyncio.Lock()

    def attach(self, message_id: Optional[int]):
        """Следующая фаза будет нарисована в этом сообщении (None - новое сообщение)"""
        self.message_id = message_id
        self.closed = False

    def on_phase_change(self, pattern: BreathingPattern, phase: BreathingPhase):
        asyncio.get_running_loop().create_task(self.render(pattern, phase))

    async def render(self, pattern: BreathingPattern, phase: BreathingPhase):
        text = breathing_phase_message(pattern, phase)
        async with self._lock:
            if self.closed:
                # Фаза из уже завершённой сессии
                return
            try:
                if self.message_id is None:
                    message = await self.bot.send_message(
                        chat_id=self.chat_id,
                        text=text,
                        parse_mode=ParseMode.HTML,
                        reply_markup=breathing_session_keyboard(),
                        disable_notification=True
                    )
                    self.message_id = message.message_id
                else:
                    await self.bot.edit_message_text(
                        chat_id=self.chat_id,
                        message_id=self.message_id,
                        text=text,
                        parse_mode=ParseMode.HTML,
                        reply_markup=breathing_session_keyboard()
                    )
            except TelegramError as e:
                logger.warning(f"⚠️ Не удалось обновить фазу дыхания: {e}")

    async def close(self, text: str):
        """Финальный текст вместо фаз; сообщение больше не редактируется"""
        async with self._lock:
            self.closed = True
            message_id, self.message_id = self.message_id, None
            if message_id is None:
                return
            try:
                await self.bot.edit_message_text(
                    chat_id=self.chat_id,
                    message_id=message_id,
                    text=text,
                    parse_mode=ParseMode.HTML
                )
            except TelegramError as e:
                logger.warning(f"⚠️ Не удалось закрыть сессию дыхания: {e}")
