"""
Доставка напоминаний владельцу
"""

import logging
from typing import Callable, Optional

from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from models import Notification
from ui.keyboards import notification_keyboard
from ui.messages import notification_message

logger = logging.getLogger('mindfulpause')

class TelegramNotifier:
    """Баннер напоминания в чате владельца.

    Push-уведомление Telegram играет роль системного уведомления: если
    уведомления выключены, баннер приходит беззвучно. Активен не более
    одного баннера, новый заменяет предыдущий.
    """

    def __init__(self, bot: Bot, chat_id: int,
                 photo: Optional[Callable[[], Optional[str]]] = None,
                 push_enabled: bool = True):
        self.bot = bot
        self.chat_id = chat_id
        self.photo = photo
        self.push_enabled = push_enabled
        self.active: Optional[Notification] = None
        self.active_message_id: Optional[int] = None

    async def notify(self, notification: Notification):
        await self.dismiss()

        text = notification_message(notification)
        options = dict(
            chat_id=self.chat_id,
            parse_mode=ParseMode.HTML,
            reply_markup=notification_keyboard(),
            disable_notification=not self.push_enabled
        )

        photo = self.photo() if self.photo else None
        message = None
        if photo:
            try:
                message = await self.bot.send_photo(photo=photo, caption=text, **options)
            except TelegramError as e:
                logger.warning(f"⚠️ Фото для напоминания недоступно: {e}")
        if message is None:
            message = await self.bot.send_message(text=text, **options)

        self.active = notification
        self.active_message_id = message.message_id
        logger.info(f"📤 Отправлено напоминание: {notification.title}")

    async def dismiss(self):
        """Убрать текущий баннер"""
        message_id, self.active_message_id = self.active_message_id, None
        self.active = None
        if message_id is None:
            return
        try:
            await self.bot.delete_message(chat_id=self.chat_id, message_id=message_id)
        except TelegramError as e:
            logger.debug(f"Баннер {message_id} уже удалён: {e}")

    def forget(self, message_id: int):
        """Баннер закрыт кнопкой и удалён вызывающим кодом"""
        if self.active_message_id == message_id:
            self.active_message_id = None
            self.active = None
