"""
MindfulPause Bot - Обработчики Telegram
Команды, callbacks и текстовые сообщения
"""

from .router import register_handlers

__all__ = ['register_handlers']
