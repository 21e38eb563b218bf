"""
Общие помощники обработчиков
"""

import logging
from typing import Optional

from telegram import Update
from telegram.constants import ChatAction, ParseMode
from telegram.ext import ContextTypes

from models import ChatBusyError, get_pattern
from services import ServiceManager
from ui.messages import breathing_cancelled_message

logger = logging.getLogger('mindfulpause')

IDLE_STATE = 'idle'
EDIT_REMINDER_PREFIX = 'edit_reminder:'

def get_services(context: ContextTypes.DEFAULT_TYPE) -> ServiceManager:
    return context.application.bot_data['services']

# --- Вспомогательная функция для user_state ---
def get_state(context: ContextTypes.DEFAULT_TYPE) -> str:
    return context.user_data.get('user_state', IDLE_STATE)

def set_state(context: ContextTypes.DEFAULT_TYPE, state: str):
    context.user_data['user_state'] = state

async def start_breathing(services: ServiceManager, key: str, message_id: Optional[int] = None):
    """Запуск техники; KeyError для неизвестного ключа"""
    pattern = get_pattern(key)
    previous = services.breathing.pattern
    if previous is not None:
        # Старое сообщение теряет кнопки, иначе они управляли бы новой сессией
        services.breathing.stop()
        await services.breathing_view.close(breathing_cancelled_message(previous))
    services.breathing_view.attach(message_id)
    services.breathing.start(pattern)
    return pattern

async def run_chat_turn(update: Update, context: ContextTypes.DEFAULT_TYPE, text: str):
    """Один ход диалога с персонажем и ответ в чат"""
    services = get_services(context)
    chat = update.effective_chat

    await context.bot.send_chat_action(chat_id=chat.id, action=ChatAction.TYPING)
    try:
        reply = await services.coach.handle_send(text)
    except ChatBusyError:
        await context.bot.send_message(chat_id=chat.id, text="⏳ Um momento, ainda estou respondendo...")
        return

    if reply is not None:
        await context.bot.send_message(chat_id=chat.id, text=reply.text)

async def reply_html(update: Update, text: str, reply_markup=None):
    await update.effective_message.reply_text(text, parse_mode=ParseMode.HTML, reply_markup=reply_markup)
