# handlers/messages.py

from telegram.ext import Application, MessageHandler, filters, ContextTypes
from telegram import Update

from handlers.utils import (
    EDIT_REMINDER_PREFIX,
    IDLE_STATE,
    get_services,
    get_state,
    run_chat_turn,
    set_state
)
from models import InvalidReminderTimeError, ReminderNotFoundError

async def _edit_reminder_time(update: Update, context: ContextTypes.DEFAULT_TYPE, reminder_id: str):
    reminders = get_services(context).data_service.reminders
    try:
        reminder = reminders.update_time(reminder_id, update.message.text)
    except InvalidReminderTimeError:
        await update.message.reply_text("⏰ Use o formato HH:MM, por exemplo 09:30. Ou /cancelar.")
        return
    except ReminderNotFoundError:
        set_state(context, IDLE_STATE)
        await update.message.reply_text("Lembrete não encontrado.")
        return

    set_state(context, IDLE_STATE)
    await update.message.reply_text(f"✅ Lembrete ajustado para {reminder.time}.")

# --- Универсальный обработчик текста ---
async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    state = get_state(context)

    if state.startswith(EDIT_REMINDER_PREFIX):
        await _edit_reminder_time(update, context, state[len(EDIT_REMINDER_PREFIX):])
        return

    # Обычный режим: разговор с персонажем
    await run_chat_turn(update, context, update.message.text)

def register_message_handlers(application: Application):
    """Регистрирует обработчики"""
    application.add_handler(MessageHandler(filters.TEXT & (~filters.COMMAND), text_message))
