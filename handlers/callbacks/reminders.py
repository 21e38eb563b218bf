# handlers/callbacks/reminders.py

import logging

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update
from telegram.constants import ParseMode
from telegram.error import BadRequest

from handlers.utils import EDIT_REMINDER_PREFIX, get_services, set_state
from models import ReminderNotFoundError
from ui.keyboards import reminders_keyboard
from ui.messages import reminder_time_prompt, reminders_list_message

logger = logging.getLogger('mindfulpause')

async def _refresh_list(query, reminders):
    try:
        await query.edit_message_text(
            reminders_list_message(reminders),
            parse_mode=ParseMode.HTML,
            reply_markup=reminders_keyboard(reminders)
        )
    except BadRequest as e:
        # Telegram отказывается редактировать неизменённое сообщение
        logger.debug(f"Список напоминаний не изменился: {e}")

async def reminders_list_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    reminders = get_services(context).data_service.reminders
    await query.message.reply_text(
        reminders_list_message(reminders),
        parse_mode=ParseMode.HTML,
        reply_markup=reminders_keyboard(reminders)
    )

async def reminder_toggle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    reminders = get_services(context).data_service.reminders
    try:
        reminder = reminders.toggle(query.data.split(':', 1)[1])
    except ReminderNotFoundError:
        await query.answer("Lembrete não encontrado")
        await _refresh_list(query, reminders)
        return
    await query.answer("Ativado" if reminder.enabled else "Desativado")
    await _refresh_list(query, reminders)

async def reminder_delete_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    reminders = get_services(context).data_service.reminders
    try:
        reminders.remove(query.data.split(':', 1)[1])
    except ReminderNotFoundError:
        await query.answer("Lembrete não encontrado")
    else:
        await query.answer("🗑 Lembrete removido")
    await _refresh_list(query, reminders)

async def reminder_add_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    reminders = get_services(context).data_service.reminders
    reminder = reminders.add()
    await query.answer(f"➕ Lembrete às {reminder.time}")
    await _refresh_list(query, reminders)

async def reminder_edit_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    reminders = get_services(context).data_service.reminders
    reminder_id = query.data.split(':', 1)[1]
    try:
        reminder = reminders.get(reminder_id)
    except ReminderNotFoundError:
        await query.answer("Lembrete não encontrado")
        await _refresh_list(query, reminders)
        return
    await query.answer()
    set_state(context, EDIT_REMINDER_PREFIX + reminder_id)
    await query.message.reply_text(reminder_time_prompt(reminder), parse_mode=ParseMode.HTML)

def register_reminder_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(reminders_list_callback, pattern="^reminders_list$"))
    application.add_handler(CallbackQueryHandler(reminder_toggle_callback, pattern="^reminder_toggle:"))
    application.add_handler(CallbackQueryHandler(reminder_delete_callback, pattern="^reminder_delete:"))
    application.add_handler(CallbackQueryHandler(reminder_add_callback, pattern="^reminder_add$"))
    application.add_handler(CallbackQueryHandler(reminder_edit_callback, pattern="^reminder_edit:"))
