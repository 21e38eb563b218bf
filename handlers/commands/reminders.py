"""
Команда списка напоминаний
"""

from telegram.ext import Application, CommandHandler, ContextTypes
from telegram import Update

from handlers.utils import get_services, reply_html
from ui.keyboards import reminders_keyboard
from ui.messages import reminders_list_message

async def reminders_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Команда /lembretes - список и управление напоминаниями"""
    reminders = get_services(context).data_service.reminders
    await reply_html(update, reminders_list_message(reminders), reply_markup=reminders_keyboard(reminders))

def register_reminder_handlers(application: Application):
    application.add_handler(CommandHandler("lembretes", reminders_command))
