# handlers/commands/breathing.py

from telegram.ext import Application, CommandHandler, ContextTypes
from telegram import Update

from handlers.utils import get_services, reply_html, start_breathing
from ui.keyboards import breathing_menu_keyboard
from ui.messages import breathing_menu_message

async def breathe_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/respirar [técnica] - старт техники или меню выбора"""
    if not context.args:
        await reply_html(update, breathing_menu_message(), reply_markup=breathing_menu_keyboard())
        return

    try:
        await start_breathing(get_services(context), context.args[0].lower())
    except KeyError:
        await reply_html(
            update,
            "Técnica desconhecida. " + breathing_menu_message(),
            reply_markup=breathing_menu_keyboard()
        )

def register_breathing_handlers(application: Application):
    application.add_handler(CommandHandler("respirar", breathe_command))
