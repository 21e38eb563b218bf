# handlers/commands/dashboard.py

from telegram.ext import Application, CommandHandler, ContextTypes
from telegram import Update

from handlers.utils import get_services, reply_html
from ui.messages import dashboard_message

async def dashboard_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    stats = get_services(context).data_service.stats
    await reply_html(update, dashboard_message(stats))

def register_dashboard_handlers(application: Application):
    application.add_handler(CommandHandler("painel", dashboard_command))
