# handlers/callbacks/notifications.py

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update
from telegram.error import TelegramError

from handlers.utils import get_services, start_breathing

async def _close_banner(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    get_services(context).notifier.forget(query.message.message_id)
    try:
        await query.message.delete()
    except TelegramError:
        await query.edit_message_reply_markup(reply_markup=None)

async def notification_pause_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Fazer Pausa: закрыть баннер и начать спокойное дыхание"""
    query = update.callback_query
    await query.answer()
    await _close_banner(update, context)
    await start_breathing(get_services(context), 'calma')

async def notification_later_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer("Combinado, até mais tarde!")
    await _close_banner(update, context)

def register_notification_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(notification_pause_callback, pattern="^notif_pause$"))
    application.add_handler(CallbackQueryHandler(notification_later_callback, pattern="^notif_later$"))
