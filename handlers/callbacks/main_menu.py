# handlers/callbacks/main_menu.py

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update
from telegram.constants import ParseMode

from handlers.utils import get_services, run_chat_turn
from services.coach_session import QUICK_PROMPTS
from ui.messages import dashboard_message

async def dashboard_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    stats = get_services(context).data_service.stats
    await query.message.reply_text(dashboard_message(stats), parse_mode=ParseMode.HTML)

async def quick_prompt_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Быстрые фразы главного меню уходят в чат как сообщение владельца"""
    query = update.callback_query
    prompt = QUICK_PROMPTS.get(query.data.split(':', 1)[1])
    if prompt is None:
        await query.answer()
        return
    await query.answer()
    await query.message.reply_text(f"🗨️ {prompt}")
    await run_chat_turn(update, context, prompt)

def register_main_menu_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(dashboard_callback, pattern="^dashboard$"))
    application.add_handler(CallbackQueryHandler(quick_prompt_callback, pattern="^quick:"))
