# handlers/callbacks/breathing.py

from telegram.ext import Application, CallbackQueryHandler, ContextTypes
from telegram import Update
from telegram.constants import ParseMode

from handlers.utils import get_services, start_breathing
from ui.keyboards import breathing_menu_keyboard
from ui.messages import (
    breathing_cancelled_message,
    breathing_concluded_message,
    breathing_menu_message
)

async def breath_menu_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    await query.message.reply_text(
        breathing_menu_message(), parse_mode=ParseMode.HTML, reply_markup=breathing_menu_keyboard()
    )

async def breath_start_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    key = query.data.split(':', 1)[1]
    try:
        pattern = await start_breathing(get_services(context), key)
    except KeyError:
        await query.answer("Técnica desconhecida", show_alert=True)
        return
    await query.answer(pattern.name)

async def breath_audio_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    services = get_services(context)
    pattern = services.breathing.pattern
    if pattern is None:
        await query.answer("Nenhuma respiração ativa")
        return
    if services.narration.muted:
        await query.answer("🔇 Narração desligada (/mudo)")
        return
    if services.narration.is_loading:
        await query.answer("⏳ Preparando o áudio...")
        return
    await query.answer("🔊 Preparando o guia...")
    await services.narration.play_guide_audio(pattern.guide_text)

async def breath_conclude_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    services = get_services(context)
    pattern = services.breathing.pattern
    if not services.breathing.conclude():
        await query.answer("Nenhuma respiração ativa")
        return
    await query.answer("✅ Pausa registrada")
    await services.breathing_view.close(
        breathing_concluded_message(pattern, services.data_service.stats.pauses)
    )

async def breath_cancel_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    services = get_services(context)
    pattern = services.breathing.pattern
    if not services.breathing.stop():
        await query.answer("Nenhuma respiração ativa")
        return
    await query.answer()
    await services.breathing_view.close(breathing_cancelled_message(pattern))

def register_breathing_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(breath_menu_callback, pattern="^breath_menu$"))
    application.add_handler(CallbackQueryHandler(breath_start_callback, pattern="^breath_start:"))
    application.add_handler(CallbackQueryHandler(breath_audio_callback, pattern="^breath_audio$"))
    application.add_handler(CallbackQueryHandler(breath_conclude_callback, pattern="^breath_conclude$"))
    application.add_handler(CallbackQueryHandler(breath_cancel_callback, pattern="^breath_cancel$"))
