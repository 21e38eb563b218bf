# handlers/commands/basic.py

import logging

from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters
from telegram import Update

from handlers.utils import IDLE_STATE, get_services, get_state, reply_html, set_state
from ui.keyboards import main_menu_keyboard
from ui.messages import help_message, welcome_message

logger = logging.getLogger('mindfulpause')

async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(welcome_message(), reply_markup=main_menu_keyboard())

async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await reply_html(update, help_message(), reply_markup=main_menu_keyboard())

async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user = update.effective_user
    await update.message.reply_text(
        f"Seu Telegram ID: <code>{user.id}</code>", parse_mode="HTML"
    )

async def mute_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    services = get_services(context)
    muted = services.narration.toggle_mute()
    await update.message.reply_text("🔇 Narração desligada." if muted else "🔊 Narração ligada.")

async def photo_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text("📷 Envie uma foto e ela passa a ser a minha imagem nos lembretes.")

async def photo_reset_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    get_services(context).data_service.reset_photo()
    await update.message.reply_text("📷 Foto original restaurada.")

async def photo_upload(update: Update, context: ContextTypes.DEFAULT_TYPE):
    # Самое большое разрешение идёт последним
    file_id = update.message.photo[-1].file_id
    get_services(context).data_service.set_photo(file_id)
    logger.info("📷 Фото персонажа обновлено")
    await update.message.reply_text("📷 Foto atualizada!")

async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if get_state(context) == IDLE_STATE:
        await update.message.reply_text("Nada para cancelar.")
        return
    set_state(context, IDLE_STATE)
    await update.message.reply_text("Ação cancelada.")

def register_basic_handlers(application: Application):
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("myid", myid_command))
    application.add_handler(CommandHandler("mudo", mute_command))
    application.add_handler(CommandHandler("foto", photo_command))
    application.add_handler(CommandHandler("foto_padrao", photo_reset_command))
    application.add_handler(CommandHandler("cancelar", cancel_command))
    application.add_handler(MessageHandler(filters.PHOTO, photo_upload))
