import logging

from telegram import Update
from telegram.ext import Application, ApplicationHandlerStop, ContextTypes, TypeHandler

logger = logging.getLogger('mindfulpause')

# Команда, доступная всем: помогает узнать свой ID для OWNER_USER_ID
PUBLIC_COMMANDS = ('/myid',)

# === Пропускаем только владельца ===

class OwnerOnlyGuard:
    def __init__(self, owner_user_id: int):
        self.owner_user_id = owner_user_id
        self.rejected = 0

    async def __call__(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        user = update.effective_user
        if user is None or user.id == self.owner_user_id:
            return

        message = update.effective_message
        if message and message.text and message.text.split()[0].split('@')[0] in PUBLIC_COMMANDS:
            return

        self.rejected += 1
        logger.info(f"🚫 Пропущено обновление от постороннего пользователя {user.id}")
        if update.callback_query:
            await update.callback_query.answer("Este bot é pessoal.")
        raise ApplicationHandlerStop

# === Подключение middlewares к Application ===

def setup_middlewares(application: Application, owner_user_id: int):
    # Группа -1 выполняется раньше всех обработчиков
    application.add_handler(TypeHandler(Update, OwnerOnlyGuard(owner_user_id)), group=-1)
