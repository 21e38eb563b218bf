import logging

from telegram import BotCommand
from telegram.ext import Application, ApplicationBuilder

from bot.middleware import setup_middlewares
from config import BotConfig
from handlers import register_handlers
from services import ServiceManager

logger = logging.getLogger('mindfulpause')

BOT_COMMANDS = [
    BotCommand("start", "Menu principal"),
    BotCommand("respirar", "Exercícios de respiração"),
    BotCommand("painel", "Painel de evolução"),
    BotCommand("lembretes", "Lembretes"),
    BotCommand("mudo", "Ligar/desligar narração"),
    BotCommand("foto", "Trocar a foto"),
    BotCommand("help", "Ajuda"),
]

def build_application(config: BotConfig, services: ServiceManager) -> Application:
    async def post_init(application: Application):
        if not services.initialize_services(application.bot):
            raise RuntimeError("Не удалось инициализировать сервисы")
        # Планировщику нужен уже работающий цикл
        services.start()
        await application.bot.set_my_commands(BOT_COMMANDS)
        logger.info("✅ Приложение готово к работе")

    async def post_shutdown(application: Application):
        services.close_services()

    # Создание Application
    application = (
        ApplicationBuilder()
        .token(config.telegram.bot_token)
        .concurrent_updates(True)  # чат не блокирует кнопки дыхания
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )
    application.bot_data['services'] = services

    # Подключение middlewares (доступ только владельцу)
    setup_middlewares(application, config.telegram.owner_user_id)
    register_handlers(application)

    total_handlers = sum(len(handlers) for handlers in application.handlers.values())
    logger.info(f"✅ Зарегистрировано обработчиков: {total_handlers}")
    return application
