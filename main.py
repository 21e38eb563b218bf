#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulPause Bot - точка входа
Telegram бот-компаньон: дыхательные паузы, напоминания и разговор с Gizele
"""

import logging
import logging.config
import sys

from telegram import Update
from telegram.error import Conflict, NetworkError, TelegramError, TimedOut

from bot.application import build_application
from config import BotConfig, load_config
from services import ServiceManager

logger = logging.getLogger('mindfulpause')

# ===== НАСТРОЙКА ЛОГИРОВАНИЯ =====
def setup_logging(config: BotConfig):
    """Настройка системы логирования"""
    logging.config.dictConfig(config.get_logging_config())

# ===== ОСНОВНОЙ КЛАСС БОТА =====

class MindfulPauseBot:
    """Основной класс MindfulPause Bot"""

    def __init__(self, config: BotConfig):
        self.config = config
        self.services = ServiceManager(config)
        self.application = build_application(config, self.services)
        self.application.add_error_handler(self._error_handler)

        logger.info(f"✅ BOT_TOKEN: {config.telegram.bot_token[:10]}...")
        logger.info(f"✅ OpenAI: {'настроен' if config.ai.openai_api_key else 'не настроен'}")
        logger.info(f"🌍 Часовой пояс: {config.scheduler.timezone}")
        logger.info(f"Python: {sys.version}")

    def run(self):
        """Запуск polling (блокирует до остановки)"""
        logger.info("🎯 Запуск polling...")
        self.application.run_polling(
            drop_pending_updates=self.config.telegram.drop_pending_updates,
            allowed_updates=Update.ALL_TYPES
        )
        logger.info("🛑 Бот остановлен корректно")

    async def _error_handler(self, update, context):
        """Обработчик ошибок"""
        error = context.error

        if isinstance(error, Conflict):
            logger.error(f"⚠️ Обнаружен конфликт getUpdates (запущен второй экземпляр?): {error}")
        elif isinstance(error, (TimedOut, NetworkError)):
            logger.warning(f"⚠️ Временная сетевая ошибка: {error}")
        else:
            logger.error("❌ Неожиданная ошибка", exc_info=error)

            # Если есть update, пытаемся ответить пользователю
            if isinstance(update, Update) and update.effective_user:
                try:
                    if update.callback_query:
                        await update.callback_query.answer("⚠️ Erro temporário. Tente novamente.")
                    elif update.effective_message:
                        await update.effective_message.reply_text(
                            "⚠️ Aconteceu um erro temporário. Tente novamente em alguns segundos."
                        )
                except TelegramError as e:
                    logger.debug(f"Не удалось сообщить об ошибке: {e}")

# ===== ГЛАВНАЯ ФУНКЦИЯ =====

def main():
    """Главная функция запуска бота"""
    try:
        config = load_config()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
        logger.error(f"❌ {e}")
        sys.exit(1)

    setup_logging(config)
    logger.info("🚀 Запуск MindfulPause Bot...")

    try:
        MindfulPauseBot(config).run()
    except KeyboardInterrupt:
        logger.info("👋 Бот остановлен пользователем")
    except Exception as e:
        logger.error(f"💥 Фатальная ошибка: {e}")
        sys.exit(1)

# ===== ТОЧКА ВХОДА =====

if __name__ == "__main__":
    main()
