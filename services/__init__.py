# services/__init__.py

"""
Модуль сервисов MindfulPause Bot

Этот модуль содержит сервисы бизнес-логики бота и менеджер, который
связывает их между собой и с Telegram.
"""

import logging
from typing import Optional

from .ai_service import CoachAIService
from .breathing import BreathingSessionController
from .coach_session import CoachSession
from .data_service import DataService
from .narration import NarrationPlayer
from .reminders import ReminderScheduler

logger = logging.getLogger('mindfulpause')

class ServiceManager:
    """
    Менеджер для управления всеми сервисами бота

    Обеспечивает:
    - Правильную инициализацию сервисов в нужном порядке
    - Связь сервисов с представлениями в Telegram
    - Корректное закрытие всех сервисов
    """

    def __init__(self, config):
        self.config = config
        self.data_service: Optional[DataService] = None
        self.ai_service: Optional[CoachAIService] = None
        self.coach: Optional[CoachSession] = None
        self.narration: Optional[NarrationPlayer] = None
        self.breathing: Optional[BreathingSessionController] = None
        self.reminders: Optional[ReminderScheduler] = None
        self.notifier = None
        self.breathing_view = None
        self.initialized = False

    @property
    def owner_chat_id(self) -> int:
        # В личном чате chat_id совпадает с user_id
        return self.config.telegram.owner_user_id

    def initialize_services(self, bot) -> bool:
        """Инициализация всех сервисов"""
        from bot.audio import TelegramAudioSink
        from bot.breathing_view import BreathingView
        from bot.notifier import TelegramNotifier

        try:
            logger.info("🔧 Инициализация сервисов MindfulPause Bot...")

            # 1. Данные (базовый сервис)
            self.data_service = DataService(self.config.storage).load()

            # 2. AI и чат
            self.ai_service = CoachAIService(self.config.ai)
            self.coach = CoachSession(self.ai_service, self.data_service)

            # 3. Озвучка
            self.narration = NarrationPlayer(
                self.ai_service,
                TelegramAudioSink(bot, self.owner_chat_id),
                muted=self.config.narration.muted,
                sample_rate=self.config.narration.sample_rate
            )

            # 4. Дыхание
            self.breathing_view = BreathingView(bot, self.owner_chat_id)
            self.breathing = BreathingSessionController(
                on_phase_change=self.breathing_view.on_phase_change,
                on_pause_recorded=self.data_service.record_pause,
                narrator=self.narration
            )

            # 5. Напоминания
            self.notifier = TelegramNotifier(
                bot,
                self.owner_chat_id,
                photo=lambda: self.data_service.photo,
                push_enabled=self.config.scheduler.notifications_enabled
            )
            self.reminders = ReminderScheduler(
                lambda: self.data_service.reminders.reminders,
                notify=self.notifier.notify,
                timezone=self.config.tz,
                poll_seconds=self.config.scheduler.poll_seconds,
                guard_policy=self.config.scheduler.guard_policy
            )

            self.initialized = True
            logger.info("✅ Все сервисы инициализированы успешно!")
            return True

        except Exception as e:
            logger.error(f"❌ Ошибка инициализации сервисов: {e}")
            self.close_services()
            return False

    def start(self):
        """Запуск фоновых задач (внутри работающего цикла)"""
        if self.reminders:
            self.reminders.start()

    def health_check(self) -> dict:
        """Проверка состояния всех сервисов"""
        health = {
            "status": "healthy" if self.initialized else "error",
            "services": {}
        }

        if self.data_service:
            health["services"]["data_service"] = self.data_service.get_service_metrics()
        if self.ai_service:
            health["services"]["ai_service"] = {"enabled": self.ai_service.enabled}
        if self.reminders:
            health["services"]["reminders"] = {
                "running": self.reminders.running,
                "last_triggered": self.reminders.last_triggered
            }
        if self.breathing:
            health["services"]["breathing"] = {"running": self.breathing.is_running}

        return health

    def close_services(self):
        """Закрытие всех сервисов"""
        logger.info("🛑 Закрытие сервисов...")

        # Закрываем в обратном порядке инициализации
        if self.reminders:
            self.reminders.shutdown()
        if self.breathing:
            self.breathing.stop()
        if self.narration:
            self.narration.stop()
        if self.data_service:
            self.data_service.save()

        self.initialized = False
        logger.info("✅ Все сервисы закрыты")

__all__ = [
    'ServiceManager',
    'CoachAIService',
    'BreathingSessionController',
    'CoachSession',
    'DataService',
    'NarrationPlayer',
    'ReminderScheduler'
]
