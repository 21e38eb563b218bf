#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulPause Bot - Configuration
Централизованная конфигурация с валидацией
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

from models.enums import GuardPolicy

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class TelegramConfig:
    """Конфигурация Telegram бота"""
    bot_token: str
    owner_user_id: int
    drop_pending_updates: bool = True

@dataclass
class AIConfig:
    """Конфигурация AI сервисов"""
    openai_api_key: Optional[str]
    openai_model: str = "gpt-4o-mini"
    tts_model: str = "gpt-4o-mini-audio-preview"
    voice: str = "shimmer"
    request_timeout: int = 30
    history_limit: int = 20

@dataclass
class StorageConfig:
    """Конфигурация локального хранилища"""
    path: Path
    backup_dir: Path
    stats_history_limit: int = 365
    default_photo_url: str = ""

@dataclass
class SchedulerConfig:
    """Конфигурация планировщика напоминаний"""
    timezone: str = "America/Sao_Paulo"
    poll_seconds: int = 10
    guard_policy: GuardPolicy = GuardPolicy.GLOBAL
    notifications_enabled: bool = True

@dataclass
class NarrationConfig:
    """Конфигурация озвучки"""
    muted: bool = False
    sample_rate: int = 24000

DEFAULT_PHOTO_URL = 'https://files.oaiusercontent.com/file-NAn5m2mUo9G3V9Yf7Xyv9P'

def _env_flag(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() == 'true'

class BotConfig:
    """Главный класс конфигурации"""

    def __init__(self):
        self.environment = Environment(os.getenv('ENVIRONMENT', 'development'))
        self._errors = []
        self._load_config()
        self._validate_config()
        self._ensure_directories()

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""

        # Обязательные параметры
        self.telegram = TelegramConfig(
            bot_token=self._get_required_env('BOT_TOKEN'),
            owner_user_id=self._get_int_env('OWNER_USER_ID', required=True),
            drop_pending_updates=_env_flag('DROP_PENDING_UPDATES', 'true')
        )

        # Директории
        self.data_dir = Path(os.getenv('DATA_DIR', 'data'))
        self.backup_dir = Path(os.getenv('BACKUP_DIR', 'backups'))
        self.log_dir = Path(os.getenv('LOG_DIR', 'logs'))

        # Хранилище
        self.storage = StorageConfig(
            path=self.data_dir / "mindful_data.json",
            backup_dir=self.backup_dir,
            stats_history_limit=self._get_int_env('STATS_HISTORY_LIMIT', default=365),
            default_photo_url=os.getenv('DEFAULT_PHOTO_URL', DEFAULT_PHOTO_URL)
        )

        # AI конфигурация
        openai_key = os.getenv('OPENAI_API_KEY')
        self.ai = AIConfig(
            openai_api_key=openai_key if openai_key and openai_key != self.telegram.bot_token else None,
            openai_model=os.getenv('OPENAI_MODEL', 'gpt-4o-mini'),
            tts_model=os.getenv('OPENAI_TTS_MODEL', 'gpt-4o-mini-audio-preview'),
            voice=os.getenv('OPENAI_VOICE', 'shimmer'),
            request_timeout=self._get_int_env('AI_TIMEOUT', default=30),
            history_limit=self._get_int_env('AI_HISTORY_LIMIT', default=20)
        )

        # Напоминания
        guard = os.getenv('REMINDER_GUARD', GuardPolicy.GLOBAL.value).lower()
        try:
            guard_policy = GuardPolicy(guard)
        except ValueError:
            self._errors.append(f"REMINDER_GUARD={guard!r} не поддерживается (global, per_reminder)")
            guard_policy = GuardPolicy.GLOBAL

        self.scheduler = SchedulerConfig(
            timezone=os.getenv('TIMEZONE', 'America/Sao_Paulo'),
            poll_seconds=self._get_int_env('REMINDER_POLL_SECONDS', default=10),
            guard_policy=guard_policy,
            notifications_enabled=_env_flag('NOTIFICATIONS_ENABLED', 'true')
        )

        # Озвучка
        self.narration = NarrationConfig(
            muted=_env_flag('NARRATION_MUTED', 'false')
        )

        # Логирование
        level = os.getenv('LOG_LEVEL', 'INFO').upper()
        try:
            self.log_level = LogLevel(level)
        except ValueError:
            self._errors.append(f"LOG_LEVEL={level!r} не поддерживается")
            self.log_level = LogLevel.INFO
        self.log_to_file = _env_flag('LOG_TO_FILE', 'true')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

        # Функциональность
        self.features = {
            'ai_enabled': bool(self.ai.openai_api_key),
            'narration': not self.narration.muted,
            'notifications': self.scheduler.notifications_enabled
        }

    def _get_required_env(self, key: str) -> str:
        """Получение обязательной переменной окружения"""
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Обязательная переменная окружения {key} не найдена!")
        return value

    def _get_int_env(self, key: str, default: int = 0, required: bool = False) -> int:
        """Получение целочисленной переменной окружения"""
        raw = self._get_required_env(key) if required else os.getenv(key)
        if raw is None or raw == '':
            return default
        try:
            return int(raw)
        except ValueError:
            self._errors.append(f"{key} должен быть целым числом (получено {raw!r})")
            return default

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = list(self._errors)

        if ':' not in self.telegram.bot_token:
            errors.append("BOT_TOKEN имеет неверный формат")

        if self.telegram.owner_user_id <= 0:
            errors.append("OWNER_USER_ID должен быть положительным числом")

        if not 1 <= self.scheduler.poll_seconds <= 60:
            errors.append(
                f"REMINDER_POLL_SECONDS={self.scheduler.poll_seconds} вне диапазона (1-60)"
            )

        if self.scheduler.timezone not in pytz.all_timezones_set:
            errors.append(f"TIMEZONE={self.scheduler.timezone!r} неизвестна")

        if self.storage.stats_history_limit < 0:
            errors.append("STATS_HISTORY_LIMIT не может быть отрицательным")

        if self.ai.history_limit < 2:
            errors.append("AI_HISTORY_LIMIT должен быть не меньше 2")

        if not self.ai.openai_api_key:
            logging.warning("⚠️ OPENAI_API_KEY не задан - чат и озвучка отключены")

        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))

    def _ensure_directories(self):
        """Создание необходимых директорий"""
        directories = [
            self.data_dir,
            self.backup_dir,
            self.log_dir
        ]

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    @property
    def tz(self):
        """Часовой пояс владельца"""
        return pytz.timezone(self.scheduler.timezone)

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        quiet_loggers = {
            name: {
                'level': 'WARNING',
                'handlers': handlers,
                'propagate': False
            }
            for name in ('httpx', 'telegram', 'apscheduler', 'openai')
        }

        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stdout
                },
                'file': {
                    'class': 'logging.handlers.RotatingFileHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'filename': str(self.log_dir / f"bot_{self.environment.value}.log"),
                    'maxBytes': 10485760,  # 10MB
                    'backupCount': 5,
                    'encoding': 'utf-8'
                }
            },
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                },
                **quiet_loggers
            }
        }

    def is_development(self) -> bool:
        """Проверка режима разработки"""
        return self.environment == Environment.DEVELOPMENT

    def get_feature_status(self) -> Dict[str, bool]:
        """Получение статуса функций"""
        return self.features.copy()

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'telegram': {
                'bot_token': self.telegram.bot_token[:10] + "...",  # Скрываем токен
                'owner_user_id': self.telegram.owner_user_id
            },
            'scheduler': {
                'timezone': self.scheduler.timezone,
                'poll_seconds': self.scheduler.poll_seconds,
                'guard_policy': self.scheduler.guard_policy.value
            },
            'features': self.features,
            'data_path': str(self.storage.path),
            'log_level': self.log_level.value
        }

def load_config() -> BotConfig:
    """Создание конфигурации из текущего окружения"""
    return BotConfig()

__all__ = [
    'BotConfig',
    'load_config',
    'Environment',
    'LogLevel',
    'TelegramConfig',
    'AIConfig',
    'StorageConfig',
    'SchedulerConfig',
    'NarrationConfig',
    'DEFAULT_PHOTO_URL'
]
