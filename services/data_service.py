# services/data_service.py

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import StorageConfig
from models import (
    DailyStats,
    MealType,
    Reminder,
    ReminderBook,
    DEFAULT_REMINDERS
)

logger = logging.getLogger('mindfulpause')

STATS_KEY = 'mindful_stats'
REMINDERS_KEY = 'mindful_reminders'
PHOTO_KEY = 'mindful_user_photo'

class DataService:
    """
    Локальное хранилище владельца

    Возможности:
    - Чтение один раз при старте, запись после каждого изменения
    - Первый запуск и повреждённый файл -> значения по умолчанию
    - Повреждённый файл перемещается в каталог бэкапов
    """

    def __init__(self, config: StorageConfig):
        self.config = config
        self.data_file = Path(config.path)
        self.backup_dir = Path(config.backup_dir)

        self.stats = DailyStats(history_limit=config.stats_history_limit)
        self.reminders = ReminderBook(on_change=self._on_reminders_changed)
        self.photo: str = config.default_photo_url

        self.total_saves = 0
        self.failed_saves = 0

    # ===== ЗАГРУЗКА =====

    def load(self) -> "DataService":
        """Загрузка данных из файла"""
        data = self._read_file()

        self.stats = DailyStats.from_dict(
            data.get(STATS_KEY, {}), history_limit=self.config.stats_history_limit
        )
        self.reminders = ReminderBook(
            self._parse_reminders(data.get(REMINDERS_KEY)),
            on_change=self._on_reminders_changed
        )

        photo = data.get(PHOTO_KEY)
        self.photo = photo if isinstance(photo, str) and photo else self.config.default_photo_url

        logger.info(
            f"📂 Данные загружены: пауз {self.stats.pauses}, напоминаний {len(self.reminders)}"
        )
        return self

    def _read_file(self) -> Dict[str, Any]:
        if not self.data_file.exists():
            logger.info("📂 Файл данных не найден, начинаем со значений по умолчанию")
            return {}

        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"❌ Ошибка парсинга JSON: {e}")
            self._create_backup()
            return {}
        except OSError as e:
            logger.error(f"❌ Ошибка чтения данных: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("⚠️ Неверный формат файла данных")
            self._create_backup()
            return {}
        return data

    def _parse_reminders(self, raw: Any) -> List[Reminder]:
        if raw is None:
            return list(DEFAULT_REMINDERS)
        if not isinstance(raw, list):
            logger.warning("⚠️ Напоминания в неверном формате, используем стандартные")
            return list(DEFAULT_REMINDERS)

        reminders = []
        for item in raw:
            try:
                reminders.append(Reminder.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"⚠️ Пропущено повреждённое напоминание {item!r}: {e}")
        return reminders

    def _create_backup(self):
        """Перемещение повреждённого файла в бэкапы"""
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            backup_name = f"corrupted_backup_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            backup_path = self.backup_dir / backup_name
            self.data_file.replace(backup_path)
            logger.warning(f"🔄 Поврежденный файл перемещен в {backup_path}")
        except OSError as e:
            logger.error(f"❌ Ошибка создания бэкапа: {e}")

    # ===== СОХРАНЕНИЕ =====

    def to_dict(self) -> Dict[str, Any]:
        return {
            STATS_KEY: self.stats.to_dict(),
            REMINDERS_KEY: [reminder.to_dict() for reminder in self.reminders],
            PHOTO_KEY: self.photo
        }

    def save(self) -> bool:
        """Атомарная запись: временный файл + os.replace"""
        tmp = self.data_file.with_name(self.data_file.name + '.tmp')
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.data_file)
            self.total_saves += 1
            logger.debug(f"💾 Данные сохранены в {self.data_file}")
            return True
        except OSError as e:
            self.failed_saves += 1
            logger.error(f"❌ Ошибка сохранения данных: {e}")
            return False

    def _on_reminders_changed(self, reminders: List[Reminder]):
        self.save()

    # ===== ИЗМЕНЕНИЯ =====

    def record_pause(self) -> int:
        pauses = self.stats.record_pause()
        self.save()
        return pauses

    def record_mood(self, score: int):
        self.stats.record_mood(score)
        self.save()

    def record_meal(self, meal: MealType):
        self.stats.record_meal(meal)
        self.save()

    def set_photo(self, reference: str):
        self.photo = reference
        self.save()

    def reset_photo(self):
        self.photo = self.config.default_photo_url
        self.save()

    def get_service_metrics(self) -> Dict[str, Optional[int]]:
        return {
            "total_saves": self.total_saves,
            "failed_saves": self.failed_saves,
            "reminders": len(self.reminders),
            "pauses": self.stats.pauses
        }
