# models/reminder.py

import re
import uuid
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional

from models.enums import ReminderType
from models.errors import InvalidReminderTimeError, ReminderNotFoundError

TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

def validate_time(value: str) -> str:
    """Нормализует время к виду HH:mm (24h)"""
    if not isinstance(value, str):
        raise InvalidReminderTimeError(f"Время должно быть строкой HH:mm, получено {value!r}")
    match = TIME_RE.match(value.strip())
    if not match:
        raise InvalidReminderTimeError(f"Время должно быть в формате HH:mm, получено {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidReminderTimeError(f"Время вне диапазона 00:00-23:59: {value!r}")
    return f"{hour:02d}:{minute:02d}"

@dataclass(frozen=True)
class Reminder:
    """Ежедневное напоминание по локальному времени"""
    id: str
    time: str  # HH:mm
    type: ReminderType = ReminderType.PAUSE
    enabled: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "time": self.time,
            "type": self.type.value,
            "enabled": self.enabled
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Reminder":
        return cls(
            id=str(data["id"]),
            time=validate_time(data["time"]),
            type=ReminderType(data.get("type", ReminderType.PAUSE.value)),
            enabled=bool(data.get("enabled", True))
        )

DEFAULT_REMINDERS = (
    Reminder(id='1', time='10:00', type=ReminderType.PAUSE),
    Reminder(id='2', time='15:00', type=ReminderType.PAUSE),
    Reminder(id='3', time='20:00', type=ReminderType.LOG),
)

def _new_reminder_id() -> str:
    return uuid.uuid4().hex[:9]

class ReminderBook:
    """Упорядоченный список напоминаний владельца.

    Каждое изменение вызывает on_change, чтобы хост сразу сохранил список.
    """

    def __init__(self, reminders=None, on_change: Optional[Callable[[List[Reminder]], None]] = None):
        self._items: List[Reminder] = []
        seen = set()
        for reminder in (DEFAULT_REMINDERS if reminders is None else reminders):
            if reminder.id in seen:
                continue
            seen.add(reminder.id)
            self._items.append(reminder)
        self.on_change = on_change

    def __iter__(self) -> Iterator[Reminder]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def reminders(self) -> List[Reminder]:
        return list(self._items)

    def get(self, reminder_id: str) -> Reminder:
        return self._items[self._index(reminder_id)]

    def add(self, time: str = '12:00', type: ReminderType = ReminderType.PAUSE) -> Reminder:
        existing = {r.id for r in self._items}
        new_id = _new_reminder_id()
        while new_id in existing:
            new_id = _new_reminder_id()
        reminder = Reminder(id=new_id, time=validate_time(time), type=ReminderType(type))
        self._items.append(reminder)
        self._changed()
        return reminder

    def remove(self, reminder_id: str) -> Reminder:
        reminder = self._items.pop(self._index(reminder_id))
        self._changed()
        return reminder

    def toggle(self, reminder_id: str) -> Reminder:
        index = self._index(reminder_id)
        self._items[index] = replace(self._items[index], enabled=not self._items[index].enabled)
        self._changed()
        return self._items[index]

    def update_time(self, reminder_id: str, time: str) -> Reminder:
        index = self._index(reminder_id)
        self._items[index] = replace(self._items[index], time=validate_time(time))
        self._changed()
        return self._items[index]

    def _index(self, reminder_id: str) -> int:
        for index, reminder in enumerate(self._items):
            if reminder.id == reminder_id:
                return index
        raise ReminderNotFoundError(reminder_id)

    def _changed(self):
        if self.on_change:
            self.on_change(self.reminders)
