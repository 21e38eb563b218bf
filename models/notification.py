# models/notification.py

from dataclasses import dataclass

from models.enums import ReminderType
from models.reminder import Reminder

REMINDER_COPY = {
    ReminderType.PAUSE: (
        '🌬️ Hora de uma Pausa',
        'Gizele aqui: que tal pararmos um minuto para respirar?'
    ),
    ReminderType.LOG: (
        '📓 Registro de Bem-estar',
        'Como foi sua última refeição? Vamos conversar sobre isso.'
    ),
}

@dataclass(frozen=True)
class Notification:
    """Одно ожидающее показа уведомление"""
    title: str
    message: str

    @classmethod
    def for_reminder(cls, reminder: Reminder) -> "Notification":
        title, message = REMINDER_COPY[reminder.type]
        return cls(title=title, message=message)
