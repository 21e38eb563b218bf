# models/errors.py

class MindfulPauseError(Exception):
    """Базовое исключение приложения"""

class InvalidPatternError(MindfulPauseError, ValueError):
    """Некорректная дыхательная техника"""

class InvalidReminderTimeError(MindfulPauseError, ValueError):
    """Время напоминания не в формате HH:mm"""

class ReminderNotFoundError(MindfulPauseError, KeyError):
    """Напоминание с таким id не найдено"""

class AIServiceError(MindfulPauseError):
    """Ошибка обращения к AI"""

class AudioDecodeError(MindfulPauseError, ValueError):
    """Не удалось декодировать аудио"""

class ChatBusyError(MindfulPauseError):
    """Предыдущее сообщение ещё обрабатывается"""
