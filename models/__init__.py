#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulPause Bot - Models Package
Модели данных и перечисления
"""

from .enums import (
    BreathingPhase,
    ReminderType,
    MealType,
    Role,
    GuardPolicy
)

from .errors import (
    MindfulPauseError,
    InvalidPatternError,
    InvalidReminderTimeError,
    ReminderNotFoundError,
    AIServiceError,
    AudioDecodeError,
    ChatBusyError
)

from .breathing import (
    BreathingPattern,
    BREATHING_PATTERNS,
    get_pattern
)

from .reminder import (
    Reminder,
    ReminderBook,
    DEFAULT_REMINDERS,
    validate_time
)

from .stats import DailyStats
from .notification import Notification
from .chat import ChatMessage, GREETING, CONNECTION_PROBLEM

__all__ = [
    # Enums
    'BreathingPhase',
    'ReminderType',
    'MealType',
    'Role',
    'GuardPolicy',

    # Errors
    'MindfulPauseError',
    'InvalidPatternError',
    'InvalidReminderTimeError',
    'ReminderNotFoundError',
    'AIServiceError',
    'AudioDecodeError',
    'ChatBusyError',

    # Breathing
    'BreathingPattern',
    'BREATHING_PATTERNS',
    'get_pattern',

    # Reminders
    'Reminder',
    'ReminderBook',
    'DEFAULT_REMINDERS',
    'validate_time',

    # Stats / notifications / chat
    'DailyStats',
    'Notification',
    'ChatMessage',
    'GREETING',
    'CONNECTION_PROBLEM'
]
