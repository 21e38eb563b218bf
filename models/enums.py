# models/enums.py

from enum import Enum

class BreathingPhase(Enum):
    INHALE = "Inspirar"
    HOLD = "Segurar"
    EXHALE = "Expirar"
    HOLD_POST = "Aguardar"

class ReminderType(str, Enum):
    PAUSE = "pause"
    LOG = "log"

class MealType(str, Enum):
    MINDFUL = "mindful"
    UNMINDFUL = "unmindful"

class Role(str, Enum):
    USER = "user"
    MODEL = "model"

class GuardPolicy(Enum):
    """Как ограничивать повторные срабатывания в пределах минуты"""
    GLOBAL = "global"
    PER_REMINDER = "per_reminder"
