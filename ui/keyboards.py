from typing import Iterable

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models import BREATHING_PATTERNS, Reminder, ReminderType

REMINDER_TYPE_LABELS = {
    ReminderType.PAUSE: "Pausa",
    ReminderType.LOG: "Registro",
}

# Главное меню
def main_menu_keyboard():
    keyboard = [
        [InlineKeyboardButton("🍴 Registrar refeição mindful", callback_data="quick:meal")],
        [InlineKeyboardButton("🌬️ Respiração 4-7-8", callback_data="breath_start:4-7-8"),
         InlineKeyboardButton("🧘 Técnicas", callback_data="breath_menu")],
        [InlineKeyboardButton("🏆 Lembrar vitória", callback_data="quick:remember_victory")],
        [InlineKeyboardButton("📓 Diário Emocional", callback_data="quick:diary"),
         InlineKeyboardButton("🏆 Vitória", callback_data="quick:victory")],
        [InlineKeyboardButton("📊 Painel", callback_data="dashboard"),
         InlineKeyboardButton("⏰ Lembretes", callback_data="reminders_list")]
    ]
    return InlineKeyboardMarkup(keyboard)

# Выбор дыхательной техники
def breathing_menu_keyboard():
    keyboard = [
        [InlineKeyboardButton(pattern.name, callback_data=f"breath_start:{key}")]
        for key, pattern in BREATHING_PATTERNS.items()
    ]
    return InlineKeyboardMarkup(keyboard)

# Кнопки активной сессии
def breathing_session_keyboard():
    keyboard = [
        [InlineKeyboardButton("🔊 Ouvir Guia", callback_data="breath_audio")],
        [InlineKeyboardButton("✅ Concluir", callback_data="breath_conclude"),
         InlineKeyboardButton("✖️ Cancelar", callback_data="breath_cancel")]
    ]
    return InlineKeyboardMarkup(keyboard)

# Баннер напоминания
def notification_keyboard():
    keyboard = [
        [InlineKeyboardButton("Fazer Pausa", callback_data="notif_pause"),
         InlineKeyboardButton("Depois", callback_data="notif_later")]
    ]
    return InlineKeyboardMarkup(keyboard)

# Список напоминаний
def reminders_keyboard(reminders: Iterable[Reminder]):
    keyboard = []
    for reminder in reminders:
        status = "🟢" if reminder.enabled else "⚪️"
        label = REMINDER_TYPE_LABELS[reminder.type]
        row = [
            InlineKeyboardButton(f"{status} {reminder.time} · {label}", callback_data=f"reminder_toggle:{reminder.id}"),
            InlineKeyboardButton("✏️", callback_data=f"reminder_edit:{reminder.id}"),
            InlineKeyboardButton("🗑", callback_data=f"reminder_delete:{reminder.id}")
        ]
        keyboard.append(row)
    keyboard.append([InlineKeyboardButton("➕ Novo Lembrete", callback_data="reminder_add")])
    return InlineKeyboardMarkup(keyboard)
