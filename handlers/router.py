# handlers/router.py

from telegram.ext import Application

# Импорт всех нужных обработчиков (команды, callbacks, сообщения)
from handlers.commands.basic import register_basic_handlers
from handlers.commands.breathing import register_breathing_handlers
from handlers.commands.dashboard import register_dashboard_handlers
from handlers.commands.reminders import register_reminder_handlers

from handlers.callbacks.breathing import register_breathing_callbacks
from handlers.callbacks.main_menu import register_main_menu_callbacks
from handlers.callbacks.notifications import register_notification_callbacks
from handlers.callbacks.reminders import register_reminder_callbacks

from handlers.messages import register_message_handlers

def register_handlers(application: Application):
    """Подключает все обработчики в Application"""
    register_basic_handlers(application)
    register_breathing_handlers(application)
    register_dashboard_handlers(application)
    register_reminder_handlers(application)

    register_main_menu_callbacks(application)
    register_breathing_callbacks(application)
    register_notification_callbacks(application)
    register_reminder_callbacks(application)

    # Текст последним: ловит всё, что не команда
    register_message_handlers(application)
