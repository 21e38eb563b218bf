"""
MindfulPause Bot - Telegram-слой
Сборка приложения, доступ владельца и представления
"""
