"""
Обработка сообщений чата с персонажем
"""

import logging
from typing import Awaitable, List, Optional, Protocol

from models import (
    ChatBusyError,
    ChatMessage,
    CONNECTION_PROBLEM,
    GREETING,
    Role
)
from services.classifier import (
    KeywordMealClassifier,
    KeywordMoodClassifier,
    MealClassifier,
    MoodClassifier
)

logger = logging.getLogger('mindfulpause')

QUICK_PROMPTS = {
    'meal': 'Gizele, fiz uma refeição consciente agora e quero registrar.',
    'diary': 'Gizele, como registro meu diário emocional de hoje?',
    'victory': 'Quero compartilhar uma vitória não-relacionada à balança!',
    'remember_victory': 'Me ajuda a lembrar de uma vitória de hoje?',
}

class ChatClient(Protocol):
    def send_message(self, text: str) -> Awaitable[str]: ...

class CoachSession:
    """Диалог владельца с персонажем.

    Одновременно обрабатывается только одно сообщение: пока ждём ответ,
    новые отклоняются (ChatBusyError), очереди нет.
    """

    def __init__(self, client: ChatClient, data_service,
                 mood_classifier: Optional[MoodClassifier] = None,
                 meal_classifier: Optional[MealClassifier] = None):
        self.client = client
        self.data_service = data_service
        self.mood_classifier = mood_classifier or KeywordMoodClassifier()
        self.meal_classifier = meal_classifier or KeywordMealClassifier()
        self.messages: List[ChatMessage] = [ChatMessage(Role.MODEL, GREETING)]
        self.is_loading = False

    async def handle_send(self, text: str) -> Optional[ChatMessage]:
        """Отправка сообщения. None для пустого текста"""
        if not text or not text.strip():
            return None
        if self.is_loading:
            raise ChatBusyError("Предыдущее сообщение ещё обрабатывается")

        self.messages.append(ChatMessage(Role.USER, text))
        self.is_loading = True
        try:
            try:
                reply_text = await self.client.send_message(text)
            except Exception as e:
                logger.error(f"❌ Ошибка отправки сообщения: {e}")
                reply = ChatMessage(Role.MODEL, CONNECTION_PROBLEM)
                self.messages.append(reply)
                return reply

            reply = ChatMessage(Role.MODEL, reply_text or CONNECTION_PROBLEM)
            self.messages.append(reply)
            self._classify(text)
            return reply
        finally:
            self.is_loading = False

    def _classify(self, text: str):
        meal = self.meal_classifier.classify(text)
        if meal is not None:
            self.data_service.record_meal(meal)
            logger.info(f"🍴 Записан приём пищи: {meal.value}")

        mood = self.mood_classifier.classify(text)
        if mood is not None:
            self.data_service.record_mood(mood)
            logger.info(f"🙂 Записано настроение: {mood}")
