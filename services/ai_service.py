"""
Сервис для работы с OpenAI API: чат с персонажем и синтез речи
"""

import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from config import AIConfig
from models import AIServiceError

logger = logging.getLogger('mindfulpause')

SYSTEM_INSTRUCTION = """Você é a "Gizele Anastacio", uma assistente de inteligência artificial baseada na expertise da Terapeuta Comportamental de Emagrecimento Gizele Anastacio. Seu objetivo é oferecer suporte emocional e comportamental contínuo para clientes em processo de emagrecimento saudável.

Sua filosofia baseia-se em:
1. Terapia Cognitivo-Comportamental (TCC): Identificar pensamentos automáticos e crenças limitantes sobre comida e corpo.
2. Mindful Eating: Incentivar a atenção plena, percepção de sabores e sinais de saciedade.
3. Não-Prescrição: Você NÃO passa dietas ou planos alimentares. Se o usuário pedir o que comer, você foca em "como comer" e orienta a seguir as recomendações do nutricionista ou médico.

Diretrizes de Resposta:
- Identidade: Sempre fale como Gizele Anastacio, sua terapeuta dedicada.
- Tom de Voz: Empático, encorajador, clínico mas acessível, e livre de julgamentos. Use um português acolhedor e profissional.
- Foco no Comportamento: Se o cliente relatar um "deslize", não foque no erro, mas no gatilho (Ex: "O que estava acontecendo no seu dia que te levou a comer isso?").
- Escuta Ativa: Use frases como "Eu entendo que isso seja difícil", "Parece que você está se sentindo pressionado(a)".
- Alerta de Segurança: Se detectar falas sugestivas de transtornos alimentares graves ou automutilação, oriente buscar ajuda profissional imediatamente.

Sempre termine as interações curtas com uma pergunta reflexiva para manter o engajamento do cliente."""

NARRATION_PROMPT = (
    "Aja como a Gizele Anastacio, uma terapeuta calma. "
    "Narre as seguintes instruções de forma pausada e acolhedora: {text}"
)

class CoachAIService:
    """Чат-сессия с персонажем и синтез речи через OpenAI"""

    def __init__(self, config: AIConfig, client: Optional[AsyncOpenAI] = None):
        self.config = config
        self.client = client
        self.history: List[Dict[str, str]] = []

        if self.client is None and config.openai_api_key:
            try:
                self.client = AsyncOpenAI(api_key=config.openai_api_key, timeout=config.request_timeout)
                logger.info("🤖 AI сервис инициализирован")
            except OpenAIError as e:
                logger.error(f"❌ Ошибка инициализации AI: {e}")
                self.client = None

        if self.client is None:
            logger.warning("⚠️ AI сервис отключен (нет OPENAI_API_KEY)")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def reset(self):
        """Начать новую чат-сессию"""
        self.history.clear()

    async def send_message(self, text: str) -> str:
        """Один ход диалога. Любая ошибка поднимается как AIServiceError"""
        if not self.enabled:
            raise AIServiceError("AI сервис отключен")

        messages = [{"role": "system", "content": SYSTEM_INSTRUCTION}]
        messages.extend(self.history)
        messages.append({"role": "user", "content": text})

        try:
            response = await self.client.chat.completions.create(
                model=self.config.openai_model,
                messages=messages,
                temperature=0.7
            )
            reply = (response.choices[0].message.content or '').strip()
        except (OpenAIError, IndexError, AttributeError) as e:
            raise AIServiceError(f"Ошибка AI запроса: {e}") from e

        # Сохраняем в историю чата
        self.history.append({"role": "user", "content": text})
        self.history.append({"role": "assistant", "content": reply})

        # Ограничиваем историю целыми парами вопрос-ответ
        keep = self.config.history_limit - self.config.history_limit % 2
        if len(self.history) > keep:
            self.history = self.history[-keep:]

        return reply

    async def generate_speech(self, text: str) -> Optional[str]:
        """base64 PCM16 24 кГц или None, если синтез не удался"""
        if not self.enabled:
            return None

        try:
            response = await self.client.chat.completions.create(
                model=self.config.tts_model,
                modalities=["text", "audio"],
                audio={"voice": self.config.voice, "format": "pcm16"},
                messages=[{"role": "user", "content": NARRATION_PROMPT.format(text=text)}]
            )
            audio = response.choices[0].message.audio
            return audio.data if audio else None
        except (OpenAIError, IndexError, AttributeError) as e:
            logger.error(f"❌ Ошибка генерации аудио: {e}")
            return None
