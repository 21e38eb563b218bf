"""
AI Service Tests
================

Chat history bounds and speech extraction against a stand-in OpenAI client.
"""

from types import SimpleNamespace

import pytest

from config import AIConfig
from models import AIServiceError
from services.ai_service import CoachAIService


class FakeCompletions:
    def __init__(self):
        self.requests = []
        self.audio = None

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        message = SimpleNamespace(content=f"resposta {len(self.requests)}", audio=self.audio)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_service(history_limit=20):
    completions = FakeCompletions()
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    service = CoachAIService(AIConfig(openai_api_key=None, history_limit=history_limit), client=client)
    return service, completions


class TestHistory:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [3, 4, 5])
    async def test_history_starts_with_user_turn(self, limit):
        service, _ = make_service(history_limit=limit)
        for n in range(5):
            await service.send_message(f"mensagem {n}")

        assert len(service.history) == limit - limit % 2
        assert service.history[0] == {"role": "user", "content": "mensagem 4" if limit < 4 else "mensagem 3"}
        assert [m["role"] for m in service.history[::2]] == ["user"] * (len(service.history) // 2)

    @pytest.mark.asyncio
    async def test_request_carries_system_prompt_and_history(self):
        service, completions = make_service()
        await service.send_message("oi")
        await service.send_message("tudo bem?")

        messages = completions.requests[-1]["messages"]
        assert messages[0]["role"] == "system"
        assert [m["content"] for m in messages[1:]] == ["oi", "resposta 1", "tudo bem?"]

    @pytest.mark.asyncio
    async def test_disabled_without_client(self):
        service = CoachAIService(AIConfig(openai_api_key=None))
        assert not service.enabled
        with pytest.raises(AIServiceError):
            await service.send_message("oi")
        assert await service.generate_speech("oi") is None


class TestSpeech:

    @pytest.mark.asyncio
    async def test_returns_audio_data(self):
        service, completions = make_service()
        completions.audio = SimpleNamespace(data="AAAA")

        assert await service.generate_speech("Inspire") == "AAAA"
        request = completions.requests[0]
        assert request["audio"]["format"] == "pcm16"
        assert request["modalities"] == ["text", "audio"]

    @pytest.mark.asyncio
    async def test_missing_audio(self):
        service, _ = make_service()
        assert await service.generate_speech("Inspire") is None
