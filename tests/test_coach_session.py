"""
Coach Session and Classifier Tests
==================================
"""

import asyncio

import pytest

from models import CONNECTION_PROBLEM, GREETING, ChatBusyError, MealType, Role
from services.classifier import KeywordMealClassifier, KeywordMoodClassifier
from services.coach_session import CoachSession

from tests.mocks import FakeChatClient


class TestClassifiers:

    @pytest.mark.parametrize("text,score", [
        ("Hoje estou feliz!", 5),
        ("Consegui caminhar", 5),
        ("Foi um dia difícil", 2),
        ("Estou TRISTE", 2),
        ("Oi Gizele", None),
    ])
    def test_mood(self, text, score):
        assert KeywordMoodClassifier().classify(text) == score

    @pytest.mark.parametrize("text,meal", [
        ("Fiz uma refeição tranquila", MealType.MINDFUL),
        ("Comi muito rápido hoje", MealType.UNMINDFUL),
        ("comi em excesso", MealType.UNMINDFUL),
        ("Bom dia", None),
    ])
    def test_meal(self, text, meal):
        assert KeywordMealClassifier().classify(text) == meal


class TestCoachSession:

    def test_starts_with_greeting(self, data_service):
        session = CoachSession(FakeChatClient(), data_service)
        assert session.messages[0].role == Role.MODEL
        assert session.messages[0].text == GREETING

    @pytest.mark.asyncio
    async def test_reply_and_classification(self, data_service):
        session = CoachSession(FakeChatClient("Que ótimo!"), data_service)

        reply = await session.handle_send("Fiz uma refeição e estou feliz")

        assert reply.text == "Que ótimo!"
        assert [m.role for m in session.messages] == [Role.MODEL, Role.USER, Role.MODEL]
        assert data_service.stats.meals == [MealType.MINDFUL]
        assert data_service.stats.mood_scores == [5]

    @pytest.mark.asyncio
    async def test_blank_text_ignored(self, data_service):
        client = FakeChatClient("x")
        session = CoachSession(client, data_service)

        assert await session.handle_send("   ") is None
        assert client.sent == []
        assert len(session.messages) == 1

    @pytest.mark.asyncio
    async def test_failure_shows_connection_problem(self, data_service):
        session = CoachSession(FakeChatClient(error=RuntimeError("offline")), data_service)

        reply = await session.handle_send("Estou feliz")

        assert reply.text == CONNECTION_PROBLEM
        assert data_service.stats.mood_scores == []
        assert not session.is_loading

    @pytest.mark.asyncio
    async def test_empty_reply_shows_connection_problem(self, data_service):
        session = CoachSession(FakeChatClient(""), data_service)
        reply = await session.handle_send("Oi")
        assert reply.text == CONNECTION_PROBLEM

    @pytest.mark.asyncio
    async def test_busy_while_waiting(self, data_service):
        gate = asyncio.Event()

        class SlowClient:
            async def send_message(self, text):
                await gate.wait()
                return "ok"

        session = CoachSession(SlowClient(), data_service)
        first = asyncio.create_task(session.handle_send("um"))
        await asyncio.sleep(0)

        with pytest.raises(ChatBusyError):
            await session.handle_send("dois")

        gate.set()
        assert (await first).text == "ok"
        assert not session.is_loading
