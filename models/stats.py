# models/stats.py

import logging
from dataclasses import dataclass, field
from typing import List

from models.enums import MealType

logger = logging.getLogger('mindfulpause')

@dataclass
class DailyStats:
    """Статистика владельца: паузы, оценки настроения, приёмы пищи.

    Данные только растут. history_limit ограничивает длину истории
    настроения и приёмов пищи (0 - без ограничения), старые записи вытесняются.
    """
    pauses: int = 0
    mood_scores: List[int] = field(default_factory=list)
    meals: List[MealType] = field(default_factory=list)
    history_limit: int = 0

    def record_pause(self) -> int:
        self.pauses += 1
        return self.pauses

    def record_mood(self, score: int):
        self.mood_scores.append(int(score))
        self._trim(self.mood_scores)

    def record_meal(self, meal: MealType):
        self.meals.append(MealType(meal))
        self._trim(self.meals)

    def _trim(self, history: list):
        if self.history_limit and len(history) > self.history_limit:
            del history[:len(history) - self.history_limit]

    @property
    def average_mood(self) -> float:
        if not self.mood_scores:
            return 0.0
        return round(sum(self.mood_scores) / len(self.mood_scores), 1)

    @property
    def mood_badge(self) -> str:
        average = self.average_mood
        if average >= 4:
            return '✨'
        if average >= 2.5:
            return '⚖️'
        return '🌱'

    @property
    def mindful_meals_count(self) -> int:
        return sum(1 for meal in self.meals if meal == MealType.MINDFUL)

    @property
    def mindful_meals_ratio(self) -> float:
        if not self.meals:
            return 0.0
        return self.mindful_meals_count / len(self.meals)

    def to_dict(self) -> dict:
        return {
            "pauses": self.pauses,
            "moodScores": list(self.mood_scores),
            "meals": [meal.value for meal in self.meals]
        }

    @classmethod
    def from_dict(cls, data: dict, history_limit: int = 0) -> "DailyStats":
        """Терпимая к мусору загрузка: каждое поле падает в значение по умолчанию отдельно"""
        stats = cls(history_limit=history_limit)
        if not isinstance(data, dict):
            logger.warning("⚠️ Статистика в неверном формате, используем значения по умолчанию")
            return stats

        pauses = data.get("pauses", 0)
        if isinstance(pauses, int) and not isinstance(pauses, bool) and pauses >= 0:
            stats.pauses = pauses

        scores = data.get("moodScores", [])
        if isinstance(scores, list):
            stats.mood_scores = []
            for score in scores:
                if not isinstance(score, (int, float)) or isinstance(score, bool):
                    continue
                try:
                    stats.mood_scores.append(int(score))
                except (OverflowError, ValueError):
                    # Infinity и NaN из JSON
                    continue

        meals = data.get("meals", [])
        if isinstance(meals, list):
            valid = {meal.value for meal in MealType}
            stats.meals = [MealType(meal) for meal in meals if isinstance(meal, str) and meal in valid]

        stats._trim(stats.mood_scores)
        stats._trim(stats.meals)
        return stats
