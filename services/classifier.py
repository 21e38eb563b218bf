"""
Классификация настроения и приёмов пищи по тексту
"""

from typing import Optional, Protocol, Sequence

from models import MealType

class MoodClassifier(Protocol):
    def classify(self, text: str) -> Optional[int]: ...

class MealClassifier(Protocol):
    def classify(self, text: str) -> Optional[MealType]: ...

def _mentions(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)

class KeywordMoodClassifier:
    """Эвристика по словам: позитив -> 5, трудности -> 2"""

    def __init__(self,
                 positive: Sequence[str] = ('feliz', 'bem', 'consegui'),
                 negative: Sequence[str] = ('difícil', 'triste', 'ansiosa'),
                 positive_score: int = 5,
                 negative_score: int = 2):
        self.positive = positive
        self.negative = negative
        self.positive_score = positive_score
        self.negative_score = negative_score

    def classify(self, text: str) -> Optional[int]:
        lowered = text.lower()
        if _mentions(lowered, self.positive):
            return self.positive_score
        if _mentions(lowered, self.negative):
            return self.negative_score
        return None

class KeywordMealClassifier:
    """Упоминание еды -> mindful, если нет слов о спешке или переедании"""

    def __init__(self,
                 meal_words: Sequence[str] = ('refeição', 'comi'),
                 unmindful_words: Sequence[str] = ('rápido', 'excesso')):
        self.meal_words = meal_words
        self.unmindful_words = unmindful_words

    def classify(self, text: str) -> Optional[MealType]:
        lowered = text.lower()
        if not _mentions(lowered, self.meal_words):
            return None
        if _mentions(lowered, self.unmindful_words):
            return MealType.UNMINDFUL
        return MealType.MINDFUL
