# ui/progress.py

from typing import Sequence

SPARK_LEVELS = "▁▂▄▆█"

def progress_bar(percent: int, length: int = 10):
    """Генерирует текстовый progress bar (emoji/блоки)"""
    percent = max(0, min(int(percent), 100))
    done = int(length * percent // 100)
    todo = length - done
    return "🟧" * done + "⬜️" * todo + f" {percent}%"

def meals_progress_bar(mindful: int, total: int):
    percent = int((mindful / total) * 100) if total else 0
    return progress_bar(percent)

def mood_sparkline(scores: Sequence[int], min_score: int = 1, max_score: int = 5, width: int = 20):
    """Тренд настроения: последние width оценок в виде столбиков"""
    span = max_score - min_score
    chars = []
    for score in list(scores)[-width:]:
        clamped = max(min_score, min(score, max_score))
        index = round((clamped - min_score) / span * (len(SPARK_LEVELS) - 1))
        chars.append(SPARK_LEVELS[index])
    return "".join(chars)
