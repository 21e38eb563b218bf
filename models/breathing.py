# models/breathing.py

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from models.enums import BreathingPhase
from models.errors import InvalidPatternError

@dataclass(frozen=True)
class BreathingPattern:
    """Дыхательная техника. Длительности фаз в миллисекундах."""
    key: str
    name: str
    description: str
    guide_text: str
    inhale: int
    exhale: int
    hold: Optional[int] = None
    hold_post: Optional[int] = None

    def __post_init__(self):
        durations = {
            'inhale': self.inhale,
            'hold': self.hold,
            'exhale': self.exhale,
            'hold_post': self.hold_post,
        }
        for field_name, value in durations.items():
            if value is None and field_name in ('hold', 'hold_post'):
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidPatternError(
                    f"{self.key}: длительность {field_name} должна быть > 0 мс (получено {value!r})"
                )

    def phase_durations(self) -> List[Tuple[BreathingPhase, int]]:
        """Фазы одного цикла в порядке прохождения"""
        steps = [(BreathingPhase.INHALE, self.inhale)]
        if self.hold:
            steps.append((BreathingPhase.HOLD, self.hold))
            steps.append((BreathingPhase.EXHALE, self.exhale))
            if self.hold_post:
                steps.append((BreathingPhase.HOLD_POST, self.hold_post))
        else:
            steps.append((BreathingPhase.EXHALE, self.exhale))
        return steps

    @property
    def cycle_ms(self) -> int:
        return sum(ms for _, ms in self.phase_durations())

BREATHING_PATTERNS: Dict[str, BreathingPattern] = {
    '4-7-8': BreathingPattern(
        key='4-7-8',
        name='Técnica 4-7-8',
        description='Ideal para reduzir a ansiedade e urgência alimentar.',
        guide_text=(
            'A técnica 4-7-8 ajuda a acalmar o sistema nervoso. Inspire pelo nariz contando até quatro. '
            'Segure o ar por sete segundos. E solte lentamente pela boca por oito segundos. '
            'Siga o ritmo do círculo.'
        ),
        inhale=4000,
        hold=7000,
        exhale=8000,
    ),
    'quadrada': BreathingPattern(
        key='quadrada',
        name='Respiração Quadrada',
        description='Foco total e equilíbrio emocional.',
        guide_text=(
            'A respiração quadrada traz equilíbrio. Inspire por quatro segundos. Segure por quatro. '
            'Expire por quatro. E aguarde mais quatro antes da próxima inspiração. Vamos começar.'
        ),
        inhale=4000,
        hold=4000,
        exhale=4000,
        hold_post=4000,
    ),
    'calma': BreathingPattern(
        key='calma',
        name='Respiração Profunda',
        description='Acalma o sistema nervoso rapidamente.',
        guide_text=(
            'Feche os olhos se desejar. Inspire profundamente preenchendo o abdômen. '
            'E expire soltando todo o ar, relaxando os ombros. Siga o movimento suave do guia.'
        ),
        inhale=5000,
        exhale=5000,
    ),
}

def get_pattern(key: str) -> BreathingPattern:
    """Техника по ключу; KeyError для неизвестного ключа"""
    try:
        return BREATHING_PATTERNS[key]
    except KeyError:
        raise KeyError(f"Неизвестная техника дыхания: {key}") from None
