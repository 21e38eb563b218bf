"""
Контроллер дыхательной сессии
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from models import BreathingPattern, BreathingPhase

logger = logging.getLogger('mindfulpause')

class TimerHandle(Protocol):
    def cancel(self) -> None: ...

class TimerScheduler(Protocol):
    """Всё, что умеет call_later: asyncio-цикл или тестовые часы"""
    def call_later(self, delay: float, callback: Callable[..., None], *args) -> TimerHandle: ...

class Narrator(Protocol):
    def request(self, text: str) -> None: ...
    def stop(self) -> None: ...

@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class Running:
    pattern: BreathingPattern
    phase: BreathingPhase

SessionState = Union[Idle, Running]

IDLE = Idle()

class BreathingSessionController:
    """Бесконечный цикл Inspirar/Segurar/Expirar/Aguardar до остановки.

    Состояния: Idle и Running(pattern, phase). Вход в Running из любого
    состояния сначала выполняет выход из текущего: отмену таймера и
    остановку озвучки. В любой момент запланирован не более чем один переход.
    """

    def __init__(self, scheduler: Optional[TimerScheduler] = None,
                 on_phase_change: Optional[Callable[[BreathingPattern, BreathingPhase], None]] = None,
                 on_pause_recorded: Optional[Callable[[], None]] = None,
                 narrator: Optional[Narrator] = None):
        self._scheduler = scheduler
        self.on_phase_change = on_phase_change
        self.on_pause_recorded = on_pause_recorded
        self.narrator = narrator
        self._state: SessionState = IDLE
        self._timer: Optional[TimerHandle] = None
        self._session_id = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return isinstance(self._state, Running)

    @property
    def pattern(self) -> Optional[BreathingPattern]:
        return self._state.pattern if isinstance(self._state, Running) else None

    @property
    def phase(self) -> Optional[BreathingPhase]:
        return self._state.phase if isinstance(self._state, Running) else None

    def start(self, pattern: BreathingPattern):
        """Новая сессия; текущая (если есть) останавливается первой"""
        self._exit_running()
        self._session_id += 1
        logger.info(f"🌬️ Старт дыхательной сессии: {pattern.name}")
        self._enter(pattern, BreathingPhase.INHALE)
        if self.narrator:
            self.narrator.request(pattern.guide_text)

    def stop(self) -> bool:
        """Отмена без записи паузы"""
        if not self.is_running:
            return False
        pattern = self.pattern
        self._exit_running()
        logger.info(f"⏹️ Дыхательная сессия остановлена: {pattern.name}")
        return True

    def conclude(self) -> bool:
        """Завершение с записью одной паузы"""
        if not self.is_running:
            return False
        pattern = self.pattern
        self._exit_running()
        if self.on_pause_recorded:
            self.on_pause_recorded()
        logger.info(f"✅ Дыхательная пауза завершена: {pattern.name}")
        return True

    def _exit_running(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self.is_running and self.narrator:
            self.narrator.stop()
        self._state = IDLE

    def _enter(self, pattern: BreathingPattern, phase: BreathingPhase):
        self._state = Running(pattern, phase)
        duration_ms = self._duration(pattern, phase)
        self._timer = self._get_scheduler().call_later(
            duration_ms / 1000, self._advance, self._session_id
        )
        if self.on_phase_change:
            self.on_phase_change(pattern, phase)

    def _advance(self, session_id: int):
        if session_id != self._session_id or not isinstance(self._state, Running):
            logger.debug("⏭️ Устаревший таймер дыхания проигнорирован")
            return
        self._timer = None
        pattern = self._state.pattern
        self._enter(pattern, self._next_phase(pattern, self._state.phase))

    @staticmethod
    def _next_phase(pattern: BreathingPattern, phase: BreathingPhase) -> BreathingPhase:
        if phase == BreathingPhase.INHALE:
            return BreathingPhase.HOLD if pattern.hold else BreathingPhase.EXHALE
        if phase == BreathingPhase.HOLD:
            return BreathingPhase.EXHALE
        if phase == BreathingPhase.EXHALE and pattern.hold and pattern.hold_post:
            return BreathingPhase.HOLD_POST
        return BreathingPhase.INHALE

    @staticmethod
    def _duration(pattern: BreathingPattern, phase: BreathingPhase) -> int:
        return {
            BreathingPhase.INHALE: pattern.inhale,
            BreathingPhase.HOLD: pattern.hold,
            BreathingPhase.EXHALE: pattern.exhale,
            BreathingPhase.HOLD_POST: pattern.hold_post,
        }[phase]

    def _get_scheduler(self) -> TimerScheduler:
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        return self._scheduler
