"""
Планировщик напоминаний
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable, Iterable, List, Optional, Set, Tuple

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from models import GuardPolicy, Notification, Reminder

logger = logging.getLogger('mindfulpause')

POLL_JOB_ID = 'reminder_poll'

def current_minute(now: datetime) -> str:
    """Текущее время как HH:mm (24h, с ведущими нулями)"""
    return f"{now.hour:02d}:{now.minute:02d}"

class ReminderScheduler:
    """Опрашивает часы и срабатывает не чаще раза в минуту.

    Список напоминаний читается у хоста на каждом опросе, поэтому
    выключение, удаление и смена времени действуют с ближайшего тика.
    Пропущенные минуты (процесс спал) не догоняются.
    """

    def __init__(self, reminders: Callable[[], Iterable[Reminder]],
                 notify: Optional[Callable[[Notification], Awaitable[None]]] = None,
                 timezone=None,
                 poll_seconds: int = 10,
                 guard_policy: GuardPolicy = GuardPolicy.GLOBAL,
                 clock: Optional[Callable[[], datetime]] = None):
        if not 1 <= poll_seconds <= 60:
            raise ValueError(f"Интервал опроса должен быть 1-60 секунд, получено {poll_seconds}")
        self.reminders = reminders
        self.notify = notify
        self.timezone = timezone
        self.poll_seconds = poll_seconds
        self.guard_policy = guard_policy
        self.clock = clock or (lambda: datetime.now(self.timezone))
        self.last_triggered: Optional[str] = None
        self._fired: Set[Tuple[str, str]] = set()
        self.scheduler: Optional[AsyncIOScheduler] = None

    def check_reminders(self, now: Optional[datetime] = None) -> List[Notification]:
        """Один опрос. Возвращает уведомления, которые нужно показать"""
        minute = current_minute(now or self.clock())
        matched = [r for r in self.reminders() if r.enabled and r.time == minute]

        if self.guard_policy == GuardPolicy.PER_REMINDER:
            self._fired = {key for key in self._fired if key[1] == minute}
            fresh = [r for r in matched if (r.id, minute) not in self._fired]
            for reminder in fresh:
                self._fired.add((reminder.id, minute))
            if fresh:
                self.last_triggered = minute
            return [Notification.for_reminder(r) for r in fresh]

        if self.last_triggered == minute or not matched:
            return []
        self.last_triggered = minute
        return [Notification.for_reminder(matched[0])]

    async def poll(self):
        """Тик планировщика: проверка и доставка уведомлений"""
        for notification in self.check_reminders():
            logger.info(f"🔔 Напоминание: {notification.title}")
            if not self.notify:
                continue
            try:
                await self.notify(notification)
            except Exception as e:
                logger.error(f"❌ Ошибка доставки напоминания: {e}")

    def start(self):
        """Запуск периодического опроса (нужен работающий asyncio-цикл)"""
        if self.scheduler is None:
            self.scheduler = AsyncIOScheduler(timezone=self.timezone) if self.timezone else AsyncIOScheduler()

        self.scheduler.add_job(
            self.poll,
            'interval',
            seconds=self.poll_seconds,
            id=POLL_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True
        )
        if not self.scheduler.running:
            self.scheduler.start()
        logger.info(f"📅 Планировщик напоминаний запущен (каждые {self.poll_seconds} с)")

    def shutdown(self):
        """Остановка опроса. Повторный вызов ничего не делает"""
        # AsyncIOScheduler может завершаться на следующем тике цикла,
        # поэтому ссылку сбрасываем сразу
        scheduler, self.scheduler = self.scheduler, None
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)
            logger.info("📅 Планировщик напоминаний остановлен")

    @property
    def running(self) -> bool:
        return bool(self.scheduler and self.scheduler.running)
