"""
Reminder Scheduler Tests
========================

Minute matching, once-per-minute guard and notification delivery.
"""

import asyncio
from datetime import datetime

import pytest

from models import GuardPolicy, Notification, Reminder, ReminderBook, ReminderType
from services.reminders import ReminderScheduler, current_minute


def at(hour, minute, second=0):
    return datetime(2025, 6, 9, hour, minute, second)


@pytest.fixture
def book():
    return ReminderBook()


@pytest.fixture
def scheduler(book):
    return ReminderScheduler(lambda: book.reminders)


class TestCurrentMinute:

    def test_zero_padded(self):
        assert current_minute(at(9, 5)) == "09:05"
        assert current_minute(at(0, 0)) == "00:00"
        assert current_minute(at(23, 59, 59)) == "23:59"


class TestGlobalGuard:

    def test_fires_once_per_minute(self, scheduler):
        first = scheduler.check_reminders(at(10, 0, 3))
        second = scheduler.check_reminders(at(10, 0, 7))

        assert first == [Notification(
            '🌬️ Hora de uma Pausa',
            'Gizele aqui: que tal pararmos um minuto para respirar?'
        )]
        assert second == []

    def test_log_reminder_copy(self, scheduler):
        [notification] = scheduler.check_reminders(at(20, 0))
        assert notification.title == '📓 Registro de Bem-estar'
        assert notification.message == 'Como foi sua última refeição? Vamos conversar sobre isso.'

    def test_no_match_no_notification(self, scheduler):
        assert scheduler.check_reminders(at(10, 1)) == []
        assert scheduler.last_triggered is None

    def test_disabled_never_fires(self, book, scheduler):
        book.toggle('1')
        assert scheduler.check_reminders(at(10, 0)) == []

    def test_fires_again_next_day(self, scheduler):
        assert scheduler.check_reminders(at(10, 0))
        assert scheduler.check_reminders(at(15, 0))
        assert scheduler.check_reminders(datetime(2025, 6, 10, 10, 0))

    def test_same_minute_reminders_fire_once(self):
        book = ReminderBook([
            Reminder('a', '08:30'),
            Reminder('b', '08:30', ReminderType.LOG),
        ])
        scheduler = ReminderScheduler(lambda: book.reminders)

        fired = scheduler.check_reminders(at(8, 30))
        assert len(fired) == 1
        assert scheduler.check_reminders(at(8, 30, 40)) == []

    def test_changes_apply_on_next_poll(self, book, scheduler):
        book.update_time('2', '10:05')
        assert scheduler.check_reminders(at(10, 5))
        assert scheduler.check_reminders(at(15, 0)) == []


class TestPerReminderGuard:

    def test_each_reminder_fires_once(self):
        book = ReminderBook([
            Reminder('a', '08:30'),
            Reminder('b', '08:30', ReminderType.LOG),
        ])
        scheduler = ReminderScheduler(lambda: book.reminders, guard_policy=GuardPolicy.PER_REMINDER)

        fired = scheduler.check_reminders(at(8, 30, 1))
        assert [n.title for n in fired] == ['🌬️ Hora de uma Pausa', '📓 Registro de Bem-estar']
        assert scheduler.check_reminders(at(8, 30, 50)) == []

    def test_reminder_added_later_in_same_minute(self):
        book = ReminderBook([Reminder('a', '08:30')])
        scheduler = ReminderScheduler(lambda: book.reminders, guard_policy=GuardPolicy.PER_REMINDER)

        assert len(scheduler.check_reminders(at(8, 30))) == 1
        book.add('08:30', ReminderType.LOG)
        assert len(scheduler.check_reminders(at(8, 30, 20))) == 1


class TestPolling:

    def test_invalid_poll_interval(self, book):
        with pytest.raises(ValueError):
            ReminderScheduler(lambda: book.reminders, poll_seconds=0)
        with pytest.raises(ValueError):
            ReminderScheduler(lambda: book.reminders, poll_seconds=61)

    @pytest.mark.asyncio
    async def test_poll_delivers_notification(self, book):
        delivered = []

        async def notify(notification):
            delivered.append(notification)

        scheduler = ReminderScheduler(lambda: book.reminders, notify=notify, clock=lambda: at(15, 0, 9))
        await scheduler.poll()
        await scheduler.poll()

        assert len(delivered) == 1

    @pytest.mark.asyncio
    async def test_poll_survives_delivery_error(self, book):
        async def notify(notification):
            raise RuntimeError("telegram down")

        scheduler = ReminderScheduler(lambda: book.reminders, notify=notify, clock=lambda: at(10, 0))
        await scheduler.poll()

        assert scheduler.last_triggered == "10:00"

    @pytest.mark.asyncio
    async def test_start_registers_single_job(self, book):
        scheduler = ReminderScheduler(lambda: book.reminders, poll_seconds=5)
        scheduler.start()
        scheduler.start()
        apscheduler = scheduler.scheduler
        try:
            assert scheduler.running
            assert len(apscheduler.get_jobs()) == 1
        finally:
            scheduler.shutdown()
        assert not scheduler.running

        # Второй вызов не должен ставить ещё одно завершение в очередь
        scheduler.shutdown()
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert not apscheduler.running

    @pytest.mark.asyncio
    async def test_restart_after_shutdown(self, book):
        scheduler = ReminderScheduler(lambda: book.reminders)
        scheduler.start()
        scheduler.shutdown()
        await asyncio.sleep(0)

        scheduler.start()
        try:
            assert scheduler.running
            assert len(scheduler.scheduler.get_jobs()) == 1
        finally:
            scheduler.shutdown()
        await asyncio.sleep(0)
