"""
Model Tests
===========

Breathing patterns, reminder book and daily statistics.
"""

import pytest

from models import (
    BREATHING_PATTERNS,
    DEFAULT_REMINDERS,
    BreathingPattern,
    BreathingPhase,
    DailyStats,
    InvalidPatternError,
    InvalidReminderTimeError,
    MealType,
    Reminder,
    ReminderBook,
    ReminderNotFoundError,
    ReminderType,
    get_pattern,
    validate_time
)


class TestBreathingPattern:

    def test_builtin_durations(self):
        assert BREATHING_PATTERNS['4-7-8'].phase_durations() == [
            (BreathingPhase.INHALE, 4000),
            (BreathingPhase.HOLD, 7000),
            (BreathingPhase.EXHALE, 8000),
        ]
        assert BREATHING_PATTERNS['quadrada'].cycle_ms == 16000
        assert BREATHING_PATTERNS['calma'].cycle_ms == 10000

    @pytest.mark.parametrize("field_name,value", [
        ("inhale", 0),
        ("exhale", -1000),
        ("hold", 0),
        ("inhale", 1.5),
    ])
    def test_rejects_bad_durations(self, field_name, value):
        kwargs = dict(key='x', name='X', description='', guide_text='', inhale=1000, exhale=1000)
        kwargs[field_name] = value
        with pytest.raises(InvalidPatternError):
            BreathingPattern(**kwargs)

    def test_unknown_pattern(self):
        with pytest.raises(KeyError):
            get_pattern('nope')

    def test_phase_labels(self):
        assert [phase.value for phase in BreathingPhase] == ['Inspirar', 'Segurar', 'Expirar', 'Aguardar']


class TestValidateTime:

    def test_normalizes(self):
        assert validate_time("9:05") == "09:05"
        assert validate_time(" 23:59 ") == "23:59"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", "12-30", None, 1000, ["10:00"]])
    def test_rejects(self, value):
        with pytest.raises(InvalidReminderTimeError):
            validate_time(value)


class TestReminderBook:

    def test_defaults(self):
        book = ReminderBook()
        assert [r.to_dict() for r in book] == [
            {"id": "1", "time": "10:00", "type": "pause", "enabled": True},
            {"id": "2", "time": "15:00", "type": "pause", "enabled": True},
            {"id": "3", "time": "20:00", "type": "log", "enabled": True},
        ]

    def test_duplicate_ids_skipped(self):
        book = ReminderBook([Reminder('a', '08:00'), Reminder('a', '09:00')])
        assert len(book) == 1
        assert book.get('a').time == '08:00'

    def test_add_defaults_to_noon_pause(self):
        changes = []
        book = ReminderBook([], on_change=changes.append)
        reminder = book.add()

        assert reminder.time == '12:00'
        assert reminder.type == ReminderType.PAUSE
        assert reminder.enabled
        assert len(reminder.id) == 9
        assert changes == [[reminder]]

    def test_add_generates_unique_ids(self):
        book = ReminderBook([])
        ids = {book.add().id for _ in range(50)}
        assert len(ids) == 50

    def test_toggle_and_update(self):
        book = ReminderBook()
        assert book.toggle('1').enabled is False
        assert book.toggle('1').enabled is True
        assert book.update_time('2', '7:30').time == '07:30'

    def test_update_rejects_bad_time_without_change(self):
        changes = []
        book = ReminderBook(on_change=changes.append)
        with pytest.raises(InvalidReminderTimeError):
            book.update_time('1', '99:99')
        assert book.get('1').time == '10:00'
        assert changes == []

    def test_remove_keeps_order(self):
        book = ReminderBook()
        book.remove('2')
        assert [r.id for r in book] == ['1', '3']

    def test_unknown_id(self):
        book = ReminderBook()
        with pytest.raises(ReminderNotFoundError):
            book.toggle('missing')
        with pytest.raises(ReminderNotFoundError):
            book.remove('missing')

    def test_round_trip_dict(self):
        for reminder in DEFAULT_REMINDERS:
            assert Reminder.from_dict(reminder.to_dict()) == reminder


class TestDailyStats:

    def test_empty(self):
        stats = DailyStats()
        assert stats.average_mood == 0.0
        assert stats.mood_badge == '🌱'
        assert stats.mindful_meals_ratio == 0.0

    def test_average_and_badge(self):
        stats = DailyStats()
        for score in (5, 5, 2):
            stats.record_mood(score)
        assert stats.average_mood == 4.0
        assert stats.mood_badge == '✨'

        stats.record_mood(2)
        assert stats.average_mood == 3.5
        assert stats.mood_badge == '⚖️'

    def test_meals(self):
        stats = DailyStats()
        stats.record_meal(MealType.MINDFUL)
        stats.record_meal(MealType.UNMINDFUL)
        stats.record_meal(MealType.MINDFUL)
        assert stats.mindful_meals_count == 2
        assert stats.mindful_meals_ratio == pytest.approx(2 / 3)

    def test_history_limit_evicts_oldest(self):
        stats = DailyStats(history_limit=3)
        for score in (1, 2, 3, 4, 5):
            stats.record_mood(score)
        assert stats.mood_scores == [3, 4, 5]

    def test_pauses_only_grow(self):
        stats = DailyStats()
        assert stats.record_pause() == 1
        assert stats.record_pause() == 2

    def test_from_dict_tolerates_garbage(self):
        stats = DailyStats.from_dict({
            "pauses": "many",
            "moodScores": [5, "x", 2],
            "meals": ["mindful", "pizza"]
        })
        assert stats.pauses == 0
        assert stats.mood_scores == [5, 2]
        assert stats.meals == [MealType.MINDFUL]

    def test_to_dict_keys(self):
        stats = DailyStats(pauses=2, mood_scores=[4], meals=[MealType.UNMINDFUL])
        assert stats.to_dict() == {"pauses": 2, "moodScores": [4], "meals": ["unmindful"]}
