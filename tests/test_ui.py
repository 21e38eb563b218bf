"""
UI Tests
========

Progress bars, mood trend and message/keyboard rendering.
"""

from models import BREATHING_PATTERNS, BreathingPhase, DailyStats, MealType, ReminderBook
from ui.keyboards import main_menu_keyboard, reminders_keyboard
from ui.messages import breathing_phase_message, dashboard_message, mood_trend_message
from ui.progress import meals_progress_bar, mood_sparkline, progress_bar


def callback_data(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


class TestProgress:

    def test_progress_bar(self):
        assert progress_bar(50, length=4) == "🟧🟧⬜️⬜️ 50%"
        assert progress_bar(150, length=2) == "🟧🟧 100%"

    def test_meals_without_data(self):
        assert meals_progress_bar(0, 0).endswith(" 0%")

    def test_sparkline_scale(self):
        assert mood_sparkline([1, 3, 5]) == "▁▄█"

    def test_sparkline_keeps_latest(self):
        assert len(mood_sparkline([3] * 30, width=20)) == 20


class TestMessages:

    def test_phase_message(self):
        text = breathing_phase_message(BREATHING_PATTERNS['4-7-8'], BreathingPhase.HOLD)
        assert "Segurar" in text
        assert "7 s" in text

    def test_trend_needs_two_scores(self):
        assert "Continue conversando" in mood_trend_message(DailyStats(mood_scores=[5]))
        assert "▁█" in mood_trend_message(DailyStats(mood_scores=[1, 5]))

    def test_dashboard(self):
        stats = DailyStats(pauses=3, mood_scores=[5, 4], meals=[MealType.MINDFUL, MealType.UNMINDFUL])
        text = dashboard_message(stats)
        assert "4.5 ✨" in text
        assert "<b>Pausas conscientes:</b> 3" in text
        assert "1 / 2" in text
        assert "50%" in text


class TestKeyboards:

    def test_main_menu_actions(self):
        data = callback_data(main_menu_keyboard())
        assert "breath_start:4-7-8" in data
        assert "dashboard" in data
        assert "reminders_list" in data

    def test_reminder_rows(self):
        data = callback_data(reminders_keyboard(ReminderBook()))
        assert "reminder_toggle:1" in data
        assert "reminder_delete:3" in data
        assert data[-1] == "reminder_add"
