"""
Unit tests for the sample data
"""
from datetime import timedelta

from cadenza.services.habits import sample_habits, stats


class TestSampleHabits:
    """Test sample habit generation"""

    def test_counts(self, today):
        expected = {
            "Drink 8 glasses of water": (5, 10, 7),
            "Exercise for 30 minutes": (3, 8, 4),
            "Read for 20 minutes": (7, 12, 9),
            "Meditate": (2, 5, 3),
            "Complete daily tasks": (4, 6, 5),
            "Call a friend": (1, 3, 2),
        }
        habits = sample_habits(today)
        assert [h.name for h in habits] == list(expected)
        for habit in habits:
            streak, days, completed = expected[habit.name]
            assert habit.streak == streak
            assert len(habit.entries) == days
            assert stats.total_completions(habit) == completed

    def test_history_ends_yesterday(self, today):
        for habit in sample_habits(today):
            dates = [e.date for e in habit.entries]
            assert dates == sorted(dates)
            assert dates[-1] == today - timedelta(days=1)
            assert habit.created_date == dates[0]
            assert habit.is_completed_today is False

    def test_most_recent_days_completed(self, today):
        water = sample_habits(today)[0]
        assert [e.is_completed for e in water.entries] == [False] * 3 + [True] * 7
