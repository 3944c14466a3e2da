"""
Unit tests for the navigation state
Tests: selection transitions, visible habits, detail selection
"""
import pytest

from cadenza.core.exceptions import HabitNotFoundError
from cadenza.models.habit import Habit, NotificationFrequency
from cadenza.models.selection import (
    AllSelection,
    CategorySelection,
    ScheduleSelection,
    TodaySelection
)
from cadenza.services.navigation import visible_habits
from cadenza.services.notifications import ChangeKind


def ids(habits):
    return [h.id for h in habits]


class TestSelection:
    """Test selection transitions"""

    def test_initial_state(self, navigation):
        assert navigation.selection == TodaySelection()
        assert navigation.selected_habit_id is None

    @pytest.mark.parametrize("selection", [
        AllSelection(),
        ScheduleSelection(frequency=NotificationFrequency.WEEKLY),
        CategorySelection(category_id="health"),
        TodaySelection(),
    ])
    def test_every_state_reachable(self, navigation, selection):
        navigation.select(CategorySelection(category_id="social"))
        navigation.select(selection)
        assert navigation.selection == selection

    def test_select_category_none_means_all(self, navigation):
        navigation.select_category(None)
        assert navigation.selection == AllSelection()


class TestVisibleHabits:
    """Test the filtered view"""

    def test_today_and_all_are_identical(self, seeded, navigation):
        # Today is not date-filtered; it shows the same habits as All
        today_view = ids(navigation.visible_habits())
        navigation.select(AllSelection())
        assert ids(navigation.visible_habits()) == today_view == ids(seeded.get_habits())

    def test_category_then_all(self, seeded, navigation):
        navigation.select(CategorySelection(category_id="health"))
        visible = navigation.visible_habits()
        assert visible and all(h.category_id == "health" for h in visible)

        navigation.select(AllSelection())
        assert ids(navigation.visible_habits()) == ids(seeded.get_habits())

    def test_schedule_filter(self, seeded, navigation, today):
        weekly = seeded.add_habit(
            Habit(name="Review week", category_id="productivity",
                  minimum_notification_frequency=NotificationFrequency.WEEKLY),
            today=today
        )
        navigation.select(ScheduleSelection(frequency=NotificationFrequency.DAILY))
        daily = navigation.visible_habits()
        assert ids(daily) == [
            h.id for h in seeded.get_habits()
            if h.minimum_notification_frequency == NotificationFrequency.DAILY
        ]
        assert weekly.id not in ids(daily)

        navigation.select(ScheduleSelection(frequency=NotificationFrequency.WEEKLY))
        assert ids(navigation.visible_habits()) == [weekly.id]

    def test_view_tracks_collection(self, seeded, navigation, today):
        navigation.select(CategorySelection(category_id="health"))
        added = seeded.add_habit(Habit(name="Sleep 8 hours", category_id="health"), today=today)
        assert added.id in ids(navigation.visible_habits())

    def test_projection_does_not_mutate(self, seeded):
        habits = seeded.get_habits()
        before = ids(habits)
        visible_habits(CategorySelection(category_id="learning"), habits)
        assert ids(habits) == before


class TestDetailSelection:
    """Test the focused habit slot"""

    def test_select_habit(self, seeded, navigation):
        habit = seeded.get_habits()[2]
        navigation.select_habit(habit.id)
        assert navigation.selected_habit() is habit

    def test_select_missing_habit(self, navigation):
        with pytest.raises(HabitNotFoundError):
            navigation.select_habit("missing")
        assert navigation.selected_habit_id is None

    def test_changing_filter_clears_focus(self, seeded, navigation):
        navigation.select_habit(seeded.get_habits()[0].id)
        navigation.select(CategorySelection(category_id="fitness"))
        assert navigation.selected_habit() is None

    def test_focus_does_not_change_filter(self, seeded, navigation):
        navigation.select(CategorySelection(category_id="health"))
        navigation.select_habit(seeded.get_habits()[0].id)
        assert navigation.selection == CategorySelection(category_id="health")

    def test_clear_selection(self, seeded, navigation):
        navigation.select(CategorySelection(category_id="health"))
        navigation.select_habit(seeded.get_habits()[0].id)
        navigation.clear_selection()
        assert navigation.selection == AllSelection()
        assert navigation.selected_habit_id is None

    def test_removed_habit_resolves_to_none(self, seeded, navigation):
        habit = seeded.get_habits()[0]
        navigation.select_habit(habit.id)
        seeded.remove_habit(habit.id)
        assert navigation.selected_habit() is None


class TestSelectionEvents:
    """Test selection change notifications"""

    def test_one_event_per_command(self, seeded, navigation, events):
        navigation.select(AllSelection())
        navigation.select_habit(seeded.get_habits()[0].id)
        navigation.clear_selection()
        assert [e.command for e in events] == ["select", "select_habit", "clear_selection"]
        assert all(e.kind == ChangeKind.SELECTION_CHANGED for e in events)
