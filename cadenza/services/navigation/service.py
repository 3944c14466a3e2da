"""
Navigation State - What the user is currently looking at
Holds the active filter selection and, separately, the focused habit
"""
import logging
import threading
from typing import List, Optional

from cadenza.core.exceptions import HabitNotFoundError
from cadenza.models.habit import Habit
from cadenza.models.selection import (
    AllSelection,
    CategorySelection,
    ScheduleSelection,
    Selection,
    TodaySelection
)
from cadenza.services.habits import HabitService
from cadenza.services.notifications import ChangeKind, ChangeNotifier

logger = logging.getLogger(__name__)


def visible_habits(selection: Selection, habits: List[Habit]) -> List[Habit]:
    """
    Project a collection through a selection

    Today and All both yield the whole collection; Today does not filter
    by date.

    Args:
        selection: The active selection
        habits: The collection, in display order

    Returns:
        New list with the matching habits, order preserved
    """
    if isinstance(selection, (TodaySelection, AllSelection)):
        return list(habits)
    if isinstance(selection, ScheduleSelection):
        return [h for h in habits if h.minimum_notification_frequency == selection.frequency]
    if isinstance(selection, CategorySelection):
        return [h for h in habits if h.category_id == selection.category_id]
    raise TypeError(f"Unknown selection: {selection!r}")


class NavigationState:
    """
    Single source of truth for the current view

    `selection` is the filter mode; `selected_habit_id` is the focus
    pointer for the detail view. Changing the filter always clears the
    focus pointer.
    """

    def __init__(self, habit_service: HabitService, notifier: Optional[ChangeNotifier] = None):
        self.habit_service = habit_service
        self.notifier = notifier or habit_service.notifier
        self.selection: Selection = TodaySelection()
        self.selected_habit_id: Optional[str] = None
        self._lock = threading.RLock()

    def select(self, selection: Selection) -> Selection:
        """Replace the active selection and clear the focused habit"""
        with self._lock:
            self.selection = selection
            self.selected_habit_id = None

        logger.info(f"Selection changed to {selection.kind}")
        self.notifier.publish(ChangeKind.SELECTION_CHANGED, "select")
        return selection

    def select_category(self, category_id: Optional[str]) -> Selection:
        """Filter by a category, or show everything when no id is given"""
        if category_id is None:
            return self.select(AllSelection())
        return self.select(CategorySelection(category_id=category_id))

    def select_habit(self, habit_id: str) -> Habit:
        """
        Focus a single habit for the detail view

        Raises:
            HabitNotFoundError: If the habit is not in the collection
        """
        habit = self.habit_service.get_habit(habit_id)
        with self._lock:
            self.selected_habit_id = habit.id

        self.notifier.publish(ChangeKind.SELECTION_CHANGED, "select_habit", habit.id)
        return habit

    def clear_selection(self) -> None:
        """Drop the focused habit and show every habit again"""
        with self._lock:
            self.selection = AllSelection()
            self.selected_habit_id = None

        self.notifier.publish(ChangeKind.SELECTION_CHANGED, "clear_selection")

    def selected_habit(self) -> Optional[Habit]:
        """The focused habit, or None if nothing is focused or it was removed"""
        with self._lock:
            habit_id = self.selected_habit_id
        if habit_id is None:
            return None
        try:
            return self.habit_service.get_habit(habit_id)
        except HabitNotFoundError:
            return None

    def visible_habits(self) -> List[Habit]:
        """Habits matching the active selection, derived from the live collection"""
        with self._lock:
            selection = self.selection
        return visible_habits(selection, self.habit_service.get_habits())
