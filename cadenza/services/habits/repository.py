"""
Habits Repository - In-memory storage for the habit collection
Keeps insertion order and indexes habits by id
"""
from typing import Dict, List, Optional
import logging

from cadenza.core.exceptions import DuplicateIdError, HabitNotFoundError
from cadenza.models.habit import Habit

logger = logging.getLogger(__name__)


class HabitRepository:
    """Ordered, id-keyed collection of habits owned by a single process"""

    def __init__(self):
        self._habits: Dict[str, Habit] = {}

    def __len__(self) -> int:
        return len(self._habits)

    def __contains__(self, habit_id: str) -> bool:
        return habit_id in self._habits

    def get_all_habits(self) -> List[Habit]:
        """
        Get all habits in insertion order

        Returns:
            New list holding the stored habits
        """
        return list(self._habits.values())

    def get_habit_by_id(self, habit_id: str) -> Optional[Habit]:
        """
        Get a single habit by id

        Returns:
            The habit or None if not found
        """
        return self._habits.get(habit_id)

    def create_habit(self, habit: Habit) -> Habit:
        """
        Insert a habit at the end of the collection

        Raises:
            DuplicateIdError: If the id is already stored
        """
        if habit.id in self._habits:
            raise DuplicateIdError(f"Habit with id '{habit.id}' already exists")
        self._habits[habit.id] = habit
        return habit

    def delete_habit(self, habit_id: str) -> Habit:
        """
        Delete a habit together with its entries

        Raises:
            HabitNotFoundError: If the id is not stored
        """
        habit = self._habits.pop(habit_id, None)
        if habit is None:
            raise HabitNotFoundError(f"Habit '{habit_id}' not found")
        return habit
