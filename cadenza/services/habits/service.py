"""
Habits Service - Business logic for the habit collection
Handles adding, removing, completion toggling and category filtering
"""
from bisect import insort
from datetime import date
from typing import List, Optional
import logging
import threading

from cadenza.core.exceptions import HabitNotFoundError, InvariantViolation
from cadenza.models.habit import Habit, HabitEntry
from cadenza.services.notifications import ChangeKind, ChangeNotifier
from cadenza.utils.timezone import get_today_date
from .repository import HabitRepository

logger = logging.getLogger(__name__)


def _entries_on(habit: Habit, day: date) -> List[int]:
    """Indexes of the habit's entries dated `day`, oldest first"""
    return [i for i, entry in enumerate(habit.entries) if entry.date == day]


def check_invariants(habit: Habit, today: date) -> None:
    """
    Verify a habit is in a state the service can operate on

    Raises:
        InvariantViolation: If the streak is negative or several entries are dated today
    """
    if habit.streak < 0:
        raise InvariantViolation(f"Habit '{habit.name}' has negative streak {habit.streak}")

    today_count = len(_entries_on(habit, today))
    if today_count > 1:
        raise InvariantViolation(
            f"Habit '{habit.name}' has {today_count} entries dated {today}, expected at most one"
        )


class HabitService:
    """
    Owns the habit collection and every mutation of it

    Each successful command publishes one ChangeEvent after the mutation
    has completed.
    """

    def __init__(self, repository: Optional[HabitRepository] = None,
                 notifier: Optional[ChangeNotifier] = None):
        self.repository = repository or HabitRepository()
        self.notifier = notifier or ChangeNotifier()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_habits(self) -> List[Habit]:
        """Get all habits in insertion order"""
        with self._lock:
            return self.repository.get_all_habits()

    def get_habit(self, habit_id: str) -> Habit:
        """
        Get a single habit by id

        Raises:
            HabitNotFoundError: If no habit has this id
        """
        with self._lock:
            habit = self.repository.get_habit_by_id(habit_id)
        if habit is None:
            raise HabitNotFoundError(f"Habit '{habit_id}' not found")
        return habit

    def filter_by_category(self, category_id: Optional[str] = None) -> List[Habit]:
        """
        Habits belonging to a category, or every habit when no id is given

        Re-derived from the live collection on every call.
        """
        habits = self.get_habits()
        if category_id is None:
            return habits
        return [habit for habit in habits if habit.category_id == category_id]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_habit(self, habit: Habit, today: Optional[date] = None) -> Habit:
        """
        Append a habit to the collection

        Args:
            habit: The habit to add
            today: Reference day for the invariant check

        Returns:
            The stored habit

        Raises:
            DuplicateIdError: If a habit with the same id is already stored
            InvariantViolation: If the habit arrives in an impossible state
        """
        check_invariants(habit, today or get_today_date())

        with self._lock:
            self.repository.create_habit(habit)

        logger.info(f"Habit '{habit.name}' added ({habit.id})")
        self.notifier.publish(ChangeKind.COLLECTION_CHANGED, "add_habit", habit.id)
        return habit

    def remove_habit(self, habit_id: str) -> Habit:
        """
        Remove a habit and discard its entries

        Returns:
            The removed habit

        Raises:
            HabitNotFoundError: If no habit has this id; the collection is unchanged
        """
        with self._lock:
            habit = self.repository.delete_habit(habit_id)

        logger.info(f"Habit '{habit.name}' removed ({habit_id})")
        self.notifier.publish(ChangeKind.COLLECTION_CHANGED, "remove_habit", habit_id)
        return habit

    def toggle_completion(self, habit_id: str, today: Optional[date] = None) -> Habit:
        """
        Flip a habit's completion for today and adjust its streak

        Marking complete increments the streak and completes today's entry,
        creating it if the log has none for today. Marking incomplete
        decrements the streak (never below zero) and flips the most recent
        entry dated today to incomplete; the entry stays in the log.
        An entry already dated today is re-completed in place, never duplicated.

        Args:
            habit_id: The habit to toggle
            today: The current day; defaults to today in the app timezone

        Returns:
            The updated habit

        Raises:
            HabitNotFoundError: If no habit has this id
        """
        today = today or get_today_date()

        with self._lock:
            habit = self.repository.get_habit_by_id(habit_id)
            if habit is None:
                raise HabitNotFoundError(f"Habit '{habit_id}' not found")

            today_indexes = _entries_on(habit, today)
            if len(today_indexes) > 1:
                logger.warning(
                    f"Habit '{habit.name}' has {len(today_indexes)} entries dated {today}; using the most recent"
                )

            if not habit.is_completed_today:
                habit.is_completed_today = True
                habit.streak += 1
                if today_indexes:
                    habit.entries[today_indexes[-1]].is_completed = True
                else:
                    habit.entries.append(HabitEntry(date=today, is_completed=True))
            else:
                habit.is_completed_today = False
                habit.streak = max(0, habit.streak - 1)
                if today_indexes:
                    habit.entries[today_indexes[-1]].is_completed = False
                else:
                    logger.warning(f"Habit '{habit.name}' was completed today but has no entry for {today}")

        logger.info(
            f"Habit '{habit.name}' toggled to {'complete' if habit.is_completed_today else 'incomplete'}"
            f" (streak {habit.streak})"
        )
        self.notifier.publish(ChangeKind.COLLECTION_CHANGED, "toggle_completion", habit_id)
        return habit

    def log_entry(self, habit_id: str, day: date, is_completed: bool = True,
                  note: Optional[str] = None) -> HabitEntry:
        """
        Record a day's entry directly, without touching streak or today's flag

        The entry is inserted at its chronological position.

        Raises:
            HabitNotFoundError: If no habit has this id
            InvariantViolation: If the habit already has an entry for that day
        """
        with self._lock:
            habit = self.repository.get_habit_by_id(habit_id)
            if habit is None:
                raise HabitNotFoundError(f"Habit '{habit_id}' not found")
            if _entries_on(habit, day):
                raise InvariantViolation(f"Habit '{habit.name}' already has an entry for {day}")

            entry = HabitEntry(date=day, is_completed=is_completed, note=note)
            insort(habit.entries, entry, key=lambda e: e.date)

        logger.info(f"Entry for {day} logged on habit '{habit.name}'")
        self.notifier.publish(ChangeKind.COLLECTION_CHANGED, "log_entry", habit_id)
        return entry

    def start_new_day(self, today: Optional[date] = None) -> int:
        """
        Clear today's completion flag on habits last completed before `today`

        Streaks are left as they are. Publishes one event even when nothing was reset.

        Returns:
            Number of habits that were reset
        """
        today = today or get_today_date()
        reset = 0

        with self._lock:
            for habit in self.repository.get_all_habits():
                if not habit.is_completed_today:
                    continue
                if any(entry.is_completed for entry in habit.entries if entry.date == today):
                    continue
                habit.is_completed_today = False
                reset += 1

        if reset > 0:
            logger.info(f"[ROLLOVER] Reset {reset} habit(s) for {today}")
        else:
            logger.info(f"[ROLLOVER] Nothing to reset for {today}")

        self.notifier.publish(ChangeKind.COLLECTION_CHANGED, "start_new_day")
        return reset
