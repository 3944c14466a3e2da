"""
Habit statistics - pure derivations over a habit's entry log
None of these functions mutate the habit or raise.
"""
from datetime import date, datetime
from typing import List, Optional, Union

from cadenza.core.constants import DEFAULT_RECENT_ENTRIES_LIMIT
from cadenza.models.habit import Habit, HabitEntry, HabitStats
from cadenza.utils.timezone import as_date, get_app_now


def total_completions(habit: Habit) -> int:
    """Count of entries marked completed"""
    return sum(1 for entry in habit.entries if entry.is_completed)


def completion_rate(habit: Habit) -> float:
    """
    Fraction of entries that are completed

    Returns:
        Value in [0.0, 1.0]; 0.0 when the habit has no entries
    """
    if not habit.entries:
        return 0.0
    return total_completions(habit) / len(habit.entries)


def current_streak(habit: Habit) -> int:
    return habit.streak


def recent_entries(habit: Habit, limit: int = DEFAULT_RECENT_ENTRIES_LIMIT) -> List[HabitEntry]:
    """
    The last `limit` entries in stored (chronological) order

    Args:
        habit: The habit to read
        limit: Maximum number of entries to return

    Returns:
        Up to `limit` entries, oldest first
    """
    if limit <= 0:
        return []
    return list(habit.entries[-limit:])


def days_active(habit: Habit, now: Union[date, datetime, None] = None) -> int:
    """
    Number of calendar days since the habit was created, counting both ends

    Args:
        habit: The habit to read
        now: Reference time; defaults to now in the app timezone

    Returns:
        At least 1
    """
    today = as_date(now if now is not None else get_app_now())
    return max(1, (today - habit.created_date).days + 1)


def habit_stats(habit: Habit, now: Union[date, datetime, None] = None,
                limit: Optional[int] = None) -> HabitStats:
    """Bundle every derived value a detail view shows"""
    return HabitStats(
        habit_id=habit.id,
        completion_rate=completion_rate(habit),
        total_completions=total_completions(habit),
        current_streak=current_streak(habit),
        days_active=days_active(habit, now),
        recent_entries=recent_entries(habit, DEFAULT_RECENT_ENTRIES_LIMIT if limit is None else limit)
    )
