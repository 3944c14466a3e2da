"""
Sample data - the categories and habits a fresh install starts with
"""
from datetime import date, timedelta
from typing import List, Optional
import logging

from cadenza.models.category import Category
from cadenza.models.habit import Habit, HabitEntry
from cadenza.utils.timezone import get_today_date

logger = logging.getLogger(__name__)

# (id, name, color, icon)
SAMPLE_CATEGORIES = [
    ("health", "Health", "green", "heart.fill"),
    ("fitness", "Fitness", "orange", "figure.run"),
    ("productivity", "Productivity", "blue", "briefcase.fill"),
    ("learning", "Learning", "purple", "book.fill"),
    ("mindfulness", "Mindfulness", "indigo", "brain.head.profile"),
    ("social", "Social", "pink", "person.2.fill"),
]

# (name, category id, streak, days of history, completed days)
SAMPLE_HABITS = [
    ("Drink 8 glasses of water", "health", 5, 10, 7),
    ("Exercise for 30 minutes", "fitness", 3, 8, 4),
    ("Read for 20 minutes", "learning", 7, 12, 9),
    ("Meditate", "mindfulness", 2, 5, 3),
    ("Complete daily tasks", "productivity", 4, 6, 5),
    ("Call a friend", "social", 1, 3, 2),
]


def sample_categories() -> List[Category]:
    return [Category(id=cid, name=name, color=color, icon=icon) for cid, name, color, icon in SAMPLE_CATEGORIES]


def sample_habits(today: Optional[date] = None) -> List[Habit]:
    """
    Build the sample habits with history ending yesterday

    The most recent `completed` days of each history are completed, the
    older ones are not. Each habit was created on its first logged day.

    Args:
        today: Reference day; defaults to today in the app timezone

    Returns:
        Fresh Habit instances
    """
    today = today or get_today_date()
    habits = []

    for name, category_id, streak, days, completed in SAMPLE_HABITS:
        entries = [
            HabitEntry(date=today - timedelta(days=offset + 1), is_completed=offset < completed)
            for offset in range(days)
        ]
        habits.append(Habit(
            name=name,
            category_id=category_id,
            streak=streak,
            entries=entries,
            created_date=today - timedelta(days=days)
        ))

    return habits


def load_sample_data(category_store, habit_service, today: Optional[date] = None) -> None:
    """
    Populate empty stores with the sample categories and habits

    Args:
        category_store: CategoryStore to fill
        habit_service: HabitService to fill
        today: Reference day for the generated history
    """
    for category in sample_categories():
        category_store.add_category(category)
    for habit in sample_habits(today):
        habit_service.add_habit(habit, today=today)

    logger.info(f"Loaded {len(SAMPLE_CATEGORIES)} sample categories and {len(SAMPLE_HABITS)} sample habits")
