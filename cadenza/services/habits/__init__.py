"""
Habits module - Core habit management functionality
"""
from . import repository
from . import service
from . import stats
from . import seed

# Export commonly used names for convenience
from .repository import HabitRepository
from .service import HabitService, check_invariants

from .stats import (
    completion_rate,
    total_completions,
    current_streak,
    recent_entries,
    days_active,
    habit_stats
)

from .seed import (
    sample_categories,
    sample_habits,
    load_sample_data
)

__all__ = [
    # Modules
    'repository',
    'service',
    'stats',
    'seed',

    # Collection
    'HabitRepository',
    'HabitService',
    'check_invariants',

    # Derived metrics
    'completion_rate',
    'total_completions',
    'current_streak',
    'recent_entries',
    'days_active',
    'habit_stats',

    # Sample data
    'sample_categories',
    'sample_habits',
    'load_sample_data'
]
