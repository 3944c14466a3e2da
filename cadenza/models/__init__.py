"""
Pydantic models for the application
"""
from cadenza.models.category import Category, AddCategoryRequest
from cadenza.models.habit import (
    NotificationFrequency,
    HabitEntry,
    Habit,
    HabitStats,
    HabitView,
    AddHabitRequest,
    ToggleCompletionRequest,
    LogEntryRequest
)
from cadenza.models.selection import (
    TodaySelection,
    AllSelection,
    ScheduleSelection,
    CategorySelection,
    Selection,
    SelectRequest,
    SelectHabitRequest,
    NavigationStateResponse
)

__all__ = [
    "Category",
    "AddCategoryRequest",
    "NotificationFrequency",
    "HabitEntry",
    "Habit",
    "HabitStats",
    "HabitView",
    "AddHabitRequest",
    "ToggleCompletionRequest",
    "LogEntryRequest",
    "TodaySelection",
    "AllSelection",
    "ScheduleSelection",
    "CategorySelection",
    "Selection",
    "SelectRequest",
    "SelectHabitRequest",
    "NavigationStateResponse"
]
