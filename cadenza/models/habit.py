"""
Pydantic models for habits and their entry log
"""
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from cadenza.models.category import Category, new_id
from cadenza.utils.timezone import get_today_date


class NotificationFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class HabitEntry(BaseModel):
    """One calendar day's completion record for a habit"""
    id: str = Field(default_factory=new_id)
    date: date
    is_completed: bool = False
    note: Optional[str] = None


class Habit(BaseModel):
    """A tracked recurring activity with its completion history"""
    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=200)
    category_id: str
    is_completed_today: bool = False
    streak: int = Field(0, ge=0)
    entries: List[HabitEntry] = Field(default_factory=list)
    created_date: date = Field(default_factory=get_today_date)
    minimum_notification_frequency: NotificationFrequency = NotificationFrequency.DAILY

    @field_validator("entries")
    @classmethod
    def sort_entries(cls, v: List[HabitEntry]) -> List[HabitEntry]:
        """Entries are stored in chronological order"""
        return sorted(v, key=lambda entry: entry.date)


class HabitStats(BaseModel):
    """Derived statistics for a single habit's detail view"""
    habit_id: str
    completion_rate: float = Field(..., ge=0.0, le=1.0)
    total_completions: int
    current_streak: int
    days_active: int
    recent_entries: List[HabitEntry]


class HabitView(BaseModel):
    """A habit together with its resolved category and headline metrics"""
    habit: Habit
    category: Category
    completion_rate: float
    total_completions: int


class AddHabitRequest(BaseModel):
    """Request model for adding a new habit"""
    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    category_id: str = Field(..., min_length=1, description="Id of the category the habit belongs to")
    minimum_notification_frequency: NotificationFrequency = Field(
        NotificationFrequency.DAILY,
        description="Minimum reminder frequency"
    )
    id: Optional[str] = Field(None, description="Optional explicit id")


class ToggleCompletionRequest(BaseModel):
    """Request model for toggling a habit's completion"""
    today: Optional[date] = Field(None, description="Day to toggle; defaults to today in the app timezone")


class LogEntryRequest(BaseModel):
    """Request model for explicitly logging a day's entry"""
    date: date
    is_completed: bool = True
    note: Optional[str] = Field(None, max_length=1000)
