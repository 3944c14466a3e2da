"""
Selection models - the active filter mode of the navigation state
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from cadenza.models.habit import Habit, NotificationFrequency


class TodaySelection(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["today"] = "today"


class AllSelection(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["all"] = "all"


class ScheduleSelection(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["schedule"] = "schedule"
    frequency: NotificationFrequency


class CategorySelection(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["category"] = "category"
    category_id: str


Selection = Annotated[
    Union[TodaySelection, AllSelection, ScheduleSelection, CategorySelection],
    Field(discriminator="kind")
]


class SelectRequest(BaseModel):
    """Request model for changing the active selection"""
    selection: Selection


class SelectHabitRequest(BaseModel):
    """Request model for focusing a single habit"""
    habit_id: str = Field(..., min_length=1)


class NavigationStateResponse(BaseModel):
    """Current selection plus the focused habit, if any"""
    selection: Selection
    selected_habit: Optional[Habit] = None
