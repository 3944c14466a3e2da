"""
Habit Routes - Endpoints for the habit collection
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from cadenza.core.config import settings
from cadenza.core.dependencies import get_category_store, get_habit_service
from cadenza.core.exceptions import (
    DuplicateIdError,
    InvariantViolation,
    NotFoundError
)
from cadenza.models.habit import (
    AddHabitRequest,
    Habit,
    HabitEntry,
    HabitStats,
    HabitView,
    LogEntryRequest,
    ToggleCompletionRequest
)
from cadenza.services.categories import CategoryStore
from cadenza.services.habits import HabitService, stats

router = APIRouter(prefix="/habits", tags=["habits"])


def to_view(habit: Habit, category_store: CategoryStore) -> HabitView:
    """Attach the resolved category and headline metrics to a habit"""
    return HabitView(
        habit=habit,
        category=category_store.resolve(habit.category_id),
        completion_rate=stats.completion_rate(habit),
        total_completions=stats.total_completions(habit)
    )


@router.get("", response_model=List[HabitView])
async def list_habits(
    category_id: Optional[str] = None,
    habit_service: HabitService = Depends(get_habit_service),
    category_store: CategoryStore = Depends(get_category_store)
):
    """List habits, optionally filtered by category"""
    habits = habit_service.filter_by_category(category_id)
    return [to_view(habit, category_store) for habit in habits]


@router.post("", response_model=HabitView, status_code=201)
async def add_habit(
    request: AddHabitRequest,
    habit_service: HabitService = Depends(get_habit_service),
    category_store: CategoryStore = Depends(get_category_store)
):
    """Add a new habit"""
    fields = request.model_dump(exclude_none=True)
    try:
        habit = habit_service.add_habit(Habit(**fields))
        return to_view(habit, category_store)
    except DuplicateIdError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvariantViolation as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/{habit_id}", response_model=Habit)
async def remove_habit(habit_id: str, habit_service: HabitService = Depends(get_habit_service)):
    """Remove a habit and its entries"""
    try:
        return habit_service.remove_habit(habit_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{habit_id}/toggle", response_model=HabitView)
async def toggle_completion(
    habit_id: str,
    request: Optional[ToggleCompletionRequest] = None,
    habit_service: HabitService = Depends(get_habit_service),
    category_store: CategoryStore = Depends(get_category_store)
):
    """Flip a habit's completion for today"""
    today = request.today if request else None
    try:
        habit = habit_service.toggle_completion(habit_id, today)
        return to_view(habit, category_store)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{habit_id}/entries", response_model=HabitEntry, status_code=201)
async def log_entry(
    habit_id: str,
    request: LogEntryRequest,
    habit_service: HabitService = Depends(get_habit_service)
):
    """Record an entry for a specific day"""
    try:
        return habit_service.log_entry(habit_id, request.date, request.is_completed, request.note)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvariantViolation as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/{habit_id}/stats", response_model=HabitStats)
async def get_habit_stats(
    habit_id: str,
    limit: Optional[int] = None,
    habit_service: HabitService = Depends(get_habit_service)
):
    """Derived statistics for one habit"""
    try:
        habit = habit_service.get_habit(habit_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return stats.habit_stats(habit, limit=limit if limit is not None else settings.RECENT_ENTRIES_LIMIT)
