"""
Navigation Routes - Endpoints for the selection state
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from cadenza.core.dependencies import get_category_store, get_navigation
from cadenza.core.exceptions import NotFoundError
from cadenza.models.habit import Habit, HabitView
from cadenza.models.selection import (
    NavigationStateResponse,
    SelectHabitRequest,
    SelectRequest
)
from cadenza.routes.habits import to_view
from cadenza.services.categories import CategoryStore
from cadenza.services.navigation import NavigationState

router = APIRouter(prefix="/navigation", tags=["navigation"])


def to_response(navigation: NavigationState) -> NavigationStateResponse:
    return NavigationStateResponse(
        selection=navigation.selection,
        selected_habit=navigation.selected_habit()
    )


@router.get("", response_model=NavigationStateResponse)
async def get_state(navigation: NavigationState = Depends(get_navigation)):
    """Current selection and focused habit"""
    return to_response(navigation)


@router.post("/select", response_model=NavigationStateResponse)
async def select(request: SelectRequest, navigation: NavigationState = Depends(get_navigation)):
    """Replace the active selection"""
    navigation.select(request.selection)
    return to_response(navigation)


@router.get("/visible", response_model=List[HabitView])
async def visible_habits(
    navigation: NavigationState = Depends(get_navigation),
    category_store: CategoryStore = Depends(get_category_store)
):
    """Habits matching the active selection"""
    return [to_view(habit, category_store) for habit in navigation.visible_habits()]


@router.post("/habit", response_model=Habit)
async def select_habit(request: SelectHabitRequest, navigation: NavigationState = Depends(get_navigation)):
    """Focus a single habit for the detail view"""
    try:
        return navigation.select_habit(request.habit_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/clear", response_model=NavigationStateResponse)
async def clear_selection(navigation: NavigationState = Depends(get_navigation)):
    """Drop the focused habit and return to All"""
    navigation.clear_selection()
    return to_response(navigation)
