"""
Health Routes - Liveness and engine state summary
"""
from fastapi import APIRouter, Depends

from cadenza.core.dependencies import get_app_state, AppState
from cadenza.services import scheduler
from cadenza.utils.timezone import get_today_date

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(state: AppState = Depends(get_app_state)):
    """Report that the engine is up, with collection sizes and rollover status"""
    return {
        "status": "ok",
        "today": str(get_today_date()),
        "habits": len(state.habit_service.get_habits()),
        "categories": len(state.category_store.get_categories()),
        "rollover_running": scheduler.service.scheduler is not None
    }
