"""
Category Routes - Endpoints for the category store
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from cadenza.core.dependencies import get_category_store
from cadenza.core.exceptions import DuplicateIdError, NotFoundError
from cadenza.models.category import AddCategoryRequest, Category
from cadenza.services.categories import CategoryStore

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
async def list_categories(category_store: CategoryStore = Depends(get_category_store)):
    """List all categories"""
    return category_store.get_categories()


@router.post("", response_model=Category, status_code=201)
async def add_category(request: AddCategoryRequest, category_store: CategoryStore = Depends(get_category_store)):
    """Add a new category"""
    try:
        return category_store.add_category(Category(**request.model_dump(exclude_none=True)))
    except DuplicateIdError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{category_id}", response_model=Category)
async def remove_category(category_id: str, category_store: CategoryStore = Depends(get_category_store)):
    """Remove a category; habits that use it fall back to Uncategorized"""
    try:
        return category_store.remove_category(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
