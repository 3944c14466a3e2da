"""
Pydantic models for categories
"""
import uuid
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Generate a fresh opaque identifier"""
    return str(uuid.uuid4())


class Category(BaseModel):
    """A named, colored grouping that habits reference by id"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, description="Opaque unique id")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    color: str = Field(..., min_length=1, description="Theme color name")
    icon: str = Field(..., min_length=1, description="Icon reference")


class AddCategoryRequest(BaseModel):
    """Request model for adding a new category"""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    color: str = Field(..., min_length=1, description="Theme color name")
    icon: str = Field(..., min_length=1, description="Icon reference")
    id: Optional[str] = Field(None, description="Optional explicit id")
