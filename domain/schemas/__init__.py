"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate, UserResponse
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMutationResponse,
    MealSummaryResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealMutationResponse",
    "MealSummaryResponse",
]
