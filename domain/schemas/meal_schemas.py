from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from domain.enums import DietStatus


class MealCreate(BaseModel):
    """Schema for logging a new meal"""

    name: str = Field(..., min_length=1, max_length=255, description="Meal name")
    description: str = Field(..., max_length=5000, description="What was eaten")
    is_on_diet: DietStatus = Field(
        default=DietStatus.OFF_DIET, description="'yes' if the meal was within the diet"
    )

    @field_validator("name")
    def strip_name(cls, v):
        return v.strip()


class MealUpdate(MealCreate):
    """Schema for editing a meal; all mutable fields are replaced"""

    is_on_diet: DietStatus = Field(
        ..., description="'yes' if the meal was within the diet"
    )


class MealResponse(BaseModel):
    """Schema for meal response"""

    id: UUID
    user_id: UUID
    name: str
    description: str
    is_on_diet: DietStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    meal: MealResponse


class MealMutationResponse(BaseModel):
    message: str
    meal: Optional[MealResponse] = None


class MealSummaryResponse(BaseModel):
    """Diet summary for the current user.

    Serialized with the camelCase names clients already consume.
    """

    total_meals: int = Field(..., ge=0, alias="totalOfMeals")
    total_on_diet: int = Field(..., ge=0, alias="totalOnDiet")
    total_off_diet: int = Field(..., ge=0, alias="totalOutDiet")
    meals: List[MealResponse] = Field(default_factory=list, alias="allMeals")
    best_streak: int = Field(..., ge=0, alias="bestSequence")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
