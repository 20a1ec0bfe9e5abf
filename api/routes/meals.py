"""Meal logging and diet summary routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_current_owner
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMutationResponse,
    MealSummaryResponse,
)
from services import MealService, SummaryService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("dailydiet.api.meals")


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(
    meal: MealCreate,
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Log a meal for the current user"""
    created = MealService.create_meal(db, owner_id, meal)
    return MealResponse.model_validate(created)


@router.get("", response_model=MealListResponse)
def list_meals(
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """List every meal of the current user, newest first"""
    meals = MealService.list_meals(db, owner_id)
    return MealListResponse(meals=[MealResponse.model_validate(m) for m in meals])


# Declared before /{meal_id} so "resume" is not parsed as an id
@router.get("/resume", response_model=MealSummaryResponse)
def get_summary(
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """
    Diet summary for the current user.

    Returns totals of meals on and off the diet, all meals (newest first)
    and the longest run of consecutive on-diet meals.
    """
    return SummaryService.build_summary(db, owner_id)


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: UUID,
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Fetch one meal; 404 when missing or owned by someone else"""
    meal = MealService.get_meal(db, owner_id, meal_id)
    return MealDetailResponse(meal=MealResponse.model_validate(meal))


@router.put(
    "/{meal_id}",
    response_model=MealMutationResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def update_meal(
    meal_id: UUID,
    meal: MealUpdate,
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Edit name, description and diet flag of a meal"""
    updated = MealService.update_meal(db, owner_id, meal_id, meal)
    return MealMutationResponse(
        message="Successfully edited meal!",
        meal=MealResponse.model_validate(updated),
    )


@router.delete(
    "/{meal_id}",
    response_model=MealMutationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_202_ACCEPTED,
)
def delete_meal(
    meal_id: UUID,
    owner_id: UUID = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    """Delete a meal; 404 when nothing owned by the caller was deleted"""
    MealService.delete_meal(db, owner_id, meal_id)
    return MealMutationResponse(message="Successfully deleted meal!")
