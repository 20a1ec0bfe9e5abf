from typing import List, Dict, Any, Union
from sqlalchemy.orm import Session
import logging
import uuid

from domain.models import Meal
from domain.enums import DietStatus
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for meal logging.

    Every operation takes the owner id resolved from the caller's session;
    owner ids are never read from request bodies.
    """

    @staticmethod
    def validate_meal_data(
        name: str, description: str, is_on_diet: Union[DietStatus, str, bool]
    ) -> Dict[str, Any]:
        """
        Validate and normalize meal fields before they are persisted.

        Args:
            name: Display name of the meal
            description: Free text description
            is_on_diet: DietStatus, its string value ("yes"/"no") or a bool

        Returns:
            Dict with normalized name, description and DietStatus

        Raises:
            ServiceValidationError: If the name is blank or the flag is unknown
        """
        normalized_name = (name or "").strip()
        if not normalized_name:
            raise ServiceValidationError(
                "Meal name must not be empty", details={"field": "name"}
            )

        if description is None:
            raise ServiceValidationError(
                "Meal description is required", details={"field": "description"}
            )

        if isinstance(is_on_diet, bool):
            status = DietStatus.from_flag(is_on_diet)
        else:
            try:
                status = DietStatus(is_on_diet)
            except ValueError as e:
                raise ServiceValidationError(
                    f"Invalid diet flag: {is_on_diet!r}",
                    details={"field": "is_on_diet", "allowed": ["yes", "no"]},
                ) from e

        return {
            "name": normalized_name,
            "description": description,
            "is_on_diet": status,
        }

    @staticmethod
    def create_meal(db: Session, owner_id: uuid.UUID, meal_data: MealCreate) -> Meal:
        """Log a new meal for the owner"""
        validated = MealService.validate_meal_data(
            meal_data.name, meal_data.description, meal_data.is_on_diet
        )
        meal = MealRepository(db).create_meal(owner_id, **validated)
        logger.info(
            f"meal_created owner_id={owner_id} meal_id={meal.id} "
            f"is_on_diet={meal.is_on_diet.value}"
        )
        return meal

    @staticmethod
    def list_meals(db: Session, owner_id: uuid.UUID) -> List[Meal]:
        """All meals of the owner, newest first"""
        meals = MealRepository(db).get_by_user_id(owner_id)
        logger.debug(f"meals_listed owner_id={owner_id} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, owner_id: uuid.UUID, meal_id: uuid.UUID) -> Meal:
        """
        Fetch one meal.

        Raises:
            NotFoundError: If the meal does not exist or is not owned by owner_id
        """
        meal = MealRepository(db).get_owned(owner_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found owner_id={owner_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    @staticmethod
    def update_meal(
        db: Session, owner_id: uuid.UUID, meal_id: uuid.UUID, meal_data: MealUpdate
    ) -> Meal:
        """
        Replace name, description and diet flag of an owned meal.
        id, owner and created_at are left untouched.

        Raises:
            NotFoundError: If the meal does not exist or is not owned by owner_id
            ServiceValidationError: If the new values are invalid
        """
        validated = MealService.validate_meal_data(
            meal_data.name, meal_data.description, meal_data.is_on_diet
        )
        meal = MealRepository(db).update_owned(owner_id, meal_id, **validated)
        if meal is None:
            logger.warning(
                f"meal_update_failed owner_id={owner_id} meal_id={meal_id} reason=not_found"
            )
            raise NotFoundError(f"Meal {meal_id} not found")
        logger.info(
            f"meal_updated owner_id={owner_id} meal_id={meal_id} "
            f"is_on_diet={meal.is_on_diet.value}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, owner_id: uuid.UUID, meal_id: uuid.UUID) -> None:
        """
        Delete an owned meal.

        Raises:
            NotFoundError: If no owned meal was deleted
        """
        deleted = MealRepository(db).delete_owned(owner_id, meal_id)
        if not deleted:
            logger.warning(
                f"meal_delete_failed owner_id={owner_id} meal_id={meal_id} reason=not_found"
            )
            raise NotFoundError(f"Meal {meal_id} not found")
        logger.info(f"meal_deleted owner_id={owner_id} meal_id={meal_id}")
