from sqlalchemy.orm import Session
import logging
import uuid

from domain.enums import DietStatus
from domain.schemas.meal_schemas import MealResponse, MealSummaryResponse
from repositories import MealRepository
from services.streak_calculator import StreakCalculator

logger = logging.getLogger("dailydiet.summary")


class SummaryService:
    @staticmethod
    def build_summary(db: Session, owner_id: uuid.UUID) -> MealSummaryResponse:
        """
        Aggregate a user's meal history.

        Args:
            db: Database session
            owner_id: UUID of the user

        Returns:
            MealSummaryResponse with totals, the meals (newest first) and the
            best on-diet streak. A user without meals gets all zeros.
        """
        repo = MealRepository(db)

        total_meals = repo.count_by_user_id(owner_id)
        total_on_diet = repo.count_by_user_id(owner_id, DietStatus.ON_DIET)
        total_off_diet = repo.count_by_user_id(owner_id, DietStatus.OFF_DIET)

        meals = repo.get_by_user_id(owner_id, newest_first=True)
        best_streak = StreakCalculator.for_meals(meals, newest_first=True)

        logger.info(
            f"summary_built owner_id={owner_id} total={total_meals} "
            f"on_diet={total_on_diet} off_diet={total_off_diet} "
            f"best_streak={best_streak}"
        )

        return MealSummaryResponse(
            total_meals=total_meals,
            total_on_diet=total_on_diet,
            total_off_diet=total_off_diet,
            meals=[MealResponse.model_validate(m) for m in meals],
            best_streak=best_streak,
        )
