"""
Meal Repository - Data access layer for meal logging operations

Every lookup and mutation filters on both the meal id and the owning user,
so a meal owned by someone else behaves exactly like a missing one.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import Meal
from domain.enums import DietStatus


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_owned(self, user_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal only if it belongs to the user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def get_by_user_id(self, user_id: UUID, newest_first: bool = True) -> List[Meal]:
        """Get all meals for a user ordered by creation time"""
        order = Meal.created_at.desc() if newest_first else Meal.created_at.asc()
        return self.db.query(Meal).filter(Meal.user_id == user_id).order_by(order).all()

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        description: str,
        is_on_diet: DietStatus,
        created_at: Optional[datetime] = None,
    ) -> Meal:
        """Create a new meal entry"""
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            is_on_diet=is_on_diet,
        )
        if created_at is not None:
            meal.created_at = created_at
        return self.create(meal)

    def update_owned(
        self,
        user_id: UUID,
        meal_id: UUID,
        name: str,
        description: str,
        is_on_diet: DietStatus,
    ) -> Optional[Meal]:
        """Overwrite the mutable fields of an owned meal; None if not owned"""
        meal = self.get_owned(user_id, meal_id)
        if meal is None:
            return None
        meal.name = name
        meal.description = description
        meal.is_on_diet = is_on_diet
        return self.update(meal)

    def delete_owned(self, user_id: UUID, meal_id: UUID) -> int:
        """Delete an owned meal; returns the number of rows removed"""
        count = (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count

    def count_by_user_id(
        self, user_id: UUID, is_on_diet: Optional[DietStatus] = None
    ) -> int:
        """Count a user's meals, optionally only those with the given status"""
        query = self.db.query(func.count(Meal.id)).filter(Meal.user_id == user_id)
        if is_on_diet is not None:
            query = query.filter(Meal.is_on_diet == is_on_diet)
        return query.scalar() or 0
