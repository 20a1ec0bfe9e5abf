"""
Services package - Business logic layer.
"""

from services.streak_calculator import StreakCalculator
from services.meal_service import MealService
from services.summary_service import SummaryService
from services.user_service import UserService

__all__ = [
    "StreakCalculator",
    "MealService",
    "SummaryService",
    "UserService",
]
