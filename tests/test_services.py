"""
Service layer tests for MealService.

Uses real database sessions to verify:
- The explicit validation step (normalization and rejection)
- Owner scoping on every read and write
- Immutable fields surviving updates
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, unique_email
from domain.enums import DietStatus
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import UserRepository
from services.meal_service import MealService
from app.exceptions import NotFoundError, ServiceValidationError


def _user(db: Session, name: str = "Sarah Martinez"):
    return UserRepository(db).create_user(
        name, unique_email("sarah.martinez"), str(uuid.uuid4())
    )


# =============================================================================
# VALIDATION STEP
# =============================================================================


def test_validate_meal_data_trims_name_only():
    validated = MealService.validate_meal_data("  Almoço ", " Arroz e feijão ", "yes")

    assert validated == {
        "name": "Almoço",
        "description": " Arroz e feijão ",
        "is_on_diet": DietStatus.ON_DIET,
    }


def test_validate_meal_data_accepts_empty_description():
    assert MealService.validate_meal_data("Meal", "", "no")["description"] == ""


@pytest.mark.parametrize(
    "flag, expected",
    [
        (True, DietStatus.ON_DIET),
        (False, DietStatus.OFF_DIET),
        ("no", DietStatus.OFF_DIET),
        (DietStatus.ON_DIET, DietStatus.ON_DIET),
    ],
)
def test_validate_meal_data_accepts_flag_forms(flag, expected):
    assert MealService.validate_meal_data("Meal", "", flag)["is_on_diet"] is expected


def test_validate_meal_data_rejects_blank_name():
    with pytest.raises(ServiceValidationError) as exc_info:
        MealService.validate_meal_data("   ", "desc", "yes")

    assert exc_info.value.details == {"field": "name"}


def test_validate_meal_data_rejects_unknown_flag():
    with pytest.raises(ServiceValidationError):
        MealService.validate_meal_data("Meal", "desc", "sometimes")


def test_validate_meal_data_requires_description():
    with pytest.raises(ServiceValidationError):
        MealService.validate_meal_data("Meal", None, "yes")


# =============================================================================
# CRUD
# =============================================================================


def test_create_and_get_meal(db_session: Session):
    user = _user(db_session)

    meal = MealService.create_meal(
        db_session,
        user.user_id,
        MealCreate(name="Almoço", description="Arroz com carne e feijão", is_on_diet="yes"),
    )
    fetched = MealService.get_meal(db_session, user.user_id, meal.id)

    assert fetched.id == meal.id
    assert fetched.user_id == user.user_id
    assert fetched.name == "Almoço"
    assert fetched.description == "Arroz com carne e feijão"
    assert fetched.is_on_diet is DietStatus.ON_DIET
    assert fetched.created_at is not None


def test_get_meal_of_other_owner_raises_not_found(db_session: Session):
    owner = _user(db_session)
    other = _user(db_session, "Michael Chen")
    meal = MealService.create_meal(
        db_session, owner.user_id, MealCreate(name="Salad", description="Greens")
    )

    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, other.user_id, meal.id)


def test_list_meals_is_scoped_to_owner(db_session: Session):
    owner = _user(db_session)
    other = _user(db_session, "Michael Chen")
    for name in ["Breakfast", "Lunch"]:
        MealService.create_meal(
            db_session, owner.user_id, MealCreate(name=name, description="")
        )
    MealService.create_meal(
        db_session, other.user_id, MealCreate(name="Dinner", description="")
    )

    meals = MealService.list_meals(db_session, owner.user_id)

    assert sorted(m.name for m in meals) == ["Breakfast", "Lunch"]
    assert all(m.user_id == owner.user_id for m in meals)


def test_update_meal_keeps_id_owner_and_created_at(db_session: Session):
    user = _user(db_session)
    meal = MealService.create_meal(
        db_session,
        user.user_id,
        MealCreate(name="Almoço", description="Arroz", is_on_diet="yes"),
    )
    original_id, original_created = meal.id, meal.created_at

    updated = MealService.update_meal(
        db_session,
        user.user_id,
        meal.id,
        MealUpdate(name="Jantar", description="Batata frita", is_on_diet="no"),
    )

    assert updated.id == original_id
    assert updated.user_id == user.user_id
    assert updated.created_at == original_created
    assert updated.name == "Jantar"
    assert updated.is_on_diet is DietStatus.OFF_DIET


def test_update_meal_of_other_owner_raises_not_found(db_session: Session):
    owner = _user(db_session)
    other = _user(db_session, "Michael Chen")
    meal = MealService.create_meal(
        db_session, owner.user_id, MealCreate(name="Salad", description="Greens")
    )

    with pytest.raises(NotFoundError):
        MealService.update_meal(
            db_session,
            other.user_id,
            meal.id,
            MealUpdate(name="Stolen", description="", is_on_diet="yes"),
        )

    assert MealService.get_meal(db_session, owner.user_id, meal.id).name == "Salad"


def test_delete_meal(db_session: Session):
    user = _user(db_session)
    meal = MealService.create_meal(
        db_session, user.user_id, MealCreate(name="Snack", description="Apple")
    )
    meal_id = meal.id

    MealService.delete_meal(db_session, user.user_id, meal_id)

    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, user.user_id, meal_id)


def test_delete_missing_or_foreign_meal_raises_not_found(db_session: Session):
    owner = _user(db_session)
    other = _user(db_session, "Michael Chen")
    meal = MealService.create_meal(
        db_session, owner.user_id, MealCreate(name="Snack", description="Apple")
    )

    with pytest.raises(NotFoundError):
        MealService.delete_meal(db_session, other.user_id, meal.id)
    with pytest.raises(NotFoundError):
        MealService.delete_meal(db_session, owner.user_id, uuid.uuid4())

    assert MealService.get_meal(db_session, owner.user_id, meal.id) is not None
