"""
Tests for repository classes.

Validates the data access layer directly:
- UserRepository: creation, lookups by email and session, duplicate e-mails
- MealRepository: owner-scoped lookups, ordering, updates, deletes and counts
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, unique_email
from repositories import UserRepository, MealRepository
from domain.enums import DietStatus
from domain.models import AppUser
from app.exceptions import ConflictError


# =============================================================================
# USER REPOSITORY TESTS
# =============================================================================


def test_user_repository_create_and_lookup(db_session: Session):
    repo = UserRepository(db_session)
    email = unique_email("victor")
    session_id = str(uuid.uuid4())

    user = repo.create_user("Victor Manoel", email, session_id)

    assert isinstance(user.user_id, uuid.UUID)
    assert user.created_at is not None
    found = repo.get_by_session_id(session_id)
    assert found.user_id == user.user_id
    assert found.email == email
    assert repo.get_by_session_id(str(uuid.uuid4())) is None


def test_user_repository_duplicate_email(db_session: Session):
    repo = UserRepository(db_session)
    email = unique_email("duplicate")
    repo.create_user("User One", email, str(uuid.uuid4()))

    with pytest.raises(ConflictError):
        repo.create_user("User Two", email, str(uuid.uuid4()))

    # Session is usable again after the rollback
    assert db_session.query(AppUser).filter(AppUser.email == email).count() == 1


# =============================================================================
# MEAL REPOSITORY TESTS
# =============================================================================


@pytest.fixture
def owners(db_session: Session):
    repo = UserRepository(db_session)
    return (
        repo.create_user("Emma Johnson", unique_email("emma"), str(uuid.uuid4())),
        repo.create_user("Raj Patel", unique_email("raj"), str(uuid.uuid4())),
    )


def test_meal_repository_create_defaults(db_session: Session, owners):
    owner, _ = owners
    repo = MealRepository(db_session)

    meal = repo.create_meal(owner.user_id, "Almoço", "Arroz", DietStatus.ON_DIET)

    assert isinstance(meal.id, uuid.UUID)
    assert meal.created_at is not None
    assert repo.get_owned(owner.user_id, meal.id).name == "Almoço"


def test_meal_repository_get_owned(db_session: Session, owners):
    owner, other = owners
    repo = MealRepository(db_session)
    meal = repo.create_meal(owner.user_id, "Salad", "Greens", DietStatus.ON_DIET)

    assert repo.get_owned(owner.user_id, meal.id).id == meal.id
    assert repo.get_owned(other.user_id, meal.id) is None
    assert repo.get_owned(owner.user_id, uuid.uuid4()) is None


def test_meal_repository_orders_by_created_at(db_session: Session, owners):
    owner, _ = owners
    repo = MealRepository(db_session)
    start = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)
    for offset, name in [(2, "Dinner"), (0, "Breakfast"), (1, "Lunch")]:
        repo.create_meal(
            owner.user_id,
            name,
            "",
            DietStatus.OFF_DIET,
            created_at=start + timedelta(hours=offset),
        )

    newest_first = [m.name for m in repo.get_by_user_id(owner.user_id)]
    oldest_first = [m.name for m in repo.get_by_user_id(owner.user_id, newest_first=False)]

    assert newest_first == ["Dinner", "Lunch", "Breakfast"]
    assert oldest_first == ["Breakfast", "Lunch", "Dinner"]


def test_meal_repository_update_owned(db_session: Session, owners):
    owner, other = owners
    repo = MealRepository(db_session)
    meal = repo.create_meal(owner.user_id, "Almoço", "Arroz", DietStatus.ON_DIET)

    assert (
        repo.update_owned(other.user_id, meal.id, "Hijack", "", DietStatus.OFF_DIET)
        is None
    )

    updated = repo.update_owned(
        owner.user_id, meal.id, "Jantar", "Batata frita", DietStatus.OFF_DIET
    )
    assert updated.name == "Jantar"
    assert updated.is_on_diet is DietStatus.OFF_DIET


def test_meal_repository_delete_owned_counts_rows(db_session: Session, owners):
    owner, other = owners
    repo = MealRepository(db_session)
    meal_id = repo.create_meal(owner.user_id, "Snack", "Apple", DietStatus.ON_DIET).id

    assert repo.delete_owned(other.user_id, meal_id) == 0
    assert repo.delete_owned(owner.user_id, meal_id) == 1
    assert repo.delete_owned(owner.user_id, meal_id) == 0
    assert repo.get_owned(owner.user_id, meal_id) is None


def test_meal_repository_counts(db_session: Session, owners):
    owner, other = owners
    repo = MealRepository(db_session)
    for status in [DietStatus.ON_DIET, DietStatus.ON_DIET, DietStatus.OFF_DIET]:
        repo.create_meal(owner.user_id, "Meal", "", status)
    repo.create_meal(other.user_id, "Meal", "", DietStatus.ON_DIET)

    assert repo.count_by_user_id(owner.user_id) == 3
    assert repo.count_by_user_id(owner.user_id, DietStatus.ON_DIET) == 2
    assert repo.count_by_user_id(owner.user_id, DietStatus.OFF_DIET) == 1
    assert repo.count_by_user_id(uuid.uuid4()) == 0
