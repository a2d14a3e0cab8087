"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from calorie_api.core.config import Settings
from calorie_api.core.security import create_access_token
from calorie_api.models.calorie_intake import CalorieEntry, QuantityType
from calorie_api.models.user import HeightRecord, UserProfile, WeightRecord
from calorie_api.services.calorie_intake import CalorieIntakeService
from calorie_api.services.nutrition_lookup.base import NutritionFacts, NutritionLookupService

# Fixed "now" for every date-dependent test
NOW = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        _env_file=None,
        jwt_secret_key="test-secret",
        nutrition_api_key="test-key",
        timezone="UTC",
    )


@pytest.fixture
def user_id() -> str:
    return str(ObjectId())


@pytest.fixture
def sample_entries() -> list[CalorieEntry]:
    """Calorie history spanning several days before NOW."""
    return [
        CalorieEntry(
            item="oatmeal",
            date=datetime(2024, 3, 15, 8, 0, tzinfo=timezone.utc),
            quantity=100,
            quantity_type=QuantityType.G,
            calorie_intake=389,
        ),
        CalorieEntry(
            item="apple",
            date=datetime(2024, 3, 15, 23, 0, tzinfo=timezone.utc),
            quantity=150,
            quantity_type=QuantityType.G,
            calorie_intake=78,
        ),
        CalorieEntry(
            item="apple",
            date=datetime(2024, 3, 16, 0, 0, tzinfo=timezone.utc),
            quantity=0.2,
            quantity_type=QuantityType.KG,
            calorie_intake=104,
        ),
        CalorieEntry(
            item="milk",
            date=datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc),
            quantity=1,
            quantity_type=QuantityType.L,
            calorie_intake=420,
        ),
    ]


@pytest.fixture
def profile(user_id, sample_entries) -> UserProfile:
    """A male user maintaining weight, with a calorie history."""
    return UserProfile(
        id=user_id,
        height=[HeightRecord(height=170), HeightRecord(height=175)],
        weight=[WeightRecord(weight=72), WeightRecord(weight=70)],
        dob=datetime(1994, 6, 1, tzinfo=timezone.utc),
        gender="male",
        goal="maintain",
        calorie_intake=sample_entries,
    )


@pytest.fixture
def uow(profile):
    """Unit of Work whose users repository is an AsyncMock."""
    users = MagicMock()
    users.get_profile = AsyncMock(return_value=profile)
    users.push_calorie_entry = AsyncMock(return_value=True)
    users.pull_calorie_entries = AsyncMock(return_value=True)
    mock_uow = MagicMock()
    mock_uow.users = users
    return mock_uow


@pytest.fixture
def nutrition_service():
    """Nutrition provider returning 89 kcal per 100 g (banana)."""
    service = MagicMock(spec=NutritionLookupService)
    service.provider_name = "mock"
    service.lookup = AsyncMock(
        return_value=NutritionFacts(food_name="banana", calories=89, serving_size_g=100)
    )
    return service


@pytest.fixture
def calorie_service(uow, nutrition_service) -> CalorieIntakeService:
    return CalorieIntakeService(
        uow,
        nutrition_service,
        tz=ZoneInfo("UTC"),
        clock=lambda: NOW,
    )


@pytest.fixture
def auth_headers(settings, user_id) -> dict[str, str]:
    token = create_access_token(user_id, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(settings, calorie_service):
    """
    Test client with settings and the calorie service overridden.

    The lifespan is not entered, so no MongoDB connection is made.
    """
    from calorie_api.api.dependencies import get_calorie_intake_service
    from calorie_api.core.config import get_settings
    from calorie_api.main import app

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_calorie_intake_service] = lambda: calorie_service
    yield TestClient(app)
    app.dependency_overrides.clear()
