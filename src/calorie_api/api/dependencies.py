"""FastAPI dependency injection factories."""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from calorie_api.core.config import Settings, get_settings
from calorie_api.core.security import get_current_user_id
from calorie_api.db.mongo import MongoDB
from calorie_api.db.unit_of_work import UnitOfWork
from calorie_api.services.calorie_intake import CalorieIntakeService
from calorie_api.services.nutrition_lookup import (
    NutritionLookupService,
    get_nutrition_lookup_service,
)
from calorie_api.utils.dates import get_zone


# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
CurrentUserDep = Annotated[str, Depends(get_current_user_id)]


def get_database() -> AsyncIOMotorDatabase:
    """Get the MongoDB database instance."""
    return MongoDB.get_database()


def get_uow(
    settings: SettingsDep,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> UnitOfWork:
    """
    Get Unit of Work instance.

    Args:
        settings: Injected settings
        db: Injected database instance

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(db, users_collection=settings.users_collection)


# Type alias for UoW dependency
UoWDep = Annotated[UnitOfWork, Depends(get_uow)]

NutritionLookupDep = Annotated[
    NutritionLookupService | None, Depends(get_nutrition_lookup_service)
]


def get_calorie_intake_service(
    uow: UoWDep,
    nutrition_service: NutritionLookupDep,
    settings: SettingsDep,
) -> CalorieIntakeService:
    """
    Get CalorieIntakeService instance.

    Args:
        uow: Injected Unit of Work
        nutrition_service: Injected nutrition lookup provider
        settings: Injected settings

    Returns:
        CalorieIntakeService instance
    """
    return CalorieIntakeService(uow, nutrition_service, tz=get_zone(settings.timezone))


# Type aliases for service dependencies
CalorieIntakeServiceDep = Annotated[CalorieIntakeService, Depends(get_calorie_intake_service)]
