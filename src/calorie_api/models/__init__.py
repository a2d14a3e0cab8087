"""Pydantic models for API schemas."""

from .calorie_intake import (
    AddCalorieIntakeRequest,
    ApiResponse,
    CalorieEntry,
    CalorieIntakeByDateRequest,
    CalorieIntakeByLimitRequest,
    DeleteCalorieIntakeRequest,
    GoalCalorieIntake,
    QuantityType,
)
from .user import HeightRecord, UserProfile, WeightRecord

__all__ = [
    # Calorie intake
    "AddCalorieIntakeRequest",
    "ApiResponse",
    "CalorieEntry",
    "CalorieIntakeByDateRequest",
    "CalorieIntakeByLimitRequest",
    "DeleteCalorieIntakeRequest",
    "GoalCalorieIntake",
    "QuantityType",
    # User
    "HeightRecord",
    "UserProfile",
    "WeightRecord",
]
