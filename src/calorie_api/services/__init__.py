"""Business logic services."""

from .calorie_intake import CalorieIntakeService
from .calories import estimate_calories, normalize_quantity
from .goal import goal_calorie_intake

__all__ = [
    "CalorieIntakeService",
    "estimate_calories",
    "goal_calorie_intake",
    "normalize_quantity",
]
