"""
Nutrition Lookup Service - Facade over external nutrition data APIs.

API Ninjas is the provider; the first record it returns for a query wins.
"""

from .api_ninjas_provider import ApiNinjasNutritionLookup
from .base import (
    NutritionFacts,
    NutritionLookupError,
    NutritionLookupService,
)
from .factory import clear_service_cache, get_nutrition_lookup_service

__all__ = [
    "ApiNinjasNutritionLookup",
    "NutritionFacts",
    "NutritionLookupError",
    "NutritionLookupService",
    "clear_service_cache",
    "get_nutrition_lookup_service",
]
