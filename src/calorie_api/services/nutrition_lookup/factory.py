"""
Factory for creating nutrition lookup service instances.

Reads configuration from settings and returns the appropriate provider.
"""

import logging
from functools import lru_cache

from calorie_api.core.config import get_settings

from .api_ninjas_provider import ApiNinjasNutritionLookup
from .base import NutritionLookupService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_nutrition_lookup_service() -> NutritionLookupService | None:
    """
    Get the configured nutrition lookup service.

    Configuration is read from settings:
    - nutrition_api_key: API Ninjas key
    - nutrition_api_base_url: Endpoint URL
    - nutrition_api_timeout: Request timeout (unset = transport default)

    Returns:
        Configured NutritionLookupService instance, or None if not configured
    """
    settings = get_settings()

    if not settings.is_nutrition_configured:
        logger.warning("Nutrition lookup not configured (missing API key)")
        return None

    logger.info("Initializing API Ninjas nutrition lookup service")

    return ApiNinjasNutritionLookup(
        api_key=settings.nutrition_api_key,
        base_url=settings.nutrition_api_base_url,
        timeout=settings.nutrition_api_timeout,
    )


def clear_service_cache():
    """Clear the cached service instance (useful for testing)."""
    get_nutrition_lookup_service.cache_clear()
