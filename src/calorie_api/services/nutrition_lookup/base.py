"""
Base classes and models for nutrition lookup service.

Defines the abstract interface that all providers must implement,
plus the standardized result model.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field


class NutritionFacts(BaseModel):
    """Calories of a food for its reference serving."""

    food_name: str | None = Field(None, description="Food name reported by the provider")
    calories: float = Field(..., description="Energy in kcal per reference serving")
    serving_size_g: float = Field(..., description="Reference serving size in grams")


class NutritionLookupError(Exception):
    """
    Error during nutrition lookup.

    `status_code` is the HTTP status the API should answer with: the
    upstream status for non-200 replies, 500 for everything else.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "LOOKUP_ERROR",
        provider: str = "unknown",
        status_code: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.provider = provider
        self.status_code = status_code
        self.details = details


class NutritionLookupService(ABC):
    """
    Abstract base class for nutrition lookup services.

    Providers perform exactly one outbound request per lookup; there is
    no retry or caching at this layer.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of this provider."""
        ...

    @abstractmethod
    async def lookup(self, query: str) -> NutritionFacts:
        """
        Resolve calories and reference serving size for a food.

        The first result returned by the provider is taken as authoritative.

        Args:
            query: Free-text food name

        Returns:
            NutritionFacts of the first matching record

        Raises:
            NutritionLookupError: If the source is unreachable, answers with a
                non-200 status, or returns unusable data
        """
        ...

    async def close(self) -> None:
        """Release provider resources."""
        return None
