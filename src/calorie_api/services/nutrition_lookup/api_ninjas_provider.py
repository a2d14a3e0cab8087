"""
API Ninjas provider for nutrition lookup.

GET https://api.api-ninjas.com/v1/nutrition?query=<text> with an X-Api-Key
header; the reply is a JSON array of nutrition records.
"""

import logging
import math
from typing import Any

import httpx

from .base import NutritionFacts, NutritionLookupError, NutritionLookupService

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = (
    "API response contains invalid values for calories or serving size. "
    "Please ensure you have access to the required data."
)


def _finite_float(value: Any) -> float | None:
    """Parse a numeric field, returning None when it is absent or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class ApiNinjasNutritionLookup(NutritionLookupService):
    """
    Nutrition lookup using the API Ninjas nutrition endpoint.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.api-ninjas.com/v1/nutrition",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize API Ninjas provider.

        Args:
            api_key: API Ninjas key
            base_url: Nutrition endpoint URL
            timeout: Request timeout in seconds (None keeps the httpx default)
            transport: Optional transport override
        """
        self.api_key = api_key
        self.base_url = base_url
        client_kwargs: dict[str, Any] = {"transport": transport}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(**client_kwargs)

    @property
    def provider_name(self) -> str:
        return "api_ninjas"

    async def lookup(self, query: str) -> NutritionFacts:
        """Query API Ninjas and extract calories/serving size from the first record."""
        logger.info(f"Looking up nutrition for: {query}")

        try:
            response = await self._client.get(
                self.base_url,
                params={"query": query},
                headers={"X-Api-Key": self.api_key},
            )
        except httpx.RequestError as e:
            logger.error(f"Nutrition request failed: {e}")
            raise NutritionLookupError(
                message="Request failed",
                error_code="CONNECTION_ERROR",
                provider=self.provider_name,
                details=str(e),
            ) from e

        if response.status_code != 200:
            logger.error(f"Nutrition API error: {response.status_code} - {response.text}")
            raise NutritionLookupError(
                message="Error",
                error_code="API_ERROR",
                provider=self.provider_name,
                status_code=response.status_code,
                details=response.text,
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Error parsing nutrition API response: {e}")
            raise NutritionLookupError(
                message="Error parsing API response",
                error_code="PARSE_ERROR",
                provider=self.provider_name,
                details=str(e),
            ) from e

        logger.debug(f"Nutrition API response body: {body}")
        return self._parse_first_record(body)

    def _parse_first_record(self, body: Any) -> NutritionFacts:
        """Take the first record as authoritative; no disambiguation between matches."""
        if not isinstance(body, list) or not body or not isinstance(body[0], dict):
            logger.error(f"Invalid nutrition API response: {body}")
            raise NutritionLookupError(
                message="Invalid API response",
                error_code="INVALID_RESPONSE",
                provider=self.provider_name,
            )

        record = body[0]
        calories = _finite_float(record.get("calories"))
        serving_size_g = _finite_float(record.get("serving_size_g"))

        if calories is None or serving_size_g is None:
            # Free-tier keys get placeholder strings instead of these fields
            logger.error(f"Nutrition API response has invalid calories or serving size: {body}")
            raise NutritionLookupError(
                message=MISSING_DATA_MESSAGE,
                error_code="MISSING_DATA",
                provider=self.provider_name,
            )

        return NutritionFacts(
            food_name=record.get("name"),
            calories=calories,
            serving_size_g=serving_size_g,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
