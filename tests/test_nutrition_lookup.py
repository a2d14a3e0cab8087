"""Unit tests for the API Ninjas nutrition lookup provider."""

from unittest.mock import patch

import httpx
import pytest

from calorie_api.core.config import Settings
from calorie_api.services.nutrition_lookup import (
    ApiNinjasNutritionLookup,
    NutritionLookupError,
    clear_service_cache,
    get_nutrition_lookup_service,
)

BASE_URL = "https://nutrition.test/v1/nutrition"

BANANA = {
    "name": "banana",
    "calories": 89.4,
    "serving_size_g": 100.0,
    "fat_total_g": 0.3,
}


def make_provider(handler) -> ApiNinjasNutritionLookup:
    return ApiNinjasNutritionLookup(
        api_key="secret-key",
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )


class TestApiNinjasNutritionLookup:
    """Tests for ApiNinjasNutritionLookup.lookup."""

    @pytest.mark.asyncio
    async def test_lookup_success(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[BANANA])

        provider = make_provider(handler)
        facts = await provider.lookup("banana")

        assert facts.calories == 89.4
        assert facts.serving_size_g == 100.0
        assert facts.food_name == "banana"
        assert len(seen) == 1
        assert seen[0].headers["X-Api-Key"] == "secret-key"
        assert seen[0].url.params["query"] == "banana"
        await provider.close()

    @pytest.mark.asyncio
    async def test_first_result_wins(self):
        apple = {"name": "apple", "calories": 52, "serving_size_g": 100}
        provider = make_provider(lambda request: httpx.Response(200, json=[apple, BANANA]))

        facts = await provider.lookup("apple banana")

        assert facts.food_name == "apple"
        assert facts.calories == 52

    @pytest.mark.asyncio
    async def test_numeric_strings_are_accepted(self):
        record = {"name": "rice", "calories": "130", "serving_size_g": "100"}
        provider = make_provider(lambda request: httpx.Response(200, json=[record]))

        facts = await provider.lookup("rice")

        assert facts.calories == 130
        assert facts.serving_size_g == 100

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = make_provider(handler)

        with pytest.raises(NutritionLookupError) as exc_info:
            await provider.lookup("banana")

        assert exc_info.value.error_code == "CONNECTION_ERROR"
        assert exc_info.value.status_code == 500
        assert "connection refused" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_non_200_status_is_propagated(self):
        provider = make_provider(
            lambda request: httpx.Response(401, text='{"error": "Invalid API Key."}')
        )

        with pytest.raises(NutritionLookupError) as exc_info:
            await provider.lookup("banana")

        assert exc_info.value.error_code == "API_ERROR"
        assert exc_info.value.status_code == 401
        assert "Invalid API Key" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_unparsable_body(self):
        provider = make_provider(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(NutritionLookupError) as exc_info:
            await provider.lookup("banana")

        assert exc_info.value.error_code == "PARSE_ERROR"
        assert exc_info.value.message == "Error parsing API response"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [[], {"items": [BANANA]}, ["banana"], "banana"])
    async def test_invalid_response_shape(self, body):
        provider = make_provider(lambda request: httpx.Response(200, json=body))

        with pytest.raises(NutritionLookupError) as exc_info:
            await provider.lookup("banana")

        assert exc_info.value.error_code == "INVALID_RESPONSE"
        assert exc_info.value.message == "Invalid API response"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "record",
        [
            {"name": "banana", "calories": "Only available for premium subscribers.", "serving_size_g": 100},
            {"name": "banana", "calories": 89, "serving_size_g": "Only available for premium subscribers."},
            {"name": "banana", "serving_size_g": 100},
            {"name": "banana", "calories": "NaN", "serving_size_g": 100},
        ],
    )
    async def test_missing_nutrition_data(self, record):
        provider = make_provider(lambda request: httpx.Response(200, json=[record]))

        with pytest.raises(NutritionLookupError) as exc_info:
            await provider.lookup("banana")

        assert exc_info.value.error_code == "MISSING_DATA"
        assert exc_info.value.status_code == 500
        assert "access to the required data" in exc_info.value.message


class TestFactory:
    """Tests for get_nutrition_lookup_service."""

    def setup_method(self):
        clear_service_cache()

    def teardown_method(self):
        clear_service_cache()

    def test_returns_none_without_api_key(self):
        settings = Settings(_env_file=None, nutrition_api_key="")
        with patch(
            "calorie_api.services.nutrition_lookup.factory.get_settings",
            return_value=settings,
        ):
            assert get_nutrition_lookup_service() is None

    def test_builds_api_ninjas_provider(self):
        settings = Settings(_env_file=None, nutrition_api_key="abc", nutrition_api_base_url=BASE_URL)
        with patch(
            "calorie_api.services.nutrition_lookup.factory.get_settings",
            return_value=settings,
        ):
            service = get_nutrition_lookup_service()

        assert isinstance(service, ApiNinjasNutritionLookup)
        assert service.api_key == "abc"
        assert service.base_url == BASE_URL
        assert get_nutrition_lookup_service() is service
