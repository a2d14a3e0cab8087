"""Calorie intake service: logging food, querying history, and goal calories."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from calorie_api.core.exceptions import APIError, NotFoundError, ValidationError
from calorie_api.db.unit_of_work import UnitOfWork
from calorie_api.models.calorie_intake import CalorieEntry
from calorie_api.models.user import UserProfile
from calorie_api.services.calories import (
    estimate_calories,
    normalize_quantity,
    parse_quantity,
    parse_quantity_type,
)
from calorie_api.services.goal import goal_calorie_intake
from calorie_api.services.nutrition_lookup.base import NutritionLookupService
from calorie_api.utils.dates import (
    filter_entries_by_date,
    filter_entries_since,
    parse_date,
    utc_now,
)

logger = logging.getLogger(__name__)

ALL_ENTRIES = "all"


class CalorieIntakeService:
    """
    Service for a user's calorie intake history.

    Adding an entry is the only operation that reaches the nutrition source;
    queries, deletion, and the goal calculation only touch the user document.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        nutrition_service: NutritionLookupService | None,
        tz: ZoneInfo | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize calorie intake service.

        Args:
            uow: Unit of Work for persistence
            nutrition_service: Nutrition lookup provider (None if not configured)
            tz: Timezone that defines calendar days for date queries
            clock: Source of the current time
        """
        self.uow = uow
        self.nutrition_service = nutrition_service
        self.tz = tz or ZoneInfo("UTC")
        self.clock = clock

    async def add_entry(
        self,
        user_id: str,
        item: str,
        date: str,
        quantity: Any,
        quantity_type: Any,
    ) -> CalorieEntry:
        """
        Estimate calories for a food quantity and append it to the user's history.

        All input validation happens before the nutrition source is called.

        Raises:
            ValidationError: Bad quantity, unit or date
            NutritionLookupError: The nutrition source failed or returned unusable data
            CalculationError: The estimate came out unusable
            NotFoundError: The user does not exist
        """
        qty_in_grams = normalize_quantity(quantity, quantity_type)
        entry_date = parse_date(date, self.tz)

        if self.nutrition_service is None:
            logger.error("Nutrition lookup service not configured")
            raise APIError("Nutrition lookup service not available", status_code=503)

        facts = await self.nutrition_service.lookup(item)
        calorie_intake = estimate_calories(facts.calories, facts.serving_size_g, qty_in_grams)
        logger.info(f"Calculated calorie intake for '{item}' ({qty_in_grams}g): {calorie_intake}")

        entry = CalorieEntry(
            item=item,
            date=entry_date,
            quantity=parse_quantity(quantity),
            quantity_type=parse_quantity_type(quantity_type),
            calorie_intake=calorie_intake,
        )

        if not await self.uow.users.push_calorie_entry(user_id, entry):
            raise NotFoundError("User", user_id)
        return entry

    async def get_entries_by_date(self, user_id: str, date: str | None = None) -> list[CalorieEntry]:
        """Entries on the local calendar day of `date` (today when omitted)."""
        target = parse_date(date, self.tz) if date else self.clock()
        profile = await self._get_profile(user_id)
        return filter_entries_by_date(profile.calorie_intake, target, self.tz)

    async def get_entries_by_limit(self, user_id: str, limit: int | str | None) -> list[CalorieEntry]:
        """
        Entries from the last `limit` days, or every entry when limit is "all".

        Raises:
            ValidationError: If limit is missing or not a whole number of days
        """
        days = self.parse_limit(limit)
        profile = await self._get_profile(user_id)
        if days is None:
            return profile.calorie_intake
        return filter_entries_since(profile.calorie_intake, days, self.clock())

    async def delete_entry(self, user_id: str, item: str, date: str) -> None:
        """
        Remove every entry whose item and date both match exactly.

        Matching nothing is not an error.

        Raises:
            ValidationError: If the date cannot be parsed
            NotFoundError: The user does not exist
        """
        target = parse_date(date, self.tz)

        if not await self.uow.users.pull_calorie_entries(user_id, item, target):
            raise NotFoundError("User", user_id)
        logger.info(f"Removed calorie entries for '{item}' on {target.isoformat()}")

    async def get_goal_calorie_intake(self, user_id: str) -> float:
        """Maximum daily calorie intake from the user's latest biometrics and goal."""
        profile = await self._get_profile(user_id)
        return goal_calorie_intake(profile, self.clock().astimezone(self.tz))

    @staticmethod
    def parse_limit(limit: int | str | None) -> int | None:
        """
        Parse a trailing-window limit.

        Returns:
            Number of days, or None for "all"
        """
        if limit is None or limit == "":
            raise ValidationError("Please provide limit")
        if limit == ALL_ENTRIES:
            return None
        if isinstance(limit, bool):
            raise ValidationError("Limit must be 'all' or a whole number of days")
        try:
            days = int(limit)
        except (TypeError, ValueError):
            raise ValidationError("Limit must be 'all' or a whole number of days")
        if days < 0:
            raise ValidationError("Limit must be 'all' or a whole number of days")
        return days

    async def _get_profile(self, user_id: str) -> UserProfile:
        profile = await self.uow.users.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User", user_id)
        return profile
