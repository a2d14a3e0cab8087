"""Quantity normalization and calorie estimation.

Quantities are converted to grams (volumes are treated as mass 1:1) and
scaled against the reference serving returned by the nutrition source.
"""

import math
from typing import Any

from calorie_api.core.exceptions import CalculationError, ValidationError
from calorie_api.models.calorie_intake import QuantityType
from calorie_api.services.nutrition_lookup.base import NutritionLookupError

GRAMS_PER_UNIT: dict[QuantityType, float] = {
    QuantityType.G: 1,
    QuantityType.KG: 1000,
    QuantityType.ML: 1,
    QuantityType.L: 1000,
}


def parse_quantity(quantity: Any) -> float:
    """
    Parse a caller-supplied quantity (number or numeric string).

    Raises:
        ValidationError: If the value is not a finite, non-negative number
    """
    if isinstance(quantity, bool):
        raise ValidationError("Quantity must be a valid number")
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        raise ValidationError("Quantity must be a valid number")
    if not math.isfinite(value) or value < 0:
        raise ValidationError("Quantity must be a valid number")
    return value


def parse_quantity_type(quantity_type: Any) -> QuantityType:
    """
    Parse a unit tag.

    Raises:
        ValidationError: If the tag is not one of g, kg, ml, l
    """
    try:
        return QuantityType(quantity_type)
    except ValueError:
        raise ValidationError("Invalid quantity type")


def normalize_quantity(quantity: Any, quantity_type: Any) -> float:
    """
    Convert a (quantity, unit) pair to grams.

    Args:
        quantity: Magnitude as entered by the caller
        quantity_type: One of g, kg, ml, l

    Returns:
        Gram-equivalent quantity

    Raises:
        ValidationError: On a bad quantity, an unknown unit, or an overflowing result
    """
    value = parse_quantity(quantity)
    unit = parse_quantity_type(quantity_type)

    grams = value * GRAMS_PER_UNIT[unit]
    if not math.isfinite(grams):
        raise ValidationError("Calculated quantity in grams is invalid")
    return grams


def estimate_calories(calories: float, serving_size_g: float, qty_in_grams: float) -> int:
    """
    Scale calories of a reference serving to the eaten quantity.

    The result is truncated toward zero, never rounded: 52 kcal/100 g at
    150 g gives 78, and 89 kcal/100 g at 2000 g gives 1780.

    Raises:
        NutritionLookupError: If the serving size is zero or not finite
        CalculationError: If the result is not a finite, non-negative number
    """
    if not math.isfinite(serving_size_g) or serving_size_g == 0:
        raise NutritionLookupError(
            message="Invalid API response",
            error_code="INVALID_RESPONSE",
            details={"serving_size_g": serving_size_g},
        )

    calorie_intake = (calories / serving_size_g) * qty_in_grams

    if math.isnan(calorie_intake):
        raise CalculationError("Failed to calculate calorie intake")
    if not math.isfinite(calorie_intake) or calorie_intake < 0:
        raise CalculationError(
            "Failed to calculate calorie intake",
            details={"calorie_intake": calorie_intake},
        )

    return int(calorie_intake)
