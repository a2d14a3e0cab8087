"""Pydantic models for calorie intake schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class QuantityType(str, Enum):
    """Unit tag attached to a logged food quantity."""

    G = "g"
    KG = "kg"
    ML = "ml"
    L = "l"


class CalorieEntry(BaseModel):
    """
    A single logged food item, embedded in the user document.

    Stored keys are camelCase (`quantityType`, `calorieIntake`); documents
    written by older clients used `quantitytype`, which is still accepted on read.
    """

    item: str
    date: datetime
    quantity: float = Field(ge=0)
    quantity_type: QuantityType = Field(
        validation_alias=AliasChoices("quantity_type", "quantityType", "quantitytype"),
        serialization_alias="quantityType",
    )
    calorie_intake: int = Field(
        ge=0,
        validation_alias=AliasChoices("calorie_intake", "calorieIntake"),
        serialization_alias="calorieIntake",
    )

    def to_mongo(self) -> dict[str, Any]:
        """Serialize for storage (keeps datetimes native for BSON)."""
        return self.model_dump(by_alias=True, mode="python") | {
            "quantityType": self.quantity_type.value,
        }


# =============================================================================
# Request bodies
# =============================================================================
# Required fields are optional here so missing ones produce the uniform
# "Please provide all the details" envelope instead of a schema error.


class AddCalorieIntakeRequest(BaseModel):
    """Body of POST /addcalorieintake."""

    item: str | None = None
    date: str | None = None
    quantity: float | str | None = None
    quantitytype: str | None = None


class CalorieIntakeByDateRequest(BaseModel):
    """Body of POST /getcalorieintakebydate."""

    date: str | None = None


class CalorieIntakeByLimitRequest(BaseModel):
    """Body of POST /getcalorieintakebylimit."""

    limit: int | str | None = None


class DeleteCalorieIntakeRequest(BaseModel):
    """Body of DELETE /deletecalorieintake."""

    item: str | None = None
    date: str | None = None


# =============================================================================
# Responses
# =============================================================================


class ApiResponse(BaseModel):
    """Uniform response envelope used by every endpoint, success or failure."""

    ok: bool
    message: str
    data: Any = None


class GoalCalorieIntake(BaseModel):
    """Payload of GET /getgoalcalorieintake."""

    maxCalorieIntake: float
