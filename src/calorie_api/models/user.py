"""Read-only view of the user document owned by the user service."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from .calorie_intake import CalorieEntry


class HeightRecord(BaseModel):
    """One entry of the height history (cm)."""

    height: float
    date: datetime | None = None


class WeightRecord(BaseModel):
    """One entry of the weight history (kg)."""

    weight: float
    date: datetime | None = None


class UserProfile(BaseModel):
    """Biometrics and calorie history read from a user document."""

    id: str
    height: list[HeightRecord] = Field(default_factory=list)
    weight: list[WeightRecord] = Field(default_factory=list)
    dob: datetime | None = None
    gender: str | None = None
    goal: str | None = None
    calorie_intake: list[CalorieEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("calorie_intake", "calorieIntake"),
    )

    @property
    def current_height(self) -> float | None:
        """Most recently recorded height, if any."""
        return self.height[-1].height if self.height else None

    @property
    def current_weight(self) -> float | None:
        """Most recently recorded weight, if any."""
        return self.weight[-1].weight if self.weight else None
