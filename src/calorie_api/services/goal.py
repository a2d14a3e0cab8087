"""Daily calorie goal from the Harris-Benedict BMR equations."""

from datetime import datetime

from calorie_api.core.exceptions import ValidationError
from calorie_api.models.user import UserProfile

GOAL_ADJUSTMENT_KCAL = 500


def age_from_birth_year(dob: datetime, today: datetime) -> int:
    """Age as a plain difference of calendar years (birthdays are not considered)."""
    return today.year - dob.year


def basal_metabolic_rate(weight_kg: float, height_cm: float, age: int, gender: str | None) -> float:
    """BMR in kcal/day. Any gender other than "male" uses the female equation."""
    if gender == "male":
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)


def adjust_for_goal(bmr: float, goal: str | None) -> float:
    """Shift BMR by 500 kcal for weight loss or gain; other goals keep it unchanged."""
    if goal == "weightLoss":
        return bmr - GOAL_ADJUSTMENT_KCAL
    if goal == "weightGain":
        return bmr + GOAL_ADJUSTMENT_KCAL
    return bmr


def goal_calorie_intake(profile: UserProfile, today: datetime) -> float:
    """
    Compute the maximum daily calorie intake for a user.

    Uses the most recent height and weight entries of the profile.

    Raises:
        ValidationError: If height, weight or date of birth are missing
    """
    height = profile.current_height
    weight = profile.current_weight
    if height is None or weight is None or profile.dob is None:
        raise ValidationError(
            "Please add height, weight and date of birth to calculate goal calorie intake"
        )

    age = age_from_birth_year(profile.dob, today)
    bmr = basal_metabolic_rate(weight, height, age, profile.gender)
    return adjust_for_goal(bmr, profile.goal)
