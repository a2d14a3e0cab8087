"""Calorie intake API routes.

Every route requires an authenticated user and answers with the
`{ok, message, data}` envelope.
"""

from typing import Any

from fastapi import APIRouter, Depends

from calorie_api.api.dependencies import CalorieIntakeServiceDep, CurrentUserDep
from calorie_api.core.exceptions import ValidationError
from calorie_api.core.security import get_current_user_id
from calorie_api.models.calorie_intake import (
    AddCalorieIntakeRequest,
    ApiResponse,
    CalorieEntry,
    CalorieIntakeByDateRequest,
    CalorieIntakeByLimitRequest,
    DeleteCalorieIntakeRequest,
    GoalCalorieIntake,
)

router = APIRouter(dependencies=[Depends(get_current_user_id)])


def _require_fields(*values: Any) -> None:
    if any(value is None or value == "" for value in values):
        raise ValidationError("Please provide all the details")


def _serialize(entries: list[CalorieEntry]) -> list[dict[str, Any]]:
    return [entry.model_dump(mode="json", by_alias=True) for entry in entries]


@router.get("/test", response_model=ApiResponse, response_model_exclude_none=True)
async def test_calorie_intake(user_id: CurrentUserDep) -> ApiResponse:
    """Authenticated liveness check for this router."""
    return ApiResponse(ok=True, message="Test API works for calorie intake report")


@router.post("/addcalorieintake", response_model=ApiResponse, response_model_exclude_none=True)
async def add_calorie_intake(
    user_id: CurrentUserDep,
    request: AddCalorieIntakeRequest,
    service: CalorieIntakeServiceDep,
) -> ApiResponse:
    """
    Log a food item.

    - **item**: Food name, looked up in the nutrition source
    - **date**: Day the food was eaten (ISO 8601)
    - **quantity**: Amount eaten
    - **quantitytype**: One of g, kg, ml, l
    """
    _require_fields(request.item, request.date, request.quantity, request.quantitytype)

    await service.add_entry(
        user_id,
        item=request.item,
        date=request.date,
        quantity=request.quantity,
        quantity_type=request.quantitytype,
    )
    return ApiResponse(ok=True, message="Calorie intake added successfully")


@router.post("/getcalorieintakebydate", response_model=ApiResponse, response_model_exclude_none=True)
async def get_calorie_intake_by_date(
    user_id: CurrentUserDep,
    request: CalorieIntakeByDateRequest,
    service: CalorieIntakeServiceDep,
) -> ApiResponse:
    """
    Get entries logged on one calendar day.

    - **date**: Day to fetch (optional, defaults to today)
    """
    entries = await service.get_entries_by_date(user_id, request.date)
    message = "Calorie intake for the date" if request.date else "Calorie intake for today"
    return ApiResponse(ok=True, message=message, data=_serialize(entries))


@router.post("/getcalorieintakebylimit", response_model=ApiResponse, response_model_exclude_none=True)
async def get_calorie_intake_by_limit(
    user_id: CurrentUserDep,
    request: CalorieIntakeByLimitRequest,
    service: CalorieIntakeServiceDep,
) -> ApiResponse:
    """
    Get entries from a trailing window.

    - **limit**: Number of days to look back, or "all" for the full history
    """
    entries = await service.get_entries_by_limit(user_id, request.limit)
    if request.limit == "all":
        message = "Calorie intake"
    else:
        message = f"Calorie intake for the last {request.limit} days"
    return ApiResponse(ok=True, message=message, data=_serialize(entries))


@router.delete("/deletecalorieintake", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_calorie_intake(
    user_id: CurrentUserDep,
    request: DeleteCalorieIntakeRequest,
    service: CalorieIntakeServiceDep,
) -> ApiResponse:
    """
    Delete entries matching an item and date exactly.

    - **item**: Food name of the entry
    - **date**: Date of the entry
    """
    _require_fields(request.item, request.date)

    await service.delete_entry(user_id, item=request.item, date=request.date)
    return ApiResponse(ok=True, message="Calorie intake deleted successfully")


@router.get("/getgoalcalorieintake", response_model=ApiResponse, response_model_exclude_none=True)
async def get_goal_calorie_intake(
    user_id: CurrentUserDep,
    service: CalorieIntakeServiceDep,
) -> ApiResponse:
    """Daily calorie target from the user's latest height, weight, age, gender and goal."""
    max_calorie_intake = await service.get_goal_calorie_intake(user_id)
    return ApiResponse(
        ok=True,
        message="max calorie intake",
        data=GoalCalorieIntake(maxCalorieIntake=max_calorie_intake).model_dump(),
    )
