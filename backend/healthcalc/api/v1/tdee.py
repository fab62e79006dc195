"""
TDEE calculator endpoints.
"""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from healthcalc.api.responses import (
    ApiResponse,
    CamelModel,
    DeletedCountResponse,
    StatisticsResponse,
    TrendResponse,
    ValidationResultResponse,
)
from healthcalc.db.database import get_db
from healthcalc.services.tdee_service import TDEEService
from healthcalc.utils.auth import get_current_user_id

router = APIRouter()


class TDEECalculateRequest(BaseModel):
    """TDEE input. Ranges and allowed values are checked by the validator."""

    height: float = Field(..., description="Height in centimeters (50-300)")
    weight: float = Field(..., description="Weight in kilograms (10-500)")
    age: Optional[int] = Field(None, description="Age in years (1-150), required")
    gender: Optional[str] = Field(None, description="'male' or 'female', required")
    activity_level: Optional[str] = Field(
        None,
        description="sedentary, light, moderate, active or very_active",
    )
    formula: Optional[str] = Field(
        None,
        description="mifflin_st_jeor (default), harris_benedict or katch_mcardle",
    )
    body_fat_percentage: Optional[float] = Field(
        None, description="Required for katch_mcardle"
    )


class ActivityInfo(CamelModel):
    level: str
    name: str
    description: str
    multiplier: float


class FormulaInfo(CamelModel):
    formula: str
    name: str
    description: str
    requires_body_fat: bool


class Macronutrient(CamelModel):
    calories: int
    grams: float
    percentage: int


class Macronutrients(CamelModel):
    protein: Macronutrient
    fat: Macronutrient
    carbs: Macronutrient


class CalorieGoals(CamelModel):
    maintenance: int
    mild_weight_loss: int
    weight_loss: int
    extreme_weight_loss: int
    mild_weight_gain: int
    weight_gain: int


class TDEERecordResponse(CamelModel):
    id: UUID
    height: float
    weight: float
    age: int
    gender: str
    activity_level: str
    formula: str
    body_fat_percentage: Optional[float]
    bmr: float
    tdee: float
    activity_multiplier: float
    activity_info: ActivityInfo
    macronutrients: Macronutrients
    calorie_goals: CalorieGoals
    nutrition_advice: List[str]
    created_at: datetime


class TDEEResultResponse(TDEERecordResponse):
    bmi: float
    bmi_category: str
    metabolic_age: int
    warnings: List[str]


@router.post(
    "/calculate",
    response_model=ApiResponse[TDEEResultResponse],
    status_code=status.HTTP_201_CREATED,
)
async def calculate_tdee(
    request: TDEECalculateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Calculate BMR and TDEE with macronutrients, calorie goals and advice.

    Requires authentication.
    """
    result = TDEEService(db).calculate(
        user_id=current_user_id,
        height=request.height,
        weight=request.weight,
        age=request.age,
        gender=request.gender,
        activity_level=request.activity_level,
        formula=request.formula,
        body_fat_percentage=request.body_fat_percentage,
    )
    return ApiResponse[TDEEResultResponse](
        data=result, message="TDEE calculated successfully"
    )


@router.post("/validate", response_model=ApiResponse[ValidationResultResponse])
async def validate_tdee_input(
    request: TDEECalculateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Check TDEE input without calculating or storing anything."""
    result = TDEEService(db).validate(
        request.height,
        request.weight,
        request.age,
        request.gender,
        request.activity_level,
        request.formula,
        request.body_fat_percentage,
    )
    return ApiResponse[ValidationResultResponse](
        data=ValidationResultResponse(
            valid=result.valid, errors=result.errors, warnings=result.warnings
        ),
        message="Input is valid" if result.valid else "Input validation failed",
    )


@router.get("/activity-levels", response_model=ApiResponse[List[ActivityInfo]])
async def get_activity_levels():
    """Activity levels and their multipliers. No authentication needed."""
    return ApiResponse[List[ActivityInfo]](
        data=TDEEService.get_activity_levels(),
        message="Activity levels retrieved",
    )


@router.get("/formulas", response_model=ApiResponse[List[FormulaInfo]])
async def get_formulas():
    """BMR formulas accepted by /calculate. No authentication needed."""
    return ApiResponse[List[FormulaInfo]](
        data=TDEEService.get_formulas(), message="BMR formulas retrieved"
    )


@router.get("/history", response_model=ApiResponse[List[TDEERecordResponse]])
async def get_tdee_history(
    limit: Optional[int] = Query(
        None, description="Max records (default 50, max 100)"
    ),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    records = TDEEService(db).get_history(current_user_id, limit)
    return ApiResponse[List[TDEERecordResponse]](
        data=records, message=f"Retrieved {len(records)} TDEE records"
    )


@router.get("/latest", response_model=ApiResponse[TDEERecordResponse])
async def get_latest_tdee(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    record = TDEEService(db).get_latest(current_user_id)
    if record is None:
        return ApiResponse[TDEERecordResponse](
            data=None, message="No TDEE records found"
        )
    return ApiResponse[TDEERecordResponse](
        data=record, message="Latest TDEE record retrieved"
    )


@router.get("/stats", response_model=ApiResponse[StatisticsResponse])
async def get_tdee_stats(
    limit: Optional[int] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Aggregate TDEE statistics, including the most used activity level."""
    stats = TDEEService(db).get_statistics(current_user_id, limit)
    return ApiResponse[StatisticsResponse](
        data=stats, message="TDEE statistics retrieved"
    )


@router.get("/trend", response_model=ApiResponse[TrendResponse])
async def get_tdee_trend(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    trend = TDEEService(db).get_trend(current_user_id)
    return ApiResponse[TrendResponse](data=trend, message="TDEE trend retrieved")


@router.delete("/records/{record_id}", response_model=ApiResponse[Dict[str, str]])
async def delete_tdee_record(
    record_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    TDEEService(db).delete_record(current_user_id, record_id)
    return ApiResponse[Dict[str, str]](
        data={"id": str(record_id)}, message="TDEE record deleted"
    )


@router.delete("/history", response_model=ApiResponse[DeletedCountResponse])
async def clear_tdee_history(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    deleted = TDEEService(db).clear_history(current_user_id)
    return ApiResponse[DeletedCountResponse](
        data=DeletedCountResponse(deleted_count=deleted),
        message=f"Deleted {deleted} TDEE records",
    )
