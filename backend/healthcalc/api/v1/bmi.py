"""
BMI calculator endpoints.

Calculation, dry-run validation, history, statistics and trend for the
authenticated user's BMI records.
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
from healthcalc.services.bmi_service import BMIService
from healthcalc.utils.auth import get_current_user_id

router = APIRouter()


class BMICalculateRequest(BaseModel):
    """BMI input. Ranges are checked by the validator, not here."""

    height: float = Field(..., description="Height in centimeters (50-300)")
    weight: float = Field(..., description="Weight in kilograms (10-500)")
    age: Optional[int] = Field(None, description="Age in years (1-150)")
    gender: Optional[str] = Field(None, description="'male' or 'female'")
    use_asian_standard: Optional[bool] = Field(
        None, description="Use the Asian BMI cut-offs"
    )


class WeightRange(CamelModel):
    min: float
    max: float


class BMIAdvice(CamelModel):
    immediate: List[str]
    long_term: List[str]
    warning: List[str]


class BMIRecordResponse(CamelModel):
    id: UUID
    height: float
    weight: float
    age: Optional[int]
    gender: Optional[str]
    use_asian_standard: bool
    bmi: float
    category: str
    category_code: str
    is_healthy: bool
    who_standard: str
    health_risks: List[str]
    recommendations: List[str]
    severity: str
    color_code: str
    created_at: datetime


class BMIResultResponse(BMIRecordResponse):
    description: str
    ideal_weight_range: WeightRange
    health_status: str
    risk_level: str
    bmi_percentile: Optional[int]
    advice: BMIAdvice
    warnings: List[str]


@router.post(
    "/calculate",
    response_model=ApiResponse[BMIResultResponse],
    status_code=status.HTTP_201_CREATED,
)
async def calculate_bmi(
    request: BMICalculateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Calculate BMI, classify it and store the result.

    Requires authentication.
    """
    result = BMIService(db).calculate(
        user_id=current_user_id,
        height=request.height,
        weight=request.weight,
        age=request.age,
        gender=request.gender,
        use_asian_standard=request.use_asian_standard,
    )
    return ApiResponse[BMIResultResponse](
        data=result, message="BMI calculated successfully"
    )


@router.post("/validate", response_model=ApiResponse[ValidationResultResponse])
async def validate_bmi_input(
    request: BMICalculateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Check BMI input without calculating or storing anything."""
    result = BMIService(db).validate(
        request.height, request.weight, request.age, request.gender
    )
    return ApiResponse[ValidationResultResponse](
        data=ValidationResultResponse(
            valid=result.valid, errors=result.errors, warnings=result.warnings
        ),
        message="Input is valid" if result.valid else "Input validation failed",
    )


@router.get("/history", response_model=ApiResponse[List[BMIRecordResponse]])
async def get_bmi_history(
    limit: Optional[int] = Query(
        None, description="Max records (default 50, max 100)"
    ),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """BMI records of the current user, newest first."""
    records = BMIService(db).get_history(current_user_id, limit)
    return ApiResponse[List[BMIRecordResponse]](
        data=records, message=f"Retrieved {len(records)} BMI records"
    )


@router.get("/latest", response_model=ApiResponse[BMIRecordResponse])
async def get_latest_bmi(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Most recent BMI record; ``data`` is null when there is none."""
    record = BMIService(db).get_latest(current_user_id)
    if record is None:
        return ApiResponse[BMIRecordResponse](
            data=None, message="No BMI records found"
        )
    return ApiResponse[BMIRecordResponse](
        data=record, message="Latest BMI record retrieved"
    )


@router.get("/stats", response_model=ApiResponse[StatisticsResponse])
async def get_bmi_stats(
    limit: Optional[int] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    stats = BMIService(db).get_statistics(current_user_id, limit)
    return ApiResponse[StatisticsResponse](
        data=stats, message="BMI statistics retrieved"
    )


@router.get("/trend", response_model=ApiResponse[TrendResponse])
async def get_bmi_trend(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    trend = BMIService(db).get_trend(current_user_id)
    return ApiResponse[TrendResponse](data=trend, message="BMI trend retrieved")


@router.delete("/records/{record_id}", response_model=ApiResponse[Dict[str, str]])
async def delete_bmi_record(
    record_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Delete one BMI record.

    Returns 404 if the record does not exist or belongs to another user.
    """
    BMIService(db).delete_record(current_user_id, record_id)
    return ApiResponse[Dict[str, str]](
        data={"id": str(record_id)}, message="BMI record deleted"
    )


@router.delete("/history", response_model=ApiResponse[DeletedCountResponse])
async def clear_bmi_history(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    deleted = BMIService(db).clear_history(current_user_id)
    return ApiResponse[DeletedCountResponse](
        data=DeletedCountResponse(deleted_count=deleted),
        message=f"Deleted {deleted} BMI records",
    )
