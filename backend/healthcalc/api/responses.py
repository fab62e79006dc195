"""
Response envelope and exception handlers shared by all routers.

Successful calls answer ``{success: true, data, message}``; failures answer
``{success: false, error, code}`` with ``details`` for validation failures.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from healthcalc.domain.errors import CalculationError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: str = ""


class ValidationResultResponse(CamelModel):
    valid: bool
    errors: List[str]
    warnings: List[str]


class TrendResponse(CamelModel):
    metric: str
    direction: str
    change: Optional[float]
    change_percent: Optional[float]
    significance: Optional[str]
    latest: Optional[float]
    previous: Optional[float]


class MonthlyProgress(CamelModel):
    month: str
    average: float
    record_count: int


class StatisticsResponse(CamelModel):
    metric: str
    total_records: int
    average: Optional[float]
    min: Optional[float]
    max: Optional[float]
    latest: Optional[float]
    distribution: Dict[str, int]
    most_used_activity_level: Optional[str] = None
    first_recorded_at: Optional[datetime]
    last_recorded_at: Optional[datetime]
    monthly_progress: List[MonthlyProgress]


class DeletedCountResponse(CamelModel):
    deleted_count: int


_HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_409_CONFLICT: "CONFLICT",
}


def error_body(error: str, code: str, details: Optional[Any] = None) -> Dict[str, Any]:
    body = {"success": False, "error": error, "code": code}
    if details is not None:
        body["details"] = details
    return body


async def calculation_error_handler(request: Request, exc: CalculationError):
    details = None
    if isinstance(exc, ValidationError):
        details = exc.errors
    if exc.status_code >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc.code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code, details),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            str(exc.detail), _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        ),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid input format", "INVALID_INPUT_FORMAT", details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CalculationError, calculation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
