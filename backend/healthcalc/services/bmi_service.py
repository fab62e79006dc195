"""
BMI calculator service.

Orchestrates validation, the BMI formula, classification and persistence.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from healthcalc.config import settings
from healthcalc.domain.enums import BMICategory
from healthcalc.domain.errors import RecordNotFoundError
from healthcalc.models.calculation_record import BMIRecord
from healthcalc.services.bmi_classifier import BMIClassifier
from healthcalc.services.formula_calculator import FormulaCalculator
from healthcalc.services.measurement_validator import (
    MeasurementValidator,
    ValidationResult,
)
from healthcalc.services.record_repository import BMIRecordRepository
from healthcalc.services.trend_analyzer import TrendAnalyzer, clamp_history_limit

logger = logging.getLogger(__name__)


def record_to_dict(record: BMIRecord) -> Dict[str, Any]:
    """Stored columns of a BMI record as a plain dict."""
    return {
        "id": record.record_id,
        "user_id": record.user_id,
        "height": record.height,
        "weight": record.weight,
        "age": record.age,
        "gender": record.gender,
        "use_asian_standard": record.use_asian_standard,
        "bmi": record.bmi,
        "category": record.category,
        "category_code": record.category_code,
        "is_healthy": record.is_healthy,
        "who_standard": record.who_standard,
        "health_risks": list(record.health_risks),
        "recommendations": list(record.recommendations),
        "severity": record.severity,
        "color_code": record.color_code,
        "created_at": record.created_at,
    }


class BMIService:
    """Service for BMI calculations and history."""

    def __init__(self, db: Session):
        self.db = db
        self.records = BMIRecordRepository(db)

    def validate(
        self,
        height: float,
        weight: float,
        age: Optional[int] = None,
        gender: Optional[str] = None,
    ) -> ValidationResult:
        """Dry run of the input checks. Nothing is computed or stored."""
        return MeasurementValidator.validate_measurement(height, weight, age, gender)

    def calculate(
        self,
        user_id: UUID,
        height: float,
        weight: float,
        age: Optional[int] = None,
        gender: Optional[str] = None,
        use_asian_standard: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Calculate, classify and store a BMI result.

        Args:
            user_id: Owner of the new record
            height: Height in cm
            weight: Weight in kg
            age: Optional age, enables the percentile and age warnings
            gender: Optional gender
            use_asian_standard: Use the Asian ladder; defaults to the configured value

        Returns:
            Stored record fields plus description, ideal_weight_range, health_status,
            risk_level, bmi_percentile, advice and warnings

        Raises:
            ValidationError: If any input is out of range
        """
        if use_asian_standard is None:
            use_asian_standard = settings.use_asian_standard_default

        validation = MeasurementValidator.validate_measurement(
            height, weight, age, gender
        )
        if not validation.valid:
            logger.warning(
                f"[BMI] Validation failed for user {user_id}: {validation.errors}"
            )
        validation.raise_for_errors()

        # Classify the displayed value so bmi and category always agree
        bmi = round(FormulaCalculator.calculate_bmi(height, weight), 2)
        category = BMIClassifier.classify(bmi, use_asian_standard)
        entry = BMIClassifier.lookup(category)

        record = self.records.create(
            user_id,
            measurement={
                "height": height,
                "weight": weight,
                "age": age,
                "gender": gender,
                "use_asian_standard": use_asian_standard,
            },
            result={
                "bmi": bmi,
                "category": entry.label,
                "category_code": category.value,
                "is_healthy": category == BMICategory.NORMAL,
                "who_standard": BMIClassifier.who_label(bmi, use_asian_standard),
                "health_risks": list(entry.health_risks),
                "recommendations": list(entry.recommendations),
                "severity": entry.severity.value,
                "color_code": entry.color_code,
            },
        )
        logger.info(
            f"[BMI] User {user_id} recorded bmi={bmi} category={category.value}"
        )

        result = record_to_dict(record)
        result.update(
            {
                "description": entry.description,
                "ideal_weight_range": FormulaCalculator.ideal_weight_range(height),
                "health_status": BMIClassifier.health_status(category),
                "risk_level": BMIClassifier.risk_level(bmi),
                "bmi_percentile": FormulaCalculator.bmi_percentile(bmi, age),
                "advice": BMIClassifier.advice_for(category),
                "warnings": validation.warnings,
            }
        )
        return result

    def get_history(
        self, user_id: UUID, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        records = self.records.list_by_user(user_id, clamp_history_limit(limit))
        return [record_to_dict(r) for r in records]

    def get_latest(self, user_id: UUID) -> Optional[Dict[str, Any]]:
        record = self.records.latest(user_id)
        return record_to_dict(record) if record else None

    def get_statistics(
        self, user_id: UUID, limit: Optional[int] = None
    ) -> Dict[str, Any]:
        records = self.records.list_by_user(user_id, clamp_history_limit(limit))
        return TrendAnalyzer.compute_statistics(
            records, metric="bmi", group_by="category_code"
        )

    def get_trend(self, user_id: UUID, limit: Optional[int] = None) -> Dict[str, Any]:
        records = self.records.list_by_user(user_id, clamp_history_limit(limit))
        return TrendAnalyzer.analyze_trend(records, metric="bmi")

    def delete_record(self, user_id: UUID, record_id: UUID) -> None:
        """
        Raises:
            RecordNotFoundError: If the record does not exist for this user
        """
        if not self.records.delete_one(record_id, user_id):
            raise RecordNotFoundError("BMI record not found")
        logger.info(f"[BMI] User {user_id} deleted record {record_id}")

    def clear_history(self, user_id: UUID) -> int:
        deleted = self.records.clear_all(user_id)
        logger.info(f"[BMI] User {user_id} cleared {deleted} records")
        return deleted
