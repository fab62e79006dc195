"""
TDEE calculator service.

Orchestrates validation, BMR/TDEE formulas, nutrition planning and persistence.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from healthcalc.domain.activity_levels import ACTIVITY_LEVELS
from healthcalc.domain.enums import ActivityLevel, BMRFormula
from healthcalc.domain.errors import RecordNotFoundError
from healthcalc.models.calculation_record import TDEERecord
from healthcalc.services.bmi_classifier import BMIClassifier
from healthcalc.services.formula_calculator import (
    BMR_FORMULA_INFO,
    FormulaCalculator,
)
from healthcalc.services.measurement_validator import (
    MeasurementValidator,
    ValidationResult,
)
from healthcalc.services.nutrition_planner import NutritionPlanner
from healthcalc.services.record_repository import TDEERecordRepository
from healthcalc.services.trend_analyzer import TrendAnalyzer, clamp_history_limit

logger = logging.getLogger(__name__)


def activity_info(level: str) -> Dict[str, Any]:
    info = ACTIVITY_LEVELS[ActivityLevel(level)]
    return {
        "level": info.level.value,
        "name": info.name,
        "description": info.description,
        "multiplier": info.multiplier,
    }


def record_to_dict(record: TDEERecord) -> Dict[str, Any]:
    """Stored columns of a TDEE record as a plain dict."""
    return {
        "id": record.record_id,
        "user_id": record.user_id,
        "height": record.height,
        "weight": record.weight,
        "age": record.age,
        "gender": record.gender,
        "activity_level": record.activity_level,
        "formula": record.formula,
        "body_fat_percentage": record.body_fat_percentage,
        "bmr": record.bmr,
        "tdee": record.tdee,
        "activity_multiplier": record.activity_multiplier,
        "activity_info": activity_info(record.activity_level),
        "macronutrients": dict(record.macronutrients),
        "calorie_goals": dict(record.calorie_goals),
        "nutrition_advice": list(record.nutrition_advice),
        "created_at": record.created_at,
    }


class TDEEService:
    """Service for TDEE calculations and history."""

    def __init__(self, db: Session):
        self.db = db
        self.records = TDEERecordRepository(db)

    @staticmethod
    def get_activity_levels() -> List[Dict[str, Any]]:
        return [activity_info(level) for level in ACTIVITY_LEVELS]

    @staticmethod
    def get_formulas() -> List[Dict[str, Any]]:
        """Supported BMR formulas, default first."""
        return [
            {"formula": formula.value, **info}
            for formula, info in BMR_FORMULA_INFO.items()
        ]

    def validate(
        self,
        height: float,
        weight: float,
        age: Optional[int],
        gender: Optional[str],
        activity_level: Optional[str],
        formula: Optional[str] = None,
        body_fat_percentage: Optional[float] = None,
    ) -> ValidationResult:
        """Dry run of the input checks. Nothing is computed or stored."""
        return MeasurementValidator.validate_tdee_input(
            height, weight, age, gender, activity_level, formula, body_fat_percentage
        )

    def calculate(
        self,
        user_id: UUID,
        height: float,
        weight: float,
        age: int,
        gender: str,
        activity_level: str,
        formula: Optional[str] = None,
        body_fat_percentage: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Calculate BMR and TDEE, derive nutrition guidance and store the record.

        BMR is rounded to whole kcal before the activity multiplier is applied.

        Raises:
            ValidationError: If any input is out of range
            MissingInputError: Katch-McArdle without body fat percentage
        """
        formula = formula or BMRFormula.MIFFLIN_ST_JEOR.value

        validation = MeasurementValidator.validate_tdee_input(
            height, weight, age, gender, activity_level, formula, body_fat_percentage
        )
        if not validation.valid:
            logger.warning(
                f"[TDEE] Validation failed for user {user_id}: {validation.errors}"
            )
        validation.raise_for_errors()

        bmr = round(
            FormulaCalculator.calculate_bmr(
                height, weight, age, gender, formula, body_fat_percentage
            )
        )
        multiplier = ACTIVITY_LEVELS[ActivityLevel(activity_level)].multiplier
        tdee = round(FormulaCalculator.calculate_tdee(bmr, multiplier))

        record = self.records.create(
            user_id,
            measurement={
                "height": height,
                "weight": weight,
                "age": age,
                "gender": gender,
                "activity_level": activity_level,
                "formula": formula,
                "body_fat_percentage": body_fat_percentage,
            },
            result={
                "bmr": bmr,
                "tdee": tdee,
                "activity_multiplier": multiplier,
                "macronutrients": NutritionPlanner.macronutrient_split(tdee),
                "calorie_goals": NutritionPlanner.calorie_goals(tdee),
                "nutrition_advice": NutritionPlanner.nutrition_advice(
                    age, gender, activity_level
                ),
            },
        )
        logger.info(
            f"[TDEE] User {user_id} recorded bmr={bmr} tdee={tdee} "
            f"formula={formula} activity={activity_level}"
        )

        bmi = round(FormulaCalculator.calculate_bmi(height, weight), 1)
        result = record_to_dict(record)
        result.update(
            {
                "bmi": bmi,
                "bmi_category": BMIClassifier.classify(bmi).value,
                "metabolic_age": FormulaCalculator.calculate_metabolic_age(
                    bmr, age, gender
                ),
                "warnings": validation.warnings
                + NutritionPlanner.calorie_warnings(tdee, age, gender, weight),
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
            records, metric="tdee", group_by="activity_level"
        )

    def get_trend(self, user_id: UUID, limit: Optional[int] = None) -> Dict[str, Any]:
        records = self.records.list_by_user(user_id, clamp_history_limit(limit))
        return TrendAnalyzer.analyze_trend(records, metric="tdee")

    def delete_record(self, user_id: UUID, record_id: UUID) -> None:
        if not self.records.delete_one(record_id, user_id):
            raise RecordNotFoundError("TDEE record not found")
        logger.info(f"[TDEE] User {user_id} deleted record {record_id}")

    def clear_history(self, user_id: UUID) -> int:
        deleted = self.records.clear_all(user_id)
        logger.info(f"[TDEE] User {user_id} cleared {deleted} records")
        return deleted
