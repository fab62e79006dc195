"""
Measurement validation service.

Separates hard errors (the calculation is rejected) from soft warnings
(the calculation proceeds and the warning is returned to the caller).
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from healthcalc.domain.enums import ActivityLevel, BMRFormula, Gender
from healthcalc.domain.errors import ValidationError

HEIGHT_RANGE_CM = (50.0, 300.0)
WEIGHT_RANGE_KG = (10.0, 500.0)
AGE_RANGE_YEARS = (1, 150)
PLAUSIBLE_BMI_RANGE = (10.0, 70.0)

_GENDERS = {g.value for g in Gender}
_FORMULAS = {f.value for f in BMRFormula}
_ACTIVITY_LEVELS = [a.value for a in ActivityLevel]


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def raise_for_errors(self, code: str = "VALIDATION_FAILED") -> None:
        """Raise ValidationError if any hard error was collected."""
        if not self.valid:
            raise ValidationError(self.errors, self.warnings, code=code)


def _missing(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _out_of_range(value, bounds) -> bool:
    low, high = bounds
    return value < low or value > high


class MeasurementValidator:
    """Range checks for calculator inputs."""

    @staticmethod
    def validate_measurement(
        height_cm: Optional[float],
        weight_kg: Optional[float],
        age: Optional[int] = None,
        gender: Optional[str] = None,
    ) -> ValidationResult:
        """
        Validate BMI inputs.

        Args:
            height_cm: Height in centimeters (50-300)
            weight_kg: Weight in kilograms (10-500)
            age: Optional age in years (1-150)
            gender: Optional gender, "male" or "female" when given

        Returns:
            ValidationResult with hard errors and soft warnings
        """
        errors: List[str] = []
        warnings: List[str] = []

        height_ok = not _missing(height_cm) and not _out_of_range(
            height_cm, HEIGHT_RANGE_CM
        )
        weight_ok = not _missing(weight_kg) and not _out_of_range(
            weight_kg, WEIGHT_RANGE_KG
        )

        if not height_ok:
            errors.append("Height must be between 50-300 cm")
        if not weight_ok:
            errors.append("Weight must be between 10-500 kg")
        if age is not None and _out_of_range(age, AGE_RANGE_YEARS):
            errors.append("Age must be between 1-150 years")
        if gender is not None and gender not in _GENDERS:
            errors.append("Gender must be either male or female")

        # Sanity check on the derived BMI catches unit mix-ups (height in metres etc.)
        if not _missing(height_cm) and not _missing(weight_kg) and height_cm > 0:
            height_m = height_cm / 100.0
            bmi = weight_kg / (height_m * height_m)
            if _out_of_range(bmi, PLAUSIBLE_BMI_RANGE):
                errors.append(
                    "Calculated BMI is outside the plausible range (10-70), "
                    "please check the height and weight values"
                )
            elif bmi < 15:
                warnings.append("BMI is very low, please seek medical advice")
            elif bmi > 50:
                warnings.append(
                    "BMI is very high, please consult a medical professional promptly"
                )

        if age is not None and not _out_of_range(age, AGE_RANGE_YEARS):
            if age < 18:
                warnings.append(
                    "BMI results for minors are for reference only, "
                    "pediatric growth charts are recommended"
                )
            elif age > 65:
                warnings.append(
                    "BMI standards for older adults may differ from general adult ranges"
                )

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    @staticmethod
    def validate_tdee_input(
        height_cm: Optional[float],
        weight_kg: Optional[float],
        age: Optional[int],
        gender: Optional[str],
        activity_level: Optional[str],
        formula: Optional[str] = None,
        body_fat_percentage: Optional[float] = None,
    ) -> ValidationResult:
        """
        Validate TDEE inputs.

        Runs the measurement checks, then requires age, gender and a known
        activity level. Formula and body fat are checked when given.
        """
        result = MeasurementValidator.validate_measurement(
            height_cm, weight_kg, age=age, gender=None
        )
        errors = result.errors

        if age is None:
            errors.append("Age is required for TDEE calculation")
        if gender not in _GENDERS:
            errors.append("Gender must be either male or female")
        if activity_level not in _ACTIVITY_LEVELS:
            valid_levels = ", ".join(_ACTIVITY_LEVELS)
            errors.append(f"Activity level must be one of: {valid_levels}")
        if formula is not None and formula not in _FORMULAS:
            errors.append(f"Formula must be one of: {', '.join(sorted(_FORMULAS))}")
        if body_fat_percentage is not None and not 0 < body_fat_percentage < 100:
            errors.append("Body fat percentage must be between 0 and 100")

        result.valid = not errors
        return result
