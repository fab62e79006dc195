"""
Health formula calculator.

Implements BMI, BMR (Mifflin-St Jeor, Harris-Benedict, Katch-McArdle), TDEE,
ideal weight range and metabolic age. All inputs use metric units (cm, kg).

Values are returned unrounded; callers round at the response boundary.
"""

from typing import Dict, Optional, Union

from healthcalc.domain.enums import BMRFormula, Gender
from healthcalc.domain.errors import DomainComputationError, MissingInputError

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 25.0

# (intercept, weight, height, age) coefficients per gender.
# harris_benedict shares the mifflin_st_jeor coefficients until the intended
# revised Harris-Benedict constants are confirmed.
_GENDER_COEFFICIENTS = {
    Gender.MALE: (88.362, 13.397, 4.799, 5.677),
    Gender.FEMALE: (447.593, 9.247, 3.098, 4.330),
}

BMR_FORMULA_INFO = {
    BMRFormula.MIFFLIN_ST_JEOR: {
        "name": "Mifflin-St Jeor",
        "description": "Modern default formula, suitable for most adults",
        "requires_body_fat": False,
    },
    BMRFormula.HARRIS_BENEDICT: {
        "name": "Harris-Benedict (Revised)",
        "description": "Classic formula, tends to overestimate slightly",
        "requires_body_fat": False,
    },
    BMRFormula.KATCH_MCARDLE: {
        "name": "Katch-McArdle",
        "description": "Based on lean body mass, requires body fat percentage",
        "requires_body_fat": True,
    },
}


class FormulaCalculator:
    """Pure numeric formulas. No I/O, no state."""

    @staticmethod
    def calculate_bmi(height_cm: float, weight_kg: float) -> float:
        """
        Calculate Body Mass Index.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms

        Returns:
            weight / height(m)², unrounded

        Raises:
            DomainComputationError: If height is not positive or weight is negative
        """
        if height_cm is None or height_cm <= 0:
            raise DomainComputationError("Height must be a positive value")
        if weight_kg is None or weight_kg < 0:
            raise DomainComputationError("Weight must not be negative")

        height_m = height_cm / 100.0
        return weight_kg / (height_m * height_m)

    @staticmethod
    def calculate_lean_mass(weight_kg: float, body_fat_percentage: float) -> float:
        """Lean body mass in kilograms from total weight and body fat percentage."""
        if body_fat_percentage < 0 or body_fat_percentage >= 100:
            raise DomainComputationError(
                "Body fat percentage must be between 0 and 100"
            )
        return weight_kg * (1 - body_fat_percentage / 100.0)

    @staticmethod
    def calculate_bmr(
        height_cm: float,
        weight_kg: float,
        age: Optional[int],
        gender: Union[Gender, str, None],
        formula: Union[BMRFormula, str] = BMRFormula.MIFFLIN_ST_JEOR,
        body_fat_percentage: Optional[float] = None,
    ) -> float:
        """
        Calculate Basal Metabolic Rate in kcal/day.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms
            age: Age in years (unused by Katch-McArdle)
            gender: "male" or "female" (unused by Katch-McArdle)
            formula: BMR formula key
            body_fat_percentage: Required for Katch-McArdle

        Returns:
            BMR, unrounded

        Raises:
            MissingInputError: Katch-McArdle without body fat, or age/gender missing
            DomainComputationError: Unknown formula or gender
        """
        try:
            formula = BMRFormula(formula)
        except ValueError:
            raise DomainComputationError(
                f"Unknown BMR formula: {formula}", code="UNKNOWN_FORMULA"
            )

        if formula == BMRFormula.KATCH_MCARDLE:
            if body_fat_percentage is None:
                raise MissingInputError(
                    "Body fat percentage is required for the Katch-McArdle formula"
                )
            lean_mass = FormulaCalculator.calculate_lean_mass(
                weight_kg, body_fat_percentage
            )
            return 370 + 21.6 * lean_mass

        if age is None or gender is None:
            raise MissingInputError(f"Age and gender are required for {formula.value}")
        try:
            gender = Gender(gender)
        except ValueError:
            raise DomainComputationError(
                "Gender must be 'male' or 'female'", code="INVALID_GENDER"
            )

        intercept, per_kg, per_cm, per_year = _GENDER_COEFFICIENTS[gender]
        return intercept + per_kg * weight_kg + per_cm * height_cm - per_year * age

    @staticmethod
    def calculate_tdee(bmr: float, activity_multiplier: float) -> float:
        """Total Daily Energy Expenditure: BMR scaled by the activity multiplier."""
        return bmr * activity_multiplier

    @staticmethod
    def ideal_weight_range(height_cm: float) -> Dict[str, float]:
        """
        Weight bounds that keep BMI inside the healthy range (18.5 to 25).

        Returns:
            {"min": kg, "max": kg}, rounded to one decimal
        """
        height_m = height_cm / 100.0
        return {
            "min": round(HEALTHY_BMI_MIN * height_m * height_m, 1),
            "max": round(HEALTHY_BMI_MAX * height_m * height_m, 1),
        }

    @staticmethod
    def calculate_metabolic_age(
        bmr: float, actual_age: int, gender: Union[Gender, str]
    ) -> int:
        """
        Estimate metabolic age by comparing BMR with the expected BMR for the age.

        Expected BMR starts at 1800 (male) / 1400 (female) kcal at age 30 and drops
        8 / 6 kcal per year. Result is clamped to 18-80.
        """
        gender = Gender(gender)
        baseline = 1800 if gender == Gender.MALE else 1400
        per_year = 8 if gender == Gender.MALE else 6

        expected_bmr = baseline - (actual_age - 30) * per_year
        metabolic_age = actual_age - (bmr - expected_bmr) / per_year

        return max(18, min(80, round(metabolic_age)))

    @staticmethod
    def bmi_percentile(bmi: float, age: Optional[int]) -> Optional[int]:
        """
        Simplified adult BMI percentile.

        Minors need growth-chart percentiles, so None is returned for age < 18.
        """
        if age is not None and age < 18:
            return None
        normalized = max(15.0, min(40.0, bmi))
        return round((normalized - 15.0) / 25.0 * 100)
