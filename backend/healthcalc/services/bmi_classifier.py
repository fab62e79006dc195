"""
BMI classification service.

Maps a BMI value to a category code and looks up the static description,
health risks, recommendations and severity for that category.
"""

from typing import Dict, List

from healthcalc.domain.classifications import (
    ASIAN_BMI_RANGES,
    BMI_CLASSIFICATIONS,
    HEALTH_STATUS,
    WHO_BMI_RANGES,
    Classification,
)
from healthcalc.domain.enums import BMICategory, Severity
from healthcalc.domain.errors import UnknownCategoryError

# Ascending upper bounds; the first bound the value is strictly below wins.
_STANDARD_LADDER = (
    (16.0, BMICategory.SEVERELY_UNDERWEIGHT),
    (18.5, BMICategory.UNDERWEIGHT),
    (25.0, BMICategory.NORMAL),
    (30.0, BMICategory.OVERWEIGHT),
    (35.0, BMICategory.OBESE_CLASS1),
    (40.0, BMICategory.OBESE_CLASS2),
)

# The Asian ladder has a single obesity tier
_ASIAN_LADDER = (
    (18.5, BMICategory.UNDERWEIGHT),
    (23.0, BMICategory.NORMAL),
    (27.5, BMICategory.OVERWEIGHT),
)

_WARNING_TEXT = {
    Severity.VERY_HIGH: [
        "Seek medical help promptly",
        "This is a high-risk health condition",
    ],
    Severity.HIGH: ["Consult a healthcare professional"],
}


class BMIClassifier:
    """Stateless lookups over the classification tables."""

    @staticmethod
    def classify(bmi: float, use_asian_standard: bool = False) -> BMICategory:
        """
        Classify a BMI value.

        Args:
            bmi: BMI value
            use_asian_standard: Use the lower Asian cut-offs

        Returns:
            Category code
        """
        if use_asian_standard:
            ladder, top = _ASIAN_LADDER, BMICategory.OBESE_CLASS1
        else:
            ladder, top = _STANDARD_LADDER, BMICategory.OBESE_CLASS3

        for upper_bound, category in ladder:
            if bmi < upper_bound:
                return category
        return top

    @staticmethod
    def lookup(category: BMICategory) -> Classification:
        """
        Get the classification table entry for a category code.

        Raises:
            UnknownCategoryError: If the code is not in the table
        """
        try:
            return BMI_CLASSIFICATIONS[BMICategory(category)]
        except (KeyError, ValueError):
            raise UnknownCategoryError(f"Unknown BMI category: {category}")

    @staticmethod
    def advice_for(category: BMICategory) -> Dict[str, List[str]]:
        """
        Split a category's recommendations into immediate and long-term advice.

        The first three recommendations are immediate. A warning block is only
        attached for high and very high severity.
        """
        entry = BMIClassifier.lookup(category)
        return {
            "immediate": list(entry.recommendations[:3]),
            "long_term": list(entry.recommendations[3:]),
            "warning": list(_WARNING_TEXT.get(entry.severity, [])),
        }

    @staticmethod
    def who_label(bmi: float, use_asian_standard: bool = False) -> str:
        ranges = ASIAN_BMI_RANGES if use_asian_standard else WHO_BMI_RANGES
        for labelled in ranges:
            if labelled.range.contains(bmi):
                return labelled.label
        return "Unknown classification"

    @staticmethod
    def health_status(category: BMICategory) -> str:
        return HEALTH_STATUS.get(BMICategory(category), "unknown")

    @staticmethod
    def risk_level(bmi: float) -> str:
        if bmi < 16 or bmi >= 40:
            return Severity.VERY_HIGH.value
        if bmi < 17 or bmi >= 35:
            return Severity.HIGH.value
        if bmi < 18.5 or bmi >= 25:
            return Severity.MODERATE.value
        return Severity.LOW.value
