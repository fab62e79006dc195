"""
Canonical enumerations shared by the calculators, the database models and the API.
"""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity levels accepted by the TDEE calculator."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class BMRFormula(str, Enum):
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"
    HARRIS_BENEDICT = "harris_benedict"
    KATCH_MCARDLE = "katch_mcardle"


class BMICategory(str, Enum):
    """BMI category codes, lowest to highest."""

    SEVERELY_UNDERWEIGHT = "severely_underweight"
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE_CLASS1 = "obese_class1"
    OBESE_CLASS2 = "obese_class2"
    OBESE_CLASS3 = "obese_class3"


class Severity(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


class TrendSignificance(str, Enum):
    SIGNIFICANT = "significant"
    MODERATE = "moderate"
    SLIGHT = "slight"
    MINIMAL = "minimal"
