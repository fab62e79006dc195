"""
Activity level multipliers used to scale BMR into TDEE.
"""

from dataclasses import dataclass
from types import MappingProxyType

from healthcalc.domain.enums import ActivityLevel


@dataclass(frozen=True)
class ActivityLevelInfo:
    level: ActivityLevel
    name: str
    description: str
    multiplier: float


ACTIVITY_LEVELS = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: ActivityLevelInfo(
            level=ActivityLevel.SEDENTARY,
            name="Sedentary",
            description="Little or no exercise",
            multiplier=1.2,
        ),
        ActivityLevel.LIGHT: ActivityLevelInfo(
            level=ActivityLevel.LIGHT,
            name="Light",
            description="Light exercise 1-3 days/week",
            multiplier=1.375,
        ),
        ActivityLevel.MODERATE: ActivityLevelInfo(
            level=ActivityLevel.MODERATE,
            name="Moderate",
            description="Moderate exercise 3-5 days/week",
            multiplier=1.55,
        ),
        ActivityLevel.ACTIVE: ActivityLevelInfo(
            level=ActivityLevel.ACTIVE,
            name="Active",
            description="Heavy exercise 6-7 days/week",
            multiplier=1.725,
        ),
        ActivityLevel.VERY_ACTIVE: ActivityLevelInfo(
            level=ActivityLevel.VERY_ACTIVE,
            name="Very Active",
            description="Very heavy exercise or a physical job",
            multiplier=1.9,
        ),
    }
)
