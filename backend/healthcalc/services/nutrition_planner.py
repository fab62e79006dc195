"""
Nutrition planner.

Turns a TDEE figure into a macronutrient split, calorie goals and advice text.
"""

from typing import Dict, List, Union

from healthcalc.domain.enums import ActivityLevel, Gender

PROTEIN_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
CARB_KCAL_PER_G = 4

# protein / fat / carbs share of daily calories
MACRO_SPLIT = {"protein": 0.25, "fat": 0.25, "carbs": 0.50}
_KCAL_PER_GRAM = {
    "protein": PROTEIN_KCAL_PER_G,
    "fat": FAT_KCAL_PER_G,
    "carbs": CARB_KCAL_PER_G,
}

CALORIE_FLOOR = 1200
MIN_DAILY_CALORIES = {Gender.MALE: 1500, Gender.FEMALE: 1200}

GENDER_NUTRITION = {
    Gender.MALE: {
        "water_litres": 3.7,
        "specific_needs": [
            "Zinc (15 mg)",
            "Vitamin D (15 μg)",
            "Omega-3 (1.6 g)",
            "Magnesium (400 mg)",
        ],
    },
    Gender.FEMALE: {
        "water_litres": 2.7,
        "specific_needs": [
            "Iron (18 mg)",
            "Folate (400 μg)",
            "Calcium (1000 mg)",
            "Vitamin D (15 μg)",
        ],
    },
}


class NutritionPlanner:
    """Derives nutrition guidance from TDEE, age, gender and activity level."""

    @staticmethod
    def macronutrient_split(tdee: float) -> Dict[str, Dict[str, float]]:
        """
        Split daily calories 25% protein, 25% fat, 50% carbohydrate.

        Returns:
            {macro: {"calories": int, "grams": float, "percentage": int}}
        """
        split = {}
        for macro, share in MACRO_SPLIT.items():
            calories = tdee * share
            split[macro] = {
                "calories": round(calories),
                "grams": round(calories / _KCAL_PER_GRAM[macro], 1),
                "percentage": round(share * 100),
            }
        return split

    @staticmethod
    def calorie_goals(tdee: float) -> Dict[str, int]:
        """Maintenance calories and weight-change targets. Loss targets never go below 1200."""
        maintenance = round(tdee)
        return {
            "maintenance": maintenance,
            "mild_weight_loss": max(CALORIE_FLOOR, maintenance - 250),
            "weight_loss": max(CALORIE_FLOOR, maintenance - 500),
            "extreme_weight_loss": max(CALORIE_FLOOR, maintenance - 1000),
            "mild_weight_gain": maintenance + 250,
            "weight_gain": maintenance + 500,
        }

    @staticmethod
    def nutrition_advice(
        age: int,
        gender: Union[Gender, str],
        activity_level: Union[ActivityLevel, str],
    ) -> List[str]:
        gender = Gender(gender)
        activity_level = ActivityLevel(activity_level)
        profile = GENDER_NUTRITION[gender]

        advice = [
            "Keep a balanced diet that covers all food groups",
            f"Recommended daily water intake: {profile['water_litres']} litres",
        ]

        if age < 18:
            advice.append("Teenagers need extra nutritional support for growth")
            advice.append("Consider advice from a paediatric dietitian")
        elif age > 65:
            advice.append("Older adults should prioritise protein to prevent muscle loss")
            advice.append("Supplement vitamin D and calcium")

        advice.extend(f"Pay attention to: {need}" for need in profile["specific_needs"])

        if activity_level in (ActivityLevel.ACTIVE, ActivityLevel.VERY_ACTIVE):
            advice.append("Eat carbohydrates before and after training")
            advice.append("Have protein within 30 minutes after exercise")
            advice.append("Keep electrolytes balanced")
        elif activity_level == ActivityLevel.SEDENTARY:
            advice.append("Increase daily movement, starting with regular walks")

        return advice

    @staticmethod
    def calorie_warnings(
        tdee: float, age: int, gender: Union[Gender, str], weight_kg: float
    ) -> List[str]:
        """Soft warnings about an implausible or unsafe calorie figure."""
        warnings: List[str] = []
        minimum = MIN_DAILY_CALORIES[Gender(gender)]

        if tdee < minimum:
            warnings.append(
                f"Calculated calorie need ({round(tdee)}) is below the recommended "
                f"minimum ({minimum})"
            )
        if tdee > weight_kg * 50:
            warnings.append(
                "Calculated calorie need looks too high, please check the activity level"
            )

        if age < 18:
            warnings.append("Calorie estimates for minors are for reference only")
        elif age > 65:
            warnings.append(
                "Calorie needs of older adults may require assessment by a dietitian"
            )

        return warnings
