"""
Static BMI classification tables.

Built once at import and exposed through read-only mappings of frozen dataclasses,
so request handlers can share them without copying.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from healthcalc.domain.enums import BMICategory, Severity


@dataclass(frozen=True)
class BMIRange:
    """Half-open BMI interval ``[min, max)``. ``max`` is None for the top tier."""

    min: float
    max: Optional[float]

    def contains(self, bmi: float) -> bool:
        return bmi >= self.min and (self.max is None or bmi < self.max)


@dataclass(frozen=True)
class Classification:
    code: BMICategory
    label: str
    range: BMIRange
    description: str
    health_risks: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    color_code: str
    severity: Severity


@dataclass(frozen=True)
class LabelledRange:
    label: str
    range: BMIRange


BMI_CLASSIFICATIONS = MappingProxyType(
    {
        BMICategory.SEVERELY_UNDERWEIGHT: Classification(
            code=BMICategory.SEVERELY_UNDERWEIGHT,
            label="Severely underweight",
            range=BMIRange(0.0, 16.0),
            description="Body weight is far below the healthy range for this height.",
            health_risks=(
                "Malnutrition and nutrient deficiencies",
                "Weakened immune system",
                "Loss of bone density (osteoporosis)",
                "Anaemia",
                "Heart rhythm abnormalities",
            ),
            recommendations=(
                "Consult a doctor or registered dietitian as soon as possible",
                "A supervised nutritional treatment plan may be required",
                "Gradually increase intake of healthy, energy-dense foods",
                "Eat smaller meals more frequently throughout the day",
                "Schedule regular medical check-ups to monitor recovery",
            ),
            color_code="#7c3aed",
            severity=Severity.VERY_HIGH,
        ),
        BMICategory.UNDERWEIGHT: Classification(
            code=BMICategory.UNDERWEIGHT,
            label="Underweight",
            range=BMIRange(16.0, 18.5),
            description="Body weight is below the healthy range for this height.",
            health_risks=(
                "Nutrient deficiencies",
                "Reduced immune function",
                "Fatigue and low energy",
                "Increased fracture risk",
            ),
            recommendations=(
                "Increase healthy calorie intake",
                "Choose nutrient-dense foods",
                "Add moderate strength training",
                "Monitor body weight regularly",
                "Discuss unintentional weight loss with a clinician",
            ),
            color_code="#3b82f6",
            severity=Severity.MODERATE,
        ),
        BMICategory.NORMAL: Classification(
            code=BMICategory.NORMAL,
            label="Normal weight",
            range=BMIRange(18.5, 25.0),
            description="Body weight is within the healthy range for this height.",
            health_risks=("Lowest weight-related health risk",),
            recommendations=(
                "Your weight is within the healthy range",
                "Keep up regular physical activity",
                "Maintain a balanced diet",
                "Continue your healthy lifestyle",
            ),
            color_code="#10b981",
            severity=Severity.NORMAL,
        ),
        BMICategory.OVERWEIGHT: Classification(
            code=BMICategory.OVERWEIGHT,
            label="Overweight",
            range=BMIRange(25.0, 30.0),
            description="Body weight is above the healthy range for this height.",
            health_risks=(
                "Increased risk of type 2 diabetes",
                "High blood pressure",
                "Elevated cholesterol",
                "Joint strain",
            ),
            recommendations=(
                "Reduce daily calorie intake moderately (300-500 kcal)",
                "Do at least 150 minutes of aerobic exercise per week",
                "Choose more vegetables, fruit and whole grains",
                "Control portion sizes and limit high-sugar, high-fat foods",
            ),
            color_code="#f59e0b",
            severity=Severity.LOW,
        ),
        BMICategory.OBESE_CLASS1: Classification(
            code=BMICategory.OBESE_CLASS1,
            label="Obesity class I",
            range=BMIRange(30.0, 35.0),
            description="Moderate obesity.",
            health_risks=(
                "Type 2 diabetes",
                "Cardiovascular disease",
                "High blood pressure",
                "Sleep apnoea",
                "Osteoarthritis",
            ),
            recommendations=(
                "Consult a doctor about a weight-loss plan",
                "Combine dietary control with regular exercise",
                "Set a realistic goal of 0.5-1 kg per week",
                "Consider guidance from a registered dietitian",
            ),
            color_code="#f97316",
            severity=Severity.MODERATE,
        ),
        BMICategory.OBESE_CLASS2: Classification(
            code=BMICategory.OBESE_CLASS2,
            label="Obesity class II",
            range=BMIRange(35.0, 40.0),
            description="Severe obesity.",
            health_risks=(
                "High risk of type 2 diabetes",
                "Heart disease and stroke",
                "Sleep apnoea",
                "Fatty liver disease",
                "Certain cancers",
            ),
            recommendations=(
                "Seek medical advice before starting a weight-loss programme",
                "A professionally supervised weight-loss plan is recommended",
                "Attend regular health check-ups",
                "Increase exercise intensity gradually",
            ),
            color_code="#ef4444",
            severity=Severity.HIGH,
        ),
        BMICategory.OBESE_CLASS3: Classification(
            code=BMICategory.OBESE_CLASS3,
            label="Obesity class III",
            range=BMIRange(40.0, None),
            description="Very severe obesity.",
            health_risks=(
                "Very high risk of type 2 diabetes",
                "Heart failure",
                "Severe sleep apnoea",
                "Reduced mobility",
                "Reduced life expectancy",
            ),
            recommendations=(
                "Consult a doctor as soon as possible",
                "A specialist weight-management programme may be needed",
                "Attend regular health check-ups",
                "Increase activity gradually under supervision",
                "Ask your doctor whether medical or surgical treatment is appropriate",
            ),
            color_code="#b91c1c",
            severity=Severity.VERY_HIGH,
        ),
    }
)

WHO_BMI_RANGES: Tuple[LabelledRange, ...] = (
    LabelledRange("Severe thinness", BMIRange(0.0, 16.0)),
    LabelledRange("Moderate thinness", BMIRange(16.0, 17.0)),
    LabelledRange("Mild thinness", BMIRange(17.0, 18.5)),
    LabelledRange("Normal range", BMIRange(18.5, 25.0)),
    LabelledRange("Pre-obese", BMIRange(25.0, 30.0)),
    LabelledRange("Obese class I", BMIRange(30.0, 35.0)),
    LabelledRange("Obese class II", BMIRange(35.0, 40.0)),
    LabelledRange("Obese class III", BMIRange(40.0, None)),
)

ASIAN_BMI_RANGES: Tuple[LabelledRange, ...] = (
    LabelledRange("Underweight", BMIRange(0.0, 18.5)),
    LabelledRange("Normal range", BMIRange(18.5, 23.0)),
    LabelledRange("Overweight (at risk)", BMIRange(23.0, 27.5)),
    LabelledRange("Obese", BMIRange(27.5, None)),
)

HEALTH_STATUS = MappingProxyType(
    {
        BMICategory.SEVERELY_UNDERWEIGHT: "critical",
        BMICategory.UNDERWEIGHT: "poor",
        BMICategory.NORMAL: "excellent",
        BMICategory.OVERWEIGHT: "good",
        BMICategory.OBESE_CLASS1: "fair",
        BMICategory.OBESE_CLASS2: "poor",
        BMICategory.OBESE_CLASS3: "critical",
    }
)
