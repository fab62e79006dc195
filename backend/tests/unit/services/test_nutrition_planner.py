"""
Unit tests for NutritionPlanner.

Tests macronutrient split, calorie goals, advice text and calorie warnings.
"""

from healthcalc.services.nutrition_planner import NutritionPlanner


class TestMacronutrientSplit:
    """Tests for macronutrient_split."""

    def test_split_for_2000_kcal(self):
        """25/25/50 split at 4/9/4 kcal per gram."""
        split = NutritionPlanner.macronutrient_split(2000)
        assert split["protein"] == {"calories": 500, "grams": 125.0, "percentage": 25}
        assert split["fat"] == {"calories": 500, "grams": 55.6, "percentage": 25}
        assert split["carbs"] == {"calories": 1000, "grams": 250.0, "percentage": 50}

    def test_calories_sum_to_tdee(self):
        split = NutritionPlanner.macronutrient_split(2400)
        assert sum(m["calories"] for m in split.values()) == 2400


class TestCalorieGoals:
    """Tests for calorie_goals."""

    def test_goals_for_2000_kcal(self):
        goals = NutritionPlanner.calorie_goals(2000)
        assert goals == {
            "maintenance": 2000,
            "mild_weight_loss": 1750,
            "weight_loss": 1500,
            "extreme_weight_loss": 1200,
            "mild_weight_gain": 2250,
            "weight_gain": 2500,
        }

    def test_loss_goals_floored(self):
        """Weight loss targets never drop below 1200 kcal."""
        goals = NutritionPlanner.calorie_goals(1300)
        assert goals["mild_weight_loss"] == 1200
        assert goals["weight_loss"] == 1200
        assert goals["extreme_weight_loss"] == 1200
        assert goals["weight_gain"] == 1800


class TestNutritionAdvice:
    """Tests for nutrition_advice."""

    def test_active_male(self):
        advice = NutritionPlanner.nutrition_advice(30, "male", "active")
        assert any("3.7" in a for a in advice)
        assert any("Zinc" in a for a in advice)
        assert any("training" in a for a in advice)

    def test_teenage_female(self):
        advice = NutritionPlanner.nutrition_advice(16, "female", "light")
        assert any("2.7" in a for a in advice)
        assert any("Iron" in a for a in advice)
        assert any("Teenagers" in a for a in advice)
        assert not any("training" in a for a in advice)

    def test_sedentary_senior(self):
        advice = NutritionPlanner.nutrition_advice(70, "male", "sedentary")
        assert any("Older adults" in a for a in advice)
        assert any("walks" in a for a in advice)


class TestCalorieWarnings:
    """Tests for calorie_warnings."""

    def test_no_warnings(self):
        assert NutritionPlanner.calorie_warnings(2200, 30, "male", 75) == []

    def test_below_male_minimum(self):
        warnings = NutritionPlanner.calorie_warnings(1400, 30, "male", 70)
        assert len(warnings) == 1
        assert "1500" in warnings[0]

    def test_female_minimum_is_lower(self):
        assert NutritionPlanner.calorie_warnings(1400, 30, "female", 55) == []

    def test_too_high_for_weight(self):
        warnings = NutritionPlanner.calorie_warnings(4000, 30, "male", 60)
        assert any("too high" in w for w in warnings)

    def test_minor(self):
        warnings = NutritionPlanner.calorie_warnings(2200, 16, "male", 60)
        assert any("minors" in w for w in warnings)
