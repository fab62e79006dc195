"""
Unit tests for TDEEService.

Tests BMR/TDEE pipeline, nutrition output, formula handling and statistics.
"""

import pytest

from healthcalc.domain.errors import MissingInputError, ValidationError
from healthcalc.models.calculation_record import TDEERecord
from healthcalc.services.tdee_service import TDEEService


class TestCalculate:
    """Tests for calculate."""

    def test_calculate_moderate_male(self, test_db, sample_user):
        result = TDEEService(test_db).calculate(
            user_id=sample_user.user_id,
            height=180.0,
            weight=80.0,
            age=30,
            gender="male",
            activity_level="moderate",
        )

        # BMR 1853.632 rounds to 1854 before the multiplier
        assert result["bmr"] == 1854
        assert result["tdee"] == 2874
        assert result["formula"] == "mifflin_st_jeor"
        assert result["activity_multiplier"] == 1.55
        assert result["activity_info"]["name"] == "Moderate"
        assert result["calorie_goals"]["maintenance"] == 2874
        assert set(result["macronutrients"]) == {"protein", "fat", "carbs"}
        assert result["bmi"] == 24.7
        assert result["bmi_category"] == "normal"
        assert result["metabolic_age"] == 23
        assert result["warnings"] == []
        assert any("Zinc" in a for a in result["nutrition_advice"])

    def test_calculate_persists_record(self, test_db, sample_user):
        result = TDEEService(test_db).calculate(
            sample_user.user_id, 165.0, 60.0, 25, "female", "light"
        )

        stored = test_db.query(TDEERecord).one()
        assert stored.record_id == result["id"]
        assert stored.tdee == result["tdee"]
        assert stored.calorie_goals == result["calorie_goals"]

    def test_katch_mcardle(self, test_db, sample_user):
        result = TDEEService(test_db).calculate(
            sample_user.user_id,
            180.0,
            80.0,
            30,
            "male",
            "moderate",
            formula="katch_mcardle",
            body_fat_percentage=20.0,
        )

        assert result["bmr"] == 1752
        assert result["tdee"] == 2716
        assert result["body_fat_percentage"] == 20.0

    def test_katch_mcardle_without_body_fat(self, test_db, sample_user):
        with pytest.raises(MissingInputError):
            TDEEService(test_db).calculate(
                sample_user.user_id,
                180.0,
                80.0,
                30,
                "male",
                "moderate",
                formula="katch_mcardle",
            )
        assert test_db.query(TDEERecord).count() == 0

    def test_invalid_activity_level(self, test_db, sample_user):
        with pytest.raises(ValidationError) as exc_info:
            TDEEService(test_db).calculate(
                sample_user.user_id, 180.0, 80.0, 30, "male", "couch"
            )
        assert any("Activity level" in e for e in exc_info.value.errors)
        assert test_db.query(TDEERecord).count() == 0

    def test_low_calorie_warning(self, test_db, sample_user):
        """A small sedentary senior falls under the minimum."""
        result = TDEEService(test_db).calculate(
            sample_user.user_id, 150.0, 40.0, 80, "female", "sedentary"
        )
        assert result["tdee"] == 1123
        assert any("below the recommended minimum" in w for w in result["warnings"])


class TestQueries:
    """Tests for activity levels, statistics and trend."""

    def test_activity_levels(self):
        levels = TDEEService.get_activity_levels()
        assert [level["level"] for level in levels] == [
            "sedentary",
            "light",
            "moderate",
            "active",
            "very_active",
        ]
        assert levels[0]["multiplier"] == 1.2
        assert levels[-1]["multiplier"] == 1.9

    def test_formulas(self):
        formulas = TDEEService.get_formulas()
        assert [f["formula"] for f in formulas] == [
            "mifflin_st_jeor",
            "harris_benedict",
            "katch_mcardle",
        ]
        assert formulas[0]["name"] == "Mifflin-St Jeor"
        assert formulas[2]["requires_body_fat"] is True

    def test_statistics_most_used_activity(self, test_db, sample_user):
        service = TDEEService(test_db)
        service.calculate(sample_user.user_id, 180.0, 80.0, 30, "male", "moderate")
        service.calculate(sample_user.user_id, 180.0, 80.0, 30, "male", "active")
        service.calculate(sample_user.user_id, 180.0, 80.0, 30, "male", "moderate")

        stats = service.get_statistics(sample_user.user_id)

        assert stats["total_records"] == 3
        assert stats["most_used_activity_level"] == "moderate"
        assert stats["distribution"] == {"moderate": 2, "active": 1}

    def test_trend_insufficient(self, test_db, sample_user):
        service = TDEEService(test_db)
        service.calculate(sample_user.user_id, 180.0, 80.0, 30, "male", "moderate")

        assert service.get_trend(sample_user.user_id)["direction"] == "insufficient_data"

    def test_clear_history(self, test_db, sample_user):
        service = TDEEService(test_db)
        service.calculate(sample_user.user_id, 180.0, 80.0, 30, "male", "moderate")

        assert service.clear_history(sample_user.user_id) == 1
        assert service.get_latest(sample_user.user_id) is None
