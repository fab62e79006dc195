"""
Unit tests for MeasurementValidator.

Tests hard errors, soft warnings and the TDEE-specific checks.
"""

import pytest
from healthcalc.domain.errors import ValidationError
from healthcalc.services.measurement_validator import MeasurementValidator


class TestValidateMeasurement:
    """Tests for validate_measurement."""

    def test_valid_adult(self):
        result = MeasurementValidator.validate_measurement(170.0, 65.0, age=30)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_weight_below_range(self):
        """170 cm / 9 kg is rejected with a weight range error."""
        result = MeasurementValidator.validate_measurement(170.0, 9.0)
        assert result.valid is False
        assert "Weight must be between 10-500 kg" in result.errors

    def test_height_in_metres_is_rejected(self):
        """Height given in metres fails the range and the derived BMI check."""
        result = MeasurementValidator.validate_measurement(1.7, 65.0)
        assert result.valid is False
        assert "Height must be between 50-300 cm" in result.errors
        assert any("plausible range" in e for e in result.errors)

    def test_implausible_high_bmi(self):
        """150 cm / 200 kg gives BMI ~89, outside [10, 70]."""
        result = MeasurementValidator.validate_measurement(150.0, 200.0)
        assert result.valid is False
        assert any("plausible range" in e for e in result.errors)

    @pytest.mark.parametrize("age", [0, 151])
    def test_age_out_of_range(self, age):
        result = MeasurementValidator.validate_measurement(170.0, 65.0, age=age)
        assert result.valid is False
        assert "Age must be between 1-150 years" in result.errors

    def test_invalid_gender(self):
        result = MeasurementValidator.validate_measurement(
            170.0, 65.0, gender="other"
        )
        assert result.valid is False
        assert "Gender must be either male or female" in result.errors

    def test_missing_height(self):
        result = MeasurementValidator.validate_measurement(None, 65.0)
        assert result.valid is False
        assert "Height must be between 50-300 cm" in result.errors

    def test_low_bmi_warning(self):
        """BMI ~13.8 is accepted with a warning."""
        result = MeasurementValidator.validate_measurement(170.0, 40.0)
        assert result.valid is True
        assert any("very low" in w for w in result.warnings)

    def test_high_bmi_warning(self):
        """BMI ~54.7 is accepted with a warning."""
        result = MeasurementValidator.validate_measurement(160.0, 140.0)
        assert result.valid is True
        assert any("very high" in w for w in result.warnings)

    def test_minor_warning(self):
        result = MeasurementValidator.validate_measurement(160.0, 50.0, age=15)
        assert result.valid is True
        assert any("minors" in w for w in result.warnings)

    def test_elderly_warning(self):
        result = MeasurementValidator.validate_measurement(170.0, 65.0, age=70)
        assert result.valid is True
        assert any("older adults" in w for w in result.warnings)

    def test_raise_for_errors(self):
        result = MeasurementValidator.validate_measurement(170.0, 9.0)
        with pytest.raises(ValidationError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.errors == result.errors
        assert exc_info.value.status_code == 400

    def test_raise_for_errors_valid_is_noop(self):
        MeasurementValidator.validate_measurement(170.0, 65.0).raise_for_errors()


class TestValidateTDEEInput:
    """Tests for validate_tdee_input."""

    def test_valid(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, 30, "male", "moderate"
        )
        assert result.valid is True

    def test_age_required(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, None, "male", "moderate"
        )
        assert result.valid is False
        assert "Age is required for TDEE calculation" in result.errors

    def test_gender_required(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, 30, None, "moderate"
        )
        assert "Gender must be either male or female" in result.errors

    def test_unknown_activity_level(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, 30, "male", "couch"
        )
        assert result.valid is False
        assert any(e.startswith("Activity level must be one of") for e in result.errors)

    def test_unknown_formula(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, 30, "male", "light", formula="magic"
        )
        assert any(e.startswith("Formula must be one of") for e in result.errors)

    @pytest.mark.parametrize("body_fat", [0.0, 100.0, -5.0])
    def test_body_fat_out_of_range(self, body_fat):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 80.0, 30, "male", "light", body_fat_percentage=body_fat
        )
        assert "Body fat percentage must be between 0 and 100" in result.errors

    def test_measurement_errors_carry_over(self):
        result = MeasurementValidator.validate_tdee_input(
            180.0, 9.0, 30, "male", "light"
        )
        assert "Weight must be between 10-500 kg" in result.errors
