"""
Unit tests for FormulaCalculator.

Tests BMI, BMR formulas, TDEE, ideal weight range and metabolic age.
"""

import pytest
from healthcalc.domain.errors import DomainComputationError, MissingInputError
from healthcalc.services.formula_calculator import FormulaCalculator


class TestBMICalculation:
    """Tests for calculate_bmi."""

    def test_calculate_bmi_valid(self):
        """170 cm / 65 kg is about 22.49."""
        bmi = FormulaCalculator.calculate_bmi(170.0, 65.0)
        assert round(bmi, 2) == 22.49

    def test_calculate_bmi_is_unrounded(self):
        """Rounding is left to the caller."""
        bmi = FormulaCalculator.calculate_bmi(170.0, 65.0)
        assert bmi == pytest.approx(65.0 / 1.7 ** 2)
        assert bmi != round(bmi, 2)

    def test_bmi_increases_with_weight(self):
        """Monotonically increasing in weight at fixed height."""
        values = [
            FormulaCalculator.calculate_bmi(175.0, weight)
            for weight in range(10, 501, 10)
        ]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_bmi_decreases_with_height(self):
        """Monotonically decreasing in height at fixed weight."""
        values = [
            FormulaCalculator.calculate_bmi(height, 70.0)
            for height in range(50, 301, 10)
        ]
        assert values == sorted(values, reverse=True)

    def test_calculate_bmi_zero_height(self):
        """Raises for non-positive height."""
        with pytest.raises(DomainComputationError, match="Height"):
            FormulaCalculator.calculate_bmi(0.0, 70.0)

    def test_calculate_bmi_negative_weight(self):
        """Raises for negative weight."""
        with pytest.raises(DomainComputationError, match="Weight"):
            FormulaCalculator.calculate_bmi(170.0, -1.0)


class TestBMRCalculation:
    """Tests for calculate_bmr."""

    def test_mifflin_male(self):
        bmr = FormulaCalculator.calculate_bmr(180.0, 80.0, 30, "male")
        assert bmr == pytest.approx(1853.632)

    def test_mifflin_female(self):
        bmr = FormulaCalculator.calculate_bmr(165.0, 60.0, 25, "female")
        assert bmr == pytest.approx(1405.333)

    def test_harris_benedict_matches_default_formula(self):
        """Harris-Benedict currently shares the default coefficients."""
        default = FormulaCalculator.calculate_bmr(180.0, 80.0, 30, "male")
        harris = FormulaCalculator.calculate_bmr(
            180.0, 80.0, 30, "male", formula="harris_benedict"
        )
        assert harris == pytest.approx(default)

    def test_katch_mcardle_uses_lean_mass(self):
        """80 kg at 20% body fat: 370 + 21.6 * 64."""
        bmr = FormulaCalculator.calculate_bmr(
            180.0, 80.0, 30, "male", formula="katch_mcardle", body_fat_percentage=20.0
        )
        assert bmr == pytest.approx(1752.4)

    def test_katch_mcardle_ignores_age_and_gender(self):
        bmr = FormulaCalculator.calculate_bmr(
            180.0, 80.0, None, None, formula="katch_mcardle", body_fat_percentage=20.0
        )
        assert bmr == pytest.approx(1752.4)

    def test_katch_mcardle_without_body_fat(self):
        """Raises MissingInputError without body fat percentage."""
        with pytest.raises(MissingInputError, match="Body fat"):
            FormulaCalculator.calculate_bmr(
                180.0, 80.0, 30, "male", formula="katch_mcardle"
            )

    def test_missing_input_is_a_computation_error(self):
        assert issubclass(MissingInputError, DomainComputationError)

    def test_unknown_formula(self):
        with pytest.raises(DomainComputationError) as exc_info:
            FormulaCalculator.calculate_bmr(180.0, 80.0, 30, "male", formula="magic")
        assert exc_info.value.code == "UNKNOWN_FORMULA"

    def test_missing_age(self):
        with pytest.raises(MissingInputError):
            FormulaCalculator.calculate_bmr(180.0, 80.0, None, "male")


class TestTDEEAndDerivedValues:
    """Tests for TDEE, ideal weight range, metabolic age and percentile."""

    def test_tdee_moderate(self):
        """BMR 1500 at moderate activity (1.55) is 2325."""
        assert FormulaCalculator.calculate_tdee(1500, 1.55) == pytest.approx(2325)

    def test_ideal_weight_range(self):
        """BMI 18.5 and 25 bounds at 180 cm."""
        assert FormulaCalculator.ideal_weight_range(180.0) == {"min": 59.9, "max": 81.0}

    def test_lean_mass(self):
        assert FormulaCalculator.calculate_lean_mass(80.0, 25.0) == pytest.approx(60.0)

    def test_lean_mass_invalid_percentage(self):
        with pytest.raises(DomainComputationError):
            FormulaCalculator.calculate_lean_mass(80.0, 100.0)

    def test_metabolic_age_matches_expected_bmr(self):
        """A BMR equal to the expected value gives the actual age."""
        assert FormulaCalculator.calculate_metabolic_age(1800, 30, "male") == 30

    def test_metabolic_age_higher_bmr_is_younger(self):
        assert FormulaCalculator.calculate_metabolic_age(1880, 30, "male") == 20

    def test_metabolic_age_female(self):
        assert FormulaCalculator.calculate_metabolic_age(1340, 30, "female") == 40

    def test_metabolic_age_clamped(self):
        assert FormulaCalculator.calculate_metabolic_age(3000, 30, "male") == 18
        assert FormulaCalculator.calculate_metabolic_age(500, 60, "male") == 80

    def test_bmi_percentile_adult(self):
        assert FormulaCalculator.bmi_percentile(27.5, 30) == 50
        assert FormulaCalculator.bmi_percentile(50.0, 30) == 100
        assert FormulaCalculator.bmi_percentile(12.0, None) == 0

    def test_bmi_percentile_minor(self):
        """Minors get None."""
        assert FormulaCalculator.bmi_percentile(20.0, 15) is None
