"""Tests for intake form derivations."""

from datetime import date

import pytest

from glyeral.intake import (
    CkdStage,
    age_from_dob,
    average_glucose,
    bmi_category,
    calculate_bmi,
    ckd_stage,
    profile_from_intake,
)


class TestCkdStage:

    @pytest.mark.parametrize("egfr,expected", [
        (95, CkdStage(1, "Normal")),
        (90, CkdStage(1, "Normal")),
        ("75", CkdStage(2, "Mild")),
        (59.9, CkdStage(3, "Moderate")),
        (30, CkdStage(3, "Moderate")),
        (15, CkdStage(4, "Severe")),
        (14, CkdStage(5, "Failure")),
    ])
    def test_stages(self, egfr, expected):
        assert ckd_stage(egfr) == expected

    @pytest.mark.parametrize("egfr", [None, "", "abc", 0])
    def test_missing(self, egfr):
        assert ckd_stage(egfr) is None


class TestBmi:

    def test_calculate_bmi(self):
        """Test BMI from kg and cm, rounded to one decimal."""
        assert calculate_bmi(85, 175) == 27.8
        assert calculate_bmi("70", "170") == 24.2

    @pytest.mark.parametrize("weight,height", [(None, 170), (70, ""), (70, 0), ("abc", 170)])
    def test_invalid_inputs(self, weight, height):
        assert calculate_bmi(weight, height) is None

    @pytest.mark.parametrize("bmi,category", [
        (17.0, "Underweight"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (30.0, "Obese"),
        (None, None),
    ])
    def test_bmi_category(self, bmi, category):
        assert bmi_category(bmi) == category


class TestAge:

    def test_birthday_not_yet_reached(self):
        assert age_from_dob("1966-06-15", today=date(2024, 6, 14)) == 57

    def test_birthday_today(self):
        assert age_from_dob(date(1966, 6, 15), today=date(2024, 6, 15)) == 58

    @pytest.mark.parametrize("dob", [None, "", "15/06/1966"])
    def test_unparseable(self, dob):
        assert age_from_dob(dob) is None


class TestAverageGlucose:

    def test_average_of_parseable_readings(self):
        assert average_glucose(["120", "", 150, None, "abc", "135"]) == 135

    def test_rounds_half_up(self):
        assert average_glucose([120, 121]) == 121

    def test_no_readings(self):
        assert average_glucose([]) == 0
        assert average_glucose(["", None]) == 0


class TestProfileFromIntake:

    def test_builds_engine_input(self):
        """Test wizard sections map onto PatientProfile fields."""
        profile = profile_from_intake("MR-2024-001", {
            "labs": {"hba1c": "8.2", "egfr": "40"},
            "conditions": {"is_pregnant": False, "has_ckd": True, "has_cad": False},
            "medications": {"metformin": True, "glargine": False},
        })

        assert profile.patient_id == "MR-2024-001"
        assert profile.hba1c == 8.2
        assert profile.egfr == 40.0
        assert profile.has_ckd is True
        assert profile.active_medication_keys == ["metformin"]

    def test_empty_intake(self):
        profile = profile_from_intake(None, {})
        assert profile.resolve().defaulted_labs == ("egfr", "hba1c")
