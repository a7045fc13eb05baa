"""Tests for the recommendation engine and drug table."""

import logging

import pytest
from pydantic import ValidationError

from glyeral.engine import DRUG_TABLE, RecommendationEngine, evaluate
from glyeral.models import DrugRecommendation, PatientProfile

EXPECTED_ORDER = [
    "Metformin",
    "Glimepiride",
    "Tradjenta",
    "Farxiga",
    "Semaglutide",
    "Repaglinide_Before_Breakfast",
    "Repaglinide_Before_Lunch",
    "Repaglinide_Before_Dinner",
    "Glargine_Before_Dinner",
    "Lispro_Before_Breakfast",
    "Lispro_Before_Lunch",
    "Lispro_Before_Dinner",
]

NON_INSULIN = EXPECTED_ORDER[:8]
INSULIN = EXPECTED_ORDER[8:]


def by_id(recs: list[DrugRecommendation]) -> dict[str, DrugRecommendation]:
    return {rec.drug_id: rec for rec in recs}


class TestTotality:
    """Every profile yields one recommendation per table row."""

    @pytest.mark.parametrize("profile", [
        None,
        {},
        {"egfr": "", "hba1c": None},
        {"egfr": "abc", "hba1c": "not a number"},
        {"egfr": -5, "hba1c": 0},
        {"egfr": 5, "hba1c": 15, "isPregnant": True, "hasCKD": True, "hasCAD": True},
    ])
    def test_full_list_in_table_order(self, profile):
        """Test that odd and empty profiles still produce the full list."""
        recs = evaluate(profile)

        assert [rec.drug_id for rec in recs] == EXPECTED_ORDER
        for rec in recs:
            assert 0 <= rec.confidence <= 100
            assert rec.status in {"approved", "warning", "blocked"}

    def test_table_order_matches_engine(self):
        """Test that the engine exposes table order."""
        assert RecommendationEngine().drug_ids == EXPECTED_ORDER
        assert len(DRUG_TABLE) == 12

    def test_deterministic(self, engine, healthy_profile):
        """Test that evaluating twice gives identical output."""
        first = engine.evaluate(healthy_profile)
        second = engine.evaluate(healthy_profile)

        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_dict_and_model_inputs_agree(self, engine):
        """Test that camelCase JSON input matches the model input."""
        from_dict = engine.evaluate({"egfr": 40, "hba1c": 8.6, "hasCAD": True})
        from_model = engine.evaluate(PatientProfile(egfr=40, hba1c=8.6, has_cad=True))

        assert [r.model_dump() for r in from_dict] == [r.model_dump() for r in from_model]


class TestClinicalScenarios:
    """The four reference patients."""

    def test_normal_profile(self, engine):
        """Test egfr=100, hba1c=7.0, no conditions."""
        recs = by_id(engine.evaluate(PatientProfile(egfr=100, hba1c=7.0)))

        metformin = recs["Metformin"]
        assert metformin.dose_text == "1000mg twice daily"
        assert metformin.confidence == 95
        assert metformin.status == "approved"
        assert recs["Farxiga"].confidence == 82
        assert recs["Glargine_Before_Dinner"].dose_text == "10 units before dinner"
        assert recs["Glargine_Before_Dinner"].confidence == 78

    @pytest.mark.parametrize("labs", [
        {},
        {"egfr": 100, "hba1c": 6.5},
        {"egfr": 20, "hba1c": 10.0},
    ])
    def test_pregnant_patient(self, engine, labs):
        """Test that pregnancy blocks all non-insulin drugs but no insulin."""
        recs = by_id(engine.evaluate(PatientProfile(is_pregnant=True, **labs)))

        for drug_id in NON_INSULIN:
            assert recs[drug_id].status == "blocked", drug_id
        for drug_id in INSULIN:
            assert recs[drug_id].status == "approved", drug_id

    def test_severe_renal_impairment(self, engine, severe_ckd_profile):
        """Test egfr=20 blocks Metformin and Farxiga with renal reasons."""
        recs = by_id(engine.evaluate(severe_ckd_profile))

        assert recs["Metformin"].status == "blocked"
        assert "eGFR < 30" in recs["Metformin"].warnings[0]
        assert recs["Farxiga"].status == "blocked"
        assert "eGFR < 25" in recs["Farxiga"].warnings[0]

    def test_poor_control(self, engine):
        """Test hba1c=9.5 raises basal insulin and Semaglutide starting dose."""
        recs = by_id(engine.evaluate(PatientProfile(hba1c=9.5)))

        assert recs["Glargine_Before_Dinner"].dose_text == "20 units before dinner"
        assert recs["Glargine_Before_Dinner"].confidence == 92
        assert recs["Semaglutide"].dose_text.startswith("0.5mg weekly")


class TestHba1cThresholds:
    """Glargine and Semaglutide step up only strictly above their HbA1c cutoffs."""

    @pytest.mark.parametrize("hba1c,dosage,confidence", [
        (8.99, "10 units", 78),
        (9, "10 units", 78),
        (9.01, "20 units", 92),
    ])
    def test_glargine(self, engine, hba1c, dosage, confidence):
        rec = by_id(engine.evaluate(PatientProfile(hba1c=hba1c)))["Glargine_Before_Dinner"]

        assert rec.original_dosage == dosage
        assert rec.confidence == confidence

    @pytest.mark.parametrize("hba1c,dosage,dose_text", [
        (8, "0.25mg", "0.25mg weekly → titrate to 0.5mg"),
        (8.01, "0.5mg", "0.5mg weekly → titrate to 1mg"),
    ])
    def test_semaglutide(self, engine, hba1c, dosage, dose_text):
        rec = by_id(engine.evaluate(PatientProfile(hba1c=hba1c)))["Semaglutide"]

        assert rec.original_dosage == dosage
        assert rec.dose_text == dose_text


class TestRenalRules:
    """eGFR thresholds for Metformin and Farxiga."""

    @pytest.mark.parametrize("egfr,dose,confidence,status", [
        (45, "1000mg twice daily", 95, "approved"),
        (44.9, "500mg twice daily", 70, "approved"),
        (30, "500mg twice daily", 70, "approved"),
        (29.9, "Not recommended", 0, "blocked"),
    ])
    def test_metformin_thresholds(self, engine, egfr, dose, confidence, status):
        """Test Metformin dose, confidence and status around 45 and 30."""
        metformin = by_id(engine.evaluate(PatientProfile(egfr=egfr)))["Metformin"]

        assert metformin.dose_text == dose
        assert metformin.confidence == confidence
        assert metformin.status == status

    def test_metformin_dose_reduction_caveat(self, engine, ckd_profile):
        """Test the 30-45 caveat appears without a block."""
        metformin = by_id(engine.evaluate(ckd_profile))["Metformin"]

        assert metformin.warnings == ["Reduce dose for eGFR 30-45"]
        assert metformin.original_dosage == "500mg"

    @pytest.mark.parametrize("egfr,dose,status", [
        (45, "10mg once daily", "approved"),
        (44, "5mg once daily", "approved"),
        (25, "5mg once daily", "approved"),
        (24.9, "5mg once daily", "blocked"),
    ])
    def test_farxiga_thresholds(self, engine, egfr, dose, status):
        """Test Farxiga dosing and the eGFR 25 floor."""
        farxiga = by_id(engine.evaluate(PatientProfile(egfr=egfr)))["Farxiga"]

        assert farxiga.dose_text == dose
        assert farxiga.status == status

    def test_farxiga_low_egfr_caveat(self, engine):
        """Test reduced-efficacy caveat for 25 <= egfr < 45."""
        farxiga = by_id(engine.evaluate(PatientProfile(egfr=30)))["Farxiga"]

        assert "Reduced glucose efficacy at lower eGFR" in farxiga.warnings

    def test_renal_block_precedes_pregnancy(self, engine):
        """Test only one BLOCKED reason is listed and renal wins."""
        recs = by_id(engine.evaluate(PatientProfile(egfr=20, is_pregnant=True)))

        for drug_id, reason in [
            ("Metformin", "BLOCKED: eGFR < 30 - Contraindicated"),
            ("Farxiga", "BLOCKED: eGFR < 25"),
        ]:
            warnings = recs[drug_id].warnings
            assert warnings[0] == reason
            assert sum(w.startswith("BLOCKED") for w in warnings) == 1

    @pytest.mark.parametrize("flags", [{"has_cad": True}, {"has_ckd": True}])
    def test_farxiga_cardio_renal_confidence(self, engine, flags):
        """Test CAD or CKD raises Farxiga confidence to 90."""
        farxiga = by_id(engine.evaluate(PatientProfile(egfr=80, **flags)))["Farxiga"]
        assert farxiga.confidence == 90

    def test_low_egfr_implies_ckd(self, engine):
        """Test eGFR below 60 counts as CKD without the flag."""
        farxiga = by_id(engine.evaluate(PatientProfile(egfr=55)))["Farxiga"]
        assert farxiga.confidence == 90


class TestBlockingMonotonicity:
    """Blocks never disappear when the profile gets worse."""

    @pytest.mark.parametrize("egfr", [100, 60, 44, 29, 24, 10])
    def test_lower_egfr_keeps_blocks(self, engine, egfr):
        """Test that lowering eGFR never unblocks a drug."""
        before = by_id(engine.evaluate(PatientProfile(egfr=egfr)))
        after = by_id(engine.evaluate(PatientProfile(egfr=egfr - 5)))

        for drug_id, rec in before.items():
            if rec.is_blocked:
                assert after[drug_id].is_blocked, drug_id

    def test_pregnancy_keeps_renal_blocks(self, engine):
        """Test adding pregnancy never unblocks a drug."""
        before = by_id(engine.evaluate(PatientProfile(egfr=20)))
        after = by_id(engine.evaluate(PatientProfile(egfr=20, is_pregnant=True)))

        for drug_id, rec in before.items():
            if rec.is_blocked:
                assert after[drug_id].is_blocked


class TestWarnings:
    """Warning assembly and ordering."""

    def test_blocked_drug_has_no_class_warnings(self, engine, pregnant_profile):
        """Test that a blocked Glimepiride shows only the block reason."""
        glimepiride = by_id(engine.evaluate(pregnant_profile))["Glimepiride"]
        assert glimepiride.warnings == ["BLOCKED: Pregnancy"]

    def test_class_warnings_when_prescribable(self, recommendations):
        """Test that class warnings are listed for unblocked drugs."""
        glimepiride = recommendations["Glimepiride"]

        assert glimepiride.status == "warning"
        assert glimepiride.warnings == ["Hypoglycemia risk", "Weight gain potential"]

    def test_glargine_at_goal_caveat(self, engine):
        """Test Glargine caveat for hba1c <= 7.5."""
        at_goal = by_id(engine.evaluate(PatientProfile(hba1c=7.5)))["Glargine_Before_Dinner"]
        above = by_id(engine.evaluate(PatientProfile(hba1c=7.6)))["Glargine_Before_Dinner"]

        assert at_goal.warnings == ["May not be needed if HbA1c at goal"]
        assert above.warnings == []

    def test_primary_warning_is_block_reason(self, blocked_metformin):
        """Test the collapsed card shows the block reason."""
        assert blocked_metformin.primary_warning.startswith("BLOCKED")


class TestLispro:
    """Mealtime insulin confidence steps at hba1c 8.5."""

    @pytest.mark.parametrize("hba1c,breakfast,dinner", [(8.5, 60, 62), (8.6, 80, 82)])
    def test_confidence(self, engine, hba1c, breakfast, dinner):
        recs = by_id(engine.evaluate(PatientProfile(hba1c=hba1c)))

        assert recs["Lispro_Before_Breakfast"].confidence == breakfast
        assert recs["Lispro_Before_Lunch"].confidence == breakfast
        assert recs["Lispro_Before_Dinner"].confidence == dinner
        assert recs["Lispro_Before_Dinner"].dose_text == "8 units before dinner"


class TestPresentation:
    """Display fields filled from the formulary."""

    def test_display_fields(self, recommendations):
        glargine = recommendations["Glargine_Before_Dinner"]

        assert glargine.display_name == "Glargine (Before Dinner)"
        assert glargine.drug_class == "Basal Insulin"
        assert glargine.category == "Insulin"
        assert recommendations["Semaglutide"].category == "Injectable"

    def test_currently_prescribed(self, engine):
        """Test intake medication keys mark matching drugs."""
        profile = PatientProfile(current_medications={
            "metformin": "1000",
            "dapagliflozin": True,
            "lispro_lunch": "6",
            "glimepiride": "0",
        })
        recs = by_id(engine.evaluate(profile))

        assert recs["Metformin"].currently_prescribed
        assert recs["Farxiga"].currently_prescribed
        assert recs["Lispro_Before_Lunch"].currently_prescribed
        assert not recs["Glimepiride"].currently_prescribed
        assert not recs["Lispro_Before_Dinner"].currently_prescribed

    def test_recommendations_are_immutable(self, recommendations):
        """Test that a produced recommendation cannot be edited."""
        with pytest.raises(ValidationError):
            recommendations["Metformin"].confidence = 10


class TestLogging:
    """Engine log output."""

    def test_summary_and_blocked_lines(self, engine, caplog):
        """Test INFO summary and DEBUG per blocked drug."""
        with caplog.at_level(logging.DEBUG, logger="glyeral"):
            engine.evaluate(PatientProfile(patient_id="p1", egfr=20))

        messages = [r.getMessage() for r in caplog.records]
        assert any("Evaluated 12 drugs for patient p1" in m and "2 blocked" in m for m in messages)
        assert any(m.startswith("Metformin blocked") for m in messages)
