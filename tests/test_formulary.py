"""Tests for formulary lookups and medication matching."""

import logging

import pytest

from glyeral.engine import DRUG_TABLE, display_name, lookup, match_medication
from glyeral.engine.formulary import GENERIC_ENTRY


class TestLookup:
    """Tests for formulary.lookup."""

    def test_every_table_drug_has_an_entry(self):
        """Test that no drug in the table falls back to the generic entry."""
        for rule in DRUG_TABLE:
            assert lookup(rule.drug_id) is not GENERIC_ENTRY, rule.drug_id

    def test_known_entry(self):
        entry = lookup("Metformin")

        assert entry.drug_class == "Biguanide"
        assert "1000mg" in entry.dosage_options
        assert entry.default_frequency == "Once daily"

    def test_unknown_drug_gets_generic_entry(self, caplog):
        """Test unknown ids return N/A options and log a warning."""
        with caplog.at_level(logging.WARNING, logger="glyeral"):
            entry = lookup("Unobtainium")

        assert entry.drug_class == "N/A"
        assert entry.dosage_range == "N/A"
        assert entry.dosage_options == ["Custom"]
        assert entry.default_frequency == "Once daily"
        assert entry.default_timing == "Morning"
        assert "Unobtainium" in caplog.text

    def test_mealtime_timing(self):
        assert lookup("Lispro_Before_Lunch").timing_options == ["Before lunch"]


class TestDisplayName:

    @pytest.mark.parametrize("drug_id,expected", [
        ("Metformin", "Metformin"),
        ("Glargine_Before_Dinner", "Glargine (Before Dinner)"),
        ("Repaglinide_Before_Breakfast", "Repaglinide (Before Breakfast)"),
    ])
    def test_display_name(self, drug_id, expected):
        assert display_name(drug_id) == expected


class TestMatchMedication:
    """Tests for mapping intake names to drug ids."""

    @pytest.mark.parametrize("name,expected", [
        ("lispro_breakfast", "Lispro_Before_Breakfast"),
        ("dapagliflozin", "Farxiga"),
        ("linagliptin", "Tradjenta"),
        ("Glargine_Before_Dinner", "Glargine_Before_Dinner"),
        ("glargine_before_dinner", "Glargine_Before_Dinner"),
        ("Metformin 1000mg", "Metformin"),
        ("Ozempic", "Semaglutide"),
        ("repaglinide lunch", "Repaglinide_Before_Lunch"),
    ])
    def test_matches(self, name, expected):
        assert match_medication(name) == expected

    @pytest.mark.parametrize("name", ["", "aspirin", None])
    def test_no_match(self, name):
        assert match_medication(name) is None
