"""Tests for bioavailability, drug-likeness, descriptor and ADMET calculators."""

import pytest

from chembl_mcp.analysis import (
    analyze_admet,
    assess_drug_likeness,
    bioavailability_category,
    bioavailability_count,
    bioavailability_score,
    calculate_descriptors,
    lipinski_overall_pass,
)
from chembl_mcp.analysis.properties import BIOAVAILABILITY_RULES
from chembl_mcp.core.types import CompoundProperties

AT_LIMITS = {"molecular_weight": 500, "alogp": 5, "hbd": 5, "hba": 10, "psa": 140, "rtb": 10}


class TestBioavailability:
    def test_bounds_are_inclusive(self):
        props = CompoundProperties(**AT_LIMITS)
        assert bioavailability_count(props) == 6
        assert bioavailability_score(props) == 1.0
        assert bioavailability_category(props) == "High"

    def test_just_over_each_bound_fails(self):
        for name, limit in BIOAVAILABILITY_RULES:
            props = CompoundProperties(**{**AT_LIMITS, name: limit + 0.01})
            assert bioavailability_count(props) == 5

    def test_missing_values_fail(self):
        props = CompoundProperties()
        assert bioavailability_count(props) == 0
        assert bioavailability_score(props) == 0.0
        assert bioavailability_category(props) == "Low"

    def test_adding_a_passing_value_adds_one_sixth(self):
        values = {}
        previous = bioavailability_score(CompoundProperties())
        for name, limit in BIOAVAILABILITY_RULES:
            values[name] = limit
            score = bioavailability_score(CompoundProperties(**values))
            assert score == pytest.approx(previous + 1 / 6)
            previous = score

    @pytest.mark.parametrize("count,category", [(6, "High"), (5, "High"), (4, "Medium"), (3, "Medium"), (2, "Low"), (0, "Low")])
    def test_categories(self, count, category):
        passing = dict(list(AT_LIMITS.items())[:count])
        assert bioavailability_category(CompoundProperties(**passing)) == category


class TestLipinski:
    @pytest.mark.parametrize("violations,expected", [(0, True), (1, True), (2, False), (3, False), (4, False)])
    def test_overall_pass(self, violations, expected):
        assert lipinski_overall_pass(violations) is expected

    def test_unknown_violations(self):
        assert lipinski_overall_pass(None) is None


class TestDrugLikeness:
    def test_aspirin(self, aspirin):
        report = assess_drug_likeness(CompoundProperties.from_molecule(aspirin))
        lipinski = report["lipinski_rule_of_five"]
        assert lipinski["molecular_weight"] == {"value": 180.16, "limit": 500, "pass": True}
        assert lipinski["hbd"] == {"value": 1, "limit": 5, "pass": True}
        assert lipinski["violations"] == 0
        assert lipinski["overall_pass"] is True
        assert report["additional_rules"]["psa"]["pass"] is True
        assert report["oral_bioavailability"] == "High"
        assert report["bioavailability_score"] == 1.0
        assert report["assessment"] == "Drug-like"

    @pytest.mark.parametrize(
        "field,value,limit",
        [
            ("molecular_weight", 500, 500),
            ("alogp", 5, 5),
            ("hbd", 5, 5),
            ("hba", 10, 10),
        ],
    )
    def test_per_field_bounds_inclusive(self, field, value, limit):
        key = "logp" if field == "alogp" else field
        at = assess_drug_likeness(CompoundProperties(**{field: value}))
        over = assess_drug_likeness(CompoundProperties(**{field: value + 0.5}))
        assert at["lipinski_rule_of_five"][key]["pass"] is True
        assert over["lipinski_rule_of_five"][key]["pass"] is False

    def test_psa_and_rtb_bounds(self):
        at = assess_drug_likeness(CompoundProperties(psa=140, rtb=10))["additional_rules"]
        over = assess_drug_likeness(CompoundProperties(psa=140.1, rtb=11))["additional_rules"]
        assert at["psa"]["pass"] is True
        assert at["rotatable_bonds"]["pass"] is True
        assert over["psa"]["pass"] is False
        assert over["rotatable_bonds"]["pass"] is False

    def test_unknown_values_reported_as_none(self):
        report = assess_drug_likeness(CompoundProperties())
        assert report["lipinski_rule_of_five"]["molecular_weight"]["pass"] is None
        assert report["assessment"] == "Unknown"

    def test_veber_concerns(self):
        report = assess_drug_likeness(CompoundProperties(num_ro5_violations=1, psa=150))
        assert report["assessment"] == "Drug-like (Rule of Five) with Veber rule concerns"

    def test_not_drug_like(self):
        report = assess_drug_likeness(CompoundProperties(num_ro5_violations=2))
        assert report["assessment"] == "Not drug-like"


class TestDescriptors:
    def test_aspirin(self, aspirin):
        report = calculate_descriptors(CompoundProperties.from_molecule(aspirin))
        assert report["descriptors"]["molecular_formula"] == "C9H8O4"
        assert report["descriptors"]["rotatable_bonds"] == 2
        assert report["derived"]["hbd_hba_total"] == 4
        assert report["derived"]["lipinski_compliant"] is True
        assert report["derived"]["bioavailability_score"] == 1.0

    def test_partial_hydrogen_bonding(self):
        report = calculate_descriptors(CompoundProperties(hbd=2))
        assert report["derived"]["hbd_hba_total"] is None


class TestAdmet:
    def test_sections(self, aspirin):
        report = analyze_admet(CompoundProperties.from_molecule(aspirin))
        assert set(report) == {
            "absorption",
            "distribution",
            "metabolism",
            "excretion",
            "toxicity",
            "disclaimer",
        }
        assert report["absorption"]["intestinal_absorption"] == "High"
        assert report["absorption"]["membrane_permeability"] == "Moderate"
        assert report["distribution"]["blood_brain_barrier_penetration"] == "Likely"
        assert report["distribution"]["plasma_protein_binding"] == "Moderate"
        assert report["metabolism"]["cyp_metabolism_liability"] == "Typical"
        assert report["excretion"]["predominant_route"] == "Likely renal"
        assert report["toxicity"]["physicochemical_toxicity_risk"] == "Not flagged"

    def test_lipophilic_compound(self):
        report = analyze_admet(
            CompoundProperties(molecular_weight=480, alogp=4.5, psa=40, aromatic_rings=3)
        )
        assert report["distribution"]["plasma_protein_binding"] == "Likely high"
        assert report["metabolism"]["cyp_metabolism_liability"] == "Elevated"
        assert report["excretion"]["predominant_route"] == "Likely hepatic/biliary"
        assert report["toxicity"]["physicochemical_toxicity_risk"].startswith("Elevated")

    def test_unknown_inputs(self):
        report = analyze_admet(CompoundProperties())
        assert report["absorption"]["intestinal_absorption"] == "Unknown"
        assert report["distribution"]["blood_brain_barrier_penetration"] == "Unknown"
        assert report["toxicity"]["structural_alerts"] == "Not evaluated"
