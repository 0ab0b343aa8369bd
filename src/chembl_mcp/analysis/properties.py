"""
Rule-based property assessments over ChEMBL-computed descriptors.

Nothing here inspects a structure. Every value is derived from the
`molecule_properties` block ChEMBL already computed, using fixed
thresholds. Unknown inputs stay unknown (None) in reported checks.
"""

from __future__ import annotations

from typing import Any

from chembl_mcp.core.types import CompoundProperties

# Inclusive upper bounds used by the six-check bioavailability score
BIOAVAILABILITY_RULES: tuple[tuple[str, float], ...] = (
    ("molecular_weight", 500),
    ("alogp", 5),
    ("hbd", 5),
    ("hba", 10),
    ("psa", 140),
    ("rtb", 10),
)

LIPINSKI_LIMITS = {
    "molecular_weight": 500,
    "logp": 5,
    "hbd": 5,
    "hba": 10,
}

PSA_LIMIT = 140
RTB_LIMIT = 10


def _at_most(value: float | None, limit: float) -> bool | None:
    """Inclusive threshold check; None when the value is unknown."""
    if value is None:
        return None
    return value <= limit


def _number(value: float | None) -> float | int | None:
    """Render integral floats as ints for display."""
    if value is None:
        return None
    return int(value) if value.is_integer() else value


def bioavailability_count(props: CompoundProperties) -> int:
    """Number of the six oral-bioavailability checks that pass. Missing values fail."""
    return sum(
        1
        for name, limit in BIOAVAILABILITY_RULES
        if getattr(props, name) is not None and getattr(props, name) <= limit
    )


def bioavailability_score(props: CompoundProperties) -> float:
    """Fraction of the six checks passing, in [0, 1]."""
    return bioavailability_count(props) / len(BIOAVAILABILITY_RULES)


def bioavailability_category(props: CompoundProperties) -> str:
    count = bioavailability_count(props)
    if count >= 5:
        return "High"
    if count >= 3:
        return "Medium"
    return "Low"


def lipinski_overall_pass(violations: float | None) -> bool | None:
    """At most one Rule-of-Five violation is allowed."""
    if violations is None:
        return None
    return violations <= 1


def _check(value: float | None, limit: float) -> dict[str, Any]:
    return {"value": _number(value), "limit": limit, "pass": _at_most(value, limit)}


def assess_drug_likeness(props: CompoundProperties) -> dict[str, Any]:
    """
    Lipinski Rule-of-Five assessment plus Veber-style checks.

    Args:
        props: Upstream-computed properties

    Returns:
        Per-rule checks, violation count, overall verdict and the
        oral-bioavailability category
    """
    lipinski = {
        "molecular_weight": _check(props.molecular_weight, LIPINSKI_LIMITS["molecular_weight"]),
        "logp": _check(props.alogp, LIPINSKI_LIMITS["logp"]),
        "hbd": _check(props.hbd, LIPINSKI_LIMITS["hbd"]),
        "hba": _check(props.hba, LIPINSKI_LIMITS["hba"]),
        "violations": _number(props.num_ro5_violations),
        "overall_pass": lipinski_overall_pass(props.num_ro5_violations),
    }
    additional = {
        "psa": _check(props.psa, PSA_LIMIT),
        "rotatable_bonds": _check(props.rtb, RTB_LIMIT),
    }

    overall = lipinski["overall_pass"]
    veber_ok = all(check["pass"] is not False for check in additional.values())
    if overall is None:
        verdict = "Unknown"
    elif overall and veber_ok:
        verdict = "Drug-like"
    elif overall:
        verdict = "Drug-like (Rule of Five) with Veber rule concerns"
    else:
        verdict = "Not drug-like"

    return {
        "lipinski_rule_of_five": lipinski,
        "additional_rules": additional,
        "oral_bioavailability": bioavailability_category(props),
        "bioavailability_score": round(bioavailability_score(props), 3),
        "ro3_pass": props.ro3_pass,
        "qed_weighted": props.qed_weighted,
        "assessment": verdict,
    }


def calculate_descriptors(props: CompoundProperties) -> dict[str, Any]:
    """Upstream descriptor block plus a few derived values."""
    hbd_hba = None
    if props.hbd is not None and props.hba is not None:
        hbd_hba = _number(props.hbd + props.hba)

    return {
        "descriptors": {
            "molecular_formula": props.full_molformula,
            "molecular_weight": _number(props.molecular_weight),
            "alogp": _number(props.alogp),
            "cx_logp": _number(props.cx_logp),
            "hbd": _number(props.hbd),
            "hba": _number(props.hba),
            "psa": _number(props.psa),
            "rotatable_bonds": _number(props.rtb),
            "heavy_atoms": _number(props.heavy_atoms),
            "aromatic_rings": _number(props.aromatic_rings),
            "rings": _number(props.rings),
            "num_ro5_violations": _number(props.num_ro5_violations),
            "ro3_pass": props.ro3_pass,
            "qed_weighted": props.qed_weighted,
        },
        "derived": {
            "hbd_hba_total": hbd_hba,
            "lipinski_compliant": lipinski_overall_pass(props.num_ro5_violations),
            "bioavailability_score": round(bioavailability_score(props), 3),
            "oral_bioavailability": bioavailability_category(props),
        },
    }


# =============================================================================
# ADMET
# =============================================================================


def _absorption(props: CompoundProperties) -> dict[str, Any]:
    if props.psa is None:
        intestinal = "Unknown"
    elif props.psa <= 140 and (props.rtb is None or props.rtb <= 10):
        intestinal = "High"
    else:
        intestinal = "Low"

    if props.psa is None:
        permeability = "Unknown"
    elif props.psa < 60:
        permeability = "High"
    elif props.psa <= 140:
        permeability = "Moderate"
    else:
        permeability = "Low"

    return {
        "bioavailability_score": round(bioavailability_score(props), 3),
        "oral_bioavailability": bioavailability_category(props),
        "lipinski_violations": _number(props.num_ro5_violations),
        "intestinal_absorption": intestinal,
        "membrane_permeability": permeability,
    }


def _distribution(props: CompoundProperties) -> dict[str, Any]:
    if props.psa is None or props.molecular_weight is None:
        bbb = "Unknown"
    elif props.psa < 90 and props.molecular_weight < 450:
        bbb = "Likely"
    else:
        bbb = "Unlikely"

    if props.alogp is None:
        binding = "Unknown"
    elif props.alogp > 3:
        binding = "Likely high"
    elif props.alogp >= 1:
        binding = "Moderate"
    else:
        binding = "Likely low"

    return {
        "logp": _number(props.alogp),
        "blood_brain_barrier_penetration": bbb,
        "plasma_protein_binding": binding,
    }


def _metabolism(props: CompoundProperties) -> dict[str, Any]:
    if props.alogp is None and props.aromatic_rings is None:
        liability = "Unknown"
    elif (props.alogp or 0) > 4 or (props.aromatic_rings or 0) >= 3:
        liability = "Elevated"
    else:
        liability = "Typical"

    return {
        "rotatable_bonds": _number(props.rtb),
        "aromatic_rings": _number(props.aromatic_rings),
        "cyp_metabolism_liability": liability,
    }


def _excretion(props: CompoundProperties) -> dict[str, Any]:
    if props.molecular_weight is None:
        route = "Unknown"
    elif props.molecular_weight < 400 and (props.alogp is None or props.alogp < 3):
        route = "Likely renal"
    else:
        route = "Likely hepatic/biliary"

    return {
        "molecular_weight": _number(props.molecular_weight),
        "predominant_route": route,
    }


def _toxicity(props: CompoundProperties) -> dict[str, Any]:
    if props.alogp is None or props.psa is None:
        risk = "Unknown"
    elif props.alogp > 3 and props.psa < 75:
        risk = "Elevated (high logP and low PSA)"
    else:
        risk = "Not flagged"

    return {
        "ro3_pass": props.ro3_pass,
        "physicochemical_toxicity_risk": risk,
        "structural_alerts": "Not evaluated",
    }


def analyze_admet(props: CompoundProperties) -> dict[str, Any]:
    """
    Summarize ADMET-relevant tendencies from physicochemical properties.

    Args:
        props: Upstream-computed properties

    Returns:
        Absorption, distribution, metabolism, excretion and toxicity
        sections with categorical estimates, and a disclaimer
    """
    return {
        "absorption": _absorption(props),
        "distribution": _distribution(props),
        "metabolism": _metabolism(props),
        "excretion": _excretion(props),
        "toxicity": _toxicity(props),
        "disclaimer": (
            "Estimates are rule-of-thumb classifications from ChEMBL-computed "
            "properties, not experimental or model-based ADMET predictions."
        ),
    }
