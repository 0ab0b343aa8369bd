"""
Closed-form aqueous solubility estimates.

Three linear log-solubility models are averaged. None of them is the
published model verbatim: each is restricted to the inputs ChEMBL
reports (logP, molecular weight, HBD, rotatable bonds). Missing inputs
contribute 0 to the sums.

- GSE: logS = 0.5 - logP - 0.01 * (MP - 25), MP approximated as MW / 2
- Ali-type: logS = 0.4488 - 1.0377 * logP - 0.0021 * MW + 0.15 * HBD
- ESOL: logS = 0.16 - 0.63 * logP - 0.0062 * MW + 0.066 * RB
"""

from __future__ import annotations

from statistics import mean
from typing import Any

from chembl_mcp.core.types import CompoundProperties

SOLUBILITY_CLASSES: tuple[tuple[float, str], ...] = (
    (-1, "Very soluble"),
    (-2, "Soluble"),
    (-3, "Moderately soluble"),
    (-4, "Slightly soluble"),
)


def yalkowsky_logs(logp: float, mw: float) -> float:
    melting_point = mw / 2
    return 0.5 - logp - 0.01 * (melting_point - 25)


def ali_logs(logp: float, mw: float, hbd: float) -> float:
    return 0.4488 - 1.0377 * logp - 0.0021 * mw + 0.15 * hbd


def esol_logs(logp: float, mw: float, rtb: float) -> float:
    return 0.16 - 0.63 * logp - 0.0062 * mw + 0.066 * rtb


def classify_solubility(log_s: float) -> str:
    """Bin a logS value (mol/L). Bounds are exclusive: -1.0 is "Soluble"."""
    for bound, label in SOLUBILITY_CLASSES:
        if log_s > bound:
            return label
    return "Poorly soluble"


def _lipophilicity_effect(logp: float | None) -> str:
    if logp is None:
        return "Unknown"
    if logp < 1:
        return "Low lipophilicity favours aqueous solubility"
    if logp < 3:
        return "Moderate lipophilicity; balanced solubility and permeability"
    if logp < 5:
        return "High lipophilicity reduces aqueous solubility"
    return "Very high lipophilicity strongly limits aqueous solubility"


def _hydrogen_bonding_effect(hbd: float | None, hba: float | None) -> str:
    if hbd is None and hba is None:
        return "Unknown"
    total = (hbd or 0) + (hba or 0)
    if total >= 8:
        return "Extensive hydrogen bonding supports solvation"
    if total >= 4:
        return "Moderate hydrogen bonding capacity"
    return "Limited hydrogen bonding capacity reduces solvation"


def _size_effect(mw: float | None) -> str:
    if mw is None:
        return "Unknown"
    if mw < 300:
        return "Small molecule; size favours dissolution"
    if mw <= 500:
        return "Medium-sized molecule; moderate size penalty"
    return "Large molecule; size reduces solubility"


def _flexibility_effect(rtb: float | None) -> str:
    if rtb is None:
        return "Unknown"
    if rtb <= 3:
        return "Rigid; crystal packing may lower solubility"
    if rtb <= 7:
        return "Moderately flexible"
    return "Highly flexible; may improve solubility but reduce permeability"


def _recommendations(log_s: float, logp: float, hbd: float, hba: float, mw: float) -> list[str]:
    recommendations = []
    if log_s < -3:
        recommendations.append(
            "Consider salt formation, co-solvents or amorphous dispersions to improve solubility"
        )
    if logp > 3:
        recommendations.append("Introduce polar groups to reduce lipophilicity")
    if hbd + hba < 3:
        recommendations.append("Add hydrogen bond donors or acceptors to improve solvation")
    if mw > 500:
        recommendations.append("Reduce molecular size to improve dissolution")
    if not recommendations:
        recommendations.append("Predicted solubility is acceptable for oral drug development")
    return recommendations


def predict_solubility(props: CompoundProperties) -> dict[str, Any]:
    """
    Estimate aqueous solubility from ChEMBL-computed properties.

    Args:
        props: Upstream-computed properties

    Returns:
        Per-model and averaged logS, molar and mass solubility, a
        solubility class, qualitative factor explanations and
        recommendations
    """
    logp = props.alogp or 0
    mw = props.molecular_weight or 0
    hbd = props.hbd or 0
    hba = props.hba or 0
    rtb = props.rtb or 0

    estimates = {
        "yalkowsky_gse": yalkowsky_logs(logp, mw),
        "ali": ali_logs(logp, mw, hbd),
        "esol": esol_logs(logp, mw, rtb),
    }
    log_s = mean(estimates.values())
    molar = 10**log_s

    return {
        "predicted_log_s": round(log_s, 3),
        "model_estimates": {name: round(value, 3) for name, value in estimates.items()},
        "solubility_mol_per_l": float(f"{molar:.4g}"),
        "solubility_g_per_l": float(f"{molar * mw:.4g}"),
        "solubility_class": classify_solubility(log_s),
        "factors": {
            "lipophilicity": _lipophilicity_effect(props.alogp),
            "hydrogen_bonding": _hydrogen_bonding_effect(props.hbd, props.hba),
            "molecular_size": _size_effect(props.molecular_weight),
            "flexibility": _flexibility_effect(props.rtb),
        },
        "recommendations": _recommendations(log_s, logp, hbd, hba, mw),
        "inputs": {
            "alogp": props.alogp,
            "molecular_weight": props.molecular_weight,
            "hbd": props.hbd,
            "hba": props.hba,
            "rotatable_bonds": props.rtb,
        },
    }
