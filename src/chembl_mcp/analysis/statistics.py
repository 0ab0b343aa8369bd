"""Summary analytics for property-filtered compound searches."""

from __future__ import annotations

from statistics import fmean, median
from typing import Any

from chembl_mcp.analysis.properties import lipinski_overall_pass
from chembl_mcp.core.types import CompoundProperties

SUMMARY_PROPERTIES = ("molecular_weight", "alogp", "hbd", "hba", "psa", "rtb")


def summarize(values: list[float]) -> dict[str, Any]:
    """Count, min, max, mean and median of the known values."""
    if not values:
        return {"count": 0, "min": None, "max": None, "mean": None, "median": None}
    return {
        "count": len(values),
        "min": min(values),
        "max": max(values),
        "mean": round(fmean(values), 3),
        "median": median(values),
    }


def property_statistics(compounds: list[CompoundProperties]) -> dict[str, dict[str, Any]]:
    """Per-property summaries; `count` is the number of non-null values."""
    return {
        name: summarize([v for v in (getattr(c, name) for c in compounds) if v is not None])
        for name in SUMMARY_PROPERTIES
    }


def lipinski_compliance_rate(compounds: list[CompoundProperties]) -> float | None:
    """
    Percentage of compounds with a known violation count that pass.

    Returns None when no compound reports a violation count.
    """
    verdicts = [lipinski_overall_pass(c.num_ro5_violations) for c in compounds]
    known = [v for v in verdicts if v is not None]
    if not known:
        return None
    return round(100 * sum(known) / len(known), 1)


def search_insights(
    compliance_rate: float | None,
    *,
    min_mw: float | None = None,
    max_mw: float | None = None,
    max_hbd: float | None = None,
) -> tuple[list[str], list[str]]:
    """
    Threshold-driven commentary on an advanced search.

    Returns:
        (insights, recommendations)
    """
    insights: list[str] = []
    recommendations: list[str] = []

    if compliance_rate is not None:
        if compliance_rate < 50:
            insights.append(
                f"Only {compliance_rate}% of results are Lipinski compliant"
            )
            recommendations.append(
                "Tighten molecular weight, LogP or hydrogen-bonding bounds to enrich for drug-like compounds"
            )
        elif compliance_rate > 90:
            insights.append(
                f"{compliance_rate}% of results are Lipinski compliant; the set is strongly drug-like"
            )

    if min_mw is not None and max_mw is not None and max_mw - min_mw < 100:
        insights.append("Narrow molecular weight window (< 100 Da)")
        recommendations.append("Widen the molecular weight range to increase chemical diversity")

    if max_hbd is not None and max_hbd < 3:
        insights.append("Low hydrogen bond donor cap (< 3) favours membrane permeability")
        recommendations.append(
            "Relax max_hbd if polar scaffolds or solubility are a priority"
        )

    if not recommendations:
        recommendations.append("Filters look balanced; review individual hits for follow-up")

    return insights, recommendations
