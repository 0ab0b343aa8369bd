"""
Derived-property calculators.

Closed-form estimates computed over properties ChEMBL already provides:
- Bioavailability scoring and drug-likeness (Lipinski, Veber)
- ADMET tendencies
- Aqueous solubility
- Cross-reference aggregation
- Advanced-search summary statistics
"""

from chembl_mcp.analysis.properties import (
    analyze_admet,
    assess_drug_likeness,
    bioavailability_category,
    bioavailability_count,
    bioavailability_score,
    calculate_descriptors,
    lipinski_overall_pass,
)
from chembl_mcp.analysis.references import (
    aggregate_references,
    categorize_reference,
    reference_url,
)
from chembl_mcp.analysis.solubility import classify_solubility, predict_solubility
from chembl_mcp.analysis.statistics import (
    lipinski_compliance_rate,
    property_statistics,
    search_insights,
)

__all__ = [
    "aggregate_references",
    "analyze_admet",
    "assess_drug_likeness",
    "bioavailability_category",
    "bioavailability_count",
    "bioavailability_score",
    "calculate_descriptors",
    "categorize_reference",
    "classify_solubility",
    "lipinski_compliance_rate",
    "lipinski_overall_pass",
    "predict_solubility",
    "property_statistics",
    "reference_url",
    "search_insights",
]
