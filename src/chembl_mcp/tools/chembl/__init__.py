"""
ChEMBL toolset.

Importing this package registers every ChEMBL operation in the global
registry, grouped by domain:
- compounds: search, lookup, structure, similarity and batch tools
- targets: target search, lookup and pathway context
- activities: bioactivity, assay and dose-response tools
- drugs: drug, indication and mechanism tools
- properties: ADMET, descriptor, solubility and drug-likeness analysis
- search: property-filtered search and external references
"""

from chembl_mcp.tools.chembl import (
    activities,
    compounds,
    drugs,
    properties,
    search,
    targets,
)

__all__ = [
    "activities",
    "compounds",
    "drugs",
    "properties",
    "search",
    "targets",
]
