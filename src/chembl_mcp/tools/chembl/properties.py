"""
Chemical property analysis tools.

Each tool fetches one molecule record and runs a calculator from
`chembl_mcp.analysis` over its computed properties.
"""

from __future__ import annotations

from typing import Any

from chembl_mcp.analysis import (
    analyze_admet,
    assess_drug_likeness as drug_likeness_report,
    calculate_descriptors as descriptor_report,
    predict_solubility as solubility_report,
)
from chembl_mcp.client import ChemblClient
from chembl_mcp.core.types import CompoundProperties, UpstreamQuery
from chembl_mcp.tools.arguments import CompoundLookupArgs, IdentifierArgs
from chembl_mcp.tools.chembl.common import compound_header, molecule_query, resolve_compound
from chembl_mcp.tools.registry import operation, query_operation


def _shape_admet(args: IdentifierArgs, molecule: dict[str, Any]) -> dict[str, Any]:
    props = CompoundProperties.from_molecule(molecule)
    return {**compound_header(molecule), **analyze_admet(props)}


@query_operation(
    "analyze_admet_properties",
    IdentifierArgs,
    shape=_shape_admet,
    tags={"properties", "admet"},
)
def analyze_admet_properties(args: IdentifierArgs) -> UpstreamQuery:
    """Analyze ADMET properties (Absorption, Distribution, Metabolism, Excretion, Toxicity)"""
    return molecule_query(args.chembl_id)


@operation("calculate_descriptors", CompoundLookupArgs, tags={"properties"})
async def calculate_descriptors(client: ChemblClient, args: CompoundLookupArgs) -> dict[str, Any]:
    """Calculate molecular descriptors and physicochemical properties"""
    molecule = await resolve_compound(client, args)
    props = CompoundProperties.from_molecule(molecule)
    return {**compound_header(molecule), **descriptor_report(props)}


@operation("predict_solubility", CompoundLookupArgs, tags={"properties"})
async def predict_solubility(client: ChemblClient, args: CompoundLookupArgs) -> dict[str, Any]:
    """Predict aqueous solubility and permeability properties"""
    molecule = await resolve_compound(client, args)
    props = CompoundProperties.from_molecule(molecule)
    return {**compound_header(molecule), **solubility_report(props)}


@operation("assess_drug_likeness", CompoundLookupArgs, tags={"properties"})
async def assess_drug_likeness(client: ChemblClient, args: CompoundLookupArgs) -> dict[str, Any]:
    """Assess drug-likeness using Lipinski Rule of Five and other metrics"""
    molecule = await resolve_compound(client, args)
    props = CompoundProperties.from_molecule(molecule)
    return {**compound_header(molecule), **drug_likeness_report(props)}
