"""
Core chemical search and retrieval tools.

Compound search by text, InChI, similarity and substructure, single and
batch compound lookup, and structure retrieval.
"""

from __future__ import annotations

import asyncio
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.exceptions import UpstreamError
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import (
    BatchArgs,
    IdentifierArgs,
    InchiArgs,
    QueryArgs,
    SimilarityArgs,
    StructureArgs,
    SubstructureArgs,
)
from chembl_mcp.tools.chembl.common import limit_or_default, molecule_query, segment
from chembl_mcp.tools.registry import operation, query_operation

DEFAULT_SIMILARITY = 0.7
BATCH_FANOUT = 10

# Key within molecule_structures for each requested format
STRUCTURE_FIELDS = {
    "smiles": "canonical_smiles",
    "inchi": "standard_inchi",
    "molfile": "molfile",
    "sdf": "molfile",
}


def similarity_percent(fraction: float) -> int:
    """Convert a 0-1 similarity fraction to an integer percentage, rounding half up."""
    scaled = Decimal(str(fraction)) * 100
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@query_operation("search_compounds", QueryArgs, tags={"compound", "search"})
def search_compounds(args: QueryArgs) -> UpstreamQuery:
    """Search ChEMBL database for compounds by name, synonym, or identifier"""
    return UpstreamQuery(
        path="/molecule/search.json",
        params={
            "q": args.query,
            "limit": limit_or_default(args.limit),
            "offset": args.offset or 0,
        },
    )


@query_operation("get_compound_info", IdentifierArgs, tags={"compound"})
def get_compound_info(args: IdentifierArgs) -> UpstreamQuery:
    """Get detailed information for a specific compound by ChEMBL ID"""
    return molecule_query(args.chembl_id)


@query_operation("search_by_inchi", InchiArgs, tags={"compound", "search"})
def search_by_inchi(args: InchiArgs) -> UpstreamQuery:
    """Search for compounds by InChI key or InChI string"""
    if args.inchi.startswith("InChI="):
        key = "molecule_structures__standard_inchi"
    else:
        key = "molecule_structures__standard_inchi_key"
    return UpstreamQuery(
        path="/molecule.json",
        params={key: args.inchi, "limit": limit_or_default(args.limit)},
    )


def _shape_structure(args: StructureArgs, compound: dict[str, Any]) -> dict[str, Any]:
    structures = compound.get("molecule_structures") or {}
    return {
        "chembl_id": compound.get("molecule_chembl_id", args.chembl_id),
        "requested_format": args.format,
        "structure": structures.get(STRUCTURE_FIELDS[args.format]),
        "structures": structures,
    }


@query_operation(
    "get_compound_structure",
    StructureArgs,
    shape=_shape_structure,
    tags={"compound", "structure"},
)
def get_compound_structure(args: StructureArgs) -> UpstreamQuery:
    """Retrieve chemical structure information in various formats"""
    return molecule_query(args.chembl_id)


@query_operation("search_similar_compounds", SimilarityArgs, tags={"compound", "search"})
def search_similar_compounds(args: SimilarityArgs) -> UpstreamQuery:
    """Find chemically similar compounds using Tanimoto similarity"""
    fraction = DEFAULT_SIMILARITY if args.similarity is None else args.similarity
    percent = similarity_percent(fraction)
    return UpstreamQuery(
        path=f"/similarity/{segment(args.smiles)}/{percent}.json",
        params={"limit": limit_or_default(args.limit)},
    )


@query_operation("substructure_search", SubstructureArgs, tags={"compound", "search"})
def substructure_search(args: SubstructureArgs) -> UpstreamQuery:
    """Find compounds containing specific substructures"""
    return UpstreamQuery(
        path=f"/substructure/{segment(args.smiles)}.json",
        params={"limit": limit_or_default(args.limit)},
    )


async def _lookup(client: ChemblClient, chembl_id: str) -> dict[str, Any]:
    try:
        data = await client.fetch(molecule_query(chembl_id))
    except UpstreamError as e:
        return {"chembl_id": chembl_id, "error": e.message, "success": False}
    return {"chembl_id": chembl_id, "data": data, "success": True}


@operation("batch_compound_lookup", BatchArgs, tags={"compound", "batch"})
async def batch_compound_lookup(client: ChemblClient, args: BatchArgs) -> dict[str, Any]:
    """Process multiple ChEMBL IDs efficiently"""
    # Only the first BATCH_FANOUT ids are looked up; the rest are ignored.
    requested = args.chembl_ids[:BATCH_FANOUT]
    results = await asyncio.gather(*(_lookup(client, chembl_id) for chembl_id in requested))
    return {"batch_results": list(results)}
