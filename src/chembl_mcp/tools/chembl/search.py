"""
Advanced search and cross-reference tools.

Property-filtered compound search with summary analytics, and
external-database reference aggregation.
"""

from __future__ import annotations

import asyncio
from typing import Any

from chembl_mcp.analysis import (
    aggregate_references,
    lipinski_compliance_rate,
    property_statistics,
    search_insights,
)
from chembl_mcp.analysis.references import compound_record_references, molecule_references
from chembl_mcp.client import ChemblClient
from chembl_mcp.core.types import CompoundProperties, UpstreamQuery
from chembl_mcp.tools.arguments import IdentifierArgs, PropertyFilterArgs
from chembl_mcp.tools.chembl.common import limit_or_default, molecule_query
from chembl_mcp.tools.registry import operation

COMPOUND_RECORD_LIMIT = 100


def advanced_search_query(args: PropertyFilterArgs) -> UpstreamQuery:
    return UpstreamQuery(
        path="/molecule.json",
        params={
            "molecule_properties__mw_freebase__gte": args.min_mw,
            "molecule_properties__mw_freebase__lte": args.max_mw,
            "molecule_properties__alogp__gte": args.min_logp,
            "molecule_properties__alogp__lte": args.max_logp,
            "molecule_properties__hbd__lte": args.max_hbd,
            "molecule_properties__hba__lte": args.max_hba,
            "limit": limit_or_default(args.limit),
        },
    )


@operation("advanced_search", PropertyFilterArgs, tags={"compound", "search"})
async def advanced_search(client: ChemblClient, args: PropertyFilterArgs) -> dict[str, Any]:
    """Complex queries with multiple chemical and biological filters"""
    body = await client.fetch(advanced_search_query(args))
    molecules = (body or {}).get("molecules") or []
    properties = [CompoundProperties.from_molecule(m) for m in molecules]

    compliance = lipinski_compliance_rate(properties)
    insights, recommendations = search_insights(
        compliance,
        min_mw=args.min_mw,
        max_mw=args.max_mw,
        max_hbd=args.max_hbd,
    )

    return {
        "filters_applied": args.model_dump(exclude_none=True),
        "total_results": len(molecules),
        "total_available": ((body or {}).get("page_meta") or {}).get("total_count"),
        "statistics": property_statistics(properties),
        "lipinski_compliance_rate": compliance,
        "insights": insights,
        "recommendations": recommendations,
        "molecules": molecules,
    }


@operation("get_external_references", IdentifierArgs, tags={"compound", "references"})
async def get_external_references(client: ChemblClient, args: IdentifierArgs) -> dict[str, Any]:
    """Get links to external databases (PubChem, DrugBank, PDB, etc.)"""
    molecule, records = await asyncio.gather(
        client.fetch_optional(molecule_query(args.chembl_id)),
        client.fetch_optional(
            UpstreamQuery(
                path="/compound_record.json",
                params={
                    "molecule_chembl_id": args.chembl_id,
                    "limit": COMPOUND_RECORD_LIMIT,
                },
            )
        ),
    )

    references = molecule_references(molecule) + compound_record_references(records)
    categorized = aggregate_references(references)

    return {
        "chembl_id": args.chembl_id,
        "total_references": len(references),
        "references_by_category": categorized,
        "category_counts": {name: len(items) for name, items in categorized.items()},
        "sources": {
            "molecule_cross_references": "ok" if molecule is not None else "unavailable",
            "compound_records": "ok" if records is not None else "unavailable",
        },
    }
