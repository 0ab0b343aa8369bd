"""
Bioactivity and assay tools.

Activity search by identifier or by type and value range, assay lookup,
dose-response profiles, and cross-compound comparison.
"""

from __future__ import annotations

import asyncio
from typing import Any

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import (
    ActivityFilterArgs,
    ActivityTypeArgs,
    CompareArgs,
    DoseResponseArgs,
    IdentifierArgs,
)
from chembl_mcp.tools.chembl.common import limit_or_default, segment
from chembl_mcp.tools.registry import operation, query_operation

DOSE_RESPONSE_TYPES = ("IC50", "EC50", "Ki", "Kd", "GI50", "LC50", "LD50")
DOSE_RESPONSE_LIMIT = 100

COMPARISON_FANOUT = 5
COMPARISON_PER_COMPOUND_LIMIT = 10


@query_operation("search_activities", ActivityFilterArgs, tags={"activity", "search"})
def search_activities(args: ActivityFilterArgs) -> UpstreamQuery:
    """Search bioactivity measurements and assay results"""
    return UpstreamQuery(
        path="/activity.json",
        params={
            "target_chembl_id": args.target_chembl_id,
            "assay_chembl_id": args.assay_chembl_id,
            "molecule_chembl_id": args.molecule_chembl_id,
            "standard_type": args.activity_type,
            "limit": limit_or_default(args.limit),
        },
    )


@query_operation("get_assay_info", IdentifierArgs, tags={"assay"})
def get_assay_info(args: IdentifierArgs) -> UpstreamQuery:
    """Get detailed information for a specific assay by ChEMBL assay ID"""
    return UpstreamQuery(path=f"/assay/{segment(args.chembl_id)}.json")


@query_operation("search_by_activity_type", ActivityTypeArgs, tags={"activity", "search"})
def search_by_activity_type(args: ActivityTypeArgs) -> UpstreamQuery:
    """Find bioactivity data by specific activity type and value range"""
    return UpstreamQuery(
        path="/activity.json",
        params={
            "standard_type": args.activity_type,
            "standard_value__gte": args.min_value,
            "standard_value__lte": args.max_value,
            "standard_units": args.units,
            "limit": limit_or_default(args.limit),
        },
    )


@query_operation("get_dose_response", DoseResponseArgs, tags={"activity"})
def get_dose_response(args: DoseResponseArgs) -> UpstreamQuery:
    """Get dose-response data and activity profiles for compounds"""
    return UpstreamQuery(
        path="/activity.json",
        params={
            "molecule_chembl_id": args.molecule_chembl_id,
            "target_chembl_id": args.target_chembl_id,
            "standard_type__in": ",".join(DOSE_RESPONSE_TYPES),
            "limit": DOSE_RESPONSE_LIMIT,
        },
    )


def comparison_query(molecule_chembl_id: str, args: CompareArgs) -> UpstreamQuery:
    return UpstreamQuery(
        path="/activity.json",
        params={
            "molecule_chembl_id": molecule_chembl_id,
            "target_chembl_id": args.target_chembl_id,
            "standard_type": args.activity_type,
            "limit": COMPARISON_PER_COMPOUND_LIMIT,
        },
    )


@operation("compare_activities", CompareArgs, tags={"activity", "batch"})
async def compare_activities(client: ChemblClient, args: CompareArgs) -> dict[str, Any]:
    """Compare bioactivity data across multiple compounds or targets"""
    compared = args.molecule_chembl_ids[:COMPARISON_FANOUT]
    bodies = await asyncio.gather(
        *(client.fetch(comparison_query(chembl_id, args)) for chembl_id in compared)
    )

    comparison = []
    for chembl_id, body in zip(compared, bodies):
        activities = (body or {}).get("activities") or []
        comparison.append(
            {
                "molecule_chembl_id": chembl_id,
                "activity_count": len(activities),
                "activities": activities,
            }
        )

    return {
        "target_chembl_id": args.target_chembl_id,
        "activity_type": args.activity_type,
        "compounds_compared": len(compared),
        "comparison": comparison,
    }
