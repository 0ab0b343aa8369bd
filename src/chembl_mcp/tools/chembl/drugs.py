"""Drug development and clinical data tools."""

from __future__ import annotations

from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import DrugSearchArgs, IdentifierArgs, IndicationArgs
from chembl_mcp.tools.chembl.common import limit_or_default
from chembl_mcp.tools.registry import query_operation


@query_operation("search_drugs", DrugSearchArgs, tags={"drug", "search"})
def search_drugs(args: DrugSearchArgs) -> UpstreamQuery:
    """Search for approved drugs and clinical candidates"""
    return UpstreamQuery(
        path="/molecule/search.json",
        params={
            "q": args.query,
            "max_phase": args.max_phase,
            "limit": limit_or_default(args.limit),
        },
    )


@query_operation("get_drug_info", IdentifierArgs, tags={"drug"})
def get_drug_info(args: IdentifierArgs) -> UpstreamQuery:
    """Get drug development status and clinical trial information"""
    return UpstreamQuery(path="/drug.json", params={"molecule_chembl_id": args.chembl_id})


@query_operation("search_drug_indications", IndicationArgs, tags={"drug", "search"})
def search_drug_indications(args: IndicationArgs) -> UpstreamQuery:
    """Search for therapeutic indications and disease areas"""
    return UpstreamQuery(
        path="/drug_indication.json",
        params={
            "efo_term__icontains": args.indication,
            "limit": limit_or_default(args.limit),
        },
    )


@query_operation("get_mechanism_of_action", IdentifierArgs, tags={"drug", "mechanism"})
def get_mechanism_of_action(args: IdentifierArgs) -> UpstreamQuery:
    """Get mechanism of action and target interaction data"""
    return UpstreamQuery(path="/mechanism.json", params={"molecule_chembl_id": args.chembl_id})
