"""
Target analysis tools.

Target search and lookup, compounds tested against a target, UniProt
mapping, and pathway context assembled from several endpoints.
"""

from __future__ import annotations

from typing import Any

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.logging import get_logger
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import (
    IdentifierArgs,
    TargetCompoundsArgs,
    TargetIdArgs,
    TargetSearchArgs,
    UniprotArgs,
)
from chembl_mcp.tools.chembl.common import limit_or_default, segment
from chembl_mcp.tools.registry import operation, query_operation

logger = get_logger(__name__)

PATHWAY_KEYWORDS = ("reactome", "kegg", "pathway", "biocyc")
MECHANISM_LIMIT = 50

PATHWAY_QUERY_URLS = {
    "reactome": "https://reactome.org/content/query?q={accession}",
    "kegg": "https://www.kegg.jp/entry/up:{accession}",
    "uniprot": "https://rest.uniprot.org/uniprotkb/{accession}?fields=cc_pathway,xref_reactome",
}

PATHWAY_DISCLAIMER = (
    "ChEMBL does not hold native pathway data. Pathway annotations are "
    "limited to cross-references on target components and may be "
    "incomplete; consult Reactome or KEGG for authoritative pathway membership."
)


@query_operation("search_targets", TargetSearchArgs, tags={"target", "search"})
def search_targets(args: TargetSearchArgs) -> UpstreamQuery:
    """Search for biological targets by name or type"""
    return UpstreamQuery(
        path="/target/search.json",
        params={
            "q": args.query,
            "limit": limit_or_default(args.limit),
            "target_type": args.target_type,
            "organism": args.organism,
        },
    )


@query_operation("get_target_info", IdentifierArgs, tags={"target"})
def get_target_info(args: IdentifierArgs) -> UpstreamQuery:
    """Get detailed information for a specific target by ChEMBL target ID"""
    return UpstreamQuery(path=f"/target/{segment(args.chembl_id)}.json")


@query_operation("get_target_compounds", TargetCompoundsArgs, tags={"target", "activity"})
def get_target_compounds(args: TargetCompoundsArgs) -> UpstreamQuery:
    """Get compounds tested against a specific target"""
    return UpstreamQuery(
        path="/activity.json",
        params={
            "target_chembl_id": args.target_chembl_id,
            "standard_type": args.activity_type,
            "limit": limit_or_default(args.limit),
        },
    )


@query_operation("search_by_uniprot", UniprotArgs, tags={"target", "search"})
def search_by_uniprot(args: UniprotArgs) -> UpstreamQuery:
    """Find ChEMBL targets by UniProt accession"""
    return UpstreamQuery(
        path="/target.json",
        params={
            "target_components__accession": args.uniprot_id,
            "limit": limit_or_default(args.limit),
        },
    )


def component_accessions(target: dict[str, Any]) -> list[str]:
    """UniProt accessions of a target's components, in order, without duplicates."""
    accessions: list[str] = []
    for component in target.get("target_components") or []:
        accession = component.get("accession")
        if accession and accession not in accessions:
            accessions.append(accession)
    return accessions


def pathway_references(target: dict[str, Any]) -> list[dict[str, Any]]:
    """Component cross-references whose source database is pathway-related."""
    references = []
    for component in target.get("target_components") or []:
        for xref in component.get("target_component_xrefs") or []:
            source = (xref.get("xref_src_db") or "").lower()
            if any(keyword in source for keyword in PATHWAY_KEYWORDS):
                references.append(
                    {
                        "accession": component.get("accession"),
                        "xref_src_db": xref.get("xref_src_db"),
                        "xref_id": xref.get("xref_id"),
                        "xref_name": xref.get("xref_name"),
                    }
                )
    return references


def suggested_queries(accessions: list[str]) -> list[dict[str, str]]:
    return [
        {
            "accession": accession,
            **{name: url.format(accession=accession) for name, url in PATHWAY_QUERY_URLS.items()},
        }
        for accession in accessions
    ]


@operation("get_target_pathways", TargetIdArgs, tags={"target", "pathway"})
async def get_target_pathways(client: ChemblClient, args: TargetIdArgs) -> dict[str, Any]:
    """Get biological pathways associated with a target"""
    target = await client.fetch(
        UpstreamQuery(path=f"/target/{segment(args.target_chembl_id)}.json")
    )
    accessions = component_accessions(target)

    mechanisms_body: dict[str, Any] | None = await client.fetch_optional(
        UpstreamQuery(
            path="/mechanism.json",
            params={"target_chembl_id": args.target_chembl_id, "limit": MECHANISM_LIMIT},
        )
    )
    mechanisms = (mechanisms_body or {}).get("mechanisms") or []
    if mechanisms_body is None:
        logger.info("pathway_mechanisms_unavailable", target=args.target_chembl_id)

    return {
        "target_chembl_id": args.target_chembl_id,
        "pref_name": target.get("pref_name"),
        "organism": target.get("organism"),
        "uniprot_accessions": accessions,
        "pathway_references": pathway_references(target),
        "mechanisms_of_action": [
            {
                "molecule_chembl_id": m.get("molecule_chembl_id"),
                "mechanism_of_action": m.get("mechanism_of_action"),
                "action_type": m.get("action_type"),
            }
            for m in mechanisms
        ],
        "mechanisms_available": mechanisms_body is not None,
        "suggested_queries": suggested_queries(accessions),
        "disclaimer": PATHWAY_DISCLAIMER,
    }
