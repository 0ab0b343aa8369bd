"""Helpers shared by the ChEMBL operation modules."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.exceptions import NotFoundError
from chembl_mcp.core.types import UpstreamQuery
from chembl_mcp.tools.arguments import DEFAULT_LIMIT, CompoundLookupArgs


def segment(value: str) -> str:
    """URL-escape a value used as a single path segment."""
    return quote(value, safe="")


def limit_or_default(limit: int | None) -> int:
    return DEFAULT_LIMIT if limit is None else limit


def molecule_query(chembl_id: str) -> UpstreamQuery:
    return UpstreamQuery(path=f"/molecule/{segment(chembl_id)}.json")


def smiles_lookup_query(smiles: str) -> UpstreamQuery:
    return UpstreamQuery(
        path="/molecule.json",
        params={"molecule_structures__canonical_smiles__flexmatch": smiles, "limit": 1},
    )


async def resolve_compound(client: ChemblClient, args: CompoundLookupArgs) -> dict[str, Any]:
    """
    Fetch the molecule record named by ChEMBL ID, or else by SMILES.

    Raises:
        NotFoundError: If a SMILES lookup matches no compound
    """
    if args.chembl_id is not None:
        return await client.fetch(molecule_query(args.chembl_id))

    body = await client.fetch(smiles_lookup_query(args.smiles or ""))
    molecules = (body or {}).get("molecules") or []
    if not molecules:
        raise NotFoundError(f"No compound found for SMILES: {args.smiles}")
    return molecules[0]


def compound_header(molecule: dict[str, Any]) -> dict[str, Any]:
    """Identifying fields reported at the top of every compound analysis."""
    structures = molecule.get("molecule_structures") or {}
    return {
        "chembl_id": molecule.get("molecule_chembl_id"),
        "pref_name": molecule.get("pref_name"),
        "canonical_smiles": structures.get("canonical_smiles"),
    }
