"""
Cross-reference aggregation.

Merges molecule cross-references and compound records into one list,
buckets them by source database, and attaches canonical URLs for the
databases we know how to link.

Compound records carry no database name, only the ChEMBL document they
were deposited from, so each becomes a "ChEMBL document" reference
keyed by document_chembl_id and linked to its report card. The name
matches no category keyword, so these land in "other".
"""

from __future__ import annotations

from typing import Any

# Checked in order; the first matching keyword decides the bucket.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("chemical_databases", ("pubchem", "chemspider", "chebi")),
    ("structural_databases", ("pdb", "rcsb")),
    ("literature", ("pubmed", "doi")),
    ("patents", ("patent",)),
    ("biological_databases", ("uniprot", "gene", "kegg")),
)
OTHER_CATEGORY = "other"
COMPOUND_RECORD_DB = "ChEMBL document"

# Keyed by lowercase database name; matched as a substring, first hit wins.
URL_PATTERNS: tuple[tuple[str, str], ...] = (
    ("chembl document", "https://www.ebi.ac.uk/chembl/document_report_card/{id}"),
    ("pubchem", "https://pubchem.ncbi.nlm.nih.gov/compound/{id}"),
    ("chebi", "https://www.ebi.ac.uk/chebi/searchId.do?chebiId={id}"),
    ("chemspider", "https://www.chemspider.com/Chemical-Structure.{id}.html"),
    ("drugbank", "https://go.drugbank.com/drugs/{id}"),
    ("pdb", "https://www.rcsb.org/structure/{id}"),
    ("pubmed", "https://pubmed.ncbi.nlm.nih.gov/{id}"),
    ("doi", "https://doi.org/{id}"),
    ("uniprot", "https://www.uniprot.org/uniprotkb/{id}"),
    ("kegg", "https://www.kegg.jp/entry/{id}"),
    ("wikipedia", "https://en.wikipedia.org/wiki/{id}"),
    ("zinc", "https://zinc.docking.org/substances/{id}"),
    ("dailymed", "https://dailymed.nlm.nih.gov/dailymed/search.cfm?query={id}"),
)


def categorize_reference(source_db: str | None) -> str:
    """Bucket a source database name by case-insensitive keyword match."""
    name = (source_db or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return OTHER_CATEGORY


def reference_url(source_db: str | None, xref_id: str | None) -> str | None:
    """Canonical URL for a known database, or None."""
    if not source_db or not xref_id:
        return None
    name = source_db.lower()
    for key, pattern in URL_PATTERNS:
        if key in name:
            return pattern.format(id=xref_id)
    return None


def molecule_references(molecule: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Normalize the `cross_references` block of a molecule record."""
    references = []
    for xref in (molecule or {}).get("cross_references") or []:
        references.append(
            {
                "xref_src_db": xref.get("xref_src"),
                "xref_id": xref.get("xref_id"),
                "xref_name": xref.get("xref_name"),
                "source": "molecule_cross_references",
            }
        )
    return references


def compound_record_references(body: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Normalize compound records into references to their source documents."""
    references = []
    for record in (body or {}).get("compound_records") or []:
        references.append(
            {
                "xref_src_db": COMPOUND_RECORD_DB,
                "xref_id": record.get("document_chembl_id"),
                "xref_name": record.get("compound_name") or record.get("compound_key"),
                "compound_key": record.get("compound_key"),
                "src_id": record.get("src_id"),
                "source": "compound_records",
            }
        )
    return references


def aggregate_references(references: list[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """
    Bucket references by category and attach URLs.

    Every category key is present, possibly with an empty list.
    """
    buckets: dict[str, list[dict[str, Any]]] = {
        category: [] for category, _ in CATEGORY_KEYWORDS
    }
    buckets[OTHER_CATEGORY] = []

    for reference in references:
        source_db = reference.get("xref_src_db")
        entry = {**reference, "url": reference_url(source_db, reference.get("xref_id"))}
        buckets[categorize_reference(source_db)].append(entry)

    return buckets
