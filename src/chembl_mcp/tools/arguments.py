"""
Argument shapes for ChEMBL tools.

Each shape is a frozen, strictly-typed pydantic model. A shape instance
is only ever obtained through `parse_arguments`, so any handler holding
one knows its preconditions hold: required fields present, numbers
within bounds, lists within length bounds. Strict mode keeps JSON types
honest: "10" is not a number and `true` is not an integer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from chembl_mcp.core.exceptions import InvalidParametersError

DEFAULT_LIMIT = 25

NonEmptyStr = Annotated[str, Field(min_length=1)]
Limit = Annotated[
    int,
    Field(ge=1, le=1000, description="Number of results to return (1-1000, default: 25)"),
]


class ToolArguments(BaseModel):
    """Base class for all argument shapes."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    shape: ClassVar[str] = "arguments"


A = TypeVar("A", bound=ToolArguments)


def parse_arguments(model: type[A], raw: Any, operation: str) -> A:
    """
    Validate raw tool arguments against a shape.

    Args:
        model: The argument shape to parse into
        raw: Untyped arguments as delivered by the transport
        operation: Operation name, used in error messages

    Returns:
        The validated, immutable arguments

    Raises:
        InvalidParametersError: If the arguments do not satisfy the shape
    """
    if not isinstance(raw, Mapping):
        raise InvalidParametersError(
            operation,
            "arguments must be an object",
            validation_errors=[{"param": "", "error": "Input should be an object"}],
        )

    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        errors = [
            {
                "param": ".".join(str(part) for part in err["loc"]),
                "error": err["msg"],
            }
            for err in e.errors()
        ]
        summary = "; ".join(
            f"{err['param']}: {err['error']}" if err["param"] else err["error"]
            for err in errors
        )
        raise InvalidParametersError(
            operation,
            summary,
            validation_errors=errors,
            cause=e,
        ) from e


# =============================================================================
# SHAPES FROM THE CORE TOOLSET
# =============================================================================


class QueryArgs(ToolArguments):
    """Free-text search with paging."""

    shape: ClassVar[str] = "query"

    query: NonEmptyStr = Field(description="Search query (compound name, synonym, or identifier)")
    limit: Limit | None = None
    offset: Annotated[int, Field(ge=0)] | None = Field(
        default=None, description="Number of results to skip (default: 0)"
    )


class IdentifierArgs(ToolArguments):
    """Single-entity lookup by ChEMBL ID."""

    shape: ClassVar[str] = "identifier"

    chembl_id: NonEmptyStr = Field(description="ChEMBL ID (e.g., CHEMBL25)")


class SimilarityArgs(ToolArguments):
    """Tanimoto similarity search."""

    shape: ClassVar[str] = "similarity"

    smiles: NonEmptyStr = Field(description="SMILES string of the query molecule")
    similarity: Annotated[float, Field(ge=0, le=1)] | None = Field(
        default=None, description="Similarity threshold (0-1, default: 0.7)"
    )
    limit: Limit | None = None


class SubstructureArgs(ToolArguments):
    """Substructure search."""

    shape: ClassVar[str] = "substructure"

    smiles: NonEmptyStr = Field(description="SMILES string of the substructure query")
    limit: Limit | None = None


class ActivityFilterArgs(ToolArguments):
    """Bioactivity filter; needs at least one identifying field."""

    shape: ClassVar[str] = "activity_filter"

    target_chembl_id: str | None = Field(default=None, description="ChEMBL target ID filter")
    assay_chembl_id: str | None = Field(default=None, description="ChEMBL assay ID filter")
    molecule_chembl_id: str | None = Field(default=None, description="ChEMBL compound ID filter")
    activity_type: str | None = Field(
        default=None, description="Activity type (e.g., IC50, Ki, EC50)"
    )
    limit: Limit | None = None

    @model_validator(mode="after")
    def require_identifier(self) -> ActivityFilterArgs:
        if (
            self.target_chembl_id is None
            and self.assay_chembl_id is None
            and self.molecule_chembl_id is None
        ):
            raise ValueError(
                "at least one of target_chembl_id, assay_chembl_id or "
                "molecule_chembl_id is required"
            )
        return self


class PropertyFilterArgs(ToolArguments):
    """Physicochemical property bounds. All optional; empty means unfiltered."""

    shape: ClassVar[str] = "property_filter"

    min_mw: Annotated[float, Field(ge=0)] | None = Field(
        default=None, description="Minimum molecular weight (Da)"
    )
    max_mw: Annotated[float, Field(ge=0)] | None = Field(
        default=None, description="Maximum molecular weight (Da)"
    )
    min_logp: float | None = Field(default=None, description="Minimum LogP value")
    max_logp: float | None = Field(default=None, description="Maximum LogP value")
    max_hbd: Annotated[float, Field(ge=0)] | None = Field(
        default=None, description="Maximum hydrogen bond donors"
    )
    max_hba: Annotated[float, Field(ge=0)] | None = Field(
        default=None, description="Maximum hydrogen bond acceptors"
    )
    limit: Limit | None = None


class BatchArgs(ToolArguments):
    """A list of compound IDs."""

    shape: ClassVar[str] = "batch"

    chembl_ids: list[NonEmptyStr] = Field(
        min_length=1,
        max_length=50,
        description="Array of ChEMBL compound IDs (1-50)",
    )


class InchiArgs(ToolArguments):
    """InChI or InChI key search."""

    shape: ClassVar[str] = "inchi"

    inchi: NonEmptyStr = Field(description="InChI key or InChI string")
    limit: Limit | None = None


# =============================================================================
# SHAPES FOR THE REMAINING TOOLS
# =============================================================================


class StructureArgs(ToolArguments):
    shape: ClassVar[str] = "structure"

    chembl_id: NonEmptyStr = Field(description="ChEMBL compound ID")
    format: Literal["smiles", "inchi", "molfile", "sdf"] = Field(
        default="smiles", description="Structure format (default: smiles)"
    )


class TargetSearchArgs(ToolArguments):
    shape: ClassVar[str] = "target_search"

    query: NonEmptyStr = Field(description="Target name or search query")
    target_type: str | None = Field(
        default=None,
        description="Target type filter (e.g., SINGLE PROTEIN, PROTEIN COMPLEX)",
    )
    organism: str | None = Field(default=None, description="Organism filter")
    limit: Limit | None = None


class TargetCompoundsArgs(ToolArguments):
    shape: ClassVar[str] = "target_compounds"

    target_chembl_id: NonEmptyStr = Field(description="ChEMBL target ID")
    activity_type: str | None = Field(
        default=None, description="Activity type filter (e.g., IC50, Ki, Kd)"
    )
    limit: Limit | None = None


class UniprotArgs(ToolArguments):
    shape: ClassVar[str] = "uniprot"

    uniprot_id: NonEmptyStr = Field(description="UniProt accession number")
    limit: Limit | None = None


class TargetIdArgs(ToolArguments):
    shape: ClassVar[str] = "target_id"

    target_chembl_id: NonEmptyStr = Field(description="ChEMBL target ID")


class ActivityTypeArgs(ToolArguments):
    shape: ClassVar[str] = "activity_type"

    activity_type: NonEmptyStr = Field(description="Activity type (e.g., IC50, Ki, EC50, Kd)")
    min_value: float | None = Field(default=None, description="Minimum activity value")
    max_value: float | None = Field(default=None, description="Maximum activity value")
    units: str | None = Field(default=None, description="Units filter (e.g., nM, uM)")
    limit: Limit | None = None


class DoseResponseArgs(ToolArguments):
    shape: ClassVar[str] = "dose_response"

    molecule_chembl_id: NonEmptyStr = Field(description="ChEMBL compound ID")
    target_chembl_id: str | None = Field(
        default=None, description="ChEMBL target ID (optional filter)"
    )


class CompareArgs(ToolArguments):
    shape: ClassVar[str] = "compare"

    molecule_chembl_ids: list[NonEmptyStr] = Field(
        min_length=2,
        max_length=10,
        description="Array of ChEMBL compound IDs (2-10)",
    )
    target_chembl_id: str | None = Field(
        default=None, description="ChEMBL target ID for comparison"
    )
    activity_type: str | None = Field(default=None, description="Activity type for comparison")


# ChEMBL max_phase values; 4 means approved.
DEVELOPMENT_PHASES: dict[str, int] = {
    "approved": 4,
    "phase iv": 4,
    "phase 4": 4,
    "4": 4,
    "phase iii": 3,
    "phase 3": 3,
    "3": 3,
    "phase ii": 2,
    "phase 2": 2,
    "2": 2,
    "phase i": 1,
    "phase 1": 1,
    "1": 1,
    "preclinical": 0,
    "0": 0,
}


class DrugSearchArgs(ToolArguments):
    shape: ClassVar[str] = "drug_search"

    query: NonEmptyStr = Field(description="Drug name or search query")
    development_phase: str | None = Field(
        default=None,
        description="Development phase filter (Approved, Phase I-IV, Preclinical)",
    )
    limit: Limit | None = None

    @field_validator("development_phase")
    @classmethod
    def known_phase(cls, v: str | None) -> str | None:
        if v is not None and v.strip().lower() not in DEVELOPMENT_PHASES:
            raise ValueError(f"unknown development phase '{v}'")
        return v

    @property
    def max_phase(self) -> int | None:
        if self.development_phase is None:
            return None
        return DEVELOPMENT_PHASES[self.development_phase.strip().lower()]


class IndicationArgs(ToolArguments):
    shape: ClassVar[str] = "indication"

    indication: NonEmptyStr = Field(description="Disease or indication search term")
    limit: Limit | None = None


class CompoundLookupArgs(ToolArguments):
    """A compound named either by ChEMBL ID or by SMILES."""

    shape: ClassVar[str] = "compound_lookup"

    chembl_id: NonEmptyStr | None = Field(default=None, description="ChEMBL compound ID")
    smiles: NonEmptyStr | None = Field(
        default=None, description="SMILES string (alternative to ChEMBL ID)"
    )

    @model_validator(mode="after")
    def require_compound(self) -> CompoundLookupArgs:
        if self.chembl_id is None and self.smiles is None:
            raise ValueError("either chembl_id or smiles is required")
        return self
