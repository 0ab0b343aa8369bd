"""
Core type definitions for chembl-mcp.

All request-scoped values passed between the dispatcher, the upstream
client and the shapers are defined here. They are:
- Immutable
- Serializable (JSON-compatible)
- Shaped after the MCP tool-call wire format
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from ulid import ULID


def generate_id() -> str:
    """Generate a unique, sortable identifier."""
    return str(ULID())


def to_float(value: Any) -> float | None:
    """
    Coerce an upstream numeric value to float.

    ChEMBL serializes decimals as strings ("180.16"). Booleans, empty
    strings and anything unparseable map to None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


class ToolRequest(BaseModel):
    """A single tool invocation delivered by the transport layer."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    operation: str
    # Raw transport value; the operation's shape rejects non-objects
    arguments: Any = Field(default_factory=dict)


class TextContent(BaseModel):
    """One text item of a tool result."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    Result of executing a tool.

    The sole output shape of every operation. Serializes with the
    camel-case `isError` key used on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_payload(cls, payload: Any) -> ToolResult:
        """Wrap a JSON-serializable payload as a single text item."""
        return cls(content=[TextContent(text=json.dumps(payload, indent=2))])

    @classmethod
    def from_error(cls, operation: str, message: str) -> ToolResult:
        """Build the error result reported for a failed invocation."""
        return cls(
            content=[TextContent(text=f"Error executing tool {operation}: {message}")],
            is_error=True,
        )

    @property
    def text(self) -> str:
        """Concatenated text of all content items."""
        return "".join(item.text for item in self.content)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)


class UpstreamQuery(BaseModel):
    """A GET request against the ChEMBL API, relative to the base URL."""

    model_config = ConfigDict(frozen=True)

    path: str
    params: dict[str, str | int | float] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def drop_unset(cls, v: Any) -> Any:
        """Parameters whose value is None are never sent."""
        if isinstance(v, dict):
            return {k: val for k, val in v.items() if val is not None}
        return v


class CompoundProperties(BaseModel):
    """
    Computed properties of a molecule, as reported by ChEMBL.

    Any field may be missing. Calculators treat None as "unknown".
    """

    model_config = ConfigDict(frozen=True)

    molecular_weight: float | None = None
    alogp: float | None = None
    cx_logp: float | None = None
    hbd: float | None = None
    hba: float | None = None
    psa: float | None = None
    rtb: float | None = None
    num_ro5_violations: float | None = None
    heavy_atoms: float | None = None
    aromatic_rings: float | None = None
    rings: float | None = None
    qed_weighted: float | None = None
    ro3_pass: str | None = None
    full_molformula: str | None = None

    @field_validator(
        "molecular_weight",
        "alogp",
        "cx_logp",
        "hbd",
        "hba",
        "psa",
        "rtb",
        "num_ro5_violations",
        "heavy_atoms",
        "aromatic_rings",
        "rings",
        "qed_weighted",
        mode="before",
    )
    @classmethod
    def coerce_number(cls, v: Any) -> float | None:
        return to_float(v)

    @field_validator("ro3_pass", "full_molformula", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @classmethod
    def from_molecule(cls, molecule: dict[str, Any] | None) -> CompoundProperties:
        """Extract properties from an upstream molecule record."""
        props = (molecule or {}).get("molecule_properties") or {}
        weight = props.get("full_mwt")
        if to_float(weight) is None:
            weight = props.get("mw_freebase")
        if to_float(weight) is None:
            weight = props.get("molecular_weight")
        return cls(
            molecular_weight=weight,
            alogp=props.get("alogp"),
            cx_logp=props.get("cx_logp"),
            hbd=props.get("hbd"),
            hba=props.get("hba"),
            psa=props.get("psa"),
            rtb=props.get("rtb"),
            num_ro5_violations=props.get("num_ro5_violations"),
            heavy_atoms=props.get("heavy_atoms"),
            aromatic_rings=props.get("aromatic_rings"),
            rings=props.get("rings"),
            qed_weighted=props.get("qed_weighted"),
            ro3_pass=props.get("ro3_pass"),
            full_molformula=props.get("full_molformula"),
        )
