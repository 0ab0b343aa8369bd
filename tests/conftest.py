"""Shared fixtures: a stubbed ChEMBL API behind httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from chembl_mcp.client import ChemblClient
from chembl_mcp.core.config import UpstreamConfig
from chembl_mcp.tools import ToolExecutor

BASE_URL = "https://chembl.test/api/data"
BASE_PATH = "/api/data"


class FakeChembl:
    """Canned responses keyed by path, with a log of every request received."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any = None, *, status: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status, json=body)

    def add_text(self, path: str, text: str, *, status: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status, text=text)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[path] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(BASE_PATH)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"error_message": "not found"})
        return route(request)

    @property
    def paths(self) -> list[str]:
        return [r.url.path.removeprefix(BASE_PATH) for r in self.requests]

    def params(self, index: int = -1) -> dict[str, str]:
        return dict(self.requests[index].url.params)


@pytest.fixture
def upstream() -> FakeChembl:
    return FakeChembl()


@pytest.fixture
def client(upstream: FakeChembl) -> ChemblClient:
    return ChemblClient(
        UpstreamConfig(base_url=BASE_URL, timeout=30.0),
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def executor(client: ChemblClient) -> ToolExecutor:
    return ToolExecutor(client)


@pytest.fixture
def aspirin() -> dict[str, Any]:
    """Trimmed CHEMBL25 record; numbers are strings, as ChEMBL serves them."""
    return {
        "molecule_chembl_id": "CHEMBL25",
        "pref_name": "ASPIRIN",
        "max_phase": "4.0",
        "molecule_structures": {
            "canonical_smiles": "CC(=O)Oc1ccccc1C(=O)O",
            "standard_inchi": "InChI=1S/C9H8O4/c1-6(10)13-8-5-3-2-4-7(8)9(11)12/h2-5H,1H3,(H,11,12)",
            "standard_inchi_key": "BSYNRYMUTXBXSQ-UHFFFAOYSA-N",
            "molfile": "\n     RDKit          2D\n\n 13 13  0  0  0  0  0  0  0  0999 V2000\n",
        },
        "molecule_properties": {
            "full_mwt": "180.16",
            "mw_freebase": "180.16",
            "alogp": "1.31",
            "cx_logp": "1.24",
            "hbd": 1,
            "hba": 3,
            "psa": "63.60",
            "rtb": 2,
            "num_ro5_violations": 0,
            "heavy_atoms": 13,
            "aromatic_rings": 1,
            "ro3_pass": "N",
            "qed_weighted": "0.55",
            "full_molformula": "C9H8O4",
        },
        "cross_references": [
            {"xref_src": "PubChem", "xref_id": "2244", "xref_name": "aspirin"},
            {"xref_src": "Wikipedia", "xref_id": "Aspirin", "xref_name": None},
        ],
    }
