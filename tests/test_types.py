"""Tests for core types."""

import json

import pytest

from chembl_mcp.core.types import (
    CompoundProperties,
    ToolRequest,
    ToolResult,
    UpstreamQuery,
    generate_id,
    to_float,
)


class TestToFloat:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("180.16", 180.16),
            (" 1.31 ", 1.31),
            (3, 3.0),
            (2.5, 2.5),
            ("-0.5", -0.5),
        ],
    )
    def test_parses_numbers(self, value, expected):
        assert to_float(value) == expected

    @pytest.mark.parametrize("value", [None, "", "N/A", True, False, [], {}])
    def test_unparseable_is_none(self, value):
        assert to_float(value) is None


class TestToolRequest:
    def test_generates_id(self):
        request = ToolRequest(operation="get_compound_info")
        assert request.id
        assert request.arguments == {}

    def test_ids_are_unique(self):
        assert generate_id() != generate_id()


class TestToolResult:
    def test_from_payload_is_indented_json(self):
        payload = {"molecule_chembl_id": "CHEMBL25", "max_phase": "4.0"}
        result = ToolResult.from_payload(payload)
        assert result.is_error is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.text == json.dumps(payload, indent=2)

    def test_from_error(self):
        result = ToolResult.from_error("get_compound_info", "Request failed with status code 404")
        assert result.is_error is True
        assert result.text == (
            "Error executing tool get_compound_info: Request failed with status code 404"
        )

    def test_wire_format_uses_is_error_alias(self):
        wire = ToolResult.from_error("x", "boom").to_wire()
        assert wire["isError"] is True
        assert wire["content"] == [{"type": "text", "text": "Error executing tool x: boom"}]


class TestUpstreamQuery:
    def test_drops_none_params(self):
        query = UpstreamQuery(
            path="/activity.json",
            params={"target_chembl_id": "CHEMBL203", "standard_type": None, "limit": 25},
        )
        assert query.params == {"target_chembl_id": "CHEMBL203", "limit": 25}

    def test_params_default_empty(self):
        assert UpstreamQuery(path="/molecule/CHEMBL25.json").params == {}


class TestCompoundProperties:
    def test_from_molecule_coerces_strings(self, aspirin):
        props = CompoundProperties.from_molecule(aspirin)
        assert props.molecular_weight == 180.16
        assert props.alogp == 1.31
        assert props.psa == 63.6
        assert props.hbd == 1.0
        assert props.ro3_pass == "N"
        assert props.full_molformula == "C9H8O4"
        assert props.rings is None

    def test_molecular_weight_fallbacks(self):
        props = CompoundProperties.from_molecule(
            {"molecule_properties": {"full_mwt": None, "mw_freebase": "151.2"}}
        )
        assert props.molecular_weight == 151.2

        props = CompoundProperties.from_molecule(
            {"molecule_properties": {"molecular_weight": 46.07}}
        )
        assert props.molecular_weight == 46.07

    def test_missing_properties_block(self):
        props = CompoundProperties.from_molecule({"molecule_chembl_id": "CHEMBL1", "molecule_properties": None})
        assert props == CompoundProperties()
        assert CompoundProperties.from_molecule(None) == CompoundProperties()

    def test_unparseable_values_become_none(self):
        props = CompoundProperties(alogp="n/a", hbd=True)
        assert props.alogp is None
        assert props.hbd is None
