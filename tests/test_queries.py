"""Table-driven tests for upstream query translation."""

import pytest

from chembl_mcp.tools import get_registry
from chembl_mcp.tools.chembl.compounds import similarity_percent
from chembl_mcp.tools.chembl.search import advanced_search_query
from chembl_mcp.tools.arguments import PropertyFilterArgs

INCHI = "InChI=1S/C9H8O4/c1-6(10)13-8-5-3-2-4-7(8)9(11)12/h2-5H,1H3,(H,11,12)"

QUERY_CASES = [
    (
        "search_compounds",
        {"query": "aspirin"},
        "/molecule/search.json",
        {"q": "aspirin", "limit": 25, "offset": 0},
    ),
    (
        "search_compounds",
        {"query": "aspirin", "limit": 5, "offset": 10},
        "/molecule/search.json",
        {"q": "aspirin", "limit": 5, "offset": 10},
    ),
    ("get_compound_info", {"chembl_id": "CHEMBL25"}, "/molecule/CHEMBL25.json", {}),
    (
        "search_by_inchi",
        {"inchi": INCHI},
        "/molecule.json",
        {"molecule_structures__standard_inchi": INCHI, "limit": 25},
    ),
    (
        "search_by_inchi",
        {"inchi": "BSYNRYMUTXBXSQ-UHFFFAOYSA-N"},
        "/molecule.json",
        {"molecule_structures__standard_inchi_key": "BSYNRYMUTXBXSQ-UHFFFAOYSA-N", "limit": 25},
    ),
    (
        "get_compound_structure",
        {"chembl_id": "CHEMBL25", "format": "molfile"},
        "/molecule/CHEMBL25.json",
        {},
    ),
    (
        "search_similar_compounds",
        {"smiles": "CCO"},
        "/similarity/CCO/70.json",
        {"limit": 25},
    ),
    (
        "search_similar_compounds",
        {"smiles": "CCO", "similarity": 0.755, "limit": 3},
        "/similarity/CCO/76.json",
        {"limit": 3},
    ),
    (
        "search_similar_compounds",
        {"smiles": "CC(=O)O", "similarity": 1.0},
        "/similarity/CC%28%3DO%29O/100.json",
        {"limit": 25},
    ),
    (
        "substructure_search",
        {"smiles": "c1ccccc1"},
        "/substructure/c1ccccc1.json",
        {"limit": 25},
    ),
    (
        "search_targets",
        {"query": "EGFR", "organism": "Homo sapiens"},
        "/target/search.json",
        {"q": "EGFR", "limit": 25, "organism": "Homo sapiens"},
    ),
    ("get_target_info", {"chembl_id": "CHEMBL203"}, "/target/CHEMBL203.json", {}),
    (
        "get_target_compounds",
        {"target_chembl_id": "CHEMBL203", "activity_type": "IC50"},
        "/activity.json",
        {"target_chembl_id": "CHEMBL203", "standard_type": "IC50", "limit": 25},
    ),
    (
        "search_by_uniprot",
        {"uniprot_id": "P00533"},
        "/target.json",
        {"target_components__accession": "P00533", "limit": 25},
    ),
    (
        "search_activities",
        {"target_chembl_id": "CHEMBL123"},
        "/activity.json",
        {"target_chembl_id": "CHEMBL123", "limit": 25},
    ),
    (
        "search_activities",
        {"assay_chembl_id": "CHEMBL1614421", "activity_type": "Ki", "limit": 50},
        "/activity.json",
        {"assay_chembl_id": "CHEMBL1614421", "standard_type": "Ki", "limit": 50},
    ),
    ("get_assay_info", {"chembl_id": "CHEMBL1614421"}, "/assay/CHEMBL1614421.json", {}),
    (
        "search_by_activity_type",
        {"activity_type": "IC50", "min_value": 1, "max_value": 100.5, "units": "nM"},
        "/activity.json",
        {
            "standard_type": "IC50",
            "standard_value__gte": 1,
            "standard_value__lte": 100.5,
            "standard_units": "nM",
            "limit": 25,
        },
    ),
    (
        "get_dose_response",
        {"molecule_chembl_id": "CHEMBL25"},
        "/activity.json",
        {
            "molecule_chembl_id": "CHEMBL25",
            "standard_type__in": "IC50,EC50,Ki,Kd,GI50,LC50,LD50",
            "limit": 100,
        },
    ),
    (
        "search_drugs",
        {"query": "imatinib", "development_phase": "Approved"},
        "/molecule/search.json",
        {"q": "imatinib", "max_phase": 4, "limit": 25},
    ),
    (
        "search_drugs",
        {"query": "imatinib"},
        "/molecule/search.json",
        {"q": "imatinib", "limit": 25},
    ),
    ("get_drug_info", {"chembl_id": "CHEMBL941"}, "/drug.json", {"molecule_chembl_id": "CHEMBL941"}),
    (
        "search_drug_indications",
        {"indication": "asthma", "limit": 10},
        "/drug_indication.json",
        {"efo_term__icontains": "asthma", "limit": 10},
    ),
    (
        "get_mechanism_of_action",
        {"chembl_id": "CHEMBL941"},
        "/mechanism.json",
        {"molecule_chembl_id": "CHEMBL941"},
    ),
    ("analyze_admet_properties", {"chembl_id": "CHEMBL25"}, "/molecule/CHEMBL25.json", {}),
]


@pytest.mark.parametrize("name,arguments,path,params", QUERY_CASES)
def test_query_translation(name, arguments, path, params):
    op = get_registry().get(name)
    query = op.build_query(op.parse(arguments))
    assert query.path == path
    assert query.params == params


def test_identifier_segments_are_escaped():
    op = get_registry().get("get_compound_info")
    query = op.build_query(op.parse({"chembl_id": "CHEMBL25/../x"}))
    assert query.path == "/molecule/CHEMBL25%2F..%2Fx.json"


class TestSimilarityPercent:
    @pytest.mark.parametrize(
        "fraction,expected",
        [(0.7, 70), (1.0, 100), (0, 0), (0.755, 76), (0.745, 75), (0.005, 1), (0.004, 0)],
    )
    def test_round_half_up(self, fraction, expected):
        assert similarity_percent(fraction) == expected


class TestAdvancedSearchQuery:
    def test_no_filters(self):
        query = advanced_search_query(PropertyFilterArgs())
        assert query.path == "/molecule.json"
        assert query.params == {"limit": 25}

    def test_all_filters(self):
        args = PropertyFilterArgs(
            min_mw=200, max_mw=500, min_logp=-1, max_logp=5, max_hbd=5, max_hba=10, limit=50
        )
        assert advanced_search_query(args).params == {
            "molecule_properties__mw_freebase__gte": 200,
            "molecule_properties__mw_freebase__lte": 500,
            "molecule_properties__alogp__gte": -1,
            "molecule_properties__alogp__lte": 5,
            "molecule_properties__hbd__lte": 5,
            "molecule_properties__hba__lte": 10,
            "limit": 50,
        }
