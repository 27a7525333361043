"""Round-trip tests for spec serialization."""

import json

import pytest

from wrapcount import dumps, loads
from wrapcount.serialization import formula_from_json, term_from_json
from wrapcount.theorems import counter_spec


def test_counter_spec_round_trip() -> None:
    sp = counter_spec()
    assert loads(dumps(sp)) == sp


def test_json_shape() -> None:
    d = json.loads(dumps(counter_spec()))
    assert d["type"] == "spec"
    assert d["name"] == "WrappingCounter"
    assert d["signature"]["sorts"] == ["U32"]
    assert d["signature"]["functions"]["add"]["params"] == [
        {"name": "c", "sort": "U32"},
        {"name": "n", "sort": "U32"},
    ]
    boundary = next(a for a in d["axioms"] if a["label"] == "decrement_zero")
    assert boundary["formula"]["rhs"] == {
        "type": "literal",
        "value": "4294967295",
        "sort": "U32",
    }


def test_unknown_node_types() -> None:
    with pytest.raises(ValueError):
        term_from_json({"type": "field_access"})
    with pytest.raises(ValueError):
        formula_from_json({"type": "negation"})
    with pytest.raises(ValueError):
        formula_from_json(
            {
                "type": "forall",
                "variables": [{"type": "literal", "value": "0", "sort": "U32"}],
                "body": {},
            }
        )
