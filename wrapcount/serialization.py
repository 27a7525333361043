"""JSON serialization for counter specifications.

Every node serializes to a dict with a "type" discriminator field.
Round-trip: spec_from_json(spec_to_json(x)) == x.
"""

from __future__ import annotations

import json
from typing import Any

from .signature import FnParam, FnSymbol, Signature
from .spec import Axiom, Spec
from .terms import Equation, FnApp, Formula, Literal, Term, UniversalQuant, Var

# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


def fn_symbol_to_json(f: FnSymbol) -> dict[str, Any]:
    return {
        "type": "fn_symbol",
        "name": f.name,
        "params": [{"name": p.name, "sort": p.sort} for p in f.params],
        "result": f.result,
    }


def fn_symbol_from_json(d: dict[str, Any]) -> FnSymbol:
    return FnSymbol(
        name=d["name"],
        params=tuple(FnParam(name=p["name"], sort=p["sort"]) for p in d["params"]),
        result=d["result"],
    )


def signature_to_json(sig: Signature) -> dict[str, Any]:
    return {
        "type": "signature",
        "sorts": list(sig.sorts),
        "functions": {k: fn_symbol_to_json(v) for k, v in sig.functions.items()},
    }


def signature_from_json(d: dict[str, Any]) -> Signature:
    return Signature(
        sorts=tuple(d["sorts"]),
        functions={k: fn_symbol_from_json(v) for k, v in d["functions"].items()},
    )


# ---------------------------------------------------------------------------
# Terms and formulas
# ---------------------------------------------------------------------------


def term_to_json(t: Term) -> dict[str, Any]:
    match t:
        case Var():
            return {"type": "var", "name": t.name, "sort": t.sort}
        case FnApp():
            return {
                "type": "fn_app",
                "fn_name": t.fn_name,
                "args": [term_to_json(a) for a in t.args],
            }
        case Literal():
            return {"type": "literal", "value": t.value, "sort": t.sort}
    raise TypeError(f"Unknown term type: {type(t)}")


def term_from_json(d: dict[str, Any]) -> Term:
    match d["type"]:
        case "var":
            return Var(name=d["name"], sort=d["sort"])
        case "fn_app":
            return FnApp(fn_name=d["fn_name"], args=tuple(term_from_json(a) for a in d["args"]))
        case "literal":
            return Literal(value=d["value"], sort=d["sort"])
        case other:
            raise ValueError(f"Unknown term type: {other}")


def formula_to_json(f: Formula) -> dict[str, Any]:
    match f:
        case Equation():
            return {"type": "equation", "lhs": term_to_json(f.lhs), "rhs": term_to_json(f.rhs)}
        case UniversalQuant():
            return {
                "type": "forall",
                "variables": [term_to_json(v) for v in f.variables],
                "body": formula_to_json(f.body),
            }
    raise TypeError(f"Unknown formula type: {type(f)}")


def formula_from_json(d: dict[str, Any]) -> Formula:
    match d["type"]:
        case "equation":
            return Equation(lhs=term_from_json(d["lhs"]), rhs=term_from_json(d["rhs"]))
        case "forall":
            variables = tuple(term_from_json(v) for v in d["variables"])
            if not all(isinstance(v, Var) for v in variables):
                raise ValueError("Quantified variables must all be of type 'var'")
            return UniversalQuant(
                variables=variables,  # type: ignore[arg-type]
                body=formula_from_json(d["body"]),
            )
        case other:
            raise ValueError(f"Unknown formula type: {other}")


# ---------------------------------------------------------------------------
# Spec
# ---------------------------------------------------------------------------


def spec_to_json(sp: Spec) -> dict[str, Any]:
    return {
        "type": "spec",
        "name": sp.name,
        "signature": signature_to_json(sp.signature),
        "axioms": [
            {"label": a.label, "formula": formula_to_json(a.formula)} for a in sp.axioms
        ],
    }


def spec_from_json(d: dict[str, Any]) -> Spec:
    return Spec(
        name=d["name"],
        signature=signature_from_json(d["signature"]),
        axioms=tuple(
            Axiom(label=a["label"], formula=formula_from_json(a["formula"]))
            for a in d["axioms"]
        ),
    )


def dumps(sp: Spec) -> str:
    return json.dumps(spec_to_json(sp), indent=2, ensure_ascii=False)


def loads(s: str) -> Spec:
    return spec_from_json(json.loads(s))
