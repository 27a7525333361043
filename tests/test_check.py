import logging

import pytest

from wrapcount.check import (
    BOUNDARY_VALUES,
    Severity,
    boundary_assignments,
    check_spec,
    verify,
    verify_spec,
)
from wrapcount.config import VerifyConfig
from wrapcount.counter import MAX
from wrapcount.evaluate import with_overrides
from wrapcount.helpers import app, const, eq, fn, forall, lit, var
from wrapcount.report import report_json
from wrapcount.signature import Signature
from wrapcount.spec import Axiom, Spec
from wrapcount.terms import Equation, FnApp, Literal, Var
from wrapcount.theorems import counter_signature, counter_spec

FAST = VerifyConfig(samples=16, seed=7)


def _spec(*axioms: Axiom) -> Spec:
    return Spec("Test", counter_signature(), axioms)


def test_counter_spec_is_well_formed() -> None:
    result = check_spec(counter_spec())
    assert result.is_well_formed
    assert not result.errors
    assert not result.warnings


def test_counter_spec_labels() -> None:
    labels = {ax.label for ax in counter_spec().axioms}
    assert {
        "new_zero",
        "reset_zero",
        "add_zero",
        "subtract_zero",
        "decrement_increment",
        "increment_decrement",
        "increment_twice",
        "add_one",
        "subtract_one",
        "add_assoc",
        "subtract_assoc",
        "increment_max",
        "decrement_zero",
        "add_max_one",
        "subtract_zero_one",
    } <= labels
    for op in ("new", "increment", "decrement", "add", "subtract", "reset"):
        assert f"{op}_ensures" in labels


def test_fn_declared() -> None:
    res = check_spec(_spec(Axiom("bad_fn", Equation(FnApp("multiply", ()), lit(0)))))
    assert any(e.check == "fn_declared" for e in res.errors)


def test_fn_arity() -> None:
    res = check_spec(_spec(Axiom("bad_arity", eq(app("increment", lit(1), lit(2)), lit(3)))))
    assert any(e.check == "fn_arity" for e in res.errors)


def test_var_bound() -> None:
    res = check_spec(_spec(Axiom("unbound", eq(var("c"), lit(0)))))
    assert any(e.check == "var_bound" for e in res.errors)


def test_sort_checks() -> None:
    c = Var("c", "Bool")
    res = check_spec(_spec(Axiom("bad_sort", forall([c], eq(app("increment", c), lit(0))))))
    checks = {e.check for e in res.errors}
    assert "sort_resolved" in checks
    assert "fn_arg_sorts" in checks


def test_literal_out_of_range() -> None:
    res = check_spec(_spec(Axiom("too_big", eq(const("new"), lit(MAX + 1)))))
    assert any(e.check == "literal_valid" for e in res.errors)
    res = check_spec(_spec(Axiom("nan", eq(const("new"), Literal("zero", "U32")))))
    assert any(e.check == "literal_valid" for e in res.errors)


def test_duplicate_axiom_labels() -> None:
    ax = Axiom("dup", eq(const("new"), lit(0)))
    res = check_spec(_spec(ax, ax))
    assert any(e.check == "duplicate_axiom_labels" for e in res.errors)


def test_signature_sort_resolved() -> None:
    sig = Signature(
        sorts=("U32",),
        functions={
            **counter_signature().functions,
            "ghost": fn("ghost", [("x", "Ghost")]),
        },
    )
    res = check_spec(Spec("Ghost", sig, ()))
    assert any(e.check == "sort_resolved" for e in res.errors)


def test_warnings() -> None:
    c = var("c")
    n = var("n")
    res = check_spec(
        _spec(
            Axiom("trivial", forall([c], eq(c, c))),
            Axiom("unused", forall([c, n], eq(app("reset", c), lit(0)))),
        )
    )
    assert res.is_well_formed
    checks = {w.check for w in res.warnings}
    assert checks == {"trivial_axiom", "var_used"}
    assert all(w.severity == Severity.WARNING for w in res.warnings)


def test_boundary_assignments() -> None:
    assert list(boundary_assignments(0)) == [()]
    assert len(list(boundary_assignments(2))) == len(BOUNDARY_VALUES) ** 2
    assert (MAX, 0) in set(boundary_assignments(2))


def test_verify_spec_holds() -> None:
    result = verify_spec(counter_spec(), FAST)
    assert result.is_well_formed
    assert result.diagnostics == ()


def test_verify_spec_finds_counterexample() -> None:
    c = var("c")
    false_law = Axiom("increment_grows", forall([c], eq(app("subtract", app("increment", c), c), lit(1))))
    assert not verify_spec(_spec(false_law), FAST).errors

    bad = Axiom("add_is_idempotent", forall([c], eq(app("add", c, c), c)))
    result = verify_spec(_spec(bad), FAST)
    assert [e.check for e in result.errors] == ["axiom_holds"]
    assert result.errors[0].axiom == "add_is_idempotent"
    assert "c = 1" in result.errors[0].message


def test_verify_spec_ground_axiom() -> None:
    result = verify_spec(_spec(Axiom("wrong", eq(app("increment", lit(MAX)), lit(MAX)))), FAST)
    assert result.errors[0].message == "Ground axiom is false"


def test_verify_spec_skips_ill_formed() -> None:
    result = verify_spec(_spec(Axiom("unbound", eq(var("c"), lit(0)))), FAST)
    assert [e.check for e in result.errors] == ["var_bound"]


def test_verify_spec_reports_raising_implementation() -> None:
    def exploding(c: int) -> int:
        raise OverflowError("trap")

    algebra = with_overrides(increment=exploding)
    result = verify_spec(counter_spec(), FAST, algebra)
    raised = {e.axiom for e in result.errors if e.check == "axiom_raises"}
    assert "increment_ensures" in raised
    assert "increment_max" in raised


def test_verify_reports_raising_contract() -> None:
    def checked_increment(c: int) -> int:
        if c == MAX:
            raise OverflowError("increment overflow")
        return c + 1

    report = verify(FAST, with_overrides(increment=checked_increment))
    assert not report.passed
    raised = [v for v in report.violations if v.clause == "raises"]
    assert [v.call_args for v in raised] == [(MAX,)]
    assert raised[0].error == "OverflowError: increment overflow"
    assert "increment_max" in {e.axiom for e in report.check.errors}


def test_boundary_cap_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="wrapcount.check"):
        assert len(list(boundary_assignments(3))) == len(BOUNDARY_VALUES) ** 3
        assert not caplog.records
        assert len(list(boundary_assignments(4))) == 1024
    assert "2401 boundary combinations" in caplog.text


def test_counter_spec_axioms_are_distinct() -> None:
    formulas = [ax.formula for ax in counter_spec().axioms]
    assert len(formulas) == len(set(map(repr, formulas)))


def test_verify_passes() -> None:
    report = verify(FAST)
    assert report.passed
    assert report.axiom_count == len(counter_spec().axioms)
    assert report.contract_count == 6
    assert report.violations == ()


def test_verify_catches_saturating_add() -> None:
    def saturating_add(c: int, n: int) -> int:
        return min(c + n, MAX)

    report = verify(FAST, with_overrides(add=saturating_add))
    assert not report.passed
    assert any(v.operation == "add" for v in report.violations)
    failed = {e.axiom for e in report.check.errors}
    assert {"add_ensures", "add_max_one"} <= failed


def test_verify_is_reproducible() -> None:
    def off_by_one(c: int, n: int) -> int:
        return (c - n + (1 if n > c else 0)) % 2**32

    algebra = with_overrides(subtract=off_by_one)
    first = report_json(verify(FAST, algebra))
    second = report_json(verify(FAST, algebra))
    assert not first["passed"]
    assert first == second
