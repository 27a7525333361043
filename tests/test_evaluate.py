import pytest

from wrapcount.counter import MAX
from wrapcount.evaluate import (
    DEFAULT_ALGEBRA,
    EvaluationError,
    eval_term,
    holds,
    quantified_vars,
    with_overrides,
)
from wrapcount.helpers import app, const, eq, forall, lit, var


def test_eval_term() -> None:
    c = var("c")
    assert eval_term(const("new"), {}) == 0
    assert eval_term(app("subtract", lit(3), lit(5)), {}) == 4294967294
    assert eval_term(app("increment", c), {"c": MAX}) == 0


def test_eval_term_errors() -> None:
    with pytest.raises(EvaluationError):
        eval_term(var("c"), {})
    with pytest.raises(EvaluationError):
        eval_term(app("multiply", lit(1), lit(2)), {})


def test_holds() -> None:
    c = var("c")
    law = forall([c], eq(app("decrement", app("increment", c)), c))
    assert holds(law, {"c": 0})
    assert holds(law, {"c": MAX})
    broken = with_overrides(increment=lambda x: min(x + 1, MAX))
    assert not holds(law, {"c": MAX}, broken)
    assert DEFAULT_ALGEBRA["increment"] is not broken["increment"]


def test_quantified_vars() -> None:
    c, n, m = var("c"), var("n"), var("m")
    assert quantified_vars(forall([c, n], forall([m], eq(c, n)))) == (c, n, m)
    assert quantified_vars(eq(const("new"), lit(0))) == ()
