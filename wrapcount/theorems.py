"""The counter theory: every property the operations must satisfy.

sorts:  U32
ops:    new : → U32
        increment, decrement, reset : U32 → U32
        add, subtract : U32 × U32 → U32
        wrapping_add, wrapping_sub : U32 × U32 → U32

``wrapping_add`` and ``wrapping_sub`` are the arithmetic primitives; the
``*_ensures`` axioms tie each operation to them, the remaining axioms are
the algebraic and boundary laws that follow.
"""

from __future__ import annotations

from .counter import MAX
from .helpers import U32, app, const, eq, fn, forall, lit, var
from .signature import Signature
from .spec import Axiom, Spec


def counter_signature() -> Signature:
    return Signature(
        sorts=(U32,),
        functions={
            "new": fn("new", []),
            "increment": fn("increment", [("c", U32)]),
            "decrement": fn("decrement", [("c", U32)]),
            "add": fn("add", [("c", U32), ("n", U32)]),
            "subtract": fn("subtract", [("c", U32), ("n", U32)]),
            "reset": fn("reset", [("c", U32)]),
            "wrapping_add": fn("wrapping_add", [("a", U32), ("b", U32)]),
            "wrapping_sub": fn("wrapping_sub", [("a", U32), ("b", U32)]),
        },
    )


def counter_spec() -> Spec:
    c = var("c")
    n = var("n")
    m = var("m")
    zero = lit(0)
    one = lit(1)
    top = lit(MAX)

    axioms = (
        # Postconditions: one per operation
        Axiom("new_ensures", eq(const("new"), zero)),
        Axiom(
            "increment_ensures",
            forall([c], eq(app("increment", c), app("wrapping_add", c, one))),
        ),
        Axiom(
            "decrement_ensures",
            forall([c], eq(app("decrement", c), app("wrapping_sub", c, one))),
        ),
        Axiom(
            "add_ensures",
            forall([c, n], eq(app("add", c, n), app("wrapping_add", c, n))),
        ),
        Axiom(
            "subtract_ensures",
            forall([c, n], eq(app("subtract", c, n), app("wrapping_sub", c, n))),
        ),
        Axiom("reset_ensures", forall([c], eq(app("reset", c), zero))),
        # Identity
        Axiom("new_zero", forall([c], eq(app("add", c, const("new")), c))),
        Axiom("reset_zero", forall([c], eq(app("reset", c), const("new")))),
        Axiom("add_zero", forall([c], eq(app("add", c, zero), c))),
        Axiom("subtract_zero", forall([c], eq(app("subtract", c, zero), c))),
        # Inverse
        Axiom(
            "decrement_increment",
            forall([c], eq(app("decrement", app("increment", c)), c)),
        ),
        Axiom(
            "increment_decrement",
            forall([c], eq(app("increment", app("decrement", c)), c)),
        ),
        # Composition
        Axiom(
            "increment_twice",
            forall([c], eq(app("increment", app("increment", c)), app("add", c, lit(2)))),
        ),
        Axiom("add_one", forall([c], eq(app("add", c, one), app("increment", c)))),
        Axiom(
            "subtract_one",
            forall([c], eq(app("subtract", c, one), app("decrement", c))),
        ),
        Axiom(
            "add_assoc",
            forall(
                [c, n, m],
                eq(
                    app("add", app("add", c, n), m),
                    app("add", c, app("wrapping_add", n, m)),
                ),
            ),
        ),
        Axiom(
            "subtract_assoc",
            forall(
                [c, n, m],
                eq(
                    app("subtract", app("subtract", c, n), m),
                    app("subtract", c, app("wrapping_add", n, m)),
                ),
            ),
        ),
        # Boundary
        Axiom("increment_max", eq(app("increment", top), zero)),
        Axiom("decrement_zero", eq(app("decrement", zero), top)),
        Axiom("add_max_one", eq(app("add", top, one), zero)),
        Axiom("subtract_zero_one", eq(app("subtract", zero, one), top)),
    )

    return Spec(name="WrappingCounter", signature=counter_signature(), axioms=axioms)
