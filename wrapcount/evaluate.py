"""Evaluate terms and formulas against a concrete implementation.

An *algebra* maps each function symbol to a Python callable. The default
algebra is the ``wrapcount.counter`` module itself; tests and the CLI can
swap in other callables to check alternative implementations against the
same axioms.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from . import counter
from .terms import Equation, FnApp, Formula, Literal, Term, UniversalQuant, Var

Algebra = Mapping[str, Callable[..., int]]
Env = Mapping[str, int]

DEFAULT_ALGEBRA: Algebra = MappingProxyType(
    {
        "new": counter.new,
        "increment": counter.increment,
        "decrement": counter.decrement,
        "add": counter.add,
        "subtract": counter.subtract,
        "reset": counter.reset,
        "wrapping_add": counter.wrapping_add,
        "wrapping_sub": counter.wrapping_sub,
    }
)


class EvaluationError(Exception):
    """A term could not be evaluated (unbound variable, unknown function)."""


def with_overrides(**overrides: Callable[..., int]) -> Algebra:
    """The default algebra with some symbols replaced."""
    return MappingProxyType({**DEFAULT_ALGEBRA, **overrides})


def eval_term(t: Term, env: Env, algebra: Algebra = DEFAULT_ALGEBRA) -> int:
    match t:
        case Var(name=name):
            if name not in env:
                raise EvaluationError(f"Variable '{name}' is not bound")
            return env[name]
        case Literal(value=value):
            return int(value)
        case FnApp(fn_name=name, args=args):
            impl = algebra.get(name)
            if impl is None:
                raise EvaluationError(f"No implementation for '{name}'")
            return impl(*(eval_term(a, env, algebra) for a in args))
    raise TypeError(f"Unknown term type: {type(t)}")


def holds(f: Formula, env: Env, algebra: Algebra = DEFAULT_ALGEBRA) -> bool:
    """Truth of ``f`` when its quantified variables take the values in ``env``."""
    match f:
        case Equation(lhs=lhs, rhs=rhs):
            return eval_term(lhs, env, algebra) == eval_term(rhs, env, algebra)
        case UniversalQuant(body=body):
            return holds(body, env, algebra)
    raise TypeError(f"Unknown formula type: {type(f)}")


def quantified_vars(f: Formula) -> tuple[Var, ...]:
    """Variables bound by the quantifiers of ``f``, outermost first."""
    match f:
        case UniversalQuant(variables=variables, body=body):
            return variables + quantified_vars(body)
        case _:
            return ()
