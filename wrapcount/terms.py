"""Terms and formulas for stating counter theorems.

A term is a well-sorted expression built from:
  - Variables (with a declared sort)
  - Function applications (f(t₁, ..., tₙ) where f is in the signature)
  - Literals (concrete values such as 4294967295)

A formula is an equation between two terms, optionally closed by a
universal quantifier. That is all the counter theorems need: every
property is of the form ∀ vars • lhs = rhs.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Term AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Var:
    """A variable with a declared sort.

    Example: c : U32
    """

    name: str
    sort: str


@dataclass(frozen=True)
class FnApp:
    """Application of a function symbol to arguments.

    Example: increment(c)   — FnApp("increment", (Var("c", "U32"),))
    Example: new            — FnApp("new", ())  [constant]
    """

    fn_name: str
    args: tuple[Term, ...]


@dataclass(frozen=True)
class Literal:
    """A concrete value of a sort, kept in its decimal text form.

    Example: 4294967295 : U32 — Literal("4294967295", "U32")
    """

    value: str
    sort: str


Term = Var | FnApp | Literal


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Equation:
    """lhs = rhs

    Example: add(c, 0) = c
    """

    lhs: Term
    rhs: Term


@dataclass(frozen=True)
class UniversalQuant:
    """Universal quantification over variables.

    Example: ∀ c : U32 • decrement(increment(c)) = c
    """

    variables: tuple[Var, ...]
    body: Formula


Formula = Equation | UniversalQuant


# ---------------------------------------------------------------------------
# Pretty printing
# ---------------------------------------------------------------------------


def show_term(t: Term) -> str:
    match t:
        case Var(name=name):
            return name
        case Literal(value=value):
            return value
        case FnApp(fn_name=name, args=()):
            return f"{name}()"
        case FnApp(fn_name=name, args=args):
            return f"{name}({', '.join(show_term(a) for a in args)})"
    raise TypeError(f"Unknown term type: {type(t)}")


def show_formula(f: Formula) -> str:
    match f:
        case Equation(lhs=lhs, rhs=rhs):
            return f"{show_term(lhs)} = {show_term(rhs)}"
        case UniversalQuant(variables=variables, body=body):
            bound = ", ".join(v.name for v in variables)
            sort = variables[0].sort if variables else ""
            return f"∀ {bound} : {sort} • {show_formula(body)}"
    raise TypeError(f"Unknown formula type: {type(f)}")
