"""Builder helpers for writing counter theorems.

Prefer these over constructing AST nodes directly.
"""

from wrapcount.signature import FnParam, FnSymbol
from wrapcount.terms import Equation, FnApp, Formula, Literal, Term, UniversalQuant, Var

U32 = "U32"


def param(name: str, sort: str = U32) -> FnParam:
    return FnParam(name=name, sort=sort)


def fn(name: str, params: list[tuple[str, str]], result: str = U32) -> FnSymbol:
    return FnSymbol(
        name=name,
        params=tuple(param(n, s) for n, s in params),
        result=result,
    )


def var(name: str, sort: str = U32) -> Var:
    return Var(name=name, sort=sort)


def lit(value: int, sort: str = U32) -> Literal:
    return Literal(value=str(value), sort=sort)


def app(fn_name: str, *args: Term) -> FnApp:
    return FnApp(fn_name=fn_name, args=tuple(args))


def const(name: str) -> FnApp:
    return FnApp(fn_name=name, args=())


def eq(lhs: Term, rhs: Term) -> Equation:
    return Equation(lhs=lhs, rhs=rhs)


def forall(variables: list[Var], body: Formula) -> UniversalQuant:
    return UniversalQuant(variables=tuple(variables), body=body)
