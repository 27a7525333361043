"""Well-formedness and model checking for counter specifications.

Two passes over a Spec:

1. ``check_spec`` — static: every symbol is declared, arities and sorts
   agree, variables are bound, literals are in range, labels are unique.
2. ``verify_spec`` — dynamic: each axiom is evaluated against an algebra
   on every combination of boundary values for its variables, then on
   seeded random assignments. The first falsifying assignment of an axiom
   is reported as its counterexample.

``verify`` runs both passes on ``counter_spec()`` and checks every
operation contract over the same inputs.
"""

from __future__ import annotations

import itertools
import logging
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .config import VerifyConfig
from .contracts import CONTRACTS, check_contract
from .counter import MAX, MODULUS
from .errors import ContractViolation
from .evaluate import DEFAULT_ALGEBRA, Algebra, holds, quantified_vars
from .signature import Signature
from .spec import Spec
from .terms import Equation, FnApp, Formula, Literal, Term, UniversalQuant, Var
from .theorems import counter_spec

logger = logging.getLogger(__name__)

BOUNDARY_VALUES: tuple[int, ...] = (0, 1, 2, (1 << 31) - 1, 1 << 31, MAX - 1, MAX)

_MAX_BOUNDARY_ASSIGNMENTS = 1024


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    check: str
    severity: Severity
    axiom: str | None
    message: str
    path: str | None


@dataclass(frozen=True)
class CheckResult:
    spec_name: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def is_well_formed(self) -> bool:
        return len(self.errors) == 0


@dataclass
class CheckContext:
    sig: Signature
    axiom_label: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _bound: dict[str, str] = field(default_factory=dict)
    _used: set[str] = field(default_factory=set)

    def error(self, check: str, message: str, path: str | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(check, Severity.ERROR, self.axiom_label, message, path)
        )

    def warning(self, check: str, message: str, path: str | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(check, Severity.WARNING, self.axiom_label, message, path)
        )

    def begin_axiom(self, label: str) -> None:
        self.axiom_label = label
        self._bound = {}
        self._used = set()

    def bind(self, v: Var, path: str) -> None:
        if v.name in self._bound and self._bound[v.name] != v.sort:
            self.error(
                "var_sort_consistent",
                f"Variable '{v.name}' appears with sort '{self._bound[v.name]}' and '{v.sort}'",
                path,
            )
        self._bound[v.name] = v.sort

    def lookup(self, name: str) -> str | None:
        if name in self._bound:
            self._used.add(name)
        return self._bound.get(name)

    def unused(self) -> set[str]:
        return set(self._bound) - self._used


# ---------------------------------------------------------------------------
# Static checks
# ---------------------------------------------------------------------------


def check_term(term: Term, ctx: CheckContext, path: str) -> str | None:
    match term:
        case Var(name=name, sort=sort):
            bound = ctx.lookup(name)
            if bound is None:
                ctx.error("var_bound", f"Variable '{name}' is not bound by any quantifier", path)
                return None
            if bound != sort:
                ctx.error(
                    "var_sort_consistent",
                    f"Variable '{name}' is bound as '{bound}' but used as '{sort}'",
                    path,
                )
            return sort
        case Literal(value=value, sort=sort):
            if sort not in ctx.sig.sorts:
                ctx.error("sort_resolved", f"Sort '{sort}' in literal is not declared", path)
                return None
            try:
                number = int(value)
            except ValueError:
                ctx.error("literal_valid", f"Literal '{value}' is not an integer", path)
                return sort
            if not 0 <= number <= MAX:
                ctx.error("literal_valid", f"Literal {number} is outside [0, {MAX}]", path)
            return sort
        case FnApp(fn_name=name, args=args):
            fn = ctx.sig.get_fn(name)
            if fn is None:
                ctx.error("fn_declared", f"Function '{name}' is not declared", path)
                return None
            if len(args) != fn.arity:
                ctx.error(
                    "fn_arity",
                    f"Function '{name}' expects {fn.arity} arguments, got {len(args)}",
                    path,
                )
                return fn.result
            for i, (arg, p) in enumerate(zip(args, fn.params, strict=True)):
                arg_sort = check_term(arg, ctx, f"{path}.args[{i}]")
                if arg_sort is not None and arg_sort != p.sort:
                    ctx.error(
                        "fn_arg_sorts",
                        f"Argument {i} to '{name}' expected sort '{p.sort}', got '{arg_sort}'",
                        f"{path}.args[{i}]",
                    )
            return fn.result
    ctx.error("term_kind", f"Expected Term, got {type(term).__name__}", path)
    return None


def check_formula(formula: Formula, ctx: CheckContext, path: str) -> None:
    match formula:
        case Equation(lhs=lhs, rhs=rhs):
            lhs_sort = check_term(lhs, ctx, f"{path}.lhs")
            rhs_sort = check_term(rhs, ctx, f"{path}.rhs")
            if lhs_sort is not None and rhs_sort is not None and lhs_sort != rhs_sort:
                ctx.error(
                    "equation_sort_match",
                    f"LHS sort '{lhs_sort}' does not match RHS sort '{rhs_sort}'",
                    path,
                )
            if lhs == rhs:
                ctx.warning("trivial_axiom", "Both sides of the equation are identical", path)
        case UniversalQuant(variables=variables, body=body):
            for i, v in enumerate(variables):
                if v.sort not in ctx.sig.sorts:
                    ctx.error(
                        "sort_resolved",
                        f"Variable '{v.name}' has undeclared sort '{v.sort}'",
                        f"{path}.variables[{i}]",
                    )
                ctx.bind(v, f"{path}.variables[{i}]")
            check_formula(body, ctx, f"{path}.body")
        case _:
            ctx.error("formula_kind", f"Expected Formula, got {type(formula).__name__}", path)


def check_signature(sig: Signature, ctx: CheckContext) -> None:
    ctx.axiom_label = None
    for key, fn in sig.functions.items():
        if fn.name != key:
            ctx.error("fn_name_consistency", f"Function key '{key}' does not match fn.name '{fn.name}'")
        if fn.result not in sig.sorts:
            ctx.error("sort_resolved", f"Result sort '{fn.result}' in function '{fn.name}' not in signature")
        for p in fn.params:
            if p.sort not in sig.sorts:
                ctx.error(
                    "sort_resolved",
                    f"Parameter sort '{p.sort}' in function '{fn.name}' not in signature",
                )
    for name in sig.sorts:
        if name in sig.functions:
            ctx.error("no_name_collisions", f"Name '{name}' is both a sort and a function")


def check_spec(spec: Spec) -> CheckResult:
    ctx = CheckContext(sig=spec.signature)
    check_signature(spec.signature, ctx)

    seen: set[str] = set()
    for ax in spec.axioms:
        if ax.label in seen:
            ctx.axiom_label = None
            ctx.error("duplicate_axiom_labels", f"Duplicate axiom label '{ax.label}'")
        seen.add(ax.label)

    for ax in spec.axioms:
        ctx.begin_axiom(ax.label)
        check_formula(ax.formula, ctx, "formula")
        for name in sorted(ctx.unused()):
            ctx.warning("var_used", f"Variable '{name}' bound by quantifier is unused", "formula")

    def sort_key(d: Diagnostic) -> tuple[int, str, str]:
        return (0 if d.severity == Severity.ERROR else 1, d.check, d.axiom or "")

    return CheckResult(spec.name, tuple(sorted(ctx.diagnostics, key=sort_key)))


# ---------------------------------------------------------------------------
# Model checking
# ---------------------------------------------------------------------------


def boundary_assignments(arity: int) -> Iterator[tuple[int, ...]]:
    """Every combination of boundary values for ``arity`` variables, capped."""
    total = len(BOUNDARY_VALUES) ** arity
    if total > _MAX_BOUNDARY_ASSIGNMENTS:
        logger.debug(
            "%d boundary combinations for %d variable(s); checking the first %d",
            total,
            arity,
            _MAX_BOUNDARY_ASSIGNMENTS,
        )
    return itertools.islice(
        itertools.product(BOUNDARY_VALUES, repeat=arity), _MAX_BOUNDARY_ASSIGNMENTS
    )


def random_assignments(arity: int, count: int, rng: random.Random) -> Iterator[tuple[int, ...]]:
    for _ in range(count):
        yield tuple(rng.randrange(MODULUS) for _ in range(arity))


def assignments(arity: int, config: VerifyConfig, rng: random.Random) -> Iterator[tuple[int, ...]]:
    yield from boundary_assignments(arity)
    if arity > 0:
        yield from random_assignments(arity, config.samples, rng)


def _show_env(names: tuple[str, ...], values: tuple[int, ...]) -> str:
    return ", ".join(f"{n} = {v}" for n, v in zip(names, values, strict=True))


def verify_spec(
    spec: Spec,
    config: VerifyConfig | None = None,
    algebra: Algebra = DEFAULT_ALGEBRA,
) -> CheckResult:
    """Evaluate every axiom of a well-formed ``spec`` against ``algebra``.

    An ill-formed spec is returned with its static diagnostics only.
    """
    config = config or VerifyConfig()
    static = check_spec(spec)
    if not static.is_well_formed:
        logger.warning("%s is ill-formed; skipping model checking", spec.name)
        return static

    rng = random.Random(config.seed)
    diagnostics: list[Diagnostic] = []
    for ax in spec.axioms:
        names = tuple(v.name for v in quantified_vars(ax.formula))
        tried = 0
        for values in assignments(len(names), config, rng):
            tried += 1
            env = dict(zip(names, values, strict=True))
            try:
                ok = holds(ax.formula, env, algebra)
            except Exception as e:
                diagnostics.append(
                    Diagnostic(
                        "axiom_raises",
                        Severity.ERROR,
                        ax.label,
                        f"Evaluation raised {type(e).__name__}: {e} at [{_show_env(names, values)}]",
                        "formula",
                    )
                )
                logger.warning("axiom %r raised at %s: %s", ax.label, env, e)
                break
            if not ok:
                diagnostics.append(
                    Diagnostic(
                        "axiom_holds",
                        Severity.ERROR,
                        ax.label,
                        f"Counterexample: [{_show_env(names, values)}]" if names
                        else "Ground axiom is false",
                        "formula",
                    )
                )
                logger.warning("axiom %r falsified by %s", ax.label, env)
                break
        logger.debug("axiom %r: %d assignment(s) tried", ax.label, tried)

    return CheckResult(spec.name, static.diagnostics + tuple(diagnostics))


# ---------------------------------------------------------------------------
# Full verification run
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VerificationReport:
    spec_name: str
    axiom_count: int
    contract_count: int
    check: CheckResult
    violations: tuple[ContractViolation, ...]

    @property
    def passed(self) -> bool:
        return self.check.is_well_formed and not self.violations


def verify(
    config: VerifyConfig | None = None,
    algebra: Algebra = DEFAULT_ALGEBRA,
    spec_factory: Callable[[], Spec] = counter_spec,
) -> VerificationReport:
    """Check every contract and every axiom of the counter theory."""
    config = config or VerifyConfig()
    spec = spec_factory()

    rng = random.Random(config.seed)
    violations: list[ContractViolation] = []
    for name, contract in CONTRACTS.items():
        impl = algebra.get(name)
        violations.extend(
            check_contract(name, assignments(contract.arity, config, rng), impl=impl)
        )

    result = verify_spec(spec, config, algebra)
    return VerificationReport(
        spec_name=spec.name,
        axiom_count=len(spec.axioms),
        contract_count=len(CONTRACTS),
        check=result,
        violations=tuple(violations),
    )
