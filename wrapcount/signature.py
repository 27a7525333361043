"""Signatures for the counter theory.

A signature Σ = (S, F) consists of:
  S: a set of sort names
  F: a set of function symbols, each with a profile  f : s₁ × s₂ × ... → s

A function symbol with zero arguments is a constant. Every sort named in a
profile must be in S.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FnParam:
    """A named parameter of a function symbol."""

    name: str
    sort: str


@dataclass(frozen=True)
class FnSymbol:
    """A function symbol with a profile.

    Examples:
        new       : → U32
        increment : U32 → U32
        add       : U32 × U32 → U32
    """

    name: str
    params: tuple[FnParam, ...]
    result: str

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def param_sorts(self) -> tuple[str, ...]:
        return tuple(p.sort for p in self.params)

    @property
    def is_constant(self) -> bool:
        return self.arity == 0

    def profile(self) -> str:
        params = " × ".join(self.param_sorts)
        return f"{params} → {self.result}" if params else f"→ {self.result}"


@dataclass(frozen=True)
class Signature:
    """Sorts and function symbols, each keyed by name."""

    sorts: tuple[str, ...]
    functions: Mapping[str, FnSymbol]

    def get_fn(self, name: str) -> FnSymbol | None:
        return self.functions.get(name)

    @property
    def fn_names(self) -> frozenset[str]:
        return frozenset(self.functions.keys())
