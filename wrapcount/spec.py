"""Specification: a signature plus labelled axioms.

A specification SP = (Σ, Φ) holds for an implementation when every axiom
in Φ evaluates to true under every assignment of its variables.
"""

from __future__ import annotations

from dataclasses import dataclass

from .signature import Signature
from .terms import Formula


@dataclass(frozen=True)
class Axiom:
    """A named axiom."""

    label: str
    formula: Formula


@dataclass(frozen=True)
class Spec:
    """A named specification.

    Example:
        spec WrappingCounter =
            sort U32
            op add : U32 × U32 → U32
            ∀ c : U32
            • add(c, 0) = c                %(add_zero)%
    """

    name: str
    signature: Signature
    axioms: tuple[Axiom, ...]

    def get_axiom(self, label: str) -> Axiom | None:
        for ax in self.axioms:
            if ax.label == label:
                return ax
        return None
