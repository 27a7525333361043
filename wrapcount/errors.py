"""Result type and the exceptions raised around counter values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


type Result[T, E] = Ok[T] | Err[E]


class CounterRangeError(ValueError):
    """An integer outside [0, 2³² − 1] was passed where a Counter is required."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"{self.value} is outside the 32-bit unsigned range"


class ContractViolation(Exception):
    """An operation call did not satisfy its contract.

    ``clause`` is one of "precondition", "range", "postcondition" or
    "raises"; for "raises", ``error`` names the exception the call raised.
    """

    def __init__(
        self,
        operation: str,
        args: tuple[int, ...],
        result: int | None,
        clause: str,
        error: str | None = None,
    ):
        self.operation = operation
        self.call_args = args
        self.result = result
        self.clause = clause
        self.error = error
        super().__init__(operation, args, result, clause, error)

    def __str__(self) -> str:
        rendered = ", ".join(str(a) for a in self.call_args)
        if self.clause == "raises":
            return f"{self.operation}({rendered}) raised {self.error}"
        return f"{self.operation}({rendered}) = {self.result} violates its {self.clause}"
