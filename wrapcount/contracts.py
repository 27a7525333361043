"""Pre/postcondition contracts for the counter operations.

Each operation carries a Hoare triple

    ⦃ requires(args) ⦄  op(args)  ⦃ result ⇒ ensures(result, args) ⦄

The precondition defaults to "always true": every operation is total over
its domain. Postconditions restate the wrap-around definition of each
operation in terms of ``wrapping_add`` / ``wrapping_sub``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from . import counter as ops
from .counter import is_counter, wrapping_add, wrapping_sub
from .errors import ContractViolation, Err, Ok, Result

logger = logging.getLogger(__name__)


def _always(*_args: int) -> bool:
    return True


@dataclass(frozen=True)
class Contract:
    """The contract of one operation.

    ``requires`` receives the arguments; ``ensures`` receives the result
    followed by the arguments. The ``*_text`` fields are the same predicates
    in the notation used by the rendered contract sheet.
    """

    operation: str
    params: tuple[str, ...]
    ensures: Callable[..., bool]
    ensures_text: str
    requires: Callable[..., bool] = _always
    requires_text: str = "True"

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def implementation(self) -> Callable[..., int]:
        fn: Callable[..., int] = getattr(ops, self.operation)
        return fn


_CONTRACTS = (
    Contract(
        "new",
        (),
        lambda result: result == 0,
        "result = 0",
    ),
    Contract(
        "increment",
        ("c",),
        lambda result, c: result == wrapping_add(c, 1),
        "result = wrapping_add(c, 1)",
    ),
    Contract(
        "decrement",
        ("c",),
        lambda result, c: result == wrapping_sub(c, 1),
        "result = wrapping_sub(c, 1)",
    ),
    Contract(
        "add",
        ("c", "n"),
        lambda result, c, n: result == wrapping_add(c, n),
        "result = wrapping_add(c, n)",
    ),
    Contract(
        "subtract",
        ("c", "n"),
        lambda result, c, n: result == wrapping_sub(c, n),
        "result = wrapping_sub(c, n)",
    ),
    Contract(
        "reset",
        ("c",),
        lambda result, c: result == 0,
        "result = 0",
    ),
)

CONTRACTS: Mapping[str, Contract] = MappingProxyType(
    {c.operation: c for c in _CONTRACTS}
)


def check_call(
    operation: str,
    *args: int,
    impl: Callable[..., int] | None = None,
) -> Result[int, ContractViolation]:
    """Call ``operation`` on ``args`` and check its contract.

    ``impl`` replaces the registered implementation, which lets a caller
    check an alternative implementation against the same contract.
    Raises KeyError for an unknown operation.
    """
    contract = CONTRACTS[operation]
    if len(args) != contract.arity:
        raise TypeError(
            f"{operation} takes {contract.arity} argument(s), got {len(args)}"
        )
    if not contract.requires(*args):
        return Err(ContractViolation(operation, args, None, "precondition"))

    fn = impl if impl is not None else contract.implementation
    try:
        result = fn(*args)
    except Exception as e:
        logger.debug("%s%r raised %r", operation, args, e)
        return Err(
            ContractViolation(operation, args, None, "raises", f"{type(e).__name__}: {e}")
        )

    if not is_counter(result):
        return Err(ContractViolation(operation, args, result, "range"))
    if not contract.ensures(result, *args):
        return Err(ContractViolation(operation, args, result, "postcondition"))
    return Ok(result)


def check_contract(
    operation: str,
    samples: Iterable[tuple[int, ...]],
    *,
    impl: Callable[..., int] | None = None,
) -> list[ContractViolation]:
    """Check ``operation`` against every argument tuple in ``samples``."""
    violations: list[ContractViolation] = []
    checked = 0
    for args in samples:
        checked += 1
        match check_call(operation, *args, impl=impl):
            case Ok(_):
                pass
            case Err(violation):
                logger.warning("%s", violation)
                violations.append(violation)
    logger.debug(
        "contract %r: %d call(s), %d violation(s)",
        operation,
        checked,
        len(violations),
    )
    return violations
