"""wrapcount: a 32-bit wrap-around counter and the theory it satisfies."""

from .counter import (
    BITS,
    MAX,
    MODULUS,
    Counter,
    add,
    as_counter,
    decrement,
    increment,
    is_counter,
    new,
    reset,
    subtract,
    wrapping_add,
    wrapping_sub,
)
from .errors import ContractViolation, CounterRangeError, Err, Ok, Result
from .contracts import CONTRACTS, Contract, check_call, check_contract
from .signature import FnParam, FnSymbol, Signature
from .terms import Equation, FnApp, Formula, Literal, Term, UniversalQuant, Var
from .spec import Axiom, Spec
from .theorems import counter_signature, counter_spec
from .serialization import dumps, loads

__all__ = [
    # Counter
    "BITS", "MAX", "MODULUS", "Counter", "as_counter", "is_counter",
    "new", "increment", "decrement", "add", "subtract", "reset",
    "wrapping_add", "wrapping_sub",
    # Errors / Result
    "ContractViolation", "CounterRangeError", "Ok", "Err", "Result",
    # Contracts
    "CONTRACTS", "Contract", "check_call", "check_contract",
    # Theory
    "FnParam", "FnSymbol", "Signature",
    "Equation", "FnApp", "Formula", "Literal", "Term", "UniversalQuant", "Var",
    "Axiom", "Spec", "counter_signature", "counter_spec",
    # Serialization
    "dumps", "loads",
]
