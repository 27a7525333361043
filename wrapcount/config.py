"""Verification settings, read from the environment or a ``.env`` file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

from .errors import Err, Ok, Result

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class VerifyConfig:
    samples: int = 256
    """Random assignments tried per axiom and per contract, on top of the boundary values."""

    seed: int = 0
    """Seed for the private ``random.Random`` used for sampling."""

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Result["VerifyConfig", ValueError]:
        """Build a config from WRAPCOUNT_SAMPLES, WRAPCOUNT_SEED and WRAPCOUNT_LOG_LEVEL."""
        load_dotenv(find_dotenv(usecwd=True))
        config = cls()

        match os.getenv("WRAPCOUNT_SAMPLES"):
            case None:
                pass
            case str(raw):
                match _parse_count(raw, "WRAPCOUNT_SAMPLES"):
                    case Ok(samples):
                        config = replace(config, samples=samples)
                    case Err(e):
                        return Err(e)

        match os.getenv("WRAPCOUNT_SEED"):
            case None:
                pass
            case str(raw):
                try:
                    config = replace(config, seed=int(raw.strip()))
                except ValueError:
                    return Err(ValueError(f"WRAPCOUNT_SEED is not an integer: {raw!r}"))

        match os.getenv("WRAPCOUNT_LOG_LEVEL"):
            case None:
                pass
            case str(raw) if raw.strip().upper() in _LEVELS:
                config = replace(config, log_level=raw.strip().upper())
            case str(raw):
                return Err(ValueError(f"WRAPCOUNT_LOG_LEVEL is not a log level: {raw!r}"))

        return Ok(config)

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(levelname)s %(name)s: %(message)s",
        )


def _parse_count(raw: str, name: str) -> Result[int, ValueError]:
    try:
        value = int(raw.strip())
    except ValueError:
        return Err(ValueError(f"{name} is not an integer: {raw!r}"))
    if value < 0:
        return Err(ValueError(f"{name} must be non-negative, got {value}"))
    return Ok(value)
