"""Error types raised by :mod:`procenv`."""
from __future__ import annotations


class EnvError(Exception):
    """Base class for environment accessor failures."""


class MissingEnvError(EnvError):
    """A required environment variable is unset or empty."""

    def __init__(self, key: str) -> None:
        super().__init__(f"missing environment variable {key}")
        self.key = key


class EnvWriteError(EnvError, OSError):
    """Writing a variable into the environment failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot set environment variable {key!r}: {reason}")
        self.key = key
        self.reason = reason


__all__ = ["EnvError", "EnvWriteError", "MissingEnvError"]
