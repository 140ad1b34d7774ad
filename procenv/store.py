"""Backing stores for environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Protocol

from .errors import EnvWriteError


class EnvStore(Protocol):
    """Protocol implemented by every environment backend.

    Stores perform no locking of their own; :class:`procenv.environment.Environment`
    wraps every call in its guard.
    """

    def lookup(self, key: str) -> str:
        """Return the value stored under ``key`` or ``""`` when it is absent."""

    def write(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, raising :class:`EnvWriteError` on failure."""


def check_pair(key: str, value: str) -> None:
    """Reject pairs the operating system refuses to store.

    POSIX environments cannot hold an empty name, a name containing ``=`` or
    any string with an embedded NUL character.
    """

    if not isinstance(key, str):
        raise EnvWriteError(repr(key), f"key must be str, not {type(key).__name__}")
    if not isinstance(value, str):
        raise EnvWriteError(key, f"value must be str, not {type(value).__name__}")
    if not key:
        raise EnvWriteError(key, "empty variable name")
    if "=" in key:
        raise EnvWriteError(key, "variable name contains '='")
    if "\x00" in key or "\x00" in value:
        raise EnvWriteError(key, "embedded null character")


class ProcessStore:
    """Store backed by the real process environment (:data:`os.environ`)."""

    def lookup(self, key: str) -> str:
        return os.environ.get(key, "")

    def write(self, key: str, value: str) -> None:
        check_pair(key, value)
        try:
            os.environ[key] = value
        except (ValueError, TypeError, OSError) as exc:
            raise EnvWriteError(key, str(exc)) from exc

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{self.__class__.__name__}()"


@dataclass
class MemoryStore:
    """Dictionary backed store used to exercise collaborators in isolation.

    Writes are validated exactly like :class:`ProcessStore` so that callers
    observe the same failures they would against the real environment.
    """

    variables: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, initial: Optional[Mapping[str, str]] = None) -> "MemoryStore":
        """Build a store pre-populated with a copy of ``initial``."""

        return cls(variables=dict(initial or {}))

    def lookup(self, key: str) -> str:
        return self.variables.get(key, "")

    def write(self, key: str, value: str) -> None:
        check_pair(key, value)
        self.variables[key] = value

    def items(self) -> Iterable[tuple[str, str]]:
        """Return a snapshot of the stored pairs."""

        return tuple(self.variables.items())

    def __contains__(self, key: object) -> bool:
        return key in self.variables

    def __len__(self) -> int:
        return len(self.variables)


__all__ = ["EnvStore", "MemoryStore", "ProcessStore", "check_pair"]
