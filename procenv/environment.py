"""Guarded access to environment variables.

:class:`Environment` mediates every read and write to an :class:`EnvStore`
through a :class:`ReadWriteLock`. Reads share the lock; writes hold it
exclusively. An empty value and a missing key are treated the same way by
every lookup helper.

All environments built over the real process environment share
:data:`PROCESS_GUARD`, so their accesses serialize against one another.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional, Union

from .config import DEFAULT_FILE, EMPTY, find_env_file
from .errors import MissingEnvError
from .guard import ReadWriteLock
from .loader import iter_pairs
from .store import EnvStore, ProcessStore


LOGGER = logging.getLogger(__name__)

PROCESS_GUARD = ReadWriteLock()

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Environment:
    """Read, write and bulk-load variables held by ``store``."""

    store: EnvStore = field(default_factory=ProcessStore)
    guard: Optional[ReadWriteLock] = None

    def __post_init__(self) -> None:
        if self.guard is None:
            if isinstance(self.store, ProcessStore):
                self.guard = PROCESS_GUARD
            else:
                self.guard = ReadWriteLock()

    def get(self, key: str) -> str:
        """Return the value of ``key``, or ``""`` when it is unset or empty."""

        with self.guard.read_locked():
            return self.store.lookup(key)

    def must_get(self, key: str) -> str:
        """Return the value of ``key`` or raise :class:`MissingEnvError`.

        Use this for required settings that have no sensible default. The
        exception is left for the caller's entry point to handle.
        """

        value = self.get(key)
        if value == EMPTY:
            raise MissingEnvError(key)
        return value

    def get_or(self, key: str, alt: str) -> str:
        """Return the value of ``key`` or ``alt`` when it is unset or empty."""

        value = self.get(key)
        if value == EMPTY:
            return alt
        return value

    def is_set(self, key: str) -> bool:
        """Return whether ``key`` holds a non-empty value."""

        return self.get(key) != EMPTY

    def set(self, key: str, value: str) -> None:
        """Write ``value`` under ``key`` unconditionally.

        Raises :class:`procenv.errors.EnvWriteError` when the store rejects
        the pair.
        """

        with self.guard.write_locked():
            self.store.write(key, value)

    def unset(self, key: str) -> None:
        """Blank out ``key``.

        The variable is set to the empty string rather than removed, which
        every lookup here treats as unset.
        """

        self.set(key, EMPTY)

    def set_default(self, key: str, value: str) -> None:
        """Write ``value`` under ``key`` only when ``key`` is not already set.

        The check and the write take the guard separately. Two threads racing
        on the same unset key may both write; the later write wins and neither
        caller sees an error. Use :meth:`set_if_absent` when that matters.
        """

        if not self.is_set(key):
            self.set(key, value)

    def set_defaults(self, values: Mapping[str, str]) -> None:
        """Apply :meth:`set_default` to every pair in ``values``.

        Stops at the first failure. Pairs applied before it stay applied.
        """

        for key, value in values.items():
            self.set_default(key, value)

    def set_if_absent(self, key: str, value: str) -> bool:
        """Atomically write ``value`` when ``key`` is unset.

        Returns ``True`` if the value was written and ``False`` if ``key``
        already held a non-empty value.
        """

        with self.guard.write_locked():
            if self.store.lookup(key) != EMPTY:
                return False
            self.store.write(key, value)
            return True

    def load(self) -> int:
        """Load ``.env`` from the current working directory."""

        return self.load_file(DEFAULT_FILE)

    def load_file(self, path: PathLike) -> int:
        """Apply every ``KEY=VALUE`` line of ``path`` and return the pair count.

        Lines are split on the first ``=``; lines without one are skipped.
        Each pair goes through :meth:`set`, so the guard is taken once per
        pair. The first failing write aborts the load and propagates, leaving
        earlier pairs applied. Bytes that are not valid UTF-8 are carried
        through as surrogate escapes, so they reach the process environment
        unchanged. Errors opening or reading the file propagate unchanged.
        """

        applied = 0
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as handle:
            for key, value in iter_pairs(handle):
                try:
                    self.set(key, value)
                except Exception:
                    LOGGER.debug("Stopped loading %s at key %r", path, key)
                    raise
                applied += 1
        LOGGER.debug("Loaded %d variable(s) from %s", applied, path)
        return applied

    def load_nearest(self, filename: str = DEFAULT_FILE) -> int:
        """Load the nearest ``filename`` found from the working directory upwards."""

        return self.load_file(find_env_file(filename))


@lru_cache(maxsize=1)
def default_environment() -> Environment:
    """Return the process-wide environment backed by :data:`os.environ`."""

    return Environment(store=ProcessStore(), guard=PROCESS_GUARD)


__all__ = ["Environment", "PROCESS_GUARD", "default_environment"]
