"""procenv package initialization.

The module-level helpers operate on the process-wide
:func:`~procenv.environment.default_environment`. Code that wants isolation
(tests in particular) should build its own :class:`Environment` over a
:class:`MemoryStore` and pass it to collaborators instead.
"""

from __future__ import annotations

from typing import Mapping

from .config import DEFAULT_FILE, find_env_file
from .environment import PROCESS_GUARD, Environment, PathLike, default_environment
from .errors import EnvError, EnvWriteError, MissingEnvError
from .guard import ReadWriteLock
from .store import EnvStore, MemoryStore, ProcessStore


def get(key: str) -> str:
    return default_environment().get(key)


def must_get(key: str) -> str:
    return default_environment().must_get(key)


def get_or(key: str, alt: str) -> str:
    return default_environment().get_or(key, alt)


def is_set(key: str) -> bool:
    return default_environment().is_set(key)


def set(key: str, value: str) -> None:  # noqa: A001
    default_environment().set(key, value)


def unset(key: str) -> None:
    default_environment().unset(key)


def set_default(key: str, value: str) -> None:
    default_environment().set_default(key, value)


def set_defaults(values: Mapping[str, str]) -> None:
    default_environment().set_defaults(values)


def set_if_absent(key: str, value: str) -> bool:
    return default_environment().set_if_absent(key, value)


def load() -> int:
    return default_environment().load()


def load_file(path: PathLike) -> int:
    return default_environment().load_file(path)


def load_nearest(filename: str = DEFAULT_FILE) -> int:
    return default_environment().load_nearest(filename)


__all__ = [
    "DEFAULT_FILE",
    "EnvError",
    "EnvStore",
    "EnvWriteError",
    "Environment",
    "MemoryStore",
    "MissingEnvError",
    "PROCESS_GUARD",
    "ProcessStore",
    "ReadWriteLock",
    "default_environment",
    "find_env_file",
    "get",
    "get_or",
    "is_set",
    "load",
    "load_file",
    "load_nearest",
    "must_get",
    "set",
    "set_default",
    "set_defaults",
    "set_if_absent",
    "unset",
]
