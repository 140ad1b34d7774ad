"""Line splitting for ``KEY=VALUE`` environment files.

The format is deliberately minimal: every line containing ``=`` yields one
pair, split on the first ``=`` only. Keys and values are kept verbatim, so
surrounding whitespace, quotes and ``#`` characters all survive untouched.
Lines without ``=`` are ignored.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

_TERMINATORS = ("\r\n", "\n", "\r")


def split_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for ``line`` or ``None`` when it holds no ``=``.

    A single trailing line terminator is removed before splitting.
    """

    for terminator in _TERMINATORS:
        if line.endswith(terminator):
            line = line[: -len(terminator)]
            break
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key, value


def iter_pairs(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Lazily yield the pairs found in ``lines``."""

    for line in lines:
        pair = split_line(line)
        if pair is not None:
            yield pair


__all__ = ["iter_pairs", "split_line"]
