"""Reader-writer guard serializing access to an environment store.

Any number of readers may hold the lock together, while a writer holds it
alone. The lock prefers writers: as soon as a writer is waiting, newly
arriving readers queue behind it so a steady stream of lookups cannot starve
a pending write.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Multiple concurrent readers or one exclusive writer.

    The lock is not reentrant. A thread holding the read side must not try
    to take the write side (or vice versa) before releasing it.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    @property
    def reader_count(self) -> int:
        """Return the number of threads currently holding the read side."""

        with self._cond:
            return self._readers

    @property
    def is_writing(self) -> bool:
        """Return whether a writer currently holds the lock."""

        with self._cond:
            return self._writing

    @property
    def waiting_writers(self) -> int:
        """Return the number of writers blocked in :meth:`acquire_write`."""

        with self._cond:
            return self._waiting_writers

    def acquire_read(self) -> None:
        """Block until shared access is granted."""

        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Give up shared access."""

        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a reader holding the lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until exclusive access is granted."""

        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True

    def release_write(self) -> None:
        """Give up exclusive access and wake every waiter."""

        with self._cond:
            if not self._writing:
                raise RuntimeError("release_write() called without a writer holding the lock")
            self._writing = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the read side for the duration of the ``with`` block."""

        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the write side for the duration of the ``with`` block."""

        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        if self._writing:
            state = "writing"
        elif self._readers:
            state = f"{self._readers} reader(s)"
        else:
            state = "idle"
        return f"{self.__class__.__name__}({state})"


__all__ = ["ReadWriteLock"]
