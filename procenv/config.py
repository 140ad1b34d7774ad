"""Configuration constants and ``.env`` discovery.

:data:`DEFAULT_FILE` is the name :func:`procenv.load` reads from the current
working directory. :func:`find_env_file` widens the search to parent
directories for callers that start from somewhere inside a project tree.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv


DEFAULT_FILE = ".env"
EMPTY = ""


def find_env_file(filename: str = DEFAULT_FILE) -> Path:
    """Return the nearest ``filename`` in the working directory or its parents.

    Parameters
    ----------
    filename:
        Name of the file to look for.

    Raises
    ------
    FileNotFoundError
        When no directory between the working directory and the filesystem
        root contains ``filename``.
    """

    found = find_dotenv(filename, usecwd=True)
    if not found:
        raise FileNotFoundError(f"{filename} not found in {os.getcwd()} or any parent directory")
    return Path(found)


__all__ = ["DEFAULT_FILE", "EMPTY", "find_env_file"]
