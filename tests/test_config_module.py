"""Tests for :mod:`procenv.config`."""

from __future__ import annotations

import pytest

from procenv import config


def test_default_file_is_dotenv():
    """The default file name is ``.env``."""

    assert config.DEFAULT_FILE == ".env"
    assert config.EMPTY == ""


def test_find_env_file_prefers_working_directory(tmp_path, monkeypatch):
    """A file in the working directory wins over one in a parent."""

    (tmp_path / ".env").write_text("LEVEL=parent\n")
    child = tmp_path / "child"
    child.mkdir()
    (child / ".env").write_text("LEVEL=child\n")
    monkeypatch.chdir(child)

    found = config.find_env_file()

    assert found.resolve() == (child / ".env").resolve()


def test_find_env_file_walks_up_to_parent(tmp_path, monkeypatch):
    """The search continues into parent directories."""

    (tmp_path / "app.env").write_text("X=1\n")
    nested = tmp_path / "one" / "two"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    found = config.find_env_file("app.env")

    assert found.resolve() == (tmp_path / "app.env").resolve()


def test_find_env_file_raises_when_missing(tmp_path, monkeypatch):
    """An absent file raises :class:`FileNotFoundError`."""

    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError) as excinfo:
        config.find_env_file("procenv-definitely-absent.env")

    assert "procenv-definitely-absent.env" in str(excinfo.value)
