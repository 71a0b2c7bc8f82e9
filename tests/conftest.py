"""Shared pytest fixtures and test helpers for kubeplug tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real ``~/.kubeplug`` and ``KUBEPLUG_*`` variables out of tests."""
    for name in list(os.environ):
        if name.startswith("KUBEPLUG_"):
            monkeypatch.delenv(name)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


@pytest.fixture
def real_tmp(tmp_path: Path) -> Path:
    """``tmp_path`` with its own symlinks resolved (``/var`` -> ``/private/var`` on macOS)."""
    return Path(os.path.realpath(tmp_path))


@pytest.fixture
def install_root(real_tmp: Path) -> Path:
    """Installation tree with one versioned kubeplug binary.

    Layout: ``<root>/bin/v1.2.3/kubeplug`` plus empty ``index`` and ``store``.
    """
    root = real_tmp / "kubeplug-root"
    (root / "index").mkdir(parents=True)
    (root / "store").mkdir()
    versioned = root / "bin" / "v1.2.3"
    versioned.mkdir(parents=True)
    (versioned / "kubeplug").write_text("#!/bin/sh\n", encoding="utf-8")
    return root


@pytest.fixture
def make_link() -> Callable[[Path, str | Path], Path]:
    """Return a helper creating symlink *link* -> *target*.

    Skips the calling test where symlinks cannot be created.
    """

    def _make(link: Path, target: str | Path) -> Path:
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError) as exc:
            pytest.skip(f"symlinks not supported here: {exc}")
        return link

    return _make
