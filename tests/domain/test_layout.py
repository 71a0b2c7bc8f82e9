"""Tests for InstallationLayout suffix rules."""

from __future__ import annotations

import dataclasses
import tempfile
from pathlib import Path

import pytest

from kubeplug.domain.layout import InstallationLayout, default_base_path


class TestFromBase:
    def test_derived_directories(self, tmp_path: Path) -> None:
        layout = InstallationLayout.from_base(tmp_path, temp_dir=str(tmp_path / "t"))
        assert layout.base_path == tmp_path
        assert layout.index_path == tmp_path / "index"
        assert layout.install_path == tmp_path / "store"
        assert layout.bin_path == tmp_path / "bin"
        assert layout.download_path == tmp_path / "t" / "kubeplug-downloads"

    def test_default_temp_dir(self, tmp_path: Path) -> None:
        layout = InstallationLayout.from_base(tmp_path)
        assert layout.download_path == Path(tempfile.gettempdir()).absolute() / (
            "kubeplug-downloads"
        )

    def test_relative_base_is_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        layout = InstallationLayout.from_base("install")
        assert layout.base_path.is_absolute()
        assert layout.base_path.name == "install"

    def test_tilde_base_is_expanded(self) -> None:
        layout = InstallationLayout.from_base("~/kp")
        assert layout.base_path == Path.home() / "kp"
        assert layout.bin_path == Path.home() / "kp" / "bin"

    def test_symlinks_are_not_resolved(self, tmp_path: Path) -> None:
        layout = InstallationLayout.from_base(tmp_path / "alias")
        assert layout.base_path == tmp_path / "alias"

    def test_empty_base_rejected(self) -> None:
        with pytest.raises(ValueError):
            InstallationLayout.from_base("")

    def test_frozen(self, tmp_path: Path) -> None:
        layout = InstallationLayout.from_base(tmp_path)
        with pytest.raises(dataclasses.FrozenInstanceError):
            layout.base_path = Path("/elsewhere")  # type: ignore[misc]


def test_default_base_path_under_home(tmp_path: Path) -> None:
    assert default_base_path() == Path.home() / ".kubeplug"
    assert default_base_path().parent == tmp_path / "home"
