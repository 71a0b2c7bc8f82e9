"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``KUBEPLUG_*`` prefix (``KUBEPLUG_ROOT`` moves the install)
  3. TOML file    — ``--config``, ``$KUBEPLUG_CONFIG``, or ``<root>/config.toml``
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from kubeplug.config.models import IndexConfig
from kubeplug.domain.layout import default_base_path

CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "KUBEPLUG_CONFIG"
ROOT_ENV_VAR = "KUBEPLUG_ROOT"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a kubeplug TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


def find_config(config_path: str | None = None, root: Path | None = None) -> Path | None:
    """Locate the config file, or None when there is none.

    An explicit *config_path* wins, then ``$KUBEPLUG_CONFIG``, then
    ``config.toml`` under the installation root.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        p = Path(explicit).expanduser()
        return p if p.is_file() else None

    if root is None:
        env_root = os.environ.get(ROOT_ENV_VAR)
        root = Path(env_root) if env_root else default_base_path()
    candidate = root.expanduser() / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


class KubeplugSettings(BaseSettings):
    """Unified settings for the kubeplug CLI.

    Merges CLI flags, environment variables, the TOML config file, and
    code-baked defaults into a single frozen object.  Stored on the
    :class:`~kubeplug.commands._context.AppContext` at the CLI root.

    Attributes:
        root: Installation base path, or None for ``~/.kubeplug``.
        config_path: The config file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "KUBEPLUG_",
        "env_nested_delimiter": "__",
    }

    root: Path | None = None
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    index: IndexConfig = Field(default_factory=IndexConfig)

    @field_validator("root")
    @classmethod
    def _expand_root(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> KubeplugSettings:
        """Construct settings from a CLI invocation.

        *root* is only passed through when given, so ``KUBEPLUG_ROOT`` and
        the config file can still supply it.
        """
        toml_path = find_config(config_path, root)
        if root is not None:
            cli_flags["root"] = root

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
