"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from kubeplug.domain.build import DEFAULT_INDEX_URI


class IndexConfig(BaseModel):
    """[index] section."""

    model_config = {"frozen": True}

    uri: str = DEFAULT_INDEX_URI
