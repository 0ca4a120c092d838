"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, whenctl.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel

Width = Literal["short", "full", "none"]


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    reference_date: date | None = None
    strict_numerals: bool = True
    include_today: bool = False
    prefixes: tuple[str, ...] = ("expires ", "on ", "in ", "the ")


class FormatConfig(BaseModel):
    """[format] section — how resolved dates are displayed.

    ``"none"`` leaves that part out; all three set to ``"none"`` renders the
    bare day of the month.
    """

    model_config = {"frozen": True}

    dow: Width | None = "short"
    month: Width | None = "short"
    year: Width | None = "full"
    ordinal: bool = False
