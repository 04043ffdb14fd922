"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    debug: bool
    options_var: str
