"""FastAPI dependency injection."""

from __future__ import annotations

from svgattrs.attributes.resolver import NameTable, get_name_table
from svgattrs.config import Settings, settings


def get_settings() -> Settings:
    return settings


def get_table() -> NameTable:
    return get_name_table()
