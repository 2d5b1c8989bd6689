"""Province / state reference record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProvinceInfo:
    """A first-level subdivision of a country (state, province, territory)."""

    code: str
    en_name: str
    cn_name: str = ""
    local_name: str = ""
    aliases: tuple[str, ...] = ()
