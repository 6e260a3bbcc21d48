"""Alias resolution for entity names extracted from multilingual text."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from leadernet.normalization.reference_data import ENTITY_NAME_ALIASES


def clean_surface_form(name: object) -> str:
    """Lowercase and trim a raw name; non-string values yield an empty string."""

    if not isinstance(name, str):
        return ""
    return name.lower().strip()


def _match_known_figure(name: str) -> str | None:
    """Substring rules for a few high-profile names the table cannot enumerate."""

    if "putin" in name:
        return "vladimir putin"
    if "trump" in name and not any(token in name for token in ("ivanka", "junior", "jr")):
        return "donald trump"
    if ("biden" in name or "bidden" in name) and "hunter" not in name:
        return "joe biden"
    if "zelensky" in name or "zelenskyy" in name:
        return "volodymyr zelensky"
    if "jinping" in name or ("xi" in name and len(name) < 15):
        return "xi jinping"
    return None


class AliasResolver:
    """Map surface forms onto canonical entity names.

    Resolution order is an exact lookup in the alias table, then the
    substring rules, then the cleaned input itself. Every canonical value in
    the table is also registered as its own alias, so resolving a canonical
    name is a no-op.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        source = ENTITY_NAME_ALIASES if aliases is None else aliases
        table = {clean_surface_form(key): clean_surface_form(value) for key, value in source.items()}
        for canonical in list(table.values()):
            table.setdefault(canonical, canonical)
        self._aliases = MappingProxyType(table)

    @property
    def aliases(self) -> Mapping[str, str]:
        """Mapping: Read-only alias table used for exact matches."""

        return self._aliases

    def resolve(self, name: object) -> str:
        """Return the canonical lowercase name for ``name``."""

        cleaned = clean_surface_form(name)
        if not cleaned:
            return ""
        known = self._aliases.get(cleaned)
        if known is not None:
            return known
        return _match_known_figure(cleaned) or cleaned


DEFAULT_RESOLVER = AliasResolver()


def normalize_entity_name(name: object) -> str:
    """Normalize an entity name with the default multilingual alias table.

    Args:
        name: Raw surface form in any script.

    Returns:
        Canonical lowercase name, or an empty string for empty input.
    """

    return DEFAULT_RESOLVER.resolve(name)


__all__ = ["AliasResolver", "DEFAULT_RESOLVER", "clean_surface_form", "normalize_entity_name"]
