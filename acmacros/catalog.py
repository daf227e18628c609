"""Lookup of every predefined macro signature by name."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from acmacros.autoconf_macros import AUTOCONF_MACROS
from acmacros.m4sugar_macros import M4SUGAR_MACROS
from acmacros.m4types import MacroSignature

MACROS: Mapping[str, MacroSignature] = MappingProxyType(
    {**AUTOCONF_MACROS, **M4SUGAR_MACROS}
)
"""Read-only table of every predefined macro name to its signature."""


def lookup(name: str) -> MacroSignature:
    """Return the signature of the predefined macro ``name``.

    Raises KeyError if the macro is not predefined.
    """
    try:
        return MACROS[name]
    except KeyError:
        raise KeyError(f"unknown macro: {name!r}") from None


def is_known(name: str) -> bool:
    """Tell whether ``name`` is a predefined macro."""
    return name in MACROS