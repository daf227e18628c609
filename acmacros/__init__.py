"""Catalog of autoconf, autotest, m4sh and m4sugar macros with the kinds of their arguments and expansions."""

__version__ = "0.1.0"
__all__ = ["m4types", "autoconf_macros", "m4sugar_macros", "catalog"]