import pytest

from acmacros.autoconf_macros import AUTOCONF_MACROS
from acmacros.catalog import MACROS, is_known, lookup
from acmacros.m4sugar_macros import M4SUGAR_MACROS
from acmacros.m4types import M4Type


def test_lookup_autoconf_macro():
    assert lookup("AC_INIT") == AUTOCONF_MACROS["AC_INIT"]
    assert lookup("AC_INIT").arg_types == (M4Type.LIT,) * 5


def test_lookup_m4sugar_macro():
    assert lookup("m4_if") == M4SUGAR_MACROS["m4_if"]
    assert lookup("m4_if").repeat == (0, 3)


def test_lookup_as_if():
    sig = lookup("AS_IF")
    assert sig.arg_types == (M4Type.CMDS,) * 3
    assert sig.repeat == (0, 2)


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup("GMP_FAT_SUFFIX")


def test_is_known():
    assert is_known("AC_ARG_ENABLE") is True
    assert is_known("m4_define") is True
    assert is_known("TEST_MACRO") is False


def test_names_are_case_sensitive():
    assert is_known("ac_init") is False
    with pytest.raises(KeyError):
        lookup("M4_IF")


def test_tables_are_disjoint_and_merged():
    assert set(AUTOCONF_MACROS).isdisjoint(M4SUGAR_MACROS)
    assert len(MACROS) == len(AUTOCONF_MACROS) + len(M4SUGAR_MACROS)
    for name, sig in AUTOCONF_MACROS.items():
        assert lookup(name) == sig
    for name, sig in M4SUGAR_MACROS.items():
        assert lookup(name) == sig


def test_every_entry_is_known_and_looked_up():
    for name, sig in MACROS.items():
        assert is_known(name)
        assert lookup(name) == sig


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        MACROS["X"] = lookup("AC_INIT")
    assert not is_known("X")