import pytest

from acmacros.autoconf_macros import AUTOCONF_MACROS
from acmacros.catalog import is_known
from acmacros.m4types import M4Type, MacroSignature

PREFIXES = ("AC_", "AH_", "AM_", "AS_", "AT_")


def test_ac_init_takes_five_literals():
    assert AUTOCONF_MACROS["AC_INIT"] == MacroSignature(
        (M4Type.LIT,) * 5, M4Type.CMDS
    )


def test_as_if_repeats_test_and_then_branch():
    expected = MacroSignature(
        (M4Type.CMDS, M4Type.CMDS, M4Type.CMDS), M4Type.CMDS, (0, 2)
    )
    assert AUTOCONF_MACROS["AS_IF"] == expected


def test_as_case_repeats_pattern_and_commands():
    expected = MacroSignature(
        (M4Type.LIT, M4Type.LIT, M4Type.CMDS, M4Type.CMDS), M4Type.CMDS, (1, 3)
    )
    assert AUTOCONF_MACROS["AS_CASE"] == expected


@pytest.mark.parametrize("name", ["AC_DEFINE", "AC_DEFINE_UNQUOTED"])
def test_definitions_return_def(name):
    assert AUTOCONF_MACROS[name] == MacroSignature((M4Type.LIT,) * 3, M4Type.DEF)


def test_program_generators_return_program():
    assert AUTOCONF_MACROS["AC_LANG_PROGRAM"] == MacroSignature(
        (M4Type.PROG, M4Type.PROG), M4Type.PROG
    )
    assert AUTOCONF_MACROS["AC_INCLUDES_DEFAULT"].returns is M4Type.PROG
    assert AUTOCONF_MACROS["AS_TR_CPP"].returns is M4Type.PROG


def test_commands_argument_of_config_commands_pre():
    assert AUTOCONF_MACROS["AH_CONFIG_COMMANDS_PRE"] == MacroSignature(
        (M4Type.CMDS,), M4Type.CMDS
    )


def test_check_decls_takes_array_then_program():
    assert AUTOCONF_MACROS["AC_CHECK_DECLS"] == MacroSignature(
        (M4Type.ARR, M4Type.CMDS, M4Type.CMDS, M4Type.PROG), M4Type.CMDS
    )


@pytest.mark.parametrize(
    "name", ["AC_OUTPUT", "AC_PROG_CC_C_O", "AT_CLEANUP", "AC_ARG_PROGRAM"]
)
def test_argument_free_macros_expand_to_commands(name):
    assert AUTOCONF_MACROS[name] == MacroSignature((), M4Type.CMDS)


def test_file_descriptor_macros_expand_to_literals():
    for name in ("AS_MESSAGE_FD", "AS_MESSAGE_LOG_FD", "AC_FD_CC"):
        assert AUTOCONF_MACROS[name] == MacroSignature((), M4Type.LIT)


def test_all_names_use_autoconf_prefixes():
    for name in AUTOCONF_MACROS:
        assert name.startswith(PREFIXES), name
        assert is_known(name), name
    assert is_known("m4_define") and "m4_define" not in AUTOCONF_MACROS
    assert is_known("ifelse") and "ifelse" not in AUTOCONF_MACROS


def test_all_entries_are_valid_signatures():
    for name, sig in AUTOCONF_MACROS.items():
        assert isinstance(sig, MacroSignature), name
        if sig.repeat is not None:
            start, end = sig.repeat
            assert 0 <= start < end <= len(sig.arg_types), name


def test_table_is_read_only():
    with pytest.raises(TypeError):
        AUTOCONF_MACROS["AC_NEW"] = MacroSignature(())