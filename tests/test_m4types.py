import pytest

from acmacros.m4types import (
    Array,
    Command,
    Literal,
    M4Macro,
    M4Type,
    MacroSignature,
    Program,
    Unknown,
    Words,
)


def test_signature_coerces_argument_list_to_tuple():
    sig = MacroSignature([M4Type.LIT, M4Type.ARR], M4Type.CMDS)
    assert sig.arg_types == (M4Type.LIT, M4Type.ARR)
    assert isinstance(sig.arg_types, tuple)


def test_signature_defaults():
    sig = MacroSignature(())
    assert sig.returns is M4Type.CMDS
    assert sig.repeat is None


def test_signature_equality_and_hash():
    a = MacroSignature([M4Type.LIT], M4Type.LIT)
    b = MacroSignature((M4Type.LIT,), M4Type.LIT)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1


def test_signature_accepts_repeat_reaching_the_end():
    sig = MacroSignature(
        (M4Type.LIT, M4Type.LIT, M4Type.CMDS, M4Type.CMDS), M4Type.CMDS, (0, 3)
    )
    assert sig.repeat == (0, 3)
    sig = MacroSignature((M4Type.LIT, M4Type.LIT), M4Type.LIT, [1, 2])
    assert sig.repeat == (1, 2)


@pytest.mark.parametrize("repeat", [(0, 0), (2, 1), (-1, 1), (0, 3)])
def test_signature_rejects_bad_repeat(repeat):
    with pytest.raises(ValueError):
        MacroSignature((M4Type.LIT, M4Type.LIT), M4Type.LIT, repeat)


def test_signature_rejects_non_type_argument():
    with pytest.raises(TypeError):
        MacroSignature(("lit",), M4Type.LIT)


def test_signature_rejects_non_type_return():
    with pytest.raises(TypeError):
        MacroSignature((M4Type.LIT,), "cmds")


def test_signature_is_immutable():
    sig = MacroSignature((M4Type.LIT,))
    with pytest.raises(AttributeError):
        sig.returns = M4Type.LIT
    assert sig.returns is M4Type.CMDS
    assert sig == MacroSignature((M4Type.LIT,), M4Type.CMDS)


def test_m4type_round_trips_through_value():
    for kind in M4Type:
        assert M4Type(kind.value) is kind
    assert len(set(M4Type)) == 7


def test_arguments_of_different_kinds_are_not_equal():
    assert Literal("x") == Literal("x")
    assert Literal("x") != Unknown("x")
    assert Literal("x") != Program("x")
    assert Array(["a"]) != Words(["a"])


def test_argument_default_lists_are_independent():
    first = Command()
    second = Command()
    first.commands.append("echo hi")
    assert second.commands == []
    assert Array().words == []


def test_macro_equality_depends_on_name_and_args():
    call = M4Macro("TEST_MACRO", [Literal("")])
    assert call == M4Macro("TEST_MACRO", [Literal("")])
    assert call != M4Macro("TEST_MACRO", [Literal("x")])
    assert call != M4Macro("OTHER", [Literal("")])
    assert M4Macro("AC_OUTPUT").args == []