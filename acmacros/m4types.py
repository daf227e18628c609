"""Types that describe m4 and autoconf macro calls and their signatures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class M4Type(Enum):
    """Kind of an argument to, or the expansion of, an m4 macro call."""

    LIT = "lit"
    """A literal; roughly a top-level word."""
    ARR = "arr"
    """Literals separated by whitespace."""
    ARGS = "args"
    """Macro arguments separated by commas."""
    PROG = "prog"
    """Program text that a check compiles."""
    CMDS = "cmds"
    """A list of shell commands or m4 macro calls."""
    DEF = "def"
    """The result of a macro definition."""
    BODY = "body"
    """The body of a macro definition."""


@dataclass(frozen=True)
class MacroSignature:
    """Argument kinds and expansion kind of a known macro.

    ``repeat`` is a half-open ``(start, end)`` range of argument positions
    that may be repeated any number of times, for macros taking varargs.
    """

    arg_types: tuple[M4Type, ...]
    returns: M4Type = M4Type.CMDS
    repeat: tuple[int, int] | None = None

    def __post_init__(self) -> None:
        arg_types = tuple(self.arg_types)
        for kind in (*arg_types, self.returns):
            if not isinstance(kind, M4Type):
                raise TypeError(f"expected an M4Type, got {kind!r}")
        object.__setattr__(self, "arg_types", arg_types)

        if self.repeat is not None:
            start, end = self.repeat
            if not 0 <= start < end <= len(arg_types):
                raise ValueError(
                    f"repeat range {self.repeat!r} does not fit "
                    f"{len(arg_types)} argument(s)"
                )
            object.__setattr__(self, "repeat", (start, end))


@dataclass
class Literal:
    """A raw literal argument."""

    value: str


@dataclass
class Array:
    """An argument holding an array of words."""

    words: list[Any] = field(default_factory=list)


@dataclass
class Program:
    """An argument holding program text."""

    value: str


@dataclass
class Command:
    """An argument holding a list of commands."""

    commands: list[Any] = field(default_factory=list)


@dataclass
class Words:
    """An argument holding a list of words."""

    words: list[Any] = field(default_factory=list)


@dataclass
class Unknown:
    """An argument of a user-defined macro whose kind is not known."""

    value: str


M4Argument = Union[Literal, Array, Program, Command, Words, Unknown]


@dataclass
class M4Macro:
    """A call of an m4 macro with its arguments."""

    name: str
    args: list[M4Argument] = field(default_factory=list)