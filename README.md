# acmacros

`acmacros` describes the macros a `configure.ac` file may call: Autoconf
checks, Autoheader and Automake directives, Autotest directives, m4sh shell
constructs, m4 builtins and the m4sugar library. For each known macro it
records what kind of text each argument holds and what kind of text the call
expands to. A tool that reads `configure.ac` can use this to decide how to
treat each argument: as a literal, as a whitespace-separated list, as a
program fragment, or as shell commands.

## Installing

```
pip install acmacros
```

For running the tests:

```
pip install "acmacros[test]"
pytest
```

## Argument and expansion kinds

`acmacros.m4types.M4Type` is an enum of the kinds:

- `LIT`: a plain literal
- `ARR`: literals separated by whitespace
- `ARGS`: macro arguments separated by commas
- `PROG`: program text used when a check compiles something
- `CMDS`: shell commands or further macro calls
- `DEF`: the result of a macro definition
- `BODY`: the body of a macro definition

## Looking up a macro

```python
from acmacros.catalog import is_known, lookup
from acmacros.m4types import M4Type

sig = lookup("AC_CHECK_HEADERS")
assert sig.arg_types == (M4Type.ARR, M4Type.CMDS, M4Type.CMDS)
assert sig.returns is M4Type.CMDS
assert sig.repeat is None

assert lookup("m4_if").repeat == (0, 3)

assert is_known("m4_define")
assert not is_known("MY_OWN_MACRO")
```

`lookup` returns a frozen `MacroSignature` and raises `KeyError` for a name
that is not predefined. A signature has three fields:

- `arg_types`: a tuple with the kind of each argument, in order
- `returns`: the kind of the expansion (`M4Type.CMDS` unless stated)
- `repeat`: for macros taking any number of arguments, such as `m4_if`,
  `AS_IF` and `AS_CASE`, a half-open `(start, end)` range of argument
  positions that repeats; `None` otherwise

Building a `MacroSignature` checks its values: every kind must be an
`M4Type` (else `TypeError`), and a `repeat` range must satisfy
`0 <= start < end <= len(arg_types)` (else `ValueError`).

## The tables

The signatures are held in read-only mappings from macro name to
`MacroSignature`:

- `acmacros.autoconf_macros.AUTOCONF_MACROS`: the `AC_`, `AH_`, `AM_`, `AS_`
  and `AT_` macros
- `acmacros.m4sugar_macros.M4SUGAR_MACROS`: m4 builtins, the `m4_` macros of
  m4sugar, and `define`, `ifelse`, `patsubst`, `regexp`, `__file__`,
  `__line__` and `__oline__`
- `acmacros.catalog.MACROS`: both tables together, which `lookup` and
  `is_known` consult

## Describing a parsed call

`acmacros.m4types` also defines the values a parser can build for a macro
call. `M4Macro` holds the macro name and a list of arguments. Each argument
is one of:

- `Literal(value)`: a raw literal
- `Array(words)`: an array of words
- `Program(value)`: program text
- `Command(commands)`: a list of commands
- `Words(words)`: a list of words
- `Unknown(value)`: an argument of a macro the catalog does not describe

`M4Argument` is the union of these six classes.

## What this package does not do

It does not read, parse or expand `configure.ac` files, and it has no
command-line tool. The word, command and array values held in `Array`,
`Command` and `Words` are whatever the caller puts there; the package defines
no shell syntax tree of its own.