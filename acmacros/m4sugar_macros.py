"""Signatures of the predefined m4 builtins and m4sugar macros."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from acmacros.m4types import M4Type, MacroSignature

L = M4Type.LIT
A = M4Type.ARR
C = M4Type.CMDS
D = M4Type.DEF
G = M4Type.ARGS


def _sig(
    *arg_types: M4Type, returns: M4Type = C, repeat: tuple[int, int] | None = None
) -> MacroSignature:
    return MacroSignature(arg_types, returns, repeat)


_SINGLE_LITERAL_COMMANDS = (
    "m4_builtin",
    "m4_changecom",
    "m4_changequote",
    "m4_debugfile",
    "m4_debugmode",
    "m4_decr",
    "m4_divnum",
    "m4_errprint",
    "m4_esyscmd",
    "m4_eval",
    "m4_format",
    "m4_ifdef",
    "m4_incr",
    "m4_index",
    "m4_indir",
    "m4_len",
    "m4_syscmd",
    "m4_sysval",
    "m4_traceoff",
    "m4_traceon",
    "m4_divert",
    "m4_esyscmd_s",
    "m4_exit",
    "m4_include",
    "m4_sinclude",
    "m4_mkstemp",
    "m4_maketemp",
    "m4_wrap",
    "m4_wrap_lifo",
    "m4_assert",
    "m4_errprintn",
    "m4_fatal",
    "m4_divert_pop",
    "m4_divert_push",
    "m4_set_delete",
)

_SINGLE_LITERAL_LITERALS = (
    "m4_n",
    "m4_car",
    "m4_expand",
    "m4_ignore",
    "m4_chomp",
    "m4_chomp_all",
    "m4_escape",
    "m4_flatten",
    "m4_newline",
    "m4_normalize",
    "m4_re_escape",
    "m4_strip",
    "m4_tolower",
    "m4_toupper",
    "m4_sign",
    "m4_set_size",
)

_SIGNATURES = {
    # Definitions; their bodies are parsed on expansion
    "m4_define": _sig(L, L, returns=D),
    "m4_defun": _sig(L, L, returns=D),
    "define": _sig(L, L, returns=D),
    "m4_pushdef": _sig(L, L, returns=D),
    "m4_undefine": _sig(A, returns=D),
    # Redefined m4 builtins
    "m4_shift": _sig(G, returns=G),
    "m4_substr": _sig(L, L, L, returns=L),
    "m4_translit": _sig(L, L, L, returns=L),
    "__file__": _sig(returns=L),
    "__line__": _sig(returns=L),
    "__oline__": _sig(returns=L),
    "patsubst": _sig(L, L, L, returns=L),
    "regexp": _sig(L, L, L, returns=L),
    "m4_bpatsubst": _sig(L, L, L, returns=L),
    "m4_bregexp": _sig(L, L, L, returns=L),
    "m4_copy": _sig(L, L),
    "m4_copy_force": _sig(L, L),
    "m4_rename": _sig(L, L),
    "m4_rename_force": _sig(L, L),
    "m4_defn": _sig(A),
    "m4_dumpdef": _sig(A),
    "m4_dumpdefs": _sig(A),
    "m4_if": _sig(L, L, C, C, repeat=(0, 3)),
    "m4_popdef": _sig(A),
    "m4_undivert": _sig(A),
    # Diagnostics and diversions
    "m4_location": _sig(returns=L),
    "m4_warn": _sig(L, L, returns=L),
    "m4_cleandivert": _sig(A),
    "m4_divert_once": _sig(L, L),
    "m4_divert_text": _sig(L, L),
    "m4_init": _sig(),
    # Conditionals
    "m4_bmatch": _sig(L, L, L, L, returns=L, repeat=(1, 3)),
    "m4_bpatsubsts": _sig(L, L, L, L, returns=L, repeat=(1, 3)),
    "m4_case": _sig(L, L, L, L, returns=L, repeat=(1, 3)),
    "m4_cond": _sig(L, L, L, L, returns=L, repeat=(0, 3)),
    "m4_default": _sig(L, L, returns=L),
    "m4_default_quoted": _sig(L, L, returns=L),
    "m4_default_nblank": _sig(L, L, returns=L),
    "m4_default_nblank_quoted": _sig(L, L, returns=L),
    "m4_define_default": _sig(L, C),
    "m4_ifblank": _sig(L, C, C),
    "m4_ifnblank": _sig(L, C, C),
    "m4_ifndef": _sig(L, C, C),
    "m4_ifset": _sig(L, C, C),
    "m4_ifval": _sig(L, C, C),
    "m4_ifvaln": _sig(L, C, C),
    # Lists and looping
    "m4_argn": _sig(L, L, returns=L, repeat=(1, 2)),
    "m4_cdr": _sig(L, returns=L, repeat=(0, 1)),
    "m4_for": _sig(L, L, A, C),
    "m4_foreach": _sig(L, A, C),
    "m4_foreach_w": _sig(L, A, C),
    "m4_map": _sig(L, A),
    "m4_mapall": _sig(L, A),
    "m4_map_sep": _sig(L, L, A),
    "m4_mapall_sep": _sig(L, L, A),
    "m4_map_args": _sig(L, L),
    "m4_map_args_pair": _sig(L, L, L),
    "m4_map_args_sep": _sig(L, L, L, L),
    "m4_map_args_w": _sig(L, L, L, L),
    "m4_shiftn": _sig(L, L, repeat=(1, 2)),
    "m4_shift2": _sig(L, repeat=(0, 1)),
    "m4_shift3": _sig(L, repeat=(0, 1)),
    "m4_stack_foreach": _sig(L, C),
    "m4_stack_foreach_lifo": _sig(L, C),
    "m4_stack_foreach_sep": _sig(L, C, C, L),
    "m4_stack_foreach_sep_lifo": _sig(L, C, C, L),
    # Evaluation
    "m4_apply": _sig(L, A),
    "m4_curry": _sig(L, L, returns=L),
    "m4_do": _sig(L, returns=L, repeat=(0, 1)),
    "m4_dquote": _sig(L, returns=A, repeat=(0, 1)),
    "m4_dquote_elt": _sig(L, returns=A, repeat=(0, 1)),
    "m4_echo": _sig(L, returns=L, repeat=(0, 1)),
    "m4_make_list": _sig(L, returns=A),
    # Text processing
    "m4_append": _sig(L, L, L, returns=L),
    "m4_append_uniq": _sig(L, L, L, L, L, returns=L),
    "m4_append_uniq_w": _sig(L, A, returns=L),
    "m4_combine": _sig(L, A, L, L, returns=L),
    "m4_join": _sig(L, L, returns=L, repeat=(1, 2)),
    "m4_joinall": _sig(L, L, returns=L, repeat=(1, 2)),
    "m4_split": _sig(L, L, returns=A),
    "m4_text_box": _sig(L, L, returns=L),
    "m4_text_wrap": _sig(L, L, L, L, returns=L),
    # Number and version comparison
    "m4_cmp": _sig(L, L, returns=L),
    "m4_list_cmp": _sig(A, A, returns=L),
    "m4_max": _sig(L, returns=L, repeat=(0, 1)),
    "m4_min": _sig(L, returns=L, repeat=(0, 1)),
    "m4_version_compare": _sig(L, L, returns=L),
    "m4_version_prereq": _sig(L, C, C),
    # Sets
    "m4_set_add": _sig(L, L, C, C),
    "m4_set_contains": _sig(L, L, C, C),
    "m4_set_contents": _sig(L, L, returns=L),
    "m4_set_dump": _sig(L, L, returns=L),
    "m4_set_difference": _sig(L, L, returns=A),
    "m4_set_intersection": _sig(L, L, returns=A),
    "m4_set_union": _sig(L, L, returns=A),
    "m4_set_empty": _sig(L, C, C),
    "m4_set_foreach": _sig(L, L, C),
    "m4_set_list": _sig(L, returns=A),
    "m4_set_listc": _sig(L, returns=A),
    "m4_set_map": _sig(L, C),
    "m4_set_map_sep": _sig(L, C, C, L),
    # Other macros
    "ifelse": _sig(L, L, C, C, repeat=(0, 3)),
}

M4SUGAR_MACROS: Mapping[str, MacroSignature] = MappingProxyType(
    {
        **{name: _sig(L) for name in _SINGLE_LITERAL_COMMANDS},
        **{name: _sig(L, returns=L) for name in _SINGLE_LITERAL_LITERALS},
        **_SIGNATURES,
    }
)
"""Read-only table of macro name to signature."""