"""Signatures of the predefined Autoconf, Autoheader, Automake, M4sh and Autotest macros."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from acmacros.m4types import M4Type, MacroSignature

L = M4Type.LIT
A = M4Type.ARR
P = M4Type.PROG
C = M4Type.CMDS
D = M4Type.DEF


def _sig(
    *arg_types: M4Type, returns: M4Type = C, repeat: tuple[int, int] | None = None
) -> MacroSignature:
    return MacroSignature(arg_types, returns, repeat)


_NO_ARGUMENT_COMMANDS = (
    # Outputting files
    "AC_OUTPUT",
    "AC_PROG_MAKE_SET",
    # Default includes
    "AC_CHECK_INCLUDES_DEFAULT",
    # Particular program checks
    "AC_PROG_AR",
    "AC_PROG_AWK",
    "AC_PROG_GREP",
    "AC_PROG_EGREP",
    "AC_PROG_FGREP",
    "AC_PROG_INSTALL",
    "AC_PROG_MKDIR_P",
    "AC_PROG_LEX",
    "AC_PROG_LN_S",
    "AC_PROG_RANLIB",
    "AC_PROG_SED",
    "AC_PROG_YACC",
    # Particular function checks
    "AC_FUNC_ALLOCA",
    "AC_FUNC_CHOWN",
    "AC_FUNC_CLOSEDIR_VOID",
    "AC_FUNC_ERROR_AT_LINE",
    "AC_FUNC_FNMATCH",
    "AC_FUNC_FNMATCH_GNU",
    "AC_FUNC_FORK",
    "AC_FUNC_FSEEKO",
    "AC_FUNC_GETGROUPS",
    "AC_FUNC_GETLOADAVG",
    "AC_FUNC_GETMNTENT",
    "AC_FUNC_GETPGRP",
    "AC_FUNC_LSTAT_FOLLOWS_SLASHED_SYMLINK",
    "AC_FUNC_MALLOC",
    "AC_FUNC_MBRTOWC",
    "AC_FUNC_MEMCMP",
    "AC_FUNC_MKTIME",
    "AC_FUNC_MMAP",
    "AC_FUNC_OBSTACK",
    "AC_FUNC_REALLOC",
    "AC_FUNC_SELECT_ARGTYPES",
    "AC_FUNC_SETPGRP",
    "AC_FUNC_STAT",
    "AC_FUNC_LSTAT",
    "AC_FUNC_STRCOLL",
    "AC_FUNC_STRERROR_R",
    "AC_FUNC_STRFTIME",
    "AC_FUNC_STRTOD",
    "AC_FUNC_STRTOLD",
    "AC_FUNC_STRNLEN",
    "AC_FUNC_UTIME_NULL",
    "AC_FUNC_VPRINTF",
    "AC_REPLACE_FNMATCH",
    # Particular header checks
    "AC_CHECK_HEADER_STDBOOL",
    "AC_HEADER_ASSERT",
    "AC_HEADER_DIRENT",
    "AC_HEADER_MAJOR",
    "AC_HEADER_RESOLV",
    "AC_HEADER_STAT",
    "AC_HEADER_STDBOOL",
    "AC_HEADER_STDC",
    "AC_HEADER_SYS_WAIT",
    "AC_HEADER_TIOCGWINSZ",
    # Particular structure checks
    "AC_STRUCT_DIRENT_D_INO",
    "AC_STRUCT_DIRENT_D_TYPE",
    "AC_STRUCT_ST_BLOCKS",
    "AC_STRUCT_TM",
    "AC_STRUCT_TIMEZONE",
    # Particular type checks
    "AC_TYPE_GETGROUPS",
    "AC_TYPE_INT8_T",
    "AC_TYPE_INT16_T",
    "AC_TYPE_INT32_T",
    "AC_TYPE_INT64_T",
    "AC_TYPE_INTMAX_T",
    "AC_TYPE_INTPTR_T",
    "AC_TYPE_LONG_DOUBLE",
    "AC_TYPE_LONG_DOUBLE_WIDER",
    "AC_TYPE_LONG_LONG_INT",
    "AC_TYPE_MBSTATE_T",
    "AC_TYPE_MODE_T",
    "AC_TYPE_OFF_T",
    "AC_TYPE_PID_T",
    "AC_TYPE_SIZE_T",
    "AC_TYPE_SSIZE_T",
    "AC_TYPE_UID_T",
    "AC_TYPE_UINT8_T",
    "AC_TYPE_UINT16_T",
    "AC_TYPE_UINT32_T",
    "AC_TYPE_UINT64_T",
    "AC_TYPE_UINTMAX_T",
    "AC_TYPE_UINTPTR_T",
    "AC_TYPE_UNSIGNED_LONG_LONG_T",
    # Generic compiler characteristics
    "AC_LANG_WERROR",
    "AC_OPENMP",
    "AC_PROG_CC_C_O",
    "AC_PROG_CPP",
    "AC_PROG_CPP_WERROR",
    "AC_C_BACKSLASH_A",
    "AC_C_BIGENDIAN",
    "AC_C_CONST",
    "AC_C__GENERIC",
    "AC_C_RESTRICT",
    "AC_C_VOLATILE",
    "AC_C_INLINE",
    "AC_C_CHAR_UNSIGNED",
    "AC_C_STRINGIZE",
    "AC_C_FLEXIBLE_ARRAY_MEMBER",
    "AC_C_VARARRAYS",
    "AC_C_TYPEOF",
    "AC_C_PROTOTYPES",
    # C++ and Objective C compilers
    "AC_PROG_CXXCPP",
    "AC_PROG_CXX_C_O",
    "AC_PROG_OBJCPP",
    "AC_PROG_OBJCXXCPP",
    # Fortran compilers
    "AC_PROG_F77_C_O",
    "AC_PROG_FC_C_O",
    "AC_F77_LIBRARY_LDFLAGS",
    "AC_FC_LIBRARY_LDFLAGS",
    "AC_F77_MAIN",
    "AC_FC_MAIN",
    "AC_F77_WRAPPERS",
    "AC_FC_WRAPPERS",
    "AC_FC_MODULE_EXTENSION",
    # System services
    "AC_PATH_X",
    "AC_PATH_XTRA",
    "AC_SYS_INTERPRETER",
    "AC_SYS_LARGEFILE",
    "AC_SYS_LONG_FILE_NAMES",
    "AC_SYS_POSIX_TERMIOS",
    "AC_SYS_YEAR2038",
    "AC_SYS_YEAR2038_RECOMMENDED",
    # C and POSIX variants
    "AC_USE_SYSTEM_EXTENSIONS",
    # Erlang libraries
    "AC_ERLANG_SUBST_ERTS_VER",
    "AC_ERLANG_SUBST_ROOT_DIR",
    "AC_ERLANG_SUBST_LIB_DIR",
    "AC_ERLANG_SUBST_INSTALL_LIB_DIR",
    # Language choice and generating sources
    "AC_REQUIRE_CPP",
    "AC_LANG_DEFINES_PROVIDED",
    # Caching results
    "AC_CACHE_LOAD",
    "AC_CACHE_SAVE",
    # M4sh initialization
    "AS_BOURNE_COMPATIBLE",
    "AS_INIT",
    "AS_LINENO_PREPARE",
    "AS_ME_PREPARE",
    "AS_SHELL_SANITIZE",
    # Canonical system type and site configuration
    "AC_CANONICAL_BUILD",
    "AC_CANONICAL_HOST",
    "AC_CANONICAL_TARGET",
    "AC_PRESERVE_HELP_ORDER",
    "AC_DISABLE_OPTION_CHECKING",
    "AC_ARG_PROGRAM",
    # Autotest
    "AT_COLOR_TESTS",
    "AT_CLEANUP",
)

_SIGNATURES = {
    # Initializing configure
    "AC_INIT": _sig(L, L, L, L, L),
    "AC_PREREQ": _sig(L),
    "AC_AUTOCONF_VERSION": _sig(returns=L),
    "AC_COPYRIGHT": _sig(L),
    "AC_REVISION": _sig(L),
    # Configure input
    "AC_CONFIG_SRCDIR": _sig(L),
    "AC_CONFIG_MACRO_DIR": _sig(L),
    "AC_CONFIG_MACRO_DIRS": _sig(A),
    "AC_CONFIG_AUX_DIR": _sig(L),
    "AC_CONFIG_AUX_FILE": _sig(L),
    # Configuration files and headers
    "AC_CONFIG_FILES": _sig(A, C, C),
    "AC_CONFIG_HEADERS": _sig(A, C, C),
    "AH_HEADER": _sig(returns=L),
    "AH_TEMPLATE": _sig(L, L),
    "AH_VERBATIM": _sig(L, L),
    "AH_TOP": _sig(L),
    "AH_BOTTOM": _sig(L),
    # Configuration commands and links
    "AC_CONFIG_COMMANDS": _sig(A, C, C),
    "AH_CONFIG_COMMANDS_PRE": _sig(C),
    "AH_CONFIG_COMMANDS_POST": _sig(C),
    "AC_CONFIG_LINKS": _sig(A, C, C),
    "AM_CONFIG_SUBDIRS": _sig(A),
    "AM_PREFIX_DEFAULT": _sig(L),
    "AM_PREFIX_PROGRAM": _sig(L),
    "AM_CONDITIONAL": _sig(L, C),
    # Default includes
    "AC_INCLUDES_DEFAULT": _sig(P, returns=P),
    # Generic program and file checks
    "AC_CHECK_PROG": _sig(L, L, L, L, L, L),
    "AC_CHECK_PROGS": _sig(L, A, L, L, L, L),
    "AC_CHECK_TARGET_TOOL": _sig(L, L, L, L),
    "AC_CHECK_TOOL": _sig(L, L, L, L),
    "AC_CHECK_TARGET_TOOLS": _sig(L, A, L, L),
    "AC_CHECK_TOOLS": _sig(L, A, L, L),
    "AC_PATH_PROG": _sig(L, L, L, L),
    "AC_PATH_PROGS": _sig(L, A, L, L),
    "AC_PATH_PROGS_FEATURE_CHECK": _sig(L, A, C, C, L),
    "AC_PATH_TARGET_TOOL": _sig(L, L, L, L),
    "AC_PATH_TOOL": _sig(L, L, L, L),
    "AC_CHECK_FILE": _sig(L, C, C),
    "AC_CHECK_FILES": _sig(A, C, C),
    # Library files
    "AC_CHECK_LIB": _sig(L, L, C, C, A),
    "AC_SEARCH_LIBS": _sig(L, A, C, C, A),
    # Generic function checks
    "AC_CHECK_FUNC": _sig(L, C, C),
    "AC_CHECK_FUNCS": _sig(A, C, C),
    "AC_CHECK_FUNCS_ONCE": _sig(A),
    "AC_LIBOBJ": _sig(L),
    "AC_LIBSOURCE": _sig(L),
    "AC_LIBSOURCES": _sig(A),
    "AC_CONFIG_LIBOBJ_DIR": _sig(L),
    "AC_REPLACE_FUNCS": _sig(A),
    # Generic header, declaration, structure and type checks
    "AC_CHECK_HEADER": _sig(L, C, C),
    "AC_CHECK_HEADERS": _sig(A, C, C),
    "AC_CHECK_HEADERS_ONCE": _sig(A),
    "AC_CHECK_DECL": _sig(L, C, C, P),
    "AC_CHECK_DECLS": _sig(A, C, C, P),
    "AC_CHECK_DECLS_ONCE": _sig(A),
    "AC_STRUCT_MEMBER": _sig(L, C, C, C),
    "AC_STRUCT_MEMBERS": _sig(A, C, C, C),
    "AC_CHECK_TYPE": _sig(L, C, C, P),
    "AC_CHECK_TYPES": _sig(A, C, C, P),
    # Compiler characteristics
    "AC_CHECK_SIZEOF": _sig(L, L, P),
    "AC_CHECK_ALIGNOF": _sig(L, P),
    "AC_COMPUTE_INT": _sig(L, L, C),
    "AC_PROG_CC": _sig(A),
    "AC_PROG_CXX": _sig(A),
    "AC_PROG_OBJC": _sig(A),
    "AC_PROG_OBJCXX": _sig(A),
    # Erlang
    "AC_ERLANG_PATH_ERLC": _sig(L, L),
    "AC_ERLANG_NEED_ERLC": _sig(L),
    "AC_ERLANG_PATH_ERL": _sig(L, L),
    "AC_ERLANG_NEED_ERL": _sig(L),
    "AC_ERLANG_CHECK_LIB": _sig(L, C, C),
    "AC_ERLANG_SUBST_INSTALL_LIB_SUBDIR": _sig(L, L),
    # Fortran
    "AC_PROG_F77": _sig(A),
    "AC_PROG_FC": _sig(A, L),
    "AC_F77_DUMMY_MAIN": _sig(C, C, C),
    "AC_FC_DUMMY_MAIN": _sig(C, C, C),
    "AC_F77_FUNC": _sig(L, L),
    "AC_FC_FUNC": _sig(L, L),
    "AC_FC_SRCEXT": _sig(L, C, C),
    "AC_FC_PP_SRCEXT": _sig(L, C, C),
    "AC_FC_PP_DEFINE": _sig(C, C),
    "AC_FC_FIXEDFORM": _sig(C, C),
    "AC_FC_LINE_LENGTH": _sig(L, C, C),
    "AC_FC_CHECK_LENGTH": _sig(C, C),
    "AC_F77_IMPLICIT_NONE": _sig(C, C),
    "AC_FC_IMPLICIT_NONE": _sig(C, C),
    "AC_FC_MODULE_FLAG": _sig(C, C),
    "AC_FC_MODULE_OUTPUT_FLAG": _sig(C, C),
    "AC_F77_CRAY_POINTERS": _sig(C, C),
    "AC_FC_CRAY_POINTERS": _sig(C, C),
    # Go
    "AC_PROG_GO": _sig(A),
    # Language choice
    "AC_LANG": _sig(L),
    "AC_LANG_PUSH": _sig(L),
    "AC_LANG_POP": _sig(L),
    "AC_LANG_ASSERT": _sig(L),
    # Generating sources
    "AC_LANG_CONFTEST": _sig(L),
    "AC_LANG_SOURCE": _sig(P, returns=P),
    "AC_LANG_PROGRAM": _sig(P, P, returns=P),
    "AC_LANG_CALL": _sig(P, P, returns=P),
    "AC_LANG_FUNC_LINK_TRY": _sig(P, returns=P),
    # Running the preprocessor, compiler, linker and program
    "AC_PREPROC_IFELSE": _sig(P, C, C),
    "AC_EGREP_HEADER": _sig(L, P, C, C),
    "AC_EGREP_CPP": _sig(L, P, C, C),
    "AC_COMPILE_IFELSE": _sig(P, C, C),
    "AC_LINK_IFELSE": _sig(P, C, C),
    "AC_RUN_IFELSE": _sig(P, C, C, C),
    # Defining C preprocessor symbols
    "AC_DEFINE": _sig(L, L, L, returns=D),
    "AC_DEFINE_UNQUOTED": _sig(L, L, L, returns=D),
    # Output variables
    "AC_SUBST": _sig(L, L),
    "AC_SUBST_FILE": _sig(L),
    "AC_ARG_VAR": _sig(L),
    # Caching results
    "AC_CACHE_VAL": _sig(L, C),
    "AC_CACHE_CHECK": _sig(L, L, C),
    # Printing messages
    "AC_MSG_CHECKING": _sig(L),
    "AC_MSG_RESULT": _sig(L),
    "AC_MSG_NOTICE": _sig(L),
    "AC_MSG_ERROR": _sig(L, L),
    "AC_MSG_FAILURE": _sig(L, L),
    "AC_MSG_WARN": _sig(L),
    # Common shell constructs
    "AS_BOX": _sig(L, L),
    "AS_CASE": _sig(L, L, C, C, repeat=(1, 3)),
    "AS_DIRNAME": _sig(L, returns=L),
    "AS_ECHO": _sig(L),
    "AS_ECHO_N": _sig(L),
    "AS_ESCAPE": _sig(L, L, returns=L),
    "AS_EXECUTABLE_P": _sig(L),
    "AS_EXIT": _sig(L),
    "AS_IF": _sig(C, C, C, repeat=(0, 2)),
    "AS_MKDIR_P": _sig(L),
    "AS_SET_STATUS": _sig(L),
    "AS_TR_CPP": _sig(L, returns=P),
    "AS_TR_SH": _sig(L),
    "AS_SET_CATFILE": _sig(L, L, L),
    "AS_UNSET": _sig(L),
    "AS_VERSION_COMPARE": _sig(L, L, C, C, C),
    # Indirect variable names
    "AS_LITERAL_IF": _sig(L, C, C, C),
    "AS_LITERAL_WORD_IF": _sig(L, C, C, C),
    "AS_VAR_APPEND": _sig(L, L),
    "AS_VAR_ARITH": _sig(L, L),
    "AS_VAR_COPY": _sig(L, L),
    "AS_VAR_IF": _sig(L, L, C, C),
    "AS_VAR_PUSHDEF": _sig(L, L),
    "AS_VAR_POPDEF": _sig(L),
    "AS_VAR_SET": _sig(L, L),
    "AS_VAR_SET_IF": _sig(L, C, C),
    "AS_VAR_TEST_SET": _sig(L),
    # M4sh initialization
    "AS_INIT_GENERATED": _sig(L, L),
    "AS_TMPDIR": _sig(L, L),
    # File descriptors
    "AS_MESSAGE_FD": _sig(returns=L),
    "AS_MESSAGE_LOG_FD": _sig(returns=L),
    "AC_FD_CC": _sig(returns=L),
    "AS_ORIGINAL_STDIN_FD": _sig(returns=L),
    # Macro definitions; their bodies are parsed on expansion
    "AC_DEFUN": _sig(L, L),
    "AC_REQUIRE": _sig(L),
    "AC_BEFORE": _sig(L, L),
    "AC_DEFUN_ONCE": _sig(L, L),
    # Site configuration
    "AC_ARG_WITH": _sig(L, L, C, C),
    "AC_ARG_ENABLE": _sig(L, L, C, C),
    "AS_HELP_STRING": _sig(L, L, returns=L),
    # Autotest
    "AT_INIT": _sig(L),
    "AT_COPYRIGHT": _sig(L),
    "AT_ARG_OPTION": _sig(A, L, C, C),
    "AT_ARG_OPTION_ARG": _sig(A, L, C, C),
    "AT_TESTED": _sig(A),
    "AT_PREPARE_TESTS": _sig(C),
    "AT_PREPARE_EACH_TEST": _sig(C),
    "AT_TEST_HELPER_FN": _sig(L, L, L, C),
    "AT_BANNER": _sig(L),
    "AT_SETUP": _sig(L),
    "AT_KEYWORDS": _sig(A),
    "AT_CAPTURE_FILE": _sig(L),
    "AT_FAIL_IF": _sig(C),
    "AT_SKIP_IF": _sig(C),
    "AT_XFAIL_IF": _sig(C),
    "AT_DATA": _sig(L, L),
    "AT_DATA_UNQUOTED": _sig(L, L),
    "AT_CHECK": _sig(C, L, L, L, C, C),
    "AT_CHECK_UNQUOTED": _sig(C, L, L, L, C, C),
    "AT_CHECK_EUNIT": _sig(L, L, L, C, C),
    "AC_CONFIG_TESTDIR": _sig(L, L),
}

AUTOCONF_MACROS: Mapping[str, MacroSignature] = MappingProxyType(
    {
        **{name: _sig() for name in _NO_ARGUMENT_COMMANDS},
        **_SIGNATURES,
    }
)
"""Read-only table of macro name to signature."""