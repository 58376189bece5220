"""Closed token sets used by the script emitter.

Punctuation and operators map to fixed literal strings.  Keywords are spelled
by lower-casing their member names; that table is built once per process by
:func:`init_symbol_table` and is read-only afterwards.
"""

from __future__ import annotations

import threading
from enum import Enum, Flag, auto
from types import MappingProxyType
from typing import Any, Mapping

from lunycodegen.emitter.errors import SymbolLookupError


class Padding(Flag):
    """Where a single padding character goes relative to an appended token."""

    NONE = 0
    BEFORE = 1
    AFTER = 2
    BOTH = BEFORE | AFTER


class Punctuation(Enum):
    PARENS_OPEN = auto()
    PARENS_CLOSE = auto()
    BRACE_OPEN = auto()
    BRACE_CLOSE = auto()
    SEMICOLON = auto()
    COLON = auto()
    COMMA = auto()
    DOT = auto()
    SPACE = auto()


class Operator(Enum):
    ASSIGN = auto()
    EQUALS = auto()
    NOT_EQUALS = auto()
    LAMBDA = auto()


class Keyword(Enum):
    """C# keywords the generator emits.  Spelling is the lower-cased name."""

    ABSTRACT = auto()
    BASE = auto()
    BOOL = auto()
    CLASS = auto()
    CONST = auto()
    ELSE = auto()
    ENUM = auto()
    FALSE = auto()
    FLOAT = auto()
    FOR = auto()
    FOREACH = auto()
    GET = auto()
    IF = auto()
    IN = auto()
    INT = auto()
    INTERFACE = auto()
    INTERNAL = auto()
    NAMESPACE = auto()
    NEW = auto()
    NULL = auto()
    OBJECT = auto()
    OUT = auto()
    OVERRIDE = auto()
    PARTIAL = auto()
    PRIVATE = auto()
    PROTECTED = auto()
    PUBLIC = auto()
    READONLY = auto()
    REF = auto()
    RETURN = auto()
    SEALED = auto()
    SET = auto()
    STATIC = auto()
    STRING = auto()
    STRUCT = auto()
    THIS = auto()
    TRUE = auto()
    USING = auto()
    VAR = auto()
    VIRTUAL = auto()
    VOID = auto()
    WHILE = auto()


_PUNCTUATION: Mapping[Punctuation, str] = MappingProxyType({
    Punctuation.PARENS_OPEN: "(",
    Punctuation.PARENS_CLOSE: ")",
    Punctuation.BRACE_OPEN: "{",
    Punctuation.BRACE_CLOSE: "}",
    Punctuation.SEMICOLON: ";",
    Punctuation.COLON: ":",
    Punctuation.COMMA: ",",
    Punctuation.DOT: ".",
    Punctuation.SPACE: " ",
})

_OPERATORS: Mapping[Operator, str] = MappingProxyType({
    Operator.ASSIGN: "=",
    Operator.EQUALS: "==",
    Operator.NOT_EQUALS: "!=",
    Operator.LAMBDA: "=>",
})


def _check_total(enum_cls: type[Enum], mapping: Mapping[Any, str]) -> None:
    missing = [member.name for member in enum_cls if member not in mapping]
    if missing:
        raise RuntimeError(f"unmapped {enum_cls.__name__} members: {', '.join(missing)}")


_check_total(Punctuation, _PUNCTUATION)
_check_total(Operator, _OPERATORS)


# ---------------------------------------------------------------------------
# Keyword symbol table
# ---------------------------------------------------------------------------

_keywords: Mapping[Keyword, str] | None = None
_keywords_lock = threading.Lock()


def init_symbol_table() -> Mapping[Keyword, str]:
    """Build the keyword spelling table on first call and return it.

    Safe to call repeatedly and from several threads; every call returns the
    same read-only mapping.
    """
    global _keywords

    if _keywords is None:
        with _keywords_lock:
            if _keywords is None:
                _keywords = MappingProxyType(
                    {keyword: keyword.name.lower() for keyword in Keyword}
                )
    return _keywords


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def punctuation_text(kind: Punctuation) -> str:
    """Return the literal for *kind*, or raise ``SymbolLookupError``."""
    if not isinstance(kind, Punctuation):
        raise SymbolLookupError("punctuation", kind)
    return _PUNCTUATION[kind]


def operator_text(kind: Operator) -> str:
    """Return the literal for *kind*, or raise ``SymbolLookupError``."""
    if not isinstance(kind, Operator):
        raise SymbolLookupError("operator", kind)
    return _OPERATORS[kind]


def keyword_text(kind: Keyword) -> str:
    """Return the lower-case spelling of *kind*, or raise ``SymbolLookupError``."""
    if not isinstance(kind, Keyword):
        raise SymbolLookupError("keyword", kind)
    return init_symbol_table()[kind]
