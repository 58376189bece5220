"""Script emitter -- indentation-aware text assembly for generated sources.

Quick usage::

    from lunycodegen.emitter import Keyword, Padding, ScriptBuilder

    sb = ScriptBuilder()
    sb.append_keywords(Keyword.PUBLIC, Keyword.STATIC)
    sb.append_token("=>", Padding.BOTH)
"""

from lunycodegen.emitter.errors import EmitterError, IndentUnderflowError, SymbolLookupError
from lunycodegen.emitter.script_builder import ScriptBuilder
from lunycodegen.emitter.symbols import (
    Keyword,
    Operator,
    Padding,
    Punctuation,
    init_symbol_table,
    keyword_text,
    operator_text,
    punctuation_text,
)

__all__ = [
    "EmitterError",
    "IndentUnderflowError",
    "Keyword",
    "Operator",
    "Padding",
    "Punctuation",
    "ScriptBuilder",
    "SymbolLookupError",
    "init_symbol_table",
    "keyword_text",
    "operator_text",
    "punctuation_text",
]
