"""Indentation-aware text builder for emitting generated source files.

The builder wraps an incrementally grown text buffer and tracks a nesting
depth.  Lines written through the ``*_indented*`` methods are prefixed with
the indent string for the current depth, and ``open_block`` / ``close_block``
couple a line with an indent change so structural emission stays in step with
the counter.

Quick usage::

    from lunycodegen.emitter import Keyword, ScriptBuilder

    sb = ScriptBuilder()
    sb.append_indented()
    sb.append_keywords(Keyword.PUBLIC, Keyword.STATIC, Keyword.CLASS)
    sb.append_line("Luny")
    with sb.block("{", "}"):
        sb.append_indented_line("// members")
    source = sb.render()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from lunycodegen.emitter.errors import IndentUnderflowError
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

NEWLINE = "\n"


def _require_single_char(value: str, name: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


class ScriptBuilder:
    """Accumulates indented, token-padded text.

    Not thread-safe: an instance is meant to be owned by one producer for a
    single generation pass.

    Args:
        text: Initial buffer contents.
        indent_char: Character repeated to form one indent unit.
        indent_size: Repetitions of *indent_char* per level.  Values below 1
            are coerced to 1.
    """

    def __init__(self, text: str = "", indent_char: str = " ", indent_size: int = 4) -> None:
        init_symbol_table()
        self._parts: list[str] = [text] if text else []
        self._length = len(text)
        self._indent_char = _require_single_char(indent_char, "indent_char")
        self._indent_size = max(1, indent_size)
        self._indent_level = 0
        self._indentations: list[str] = [""]

    # -- Properties ----------------------------------------------------------

    @property
    def indent_level(self) -> int:
        """Current nesting depth; 0 means no indentation."""
        return self._indent_level

    @property
    def indent_char(self) -> str:
        return self._indent_char

    @property
    def indent_size(self) -> int:
        return self._indent_size

    # -- Query / maintenance -------------------------------------------------

    def is_empty(self) -> bool:
        """Return ``True`` while nothing has been appended."""
        return self._length == 0

    def render(self) -> str:
        """Return the accumulated text without modifying the builder."""
        return "".join(self._parts)

    def clear(self) -> None:
        """Empty the buffer.  Indent level and indent unit are kept."""
        self._parts.clear()
        self._length = 0

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (
            f"ScriptBuilder(length={self._length}, indent_level={self._indent_level}, "
            f"indent={self._indent_char * self._indent_size!r})"
        )

    # -- Plain appends -------------------------------------------------------

    def append(self, text: str) -> None:
        """Append *text* verbatim."""
        if text:
            self._parts.append(text)
            self._length += len(text)

    def append_many(self, texts: Iterable[str]) -> None:
        """Append each string in order with no separator."""
        for text in texts:
            self.append(text)

    def append_token(self, text: str, padding: Padding = Padding.NONE, pad_char: str = " ") -> None:
        """Append *text* with one *pad_char* before and/or after it."""
        _require_single_char(pad_char, "pad_char")
        if Padding.BEFORE in padding:
            self.append(pad_char)
        self.append(text)
        if Padding.AFTER in padding:
            self.append(pad_char)

    def append_punctuation(
        self, kind: Punctuation, padding: Padding = Padding.NONE, pad_char: str = " "
    ) -> None:
        self.append_token(punctuation_text(kind), padding, pad_char)

    def append_operator(
        self, kind: Operator, padding: Padding = Padding.NONE, pad_char: str = " "
    ) -> None:
        self.append_token(operator_text(kind), padding, pad_char)

    def append_keyword(
        self, kind: Keyword, padding: Padding = Padding.NONE, pad_char: str = " "
    ) -> None:
        self.append_token(keyword_text(kind), padding, pad_char)

    def append_keywords(self, *keywords: Keyword) -> None:
        """Append each keyword followed by a single space, e.g. ``"public static "``."""
        for keyword in keywords:
            self.append_token(keyword_text(keyword), Padding.AFTER)

    def append_words(self, *texts: str) -> None:
        """Append each string followed by a single space."""
        for text in texts:
            self.append_token(text, Padding.AFTER)

    def append_char(self, char: str, count: int = 1) -> None:
        """Append *char* *count* times."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.append(_require_single_char(char, "char") * count)

    # -- Lines and indentation -----------------------------------------------

    def append_indented(self, text: str | Iterable[str] = "") -> None:
        """Write the current indent string, then *text* (no newline).

        *text* may be a string or an iterable of strings appended in order.
        """
        self.append(self.indent_string())
        self._append_content(text)

    def append_line(self, text: str | Iterable[str] | None = None) -> None:
        """Append *text* (if given) followed by a single newline."""
        if text is not None:
            self._append_content(text)
        self.append(NEWLINE)

    def append_line_punctuation(self, kind: Punctuation) -> None:
        self.append_line(punctuation_text(kind))

    def append_lines(self, count: int) -> None:
        """Append *count* empty lines."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.append(NEWLINE * count)

    def append_indented_line(self, text: str | Iterable[str] = "") -> None:
        """Indent, append *text*, end with a newline."""
        self.append_indented(text)
        self.append(NEWLINE)

    def increment_indent(self) -> None:
        self._indent_level += 1

    def decrement_indent(self) -> None:
        """Step one level out.

        Raises:
            IndentUnderflowError: The level was already 0.  It stays at 0.
        """
        self._indent_level -= 1
        if self._indent_level < 0:
            self._indent_level = 0
            raise IndentUnderflowError()

    def open_block(self, text: str) -> None:
        """Emit *text* as an indented line, then increment the indent level."""
        self.append_indented_line(text)
        self.increment_indent()

    def close_block(self, text: str) -> None:
        """Decrement the indent level, then emit *text* as an indented line."""
        self.decrement_indent()
        self.append_indented_line(text)

    @contextmanager
    def block(self, open_text: str = "{", close_text: str = "}") -> Iterator[ScriptBuilder]:
        """Context manager pairing ``open_block`` with ``close_block``."""
        self.open_block(open_text)
        try:
            yield self
        finally:
            self.close_block(close_text)

    @contextmanager
    def indented(self) -> Iterator[ScriptBuilder]:
        """Context manager that indents one level without emitting lines."""
        self.increment_indent()
        try:
            yield self
        finally:
            self.decrement_indent()

    def indent_string(self, level: int | None = None) -> str:
        """Return the indent prefix for *level* (default: the current level).

        Prefixes are cached per level; asking for level ``L`` fills every
        level up to ``L``.
        """
        if level is None:
            level = self._indent_level
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        indentations = self._indentations
        while level >= len(indentations):
            indentations.append(self._indent_char * (len(indentations) * self._indent_size))
        return indentations[level]

    # -- Internal helpers ----------------------------------------------------

    def _append_content(self, text: str | Iterable[str]) -> None:
        if isinstance(text, str):
            self.append(text)
        else:
            self.append_many(text)
