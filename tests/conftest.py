"""Shared pytest fixtures for the LunyCodeGen test suite.

Provides reusable fixtures for:
- A fresh ScriptBuilder
- A clean LUNY_* environment
- Temporary descriptor directories
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lunycodegen.emitter import ScriptBuilder

_ENV_VARS = (
    "LUNY_INPUTS",
    "LUNY_VALIDATION_ONLY",
    "LUNY_DRY_RUN",
    "LUNY_VERBOSE",
    "LUNY_INDENT_CHAR",
    "LUNY_INDENT_SIZE",
)


@pytest.fixture
def builder() -> ScriptBuilder:
    """An empty builder with the default 4-space indent."""
    return ScriptBuilder()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip LUNY_* variables so the host environment cannot leak into tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def descriptor_dir(tmp_path: Path) -> Path:
    """A directory holding one placeholder descriptor file."""
    root = tmp_path / "descriptors"
    root.mkdir()
    (root / "Luny.json").write_text("{}\n", encoding="utf-8")
    return root
