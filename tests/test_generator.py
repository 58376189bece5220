"""Tests for the generation entry point (lunycodegen.generator)."""

from __future__ import annotations

from pathlib import Path

import pytest

from lunycodegen.config import GeneratorConfig
from lunycodegen.discovery import InputNotFoundError
from lunycodegen.generator import NOT_IMPLEMENTED_MESSAGE, GenerationResult, generate

pytestmark = pytest.mark.unit


class TestGenerate:
    def test_reports_not_implemented(self, descriptor_dir: Path):
        result = generate(GeneratorConfig(inputs=[descriptor_dir]))
        assert isinstance(result, GenerationResult)
        assert result.implemented is False
        assert result.message == NOT_IMPLEMENTED_MESSAGE
        assert result.inputs == [descriptor_dir.resolve()]
        assert result.written == []

    def test_writes_no_files(self, descriptor_dir: Path):
        before = sorted(descriptor_dir.rglob("*"))
        generate(GeneratorConfig(inputs=[descriptor_dir]))
        assert sorted(descriptor_dir.rglob("*")) == before

    def test_constructs_builder(self, descriptor_dir: Path, capsys):
        generate(GeneratorConfig(inputs=[descriptor_dir], verbose=True, indent_size=2))
        out = capsys.readouterr().out
        assert "Emitter ready: ScriptBuilder(" in out

    def test_missing_input_raises(self, tmp_path: Path):
        with pytest.raises(InputNotFoundError):
            generate(GeneratorConfig(inputs=[tmp_path / "missing"]))

    def test_verbose_prints_inputs(self, descriptor_dir: Path, capsys):
        generate(GeneratorConfig(inputs=[descriptor_dir], verbose=True, dry_run=True))
        out = capsys.readouterr().out
        assert "Input:" in out
        assert "Mode: dry run" in out

    def test_quiet_by_default(self, descriptor_dir: Path, capsys):
        generate(GeneratorConfig(inputs=[descriptor_dir]))
        assert capsys.readouterr().out == ""
