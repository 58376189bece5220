"""Descriptor-to-code generation entry point.

Only the front half of the run exists today: inputs are resolved and the
script emitter is constructed, but no descriptors are parsed and no files are
written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lunycodegen.config import GeneratorConfig
from lunycodegen.discovery import resolve_inputs
from lunycodegen.utils import print_verbose

NOT_IMPLEMENTED_MESSAGE = "Code generation not yet implemented."


@dataclass
class GenerationResult:
    """Outcome of a :func:`generate` call."""

    implemented: bool
    inputs: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    message: str = ""


def generate(config: GeneratorConfig) -> GenerationResult:
    """Run the generator for *config*.

    Raises:
        InputNotFoundError: An input path does not exist.
    """
    inputs = resolve_inputs(config.inputs)
    for path in inputs:
        print_verbose(f"Input: {path}", config.verbose)

    mode = "validation only" if config.validation_only else "dry run" if config.dry_run else "write"
    print_verbose(f"Mode: {mode}", config.verbose)

    # TODO: parse descriptors from inputs and emit one source file per descriptor.
    builder = config.create_builder()
    print_verbose(f"Emitter ready: {builder!r}", config.verbose)

    return GenerationResult(implemented=False, inputs=inputs, message=NOT_IMPLEMENTED_MESSAGE)
