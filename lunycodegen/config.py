"""LunyCodeGen configuration.

Typed configuration for a generator run.  Settings use a Pydantic v2 model so
they are validated at construction time and can be serialised to/from JSON or
read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from lunycodegen.emitter import ScriptBuilder

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in _TRUTHY


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    Instances are created by the CLI entry point and passed to
    :func:`lunycodegen.generator.generate`.
    """

    inputs: list[Path] = Field(
        default_factory=lambda: [Path(".")],
        description="Directories or files to scan for descriptors",
    )
    validation_only: bool = Field(default=False, description="Parse and validate only")
    dry_run: bool = Field(default=False, description="Report output without writing files")
    verbose: bool = Field(default=False)
    indent_char: str = Field(default=" ", min_length=1, max_length=1)
    indent_size: int = Field(default=4, ge=1)

    @property
    def writes_files(self) -> bool:
        """``False`` when either ``validation_only`` or ``dry_run`` is set."""
        return not (self.validation_only or self.dry_run)

    def create_builder(self) -> ScriptBuilder:
        """Return an empty ``ScriptBuilder`` using the configured indent unit."""
        return ScriptBuilder(indent_char=self.indent_char, indent_size=self.indent_size)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            LUNY_INPUTS (``os.pathsep``-separated), LUNY_VALIDATION_ONLY,
            LUNY_DRY_RUN, LUNY_VERBOSE, LUNY_INDENT_CHAR, LUNY_INDENT_SIZE.
        """
        kwargs: dict[str, Any] = {}

        inputs = os.environ.get("LUNY_INPUTS", "")
        paths = [Path(p) for p in inputs.split(os.pathsep) if p.strip()]
        if paths:
            kwargs["inputs"] = paths

        for field_name, var in (
            ("validation_only", "LUNY_VALIDATION_ONLY"),
            ("dry_run", "LUNY_DRY_RUN"),
            ("verbose", "LUNY_VERBOSE"),
        ):
            flag = _env_flag(var)
            if flag is not None:
                kwargs[field_name] = flag

        if os.environ.get("LUNY_INDENT_CHAR"):
            kwargs["indent_char"] = os.environ["LUNY_INDENT_CHAR"]
        if os.environ.get("LUNY_INDENT_SIZE"):
            kwargs["indent_size"] = os.environ["LUNY_INDENT_SIZE"]

        return cls(**kwargs)
