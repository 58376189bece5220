"""Input path resolution for the generator.

Turns the ``--input`` values into a de-duplicated list of existing paths.
Descriptor parsing itself is not implemented yet; directories are returned
as-is for a later scan.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class InputNotFoundError(FileNotFoundError):
    """Raised when an ``--input`` path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input path not found: {path}")


def resolve_inputs(paths: Iterable[str | Path]) -> list[Path]:
    """Resolve *paths* to absolute paths, keeping first-seen order.

    Raises:
        InputNotFoundError: For the first path that does not exist.
    """
    resolved: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise InputNotFoundError(path)
        path = path.resolve()
        if path not in seen:
            seen.add(path)
            resolved.append(path)
    return resolved
