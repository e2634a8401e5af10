"""Transform command registry — one command per transform operation name.

Usage:
    @transform_command("scaleX", kind=ValueKind.NUMBER)
    def scale_x(matrix: Matrix, value: float) -> None:
        matrix_math.reuse_scale_x_command(matrix, value)

Each command writes its operation into a fresh identity matrix; the compiler
multiplies that onto the running result.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable

from stylesheet.utils.matrix_math import Matrix

logger = logging.getLogger(__name__)


class ValueKind(enum.Enum):
    NUMBER = "number"
    SEQUENCE = "sequence"
    ANGLE = "angle"


@dataclass
class CommandSpec:
    name: str
    kind: ValueKind
    fn: Callable[[Matrix, Any], None]
    # Allowed sequence lengths; None = any
    lengths: tuple[int, ...] | None = None


class CommandRegistry:
    """Name → CommandSpec lookup."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.name in self._commands:
            raise ValueError(f"Duplicate transform command: {spec.name}")
        self._commands[spec.name] = spec
        logger.debug("Registered transform command %s (%s)", spec.name, spec.kind.value)

    def get(self, name: str) -> CommandSpec:
        """Look up a command. Unknown names raise ValueError in every build."""
        spec = self._commands.get(name)
        if spec is None:
            raise ValueError(f"Invalid transform name: {name}")
        return spec

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return sorted(self._commands)

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def transform_command(
    name: str,
    *,
    kind: ValueKind,
    lengths: tuple[int, ...] | None = None,
):
    """Decorator to register a transform command."""

    def decorator(fn: Callable[[Matrix, Any], None]):
        _registry.register(CommandSpec(name=name, kind=kind, fn=fn, lengths=lengths))
        return fn

    return decorator
