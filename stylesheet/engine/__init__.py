"""Style transform precompute engine."""

from stylesheet.engine.precompute import StyleCompiler, get_compiler, precompute_style
from stylesheet.engine.registry import CommandRegistry, ValueKind, get_registry, transform_command

__all__ = [
    "StyleCompiler",
    "get_compiler",
    "precompute_style",
    "CommandRegistry",
    "ValueKind",
    "get_registry",
    "transform_command",
]
