"""Precompute CSS-like style transforms into 4x4 matrices for a renderer."""

from stylesheet.engine import StyleCompiler, precompute_style
from stylesheet.utils.freeze import FrozenDict, MutationError
from stylesheet.utils.invariant import InvariantViolation

__all__ = [
    "StyleCompiler",
    "precompute_style",
    "FrozenDict",
    "MutationError",
    "InvariantViolation",
]
