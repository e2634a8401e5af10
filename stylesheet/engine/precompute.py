"""Style precompute — turn a ``transform`` list into a ``transformMatrix``.

This is the hook where flattened styles are prepared as input for a renderer:
authors write CSS-like transform lists, the renderer receives one 4x4 matrix.

Usage:
    precompute_style({"opacity": 1, "transform": [{"scale": 2}]})
    # {"opacity": 1, "transformMatrix": [2.0, 0.0, 0.0, 0.0, 0.0, 2.0, ...]}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import stylesheet.engine.commands  # noqa: F401  (registers the built-in commands)
from stylesheet.config import settings
from stylesheet.engine.registry import CommandRegistry, get_registry
from stylesheet.engine.validation import (
    split_operation,
    validate_operation_shape,
    validate_transform,
)
from stylesheet.utils import matrix_math
from stylesheet.utils.freeze import deep_freeze_and_throw_on_mutation_in_dev
from stylesheet.utils.invariant import invariant
from stylesheet.utils.matrix_math import Matrix

logger = logging.getLogger(__name__)

Style = Mapping[str, Any]


def _has_transform(transform: Any) -> bool:
    # An empty list still compiles (to identity); other falsy values do not
    if isinstance(transform, (list, tuple)):
        return True
    return bool(transform)


class StyleCompiler:
    """Precomputes transform matrices for style records.

    ``dev`` selects the strict build (per-operation validation plus a frozen
    result) or the fast build. It is resolved once, here.
    """

    def __init__(
        self,
        dev: bool | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        self.dev = settings.is_development if dev is None else dev
        self.registry = registry or get_registry()

    def precompute(self, style: Style | None) -> Style | None:
        if not style or not _has_transform(style.get("transform")):
            return style
        invariant(
            style.get("transformMatrix") is None,
            "transformMatrix and transform styles cannot be used on the same component",
        )

        new_style = {k: v for k, v in style.items() if k != "transform"}
        matrix = self.compose(style["transform"])
        new_style["transformMatrix"] = matrix_math.to_list(matrix)
        logger.debug(
            "Precomputed transformMatrix from %d operations (dev=%s)",
            len(style["transform"]),
            self.dev,
        )
        return deep_freeze_and_throw_on_mutation_in_dev(new_style, self.dev)

    def compose(self, transforms: list[Mapping[str, Any]]) -> Matrix:
        """Multiply every operation onto an identity, in list order.

        Each new operation is premultiplied onto the row-vector result, so
        the last operation listed is the first one applied to a point (CSS
        transform-list semantics).
        """
        result = matrix_math.create_identity_matrix()
        for transformation in transforms:
            if self.dev:
                validate_operation_shape(transformation)
            key, value = split_operation(transformation)
            if self.dev:
                validate_transform(key, value, transformation, self.registry)
            spec = self.registry.get(key)

            matrix_to_apply = matrix_math.create_identity_matrix()
            spec.fn(matrix_to_apply, value)
            matrix_math.multiply_into(result, matrix_to_apply, result)
        return result


_default_compiler: StyleCompiler | None = None


def get_compiler() -> StyleCompiler:
    """Process-wide compiler, built from settings on first use."""
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = StyleCompiler()
    return _default_compiler


def precompute_style(style: Style | None) -> Style | None:
    """Replace ``style["transform"]`` with a precomputed ``transformMatrix``.

    Returns ``style`` itself when there is nothing to compute. Raises
    InvariantViolation when both keys are set or (dev builds) an operation is
    malformed, and ValueError for an unknown transform name.
    """
    return get_compiler().precompute(style)
