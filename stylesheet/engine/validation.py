"""Dev-build checks on individual transform operations."""

from __future__ import annotations

import json
import numbers
from collections.abc import Mapping
from typing import Any

from stylesheet.engine.registry import CommandRegistry, ValueKind, get_registry
from stylesheet.utils.invariant import invariant


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def describe(transformation: Any) -> str:
    """JSON rendering of an operation for error messages."""
    try:
        return json.dumps(transformation, default=repr)
    except (TypeError, ValueError):
        return repr(transformation)


def split_operation(transformation: Mapping[str, Any]) -> tuple[str, Any]:
    """Return the (key, value) of a single-key transform operation."""
    for key in transformation:
        return key, transformation[key]
    raise ValueError("Invalid transform name: <empty>")


def validate_operation_shape(transformation: Any) -> None:
    invariant(
        isinstance(transformation, Mapping) and len(transformation) == 1,
        "Transform must be an object with exactly one key: %s",
        describe(transformation),
    )


def validate_transform(
    key: str,
    value: Any,
    transformation: Mapping[str, Any],
    registry: CommandRegistry | None = None,
) -> None:
    """Check one operation's value against its command's expected shape.

    Unknown keys raise ValueError (not InvariantViolation).
    """
    spec = (registry or get_registry()).get(key)
    serialized = describe(transformation)

    if spec.kind is ValueKind.SEQUENCE:
        invariant(
            _is_sequence(value),
            "Transform with key of %s must have an array as the value: %s",
            key,
            serialized,
        )
        invariant(
            all(_is_number(v) for v in value),
            "Transform with key of %s must have only numbers in its array: %s",
            key,
            serialized,
        )
        if spec.lengths is not None:
            invariant(
                len(value) in spec.lengths,
                "Transform with key of %s must have a length of %s. "
                "Provided value has a length of %s: %s",
                key,
                " or ".join(str(n) for n in spec.lengths),
                len(value),
                serialized,
            )
    elif spec.kind is ValueKind.ANGLE:
        invariant(
            isinstance(value, str),
            'Transform with key of "%s" must be a string: %s',
            key,
            serialized,
        )
        invariant(
            "deg" in value or "rad" in value,
            "Rotate transform must be expressed in degrees (deg) or radians (rad): %s",
            serialized,
        )
    else:
        invariant(
            _is_number(value),
            'Transform with key of "%s" must be a number: %s',
            key,
            serialized,
        )
