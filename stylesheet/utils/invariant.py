"""Fail-fast assertions with ``%s``-formatted messages."""

from __future__ import annotations

from typing import Any


class InvariantViolation(AssertionError):
    """A caller broke a documented precondition."""


def invariant(condition: Any, message: str, *args: Any) -> None:
    """Raise InvariantViolation with ``message % args`` when condition is falsy.

    The message is only formatted on failure.
    """
    if condition:
        return
    if args:
        message = message % args
    raise InvariantViolation(message)
