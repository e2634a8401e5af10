"""Deep-freeze helpers for development builds.

Python dicts cannot be frozen in place, so freezing returns a copy: mappings
become ``FrozenDict`` and lists become tuples, recursively. The input is left
untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn


class MutationError(TypeError):
    """Raised when code tries to change a frozen object."""


class FrozenDict(dict):
    """A dict that raises MutationError on every mutating method.

    Subclasses dict so that equality, JSON encoding and ``isinstance`` checks
    keep working downstream.
    """

    def _refuse(self, key: Any = None, value: Any = None) -> NoReturn:
        raise MutationError(
            "You attempted to set the key `%s` with the value `%r` on an object "
            "that is meant to be immutable and has been frozen." % (key, value)
        )

    def __setitem__(self, key: Any, value: Any) -> NoReturn:
        self._refuse(key, value)

    def __delitem__(self, key: Any) -> NoReturn:
        self._refuse(key)

    def __ior__(self, other: Any) -> NoReturn:
        self._refuse()

    def clear(self) -> NoReturn:
        self._refuse()

    def pop(self, key: Any, *default: Any) -> NoReturn:
        self._refuse(key)

    def popitem(self) -> NoReturn:
        self._refuse()

    def setdefault(self, key: Any, default: Any = None) -> NoReturn:
        self._refuse(key, default)

    def update(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._refuse()

    def __copy__(self) -> dict:
        return dict(self)

    def __reduce__(self):
        return (FrozenDict, (dict(self),))


def deep_freeze(value: Any) -> Any:
    """Return an immutable copy of a JSON-like object graph."""
    if isinstance(value, FrozenDict):
        return value
    if isinstance(value, Mapping):
        return FrozenDict((k, deep_freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(deep_freeze(v) for v in value)
    return value


def deep_freeze_and_throw_on_mutation_in_dev(value: Any, dev: bool) -> Any:
    """Freeze in development builds, pass through unchanged otherwise."""
    if not dev:
        return value
    return deep_freeze(value)
