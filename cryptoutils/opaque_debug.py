"""Class decorator for a representation that hides internal state."""

from __future__ import annotations

from typing import TypeVar

_T = TypeVar("_T", bound=type)


def opaque_debug(cls: _T) -> _T:
    """Give ``cls`` a ``repr`` of the form ``"Name { ... }"``.

    Useful for types holding secrets that must not leak through logging.
    """
    name = cls.__name__

    def __repr__(self) -> str:
        return f"{name} {{ ... }}"

    cls.__repr__ = __repr__
    return cls