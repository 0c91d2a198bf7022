"""Input/output buffer pair whose output may be longer than its input."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .buffers import _Window
from .errors import OutIsTooSmallError


class InOutBufReserved:
    """An input sequence paired with an output sequence at least as long.

    The first ``in_len`` elements of ``source`` are the message. The whole of
    ``target`` is available for output. When ``source`` and ``target`` are
    the same object, the message is processed in place.
    """

    def __init__(self, source: Sequence, target: Any, in_len: int) -> None:
        if in_len < 0:
            raise ValueError("input length must not be negative")
        if in_len > len(source):
            raise ValueError(
                f"input length {in_len} exceeds source length {len(source)}"
            )
        if in_len > len(target):
            raise OutIsTooSmallError()
        self._source = source
        self._target = target
        self._in_len = in_len
        self._out_len = len(target)

    @classmethod
    def from_mut_slice(cls, buf: Any, msg_len: int) -> InOutBufReserved:
        """Use one mutable sequence whose first ``msg_len`` elements are the input."""
        if msg_len > len(buf):
            raise OutIsTooSmallError()
        return cls(buf, buf, msg_len)

    @classmethod
    def from_slices(cls, source: Sequence, target: Any) -> InOutBufReserved:
        """Pair a whole input sequence with a separate output sequence."""
        if len(source) > len(target):
            raise OutIsTooSmallError()
        return cls(source, target, len(source))

    def get_in(self) -> Any:
        """Return a copy of the input elements."""
        return _Window(self._source, 0, self._in_len).materialize()

    def get_out(self) -> _Window:
        """Return a writable view of the whole output sequence."""
        return _Window(self._target, 0, self._out_len)

    def get_in_len(self) -> int:
        """Return the input length."""
        return self._in_len

    def get_out_len(self) -> int:
        """Return the output length."""
        return self._out_len