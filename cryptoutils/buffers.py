"""Reference types that work the same in-place and buffer-to-buffer.

An :class:`InOut` pairs one input element with one output element; an
:class:`InOutBuf` pairs an input sequence with an output sequence of the
same length. When input and output are the same object, operations run in
place.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any

from .errors import IntoArrayError, NotEqualError

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _is_bytes_like(seq: Any) -> bool:
    return isinstance(seq, _BYTES_TYPES) or (isinstance(seq, _Window) and seq.is_bytes)


def _materialize_items(items: list, as_bytes: bool) -> Any:
    return bytes(items) if as_bytes else list(items)


def _clone(value: Any) -> Any:
    if isinstance(value, _Window):
        return value.materialize()
    if isinstance(value, (bytes, int, str)):
        return value
    return copy.deepcopy(value)


def _xor(left: Any, right: Any) -> Any:
    if isinstance(left, int):
        if not isinstance(right, int):
            raise TypeError("cannot XOR an integer with a sequence")
        return left ^ right
    if len(left) != len(right):
        raise ValueError(
            f"data length {len(right)} does not match buffer length {len(left)}"
        )
    items = [_xor(a, b) for a, b in zip(left, right)]
    return _materialize_items(items, _is_bytes_like(left))


def _store(container: Any, key: int, value: Any) -> None:
    """Write ``value`` at ``container[key]``, in place where the slot is an array."""
    current = container[key]
    if isinstance(current, (MutableSequence, _Window)) and not isinstance(value, int):
        if len(current) != len(value):
            raise ValueError(
                f"value length {len(value)} does not match slot length {len(current)}"
            )
        for position, item in enumerate(value):
            _store(current, position, item)
    else:
        container[key] = value


class _Window(Sequence):
    """A writable view of a contiguous part of another sequence."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, base: Any, start: int, length: int) -> None:
        if start < 0 or length < 0 or start + length > len(base):
            raise IndexError("window lies outside the underlying sequence")
        self._base = base
        self._start = start
        self._length = length
        self.is_bytes = _is_bytes_like(base)

    def _position(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("index out of range")
        return self._start + index

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        if isinstance(index, slice):
            items = [self[i] for i in range(*index.indices(self._length))]
            return _materialize_items([_clone(x) for x in items], self.is_bytes)
        return self._base[self._position(index)]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            positions = range(*index.indices(self._length))
            values = list(value)
            if len(values) != len(positions):
                raise ValueError("slice assignment must keep the window length")
            for position, item in zip(positions, values):
                self[position] = item
            return
        self._base[self._position(index)] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Sequence, memoryview)) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def materialize(self) -> Any:
        """Return an independent copy of the viewed elements."""
        return _materialize_items([_clone(x) for x in self], self.is_bytes)

    def __repr__(self) -> str:
        return f"_Window({self.materialize()!r})"


class _Chunks(Sequence):
    """A sequence of equal-sized windows over another sequence."""

    def __init__(self, base: Any, start: int, size: int, count: int) -> None:
        if start < 0 or start + size * count > len(base):
            raise IndexError("chunks lie outside the underlying sequence")
        self._base = base
        self._start = start
        self._size = size
        self._count = count

    def __len__(self) -> int:
        return self._count

    def _check(self, index: int) -> int:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("chunk index out of range")
        return index

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._count))]
        index = self._check(index)
        return _Window(self._base, self._start + index * self._size, self._size)

    def __setitem__(self, index: int, value: Any) -> None:
        window = self[self._check(index)]
        values = list(value)
        if len(values) != self._size:
            raise ValueError(f"chunk needs {self._size} elements, got {len(values)}")
        for position, item in enumerate(values):
            window[position] = item


class InOut:
    """One input element paired with one output element."""

    def __init__(self, source: Sequence, target: Any, index: int) -> None:
        if not (0 <= index < len(source) and 0 <= index < len(target)):
            raise IndexError(f"index {index} out of range")
        self._source = source
        self._target = target
        self._index = index

    @classmethod
    def from_mut(cls, target: Any, index: int) -> InOut:
        """Pair an element with itself, for in-place operation."""
        return cls(target, target, index)

    def clone_in(self) -> Any:
        """Return a copy of the input value."""
        return _clone(self._source[self._index])

    def read_out(self) -> Any:
        """Return a copy of the current output value."""
        return _clone(self._target[self._index])

    def write(self, value: Any) -> None:
        """Write ``value`` to the output element."""
        _store(self._target, self._index, value)

    def get(self, pos: int) -> InOut:
        """Return the pair for position ``pos`` inside an array element."""
        element_in = self._source[self._index]
        element_out = self._target[self._index]
        if not 0 <= pos < len(element_in):
            raise IndexError(f"position {pos} out of range for length {len(element_in)}")
        return InOut(element_in, element_out, pos)

    def into_buf(self) -> InOutBuf:
        """View an array element pair as an :class:`InOutBuf`."""
        return InOutBuf(self._source[self._index], self._target[self._index])

    def xor_in2out(self, data: Any) -> None:
        """XOR ``data`` with the input array and write the result to the output."""
        self.write(_xor(self._source[self._index], data))


class InOutBuf:
    """An input sequence paired with an output sequence of equal length."""

    def __init__(self, source: Sequence, target: Any) -> None:
        if len(source) != len(target):
            raise NotEqualError()
        self._source = source
        self._target = target

    @classmethod
    def from_mut(cls, buf: Any) -> InOutBuf:
        """Use one mutable sequence as both input and output."""
        return cls(buf, buf)

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[InOut]:
        for index in range(len(self)):
            yield InOut(self._source, self._target, index)

    def get(self, pos: int) -> InOut:
        """Return the pair at position ``pos``."""
        if not 0 <= pos < len(self):
            raise IndexError(f"position {pos} out of range for length {len(self)}")
        return InOut(self._source, self._target, pos)

    def get_in(self) -> Any:
        """Return a copy of the input elements."""
        return _materialize_items(
            [_clone(x) for x in self._source], _is_bytes_like(self._source)
        )

    def get_out(self) -> _Window:
        """Return a writable view of the output elements."""
        return _Window(self._target, 0, len(self))

    def split_at(self, mid: int) -> tuple[InOutBuf, InOutBuf]:
        """Split into ``[0, mid)`` and ``[mid, len)``."""
        length = len(self)
        if not 0 <= mid <= length:
            raise ValueError(f"split point {mid} beyond buffer length {length}")
        head = InOutBuf(_Window(self._source, 0, mid), _Window(self._target, 0, mid))
        tail = InOutBuf(
            _Window(self._source, mid, length - mid),
            _Window(self._target, mid, length - mid),
        )
        return head, tail

    def into_chunks(self, size: int) -> tuple[InOutBuf, InOutBuf]:
        """Split into a buffer of ``size``-element arrays and a shorter tail."""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        length = len(self)
        count = length // size
        tail_pos = size * count
        chunks = InOutBuf(
            _Chunks(self._source, 0, size, count),
            _Chunks(self._target, 0, size, count),
        )
        tail = InOutBuf(
            _Window(self._source, tail_pos, length - tail_pos),
            _Window(self._target, tail_pos, length - tail_pos),
        )
        return chunks, tail

    def into_array(self, size: int) -> InOut:
        """View the whole buffer as a single array pair of length ``size``."""
        if len(self) != size:
            raise IntoArrayError()
        return InOut(
            _Chunks(self._source, 0, size, 1), _Chunks(self._target, 0, size, 1), 0
        )

    def xor_in2out(self, data: Sequence[int]) -> None:
        """XOR ``data`` with the input and write the result to the output."""
        if len(data) != len(self):
            raise ValueError(
                f"data length {len(data)} does not match buffer length {len(self)}"
            )
        for index, (value, mask) in enumerate(zip(self._source, data)):
            self._target[index] = value ^ mask