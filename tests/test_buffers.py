import pytest

from cryptoutils.buffers import InOut, InOutBuf
from cryptoutils.errors import IntoArrayError, NotEqualError


def test_new_rejects_unequal_lengths():
    with pytest.raises(NotEqualError):
        InOutBuf(b"abc", bytearray(2))


def test_iterate_in_place():
    original = bytes([1, 2, 3])
    data = bytearray(original)
    buf = InOutBuf.from_mut(data)
    for item in buf:
        item.write(item.clone_in() * 2)
    assert data == bytearray(x * 2 for x in original)


def test_separate_buffers_keep_input():
    source = bytes(range(8))
    target = bytearray(8)
    buf = InOutBuf(source, target)
    for item in buf:
        item.write(item.clone_in())
    assert bytes(target) == source
    assert buf.get_in() == source


def test_len_and_get_bounds():
    data = bytearray(5)
    buf = InOutBuf.from_mut(data)
    assert len(buf) == len(data)
    with pytest.raises(IndexError):
        buf.get(len(data))
    with pytest.raises(IndexError):
        buf.get(-1)


def test_get_reads_and_writes():
    source = [10, 20, 30]
    target = [0, 0, 0]
    item = InOutBuf(source, target).get(1)
    assert item.clone_in() == source[1]
    item.write(7)
    assert target == [0, 7, 0]
    assert item.read_out() == 7
    assert source == [10, 20, 30]


def test_get_out_is_writable_view():
    target = bytearray(2)
    buf = InOutBuf(b"xy", target)
    view = buf.get_out()
    view[1] = 5
    assert target[1] == 5
    view[:] = b"ab"
    assert target == bytearray(b"ab")


def test_split_at():
    data = bytearray(range(10))
    head, tail = InOutBuf.from_mut(data).split_at(4)
    assert len(head) == 4
    assert len(tail) == len(data) - 4
    assert head.get_in() + tail.get_in() == bytes(data)
    tail.get(0).write(99)
    assert data[4] == 99


def test_split_at_past_end():
    buf = InOutBuf.from_mut(bytearray(3))
    with pytest.raises(ValueError):
        buf.split_at(4)


def test_split_at_edges():
    data = bytearray(range(3))
    head, tail = InOutBuf.from_mut(data).split_at(len(data))
    assert len(head) == len(data)
    assert len(tail) == 0
    assert list(tail) == []


def test_into_chunks():
    data = bytearray(range(10))
    chunks, tail = InOutBuf.from_mut(data).into_chunks(4)
    assert len(chunks) == len(data) // 4
    assert len(tail) == len(data) % 4
    assert tail.get_in() == bytes(data[8:])
    assert chunks.get_in() == [bytes(data[0:4]), bytes(data[4:8])]


def test_into_chunks_rejects_zero_size():
    with pytest.raises(ValueError):
        InOutBuf.from_mut(bytearray(4)).into_chunks(0)


def test_chunk_xor_round_trip():
    original = bytes(range(16))
    data = bytearray(original)
    key = bytes([0x5A] * 4)
    chunks, tail = InOutBuf.from_mut(data).into_chunks(4)
    assert len(tail) == 0
    for block in chunks:
        block.xor_in2out(key)
    assert bytes(data) != original
    for block in chunks:
        block.xor_in2out(key)
    assert bytes(data) == original


def test_xor_in2out_round_trip():
    source = bytes(range(6))
    mask = bytes([0xFF] * 6)
    target = bytearray(6)
    InOutBuf(source, target).xor_in2out(mask)
    restored = bytearray(6)
    InOutBuf(bytes(target), restored).xor_in2out(mask)
    assert bytes(restored) == source


def test_xor_with_itself_gives_zeros():
    source = bytes(range(1, 7))
    target = bytearray(len(source))
    InOutBuf(source, target).xor_in2out(source)
    assert target == bytearray(len(source))


def test_xor_length_mismatch():
    buf = InOutBuf.from_mut(bytearray(4))
    with pytest.raises(ValueError):
        buf.xor_in2out(b"abc")


def test_into_array():
    data = bytearray(b"abcd")
    arr = InOutBuf.from_mut(data).into_array(4)
    assert arr.clone_in() == b"abcd"
    assert arr.get(2).clone_in() == data[2]
    arr.get(2).write(ord("z"))
    assert data == bytearray(b"abzd")
    assert arr.into_buf().get_in() == bytes(data)
    assert arr.read_out() == bytes(data)


def test_into_array_wrong_length():
    with pytest.raises(IntoArrayError):
        InOutBuf.from_mut(bytearray(3)).into_array(4)


def test_array_get_out_of_range():
    arr = InOutBuf.from_mut(bytearray(4)).into_array(4)
    with pytest.raises(IndexError):
        arr.get(4)


def test_array_xor_round_trip():
    source = bytes(range(8))
    target = bytearray(8)
    mask = bytes([0x33] * 8)
    arr = InOutBuf(source, target).into_array(8)
    arr.xor_in2out(mask)
    assert bytes(target) != source
    back = InOutBuf.from_mut(target).into_array(8)
    back.xor_in2out(mask)
    assert bytes(target) == source


def test_nested_array_xor_in_place():
    inner = [bytearray(b"\x01\x02"), bytearray(b"\x03\x04")]
    container = [inner]
    data = [bytes(block) for block in inner]
    first_block = inner[0]
    InOut.from_mut(container, 0).xor_in2out(data)
    assert container[0] == [bytearray(2), bytearray(2)]
    assert first_block == bytearray(2)


def test_inout_index_out_of_range():
    with pytest.raises(IndexError):
        InOut.from_mut([1, 2], 2)


def test_inout_into_buf():
    blocks_in = [b"ab", b"cd"]
    blocks_out = [bytearray(2), bytearray(2)]
    buf = InOut(blocks_in, blocks_out, 1).into_buf()
    assert len(buf) == len(blocks_in[1])
    for item in buf:
        item.write(item.clone_in())
    assert blocks_out[1] == bytearray(blocks_in[1])
    assert blocks_out[0] == bytearray(2)