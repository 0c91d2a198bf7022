# cryptoutils

Small building blocks for code that works on byte buffers either in place
or from one buffer into another. The package also has helpers that turn
Wycheproof test vector files into flat lists of test data.

## Buffer views

`InOutBuf` (in `cryptoutils.buffers`) pairs an input sequence with an
output sequence of the same length. The two may be the same object
(in-place mode) or two separate objects (buffer-to-buffer mode). Code
written against `InOutBuf` handles both modes the same way.

```python
from cryptoutils.buffers import InOutBuf

source = b"\x01\x02\x03\x04"
target = bytearray(4)
buf = InOutBuf(source, target)
buf.xor_in2out(b"\xff\xff\xff\xff")
assert bytes(target) == b"\xfe\xfd\xfc\xfb"

in_place = bytearray(b"\x00\x01\x02\x03\x04")
view = InOutBuf.from_mut(in_place)
chunks, tail = view.into_chunks(2)   # two blocks of two, one byte left over
assert len(chunks) == 2 and len(tail) == 1
head, rest = view.split_at(3)
```

Other operations on `InOutBuf`:

- `len()` gives the buffer length.
- Iterating yields one `InOut` per position.
- `get(pos)` returns the `InOut` at a single position.
- `get_in()` returns a copy of the input.
- `get_out()` returns a writable view of the output.
- `into_array(size)` views the whole buffer as a single array pair.

An `InOut` reads from the input side and writes to the output side at one
position. It offers these methods:

- `clone_in()` returns a copy of the input element.
- `read_out()` returns a copy of the output element.
- `write(value)` writes to the output element.
- `get(pos)` returns the pair for one position inside an array element.
- `into_buf()` views an array element pair as an `InOutBuf`.
- `xor_in2out(data)` XORs `data` with the input and writes the result to the output.

These errors come from `cryptoutils.errors`, and all of them are
`ValueError` subclasses:

- A length mismatch when building an `InOutBuf` raises `NotEqualError`.
- Asking `into_array` for the wrong length raises `IntoArrayError`.

`InOutBufReserved` (in `cryptoutils.reserved`) is the variant whose output
may be longer than its input, which leaves room for padding. It can be
built in two ways:

- `InOutBufReserved.from_mut_slice(buf, msg_len)` uses one buffer.
- `InOutBufReserved.from_slices(source, target)` uses two buffers.

`get_in_len()` and `get_out_len()` report the two lengths. When the output
cannot hold the input, it raises `OutIsTooSmallError`.

## Opaque debug output

Decorate a class with `opaque_debug` so that its `repr` never shows its
contents:

```python
from cryptoutils.opaque_debug import opaque_debug

@opaque_debug
class Key:
    def __init__(self, material):
        self.material = material

assert repr(Key(b"secret")) == "Key { ... }"
```

## Wycheproof test vectors

`cryptoutils.algorithms` knows which Wycheproof file and which converter
belong to each supported algorithm family:

- AES-GCM and AES-GCM-SIV
- CHACHA20-POLY1305 and XCHACHA20-POLY1305
- AES-SIV-CMAC and AES-CMAC
- HKDF-SHA-1, HKDF-SHA-256, HKDF-SHA-384 and HKDF-SHA-512
- HMACSHA1, HMACSHA224, HMACSHA256, HMACSHA384 and HMACSHA512
- EDDSA
- secp256r1, secp256k1 and secp384r1

```python
from cryptoutils.algorithms import convert, lookup_algorithm, write_descriptions

algorithm = lookup_algorithm("AES-GCM")   # Algorithm(file=..., generator=...)
infos = convert("path/to/wycheproof", "AES-GCM", 128)   # key size in bits, 0 for all
write_descriptions(infos, "aes_gcm.txt")
```

`convert` reads the file from the `testvectors` directory of the given
checkout.

Each resulting `TestInfo` (from `cryptoutils.wycheproof`) carries two things:

- `data`: the raw byte fields of one test case.
- `desc`: a one-line description such as `AES-GCM case 1 [valid] comment`.

The per-family converters can also be called directly with the file
contents, the algorithm name and the key size:

- `cryptoutils.aead`: `aes_gcm_generator`, `chacha20_poly1305`, `xchacha20_poly1305`
- `cryptoutils.aes_siv`: `generator`
- `cryptoutils.ecdsa`: `generator`
- `cryptoutils.ed25519`: `generator`
- `cryptoutils.hkdf`: `generator`
- `cryptoutils.mac`: `generator`

The converters raise these errors:

- A file whose algorithm or curve does not match raises `ValueError`.
- Malformed fields and bad hex also raise `ValueError`.
- An unknown algorithm name in `lookup_algorithm` raises `ValueError`.
- A missing vector file raises `FileNotFoundError`.

## What it does not do

The package has no command-line program.

It also does not pack the converted test data into a binary blob file. It
returns `TestInfo` lists and writes description files; storing the `data`
fields in whatever format your tests read is left to the caller.

## Requirements

Python 3.10 or later, with no third-party dependencies.