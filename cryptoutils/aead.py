"""Conversion of AEAD test vectors (AES-GCM, ChaCha20-Poly1305 and friends)."""

from __future__ import annotations

from dataclasses import dataclass

from .wycheproof import (
    Case,
    TestInfo,
    _hex_field,
    _load_document,
    _require,
    case_result_byte,
    description,
    parse_case,
)


@dataclass
class _AeadCase:
    case: Case
    aad: bytes
    ct: bytes
    iv: bytes
    key: bytes
    msg: bytes
    tag: bytes


@dataclass
class _AeadGroup:
    iv_size: int
    key_size: int
    tag_size: int
    tests: list[_AeadCase]


def _parse_group(obj: dict) -> _AeadGroup:
    return _AeadGroup(
        iv_size=_require(obj, "ivSize", int),
        key_size=_require(obj, "keySize", int),
        tag_size=_require(obj, "tagSize", int),
        tests=[
            _AeadCase(
                case=parse_case(tc),
                aad=_hex_field(tc, "aad"),
                ct=_hex_field(tc, "ct"),
                iv=_hex_field(tc, "iv"),
                key=_hex_field(tc, "key"),
                msg=_hex_field(tc, "msg"),
                tag=_hex_field(tc, "tag"),
            )
            for tc in obj["tests"]
        ],
    )


def _generate(data: bytes, algorithm: str, key_size: int, iv_size: int) -> list[TestInfo]:
    suite, raw_groups = _load_document(data, algorithm)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        for tc in group.tests:
            if key_size != 0 and group.key_size != key_size:
                continue
            if group.iv_size != iv_size:
                print(f" skipping tests for iv_size={group.iv_size}")
                continue
            infos.append(
                TestInfo(
                    data=[
                        tc.key,
                        tc.iv,
                        tc.aad,
                        tc.msg,
                        tc.ct + tc.tag,
                        bytes([case_result_byte(tc.case)]),
                    ],
                    desc=description(suite, tc.case),
                )
            )
    return infos


def aes_gcm_generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert AES-GCM style vectors with 96-bit nonces; key size 0 means all."""
    return _generate(data, algorithm, key_size, 12 * 8)


def chacha20_poly1305(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert ChaCha20-Poly1305 vectors (256-bit keys, 96-bit nonces)."""
    return _generate(data, algorithm, 256, 12 * 8)


def xchacha20_poly1305(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert XChaCha20-Poly1305 vectors (256-bit keys, 192-bit nonces)."""
    return _generate(data, algorithm, 256, 24 * 8)