"""Conversion of AES-SIV-CMAC test vectors."""

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
class _SivCase:
    case: Case
    key: bytes
    aad: bytes
    msg: bytes
    ct: bytes


@dataclass
class _SivGroup:
    key_size: int
    tests: list[_SivCase]


def _parse_group(obj: dict) -> _SivGroup:
    return _SivGroup(
        key_size=_require(obj, "keySize", int),
        tests=[
            _SivCase(
                case=parse_case(tc),
                key=_hex_field(tc, "key"),
                aad=_hex_field(tc, "aad"),
                msg=_hex_field(tc, "msg"),
                ct=_hex_field(tc, "ct"),
            )
            for tc in obj["tests"]
        ],
    )


def generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert AES-SIV-CMAC vectors; a key size of 0 selects all groups."""
    suite, raw_groups = _load_document(data, algorithm)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        if key_size != 0 and group.key_size != key_size:
            continue
        for tc in group.tests:
            infos.append(
                TestInfo(
                    data=[
                        tc.key,
                        tc.aad,
                        tc.msg,
                        tc.ct,
                        bytes([case_result_byte(tc.case)]),
                    ],
                    desc=description(suite, tc.case),
                )
            )
    return infos