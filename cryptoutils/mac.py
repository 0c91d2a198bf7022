"""Conversion of MAC (CMAC, HMAC) test vectors."""

from __future__ import annotations

from dataclasses import dataclass

from .wycheproof import (
    Case,
    CaseResult,
    TestInfo,
    _hex_field,
    _load_document,
    _require,
    description,
    parse_case,
)


@dataclass
class _MacCase:
    case: Case
    key: bytes
    msg: bytes
    tag: bytes


@dataclass
class _MacGroup:
    key_size: int
    tag_size: int
    tests: list[_MacCase]


def _parse_group(obj: dict) -> _MacGroup:
    return _MacGroup(
        key_size=_require(obj, "keySize", int),
        tag_size=_require(obj, "tagSize", int),
        tests=[
            _MacCase(
                case=parse_case(tc),
                key=_hex_field(tc, "key"),
                msg=_hex_field(tc, "msg"),
                tag=_hex_field(tc, "tag"),
            )
            for tc in obj["tests"]
        ],
    )


def generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert the valid MAC cases; a key size of 0 selects all groups.

    The tag may be truncated to the group's tag size.
    """
    suite, raw_groups = _load_document(data, algorithm)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        for tc in group.tests:
            if key_size != 0 and group.key_size != key_size:
                continue
            if tc.case.result is not CaseResult.VALID:
                continue
            if len(tc.key) * 8 != group.key_size:
                raise ValueError(
                    f"key of {len(tc.key) * 8} bits in a group of "
                    f"{group.key_size}-bit keys"
                )
            if group.tag_size % 8 != 0:
                raise ValueError(f"tag size {group.tag_size} is not a whole byte count")
            infos.append(
                TestInfo(
                    data=[tc.key, tc.msg, tc.tag],
                    desc=description(suite, tc.case),
                )
            )
    return infos