"""Conversion of HKDF test vectors."""

from __future__ import annotations

import sys
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
class _HkdfCase:
    case: Case
    ikm: bytes
    salt: bytes
    info: bytes
    size: int
    okm: bytes


@dataclass
class _HkdfGroup:
    key_size: int
    tests: list[_HkdfCase]


def _parse_group(obj: dict) -> _HkdfGroup:
    return _HkdfGroup(
        key_size=_require(obj, "keySize", int),
        tests=[
            _HkdfCase(
                case=parse_case(tc),
                ikm=_hex_field(tc, "ikm"),
                salt=_hex_field(tc, "salt"),
                info=_hex_field(tc, "info"),
                size=_require(tc, "size", int),
                okm=_hex_field(tc, "okm"),
            )
            for tc in obj["tests"]
        ],
    )


def generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert the valid HKDF cases. ``key_size`` is ignored."""
    suite, raw_groups = _load_document(data, algorithm)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        for tc in group.tests:
            if tc.case.result is not CaseResult.VALID:
                continue
            if len(tc.okm) != tc.size:
                print(
                    f"Skipping case {tc.case.case_id} with size={tc.size} "
                    f"!= okm.len()={len(tc.okm)}",
                    file=sys.stderr,
                )
            infos.append(
                TestInfo(
                    data=[tc.ikm, tc.salt, tc.info, tc.okm],
                    desc=description(suite, tc.case),
                )
            )
    return infos