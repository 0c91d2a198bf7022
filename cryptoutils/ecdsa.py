"""Conversion of ECDSA signature verification test vectors."""

from __future__ import annotations

from dataclasses import dataclass

from .wycheproof import (
    Case,
    CaseResult,
    TestInfo,
    _hex_field,
    _load_document,
    _require,
    case_result_byte,
    description,
    parse_case,
)

_SUPPORTED_HASHES = ("SHA-256", "SHA-384")


@dataclass
class _EcdsaKey:
    curve: str
    key_type: str
    wx: bytes
    wy: bytes


@dataclass
class _EcdsaCase:
    case: Case
    msg: bytes
    sig: bytes


@dataclass
class _EcdsaGroup:
    key_der: str
    key_pem: str
    sha: str
    key: _EcdsaKey
    tests: list[_EcdsaCase]


def _parse_group(obj: dict) -> _EcdsaGroup:
    key = _require(obj, "key", dict)
    return _EcdsaGroup(
        key_der=_require(obj, "keyDer", str),
        key_pem=_require(obj, "keyPem", str),
        sha=_require(obj, "sha", str),
        key=_EcdsaKey(
            curve=_require(key, "curve", str),
            key_type=_require(key, "type", str),
            wx=_hex_field(key, "wx"),
            wy=_hex_field(key, "wy"),
        ),
        tests=[
            _EcdsaCase(
                case=parse_case(tc),
                msg=_hex_field(tc, "msg"),
                sig=_hex_field(tc, "sig"),
            )
            for tc in obj["tests"]
        ],
    )


def generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert ECDSA vectors for the curve named by ``algorithm``.

    Cases marked acceptable are left out. ``key_size`` is ignored.
    """
    suite, raw_groups = _load_document(data, None)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        if group.key.curve != algorithm:
            raise ValueError(
                f"curve mismatch: expected {algorithm!r}, found {group.key.curve!r}"
            )
        if group.sha not in _SUPPORTED_HASHES:
            raise ValueError(f"unsupported hash function {group.sha!r}")
        for tc in group.tests:
            if tc.case.result is CaseResult.ACCEPTABLE:
                continue
            infos.append(
                TestInfo(
                    data=[
                        group.key.wx,
                        group.key.wy,
                        tc.msg,
                        tc.sig,
                        bytes([case_result_byte(tc.case)]),
                    ],
                    desc=description(suite, tc.case),
                )
            )
    return infos