"""Conversion of Ed25519 signature test vectors."""

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
class _EdKey:
    sk: bytes
    pk: bytes


@dataclass
class _EdCase:
    case: Case
    msg: bytes
    sig: bytes


@dataclass
class _EdGroup:
    key_der: str
    key_pem: str
    key: _EdKey
    tests: list[_EdCase]


def _parse_group(obj: dict) -> _EdGroup:
    key = _require(obj, "key", dict)
    return _EdGroup(
        key_der=_require(obj, "keyDer", str),
        key_pem=_require(obj, "keyPem", str),
        key=_EdKey(sk=_hex_field(key, "sk"), pk=_hex_field(key, "pk")),
        tests=[
            _EdCase(
                case=parse_case(tc),
                msg=_hex_field(tc, "msg"),
                sig=_hex_field(tc, "sig"),
            )
            for tc in obj["tests"]
        ],
    )


def generator(data: bytes, algorithm: str, key_size: int) -> list[TestInfo]:
    """Convert EdDSA vectors. ``key_size`` is ignored."""
    suite, raw_groups = _load_document(data, algorithm)
    groups = [_parse_group(g) for g in raw_groups]

    infos = []
    for group in groups:
        for tc in group.tests:
            infos.append(
                TestInfo(
                    data=[
                        group.key.sk,
                        group.key.pk,
                        tc.msg,
                        tc.sig,
                        bytes([case_result_byte(tc.case)]),
                    ],
                    desc=description(suite, tc.case),
                )
            )
    return infos