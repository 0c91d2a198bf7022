"""Helpers for reading Wycheproof test vector files."""

from __future__ import annotations

import binascii
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class CaseResult(Enum):
    """Expected outcome of a Wycheproof test case."""

    VALID = "valid"
    INVALID = "invalid"
    ACCEPTABLE = "acceptable"

    def __str__(self) -> str:
        return self.value


@dataclass
class Suite:
    """Common top-level fields of a Wycheproof file."""

    algorithm: str
    generator_version: str
    number_of_tests: int
    notes: dict[str, str]


@dataclass
class Case:
    """Common fields of one Wycheproof test case."""

    case_id: int
    comment: str
    result: CaseResult
    flags: list[str] = field(default_factory=list)


@dataclass
class TestInfo:
    """Raw blobs for one test case together with its description."""

    __test__ = False

    data: list[bytes]
    desc: str


def _require(obj: Any, key: str, kind: type) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"expected a JSON object holding {key!r}")
    if key not in obj:
        raise ValueError(f"missing field {key!r}")
    value = obj[key]
    if kind is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"field {key!r} must be an integer")
    elif not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _hex_field(obj: Any, key: str) -> bytes:
    return parse_hex(_require(obj, key, str))


def parse_hex(text: str) -> bytes:
    """Decode a hex string; raise ``ValueError`` if it is not valid hex."""
    if not isinstance(text, str):
        raise ValueError("hex data expected")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        raise ValueError(f"invalid value {text!r}: hex data expected") from None


def parse_case_result(text: str) -> CaseResult:
    """Parse a ``result`` value."""
    try:
        return CaseResult(text)
    except ValueError:
        raise ValueError(f"invalid value {text!r}: unexpected result value") from None


def parse_suite(obj: dict) -> Suite:
    """Parse the common top-level fields of a Wycheproof document."""
    notes = _require(obj, "notes", dict)
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in notes.items()):
        raise ValueError("field 'notes' must map strings to strings")
    return Suite(
        algorithm=_require(obj, "algorithm", str),
        generator_version=_require(obj, "generatorVersion", str),
        number_of_tests=_require(obj, "numberOfTests", int),
        notes=dict(notes),
    )


def parse_case(obj: dict) -> Case:
    """Parse the common fields of one test case."""
    flags = obj.get("flags", []) if isinstance(obj, dict) else []
    if not isinstance(flags, list) or not all(isinstance(f, str) for f in flags):
        raise ValueError("field 'flags' must be a list of strings")
    return Case(
        case_id=_require(obj, "tcId", int),
        comment=_require(obj, "comment", str),
        result=parse_case_result(_require(obj, "result", str)),
        flags=list(flags),
    )


def _load_document(data: bytes, algorithm: str | None) -> tuple[Suite, list[dict]]:
    """Parse a Wycheproof document into its suite and raw test groups.

    When ``algorithm`` is given, the suite's algorithm must match it.
    """
    obj = json.loads(data)
    suite = parse_suite(obj)
    if algorithm is not None and suite.algorithm != algorithm:
        raise ValueError(
            f"algorithm mismatch: expected {algorithm!r}, found {suite.algorithm!r}"
        )
    groups = _require(obj, "testGroups", list)
    for group in groups:
        _require(group, "type", str)
        _require(group, "tests", list)
    return suite, groups


def case_result_byte(case: Case) -> int:
    """Encode a case's result as a byte: 0 for invalid, 1 for valid."""
    if case.result is CaseResult.INVALID:
        return 0
    if case.result is CaseResult.VALID:
        return 1
    raise ValueError(f"Unexpected case result {case.result}")


def load_data(wycheproof_dir: str | Path, filename: str) -> bytes:
    """Read a test vector file from the ``testvectors`` directory of a checkout."""
    path = Path(wycheproof_dir) / "testvectors" / filename
    try:
        return path.read_bytes()
    except OSError:
        raise FileNotFoundError(
            f"Test vector file {filename} not found at {str(path)!r}"
        ) from None


def description(suite: Suite, case: Case) -> str:
    """Build the one-line description of a test case."""
    return f"{suite.algorithm} case {case.case_id} [{case.result}] {case.comment}"