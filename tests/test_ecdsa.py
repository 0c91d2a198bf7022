import json

import pytest

from cryptoutils.ecdsa import generator


def _case(tc_id, result, msg="313233343030", sig="3045"):
    return {
        "tcId": tc_id,
        "comment": f"comment {tc_id}",
        "msg": msg,
        "sig": sig,
        "result": result,
        "flags": [],
    }


def _document(curve="secp256r1", sha="SHA-256", tests=None):
    if tests is None:
        tests = [_case(1, "valid"), _case(2, "acceptable"), _case(3, "invalid")]
    doc = {
        "algorithm": "ECDSA",
        "generatorVersion": "0.8r12",
        "numberOfTests": len(tests),
        "notes": {},
        "testGroups": [
            {
                "type": "EcdsaVerify",
                "keyDer": "3059",
                "keyPem": "-----BEGIN PUBLIC KEY-----",
                "sha": sha,
                "key": {
                    "curve": curve,
                    "type": "EcPublicKey",
                    "wx": "01ab",
                    "wy": "02cd",
                },
                "tests": tests,
            }
        ],
    }
    return json.dumps(doc).encode()


def test_acceptable_cases_are_skipped():
    infos = generator(_document(), "secp256r1", 0)
    assert len(infos) == 2
    assert [info.desc for info in infos] == [
        "ECDSA case 1 [valid] comment 1",
        "ECDSA case 3 [invalid] comment 3",
    ]


def test_blob_layout():
    infos = generator(_document(), "secp256r1", 0)
    first, second = infos
    assert first.data == [
        bytes.fromhex("01ab"),
        bytes.fromhex("02cd"),
        bytes.fromhex("313233343030"),
        bytes.fromhex("3045"),
        b"\x01",
    ]
    assert second.data[-1] == b"\x00"


def test_sha384_is_accepted():
    infos = generator(_document(curve="secp384r1", sha="SHA-384"), "secp384r1", 0)
    assert len(infos) == 2


def test_curve_mismatch_raises():
    with pytest.raises(ValueError):
        generator(_document(curve="secp256k1"), "secp256r1", 0)


def test_unsupported_hash_raises():
    with pytest.raises(ValueError):
        generator(_document(sha="SHA-512"), "secp256r1", 0)


def test_bad_hex_raises():
    with pytest.raises(ValueError):
        generator(_document(tests=[_case(1, "valid", sig="zz")]), "secp256r1", 0)