"""Registry of supported algorithm families and the conversion driver."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from . import aead, aes_siv, ecdsa, ed25519, hkdf, mac
from .wycheproof import TestInfo, load_data

Generator = Callable[[bytes, str, int], "list[TestInfo]"]


@dataclass(frozen=True)
class Algorithm:
    """A test vector file and the generator that converts it."""

    file: str
    generator: Generator


_ALGORITHMS: dict[str, Algorithm] = {
    "AES-GCM": Algorithm("aes_gcm_test.json", aead.aes_gcm_generator),
    "AES-GCM-SIV": Algorithm("aes_gcm_siv_test.json", aead.aes_gcm_generator),
    "CHACHA20-POLY1305": Algorithm(
        "chacha20_poly1305_test.json", aead.chacha20_poly1305
    ),
    "XCHACHA20-POLY1305": Algorithm(
        "xchacha20_poly1305_test.json", aead.xchacha20_poly1305
    ),
    "AES-SIV-CMAC": Algorithm("aes_siv_cmac_test.json", aes_siv.generator),
    "AES-CMAC": Algorithm("aes_cmac_test.json", mac.generator),
    "HKDF-SHA-1": Algorithm("hkdf_sha1_test.json", hkdf.generator),
    "HKDF-SHA-256": Algorithm("hkdf_sha256_test.json", hkdf.generator),
    "HKDF-SHA-384": Algorithm("hkdf_sha384_test.json", hkdf.generator),
    "HKDF-SHA-512": Algorithm("hkdf_sha512_test.json", hkdf.generator),
    "HMACSHA1": Algorithm("hmac_sha1_test.json", mac.generator),
    "HMACSHA224": Algorithm("hmac_sha224_test.json", mac.generator),
    "HMACSHA256": Algorithm("hmac_sha256_test.json", mac.generator),
    "HMACSHA384": Algorithm("hmac_sha384_test.json", mac.generator),
    "HMACSHA512": Algorithm("hmac_sha512_test.json", mac.generator),
    "EDDSA": Algorithm("eddsa_test.json", ed25519.generator),
    "secp256r1": Algorithm("ecdsa_secp256r1_sha256_test.json", ecdsa.generator),
    "secp256k1": Algorithm("ecdsa_secp256k1_sha256_test.json", ecdsa.generator),
    "secp384r1": Algorithm("ecdsa_secp384r1_sha384_test.json", ecdsa.generator),
}


def lookup_algorithm(name: str) -> Algorithm:
    """Return the entry for an algorithm family name."""
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unrecognized algorithm '{name}'") from None


def convert(wycheproof_dir: str | Path, algorithm: str, key_size: int) -> list[TestInfo]:
    """Read and convert the vectors for ``algorithm`` from a Wycheproof checkout.

    A ``key_size`` of 0 selects every key size.
    """
    entry = lookup_algorithm(algorithm)
    data = load_data(wycheproof_dir, entry.file)
    return entry.generator(data, algorithm, key_size)


def write_descriptions(infos: Iterable[TestInfo], path: str | Path) -> None:
    """Write one description per line to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        for info in infos:
            handle.write(f"{info.desc}\n")