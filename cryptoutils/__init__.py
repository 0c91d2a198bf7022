"""Buffer views for in-place and buffer-to-buffer work, opaque debug output and Wycheproof vector conversion."""

__version__ = "0.1.0"

__all__ = [
    "aead",
    "aes_siv",
    "algorithms",
    "buffers",
    "ecdsa",
    "ed25519",
    "errors",
    "hkdf",
    "mac",
    "opaque_debug",
    "reserved",
    "wycheproof",
]