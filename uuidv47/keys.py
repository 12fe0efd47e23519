from __future__ import annotations

import string
from dataclasses import dataclass

try:  # pragma: no cover - availability depends on environment
    from argon2.low_level import Type as _ArgonType, hash_secret_raw as _argon_hash  # type: ignore
    _HAS_ARGON2 = True
except ImportError:  # pragma: no cover - graceful fallback
    _ArgonType = None  # type: ignore
    _argon_hash = None  # type: ignore
    _HAS_ARGON2 = False

try:  # pragma: no cover - optional dependency at runtime
    from Cryptodome.Random import get_random_bytes as _get_random_bytes  # type: ignore
    _HAS_CRYPTODOME = True
except ImportError:  # pragma: no cover - fallback
    _get_random_bytes = None  # type: ignore
    _HAS_CRYPTODOME = False

from .constants import KEY_SIZE, MASK64
from .errors import KeyMaterialError


MIN_SALT_SIZE = 8

# Fixed Argon2id parameters for passphrase-derived keys
ARGON_TIME_COST = 3
ARGON_MEMORY_COST_KIB = 64 * 1024  # 64 MiB
ARGON_PARALLELISM = 4

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Uuidv47Key:
    """SipHash key as two 64-bit words.

    Byte conversions use the SipHash reference convention: ``k0`` is bytes
    0-7 little-endian and ``k1`` is bytes 8-15 little-endian.
    """

    k0: int
    k1: int

    def __post_init__(self):
        for name in ("k0", "k1"):
            v = getattr(self, name)
            if not isinstance(v, int) or not 0 <= v <= MASK64:
                raise ValueError(f"{name} must be an unsigned 64-bit integer")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Uuidv47Key":
        if len(data) != KEY_SIZE:
            raise KeyMaterialError(f"Key must be {KEY_SIZE} bytes, got {len(data)}")
        return cls(int.from_bytes(data[:8], "little"), int.from_bytes(data[8:], "little"))

    def to_bytes(self) -> bytes:
        return self.k0.to_bytes(8, "little") + self.k1.to_bytes(8, "little")

    @classmethod
    def from_hex(cls, text: str) -> "Uuidv47Key":
        """Load 32 hex digits; a ``0x`` prefix, whitespace, ``-`` and ``:`` are ignored."""
        s = text.strip()
        if s[:2].lower() == "0x":
            s = s[2:]
        s = "".join(ch for ch in s if ch not in " \t\r\n-:")
        if len(s) != KEY_SIZE * 2:
            raise KeyMaterialError(f"Key must be {KEY_SIZE * 2} hex digits")
        if any(ch not in _HEX_DIGITS for ch in s):
            raise KeyMaterialError("Key contains non-hex characters")
        return cls.from_bytes(bytes.fromhex(s))

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def derive(cls, passphrase: str, salt: bytes) -> "Uuidv47Key":
        """Derive a key from a passphrase with Argon2id."""
        if not (_HAS_ARGON2 and _argon_hash is not None and _ArgonType is not None):
            raise RuntimeError("argon2-cffi is required for passphrase-derived keys")
        if len(salt) < MIN_SALT_SIZE:
            raise KeyMaterialError(f"Salt must be at least {MIN_SALT_SIZE} bytes")
        raw = _argon_hash(
            passphrase.encode("utf-8"),
            salt,
            time_cost=ARGON_TIME_COST,
            memory_cost=ARGON_MEMORY_COST_KIB,
            parallelism=ARGON_PARALLELISM,
            hash_len=KEY_SIZE,
            type=_ArgonType.ID,
        )
        return cls.from_bytes(raw)

    def __repr__(self) -> str:
        # Keep key words out of logs and tracebacks
        return "Uuidv47Key(k0=..., k1=...)"


def random_key_bytes() -> bytes:
    """Fresh 16 bytes of key material from the PyCryptodomex RNG."""
    if not (_HAS_CRYPTODOME and _get_random_bytes is not None):
        raise RuntimeError("PyCryptodomex is required to generate key material")
    return _get_random_bytes(KEY_SIZE)


__all__ = [
    "Uuidv47Key",
    "random_key_bytes",
    "ARGON_TIME_COST",
    "ARGON_MEMORY_COST_KIB",
    "ARGON_PARALLELISM",
]
