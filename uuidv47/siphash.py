from __future__ import annotations

"""SipHash-2-4 in pure Python.

Same rounds as the reference implementation by Aumasson and Bernstein: two
compression rounds per 8-byte block, four finalization rounds. Message blocks
are read little-endian. The 64-bit result is the reference tag read big-endian,
so key 00..0f over an empty message gives 0x310e0edd47db6f72. The working
state is four local ints per call, so the function is safe to call from any
thread.
"""

from .constants import KEY_SIZE, MASK64, SIP_C0, SIP_C1, SIP_C2, SIP_C3


def _rotl64(v: int, n: int) -> int:
    return ((v << n) & MASK64) | (v >> (64 - n))


def _sipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & MASK64
    v2 = (v2 + v3) & MASK64
    v1 = _rotl64(v1, 13)
    v3 = _rotl64(v3, 16)
    v1 ^= v0
    v3 ^= v2
    v0 = _rotl64(v0, 32)

    v2 = (v2 + v1) & MASK64
    v0 = (v0 + v3) & MASK64
    v1 = _rotl64(v1, 17)
    v3 = _rotl64(v3, 21)
    v1 ^= v2
    v3 ^= v0
    v2 = _rotl64(v2, 32)
    return v0, v1, v2, v3


def siphash24(data: bytes, k0: int, k1: int) -> int:
    """Return the 64-bit SipHash-2-4 of ``data`` under key words ``k0``/``k1``."""
    k0 &= MASK64
    k1 &= MASK64
    v0 = SIP_C0 ^ k0
    v1 = SIP_C1 ^ k1
    v2 = SIP_C2 ^ k0
    v3 = SIP_C3 ^ k1

    length = len(data)
    end = length & ~7

    for i in range(0, end, 8):
        m = int.from_bytes(data[i : i + 8], "little")
        v3 ^= m
        for _ in range(2):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= m

    # Tail bytes in the low end, length mod 256 in the top byte
    b = ((length & 0xFF) << 56) | int.from_bytes(data[end:], "little")
    v3 ^= b
    for _ in range(2):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xFF
    for _ in range(4):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)

    # Reference tag bytes (little-endian state XOR) read as a big-endian word
    return int.from_bytes(((v0 ^ v1 ^ v2 ^ v3) & MASK64).to_bytes(8, "little"), "big")


def siphash24_bytes(data: bytes, key: bytes) -> bytes:
    """SipHash-2-4 with a 16-byte key, returning the 8-byte reference tag."""
    if len(key) != KEY_SIZE:
        raise ValueError("SipHash expects a 16-byte key")
    k0 = int.from_bytes(key[:8], "little")
    k1 = int.from_bytes(key[8:], "little")
    return siphash24(data, k0, k1).to_bytes(8, "big")


__all__ = [
    "siphash24",
    "siphash24_bytes",
]
