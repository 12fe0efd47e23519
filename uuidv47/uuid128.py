from __future__ import annotations

"""128-bit UUID value with the field accessors the facade codec needs.

Layout (RFC 9562 UUIDv7):

    bytes 0-5   48-bit big-endian Unix milliseconds
    byte  6     high nibble = version, low nibble = rand_a[11:8]
    byte  7     rand_a[7:0]
    byte  8     top two bits = variant (10), low six = rand_b[61:56]
    bytes 9-15  rand_b[55:0]

The same layout carries a UUIDv4 facade, where bytes 0-5 hold the masked
timestamp instead of the real one.
"""

import uuid as _uuid
from typing import Union

from .constants import (
    DASH_POSITIONS,
    MASK48,
    TS_OFFSET,
    TS_SIZE,
    UUID_SIZE,
    UUID_TEXT_LEN,
    VARIANT_BYTE,
    VARIANT_MASK,
    VARIANT_RFC4122,
    VERSION_BYTE,
    VERSION_V7,
)
from .errors import InvalidFormat, InvalidHexChar, InvalidLength


_HEX_NIBBLE = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def read_48be(src: bytes) -> int:
    """Read a 48-bit big-endian value from the first 6 bytes of ``src``."""
    return int.from_bytes(bytes(src[:6]), "big")


def write_48be(dst: bytearray, v48: int, offset: int = 0) -> None:
    dst[offset : offset + 6] = (v48 & MASK48).to_bytes(6, "big")


def _hex_nibble(c: str) -> int:
    try:
        return _HEX_NIBBLE[c]
    except KeyError:
        raise InvalidHexChar() from None


class Uuid128:
    """Sixteen raw bytes plus version/variant/timestamp accessors.

    Equality and hashing go by value. The mutators change this instance only;
    use :meth:`copy` to get a private buffer first.
    """

    __slots__ = ("_bytes",)

    def __init__(self, data: Union[bytes, bytearray] = bytes(UUID_SIZE)):
        if len(data) != UUID_SIZE:
            raise ValueError(f"UUID must be {UUID_SIZE} bytes, got {len(data)}")
        self._bytes = bytearray(data)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "Uuid128":
        return cls(data)

    @classmethod
    def from_uuid(cls, value: _uuid.UUID) -> "Uuid128":
        return cls(value.bytes)

    def to_uuid(self) -> _uuid.UUID:
        return _uuid.UUID(bytes=bytes(self._bytes))

    @property
    def bytes(self) -> bytes:
        return bytes(self._bytes)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def copy(self) -> "Uuid128":
        return Uuid128(self._bytes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid128):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(bytes(self._bytes))

    def __repr__(self) -> str:
        return f"Uuid128('{self.format()}')"

    def __str__(self) -> str:
        return self.format()

    # Field accessors

    def version(self) -> int:
        return (self._bytes[VERSION_BYTE] >> 4) & 0x0F

    def set_version(self, ver: int) -> None:
        self._bytes[VERSION_BYTE] = (self._bytes[VERSION_BYTE] & 0x0F) | ((ver & 0x0F) << 4)

    def variant_bits(self) -> int:
        """Top two bits of byte 8 (0b10 for RFC 4122)."""
        return (self._bytes[VARIANT_BYTE] & VARIANT_MASK) >> 6

    def set_variant_rfc4122(self) -> None:
        self._bytes[VARIANT_BYTE] = (self._bytes[VARIANT_BYTE] & 0x3F) | VARIANT_RFC4122

    def timestamp(self) -> int:
        return read_48be(self._bytes[TS_OFFSET : TS_OFFSET + TS_SIZE])

    def set_timestamp(self, ts48: int) -> None:
        write_48be(self._bytes, ts48, TS_OFFSET)

    # Text form

    @classmethod
    def parse(cls, text: str) -> "Uuid128":
        """Parse the canonical ``8-4-4-4-12`` form (hex digits in either case).

        Raises:
            InvalidLength: ``text`` is not 36 bytes long in UTF-8.
            InvalidFormat: a dash is missing at offset 8, 13, 18 or 23.
            InvalidHexChar: a hex position holds anything but ``[0-9a-fA-F]``.
        """
        if len(text.encode("utf-8", "surrogatepass")) != UUID_TEXT_LEN:
            raise InvalidLength()
        out = bytearray(UUID_SIZE)
        byte_idx = 0
        high = None
        for pos, c in enumerate(text):
            if pos in DASH_POSITIONS:
                if c != "-":
                    raise InvalidFormat()
                continue
            nib = _hex_nibble(c)
            if high is None:
                high = nib
            else:
                out[byte_idx] = (high << 4) | nib
                byte_idx += 1
                high = None
        return cls(out)

    def format(self) -> str:
        h = self._bytes.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"

    @classmethod
    def craft_v7(cls, ts_ms_48: int, rand_a_12: int, rand_b_62: int) -> "Uuid128":
        """Assemble a UUIDv7 from its timestamp and random components.

        Each component is truncated to its field width. Nothing is sampled
        here; the caller supplies the time and the randomness.
        """
        u = cls()
        u.set_timestamp(ts_ms_48)
        u._bytes[6] = (rand_a_12 >> 8) & 0x0F
        u._bytes[7] = rand_a_12 & 0xFF
        u.set_version(VERSION_V7)

        rand_b = rand_b_62 & ((1 << 62) - 1)
        u._bytes[8] = (rand_b >> 56) & 0x3F
        u._bytes[9:16] = (rand_b & ((1 << 56) - 1)).to_bytes(7, "big")
        u.set_variant_rfc4122()
        return u


__all__ = [
    "Uuid128",
    "read_48be",
    "write_48be",
]
