from __future__ import annotations

"""UUIDv7-in / UUIDv4-out facade codec.

Only the 48-bit timestamp is touched: it is XORed with the low 48 bits of a
SipHash-2-4 over the UUID's own random bits. Those bits are the same in the
v7 and in its facade, so the same mask is recomputed in both directions and
XOR undoes itself.
"""

from typing import Union

from .constants import MASK48, SIP_INPUT_SIZE, VERSION_V4, VERSION_V7
from .keys import Uuidv47Key
from .siphash import siphash24
from .uuid128 import Uuid128


def build_sip_input(u: Uuid128) -> bytes:
    """Return the 10 random-bit bytes: ``[b6 & 0x0F][b7][b8 & 0x3F][b9..b15]``.

    Reads the same positions whatever the version nibble says; decode relies
    on getting identical bytes from the facade.
    """
    b = u.bytes
    msg = bytearray(SIP_INPUT_SIZE)
    msg[0] = b[6] & 0x0F
    msg[1] = b[7]
    msg[2] = b[8] & 0x3F
    msg[3:10] = b[9:16]
    return bytes(msg)


def _mask48(u: Uuid128, key: Uuidv47Key) -> int:
    return siphash24(build_sip_input(u), key.k0, key.k1) & MASK48


def _remask(u: Uuid128, key: Uuidv47Key, version: int) -> Uuid128:
    out = u.copy()
    out.set_timestamp(u.timestamp() ^ _mask48(u, key))
    out.set_version(version)
    out.set_variant_rfc4122()
    return out


def encode_v4_facade(v7: Uuid128, key: Uuidv47Key) -> Uuid128:
    """Mask the timestamp of ``v7`` and retag it as version 4."""
    return _remask(v7, key, VERSION_V4)


def decode_v4_facade(facade: Uuid128, key: Uuidv47Key) -> Uuid128:
    """Unmask the timestamp of ``facade`` and retag it as version 7."""
    return _remask(facade, key, VERSION_V7)


def _coerce(value: Union[Uuid128, str, bytes]) -> Uuid128:
    if isinstance(value, Uuid128):
        return value
    if isinstance(value, str):
        return Uuid128.parse(value)
    return Uuid128.from_bytes(value)


class FacadeCodec:
    """Key-bound convenience wrapper around the encode/decode functions."""

    def __init__(self, key: Uuidv47Key):
        self.key = key

    def encode(self, v7: Union[Uuid128, str, bytes]) -> Uuid128:
        return encode_v4_facade(_coerce(v7), self.key)

    def decode(self, facade: Union[Uuid128, str, bytes]) -> Uuid128:
        return decode_v4_facade(_coerce(facade), self.key)

    def encode_str(self, v7: Union[Uuid128, str, bytes]) -> str:
        return self.encode(v7).format()

    def decode_str(self, facade: Union[Uuid128, str, bytes]) -> str:
        return self.decode(facade).format()


__all__ = [
    "FacadeCodec",
    "build_sip_input",
    "decode_v4_facade",
    "encode_v4_facade",
]
