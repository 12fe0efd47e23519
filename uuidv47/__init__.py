"""
uuidv47 — store sortable UUIDv7, emit UUIDv4-looking facades.

Features:

- ``Uuid128``: 16-byte UUID value with version/variant/timestamp accessors and
  canonical ``8-4-4-4-12`` parse/format.
- ``siphash24``: pure-Python SipHash-2-4, bit-exact with the reference vectors.
- ``encode_v4_facade`` / ``decode_v4_facade``: XOR-mask only the 48-bit
  timestamp with a SipHash keyed on the UUID's own random bits. The random
  bits pass through untouched, so decode recomputes the same mask.
- ``Uuidv47Key``: 128-bit key as two 64-bit words, loadable from bytes, hex or
  an Argon2id-derived passphrase.

Key storage and rotation, and UUID generation, are left to the host system.
"""

from uuidv47.codec import FacadeCodec, build_sip_input, decode_v4_facade, encode_v4_facade
from uuidv47.errors import (
    InvalidFormat,
    InvalidHexChar,
    InvalidLength,
    KeyMaterialError,
    ParseError,
    Uuidv47Error,
)
from uuidv47.keys import Uuidv47Key, random_key_bytes
from uuidv47.siphash import siphash24, siphash24_bytes
from uuidv47.uuid128 import Uuid128

__version__ = "0.1"

__all__ = [
    "Uuid128",
    "Uuidv47Key",
    "FacadeCodec",
    "build_sip_input",
    "encode_v4_facade",
    "decode_v4_facade",
    "siphash24",
    "siphash24_bytes",
    "random_key_bytes",
    "Uuidv47Error",
    "ParseError",
    "InvalidLength",
    "InvalidFormat",
    "InvalidHexChar",
    "KeyMaterialError",
]
