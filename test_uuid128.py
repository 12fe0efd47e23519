from __future__ import annotations

import unittest
import uuid

from uuidv47.errors import InvalidFormat, InvalidHexChar, InvalidLength, ParseError
from uuidv47.uuid128 import Uuid128, read_48be, write_48be


class FieldHelperTests(unittest.TestCase):
    def test_read_write_48(self):
        buf = bytearray(6)
        v = 0x0123456789AB
        write_48be(buf, v)
        self.assertEqual(bytes(buf), bytes.fromhex("0123456789ab"))
        self.assertEqual(read_48be(buf), v)

    def test_write_48_truncates_and_respects_offset(self):
        buf = bytearray(b"\xff" * 8)
        write_48be(buf, 0xAA_0000_0000_0001, offset=1)
        self.assertEqual(bytes(buf), b"\xff\x00\x00\x00\x00\x00\x01\xff")

    def test_version_variant(self):
        u = Uuid128.from_bytes(bytes(16))
        u.set_version(7)
        self.assertEqual(u.version(), 7)
        u.set_variant_rfc4122()
        self.assertEqual(u.bytes[8] & 0xC0, 0x80)
        self.assertEqual(u.variant_bits(), 0b10)

    def test_mutators_preserve_neighbouring_bits(self):
        u = Uuid128.from_bytes(b"\xff" * 16)
        u.set_version(4)
        self.assertEqual(u.bytes[6], 0x4F)
        u.set_variant_rfc4122()
        self.assertEqual(u.bytes[8], 0xBF)
        u.set_timestamp(0)
        self.assertEqual(u.bytes[:6], bytes(6))
        self.assertEqual(u.bytes[6:], bytes.fromhex("4fffbfffffffffffffff"))

    def test_wrong_size_rejected(self):
        with self.assertRaises(ValueError):
            Uuid128.from_bytes(bytes(15))
        with self.assertRaises(ValueError):
            Uuid128(bytes(17))

    def test_value_semantics(self):
        a = Uuid128.from_bytes(bytes(range(16)))
        b = a.copy()
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        b.set_version(4)
        self.assertNotEqual(a, b)
        self.assertEqual(a.bytes, bytes(range(16)))

    def test_craft_v7(self):
        u = Uuid128.craft_v7(0x123456789ABC, 0x0ABC, 0x0123456789ABCDEF)
        self.assertEqual(u.version(), 7)
        self.assertEqual(u.variant_bits(), 0b10)
        self.assertEqual(u.timestamp(), 0x123456789ABC)
        self.assertEqual(u.format(), "12345678-9abc-7abc-8123-456789abcdef")

    def test_craft_v7_truncates_components(self):
        u = Uuid128.craft_v7(0xFF_FFFF_FFFF_FFFF, 0xFFFF, (1 << 64) - 1)
        self.assertEqual(u.format(), "ffffffff-ffff-7fff-bfff-ffffffffffff")

    def test_stdlib_uuid_interop(self):
        ref = uuid.UUID("018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6f")
        u = Uuid128.from_uuid(ref)
        self.assertEqual(u.format(), str(ref))
        self.assertEqual(u.to_uuid(), ref)


class TextFormTests(unittest.TestCase):
    def test_parse_format_roundtrip(self):
        s = "00000000-0000-7000-8000-000000000000"
        u = Uuid128.parse(s)
        self.assertEqual(u.version(), 7)
        self.assertEqual(u.format(), s)
        self.assertEqual(Uuid128.parse(u.format()), u)

    def test_parse_is_case_insensitive(self):
        s = "018F2D9F-9A2A-7DEF-8C3F-7B1A2C4D5E6F"
        u = Uuid128.parse(s)
        self.assertEqual(u.format(), s.lower())
        self.assertEqual(str(u), s.lower())
        self.assertEqual(u, Uuid128.parse(s.lower()))

    def test_format_is_lowercase_canonical(self):
        u = Uuid128.from_bytes(bytes(range(0xF0, 0x100)))
        self.assertEqual(u.format(), "f0f1f2f3-f4f5-f6f7-f8f9-fafbfcfdfeff")

    def test_bad_hex(self):
        with self.assertRaises(InvalidHexChar):
            Uuid128.parse("zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz")
        with self.assertRaises(InvalidHexChar):
            Uuid128.parse("018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6g")

    def test_bad_length(self):
        for s in ("", "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6", "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6f0", "018f2d9f9a2a7def8c3f7b1a2c4d5e6f"):
            with self.assertRaises(InvalidLength):
                Uuid128.parse(s)

    def test_length_counts_utf8_bytes(self):
        # 36 characters but 37 bytes
        with self.assertRaises(InvalidLength):
            Uuid128.parse("018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6é")
        # 35 characters but 36 bytes
        with self.assertRaises(InvalidHexChar):
            Uuid128.parse("018f2d9f-9a2a-7def-8c3f-7b1a2c4d5eé")
        with self.assertRaises(InvalidFormat):
            Uuid128.parse("018f2d9fé9a2a-7def-8c3f-7b1a2c4d5e6")

    def test_bad_dash_positions(self):
        for s in (
            "018f2d9fx9a2a-7def-8c3f-7b1a2c4d5e6f"[:36],
            "018f2d9f-9a2a07def-8c3f-7b1a2c4d5e6f",
            "018f2d9f-9a2a-7def08c3f-7b1a2c4d5e6f",
            "018f2d9f-9a2a-7def-8c3f07b1a2c4d5e6f",
            "018f2d9f9-a2a-7def-8c3f-7b1a2c4d5e6f",
        ):
            with self.assertRaises(InvalidFormat):
                Uuid128.parse(s)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            Uuid128.parse("nope")
        try:
            Uuid128.parse("nope")
        except ParseError as exc:
            self.assertEqual(str(exc), "Invalid UUID string length")


if __name__ == "__main__":
    unittest.main()
