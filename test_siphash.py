from __future__ import annotations

import unittest

from uuidv47.siphash import siphash24, siphash24_bytes


# Reference vectors: key 00..0f, message 00..(L-1)
_K0 = 0x0706050403020100
_K1 = 0x0F0E0D0C0B0A0908
_VECTORS = [
    (0, 0x310E0EDD47DB6F72),
    (1, 0xFD67DC93C539F874),
    (2, 0x5A4FA9D909806C0D),
    (3, 0x2D7EFBD796666785),
    (4, 0xB7877127E09427CF),
    (5, 0x8DA699CD64557618),
    (6, 0xCEE3FE586E46C9CB),
    (7, 0x37D1018BF50002AB),
    (8, 0x6224939A79F5F593),
    (9, 0xB0E4A90BDF82009E),
    (10, 0xF3B9DD94C5BB5D7A),
]


class SipHashTests(unittest.TestCase):
    def test_reference_vectors(self):
        msg = bytes(range(64))
        for length, expected in _VECTORS:
            with self.subTest(length=length):
                self.assertEqual(siphash24(msg[:length], _K0, _K1), expected)

    def test_long_messages_wrap_length_byte(self):
        # Final block carries len % 256 in its top byte
        msg = bytes(i % 256 for i in range(300))
        self.assertEqual(siphash24(msg[:63], _K0, _K1), 0x724506EB4C328A95)
        self.assertEqual(siphash24(msg[:256], _K0, _K1), 0xD7BFA7D226059D99)
        self.assertEqual(siphash24(msg, _K0, _K1), 0x397811B60D710B4B)

    def test_byte_key_matches_word_key(self):
        key = bytes(range(16))
        msg = bytes(range(64))
        for length, expected in _VECTORS:
            self.assertEqual(siphash24_bytes(msg[:length], key), expected.to_bytes(8, "big"))
        # Reference tag bytes for the empty message
        self.assertEqual(siphash24_bytes(b"", key), bytes.fromhex("310e0edd47db6f72"))

    def test_byte_key_size_checked(self):
        with self.assertRaises(ValueError):
            siphash24_bytes(b"", bytes(15))

    def test_deterministic_and_in_range(self):
        data = b"the quick brown fox jumps over the lazy dog"
        a = siphash24(data, 1, 2)
        self.assertEqual(a, siphash24(data, 1, 2))
        self.assertGreaterEqual(a, 0)
        self.assertLess(a, 1 << 64)

    def test_key_and_message_sensitivity(self):
        msg = bytes(range(10))
        base = siphash24(msg, _K0, _K1)
        self.assertNotEqual(base, siphash24(msg, _K0 ^ 1, _K1))
        self.assertNotEqual(base, siphash24(msg, _K0, _K1 ^ (1 << 63)))
        self.assertNotEqual(base, siphash24(msg[:-1] + b"\x0a", _K0, _K1))

    def test_accepts_bytearray_and_memoryview(self):
        msg = bytes(range(17))
        expected = siphash24(msg, _K0, _K1)
        self.assertEqual(siphash24(bytearray(msg), _K0, _K1), expected)
        self.assertEqual(siphash24(memoryview(msg), _K0, _K1), expected)


if __name__ == "__main__":
    unittest.main()
