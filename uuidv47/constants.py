# UUID field layout
UUID_SIZE = 16
TS_OFFSET = 0
TS_SIZE = 6  # 48-bit big-endian Unix milliseconds
VERSION_BYTE = 6
VARIANT_BYTE = 8

VERSION_V4 = 4
VERSION_V7 = 7

VARIANT_RFC4122 = 0x80
VARIANT_MASK = 0xC0

MASK48 = 0x0000_FFFF_FFFF_FFFF
MASK64 = 0xFFFF_FFFF_FFFF_FFFF

# Canonical text form: 8-4-4-4-12
UUID_TEXT_LEN = 36
DASH_POSITIONS = (8, 13, 18, 23)

# Bytes fed to SipHash: [b6 & 0x0F][b7][b8 & 0x3F][b9..b15]
SIP_INPUT_SIZE = 10

# SipHash initialization words ("somepseudorandomlygeneratedbytes")
SIP_C0 = 0x736F6D6570736575
SIP_C1 = 0x646F72616E646F6D
SIP_C2 = 0x6C7967656E657261
SIP_C3 = 0x7465646279746573

KEY_SIZE = 16
