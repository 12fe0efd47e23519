from __future__ import annotations

import os
import sys
import argparse
import getpass as _getpass

from typing import List, Optional

from uuidv47.codec import FacadeCodec
from uuidv47.errors import Uuidv47Error
from uuidv47.keys import Uuidv47Key, random_key_bytes
from uuidv47.uuid128 import Uuid128


KEY_ENV_VAR = "UUIDV47_KEY"
DEFAULT_SALT = b"uuidv47-default-salt"

DEMO_UUID = "018f2d9f-9a2a-7def-8c3f-7b1a2c4d5e6f"
DEMO_KEY = Uuidv47Key(k0=0x0123456789ABCDEF, k1=0xFEDCBA9876543210)


def resolve_key(
    key_hex: Optional[str] = None,
    passphrase: Optional[str] = None,
    salt_hex: Optional[str] = None,
    *,
    env: Optional[dict] = None,
) -> Optional[Uuidv47Key]:
    """Pick the key from CLI options, falling back to the environment.

    Order: ``--key``, then ``--passphrase`` (``-`` prompts), then
    ``$UUIDV47_KEY``. Returns None when nothing is configured.

    Args:
        key_hex: 32 hex digits of key material.
        passphrase: Passphrase for Argon2id derivation.
        salt_hex: Hex salt for the derivation; defaults to a fixed salt.
        env: Environment mapping (defaults to ``os.environ``).
    """
    if key_hex:
        return Uuidv47Key.from_hex(key_hex)
    if passphrase:
        if passphrase == "-":
            passphrase = _getpass.getpass("Passphrase: ")
        salt = bytes.fromhex(salt_hex) if salt_hex else DEFAULT_SALT
        return Uuidv47Key.derive(passphrase, salt)
    env = os.environ if env is None else env
    from_env = env.get(KEY_ENV_VAR)
    if from_env:
        return Uuidv47Key.from_hex(from_env)
    return None


def _require_key(key: Optional[Uuidv47Key]) -> Uuidv47Key:
    if key is None:
        raise ValueError(f"No key configured. Provide --key, --passphrase or set {KEY_ENV_VAR}.")
    return key


def cmd_encode(uuids: list[str], *, key: Optional[Uuidv47Key]) -> bool:
    """Print the v4 facade for each UUIDv7.

    Args:
        uuids: Canonical UUIDv7 strings.
        key: SipHash key; required.
    """
    codec = FacadeCodec(_require_key(key))
    for s in uuids:
        u = Uuid128.parse(s)
        if u.version() != 7:
            print(f"Warning: {s} is version {u.version()}, not 7", file=sys.stderr)
        print(codec.encode_str(u))
    return True


def cmd_decode(uuids: list[str], *, key: Optional[Uuidv47Key]) -> bool:
    """Print the original UUIDv7 for each v4 facade.

    Args:
        uuids: Canonical facade strings.
        key: SipHash key; required.
    """
    codec = FacadeCodec(_require_key(key))
    for s in uuids:
        u = Uuid128.parse(s)
        if u.version() != 4:
            print(f"Warning: {s} is version {u.version()}, not 4", file=sys.stderr)
        print(codec.decode_str(u))
    return True


def cmd_inspect(uuids: list[str]) -> bool:
    for s in uuids:
        u = Uuid128.parse(s)
        print(f"UUID: {u}")
        print(f"  Version: {u.version()}")
        print(f"  Variant bits: {u.variant_bits():02b}")
        print(f"  Timestamp field: {u.timestamp()} (0x{u.timestamp():012x})")
    return True


def cmd_demo(*, key: Optional[Uuidv47Key] = None) -> bool:
    """Encode and decode the demo UUIDv7, printing each step."""
    codec = FacadeCodec(key or DEMO_KEY)
    id_v7 = Uuid128.parse(DEMO_UUID)
    facade = codec.encode(id_v7)
    back = codec.decode(facade)
    print(f"v7 in : {id_v7}")
    print(f"v4 out: {facade}")
    print(f"back  : {back}")
    return back == id_v7


def cmd_keygen() -> bool:
    print(Uuidv47Key.from_bytes(random_key_bytes()).to_hex())
    return True


def _add_key_options(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--key", help=f"128-bit key as 32 hex digits (default: ${KEY_ENV_VAR})")
    ap.add_argument("--passphrase", help="Derive the key with Argon2id ('-' to prompt)")
    ap.add_argument("--salt", help="Hex salt for --passphrase (at least 8 bytes)")


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="uuidv47",
        description="UUIDv7 <-> UUIDv4 facade tool",
        epilog=(
            "Only the 48-bit timestamp is masked; the random bits pass through unchanged."
        ),
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_encode = sub.add_parser("encode", help="Encode UUIDv7 values as v4 facades")
    ap_encode.add_argument("uuids", nargs="+", help="UUIDv7 strings")
    _add_key_options(ap_encode)

    ap_decode = sub.add_parser("decode", help="Decode v4 facades back to UUIDv7")
    ap_decode.add_argument("uuids", nargs="+", help="Facade UUID strings")
    _add_key_options(ap_decode)

    ap_inspect = sub.add_parser("inspect", help="Show version, variant and timestamp fields")
    ap_inspect.add_argument("uuids", nargs="+", help="UUID strings")

    ap_demo = sub.add_parser("demo", help="Round-trip the built-in example UUID")
    _add_key_options(ap_demo)

    sub.add_parser("keygen", help="Print fresh random key material (hex)")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "encode":
            cmd_encode(args.uuids, key=resolve_key(args.key, args.passphrase, args.salt))
        elif args.cmd == "decode":
            cmd_decode(args.uuids, key=resolve_key(args.key, args.passphrase, args.salt))
        elif args.cmd == "inspect":
            cmd_inspect(args.uuids)
        elif args.cmd == "demo":
            ok = cmd_demo(key=resolve_key(args.key, args.passphrase, args.salt, env={}))
            sys.exit(0 if ok else 1)
        elif args.cmd == "keygen":
            cmd_keygen()
        else:
            raise RuntimeError("Unknown command")
    except Uuidv47Error as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
