"""
Top6 Codec: Command Line Tool

Encode, decode and patch Top6 slot lists, and build setData calldata.

Usage:
    top6-codec encode 0xAaaa... - 0xBbbb... - - -
    top6-codec decode 0x0000...0006... --mode positional
    top6-codec update 0x0000...0006... 1 0xCccc...
    top6-codec calldata 0x0000...0006... --key 0x19465d1f...

Use "-" for an empty slot.

Output:
    [+] Encoded 2 of 6 slots (positional)
       Size: 224 bytes
       Value: 0x...
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import config
from .errors import CapacityMismatch, SlotCodecError
from .payload import make_entry, set_data_calldata
from .slot_codec import EncodingMode, SlotCodec, to_hex

EMPTY_SLOT = "-"


def parse_slot_args(values: Sequence[str], capacity: int) -> List[Optional[str]]:
    """
    Turn CLI slot arguments into a slot list.

    Missing trailing slots are empty, so "encode 0xA" with capacity 6
    means [0xA, -, -, -, -, -].
    """
    slots: List[Optional[str]] = [None if v == EMPTY_SLOT else v for v in values]
    if len(slots) < capacity:
        slots.extend([None] * (capacity - len(slots)))
    return slots


def format_slots(slots: Sequence[Optional[str]]) -> List[str]:
    return [
        f"   [{index}] {value if value is not None else '(empty)'}"
        for index, value in enumerate(slots)
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="top6-codec",
        description="Top6 Codec - encode and decode ERC725Y address slot lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  top6-codec encode 0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa - 0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb
  top6-codec decode 0x0000...06... --capacity 6
  top6-codec update 0x0000...06... 1 -
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--capacity", "-c",
        type=int,
        default=config.TOP6_CAPACITY,
        help=f"Number of slots (default: {config.TOP6_CAPACITY})"
    )
    common.add_argument(
        "--mode", "-m",
        choices=[m.value for m in EncodingMode],
        default=config.TOP6_MODE,
        help=f"Encoding mode (default: {config.TOP6_MODE})"
    )
    common.add_argument(
        "--strict-checksum",
        action="store_true",
        default=config.TOP6_STRICT_CHECKSUM,
        help="Reject mixed-case addresses with a bad EIP-55 checksum"
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", parents=[common], help="Encode a slot list")
    enc.add_argument("slots", nargs="+", help='Addresses in slot order, "-" for empty')

    dec = sub.add_parser("decode", parents=[common], help="Decode a blob")
    dec.add_argument("blob", help="0x-prefixed encoded value")

    upd = sub.add_parser("update", parents=[common], help="Replace a single slot")
    upd.add_argument("blob", help="0x-prefixed encoded value")
    upd.add_argument("index", type=int, help="Slot index")
    upd.add_argument("address", help='New address, or "-" to empty the slot')

    call = sub.add_parser("calldata", help="Build setData calldata for a blob")
    call.add_argument("blob", help="0x-prefixed encoded value")
    call.add_argument(
        "--key", "-k",
        default=config.TOP6_DATA_KEY,
        help="32-byte data key (default: TOP6_DATA_KEY)"
    )
    call.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def run(args: argparse.Namespace) -> int:
    if args.command == "calldata":
        entry = make_entry(args.key, args.blob)
        print(f"[+] setData calldata for key {to_hex(entry.key)}")
        print(f"   {set_data_calldata(entry)}")
        return 0

    codec = SlotCodec(args.capacity, strict_checksum=args.strict_checksum)
    mode = EncodingMode.parse(args.mode)

    if args.command == "encode":
        if len(args.slots) > codec.capacity:
            raise CapacityMismatch(
                f"{len(args.slots)} slots given, capacity is {codec.capacity}"
            )
        slots = parse_slot_args(args.slots, codec.capacity)
        blob = codec.encode(slots, mode)
        filled = sum(1 for s in slots if s is not None)
        print(f"[+] Encoded {filled} of {codec.capacity} slots ({mode.value})")
        print(f"   Size: {len(blob)} bytes")
        print(f"   Value: {to_hex(blob)}")

    elif args.command == "decode":
        slots = codec.decode(args.blob, mode)
        print(f"[+] Decoded {len(slots)} entries ({mode.value})")
        for line in format_slots(slots):
            print(line)

    elif args.command == "update":
        value = None if args.address == EMPTY_SLOT else args.address
        blob = codec.update_at_slot(args.blob, args.index, value, mode)
        print(f"[+] Updated slot {args.index} ({mode.value})")
        print(f"   Value: {to_hex(blob)}")
        if args.verbose:
            for line in format_slots(codec.decode(blob, mode)):
                print(line)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.TOP6_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args)
    except SlotCodecError as e:
        print(f"[ERROR] {type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
