"""
Top6 Codec

Encode and decode fixed-capacity lists of profile addresses stored under
an ERC725Y data key.
"""

from .errors import (
    CapacityMismatch,
    IndexOutOfRange,
    InvalidIdentifier,
    InvalidStorageKey,
    MalformedBlob,
    SlotCodecError,
)
from .identifiers import ZERO_ADDRESS, is_valid_address, normalize_address
from .payload import DataEntry, make_entry, set_data_batch_calldata, set_data_calldata
from .slot_codec import EncodingMode, SlotCodec, to_hex

__version__ = "0.1.0"

__all__ = [
    "CapacityMismatch",
    "DataEntry",
    "EncodingMode",
    "IndexOutOfRange",
    "InvalidIdentifier",
    "InvalidStorageKey",
    "MalformedBlob",
    "SlotCodec",
    "SlotCodecError",
    "ZERO_ADDRESS",
    "is_valid_address",
    "make_entry",
    "normalize_address",
    "set_data_batch_calldata",
    "set_data_calldata",
    "to_hex",
]
