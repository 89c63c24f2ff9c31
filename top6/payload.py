"""
Top6 Codec: ERC725Y Payloads

Pairs an encoded blob with its data key and builds the calldata for the
ERC725Y setData/setDataBatch functions. Nothing here talks to a node;
submitting the transaction is the caller's job.
"""

import logging
from typing import NamedTuple, Sequence, Union

from web3 import Web3

from .errors import InvalidStorageKey
from .slot_codec import BlobLike, as_blob_bytes, to_hex

logger = logging.getLogger(__name__)

KEY_SIZE = 32

SET_DATA_SIGNATURE = "setData(bytes32,bytes)"
SET_DATA_BATCH_SIGNATURE = "setDataBatch(bytes32[],bytes[])"

_abi = Web3().codec


def selector(signature: str) -> bytes:
    """First four bytes of keccak256(signature)."""
    return bytes(Web3.keccak(text=signature)[:4])


class DataEntry(NamedTuple):
    """A data key and the value stored under it."""

    key: bytes
    value: bytes

    def as_hex(self):
        return to_hex(self.key), to_hex(self.value)


def to_key_bytes(key: Union[str, bytes, bytearray]) -> bytes:
    """
    Validate an opaque 32-byte data key.

    Raises:
        InvalidStorageKey: If key is not 32 bytes / 64 hex characters
    """
    if isinstance(key, str):
        body = key[2:] if key[:2] in ("0x", "0X") else key
        try:
            raw = bytes.fromhex(body)
        except ValueError:
            raise InvalidStorageKey(f"Data key is not valid hex: {key!r}") from None
    elif isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
    else:
        raise InvalidStorageKey(f"Unsupported data key type: {type(key).__name__}")

    if len(raw) != KEY_SIZE:
        raise InvalidStorageKey(f"Data key must be {KEY_SIZE} bytes, got {len(raw)}")
    return raw


def make_entry(key: Union[str, bytes], blob: BlobLike) -> DataEntry:
    return DataEntry(to_key_bytes(key), as_blob_bytes(blob))


def set_data_calldata(entry: DataEntry) -> str:
    """Calldata for ``setData(bytes32 dataKey, bytes dataValue)``."""
    args = _abi.encode(["bytes32", "bytes"], [entry.key, entry.value])
    return to_hex(selector(SET_DATA_SIGNATURE) + args)


def set_data_batch_calldata(entries: Sequence[DataEntry]) -> str:
    """
    Calldata for ``setDataBatch(bytes32[] dataKeys, bytes[] dataValues)``.

    Args:
        entries: One or more data entries, written in order

    Returns:
        0x-prefixed calldata

    Raises:
        ValueError: If entries is empty
    """
    if not entries:
        raise ValueError("setDataBatch needs at least one entry")

    keys = [entry.key for entry in entries]
    values = [entry.value for entry in entries]
    args = _abi.encode(["bytes32[]", "bytes[]"], [keys, values])
    calldata = selector(SET_DATA_BATCH_SIGNATURE) + args

    logger.debug("Built setDataBatch calldata for %d entries (%d bytes)", len(entries), len(calldata))
    return to_hex(calldata)
