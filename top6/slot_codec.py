"""
Top6 Codec: Slot Codec

Translates a fixed-capacity slot list of 20-byte identifiers to and from
the ABI dynamic-array layout stored under an ERC725Y data key:

    word 0:      array length (uint256, big-endian)
    word 1..n:   one identifier per word, right-justified
                 (12 zero bytes followed by the 20 identifier bytes)
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

from .errors import (
    CapacityMismatch,
    IndexOutOfRange,
    InvalidIdentifier,
    MalformedBlob,
)
from .identifiers import (
    ADDRESS_SIZE,
    ZERO_ADDRESS_BYTES,
    AddressLike,
    checksum,
    to_identifier_bytes,
)

logger = logging.getLogger(__name__)

WORD_SIZE = 32
PAD_SIZE = WORD_SIZE - ADDRESS_SIZE
ZERO_PAD = bytes(PAD_SIZE)

BlobLike = Union[bytes, bytearray, memoryview, str]
SlotList = List[Optional[str]]


class EncodingMode(Enum):
    """How empty slots are represented on the wire."""

    # Occupied slots only; array length shrinks, positions are lost
    COMPACT = "compact"
    # Exactly `capacity` words; empty slots become the zero placeholder
    POSITIONAL = "positional"

    @classmethod
    def parse(cls, value: Union[str, "EncodingMode"]) -> "EncodingMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown encoding mode {value!r} (expected 'compact' or 'positional')"
            ) from None


def to_hex(blob: bytes) -> str:
    """Render a blob as a 0x-prefixed hex string."""
    return "0x" + bytes(blob).hex()


def as_blob_bytes(blob: BlobLike) -> bytes:
    if isinstance(blob, str):
        body = blob[2:] if blob[:2] in ("0x", "0X") else blob
        try:
            return bytes.fromhex(body)
        except ValueError:
            raise MalformedBlob(f"Blob is not valid hex: {blob[:18]!r}...") from None
    if isinstance(blob, (bytes, bytearray, memoryview)):
        return bytes(blob)
    raise MalformedBlob(f"Unsupported blob type: {type(blob).__name__}")


class SlotCodec:
    """
    Encoder/decoder for a slot list of a fixed capacity.

    Properties:
        - Stateless: holds only its capacity and checksum policy
        - Positional round trip is exact, empty slots included
        - Decoding validates the whole structure before reading any element
    """

    def __init__(self, capacity: int, strict_checksum: bool = False):
        """
        Args:
            capacity: Number of slots in a positional list (required)
            strict_checksum: Reject mixed-case addresses with a bad EIP-55 checksum
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._strict_checksum = strict_checksum

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def strict_checksum(self) -> bool:
        return self._strict_checksum

    def __repr__(self) -> str:
        return f"SlotCodec(capacity={self._capacity}, strict_checksum={self._strict_checksum})"

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(
        self,
        slots: Sequence[Optional[AddressLike]],
        mode: Union[str, EncodingMode],
    ) -> bytes:
        """
        Encode a slot list into a blob.

        Args:
            slots: Exactly `capacity` entries, None for an empty slot
            mode: COMPACT drops empty slots, POSITIONAL keeps them as zero words

        Returns:
            32-byte length word followed by one 32-byte word per element

        Raises:
            CapacityMismatch: If len(slots) != capacity
            InvalidIdentifier: If an occupied slot is not a usable identifier
        """
        mode = EncodingMode.parse(mode)
        if len(slots) != self._capacity:
            raise CapacityMismatch(
                f"Expected {self._capacity} slots, got {len(slots)}"
            )

        elements: List[bytes] = []
        for index, value in enumerate(slots):
            if value is None:
                if mode is EncodingMode.POSITIONAL:
                    elements.append(ZERO_ADDRESS_BYTES)
                continue
            try:
                elements.append(to_identifier_bytes(value, self._strict_checksum))
            except InvalidIdentifier as e:
                raise InvalidIdentifier(f"Slot {index}: {e}") from e

        blob = len(elements).to_bytes(WORD_SIZE, "big")
        for raw in elements:
            blob += ZERO_PAD + raw

        logger.debug(
            "Encoded %d/%d slots (%s) into %d bytes",
            len(elements), self._capacity, mode.value, len(blob),
        )
        return blob

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @staticmethod
    def parse_words(blob: BlobLike) -> List[bytes]:
        """
        Structurally validate a blob and return its raw 20-byte elements.

        Format:
            - 32 bytes: element count n
            - n x 32 bytes: 12 zero bytes + 20 identifier bytes

        Raises:
            MalformedBlob: If the length word disagrees with the byte count,
                the input is truncated, or any padding byte is nonzero
        """
        data = as_blob_bytes(blob)

        if len(data) < WORD_SIZE:
            raise MalformedBlob(
                f"Blob too short: {len(data)} bytes, need at least {WORD_SIZE}"
            )

        body = len(data) - WORD_SIZE
        if body % WORD_SIZE:
            raise MalformedBlob(
                f"Blob body of {body} bytes is not a multiple of {WORD_SIZE}"
            )

        declared = int.from_bytes(data[:WORD_SIZE], "big")
        present = body // WORD_SIZE
        if declared != present:
            raise MalformedBlob(
                f"Length word declares {declared} elements but blob holds {present}"
            )

        elements = []
        for i in range(present):
            offset = WORD_SIZE * (i + 1)
            word = data[offset:offset + WORD_SIZE]
            if word[:PAD_SIZE] != ZERO_PAD:
                raise MalformedBlob(f"Element {i} has nonzero padding bytes")
            elements.append(word[PAD_SIZE:])

        return elements

    def decode(self, blob: BlobLike, mode: Union[str, EncodingMode]) -> SlotList:
        """
        Decode a blob produced with the same mode.

        Returns:
            POSITIONAL: exactly `capacity` entries, None for empty slots.
            COMPACT: the encoded identifiers in order (no position claim).

        Raises:
            MalformedBlob: On any structural violation, or a placeholder
                word inside a compact array
            CapacityMismatch: If the element count does not fit the capacity
        """
        mode = EncodingMode.parse(mode)
        elements = self.parse_words(blob)

        if mode is EncodingMode.POSITIONAL:
            if len(elements) != self._capacity:
                raise CapacityMismatch(
                    f"Positional blob holds {len(elements)} elements, "
                    f"capacity is {self._capacity}"
                )
            slots: SlotList = [
                None if raw == ZERO_ADDRESS_BYTES else checksum(raw)
                for raw in elements
            ]
        else:
            if len(elements) > self._capacity:
                raise CapacityMismatch(
                    f"Compact blob holds {len(elements)} elements, "
                    f"capacity is {self._capacity}"
                )
            slots = []
            for i, raw in enumerate(elements):
                if raw == ZERO_ADDRESS_BYTES:
                    raise MalformedBlob(f"Element {i}: placeholder in compact array")
                slots.append(checksum(raw))

        logger.debug("Decoded %d elements (%s)", len(elements), mode.value)
        return slots

    # ------------------------------------------------------------------
    # Single-slot update
    # ------------------------------------------------------------------

    def update_at_slot(
        self,
        blob: BlobLike,
        index: int,
        value: Optional[AddressLike],
        mode: Union[str, EncodingMode],
    ) -> bytes:
        """
        Replace one slot and re-encode the whole list.

        The blob is always fully decoded and re-encoded; bytes are never
        patched in place. In compact mode the decoded identifiers occupy
        the leading slots, so writing past them appends and writing None
        removes.

        Raises:
            IndexOutOfRange: If index is outside [0, capacity)
            MalformedBlob, CapacityMismatch: From decoding the existing blob
            InvalidIdentifier: If value is not a usable identifier
        """
        mode = EncodingMode.parse(mode)
        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index < self._capacity:
            raise IndexOutOfRange(
                f"Slot index {index!r} out of bounds (0-{self._capacity - 1})"
            )

        slots: List[Optional[AddressLike]] = list(self.decode(blob, mode))
        slots.extend([None] * (self._capacity - len(slots)))
        slots[index] = value

        logger.debug("Updating slot %d (%s)", index, mode.value)
        return self.encode(slots, mode)
