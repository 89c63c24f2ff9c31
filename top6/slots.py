"""
Top6 Codec: Slot List Helpers

Pure functions for building and editing a slot list. Every edit returns
a new list; the caller owns the value and encodes it when it needs the
wire form.
"""

from typing import Dict, List, Optional, Sequence

from .errors import CapacityMismatch, IndexOutOfRange
from .identifiers import AddressLike, normalize_address
from .slot_codec import SlotList


def _check_index(index: int, capacity: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < capacity:
        raise IndexOutOfRange(f"Slot index {index!r} out of bounds (0-{capacity - 1})")


def empty_slots(capacity: int) -> SlotList:
    if capacity < 1:
        raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")
    return [None] * capacity


def from_addresses(addresses: Sequence[AddressLike], capacity: int) -> SlotList:
    """
    Fill slots from index 0 with the given addresses.

    Raises:
        CapacityMismatch: If more addresses than slots are given
        InvalidIdentifier: If any address is invalid
    """
    if len(addresses) > capacity:
        raise CapacityMismatch(
            f"{len(addresses)} addresses do not fit {capacity} slots"
        )
    slots = empty_slots(capacity)
    for index, address in enumerate(addresses):
        slots[index] = normalize_address(address)
    return slots


def from_slot_map(mapping: Dict[int, AddressLike], capacity: int) -> SlotList:
    """Build a slot list from ``{slot_index: address}``."""
    slots = empty_slots(capacity)
    for index, address in mapping.items():
        _check_index(index, capacity)
        slots[index] = normalize_address(address)
    return slots


def occupied(slots: Sequence[Optional[str]]) -> List[str]:
    """Occupied identifiers in slot order."""
    return [value for value in slots if value is not None]


def first_free(slots: Sequence[Optional[str]]) -> Optional[int]:
    for index, value in enumerate(slots):
        if value is None:
            return index
    return None


def place(
    slots: Sequence[Optional[str]],
    address: AddressLike,
    index: Optional[int] = None,
) -> SlotList:
    """
    Put an address into a slot, overwriting any occupant.

    Args:
        slots: Current slot list
        address: Address to place
        index: Target slot; the first free slot when omitted

    Raises:
        CapacityMismatch: If index is omitted and every slot is taken
        IndexOutOfRange: If index is outside the list
        InvalidIdentifier: If address is invalid
    """
    normalized = normalize_address(address)
    if index is None:
        index = first_free(slots)
        if index is None:
            raise CapacityMismatch(f"All {len(slots)} slots are filled")
    _check_index(index, len(slots))

    updated = list(slots)
    updated[index] = normalized
    return updated


def clear(slots: Sequence[Optional[str]], index: int) -> SlotList:
    _check_index(index, len(slots))
    updated = list(slots)
    updated[index] = None
    return updated


def remove_address(slots: Sequence[Optional[str]], address: AddressLike) -> SlotList:
    """
    Clear the slot holding address.

    Raises:
        ValueError: If the address is not in any slot
    """
    normalized = normalize_address(address)
    for index, value in enumerate(slots):
        if value is not None and value.lower() == normalized.lower():
            return clear(slots, index)
    raise ValueError(f"{normalized} is not in the slot list")
