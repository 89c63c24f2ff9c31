"""
Unit tests for slot list helpers
"""
import pytest

from top6 import slots as slot_list
from top6.errors import CapacityMismatch, IndexOutOfRange, InvalidIdentifier

from conftest import ADDR_A, ADDR_B


class TestBuildSlots:

    def test_empty(self):
        assert slot_list.empty_slots(6) == [None] * 6

    def test_empty_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            slot_list.empty_slots(0)

    def test_from_addresses_fills_leading_slots(self, addr_a, addr_b):
        assert slot_list.from_addresses([ADDR_A, ADDR_B], 4) == [addr_a, addr_b, None, None]

    def test_from_addresses_overflow(self):
        with pytest.raises(CapacityMismatch):
            slot_list.from_addresses([ADDR_A] * 7, 6)

    def test_from_slot_map(self, addr_a, addr_b):
        slots = slot_list.from_slot_map({0: ADDR_A, 2: ADDR_B}, 6)
        assert slots == [addr_a, None, addr_b, None, None, None]
        assert slot_list.occupied(slots) == [addr_a, addr_b]

    def test_from_slot_map_bad_index(self):
        with pytest.raises(IndexOutOfRange):
            slot_list.from_slot_map({6: ADDR_A}, 6)


class TestEditSlots:

    def test_place_at_index_returns_new_list(self, addr_a):
        original = slot_list.empty_slots(6)
        updated = slot_list.place(original, ADDR_A, 3)
        assert updated[3] == addr_a
        assert original == [None] * 6

    def test_place_overwrites(self, addr_b):
        slots = slot_list.place(slot_list.empty_slots(6), ADDR_A, 2)
        assert slot_list.place(slots, ADDR_B, 2)[2] == addr_b

    def test_place_first_free(self, addr_a, addr_b):
        slots = slot_list.from_slot_map({0: ADDR_A}, 3)
        assert slot_list.place(slots, ADDR_B) == [addr_a, addr_b, None]

    def test_place_when_full(self):
        slots = slot_list.from_addresses([ADDR_A, ADDR_B], 2)
        assert slot_list.first_free(slots) is None
        with pytest.raises(CapacityMismatch):
            slot_list.place(slots, ADDR_A)

    @pytest.mark.parametrize("index", [-1, 6])
    def test_place_bad_index(self, index):
        with pytest.raises(IndexOutOfRange):
            slot_list.place(slot_list.empty_slots(6), ADDR_A, index)

    def test_place_invalid_address(self):
        with pytest.raises(InvalidIdentifier):
            slot_list.place(slot_list.empty_slots(6), "not-an-address", 0)

    def test_clear(self):
        slots = slot_list.from_slot_map({2: ADDR_A}, 6)
        assert slot_list.clear(slots, 2) == [None] * 6

    def test_remove_address_is_case_insensitive(self):
        slots = slot_list.from_slot_map({1: ADDR_A}, 6)
        assert slot_list.remove_address(slots, ADDR_A.upper().replace("0X", "0x")) == [None] * 6

    def test_remove_missing_address(self):
        with pytest.raises(ValueError):
            slot_list.remove_address(slot_list.empty_slots(6), ADDR_B)
