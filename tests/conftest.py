"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Allow running the suite from a plain checkout
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from top6.identifiers import normalize_address
from top6.slot_codec import SlotCodec

ADDR_A = "0x" + "aa" * 20
ADDR_B = "0x" + "bb" * 20
ADDR_C = "0x" + "cc" * 20

# EIP-55 reference vector
CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
BAD_CHECKSUM = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAeD"


def make_address(n: int) -> str:
    """Distinct nonzero address for index n."""
    return normalize_address("0x" + (n + 1).to_bytes(20, "big").hex())


@pytest.fixture
def addr_a():
    return normalize_address(ADDR_A)


@pytest.fixture
def addr_b():
    return normalize_address(ADDR_B)


@pytest.fixture
def addr_c():
    return normalize_address(ADDR_C)


@pytest.fixture
def codec():
    """Six-slot codec, as used by the Top6 grid"""
    return SlotCodec(6)


@pytest.fixture
def scenario_slots(addr_a, addr_b):
    return [addr_a, None, addr_b, None, None, None]
