"""
Top6 Codec: Configuration and Defaults

Defaults for the command line tool. The codec itself never reads these;
callers pass capacity and mode explicitly.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# SLOT LIST CONFIGURATION
# =============================================================================

TOP6_CAPACITY = int(os.getenv("TOP6_CAPACITY", "6"))
TOP6_MODE = os.getenv("TOP6_MODE", "positional").lower()

# Reject mixed-case addresses whose EIP-55 checksum does not match
TOP6_STRICT_CHECKSUM = _env_bool("TOP6_STRICT_CHECKSUM", False)

# =============================================================================
# ERC725Y DATA KEYS
# =============================================================================

# MyTopAccounts (address[] array key on the Universal Profile)
MY_TOP_ACCOUNTS_KEY = "0x19465d1fa6b15b330296b08997725c2c11937b3291cd13455901acc35602d8f9"

# Top6 singleton key used by the standalone schema
TOP6_SINGLETON_KEY = "0x1fe8930f76ea78062f5fdcb33cd0dd012dfce683baabef33c3f6bcce2d2cea3b"

TOP6_DATA_KEY = os.getenv("TOP6_DATA_KEY", MY_TOP_ACCOUNTS_KEY)

# =============================================================================
# LOGGING
# =============================================================================

TOP6_LOG_LEVEL = os.getenv("TOP6_LOG_LEVEL", "WARNING").upper()
