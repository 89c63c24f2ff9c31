"""Exceptions raised by the slot codec and its helpers."""


class SlotCodecError(ValueError):
    """Base class for every codec failure."""


class InvalidIdentifier(SlotCodecError):
    """A value cannot be represented as a 20-byte identifier."""


class CapacityMismatch(SlotCodecError):
    """A slot list (or decoded array) does not fit the configured capacity."""


class IndexOutOfRange(SlotCodecError, IndexError):
    """A slot index lies outside ``[0, capacity)``."""


class MalformedBlob(SlotCodecError):
    """An encoded value failed structural validation."""


class InvalidStorageKey(SlotCodecError):
    """A data key is not a 32-byte value."""
