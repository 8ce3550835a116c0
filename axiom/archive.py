"""A base archive that values are serialized through."""

from __future__ import annotations

import struct


class Archive:
    """Exchanges raw bytes with a backing store.

    Subclasses override :meth:`serialize`: a saving archive reads the buffer
    it is given, a loading archive fills it in. The typed helpers return the
    value held in the buffer afterwards, so ``value = archive.int32(value)``
    works in both directions.
    """

    def __init__(self) -> None:
        self.is_loading = False
        self.is_saving = False

    def serialize(self, data: bytearray) -> None:
        """Exchange ``data`` with the archive; the base archive does nothing."""

    def _field(self, fmt: str, value: int, low: int, high: int) -> int:
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in the field")
        buffer = bytearray(struct.pack(fmt, value))
        self.serialize(buffer)
        return struct.unpack(fmt, bytes(buffer))[0]

    def int32(self, value: int = 0) -> int:
        """Serialize a signed 32-bit integer and return the resulting value."""
        return self._field("<i", value, -(2**31), 2**31 - 1)

    def uint32(self, value: int = 0) -> int:
        """Serialize an unsigned 32-bit integer and return the resulting value."""
        return self._field("<I", value, 0, 2**32 - 1)