# core/credits_index/record_buffer.py
"""
Bounds-checked access to a credits file held in memory.
Every offset read from a record goes through here before it is dereferenced.
"""
import struct
import numpy as np
from typing import List, Tuple, Union
import mmap

from .record_format import COUNT_FMT, CHILD_COUNT_FMT, YEAR_FMT

BufferLike = Union[bytes, bytearray, mmap.mmap]

class DecodeError(ValueError):
    """A record could not be decoded without reading outside its buffer."""

    def __init__(self, message: str, offset: int = -1, source: str = ""):
        self.offset = offset
        self.source = source
        where = f" at offset {offset}" if offset >= 0 else ""
        label = f"{source}: " if source else ""
        super().__init__(f"{label}{message}{where}")

class RecordBuffer:
    """
    Read-only view over one credits file.

    The wrapped object is owned by the caller (usually a MappedFile) and must
    stay open while this buffer is in use. Every read returns a copy, so
    nothing handed out keeps a reference into the underlying memory.
    """

    def __init__(self, data: BufferLike, name: str = "buffer"):
        """
        Args:
            data: bytes, bytearray or a read-only mmap of the whole file
            name: Label used in DecodeError messages (eg. "actordata")
        """
        if not hasattr(data, "find"):
            raise TypeError(f"Unsupported buffer type: {type(data).__name__}")
        self._data = data
        self.name = name

    def __len__(self) -> int:
        return len(self._data)

    def _check_range(self, offset: int, size: int, what: str):
        if offset < 0 or size < 0 or offset + size > len(self._data):
            raise DecodeError(
                f"{what} of {size} bytes runs outside buffer of {len(self._data)} bytes",
                offset, self.name
            )

    def read_cstring(self, offset: int) -> Tuple[bytes, int]:
        """
        Read a null-terminated string.

        Returns:
            Tuple of (raw_bytes, offset_after_terminator)
        """
        self._check_range(offset, 1, "string")
        end = self._data.find(b"\0", offset)
        if end < 0:
            raise DecodeError("string has no terminator before end of buffer", offset, self.name)
        return bytes(self._data[offset:end]), end + 1

    def _unpack(self, fmt: str, offset: int, what: str) -> int:
        self._check_range(offset, struct.calcsize(fmt), what)
        return struct.unpack_from(fmt, self._data, offset)[0]

    def read_u8(self, offset: int) -> int:
        return self._unpack(YEAR_FMT, offset, "byte")

    def read_i16(self, offset: int) -> int:
        return self._unpack(CHILD_COUNT_FMT, offset, "int16")

    def read_i32(self, offset: int) -> int:
        return self._unpack(COUNT_FMT, offset, "int32")

    def read_i32_array(self, offset: int, count: int) -> List[int]:
        """Read `count` little-endian int32 values starting at `offset`."""
        if count < 0:
            raise DecodeError(f"negative element count {count}", offset, self.name)
        if count == 0:
            return []
        self._check_range(offset, count * 4, "int32 array")
        # tolist() copies, the temporary array's export on the buffer is dropped here
        return np.frombuffer(self._data, dtype="<i4", count=count, offset=offset).tolist()
