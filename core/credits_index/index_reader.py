# core/credits_index/index_reader.py
"""
Binary search over the sorted offset table at the head of a credits file.
"""
import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar
from .record_buffer import RecordBuffer, DecodeError
from .record_decoder import Film, decode_actor_name, decode_film, encode_key
from .record_format import OFFSET_SIZE, OFFSET_TABLE_START, offset_table_entry

logger = logging.getLogger(__name__)

K = TypeVar("K")

def read_record_count(buffer: RecordBuffer) -> int:
    """
    Read the record count N from the file header and check the offset table fits.

    Raises:
        DecodeError: if N is negative or the table would run past the buffer
    """
    count = buffer.read_i32(0)
    if count < 0:
        raise DecodeError(f"negative record count {count}", 0, buffer.name)
    table_end = OFFSET_TABLE_START + count * OFFSET_SIZE
    if table_end > len(buffer):
        raise DecodeError(
            f"offset table for {count:,} records needs {table_end:,} bytes, "
            f"buffer has {len(buffer):,}",
            0, buffer.name
        )
    return count

class RecordIndex(Generic[K]):
    """
    Sorted-key lookup over one credits file.

    Keys are materialized on demand by `decode_key`; each probe costs one
    record decode, so a lookup performs O(log N) decodes plus one to confirm.
    """

    def __init__(self, buffer: RecordBuffer, decode_key: Callable[[RecordBuffer, int], K]):
        self.buffer = buffer
        self.decode_key = decode_key
        self.total_entries = read_record_count(buffer)

    def offset_at(self, entry_idx: int) -> int:
        """Record offset stored in the entry_idx-th slot of the offset table."""
        if not 0 <= entry_idx < self.total_entries:
            raise IndexError(f"Entry index {entry_idx} out of bounds")
        return self.buffer.read_i32(offset_table_entry(entry_idx))

    def key_at(self, entry_idx: int) -> K:
        return self.decode_key(self.buffer, self.offset_at(entry_idx))

    def _lower_bound(self, target: K) -> int:
        left = 0
        right = self.total_entries
        while left < right:
            mid = (left + right) // 2
            if self.key_at(mid) < target:
                left = mid + 1
            else:
                right = mid
        return left

    def find(self, target: K) -> Optional[int]:
        """
        Find the record whose key equals `target`.

        Returns:
            Offset of the matching record, or None if no record has that key
        """
        idx = self._lower_bound(target)
        if idx == self.total_entries:
            return None
        offset = self.offset_at(idx)
        if self.decode_key(self.buffer, offset) != target:
            return None
        return offset

    def __len__(self) -> int:
        return self.total_entries

    def iter_keys(self) -> Iterator[K]:
        """Yield every key in file order (sorted, if the file is well-formed)."""
        for idx in range(self.total_entries):
            yield self.key_at(idx)

def actor_index(buffer: RecordBuffer) -> "RecordIndex[str]":
    return RecordIndex(buffer, decode_actor_name)

def film_index(buffer: RecordBuffer) -> "RecordIndex[Film]":
    return RecordIndex(buffer, decode_film)

def _storable(text: str) -> bool:
    try:
        encode_key(text)
    except UnicodeEncodeError:
        logger.debug(f"{text!r} has characters the index cannot store")
        return False
    return True

def lookup_actor(index: "RecordIndex[str]", name: str) -> Optional[int]:
    """Offset of the actor record named exactly `name`, or None."""
    if not _storable(name):
        return None
    return index.find(name)

def lookup_film(index: "RecordIndex[Film]", film: Film) -> Optional[int]:
    """Offset of the film record with exactly this (title, year), or None."""
    if not _storable(film.title):
        return None
    return index.find(film)

def find_actor(buffer: RecordBuffer, name: str) -> Optional[int]:
    return lookup_actor(actor_index(buffer), name)

def find_film(buffer: RecordBuffer, film: Film) -> Optional[int]:
    return lookup_film(film_index(buffer), film)
