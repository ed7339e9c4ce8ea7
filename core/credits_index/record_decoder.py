# core/credits_index/record_decoder.py
"""
Decode actor and film records from the credits files.
Pure parsing: no lookups, no knowledge of the search.
"""
from dataclasses import dataclass
from typing import Callable, List, Tuple
from config import RECORD_ENCODING, YEAR_BASE
from .record_buffer import RecordBuffer, DecodeError
from .record_format import actor_offsets_start, film_offsets_start

@dataclass(frozen=True, order=True)
class Film:
    """A film as identified in the index. Ordered and compared by (title, year)."""
    title: str
    year: int

    def __str__(self) -> str:
        return f'"{self.title}" ({self.year})'

def _text(raw: bytes) -> str:
    return raw.decode(RECORD_ENCODING)

def encode_key(text: str) -> bytes:
    """Encode a query string the way names are stored. Raises UnicodeEncodeError."""
    return text.encode(RECORD_ENCODING)

def decode_actor_name(buffer: RecordBuffer, offset: int) -> str:
    name, _ = buffer.read_cstring(offset)
    return _text(name)

def decode_film(buffer: RecordBuffer, offset: int) -> Film:
    """
    Decode the (title, year) key of the film record at `offset`.

    The byte after the title's terminator holds year - 1900 as an unsigned
    value, so any byte decodes to a year between 1900 and 2155.
    """
    title, year_at = buffer.read_cstring(offset)
    raw_year = buffer.read_u8(year_at)
    return Film(_text(title), YEAR_BASE + raw_year)

def _child_offsets(buffer: RecordBuffer, offset: int, key_length: int,
                   locate: Callable[[int], Tuple[int, int]]) -> List[int]:
    count_at, offsets_at = locate(key_length)
    count = buffer.read_i16(offset + count_at)
    if count < 0:
        raise DecodeError(f"negative child count {count}", offset, buffer.name)
    return buffer.read_i32_array(offset + offsets_at, count)

def decode_actor_child_offsets(buffer: RecordBuffer, offset: int) -> List[int]:
    """Offsets into moviedata of every film the actor at `offset` appears in."""
    name, _ = buffer.read_cstring(offset)
    return _child_offsets(buffer, offset, len(name), actor_offsets_start)

def decode_film_child_offsets(buffer: RecordBuffer, offset: int) -> List[int]:
    """Offsets into actordata of every cast member of the film at `offset`."""
    title, _ = buffer.read_cstring(offset)
    return _child_offsets(buffer, offset, len(title), film_offsets_start)
