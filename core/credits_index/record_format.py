# core/credits_index/record_format.py
"""
Credits Index Format Specifications
===================================

This module documents the binary format of the two credit files read by the
shortest-path search, and holds the padding rules that locate the fields
inside a record. The files are produced by an external build step; this
package only reads them.

The index consists of two files in data/:
1. actordata - Actor records, sorted by name, pointing into moviedata
2. moviedata - Film records, sorted by (title, year), pointing into actordata


File Structure (both files)
---------------------------

[Header: 4 + 4*N bytes]
    Offset  Type      Description
    0       int32     Number of records N
    4       int32[N]  Byte offset of each record, sorted by record key

The offsets are relative to the start of the file. The reader trusts the
sort order and never verifies it; binary search depends on it.


Actor Record (actordata)
------------------------

    Field           Type        Notes
    name            char[]      Null-terminated
    (padding)       0-1 bytes   Pads to an even offset
    film_count      int16       Number of films C
    (padding)       0-2 bytes   Pads to a 4-byte aligned offset
    films           int32[C]    Offsets of film records in moviedata

Example: "Kevin Bacon" is 11 chars + null = 12 bytes (already even),
film_count sits at 12..14, padding to 16, film offsets start at 16.


Film Record (moviedata)
-----------------------

    Field           Type        Notes
    title           char[]      Null-terminated
    year            uint8       Release year minus 1900 (1900-2155)
    (padding)       0-1 bytes   Pads to an even offset
    cast_count      int16       Number of cast members K
    (padding)       0-2 bytes   Pads to a 4-byte aligned offset
    cast            int32[K]    Offsets of actor records in actordata

Example: "Apollo 13" is 9 chars + null + year byte = 11 bytes, padded
to 12, cast_count sits at 12..14, padding to 16, cast offsets start at 16.


Alignment Properties
--------------------

- Padding is computed relative to the start of the record, not the file.
- All integers are little-endian and signed, the year byte is unsigned.
- Names and titles are single-byte strings (see RECORD_ENCODING in config.py).
"""
import struct
from typing import Tuple

COUNT_FMT = "<i"
OFFSET_FMT = "<i"
CHILD_COUNT_FMT = "<h"
YEAR_FMT = "<B"

COUNT_SIZE = struct.calcsize(COUNT_FMT)              # 4 bytes
OFFSET_SIZE = struct.calcsize(OFFSET_FMT)            # 4 bytes
CHILD_COUNT_SIZE = struct.calcsize(CHILD_COUNT_FMT)  # 2 bytes
YEAR_SIZE = struct.calcsize(YEAR_FMT)                # 1 byte

OFFSET_TABLE_START = COUNT_SIZE

def pad_to_even(length: int) -> int:
    """Round a record-relative length up to the next even number."""
    return length + (length % 2)

def pad_to_word(length: int) -> int:
    """Round a record-relative length up to the next multiple of 4."""
    return (length + 3) & ~3

def _offsets_start(key_length: int) -> Tuple[int, int]:
    count_at = pad_to_even(key_length)
    return count_at, pad_to_word(count_at + CHILD_COUNT_SIZE)

def actor_offsets_start(name_length: int) -> Tuple[int, int]:
    """
    Locate the variable fields of an actor record.

    Args:
        name_length: Length of the name in bytes, without its terminator

    Returns:
        Tuple of (count_position, offsets_position), relative to the record start
    """
    return _offsets_start(name_length + 1)

def film_offsets_start(title_length: int) -> Tuple[int, int]:
    """
    Locate the variable fields of a film record.

    Args:
        title_length: Length of the title in bytes, without its terminator

    Returns:
        Tuple of (count_position, offsets_position), relative to the record start
    """
    return _offsets_start(title_length + 1 + YEAR_SIZE)

def offset_table_entry(index: int) -> int:
    """Byte position of the index-th entry of a file's offset table."""
    return OFFSET_TABLE_START + index * OFFSET_SIZE
