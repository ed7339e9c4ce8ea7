"""
Credits Index Package
"""
from .record_buffer import RecordBuffer, DecodeError
from .record_decoder import (
    Film,
    decode_film,
    decode_actor_name,
    decode_actor_child_offsets,
    decode_film_child_offsets
)
from .index_reader import RecordIndex, find_actor, find_film, read_record_count
from .file_mapper import MappedFile, CreditsFiles

__all__ = [
    'RecordBuffer',
    'DecodeError',
    'Film',
    'decode_film',
    'decode_actor_name',
    'decode_actor_child_offsets',
    'decode_film_child_offsets',
    'RecordIndex',
    'find_actor',
    'find_film',
    'read_record_count',
    'MappedFile',
    'CreditsFiles'
]
