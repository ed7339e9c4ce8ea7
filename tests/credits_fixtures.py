"""Serialize small synthetic datasets into the actordata/moviedata layout for tests."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

FilmKey = Tuple[str, int]

ENCODING = "latin-1"


def actor_record(name: str, film_offsets: Sequence[int]) -> bytes:
    body = bytearray(name.encode(ENCODING) + b"\0")
    if len(body) % 2:
        body += b"\0"
    body += struct.pack("<h", len(film_offsets))
    if len(body) % 4:
        body += b"\0\0"
    body += struct.pack(f"<{len(film_offsets)}i", *film_offsets)
    return bytes(body)


def film_record(title: str, year: int, cast_offsets: Sequence[int]) -> bytes:
    body = bytearray(title.encode(ENCODING) + b"\0" + bytes([year - 1900]))
    if len(body) % 2:
        body += b"\0"
    body += struct.pack("<h", len(cast_offsets))
    if len(body) % 4:
        body += b"\0\0"
    body += struct.pack(f"<{len(cast_offsets)}i", *cast_offsets)
    return bytes(body)


def _layout(records: List[bytes]) -> Tuple[List[int], int]:
    """Place records after the header, each starting on a 4-byte boundary."""
    position = 4 + 4 * len(records)
    offsets = []
    for record in records:
        offsets.append(position)
        position += len(record)
        position += -position % 4
    return offsets, position


def _assemble(records: List[bytes], offsets: List[int], size: int) -> bytes:
    data = bytearray(size)
    struct.pack_into("<i", data, 0, len(records))
    for i, (offset, record) in enumerate(zip(offsets, records)):
        struct.pack_into("<i", data, 4 + 4 * i, offset)
        data[offset:offset + len(record)] = record
    return bytes(data)


def build_credits(
    credits: Dict[str, Sequence[FilmKey]],
    extra_films: Iterable[FilmKey] = (),
) -> Tuple[bytes, bytes]:
    """
    Build (actordata, moviedata) bytes.

    `credits` maps each actor to their films in record order. A film's cast is
    listed in the order actors appear in `credits`.
    """
    actor_names = sorted(credits)
    films = sorted({film for films in credits.values() for film in films} | set(extra_films))

    casts: Dict[FilmKey, List[str]] = {film: [] for film in films}
    for name, actor_films in credits.items():
        for film in actor_films:
            casts[film].append(name)

    # Record sizes do not depend on offset values, so lay out with placeholders first.
    actor_offsets, actor_size = _layout(
        [actor_record(name, [0] * len(credits[name])) for name in actor_names]
    )
    film_offsets, film_size = _layout(
        [film_record(title, year, [0] * len(casts[(title, year)])) for title, year in films]
    )
    actor_at = dict(zip(actor_names, actor_offsets))
    film_at = dict(zip(films, film_offsets))

    actor_records = [
        actor_record(name, [film_at[film] for film in credits[name]]) for name in actor_names
    ]
    film_records = [
        film_record(title, year, [actor_at[name] for name in casts[(title, year)]])
        for title, year in films
    ]
    return (
        _assemble(actor_records, actor_offsets, actor_size),
        _assemble(film_records, film_offsets, film_size),
    )


def write_credits(directory: Path, actor_data: bytes, movie_data: bytes) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "actordata").write_bytes(actor_data)
    (directory / "moviedata").write_bytes(movie_data)
    return directory


APOLLO_13 = ("Apollo 13", 1995)

SMALL_WORLD: Dict[str, Sequence[FilmKey]] = {
    "Kevin Bacon": [APOLLO_13, ("Footloose", 1984)],
    "Tom Hanks": [APOLLO_13, ("Big", 1988), ("Cast Away", 2000)],
    "Bill Paxton": [APOLLO_13, ("Twister", 1996)],
    "Helen Hunt": [("Twister", 1996), ("Cast Away", 2000)],
    "Lori Singer": [("Footloose", 1984)],
    "Elizabeth Perkins": [("Big", 1988)],
    "Loner": [("Solo Show", 2010)],
    "Uncredited": [],
}
