from __future__ import annotations

import struct
from pathlib import Path

from core.utilities.setup_validator import is_setup_complete, validate_credits_files

from credits_fixtures import build_credits, write_credits


def test_valid_files_report_counts(small_world_dir: Path) -> None:
    is_valid, message = validate_credits_files(small_world_dir)

    assert is_valid
    assert "8 actors" in message
    assert "6 films" in message
    assert is_setup_complete(small_world_dir)


def test_missing_directory_is_reported(tmp_path: Path) -> None:
    is_valid, message = validate_credits_files(tmp_path / "missing")

    assert not is_valid
    assert "not found" in message
    assert not is_setup_complete(tmp_path / "missing")


def test_truncated_header_is_reported(tmp_path: Path, small_world_bytes) -> None:
    data_dir = write_credits(tmp_path / "short", b"\x01\x00", small_world_bytes[1])

    is_valid, message = validate_credits_files(data_dir)

    assert not is_valid
    assert "too small" in message


def test_offset_table_overflow_is_reported(tmp_path: Path, small_world_bytes) -> None:
    data_dir = write_credits(tmp_path / "overflow", small_world_bytes[0], struct.pack("<ii", 50, 8))

    is_valid, message = validate_credits_files(data_dir)

    assert not is_valid
    assert "moviedata" in message


def test_unsorted_offset_table_is_reported(tmp_path: Path) -> None:
    actor_data, movie_data = build_credits(
        {"Ann": [("Film", 2000)], "Bob": [("Film", 2000)], "Cat": [("Film", 2000)]}
    )
    actor_data = bytearray(actor_data)
    first, last = struct.unpack_from("<i", actor_data, 4)[0], struct.unpack_from("<i", actor_data, 12)[0]
    struct.pack_into("<i", actor_data, 4, last)
    struct.pack_into("<i", actor_data, 12, first)
    data_dir = write_credits(tmp_path / "unsorted", bytes(actor_data), movie_data)

    is_valid, message = validate_credits_files(data_dir)

    assert not is_valid
    assert "not sorted" in message
    assert validate_credits_files(data_dir, sample_sorting=False)[0]
