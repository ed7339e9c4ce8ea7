# core/utilities/setup_validator.py
"""
Credits file validation utilities for Six Degrees.
Checks the actordata/moviedata pair before a search is attempted.
"""
from typing import Tuple
from config import PathConfig
from core.credits_index.file_mapper import MappedFile
from core.credits_index.index_reader import RecordIndex, read_record_count
from core.credits_index.record_buffer import DecodeError
from core.credits_index.record_decoder import decode_actor_name, decode_film
from core.credits_index.record_format import COUNT_SIZE

def _validate_file(path, decode_key, sample_sorting: bool) -> Tuple[bool, str, int]:
    if not path.exists():
        return False, f"Credits file not found: {path}", 0

    file_size = path.stat().st_size
    if file_size < COUNT_SIZE:
        return False, f"Credits file too small: {path.name} ({file_size} bytes)", 0

    try:
        with MappedFile(path) as mapped:
            buffer = mapped.buffer()
            count = read_record_count(buffer)
            if not sample_sorting or count == 0:
                return True, "", count

            # Check 3 samples: start, middle, end
            index = RecordIndex(buffer, decode_key)
            sample_positions = sorted({0, count // 2, count - 1})
            keys = [index.key_at(pos) for pos in sample_positions]
            for pos, previous, current in zip(sample_positions[1:], keys, keys[1:]):
                if current < previous:
                    return False, f"{path.name} not sorted at position {pos}: {current} < {previous}", count
            return True, "", count
    except (OSError, DecodeError) as e:
        return False, f"Cannot read {path.name}: {e}", 0

def validate_credits_files(data_dir=None, sample_sorting: bool = True) -> Tuple[bool, str]:
    """
    Validate the actordata/moviedata pair.

    Args:
        data_dir: Directory holding the files (default: PathConfig)
        sample_sorting: If True, also decodes a few records and checks their order.
                        If False, only checks headers (fast).

    Returns:
        Tuple of (is_valid, message)
    """
    actor_ok, actor_msg, num_actors = _validate_file(
        PathConfig.get_actor_file(data_dir), decode_actor_name, sample_sorting
    )
    if not actor_ok:
        return False, actor_msg

    movie_ok, movie_msg, num_films = _validate_file(
        PathConfig.get_movie_file(data_dir), decode_film, sample_sorting
    )
    if not movie_ok:
        return False, movie_msg

    return True, f"Valid credits files with {num_actors:,} actors and {num_films:,} films"

def is_setup_complete(data_dir=None) -> bool:
    """Quick check that both credits files exist."""
    return all(path.exists() for path in PathConfig.get_all_required_files(data_dir))
