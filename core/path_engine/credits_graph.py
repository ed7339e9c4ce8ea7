# core/path_engine/credits_graph.py
"""
Bipartite actor <-> film graph view over the two credits files.
"""
from typing import List, Optional
from core.credits_index.record_buffer import RecordBuffer
from core.credits_index.record_decoder import (
    Film,
    decode_actor_name,
    decode_film,
    decode_actor_child_offsets,
    decode_film_child_offsets,
)
from core.credits_index.index_reader import actor_index, film_index, lookup_actor, lookup_film

class CreditsGraph:
    """
    Neighbour queries for the shortest-path search.

    Every call reads straight from the buffers: no caching, no state beyond
    the two indices, so calls are idempotent and may be made in any order.
    Decode faults surface as DecodeError; unknown keys return None.
    """

    def __init__(self, actor_buffer: RecordBuffer, movie_buffer: RecordBuffer):
        """
        Raises:
            DecodeError: if either file header is unreadable
        """
        self.actor_buffer = actor_buffer
        self.movie_buffer = movie_buffer
        self.actors = actor_index(actor_buffer)
        self.films = film_index(movie_buffer)

    def has_actor(self, name: str) -> bool:
        return lookup_actor(self.actors, name) is not None

    def films_of(self, actor_name: str) -> Optional[List[Film]]:
        """
        Films the actor appears in, in record order.

        Returns:
            List of films ([] for a known actor with no credits),
            or None if the actor is not in the index
        """
        offset = lookup_actor(self.actors, actor_name)
        if offset is None:
            return None
        return [
            decode_film(self.movie_buffer, film_offset)
            for film_offset in decode_actor_child_offsets(self.actor_buffer, offset)
        ]

    def cast_of(self, film: Film) -> Optional[List[str]]:
        """
        Cast of the film, in record order.

        Returns:
            List of actor names, or None if the film is not in the index
        """
        offset = lookup_film(self.films, film)
        if offset is None:
            return None
        return [
            decode_actor_name(self.actor_buffer, actor_offset)
            for actor_offset in decode_film_child_offsets(self.movie_buffer, offset)
        ]
