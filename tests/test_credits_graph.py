from __future__ import annotations

import pytest

from core.credits_index.record_decoder import Film
from core.path_engine.credits_graph import CreditsGraph

from credits_fixtures import APOLLO_13, SMALL_WORLD


@pytest.mark.parametrize("name", sorted(SMALL_WORLD))
def test_every_film_of_an_actor_lists_that_actor_in_its_cast(
    small_world_graph: CreditsGraph, name: str
) -> None:
    films = small_world_graph.films_of(name)

    assert films is not None
    for film in films:
        assert name in small_world_graph.cast_of(film)


def test_films_of_keeps_record_order(small_world_graph: CreditsGraph) -> None:
    assert small_world_graph.films_of("Tom Hanks") == [
        Film(*APOLLO_13),
        Film("Big", 1988),
        Film("Cast Away", 2000),
    ]


def test_cast_of_lists_every_member(small_world_graph: CreditsGraph) -> None:
    assert sorted(small_world_graph.cast_of(Film(*APOLLO_13))) == [
        "Bill Paxton",
        "Kevin Bacon",
        "Tom Hanks",
    ]


def test_unknown_actor_is_distinct_from_actor_without_films(small_world_graph: CreditsGraph) -> None:
    assert small_world_graph.films_of("Nobody At All") is None
    assert small_world_graph.films_of("Uncredited") == []
    assert small_world_graph.has_actor("Uncredited")
    assert not small_world_graph.has_actor("Nobody At All")


def test_unknown_film_has_no_cast(small_world_graph: CreditsGraph) -> None:
    assert small_world_graph.cast_of(Film("Apollo 13", 1970)) is None


def test_queries_are_repeatable(small_world_graph: CreditsGraph) -> None:
    first = (small_world_graph.films_of("Helen Hunt"), small_world_graph.cast_of(Film("Twister", 1996)))
    second = (small_world_graph.films_of("Helen Hunt"), small_world_graph.cast_of(Film("Twister", 1996)))

    assert first == second
