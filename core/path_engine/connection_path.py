# core/path_engine/connection_path.py
from dataclasses import dataclass
from typing import List, Tuple
from core.credits_index.record_decoder import Film

@dataclass(frozen=True)
class Connection:
    """One hop: the film shared with the previous actor, and the actor reached."""
    film: Film
    actor: str

@dataclass(frozen=True)
class ConnectionPath:
    """
    Chain of co-appearances from `start` to `last_actor`.

    Immutable: extending a path returns a new one, so paths queued by the
    search never share mutable state.
    """
    start: str
    connections: Tuple[Connection, ...] = ()

    def extended(self, film: Film, actor: str) -> "ConnectionPath":
        return ConnectionPath(self.start, self.connections + (Connection(film, actor),))

    @property
    def last_actor(self) -> str:
        return self.connections[-1].actor if self.connections else self.start

    @property
    def hops(self) -> int:
        return len(self.connections)

    @property
    def actors(self) -> List[str]:
        return [self.start] + [c.actor for c in self.connections]

    @property
    def films(self) -> List[Film]:
        return [c.film for c in self.connections]

    def to_sequence(self) -> list:
        """Flatten to [start, (film, actor), (film, actor), ...]."""
        return [self.start] + [(c.film, c.actor) for c in self.connections]

    def __len__(self) -> int:
        return 1 + self.hops

    def __str__(self) -> str:
        if not self.connections:
            return f"{self.start} is {self.start}."
        lines = []
        previous = self.start
        for connection in self.connections:
            lines.append(f"{previous} was in {connection.film} with {connection.actor}.")
            previous = connection.actor
        return "\n".join(lines)
