from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Any

from viewgraph.edge import Edge


@dataclass(slots=True, frozen=True, eq=False)
class NumberedEdge(Edge[Any]):
    # Bookkeeping only; equality and hashing stay on the endpoints.
    id: int = field(default=0, compare=False)


class SequentialEdgeFactory:
    """Edge factory that stamps each edge with the next id in sequence."""

    def __init__(self, start: int = 0):
        self._lock = RLock()
        self._start = start
        self._next_id = start

    @property
    def issued(self) -> int:
        with self._lock:
            return self._next_id - self._start

    def create_edge(self, v0: Any, v1: Any) -> NumberedEdge:
        with self._lock:
            edge_id = self._next_id
            self._next_id += 1
        return NumberedEdge(v0, v1, edge_id)
