from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

V = TypeVar("V")


@dataclass(slots=True, frozen=True, eq=False)
class Edge(Generic[V]):
    """Directed edge ``source -> target`` between two vertices of a graph.

    Endpoints are held verbatim and compared with the vertex type's own
    equality. Subclasses that carry extra data (weights, labels, ids) still
    compare on endpoints only.
    """

    source: V
    target: V

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return _same_vertex(self.source, other.source) and _same_vertex(
            self.target, other.target
        )

    def __hash__(self) -> int:
        return hash(self.source) * 31 + hash(self.target)

    @property
    def is_self_loop(self) -> bool:
        return _same_vertex(self.source, self.target)

    def reversed(self) -> Edge[V]:
        return Edge(self.target, self.source)

    @staticmethod
    def factory() -> DefaultEdgeFactory:
        return DEFAULT_EDGE_FACTORY


class DefaultEdgeFactory:
    __slots__ = ()

    def create_edge(self, v0: Any, v1: Any) -> Edge[Any]:
        return Edge(v0, v1)

    def __repr__(self) -> str:
        return "DefaultEdgeFactory()"


DEFAULT_EDGE_FACTORY = DefaultEdgeFactory()


def _same_vertex(left: Any, right: Any) -> bool:
    # Identity first, like tuple and list comparison, so a NaN vertex equals itself.
    return left is right or left == right
