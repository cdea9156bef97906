"""Edge factories: the capability a directed graph uses to materialize edges."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from viewgraph.edge import DEFAULT_EDGE_FACTORY

V = TypeVar("V")
E = TypeVar("E")
V_contra = TypeVar("V_contra", contravariant=True)
E_co = TypeVar("E_co", covariant=True)


@runtime_checkable
class EdgeFactory(Protocol[V_contra, E_co]):
    """Creates an edge from ``v0`` (source) to ``v1`` (target)."""

    def create_edge(self, v0: V_contra, v1: V_contra) -> E_co: ...


class CallableEdgeFactory(Generic[V, E]):
    """Adapts a plain ``(source, target) -> edge`` callable into a factory."""

    __slots__ = ("_build",)

    def __init__(self, build: Callable[[V, V], E]):
        if not callable(build):
            raise TypeError(f"Edge builder must be callable, got {build!r}")
        self._build = build

    def create_edge(self, v0: V, v1: V) -> E:
        return self._build(v0, v1)

    def __repr__(self) -> str:
        return f"CallableEdgeFactory({self._build!r})"


def as_edge_factory(candidate: Any = None) -> EdgeFactory[Any, Any]:
    """Returns an edge factory for a factory instance, a builder callable, or None."""
    if candidate is None:
        return DEFAULT_EDGE_FACTORY
    if isinstance(candidate, type) and hasattr(candidate, "create_edge"):
        raise TypeError(
            f"Expected an edge factory instance, got the class {candidate.__name__!r}"
        )
    if isinstance(candidate, EdgeFactory):
        return candidate
    if callable(candidate):
        return CallableEdgeFactory(candidate)
    raise TypeError(f"Unsupported edge factory: {candidate!r}")
