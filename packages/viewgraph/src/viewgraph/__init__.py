from viewgraph.edge import DEFAULT_EDGE_FACTORY, DefaultEdgeFactory, Edge
from viewgraph.factory import CallableEdgeFactory, EdgeFactory, as_edge_factory
from viewgraph.numbered import NumberedEdge, SequentialEdgeFactory

__all__ = [
    "DEFAULT_EDGE_FACTORY",
    "CallableEdgeFactory",
    "DefaultEdgeFactory",
    "Edge",
    "EdgeFactory",
    "NumberedEdge",
    "SequentialEdgeFactory",
    "as_edge_factory",
]
