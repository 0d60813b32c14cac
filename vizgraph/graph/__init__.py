"""Graph subpackage containing the vertex/edge handles and the graph wrapper."""

from .model import Edge, Vertex
from .store import Graph

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
]
