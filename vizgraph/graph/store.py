"""In-memory NetworkX based storage for the graph being plotted."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Optional, Union

import networkx as nx

from .model import Edge, Vertex, Weight


def _backing_graph(directed: bool) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    return nx.MultiDiGraph() if directed else nx.MultiGraph()


@dataclass
class Graph:
    """Lightweight wrapper around a networkx multigraph.

    Nodes of the backing graph are :class:`Vertex` handles and every edge is
    keyed by its :class:`Edge` handle, so parallel edges and repeated labels
    are both supported. Vertices and edges iterate in creation order.
    """

    directed: bool = False
    graph: Union[nx.MultiDiGraph, nx.MultiGraph] = field(init=False)
    _edges: Dict[Edge, None] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.graph = _backing_graph(self.directed)

    @classmethod
    def from_networkx(cls, source: nx.Graph, *, weight: Optional[str] = "weight") -> "Graph":
        """Build a graph from any networkx graph.

        Node keys become vertex labels. When ``weight`` names an edge data
        key, its value (if present) becomes the edge weight.
        """

        graph = cls(directed=source.is_directed())
        vertices = {node: graph.create_vertex(node) for node in source.nodes}
        for start, end, data in source.edges(data=True):
            graph.create_edge(
                vertices[start],
                vertices[end],
                weight=data.get(weight) if weight else None,
            )
        return graph

    def is_directed(self) -> bool:
        return self.directed

    def create_vertex(self, vertex_id: Hashable) -> Vertex:
        """Add a new vertex labelled ``vertex_id`` and return its handle."""

        vertex = Vertex(id=vertex_id, graph=self)
        self.graph.add_node(vertex)
        return vertex

    def create_edge(self, source: Vertex, target: Vertex, *, weight: Optional[Weight] = None) -> Edge:
        """Connect ``source`` to ``target`` and return the new edge handle."""

        for vertex in (source, target):
            if vertex not in self.graph:
                raise KeyError(f"Vertex {vertex.id!r} does not belong to this graph")
        edge = Edge(source=source, target=target, weight=weight, directed=self.directed)
        self.graph.add_edge(source, target, key=edge, edge=edge)
        self._edges[edge] = None
        return edge

    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        """Return the first vertex labelled ``vertex_id``."""

        for vertex in self.graph.nodes:
            if vertex.id == vertex_id:
                return vertex
        raise KeyError(f"Unknown vertex: {vertex_id!r}")

    def vertices(self) -> Iterable[Vertex]:
        """Iterate over vertex handles."""

        return list(self.graph.nodes)

    def edges(self) -> Iterable[Edge]:
        """Iterate over edge handles."""

        return list(self._edges)

    def has_connection(self, start: Vertex, end: Vertex) -> bool:
        """Return whether any edge leads from ``start`` to ``end``."""

        if start not in self.graph or end not in self.graph:
            return False
        between = self.graph.get_edge_data(start, end) or {}
        return any(edge.connects(start, end) for edge in between)

    def remove_edge(self, edge: Edge) -> None:
        if edge not in self._edges:
            raise KeyError("Edge does not belong to this graph")
        self.graph.remove_edge(edge.source, edge.target, key=edge)
        del self._edges[edge]

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove ``vertex`` together with all of its incident edges."""

        if vertex not in self.graph:
            raise KeyError(f"Unknown vertex: {vertex.id!r}")
        for edge in [e for e in self._edges if vertex in e.endpoints()]:
            del self._edges[edge]
        self.graph.remove_node(vertex)
