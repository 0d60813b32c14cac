"""Vertex and edge handles stored in a :class:`~vizgraph.graph.store.Graph`."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Hashable, Optional, Union

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .store import Graph

Weight = Union[int, float]


@dataclass(eq=False)
class Vertex:
    """A vertex compared by identity, not by its ``id`` label.

    The label may be changed at any time; layout overrides are attached to
    the handle itself and therefore survive a rename.
    """

    id: Hashable
    graph: "Graph" = field(repr=False)

    def is_isolated(self) -> bool:
        """Return ``True`` when no edge touches this vertex."""

        return self.graph.graph.degree(self) == 0


@dataclass(eq=False)
class Edge:
    """An edge between two vertices with an optional numeric weight."""

    source: Vertex
    target: Vertex
    weight: Optional[Weight] = None
    directed: bool = True

    def endpoints(self) -> tuple[Vertex, Vertex]:
        return self.source, self.target

    def connects(self, start: Vertex, end: Vertex) -> bool:
        """Return whether this edge leads from ``start`` to ``end``."""

        if self.source is start and self.target is end:
            return True
        if not self.directed:
            return self.source is end and self.target is start
        return False
