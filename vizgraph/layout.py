"""Scoped layout attribute overrides.

Four independent attribute maps are kept: one for the graph as a whole, one
each for the default vertex and edge style, and one per individual vertex or
edge. Updates are incremental merges where a value of ``None`` removes the
key again.
"""
from __future__ import annotations

import enum
import logging
import weakref
from collections import abc
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Union

from vizgraph.graph.model import Edge, Vertex

LOGGER = logging.getLogger(__name__)

Attributes = Dict[str, object]


class Scope(enum.Enum):
    """Global layout scopes."""

    GRAPH = "graph"
    VERTEX = "node"
    EDGE = "edge"


class InvalidTargetKind(TypeError):
    """Raised when a layout target is neither a scope nor a vertex/edge."""


Target = Union[Scope, Vertex, Edge]
TargetSpec = Union[Target, Iterable[Target]]


def merge_layout(current: Attributes, delta: Optional[Mapping[str, object]]) -> None:
    """Merge ``delta`` into ``current`` in place.

    An empty or missing ``delta`` clears ``current``.
    """

    if not delta:
        current.clear()
        return
    for key, value in delta.items():
        if value is None:
            current.pop(key, None)
        else:
            current[key] = value


def _resolve_targets(target: TargetSpec) -> List[Target]:
    if isinstance(target, (Scope, Vertex, Edge)):
        return [target]
    if isinstance(target, (str, bytes)) or not isinstance(target, abc.Iterable):
        raise InvalidTargetKind(f"Invalid layout target: {target!r}")
    targets = list(target)
    for member in targets:
        if not isinstance(member, (Scope, Vertex, Edge)):
            raise InvalidTargetKind(f"Invalid layout target: {member!r}")
    return targets


@dataclass
class LayoutStore:
    """Hold graph, default vertex, default edge and per-object attributes.

    Per-object maps are keyed by handle identity. An object only has an entry
    while it carries at least one attribute.
    """

    graph_layout: Attributes = field(default_factory=dict)
    vertex_layout: Attributes = field(default_factory=dict)
    edge_layout: Attributes = field(default_factory=dict)
    object_layout: weakref.WeakKeyDictionary[Union[Vertex, Edge], Attributes] = field(
        default_factory=weakref.WeakKeyDictionary
    )

    def set_layout(self, target: TargetSpec, attributes: Optional[Mapping[str, object]] = None) -> "LayoutStore":
        """Merge ``attributes`` into every scope or object named by ``target``.

        ``target`` is a :class:`Scope`, a vertex, an edge or an iterable of
        those. Every member is validated before anything is changed.
        """

        targets = _resolve_targets(target)
        for item in targets:
            if item is Scope.GRAPH:
                merge_layout(self.graph_layout, attributes)
            elif item is Scope.VERTEX:
                merge_layout(self.vertex_layout, attributes)
            elif item is Scope.EDGE:
                merge_layout(self.edge_layout, attributes)
            else:
                current = dict(self.object_layout.get(item, {}))
                merge_layout(current, attributes)
                if current:
                    self.object_layout[item] = current
                else:
                    self.object_layout.pop(item, None)
        LOGGER.debug("Applied layout %r to %d target(s)", attributes, len(targets))
        return self

    def set_attribute(self, target: TargetSpec, name: str, value: object) -> "LayoutStore":
        """Shorthand for setting (or removing, with ``None``) a single key."""

        return self.set_layout(target, {name: value})

    @property
    def graph_attributes(self) -> Attributes:
        return dict(self.graph_layout)

    @property
    def vertex_attributes(self) -> Attributes:
        return dict(self.vertex_layout)

    @property
    def edge_attributes(self) -> Attributes:
        return dict(self.edge_layout)

    def attributes_of(self, obj: Union[Vertex, Edge]) -> Attributes:
        """Return a copy of the attributes set on ``obj`` alone."""

        return dict(self.object_layout.get(obj, {}))

    def has_layout(self, obj: Union[Vertex, Edge]) -> bool:
        return obj in self.object_layout

    def discard(self, obj: Union[Vertex, Edge]) -> None:
        """Forget any attributes stored for ``obj``."""

        self.object_layout.pop(obj, None)
