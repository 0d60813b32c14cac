"""GraphViz DOT script generation.

The script is built in a single pass over the graph:

* header (``graph G {`` or ``digraph G {``),
* the ``graph``, ``node`` and ``edge`` default statements when set,
* one line per vertex that is isolated or carries its own attributes,
* one line per edge,
* the closing brace.

Vertices that only appear as edge endpoints are left implicit because DOT
creates them from the edge statements.
"""
from __future__ import annotations

import logging
import os
import re
from typing import List, Mapping

from vizgraph.graph.store import Graph
from vizgraph.layout import LayoutStore, Scope

LOGGER = logging.getLogger(__name__)

# numeral or simple identifier, both valid as unquoted DOT IDs
_BARE_ID = re.compile(r"-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]+)?)|[a-z_][a-z0-9_]*", re.IGNORECASE | re.ASCII)

# ``&`` first so the entities inserted afterwards are not escaped twice
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("\\", "\\\\"),
)


def format_value(value: object) -> str:
    """Return the textual form of a scalar id or attribute value.

    Booleans become the DOT keywords ``true``/``false`` rather than the
    ``1``/empty string a plain string cast would give. Integral floats lose
    their trailing ``.0``.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_id(value: object) -> str:
    """Return ``value`` as a DOT ID, quoting and escaping it when needed."""

    text = format_value(value)
    if _BARE_ID.fullmatch(text):
        return text
    for old, new in _REPLACEMENTS:
        text = text.replace(old, new)
    return f'"{text}"'


def escape_attributes(attributes: Mapping[str, object]) -> str:
    """Return ``[key=value ...]`` for ``attributes`` in insertion order.

    Values are escaped with :func:`escape_id`; names are emitted verbatim.
    """

    pairs = " ".join(f"{name}={escape_id(value)}" for name, value in attributes.items())
    return f"[{pairs}]"


def create_script(graph: Graph, layout: LayoutStore, *, eol: str = os.linesep) -> str:
    """Return the DOT script describing ``graph`` styled by ``layout``."""

    directed = graph.is_directed()
    lines: List[str] = [f"{'digraph' if directed else 'graph'} G {{"]

    for scope, attributes in (
        (Scope.GRAPH, layout.graph_attributes),
        (Scope.VERTEX, layout.vertex_attributes),
        (Scope.EDGE, layout.edge_attributes),
    ):
        if attributes:
            lines.append(f"  {scope.value} {escape_attributes(attributes)}")

    for vertex in graph.vertices():
        if not (vertex.is_isolated() or layout.has_layout(vertex)):
            continue
        line = f"  {escape_id(vertex.id)}"
        if layout.has_layout(vertex):
            line += f" {escape_attributes(layout.attributes_of(vertex))}"
        lines.append(line)

    connector = " -> " if directed else " -- "
    for edge in graph.edges():
        source, target = edge.endpoints()
        line = f"  {escape_id(source.id)}{connector}{escape_id(target.id)}"

        attributes = layout.attributes_of(edge)
        if edge.weight is not None:
            attributes["label"] = edge.weight
        # opposite edge exists, so draw the pair as one undirected line
        if directed and graph.has_connection(target, source):
            attributes["dir"] = "none"
        if attributes:
            line += f" {escape_attributes(attributes)}"
        lines.append(line)

    lines.append("}")
    LOGGER.debug("Created script with %d lines", len(lines))
    return "".join(line + eol for line in lines)
