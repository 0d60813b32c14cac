"""Tests for :mod:`vizgraph.script`."""

from __future__ import annotations

import os

import pytest

from vizgraph.graph.store import Graph
from vizgraph.layout import LayoutStore, Scope
from vizgraph.script import create_script, escape_attributes, escape_id, format_value


def script_lines(graph, layout):
    return create_script(graph, layout, eol="\n").splitlines()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("foo", "foo"),
        ("_a1", "_a1"),
        ("Foo_Bar", "Foo_Bar"),
        (12, "12"),
        ("-3.25", "-3.25"),
        (".5", ".5"),
        ("foo bar", '"foo bar"'),
        ('a"b', '"a&quot;b"'),
        ("1abc", '"1abc"'),
        ("a&b<c>d'e", '"a&amp;b&lt;c&gt;d&apos;e"'),
        ("back\\slash", '"back\\\\slash"'),
        ("", '""'),
        ("ä", '"ä"'),
        ("a\n", '"a\n"'),
    ],
)
def test_escape_id(value, expected):
    assert escape_id(value) == expected


def test_escape_id_does_not_double_escape_ampersand_entities():
    assert escape_id("&lt;") == '"&amp;lt;"'


def test_format_value_scalars():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(2.0) == "2"
    assert format_value(3.5) == "3.5"
    assert format_value(7) == "7"


def test_escape_attributes_keeps_insertion_order():
    assert escape_attributes({"shape": "box", "label": "a b", "width": 2}) == '[shape=box label="a b" width=2]'
    assert escape_attributes({"color": "red"}) == "[color=red]"


def test_header_depends_on_directedness():
    assert script_lines(Graph(directed=True), LayoutStore()) == ["digraph G {", "}"]
    assert script_lines(Graph(directed=False), LayoutStore()) == ["graph G {", "}"]


def test_global_statements_are_emitted_in_fixed_order():
    layout = LayoutStore()
    layout.set_layout(Scope.EDGE, {"color": "grey"})
    layout.set_layout(Scope.VERTEX, {"shape": "box"})
    layout.set_layout(Scope.GRAPH, {"bgcolor": "transparent"})

    assert script_lines(Graph(), layout) == [
        "graph G {",
        "  graph [bgcolor=transparent]",
        "  node [shape=box]",
        "  edge [color=grey]",
        "}",
    ]


def test_isolated_and_styled_vertices_are_declared():
    graph = Graph()
    plain = graph.create_vertex("plain")
    styled = graph.create_vertex("styled")
    lonely = graph.create_vertex("lonely")
    other = graph.create_vertex("other")
    graph.create_edge(plain, other)
    graph.create_edge(styled, other)
    layout = LayoutStore().set_layout(styled, {"color": "red"})

    lines = script_lines(graph, layout)

    assert lines == [
        "graph G {",
        "  styled [color=red]",
        "  lonely",
        "  plain -- other",
        "  styled -- other",
        "}",
    ]
    assert "  plain" not in lines


def test_cleared_vertex_layout_is_not_declared():
    graph = Graph()
    a = graph.create_vertex("a")
    b = graph.create_vertex("b")
    graph.create_edge(a, b)
    layout = LayoutStore().set_layout(a, {"color": "red"})
    layout.set_layout(a, {"color": None})

    assert script_lines(graph, layout) == ["graph G {", "  a -- b", "}"]


def test_edge_weight_becomes_label():
    graph = Graph(directed=True)
    a = graph.create_vertex("a")
    b = graph.create_vertex("b")
    graph.create_edge(a, b, weight=3.5)

    assert script_lines(graph, LayoutStore())[1] == "  a -> b [label=3.5]"


def test_weight_overrides_label_without_touching_store():
    graph = Graph()
    a = graph.create_vertex("a")
    b = graph.create_vertex("b")
    edge = graph.create_edge(a, b, weight=4)
    layout = LayoutStore().set_layout(edge, {"label": "custom", "color": "blue"})

    assert script_lines(graph, layout)[1] == "  a -- b [label=4 color=blue]"
    assert layout.attributes_of(edge) == {"label": "custom", "color": "blue"}


def test_opposite_directed_edges_collapse():
    graph = Graph(directed=True)
    a = graph.create_vertex("A")
    b = graph.create_vertex("B")
    c = graph.create_vertex("C")
    forward = graph.create_edge(a, b, weight=1)
    graph.create_edge(b, a, weight=2)
    graph.create_edge(b, c)
    layout = LayoutStore().set_layout(forward, {"dir": "back"})

    assert script_lines(graph, layout) == [
        "digraph G {",
        "  A -> B [dir=none label=1]",
        "  B -> A [label=2 dir=none]",
        "  B -> C",
        "}",
    ]


def test_undirected_graph_never_sets_dir():
    graph = Graph()
    a = graph.create_vertex("a")
    b = graph.create_vertex("b")
    graph.create_edge(a, b)
    graph.create_edge(b, a)

    assert all("dir=" not in line for line in script_lines(graph, LayoutStore()))


def test_identifiers_and_values_are_escaped():
    graph = Graph(directed=True)
    a = graph.create_vertex("first node")
    b = graph.create_vertex('say "hi"')
    graph.create_edge(a, b)
    layout = LayoutStore().set_layout(a, {"label": "<b>"})

    assert script_lines(graph, layout) == [
        "digraph G {",
        '  "first node" [label="&lt;b&gt;"]',
        '  "first node" -> "say &quot;hi&quot;"',
        "}",
    ]


def test_line_ending_is_appended_to_every_line():
    graph = Graph()
    graph.create_vertex("a")

    assert create_script(graph, LayoutStore(), eol="\r\n") == "graph G {\r\n  a\r\n}\r\n"
    assert create_script(graph, LayoutStore()) == os.linesep.join(["graph G {", "  a", "}", ""])


def test_script_is_deterministic():
    graph = Graph(directed=True)
    vertices = [graph.create_vertex(name) for name in ("p", "q", "r", "s")]
    graph.create_edge(vertices[0], vertices[1], weight=2)
    graph.create_edge(vertices[1], vertices[0])
    layout = LayoutStore()
    layout.set_layout(vertices, {"shape": "box", "color": "red"})
    layout.set_layout(Scope.GRAPH, {"rankdir": "LR"})

    assert create_script(graph, layout) == create_script(graph, layout)


def test_end_to_end_scenario():
    graph = Graph()
    x = graph.create_vertex("X")
    y = graph.create_vertex("Y")
    graph.create_vertex("Z")
    graph.create_edge(x, y, weight=2)
    layout = LayoutStore().set_layout(Scope.VERTEX, {"shape": "circle"})

    assert create_script(graph, layout, eol="\n") == (
        "graph G {\n"
        "  node [shape=circle]\n"
        "  Z\n"
        "  X -- Y [label=2]\n"
        "}\n"
    )
