"""Public API surface for vizgraph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from vizgraph import config
from vizgraph.exec.runner import DotRunner
from vizgraph.exec.viewer import Viewer
from vizgraph.graph.store import Graph
from vizgraph.layout import LayoutStore, TargetSpec
from vizgraph.persist.export import ImageExporter
from vizgraph.script import create_script

LOGGER = logging.getLogger(__name__)


@dataclass
class GraphViz:
    """Rendering session wiring a graph to its layout and the renderer.

    Setters return the session so calls can be chained::

        GraphViz(graph).set_layout(Scope.VERTEX, {"shape": "circle"}).display()
    """

    graph: Graph
    layout: LayoutStore = field(default_factory=LayoutStore)
    format: str = field(default_factory=lambda: config.get_env(config.FORMAT, "png"))
    runner: DotRunner = field(default_factory=DotRunner)
    viewer: Viewer = field(default_factory=Viewer)
    exporter: ImageExporter = field(default_factory=ImageExporter)

    def set_format(self, fmt: str) -> "GraphViz":
        """Set the image format passed to ``dot -T`` (``png``, ``svg``, ...)."""

        self.format = fmt
        return self

    def set_layout(self, target: TargetSpec, attributes: Optional[Mapping[str, object]] = None) -> "GraphViz":
        self.layout.set_layout(target, attributes)
        return self

    def set_attribute(self, target: TargetSpec, name: str, value: object) -> "GraphViz":
        self.layout.set_attribute(target, name, value)
        return self

    def create_script(self) -> str:
        return create_script(self.graph, self.layout)

    def create_image_file(self) -> Path:
        """Render the graph and return the path of the new image file."""

        return self.runner.render(self.create_script(), self.format)

    def create_image_data(self) -> bytes:
        """Render the graph and return the image bytes without touching disk."""

        return self.runner.pipe(self.create_script(), self.format)

    def create_image_src(self) -> str:
        return self.exporter.data_uri(self.create_image_data(), self.format)

    def create_image_html(self) -> str:
        return self.exporter.html(self.create_image_data(), self.format)

    def display(self) -> Path:
        """Render the graph and open the image in the configured viewer."""

        path = self.create_image_file()
        LOGGER.debug("Displaying %s", path)
        self.viewer.open(path)
        return path
