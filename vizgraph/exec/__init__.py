"""Helpers invoking external programs: the GraphViz renderer and image viewers."""

from .runner import DotRunner, RenderError
from .viewer import Viewer

__all__ = ["DotRunner", "RenderError", "Viewer"]
