"""vizgraph package initialization.

This module exposes the rendering session used by external callers to turn
an in-memory graph into a GraphViz script and image.
"""

from .api import GraphViz
from .layout import InvalidTargetKind, LayoutStore, Scope

__all__ = ["GraphViz", "InvalidTargetKind", "LayoutStore", "Scope"]
