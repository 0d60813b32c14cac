"""Open rendered images in the platform viewer."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import graphviz

from vizgraph import config

LOGGER = logging.getLogger(__name__)


@dataclass
class Viewer:
    """Open images with :func:`graphviz.view`.

    Desktop openers such as ``xdg-open`` ignore requests arriving in quick
    succession, so launches closer together than ``delay`` seconds wait for
    the remaining interval. ``next_allowed`` is tracked per viewer instance.
    """

    delay: float = field(default_factory=lambda: config.get_float(config.DISPLAY_DELAY, 1.0))
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep
    launcher: Callable[..., object] = graphviz.view
    next_allowed: float = 0.0

    def open(self, path: Path) -> None:
        """Open ``path`` without waiting for the viewer to exit."""

        now = self.clock()
        if self.next_allowed > now:
            LOGGER.info("Delaying viewer launch by %.2fs to avoid flooding the viewer", self.next_allowed - now)
            self.sleep(self.next_allowed - now)
        self.launcher(str(path), quiet=True)
        self.next_allowed = self.clock() + self.delay
