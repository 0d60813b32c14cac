"""Invocation of the GraphViz layout engines through :mod:`graphviz`."""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import graphviz
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from vizgraph import config

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class RenderError(RuntimeError):
    """Raised when the renderer cannot produce an image."""

    def __init__(self, message: str, *, returncode: Optional[int] = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def _default_wait() -> Any:
    return wait_exponential(multiplier=1, min=1, max=10)


def _decode(stream: Any) -> str:
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream or ""


@dataclass
class DotRunner:
    """Render DOT scripts with the configured GraphViz engine.

    Failed engine runs are retried; a missing executable is not.
    """

    engine: str = field(default_factory=lambda: config.get_env(config.ENGINE, "dot"))
    attempts: int = field(default_factory=lambda: config.get_int(config.RENDER_ATTEMPTS, 3))
    wait: Any = field(default_factory=_default_wait)

    def source(self, script: str, fmt: str) -> graphviz.Source:
        return graphviz.Source(script, format=fmt, engine=self.engine)

    def render(self, script: str, fmt: str) -> Path:
        """Render ``script`` into format ``fmt`` and return the image path.

        The caller owns the returned file. The intermediate source file is
        removed by ``cleanup``; the image file is removed again on failure.
        """

        fd, name = tempfile.mkstemp(prefix="graphviz", suffix=f".{fmt}")
        os.close(fd)
        source = self.source(script, fmt)
        try:
            rendered = self._run(lambda: source.render(outfile=name, cleanup=True, quiet=True))
        except RenderError:
            Path(name).unlink(missing_ok=True)
            raise
        return Path(rendered)

    def pipe(self, script: str, fmt: str) -> bytes:
        """Render ``script`` into format ``fmt`` and return the image bytes."""

        source = self.source(script, fmt)
        return self._run(lambda: source.pipe(quiet=True))

    def _run(self, call: Callable[[], T]) -> T:
        LOGGER.debug("Running GraphViz engine %s", self.engine)
        retrying = Retrying(
            stop=stop_after_attempt(max(1, self.attempts)),
            wait=self.wait,
            retry=retry_if_exception_type(graphviz.CalledProcessError),
            before_sleep=before_sleep_log(LOGGER, logging.WARNING),
            reraise=True,
        )
        try:
            for attempt in retrying:
                with attempt:
                    result = call()
        except graphviz.ExecutableNotFound as exc:
            raise RenderError(f'Unable to invoke "{self.engine}": executable not found') from exc
        except graphviz.CalledProcessError as exc:
            raise RenderError(
                f'Unable to invoke "{self.engine}" to create image file (code {exc.returncode})',
                returncode=exc.returncode,
                stderr=_decode(exc.stderr),
            ) from exc
        return result
