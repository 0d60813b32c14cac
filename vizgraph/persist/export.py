"""Image embedding utilities."""
from __future__ import annotations

import base64
from dataclasses import dataclass

_SVG_FORMATS = ("svg", "svgz")


@dataclass
class ImageExporter:
    """Turn rendered image bytes into data URIs and HTML snippets."""

    @staticmethod
    def mime_subtype(fmt: str) -> str:
        return "svg+xml" if fmt in _SVG_FORMATS else fmt

    def data_uri(self, data: bytes, fmt: str) -> str:
        """Return a base64 ``data:`` URI for ``data`` rendered as ``fmt``."""

        encoded = base64.b64encode(data).decode("ascii")
        return f"data:image/{self.mime_subtype(fmt)};base64,{encoded}"

    def html(self, data: bytes, fmt: str) -> str:
        """Return an HTML element embedding ``data``.

        SVG is wrapped in an ``<object>`` element, other formats in ``<img>``.
        """

        src = self.data_uri(data, fmt)
        if fmt in _SVG_FORMATS:
            return f'<object type="image/svg+xml" data="{src}"></object>'
        return f'<img src="{src}" />'
