"""Encoding helpers for rendered images."""

from .export import ImageExporter

__all__ = ["ImageExporter"]
