"""Renderers."""

from .console import friendly_time, render_graph, render_tasks

__all__ = ["friendly_time", "render_graph", "render_tasks"]
