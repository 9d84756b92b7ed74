"""Serialization helpers."""

from .json import graph_from_json, graph_to_json

__all__ = ["graph_from_json", "graph_to_json"]
