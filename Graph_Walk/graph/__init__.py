"""Directed graph model shared by the walk and the renderer."""

from .model import Edge, Graph, Vertex, demo_graph

__all__ = ["Edge", "Graph", "Vertex", "demo_graph"]
