"""Intermediate representation: resolved nodes and the requirement graph."""

from skilltree.ir.graph import Graph, GraphBuilder, Node, build

__all__ = [
    "Graph",
    "GraphBuilder",
    "Node",
    "build",
]
