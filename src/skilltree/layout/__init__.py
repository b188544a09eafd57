"""Layout engine public API."""

from __future__ import annotations

from skilltree.layout.engine import layout
from skilltree.layout.sugiyama import (
    AugmentedGraph,
    LayerAssignment,
    SugiyamaLayout,
    ThroughEdge,
    assign_slots,
    count_crossings,
    initial_ordering,
    insert_virtual_nodes,
    minimise_crossings,
)
from skilltree.layout.types import LayoutEdge, LayoutNode, LayoutResult

__all__ = [
    "AugmentedGraph",
    "LayerAssignment",
    "LayoutEdge",
    "LayoutNode",
    "LayoutResult",
    "SugiyamaLayout",
    "ThroughEdge",
    "assign_slots",
    "count_crossings",
    "initial_ordering",
    "insert_virtual_nodes",
    "layout",
    "minimise_crossings",
]
