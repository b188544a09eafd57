"""Layout engine convenience functions."""

from __future__ import annotations

from skilltree.config import LayoutConfig
from skilltree.ir.graph import Graph
from skilltree.layout.sugiyama import SugiyamaLayout
from skilltree.layout.types import LayoutResult


def layout(graph: Graph, config: LayoutConfig | None = None) -> LayoutResult:
    """Run the default (Sugiyama) layout pipeline on a validated graph."""
    return SugiyamaLayout(config).layout(graph)
