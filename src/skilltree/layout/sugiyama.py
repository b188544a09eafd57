"""Sugiyama-style layered layout for skill trees.

Phases:
  1. Layer assignment (longest path from the roots)
  2. Virtual node insertion for through-edges
  3. Crossing minimization (barycenter, fixed pass count)
  4. Slot assignment

Cycle removal is not a phase here: graphs reach the layout already
validated as acyclic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations

import networkx as nx

from skilltree.config import LayoutConfig
from skilltree.ir.graph import Graph
from skilltree.layout.types import LayoutEdge, LayoutNode, LayoutResult
from skilltree.observability import get_logger

logger = get_logger(__name__)


# ─── Layer Assignment ────────────────────────────────────────────────────────


class LayerAssignment:
    def __init__(self, layers: dict[int, int], layer_count: int) -> None:
        self.layers = layers
        self.layer_count = layer_count

    @classmethod
    def assign(cls, graph: Graph) -> LayerAssignment:
        """layer(v) = 0 for roots, else 1 + max layer over its prerequisites."""
        layers: dict[int, int] = {}
        for idx in nx.topological_sort(graph.digraph):
            reqs = graph.prerequisites(idx)
            layers[idx] = 1 + max(layers[r] for r in reqs) if reqs else 0

        layer_count = (max(layers.values()) + 1) if layers else 0
        return cls(layers=layers, layer_count=layer_count)


# ─── Virtual Node Insertion ──────────────────────────────────────────────────


@dataclass
class ThroughEdge:
    """An edge spanning several layers and the virtual chain standing in for it."""

    src: int
    tgt: int
    virtual_ids: list[int] = field(default_factory=list)


@dataclass
class AugmentedGraph:
    """Layered graph where every edge spans exactly one layer.

    Ids below `real_count` are graph nodes; the rest are virtual.
    """

    graph: nx.DiGraph
    layers: dict[int, int]
    layer_count: int
    real_count: int
    through_edges: list[ThroughEdge]

    def is_virtual(self, node_id: int) -> bool:
        return node_id >= self.real_count


def insert_virtual_nodes(graph: Graph, la: LayerAssignment) -> AugmentedGraph:
    """Split every edge spanning k > 1 layers into a chain of k - 1 virtual nodes."""
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(range(len(graph.nodes)))

    layers: dict[int, int] = dict(la.layers)
    through_edges: list[ThroughEdge] = []
    next_id = len(graph.nodes)

    for src, tgt in graph.edges():
        span = layers[tgt] - layers[src]
        if span <= 1:
            g.add_edge(src, tgt)
            continue

        through = ThroughEdge(src=src, tgt=tgt)
        chain_prev = src
        for step in range(1, span):
            virtual_id = next_id
            next_id += 1
            g.add_node(virtual_id)
            layers[virtual_id] = layers[src] + step
            g.add_edge(chain_prev, virtual_id)
            through.virtual_ids.append(virtual_id)
            chain_prev = virtual_id
        g.add_edge(chain_prev, tgt)
        through_edges.append(through)

    return AugmentedGraph(
        graph=g,
        layers=layers,
        layer_count=la.layer_count,
        real_count=len(graph.nodes),
        through_edges=through_edges,
    )


# ─── Crossing Minimization ───────────────────────────────────────────────────


def initial_ordering(aug: AugmentedGraph) -> list[list[int]]:
    """Declaration order within each layer; virtual nodes follow in creation order."""
    ordering: list[list[int]] = [[] for _ in range(aug.layer_count)]
    for node_id in sorted(aug.layers):
        ordering[aug.layers[node_id]].append(node_id)
    return ordering


def minimise_crossings(aug: AugmentedGraph, passes: int) -> list[list[int]]:
    """Reorder layers with the barycenter heuristic.

    Even passes sweep down (keys from predecessors in the layer above), odd
    passes sweep up (keys from successors in the layer below). Runs exactly
    `passes` sweeps.
    """
    ordering = initial_ordering(aug)
    layer_count = aug.layer_count

    for pass_idx in range(passes):
        if pass_idx % 2 == 0:
            for layer_idx in range(1, layer_count):
                _sort_layer(ordering, layer_idx, ordering[layer_idx - 1], aug.graph, "incoming")
        else:
            for layer_idx in range(layer_count - 2, -1, -1):
                _sort_layer(ordering, layer_idx, ordering[layer_idx + 1], aug.graph, "outgoing")

    return ordering


def _sort_layer(
    ordering: list[list[int]],
    layer_idx: int,
    reference: list[int],
    graph: nx.DiGraph,
    direction: str,
) -> None:
    ref_pos: dict[int, float] = {nid: float(i) for i, nid in enumerate(reference)}
    current: dict[int, float] = {nid: float(i) for i, nid in enumerate(ordering[layer_idx])}

    def key(node_id: int) -> tuple[float, int]:
        bc = _barycenter(node_id, graph, ref_pos, direction)
        return (current[node_id] if bc is None else bc, node_id)

    ordering[layer_idx].sort(key=key)


def _barycenter(node_id: int, graph: nx.DiGraph, neighbor_pos: dict[int, float], direction: str) -> float | None:
    neighbors = graph.predecessors(node_id) if direction == "incoming" else graph.successors(node_id)
    positions = [neighbor_pos[nb] for nb in neighbors if nb in neighbor_pos]
    if not positions:
        return None
    return sum(positions) / len(positions)


def count_crossings(ordering: list[list[int]], graph: nx.DiGraph) -> int:
    """Count pairwise edge crossings between each pair of adjacent layers."""
    total = 0
    for upper, lower in zip(ordering, ordering[1:]):
        lower_pos = {nid: i for i, nid in enumerate(lower)}
        segments = sorted(
            (top, lower_pos[nb]) for top, src in enumerate(upper) for nb in graph.successors(src) if nb in lower_pos
        )
        # sorted by top end, so a pair crosses when its bottom ends are inverted
        total += sum(
            1 for (a_top, a_bot), (b_top, b_bot) in combinations(segments, 2) if a_top < b_top and a_bot > b_bot
        )
    return total


# ─── Slot Assignment ─────────────────────────────────────────────────────────


def assign_slots(ordering: list[list[int]], aug: AugmentedGraph) -> dict[int, int]:
    """Consecutive slots for real nodes in final layer order; virtual nodes take none."""
    slots: dict[int, int] = {}
    for layer_nodes in ordering:
        slot = 0
        for node_id in layer_nodes:
            if aug.is_virtual(node_id):
                continue
            slots[node_id] = slot
            slot += 1
    return slots


# ─── SugiyamaLayout Engine ───────────────────────────────────────────────────


class SugiyamaLayout:
    """Sugiyama layered layout engine."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def layout(self, graph: Graph) -> LayoutResult:
        la = LayerAssignment.assign(graph)
        aug = insert_virtual_nodes(graph, la)
        ordering = minimise_crossings(aug, self.config.passes)
        slots = assign_slots(ordering, aug)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "layout_complete",
                layers=la.layer_count,
                virtual_nodes=len(aug.layers) - aug.real_count,
                crossings=count_crossings(ordering, aug.graph),
                passes=self.config.passes,
            )

        nodes = tuple(
            LayoutNode(
                name=node.name,
                label=node.label,
                layer=la.layers[node.index],
                slot=slots[node.index],
                href=node.href,
                items=tuple(item.label for item in node.items),
            )
            for node in graph.nodes
        )
        edges = tuple(LayoutEdge(from_name=u, to_name=v) for u, v in graph.edge_names())
        return LayoutResult(nodes=nodes, edges=edges)
