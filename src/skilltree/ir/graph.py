"""Graph IR — resolves NodeRecords into an indexed networkx DiGraph.

Nodes live in a dense list in declaration order; the DiGraph is keyed by
those indices and holds the edge relation `prerequisite -> dependent`.
Names are resolved to indices once, through `Graph.index`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import networkx as nx

from skilltree.errors import Duplicate, DuplicateNameError, MissingRequirement, UnknownRequirementError
from skilltree.observability import get_logger
from skilltree.types import Item, NodeRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    index: int
    name: str
    label: str
    href: str | None
    items: tuple[Item, ...]
    requires: tuple[int, ...]


class Graph:
    """A resolved feature graph.

    Wraps a networkx DiGraph over node indices and exposes helpers for
    topology queries. Dependents are read from the DiGraph on demand.
    """

    def __init__(self, nodes: list[Node], index: dict[str, int], digraph: nx.DiGraph) -> None:
        self.nodes = nodes
        self.index = index
        self.digraph = digraph

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, name: str) -> Node:
        return self.nodes[self.index[name]]

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def prerequisites(self, idx: int) -> tuple[int, ...]:
        return self.nodes[idx].requires

    def dependents(self, idx: int) -> list[int]:
        return sorted(self.digraph.successors(idx))

    def edges(self) -> list[tuple[int, int]]:
        """Edges as (prerequisite, dependent) index pairs.

        Ordered by dependent declaration order, then by position in that
        dependent's `requires` list.
        """
        return [(req, node.index) for node in self.nodes for req in node.requires]

    def edge_names(self) -> list[tuple[str, str]]:
        return [(self.nodes[u].name, self.nodes[v].name) for u, v in self.edges()]


class GraphBuilder:
    """Two-pass construction of a Graph from an ordered record sequence."""

    def build(self, records: Sequence[NodeRecord]) -> Graph:
        index = self._index_names(records)
        nodes = self._resolve(records, index)

        digraph: nx.DiGraph = nx.DiGraph()
        digraph.add_nodes_from(range(len(nodes)))
        for node in nodes:
            for req in node.requires:
                digraph.add_edge(req, node.index)

        logger.debug("graph_built", nodes=len(nodes), edges=digraph.number_of_edges())
        return Graph(nodes=nodes, index=index, digraph=digraph)

    @staticmethod
    def _index_names(records: Sequence[NodeRecord]) -> dict[str, int]:
        index: dict[str, int] = {}
        positions: dict[str, list[int]] = {}
        for pos, record in enumerate(records):
            positions.setdefault(record.name, []).append(pos)
            index.setdefault(record.name, pos)

        duplicates = [Duplicate(name, tuple(ps)) for name, ps in positions.items() if len(ps) > 1]
        if duplicates:
            raise DuplicateNameError(duplicates)
        return index

    @staticmethod
    def _resolve(records: Sequence[NodeRecord], index: dict[str, int]) -> list[Node]:
        nodes: list[Node] = []
        missing: list[MissingRequirement] = []
        for pos, record in enumerate(records):
            requires: list[int] = []
            for name in record.requires:
                if name not in index:
                    missing.append(MissingRequirement(node=record.name, missing=name))
                    continue
                req = index[name]
                if req not in requires:
                    requires.append(req)
            nodes.append(
                Node(
                    index=pos,
                    name=record.name,
                    label=record.label,
                    href=record.href,
                    items=tuple(record.items),
                    requires=tuple(requires),
                )
            )

        if missing:
            raise UnknownRequirementError(missing)
        return nodes


def build(records: Iterable[NodeRecord]) -> Graph:
    """Build a Graph from records, raising on duplicates or dangling requires."""
    return GraphBuilder().build(list(records))
