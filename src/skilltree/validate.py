"""Structural validation of a built Graph.

Duplicate names and dangling references are already rejected by the
builder; this pass looks for requirement cycles.
"""

from __future__ import annotations

from collections.abc import Iterator

from skilltree.errors import CyclicDependencyError
from skilltree.ir.graph import Graph
from skilltree.observability import get_logger

logger = get_logger(__name__)


def find_cycle(graph: Graph) -> list[int] | None:
    """Return the first requirement cycle as node indices, or None.

    Depth-first over the "requires" direction, roots in declaration order and
    neighbours in `requires` order, so the cycle found is stable for a given
    input. The result starts and ends with the repeated node.
    """
    finished: set[int] = set()

    for root in range(len(graph.nodes)):
        if root in finished:
            continue

        path: list[int] = [root]
        on_path: dict[int, int] = {root: 0}
        pending: list[Iterator[int]] = [iter(graph.prerequisites(root))]

        while pending:
            nxt = next(pending[-1], None)
            if nxt is None:
                done = path.pop()
                del on_path[done]
                finished.add(done)
                pending.pop()
                continue
            if nxt in on_path:
                return path[on_path[nxt] :] + [nxt]
            if nxt in finished:
                continue
            on_path[nxt] = len(path)
            path.append(nxt)
            pending.append(iter(graph.prerequisites(nxt)))

    return None


class Validator:
    def validate(self, graph: Graph) -> Graph:
        cycle = find_cycle(graph)
        if cycle is not None:
            names = [graph.nodes[i].name for i in cycle]
            raise CyclicDependencyError(names)
        logger.debug("graph_validated", nodes=graph.node_count())
        return graph


def validate(graph: Graph) -> Graph:
    """Return `graph` unchanged if acyclic, else raise CyclicDependencyError."""
    return Validator().validate(graph)
