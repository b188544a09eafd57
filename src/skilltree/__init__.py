"""skilltree: compile declarative feature lists into laid-out dependency DAGs."""

from skilltree.compiler import compile
from skilltree.config import LayoutConfig
from skilltree.errors import (
    CyclicDependencyError,
    DuplicateNameError,
    GraphError,
    RecordError,
    SkillTreeError,
    UnknownRequirementError,
)
from skilltree.ir.graph import Graph, GraphBuilder, build
from skilltree.layout.types import LayoutEdge, LayoutNode, LayoutResult
from skilltree.loader import load, loads
from skilltree.types import Item, NodeRecord


def compile_toml(src: str, config: LayoutConfig | None = None) -> LayoutResult:
    """Parse a TOML feature list and compile it.

    Args:
        src: TOML source with one `[[feature]]` table per record.
        config: Layout settings; None uses the defaults.

    Returns:
        The laid-out skill tree.

    Raises:
        RecordError: If a record is malformed.
        GraphError: If the records do not form a valid DAG.
    """
    return compile(loads(src), config)


__all__ = [
    "CyclicDependencyError",
    "DuplicateNameError",
    "Graph",
    "GraphBuilder",
    "GraphError",
    "Item",
    "LayoutConfig",
    "LayoutEdge",
    "LayoutNode",
    "LayoutResult",
    "NodeRecord",
    "RecordError",
    "SkillTreeError",
    "UnknownRequirementError",
    "build",
    "compile",
    "compile_toml",
    "load",
    "loads",
]
