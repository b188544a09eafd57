"""The single compile entry point: build, validate, lay out."""

from __future__ import annotations

from collections.abc import Sequence

from skilltree.config import LayoutConfig
from skilltree.errors import GraphError
from skilltree.ir.graph import GraphBuilder
from skilltree.layout.sugiyama import SugiyamaLayout
from skilltree.layout.types import LayoutResult
from skilltree.observability import get_logger
from skilltree.types import NodeRecord
from skilltree.validate import Validator

logger = get_logger(__name__)


def compile(records: Sequence[NodeRecord], config: LayoutConfig | None = None) -> LayoutResult:
    """Compile an ordered record sequence into a laid-out skill tree.

    Args:
        records: Feature records in declaration order.
        config: Layout settings; defaults to LayoutConfig().

    Returns:
        The LayoutResult for the whole record set.

    Raises:
        DuplicateNameError: A name is declared more than once.
        UnknownRequirementError: A `requires` entry names no record.
        CyclicDependencyError: The requirement relation has a cycle.
    """
    records = list(records)
    try:
        graph = GraphBuilder().build(records)
        graph = Validator().validate(graph)
    except GraphError as e:
        logger.warning("compile_failed", error_type=type(e).__name__, error=str(e))
        raise
    return SugiyamaLayout(config).layout(graph)
