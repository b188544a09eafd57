"""Exception hierarchy for skilltree.

- SkillTreeError: base for everything raised by this package
- RecordError: a declarative record is malformed (loader)
- GraphError: the record set is structurally invalid
    - DuplicateNameError
    - UnknownRequirementError
    - CyclicDependencyError

Graph errors carry every offending name so the source can be fixed without
further digging.
"""

from __future__ import annotations

from dataclasses import dataclass


class SkillTreeError(Exception):
    """Base exception for skilltree."""


class RecordError(SkillTreeError):
    """Raised when a declarative record has a missing, unknown, or mistyped field."""

    def __init__(self, message: str, *, position: int | None = None, field: str | None = None) -> None:
        prefix = f"record {position}" if position is not None else "record"
        if field is not None:
            prefix = f"{prefix}, field '{field}'"
        super().__init__(f"{prefix}: {message}")
        self.position = position
        self.field = field


class GraphError(SkillTreeError):
    """Base for structural errors found while building or validating the graph."""


@dataclass(frozen=True)
class Duplicate:
    name: str
    positions: tuple[int, ...]


@dataclass(frozen=True)
class MissingRequirement:
    node: str
    missing: str


class DuplicateNameError(GraphError):
    """One or more names are declared by more than one record.

    `duplicates` lists every duplicated name with all the declaration
    positions (0-based) that use it, the first occurrence included. `name`
    and `positions` describe the first of them.
    """

    def __init__(self, duplicates: list[Duplicate]) -> None:
        self.duplicates = list(duplicates)
        parts = [f"'{d.name}' at positions {', '.join(str(p) for p in d.positions)}" for d in self.duplicates]
        super().__init__("duplicate feature names: " + "; ".join(parts))

    @property
    def name(self) -> str:
        return self.duplicates[0].name

    @property
    def positions(self) -> tuple[int, ...]:
        return self.duplicates[0].positions

    @property
    def names(self) -> list[str]:
        return [d.name for d in self.duplicates]


class UnknownRequirementError(GraphError):
    """One or more `requires` entries name a record that does not exist.

    `references` lists every dangling (node, missing) pair in declaration
    order; `node` and `missing` are those of the first.
    """

    def __init__(self, references: list[MissingRequirement]) -> None:
        self.references = list(references)
        parts = [f"'{m.node}' requires unknown '{m.missing}'" for m in self.references]
        super().__init__("unknown requirements: " + "; ".join(parts))

    @property
    def node(self) -> str:
        return self.references[0].node

    @property
    def missing(self) -> str:
        return self.references[0].missing


class CyclicDependencyError(GraphError):
    """The requirement relation contains a cycle.

    `cycle` starts and ends with the same name, e.g. ["X", "Y", "X"].
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("dependency cycle: " + " -> ".join(self.cycle))
