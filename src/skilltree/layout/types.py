"""Layout output types handed to emitters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LayoutNode:
    """A positioned feature: abstract (layer, slot), no geometry."""

    name: str
    label: str
    layer: int
    slot: int
    href: str | None = None
    items: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "href": self.href,
            "items": [{"label": item} for item in self.items],
            "layer": self.layer,
            "slot": self.slot,
        }


@dataclass(frozen=True)
class LayoutEdge:
    from_name: str
    to_name: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.from_name, "to": self.to_name}


@dataclass(frozen=True)
class LayoutResult:
    """Self-contained layout output — everything emitters need."""

    nodes: tuple[LayoutNode, ...]
    edges: tuple[LayoutEdge, ...]

    def node(self, name: str) -> LayoutNode:
        for n in self.nodes:
            if n.name == name:
                return n
        raise KeyError(name)

    def layer_count(self) -> int:
        return max((n.layer for n in self.nodes), default=-1) + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
