"""Input record types for the skill-tree compiler.

These are the typed form of the declarative feature list: one NodeRecord per
feature, each optionally carrying leaf Items that are display-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """A leaf sub-item shown inside a feature box. Never part of an edge."""

    label: str


@dataclass(frozen=True)
class NodeRecord:
    name: str
    label: str
    href: str | None = None
    requires: tuple[str, ...] = field(default_factory=tuple)
    items: tuple[Item, ...] = field(default_factory=tuple)
