"""Strict loader for declarative feature lists.

The source format is TOML with one array-of-tables entry per feature:

    [[feature]]
    name = "heap"
    label = "Heap\\nallocation"
    href = "https://example.org/heap"
    requires = ["mut_ref", "cell_ref"]
    items = [{ label = "Box" }, "Vec"]

Fields are checked strictly: a misspelled optional key is an error, not a
silently ignored value.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from skilltree.errors import RecordError
from skilltree.types import Item, NodeRecord

TABLE_KEY = "feature"

_REQUIRED = ("name", "label")
_OPTIONAL = ("href", "requires", "items")


def _expect_str(value: Any, position: int, field: str) -> str:
    if not isinstance(value, str):
        raise RecordError(f"expected a string, got {type(value).__name__}", position=position, field=field)
    return value


def _expect_list(value: Any, position: int, field: str) -> list[Any]:
    if not isinstance(value, list | tuple):
        raise RecordError(f"expected a list, got {type(value).__name__}", position=position, field=field)
    return list(value)


def _item(value: Any, position: int) -> Item:
    if isinstance(value, str):
        return Item(label=value)
    if isinstance(value, Mapping):
        extra = set(value) - {"label"}
        if extra:
            raise RecordError(f"unknown item keys: {', '.join(sorted(extra))}", position=position, field="items")
        if "label" not in value:
            raise RecordError("item is missing 'label'", position=position, field="items")
        return Item(label=_expect_str(value["label"], position, "items"))
    raise RecordError(f"expected an item table or string, got {type(value).__name__}", position=position, field="items")


def record_from_dict(data: Mapping[str, Any], position: int = 0) -> NodeRecord:
    """Map one loosely-typed record onto a NodeRecord with explicit defaults."""
    if not isinstance(data, Mapping):
        raise RecordError(f"expected a table, got {type(data).__name__}", position=position)

    unknown = set(data) - set(_REQUIRED) - set(_OPTIONAL)
    if unknown:
        raise RecordError(f"unknown fields: {', '.join(sorted(unknown))}", position=position)
    for key in _REQUIRED:
        if key not in data:
            raise RecordError("missing required field", position=position, field=key)

    href = data.get("href")
    return NodeRecord(
        name=_expect_str(data["name"], position, "name"),
        label=_expect_str(data["label"], position, "label"),
        href=None if href is None else _expect_str(href, position, "href"),
        requires=tuple(
            _expect_str(req, position, "requires") for req in _expect_list(data.get("requires", []), position, "requires")
        ),
        items=tuple(_item(it, position) for it in _expect_list(data.get("items", []), position, "items")),
    )


def records_from_list(entries: Sequence[Mapping[str, Any]]) -> list[NodeRecord]:
    return [record_from_dict(entry, pos) for pos, entry in enumerate(entries)]


def loads(text: str) -> list[NodeRecord]:
    """Parse a TOML document into records, in declaration order."""
    try:
        doc = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RecordError(f"invalid TOML: {e}") from e

    unknown = set(doc) - {TABLE_KEY}
    if unknown:
        raise RecordError(f"unknown top-level keys: {', '.join(sorted(unknown))}")
    entries = doc.get(TABLE_KEY, [])
    if not isinstance(entries, list):
        raise RecordError(f"'{TABLE_KEY}' must be an array of tables")
    return records_from_list(entries)


def load(path: str | Path) -> list[NodeRecord]:
    return loads(Path(path).read_text(encoding="utf-8"))
