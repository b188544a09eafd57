"""Reference emitters turning a LayoutResult into text.

Geometry stays with the consumer: the Mermaid output only fixes declaration
order by (layer, slot), which Mermaid's own layered layout follows.
"""

from __future__ import annotations

import json

from skilltree.layout.types import LayoutResult

ID_PREFIX = "n"


def to_json(result: LayoutResult, indent: int | None = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def _mermaid_label(label: str, items: tuple[str, ...]) -> str:
    lines = label.split("\n") + [f"• {item}" for item in items]
    return "<br/>".join(line.replace('"', "#quot;") for line in lines)


def to_mermaid(result: LayoutResult) -> str:
    """Render a `flowchart TD` document, one declaration per node in (layer, slot) order."""
    # generated ids: feature names may hold any character or a Mermaid keyword
    ids = {node.name: f"{ID_PREFIX}{i}" for i, node in enumerate(result.nodes)}

    lines = ["flowchart TD"]
    ordered = sorted(result.nodes, key=lambda n: (n.layer, n.slot))
    for node in ordered:
        lines.append(f'    {ids[node.name]}["{_mermaid_label(node.label, node.items)}"]')
    for edge in result.edges:
        lines.append(f"    {ids[edge.from_name]} --> {ids[edge.to_name]}")
    for node in ordered:
        if node.href:
            lines.append(f'    click {ids[node.name]} "{node.href}"')
    return "\n".join(lines) + "\n"
