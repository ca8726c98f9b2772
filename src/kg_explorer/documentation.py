"""Render the knowledge graph as a human-readable text document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .graph import Concept, KnowledgeGraph

logger = logging.getLogger(__name__)


def format_concept(name: str, concept: Concept) -> List[str]:
    """Return the lines describing one concept, without the separator."""

    lines = [f"Concept: {name}"]
    if concept.definition is not None:
        lines.append(f"  Definition: {concept.definition}")
    lines.extend(_section("Examples", concept.examples))
    lines.extend(_section("Related Concepts", concept.related_concepts))
    lines.extend(_section("Subtopics", concept.subtopics))
    return lines


def _section(title: str, values: Iterable[str]) -> List[str]:
    items = sorted(values)
    if not items:
        return []
    return [f"  {title}:"] + [f"    - {item}" for item in items]


def render_documentation(graph: KnowledgeGraph, sort_names: bool = False) -> str:
    names = sorted(graph) if sort_names else list(graph)
    lines: List[str] = []
    for name in names:
        lines.extend(format_concept(name, graph.get(name)))
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def write_documentation(graph: KnowledgeGraph, path: Path, sort_names: bool = False) -> Path:
    """Write one record per concept to ``path``.

    Raises:
        OSError: If the file cannot be created
    """

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_documentation(graph, sort_names=sort_names), encoding="utf-8")
    logger.info("Wrote %d concept(s) to %s", len(graph), path)
    return path


__all__ = ["format_concept", "render_documentation", "write_documentation"]
