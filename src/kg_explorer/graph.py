"""Additive in-memory knowledge graph of concepts."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set


@dataclass
class Concept:
    """Attributes accumulated for one concept name."""

    definition: Optional[str] = None
    examples: Set[str] = field(default_factory=set)
    related_concepts: Set[str] = field(default_factory=set)
    subtopics: Set[str] = field(default_factory=set)


class KnowledgeGraph:
    """Mapping from case-sensitive concept name to ``Concept``.

    Every mutator creates the concept first if it is missing, and nothing is
    ever removed. Names stored as related concepts or subtopics are plain
    references and do not create entries of their own.
    """

    def __init__(self) -> None:
        self._concepts: Dict[str, Concept] = {}

    def _entry(self, name: str) -> Concept:
        concept = self._concepts.get(name)
        if concept is None:
            concept = self._concepts[name] = Concept()
        return concept

    def add_concept(self, name: str) -> Concept:
        return self._entry(name)

    def add_related_concept(self, name: str, related: str) -> None:
        self._entry(name).related_concepts.add(related)

    def set_definition(self, name: str, definition: str) -> None:
        """Overwrite the definition; empty definitions never replace a value."""
        concept = self._entry(name)
        if definition:
            concept.definition = definition

    def add_example(self, name: str, example: str) -> None:
        self._entry(name).examples.add(example)

    def add_subtopic(self, name: str, subtopic: str) -> None:
        concept = self._entry(name)
        if subtopic:
            concept.subtopics.add(subtopic)

    def get(self, name: str) -> Optional[Concept]:
        return self._concepts.get(name)

    def names(self) -> List[str]:
        return list(self._concepts)

    def subtopics_of(self, name: str) -> Set[str]:
        concept = self._concepts.get(name)
        return set(concept.subtopics) if concept else set()

    def items(self) -> Iterator[tuple[str, Concept]]:
        return iter(self._concepts.items())

    def snapshot(self) -> "KnowledgeGraph":
        """Return an independent deep copy, for change detection."""
        clone = KnowledgeGraph()
        clone._concepts = copy.deepcopy(self._concepts)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._concepts

    def __len__(self) -> int:
        return len(self._concepts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._concepts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KnowledgeGraph):
            return NotImplemented
        return self._concepts == other._concepts

    def __repr__(self) -> str:
        return f"KnowledgeGraph(concepts={len(self._concepts)})"


__all__ = ["Concept", "KnowledgeGraph"]
