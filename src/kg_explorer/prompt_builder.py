from __future__ import annotations

"""Prompt composition helpers."""

import json
import re
from typing import Iterable

INITIAL_TEMPLATE = "How does {{topic}} relate to other fields of science?"

EXTRACTION_TEMPLATE = (
    "Analyze the following text and return a JSON array of objects with these fields: {{fields}}.\n"
    "Example JSON format:\n"
    "{{example}}\n\n"
    "Text: \"{{text}}\""
)

RELATION_TEMPLATE = (
    "How does {{concept}} relate to other disciplines in the context of: {{query}} "
    "List the related concepts, give a definition for each, and provide concrete examples."
)

SUBTOPIC_TEMPLATE = (
    "Please provide detailed explanations of the following subtopics: {{subtopics}}. "
    "Describe how each relates to {{query}}"
)

BASE_FIELDS = ("topic", "concept", "definition", "example")

WORKED_EXAMPLE = {
    "topic": "Physics",
    "concept": "Gravity",
    "definition": "A force that attracts two bodies with mass towards each other.",
    "example": "An apple falling from a tree.",
}


class PromptBuilder:
    """Render the prompts sent to the generation endpoint."""

    def __init__(self, include_subtopic: bool = False) -> None:
        self.include_subtopic = include_subtopic

    @property
    def fields(self) -> tuple[str, ...]:
        if self.include_subtopic:
            return BASE_FIELDS + ("subtopic",)
        return BASE_FIELDS

    def initial_query(self, topic: str) -> str:
        return _render(INITIAL_TEMPLATE, {"{{topic}}": topic.strip()})

    def extraction(self, text: str) -> str:
        example = dict(WORKED_EXAMPLE)
        if self.include_subtopic:
            example["subtopic"] = "Newton's Laws"
        return _render(
            EXTRACTION_TEMPLATE,
            {
                "{{fields}}": ", ".join(self.fields),
                "{{example}}": json.dumps([example], ensure_ascii=False),
                "{{text}}": text,
            },
        )

    def relation_query(self, concept: str, query: str) -> str:
        return _render(RELATION_TEMPLATE, {"{{concept}}": concept, "{{query}}": query})

    def subtopic_sweep(self, subtopics: Iterable[str], query: str) -> str:
        return _render(SUBTOPIC_TEMPLATE, {"{{subtopics}}": ", ".join(subtopics), "{{query}}": query})


def _render(template: str, replacements: dict[str, str]) -> str:
    # Single pass: substituted values are never rescanned for tokens.
    pattern = re.compile("|".join(re.escape(token) for token in replacements))
    return pattern.sub(lambda match: replacements[match.group(0)], template)


__all__ = ["PromptBuilder"]
