"""Turn freeform model answers into structured insights merged into the graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .clients import BaseLLMClient
from .graph import KnowledgeGraph
from .json_utils import parse_insights
from .models import StructuredInsight
from .prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of one extraction call.

    ``parsed`` is False when no insight array could be recovered, in which
    case the graph was left untouched.
    """

    parsed: bool
    records: int
    raw_text: str


class InsightExtractor:
    """Ask the model to restate text as JSON insights and merge them.

    Args:
        client: Generation client used for the restatement request
        root: Name of the distinguished root concept
        link_reverse: Also record ``concept`` as related to ``topic``
        collect_subtopics: Request ``subtopic`` and attach it to the root
        prompt_builder: Optional builder; one matching ``collect_subtopics``
            is created when omitted
    """

    def __init__(
        self,
        client: BaseLLMClient,
        root: str = "General",
        link_reverse: bool = True,
        collect_subtopics: bool = False,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self.client = client
        self.root = root
        self.link_reverse = link_reverse
        self.collect_subtopics = collect_subtopics
        self.prompt_builder = prompt_builder or PromptBuilder(include_subtopic=collect_subtopics)

    def extract(self, text: str, graph: KnowledgeGraph) -> ExtractionOutcome:
        """Extract insights from ``text`` and merge them into ``graph``.

        Raises:
            LLMClientError: If the restatement request fails
        """
        raw_text = self.client.generate(self.prompt_builder.extraction(text))
        logger.debug("Raw model output:\n%s", raw_text)

        insights = parse_insights(raw_text)
        if insights is None:
            logger.warning("Failed to parse JSON array or extract it:\n%s", raw_text)
            return ExtractionOutcome(parsed=False, records=0, raw_text=raw_text)

        self.merge(insights, graph)
        logger.info("Merged %d insight(s); graph now holds %d concept(s)", len(insights), len(graph))
        return ExtractionOutcome(parsed=True, records=len(insights), raw_text=raw_text)

    def merge(self, insights: Iterable[StructuredInsight], graph: KnowledgeGraph) -> None:
        """Apply each insight independently; merging is idempotent."""
        for insight in insights:
            concept = insight.concept
            if concept is not None:
                graph.add_concept(concept)

                if insight.topic is not None:
                    graph.add_related_concept(concept, insight.topic)
                    if self.link_reverse:
                        graph.add_related_concept(insight.topic, concept)

                if insight.definition is not None:
                    graph.set_definition(concept, insight.definition)

                if insight.example is not None:
                    graph.add_example(concept, insight.example)

            if self.collect_subtopics and insight.subtopic:
                graph.add_subtopic(self.root, insight.subtopic)


__all__ = ["ExtractionOutcome", "InsightExtractor"]
