"""Exploration controller: decide what to ask next and when to stop."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Set

from tqdm import tqdm

from .clients import BaseLLMClient
from .config import ExplorationStrategy, ExplorerConfig
from .extractor import InsightExtractor
from .graph import KnowledgeGraph
from .prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)


@dataclass
class ExplorationState:
    """Concepts already queried plus a LIFO frontier of pending ones."""

    explored: Set[str] = field(default_factory=set)
    frontier: List[str] = field(default_factory=list)
    _pending: Set[str] = field(default_factory=set, repr=False)

    def push(self, name: str) -> bool:
        """Queue ``name`` unless it was explored or is already pending."""
        if name in self.explored or name in self._pending:
            return False
        self.frontier.append(name)
        self._pending.add(name)
        return True

    def extend(self, names: Iterable[str]) -> None:
        for name in names:
            self.push(name)

    def pop(self) -> str:
        name = self.frontier.pop()
        self._pending.discard(name)
        return name

    def __bool__(self) -> bool:
        return bool(self.frontier)


class Explorer:
    """Run the fetch, extract, merge and enqueue loop against one endpoint.

    Queries are issued strictly one at a time. Both strategies pause for
    ``config.cooldown`` seconds before every follow-up query: each concept
    in the worklist, each round of the subtopic sweep. A transport error
    aborts the run and propagates; whatever was merged before it remains in
    the graph.
    """

    def __init__(
        self,
        client: BaseLLMClient,
        config: ExplorerConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client
        self.config = config or ExplorerConfig()
        self.sleep = sleep
        self.prompt_builder = PromptBuilder(include_subtopic=self.config.collects_subtopics)
        self.extractor = InsightExtractor(
            client,
            root=self.config.root,
            link_reverse=self.config.links_reverse_edges,
            collect_subtopics=self.config.collects_subtopics,
            prompt_builder=self.prompt_builder,
        )
        self.queries = 0

    def run(self, topic: str, graph: KnowledgeGraph | None = None) -> KnowledgeGraph:
        """Explore ``topic`` and return the populated graph.

        Pass ``graph`` to keep access to partial results if the run aborts.
        """
        graph = graph if graph is not None else KnowledgeGraph()
        graph.add_concept(self.config.root)

        query = self.prompt_builder.initial_query(topic)
        logger.info("Initial query: %s", query)
        self._ask(query, graph)

        if self.config.strategy is ExplorationStrategy.SUBTOPIC_SWEEP:
            self._sweep_subtopics(query, graph)
        else:
            self._walk_worklist(query, graph)

        logger.info("Exploration finished after %d request(s) with %d concept(s)", self.queries, len(graph))
        return graph

    def _ask(self, prompt: str, graph: KnowledgeGraph) -> None:
        text = self.client.generate(prompt)
        self.queries += 1
        logger.debug("Summary: %s", text)
        self.extractor.extract(text, graph)

    def _walk_worklist(self, query: str, graph: KnowledgeGraph) -> None:
        state = ExplorationState()
        state.extend(name for name in graph.names() if name != self.config.root)

        budget = self.config.max_queries
        progress = tqdm(desc="Exploring", unit="concept", disable=not self.config.show_progress)
        try:
            while state:
                if budget is not None and len(state.explored) >= budget:
                    logger.info("Query budget of %d reached with %d concept(s) pending", budget, len(state.frontier))
                    break

                name = state.pop()
                if name in state.explored:
                    continue
                state.explored.add(name)

                self.sleep(self.config.cooldown)
                logger.info("Exploring concept %s", name)
                self._ask(self.prompt_builder.relation_query(name, query), graph)

                concept = graph.get(name)
                if concept is not None:
                    state.extend(sorted(concept.related_concepts))

                progress.update()
                progress.set_postfix(frontier=len(state.frontier), concepts=len(graph))
        finally:
            progress.close()

        if not state:
            logger.info("Frontier exhausted after exploring %d concept(s)", len(state.explored))

    def _sweep_subtopics(self, query: str, graph: KnowledgeGraph) -> None:
        previous = graph.snapshot()
        for round_number in range(1, self.config.max_rounds + 1):
            subtopics = graph.subtopics_of(self.config.root)
            if not subtopics:
                logger.info("No more subtopics to explore.")
                return

            self.sleep(self.config.cooldown)
            logger.info("Round %d: sweeping %d subtopic(s)", round_number, len(subtopics))
            self._ask(self.prompt_builder.subtopic_sweep(sorted(subtopics), query), graph)

            if graph == previous:
                logger.info("No new concepts found, stopping.")
                return
            previous = graph.snapshot()

        logger.info("Round budget of %d exhausted", self.config.max_rounds)


__all__ = ["ExplorationState", "Explorer"]
