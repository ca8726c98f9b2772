from __future__ import annotations

"""Workflow orchestration for exploring a topic and saving the graph."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .clients import BaseLLMClient, LLMClientError, OllamaClient
from .config import ExplorerConfig
from .converters import write_graphml
from .documentation import write_documentation
from .explorer import Explorer
from .graph import KnowledgeGraph

logger = logging.getLogger(__name__)


@dataclass
class ExplorationResult:
    graph: KnowledgeGraph
    queries: int
    output_path: Path
    graphml_path: Path | None = None


def explore(
    config: ExplorerConfig,
    topic: str,
    client: BaseLLMClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> ExplorationResult:
    """Run the exploration end-to-end and persist the resulting graph.

    The documentation file is written even when the run aborts on a
    transport error, so concepts merged before the failure are kept. The
    transport error is re-raised afterwards, also when that save fails.
    """

    if client is None:
        client = OllamaClient(
            model_id=config.model,
            base_url=config.base_url,
            timeout=config.request_timeout,
        )
    logger.info("Exploring %r with %s (%s strategy)", topic, client.get_model_name(), config.strategy.value)

    graph = KnowledgeGraph()
    explorer = Explorer(client, config, sleep=sleep)
    try:
        explorer.run(topic, graph)
    except LLMClientError as exc:
        logger.error("Exploration aborted after %d request(s): %s", explorer.queries, exc)
        try:
            save_outputs(graph, config)
        except OSError as save_exc:
            logger.error("Could not save partial results: %s", save_exc)
        raise

    save_outputs(graph, config)

    return ExplorationResult(
        graph=graph,
        queries=explorer.queries,
        output_path=config.output_path,
        graphml_path=config.graphml_path,
    )


def save_outputs(graph: KnowledgeGraph, config: ExplorerConfig) -> None:
    write_documentation(graph, config.output_path, sort_names=config.sort_output)
    if config.graphml_path is not None:
        G = write_graphml(graph, config.graphml_path)
        logger.info(
            "Wrote GraphML to %s: %d nodes, %d edges",
            config.graphml_path,
            G.number_of_nodes(),
            G.number_of_edges(),
        )


__all__ = ["ExplorationResult", "explore", "save_outputs"]
