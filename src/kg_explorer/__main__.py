"""Command-line entry point for the knowledge graph explorer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .clients import LLMClientError
from .config import ExplorationStrategy, ExplorerConfig
from .pipeline import explore

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Grow a concept knowledge graph by questioning a local Ollama model.")

console = Console()


@app.command()
def run(
    topic: Optional[str] = typer.Argument(
        None,
        help="Science field(s) to document. Asked interactively when omitted.",
    ),
    model: str = typer.Option(
        "llama3.1:8b",
        "--model",
        "-m",
        envvar="OLLAMA_MODEL",
        help="Model identifier served by Ollama.",
    ),
    base_url: str = typer.Option(
        "http://localhost:11434",
        "--base-url",
        envvar="OLLAMA_URL",
        help="Base URL of the Ollama server.",
    ),
    request_timeout: int = typer.Option(
        120,
        "--timeout",
        help="Request timeout for each generation call in seconds.",
    ),
    cooldown: float = typer.Option(
        30.0,
        "--cooldown",
        help="Pause in seconds before each follow-up query.",
    ),
    strategy: ExplorationStrategy = typer.Option(
        ExplorationStrategy.WORKLIST,
        "--strategy",
        case_sensitive=False,
        help="Follow related concepts one by one, or sweep the root's subtopics.",
    ),
    max_rounds: int = typer.Option(
        1,
        "--max-rounds",
        min=1,
        help="Round budget for the subtopic sweep.",
    ),
    max_queries: Optional[int] = typer.Option(
        None,
        "--max-queries",
        min=1,
        help="Stop the worklist after this many concepts (omit for no limit).",
    ),
    output_path: Path = typer.Option(
        Path("documentation.txt"),
        "--output",
        "-o",
        help="Where to write the concept documentation.",
    ),
    graphml_path: Optional[Path] = typer.Option(
        None,
        "--graphml",
        help="Also export the graph as GraphML to this path.",
    ),
    sort_output: bool = typer.Option(
        False,
        "--sort",
        help="Write concepts in lexicographic order.",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Hide the progress bar.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log model answers and raw extraction output.",
    ),
) -> None:
    """Explore a topic and document every concept discovered."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if topic is None:
        topic = typer.prompt("What science field(s) are you trying to document?")

    try:
        config = ExplorerConfig(
            model=model,
            base_url=base_url,
            request_timeout=request_timeout,
            cooldown=cooldown,
            strategy=strategy,
            max_rounds=max_rounds,
            max_queries=max_queries,
            output_path=output_path,
            graphml_path=graphml_path,
            sort_output=sort_output,
            show_progress=not no_progress,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        result = explore(config, topic)
    except LLMClientError as exc:
        console.print(f"[red]Exploration aborted:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title="Exploration Summary")
    table.add_column("Item", style="cyan")
    table.add_column("Value")
    table.add_row("Topic", topic)
    table.add_row("Concepts", str(len(result.graph)))
    table.add_row("Queries", str(result.queries))
    table.add_row("Documentation", str(result.output_path))
    if result.graphml_path is not None:
        table.add_row("GraphML", str(result.graphml_path))
    console.print(table)


if __name__ == "__main__":
    app()
