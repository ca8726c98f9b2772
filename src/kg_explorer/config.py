from __future__ import annotations

"""Configuration models for a knowledge exploration run."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ExplorationStrategy(str, Enum):
    """How the controller chooses what to query after the initial answer."""

    WORKLIST = "worklist"
    SUBTOPIC_SWEEP = "subtopic_sweep"


@dataclass(frozen=True)
class ExplorerConfig:
    """Top-level configuration for orchestrating an exploration run."""

    model: str = "llama3.1:8b"
    base_url: str = "http://localhost:11434"
    request_timeout: int = 120
    # Pause before each follow-up query, in both strategies.
    cooldown: float = 30.0
    strategy: ExplorationStrategy = ExplorationStrategy.WORKLIST
    root: str = "General"
    max_rounds: int = 1
    max_queries: int | None = None
    output_path: Path = Path("documentation.txt")
    graphml_path: Path | None = None
    sort_output: bool = False
    show_progress: bool = True

    def __post_init__(self) -> None:
        if not self.model.strip():
            msg = "A model identifier must be provided"
            raise ValueError(msg)
        if not self.base_url.strip():
            msg = "The generation endpoint URL must be provided"
            raise ValueError(msg)
        if not self.root:
            msg = "The root concept name cannot be empty"
            raise ValueError(msg)
        if self.request_timeout <= 0:
            msg = "Request timeout must be positive"
            raise ValueError(msg)
        if self.cooldown < 0:
            msg = "Cooldown cannot be negative"
            raise ValueError(msg)
        if self.max_rounds < 1:
            msg = "At least one exploration round is required"
            raise ValueError(msg)
        if self.max_queries is not None and self.max_queries < 1:
            msg = "max_queries must be at least 1 when set"
            raise ValueError(msg)
        object.__setattr__(self, "strategy", ExplorationStrategy(self.strategy))
        object.__setattr__(self, "output_path", Path(self.output_path))
        if self.graphml_path is not None:
            object.__setattr__(self, "graphml_path", Path(self.graphml_path))

    @property
    def links_reverse_edges(self) -> bool:
        return self.strategy is ExplorationStrategy.WORKLIST

    @property
    def collects_subtopics(self) -> bool:
        return self.strategy is ExplorationStrategy.SUBTOPIC_SWEEP


__all__ = ["ExplorationStrategy", "ExplorerConfig"]
