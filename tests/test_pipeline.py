"""Tests for the end-to-end pipeline."""

import pytest

from kg_explorer.clients import LLMClientError
from kg_explorer.config import ExplorerConfig
from kg_explorer.pipeline import explore

from conftest import ScriptedClient, insights


def _config(tmp_path, **kwargs):
    return ExplorerConfig(cooldown=0, show_progress=False, output_path=tmp_path / "documentation.txt", **kwargs)


class TestExplore:
    """Tests for explore."""

    def test_writes_documentation_and_graphml(self, tmp_path):
        client = ScriptedClient([
            ("ANSWER-ROOT", insights({"concept": "Gravity", "topic": "Physics", "definition": "A force"})),
            ("fields of science?", "ANSWER-ROOT"),
        ])
        config = _config(tmp_path, graphml_path=tmp_path / "graph.graphml", sort_output=True)

        result = explore(config, "Physics", client=client, sleep=lambda _: None)

        text = result.output_path.read_text(encoding="utf-8")
        assert "Concept: Gravity\n  Definition: A force\n" in text
        assert "Concept: Physics\n  Related Concepts:\n    - Gravity\n" in text
        assert result.graphml_path.exists()
        assert result.queries == 3
        assert len(result.graph) == 3

    def test_saves_partial_graph_on_transport_error(self, tmp_path):
        client = ScriptedClient([
            ("relate to other disciplines", LLMClientError("connection reset")),
            ("ANSWER-ROOT", insights({"concept": "Gravity"})),
            ("fields of science?", "ANSWER-ROOT"),
        ])
        config = _config(tmp_path)

        with pytest.raises(LLMClientError):
            explore(config, "Physics", client=client, sleep=lambda _: None)

        assert "Concept: Gravity" in config.output_path.read_text(encoding="utf-8")

    def test_transport_error_survives_failed_save(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        client = ScriptedClient([("fields of science?", LLMClientError("refused"))])
        config = ExplorerConfig(cooldown=0, show_progress=False, output_path=blocker / "documentation.txt")

        with pytest.raises(LLMClientError, match="refused"):
            explore(config, "Physics", client=client, sleep=lambda _: None)

        assert "Could not save partial results" in caplog.text

    def test_save_failure_on_success_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        client = ScriptedClient([])
        config = ExplorerConfig(cooldown=0, show_progress=False, output_path=blocker / "documentation.txt")

        with pytest.raises(OSError):
            explore(config, "Physics", client=client, sleep=lambda _: None)
