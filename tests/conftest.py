"""Shared fixtures for explorer tests."""

from __future__ import annotations

import json
from typing import Sequence, Tuple, Union

import pytest

from kg_explorer.clients import BaseLLMClient
from kg_explorer.config import ExplorerConfig


class ScriptedClient(BaseLLMClient):
    """Answer each prompt with the reply of the first marker it contains."""

    def __init__(self, script: Sequence[Tuple[str, Union[str, Exception]]]) -> None:
        self.script = list(script)
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        for marker, reply in self.script:
            if marker in prompt:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        return ""

    def get_model_name(self) -> str:
        return "scripted"


def insights(*records: dict) -> str:
    """Wrap records the way a chatty model tends to."""
    return f"Sure! Here is the JSON you asked for:\n{json.dumps(list(records))}\nHope this helps."


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def quiet_config(tmp_path):
    return ExplorerConfig(cooldown=5.0, show_progress=False, output_path=tmp_path / "documentation.txt")
