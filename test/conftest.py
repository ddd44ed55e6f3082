# test/conftest.py

import sys
from pathlib import Path

import pytest

# Make project importable
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from casual.errors import ConsoleIOError
from casual.io_adapter import IOAdapter
from core.config_loader import get_config
from core.config_schema import CasualConfig


class ScriptedAdapter(IOAdapter):
    """
    Fake io_adapter for the acquisition loop:
     - collect(prompt_text): returns the next queued line, ConsoleIOError when out of lines
     - prompt(text): recorded as an error/advisory line
    """
    def __init__(self, lines):
        self.lines = list(lines)
        self.history = []

    def collect(self, prompt_text: str) -> str:
        self.history.append(("collect", prompt_text))
        if not self.lines:
            raise ConsoleIOError("end of input reached")
        return self.lines.pop(0) + "\n"

    def prompt(self, message: str):
        self.history.append(("prompt", message))

    @property
    def prompts_shown(self):
        return [text for kind, text in self.history if kind == "collect"]

    @property
    def messages(self):
        return [text for kind, text in self.history if kind == "prompt"]


@pytest.fixture
def scripted():
    return ScriptedAdapter


@pytest.fixture
def config():
    return CasualConfig()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep the developer's environment and config files out of the tests
    for name in (
        "CASUAL_CONFIG",
        "CASUAL_ERROR_PREFIX",
        "CASUAL_INVALID_INPUT_MESSAGE",
        "CASUAL_CONFIRM_SUFFIX",
        "CASUAL_STRUCTURED_LOG",
        "CASUAL_LOG_FILE",
        "CASUAL_LOG_INPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
