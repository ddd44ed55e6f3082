# test/test_confirmation.py

import pytest

from casual import confirm
from core.config_schema import CasualConfig, ConfirmConfig


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("y", True),
        ("Y", True),
        ("yes", True),
        ("  YES ", True),
        ("n", False),
        ("N", False),
        ("no", False),
        ("", False),
    ],
)
def test_confirm_answers(scripted, config, answer, expected):
    adapter = scripted([answer])
    assert confirm("Continue?", io_adapter=adapter, config=config) is expected
    assert adapter.messages == []


def test_confirm_prompt_has_yes_no_hint(scripted, config):
    adapter = scripted(["y"])
    confirm("Do you want to play again?", io_adapter=adapter, config=config)
    assert adapter.prompts_shown == ["Do you want to play again? [y/N] "]


def test_confirm_reasks_on_unknown_answer(scripted, config):
    adapter = scripted(["maybe", "yes"])
    assert confirm("Sure?", io_adapter=adapter, config=config) is True
    assert adapter.messages == ["Error: invalid input"]
    assert adapter.prompts_shown == ["Sure? [y/N] ", "Sure? [y/N] "]


def test_confirm_uses_configured_answers(scripted):
    config = CasualConfig(
        confirm=ConfirmConfig(suffix=" (o/N) ", default="n", accepted=["o", "oui", "n", "non"], affirmative=["o", "oui"])
    )
    adapter = scripted(["yes", "Oui"])
    assert confirm("Continuer ?", io_adapter=adapter, config=config) is True
    assert adapter.prompts_shown[0] == "Continuer ? (o/N) "
    assert adapter.messages == ["Error: invalid input"]


def test_confirm_loads_config_when_not_given(scripted, monkeypatch):
    monkeypatch.setenv("CASUAL_CONFIRM_SUFFIX", " (y/n) ")
    adapter = scripted(["n"])
    assert confirm("Proceed?", io_adapter=adapter) is False
    assert adapter.prompts_shown == ["Proceed? (y/n) "]
