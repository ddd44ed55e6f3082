# test/test_input_builder.py

import pytest

import casual
from casual import Input, InputConsumedError


def test_new_input_is_empty():
    builder = Input.new()
    assert builder.composed_prompt() == ""
    assert not builder.consumed


def test_composed_prompt_is_prefix_prompt_suffix():
    builder = Input().prefix(">> ").prompt("Name").suffix(": ")
    assert builder.composed_prompt() == ">> Name: "


def test_setters_overwrite_previous_values():
    builder = Input().prompt("first").prompt("second").suffix("?").suffix("! ")
    assert builder.composed_prompt() == "second! "


def test_empty_prompt_text_is_allowed():
    assert Input().prompt("").prefix("").composed_prompt() == ""


def test_setters_chain_on_same_builder():
    builder = Input(int)
    assert builder.prompt("x") is builder
    assert builder.default(3) is builder
    assert builder.matches(lambda v: v > 0) is builder


def test_prompt_helper_sets_prompt(scripted, config):
    adapter = scripted(["7"])
    value = casual.prompt("Number: ", int).get(io_adapter=adapter, config=config)
    assert value == 7
    assert adapter.prompts_shown == ["Number: "]


def test_input_helper_has_no_prompt(scripted, config):
    adapter = scripted(["hello"])
    assert casual.input().get(io_adapter=adapter, config=config) == "hello"
    assert adapter.prompts_shown == [""]


def test_last_validator_wins(scripted, config):
    adapter = scripted(["5", "50"])
    value = (
        Input(int)
        .matches(lambda v: v < 10)
        .matches(lambda v: v > 10)
        .get(io_adapter=adapter, config=config)
    )
    assert value == 50
    assert adapter.messages == ["Error: invalid input"]


def test_falsy_default_is_still_a_default(scripted, config):
    adapter = scripted([""])
    assert Input(int).default(0).get(io_adapter=adapter, config=config) == 0


def test_builder_is_consumed_once(scripted, config):
    builder = Input(int).default(1)
    builder.get(io_adapter=scripted([""]), config=config)
    assert builder.consumed
    with pytest.raises(InputConsumedError):
        builder.get(io_adapter=scripted(["2"]), config=config)
    with pytest.raises(InputConsumedError):
        builder.check(lambda v: True, io_adapter=scripted(["2"]), config=config)


def test_failed_plan_leaves_builder_usable(scripted, config, monkeypatch):
    def unsupported(type_):
        raise RuntimeError("no parser")

    builder = Input(int)
    with monkeypatch.context() as m:
        m.setattr("casual.input_builder.build_parser", unsupported)
        with pytest.raises(RuntimeError):
            builder.get(io_adapter=scripted(["1"]), config=config)
    assert not builder.consumed

    assert builder.get(io_adapter=scripted(["1"]), config=config) == 1
