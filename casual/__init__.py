"""
Easily get user input.

    username = casual.prompt("Please enter your name: ").get()
    age = casual.prompt("Please enter your age: ", int).get()

    if not casual.confirm("Are you sure you want to continue?"):
        raise SystemExit("Aborted!")
"""

from casual.confirmation import confirm
from casual.errors import ConfigError, ConsoleIOError, InputConsumedError, InputError
from casual.input_builder import Input, input, prompt

__all__ = [
    "Input",
    "input",
    "prompt",
    "confirm",
    "InputError",
    "ConsoleIOError",
    "InputConsumedError",
    "ConfigError",
]
