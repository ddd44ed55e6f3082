# casual/input_builder.py

from typing import Any, Callable, Generic, TypeVar

from casual.acquisition import AcquisitionPlan, acquire
from casual.errors import InputConsumedError
from casual.io_adapter import IOAdapter
from casual.parsing import build_parser
from casual.session import AcquisitionSession
from core.config_schema import CasualConfig

T = TypeVar("T")


class Input(Generic[T]):
    """
    An input builder.

    Setters return the builder so calls chain:

        age = Input(int).prompt("Your age: ").default(18).get()

    `type_` is what the line is parsed into: any type pydantic can validate
    from a string, or a plain `str -> value` function. A builder is consumed
    by its first get()/check(); calling either again raises InputConsumedError.
    """
    def __init__(self, type_: Any = str):
        self._type = type_
        self._prompt: str | None = None
        self._prefix: str | None = None
        self._suffix: str | None = None
        self._has_default = False
        self._default = None
        self._validator: Callable[[T], bool] | None = None
        self._consumed = False

    @classmethod
    def new(cls, type_: Any = str) -> "Input[T]":
        """Construct a new empty `Input`."""
        return cls(type_)

    def prompt(self, text: str) -> "Input[T]":
        """Set the prompt to display before waiting for user input."""
        self._prompt = text
        return self

    def prefix(self, text: str) -> "Input[T]":
        self._prefix = text
        return self

    def suffix(self, text: str) -> "Input[T]":
        self._suffix = text
        return self

    def default(self, value: T) -> "Input[T]":
        """
        Set the default value.

        Returned as-is (not validated) when the user enters an empty line.
        """
        self._has_default = True
        self._default = value
        return self

    def matches(self, predicate: Callable[[T], bool]) -> "Input[T]":
        """
        Only accept parsed values for which predicate returns true.
        Replaces any previously set validator.
        """
        self._validator = predicate
        return self

    @property
    def consumed(self) -> bool:
        return self._consumed

    def composed_prompt(self) -> str:
        return f"{self._prefix or ''}{self._prompt or ''}{self._suffix or ''}"

    def _consume(self) -> AcquisitionPlan:
        if self._consumed:
            raise InputConsumedError("this Input has already been used; build a new one")
        plan = AcquisitionPlan(
            prompt=self.composed_prompt(),
            parser=build_parser(self._type),
            has_default=self._has_default,
            default=self._default,
            validator=self._validator,
        )
        self._consumed = True
        return plan

    def get(self, io_adapter: IOAdapter | None = None, config: CasualConfig | None = None,
            session: AcquisitionSession | None = None) -> T:
        """
        Consumes the `Input` and reads the input from the user.

        Blocks until a value is accepted. Raises ConsoleIOError if the console
        fails or the input stream ends.
        """
        return acquire(self._consume(), io_adapter=io_adapter, config=config, session=session)

    def check(self, predicate: Callable[[T], bool], io_adapter: IOAdapter | None = None,
              config: CasualConfig | None = None, session: AcquisitionSession | None = None) -> bool:
        """
        Consumes the `Input`, reads a value like get() and returns predicate(value).
        The predicate runs once and a False result is not retried.
        """
        value = self.get(io_adapter=io_adapter, config=config, session=session)
        return bool(predicate(value))


def input(type_: Any = str) -> Input:
    """
    Returns a new empty `Input`.

        data = casual.input().get()
    """
    return Input.new(type_)


def prompt(text: str, type_: Any = str) -> Input:
    """
    Returns an `Input` that prompts the user for input.

        username = casual.prompt("Please enter your name: ").get()
        years = casual.prompt("How many years have you been coding: ", int).default(0).get()
    """
    return Input.new(type_).prompt(text)
