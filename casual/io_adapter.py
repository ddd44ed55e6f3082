# casual/io_adapter.py

from abc import ABC, abstractmethod


class IOAdapter(ABC):
    @abstractmethod
    def prompt(self, message: str) -> None:
        """Print an advisory line (followed by a newline)."""
        ...

    @abstractmethod
    def collect(self, prompt_text: str) -> str:
        """Show prompt_text (if any) without a newline and return one raw input line."""
        ...
