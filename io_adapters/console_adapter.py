# io_adapters/console_adapter.py

import sys

from casual.errors import ConsoleIOError
from casual.io_adapter import IOAdapter


class ConsoleAdapter(IOAdapter):
    """
    A command-line IO adapter for the acquisition loop:
      - prompt(text): prints an advisory line to stdout
      - collect(prompt_text): writes prompt_text (without newline), flushes,
                              reads one line from stdin and returns it unstripped.
    Streams default to whatever sys.stdin/sys.stdout are at call time.
    Any failure, and end of input, raises ConsoleIOError.
    """
    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self):
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self):
        return self._stdout if self._stdout is not None else sys.stdout

    def prompt(self, text: str):
        try:
            print(text, file=self.stdout)
        # ValueError: I/O operation on closed file
        except (OSError, ValueError) as e:
            raise ConsoleIOError(f"failed to write to console: {e}") from e

    def collect(self, prompt_text: str) -> str:
        if prompt_text:
            try:
                self.stdout.write(prompt_text)
                self.stdout.flush()
            except (OSError, ValueError) as e:
                raise ConsoleIOError(f"failed to write prompt: {e}") from e

        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as e:
            raise ConsoleIOError(f"failed to read from console: {e}") from e

        if not line:
            raise ConsoleIOError("end of input reached")
        return line
