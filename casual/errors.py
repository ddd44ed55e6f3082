# casual/errors.py


class InputError(Exception):
    pass


class ConsoleIOError(InputError):
    """
    The console could not be written to or read from (including end of input).
    Never retried by the acquisition loop.
    """
    pass


class InputConsumedError(InputError):
    pass


class ParseError(InputError):
    pass


class ConfigError(InputError):
    pass
