""" Parsed command and redirection types. """
from enum import Enum
from typing import NamedTuple


class RedirectionOperator(Enum):
    """ What a redirection operator does: which stream, and whether it appends. """
    STDOUT_TRUNCATE = ("stdout", False)
    STDOUT_APPEND = ("stdout", True)
    STDERR_TRUNCATE = ("stderr", False)
    STDERR_APPEND = ("stderr", True)

    @property
    def stream(self) -> str:
        return self.value[0]

    @property
    def append(self) -> bool:
        return self.value[1]


OPERATORS = {
    ">": RedirectionOperator.STDOUT_TRUNCATE,
    "1>": RedirectionOperator.STDOUT_TRUNCATE,
    ">>": RedirectionOperator.STDOUT_APPEND,
    "1>>": RedirectionOperator.STDOUT_APPEND,
    "2>": RedirectionOperator.STDERR_TRUNCATE,
    "2>>": RedirectionOperator.STDERR_APPEND,
}


class OperatorToken(str):
    """
    A redirection operator found outside quotes.

    Compares equal to its spelling, so token lists still read as plain
    strings, but a quoted '>' never becomes one of these.
    """
    @property
    def operator(self) -> RedirectionOperator:
        return OPERATORS[str(self)]


class RedirectTarget(NamedTuple):
    path: str
    append: bool = False


class Redirection:
    """ At most one target for stdout and one for stderr. """
    def __init__(self, stdout: RedirectTarget|None = None,
                 stderr: RedirectTarget|None = None):
        self.stdout = stdout
        self.stderr = stderr

    def record(self, operator: RedirectionOperator, path: str):
        # a later operator for the same stream replaces the earlier one
        target = RedirectTarget(path, operator.append)
        if operator.stream == "stdout":
            self.stdout = target
        else:
            self.stderr = target

    def __bool__(self):
        return self.stdout is not None or self.stderr is not None

    def __eq__(self, other):
        if not isinstance(other, Redirection):
            return NotImplemented
        return (self.stdout, self.stderr) == (other.stdout, other.stderr)

    def __repr__(self):
        return f"Redirection(stdout={self.stdout!r}, stderr={self.stderr!r})"


class ParsedCommand:
    """ Argument vector with redirections removed, plus the redirections. """
    def __init__(self, argv: list[str], redirection: Redirection|None = None):
        self.argv = argv
        self.redirection = redirection if redirection is not None else Redirection()

    @property
    def name(self) -> str:
        return self.argv[0]

    @property
    def args(self) -> list[str]:
        return self.argv[1:]

    def __repr__(self):
        return f"ParsedCommand(argv={self.argv!r}, redirection={self.redirection!r})"
