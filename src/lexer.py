""" Lexical analysis for shell commands. """
from enum import Enum

from command import OperatorToken
from constants import REDIRECT_MAX_LEN, REDIRECT_SPELLINGS, REDIRECT_START_CHARS, WHITESPACE


class QuoteContext(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


# Characters a backslash escapes inside double quotes.
DOUBLE_QUOTE_ESCAPES = frozenset('"\\')


def match_operator(line: str, i: int) -> str|None:
    """ Return the longest redirection spelling starting at line[i], if any. """
    for size in range(REDIRECT_MAX_LEN, 0, -1):
        candidate = line[i:i + size]
        if len(candidate) == size and candidate in REDIRECT_SPELLINGS:
            return candidate
    return None


def tokenize(line: str) -> list[str]:
    """
    Split one input line into tokens.

    Quotes and backslashes follow POSIX shell rules closely enough for
    simple commands: single quotes are fully literal, double quotes only
    honor \\" and \\\\, and an unquoted backslash escapes whatever follows.
    Redirection operators outside quotes become OperatorToken instances.
    An unterminated quote is not an error; whatever was collected is kept.
    """
    tokens = []
    current = []
    context = QuoteContext.NONE
    i = 0
    n = len(line)

    def flush():
        if current:
            tokens.append("".join(current))
            current.clear()

    while i < n:
        ch = line[i]

        if context is QuoteContext.SINGLE:
            if ch == "'":
                context = QuoteContext.NONE
            else:
                current.append(ch)
            i += 1
            continue

        if context is QuoteContext.DOUBLE:
            if ch == '"':
                context = QuoteContext.NONE
            elif ch == "\\" and i + 1 < n and line[i + 1] in DOUBLE_QUOTE_ESCAPES:
                current.append(line[i + 1])
                i += 1
            else:
                current.append(ch)
            i += 1
            continue

        # Unquoted.
        if ch == "\\":
            if i + 1 < n:
                current.append(line[i + 1])
                i += 2
            else:
                current.append(ch)
                i += 1
        elif ch == "'":
            context = QuoteContext.SINGLE
            i += 1
        elif ch == '"':
            context = QuoteContext.DOUBLE
            i += 1
        elif ch in WHITESPACE:
            flush()
            i += 1
        else:
            op = match_operator(line, i) if ch in REDIRECT_START_CHARS else None
            if op:
                flush()
                tokens.append(OperatorToken(op))
                i += len(op)
            else:
                current.append(ch)
                i += 1

    flush()
    return tokens
