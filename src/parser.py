""" Parse shell commands. """
from command import OperatorToken, ParsedCommand, Redirection
from lexer import tokenize


def parse_simple_command(tokens: list[str]) -> ParsedCommand|None:
    """ Separate redirections from arguments in a tokenized command. """
    redirection = Redirection()
    args = []

    it = iter(tokens)
    for tok in it:
        if isinstance(tok, OperatorToken):
            target = next(it, None)
            # a dangling operator at the end of the line is dropped
            if target is not None:
                redirection.record(tok.operator, str(target))
        else:
            args.append(tok)

    if not args:
        return None

    return ParsedCommand(args, redirection)


def parse(line: str) -> ParsedCommand|None:
    return parse_simple_command(tokenize(line))
