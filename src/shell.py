""" Implement the core of the shell. """
import logging

from constants import PROMPT
from exceptions import ShellExit
from lexer import tokenize
from parser import parse_simple_command
from runner import execute_command
from shell_state import ShellState

log = logging.getLogger(__name__)


def read_command(prompt=PROMPT):
    """ Read one line of input. Raises EOFError at end of input. """
    return input(prompt)


class Shell:
    def __init__(self, state=None):
        self.state = state if state is not None else ShellState()

    def run_line(self, line: str) -> int:
        """ Tokenize, parse and execute one line. Returns the command status. """
        tokens = tokenize(line)
        cmd = parse_simple_command(tokens)
        if cmd is None:
            return self.state.last_status

        status = execute_command(cmd, self.state)
        self.state.set_status(status)
        log.debug("%s exited with status %d", cmd.name, self.state.last_status)
        return self.state.last_status

    def run(self):
        while True:
            try:
                try:
                    line = read_command()
                except (OSError, UnicodeDecodeError) as e:
                    # stdin can no longer be read; stop like at end of input
                    log.debug("cannot read input: %s", e)
                    print()
                    return 1
                self.run_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
