""" Decide what a command name refers to. """
import logging
import os
import stat
from enum import Enum

from constants import BUILTIN_NAMES
from shell_state import ShellState

log = logging.getLogger(__name__)

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class CommandKind(Enum):
    ECHO = "echo"
    TYPE = "type"
    CD = "cd"
    PWD = "pwd"
    EXIT = "exit"
    EXTERNAL = None


def is_builtin(name: str) -> bool:
    return name in BUILTIN_NAMES


def classify(name: str) -> CommandKind:
    """ Builtins always win over an executable of the same name. """
    if is_builtin(name):
        return CommandKind(name)
    return CommandKind.EXTERNAL


def search_path(state: ShellState) -> list[str]:
    """ Directories from PATH in lookup order, skipping empty entries. """
    value = state.search_path
    if not value:
        return []
    return [d for d in value.split(":") if d]


def is_executable_file(path: str) -> bool:
    """ True for a regular file with any of the execute bits set. """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        # ValueError: embedded null byte
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXEC_BITS)


def find_in_path(name: str, state: ShellState|None = None) -> str|None:
    """ Return the absolute path of the first matching executable on PATH. """
    if state is None:
        state = ShellState()

    for directory in search_path(state):
        candidate = os.path.join(directory, name)
        if is_executable_file(candidate):
            log.debug("resolved %s to %s", name, candidate)
            return os.path.abspath(candidate)

    log.debug("%s not found on search path", name)
    return None
