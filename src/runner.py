""" Execute a shell command. """
import contextlib
import logging
import subprocess
import sys

from command import ParsedCommand, RedirectTarget
from constants import STATUS_NOT_EXECUTABLE, STATUS_NOT_FOUND
from resolver import CommandKind, classify, find_in_path
from shell_builtins import BUILTINS, REDIRECTING
from shell_state import ShellState

log = logging.getLogger(__name__)


def open_target(target: RedirectTarget|None):
    """
    Open a redirection target for writing.

    Returns None when there is no target or it cannot be opened; the
    stream then keeps its usual destination.
    """
    if target is None:
        return None

    mode = "a" if target.append else "w"
    try:
        return open(target.path, mode)
    except (OSError, ValueError) as e:
        log.debug("cannot open %s for redirection: %s", target.path, e)
        return None


def close_handles(*handles):
    for h in handles:
        if h is not None:
            h.close()


@contextlib.contextmanager
def redirected(stream_name, handle):
    """ Temporarily replace sys.stdout or sys.stderr with handle. """
    if handle is None:
        yield
        return

    old = getattr(sys, stream_name)
    setattr(sys, stream_name, handle)
    try:
        yield
    finally:
        setattr(sys, stream_name, old)


def run_builtin(kind: CommandKind, cmd: ParsedCommand, state: ShellState) -> int:
    func = BUILTINS[kind.value]
    if kind.value not in REDIRECTING:
        return func(cmd.args, state) or 0

    stdout_handle = open_target(cmd.redirection.stdout)
    stderr_handle = open_target(cmd.redirection.stderr)
    try:
        with redirected("stdout", stdout_handle), redirected("stderr", stderr_handle):
            return func(cmd.args, state) or 0
    finally:
        close_handles(stdout_handle, stderr_handle)


def run_external(cmd: ParsedCommand, state: ShellState) -> int:
    path = find_in_path(cmd.name, state)
    if path is None:
        print(f"{cmd.name}: command not found", file=sys.stderr)
        return STATUS_NOT_FOUND

    stdout_handle = open_target(cmd.redirection.stdout)
    stderr_handle = open_target(cmd.redirection.stderr)
    try:
        # the child writes straight to our file descriptors
        sys.stdout.flush()
        sys.stderr.flush()

        log.debug("spawning %s with argv %r", path, cmd.argv)
        completed = subprocess.run(
            cmd.argv,
            executable=path,
            stdout=stdout_handle,
            stderr=stderr_handle,
        )
        return completed.returncode
    except OSError as e:
        print(f"{cmd.name}: {e.strerror or e}", file=sys.stderr)
        return STATUS_NOT_EXECUTABLE
    except ValueError as e:
        # an argument with an embedded null byte cannot be passed to exec
        print(f"{cmd.name}: {e}", file=sys.stderr)
        return STATUS_NOT_EXECUTABLE
    finally:
        close_handles(stdout_handle, stderr_handle)


def execute_command(cmd: ParsedCommand, state: ShellState) -> int:
    """ Run one parsed command to completion and return its status. """
    kind = classify(cmd.name)
    log.debug("%s classified as %s", cmd.name, kind.name)

    if kind is CommandKind.EXTERNAL:
        return run_external(cmd, state)
    return run_builtin(kind, cmd, state)
