""" Registry of builtin commands. """
import sys

from exceptions import ShellExit
from resolver import find_in_path, is_builtin

BUILTINS = {}
# Builtins that write through the command's redirections.
REDIRECTING = set()


def builtin(name, redirects=False):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        if redirects:
            REDIRECTING.add(name)
        return func
    return wrapper


def expand_home(target, state):
    """ Expand a leading ~ to the home directory. """
    if target == "~":
        return state.home
    if target.startswith("~/"):
        return state.home.rstrip("/") + target[1:]
    return target


@builtin("cd")
def builtin_cd(args, state):
    target = args[0] if args else "~"
    path = expand_home(target, state)

    try:
        state.chdir(path)
        return 0
    except (FileNotFoundError, ValueError):
        print(f"cd: {target}: No such file or directory", file=sys.stderr)
    except NotADirectoryError:
        print(f"cd: {target}: Not a directory", file=sys.stderr)
    except PermissionError:
        print(f"cd: {target}: Permission denied", file=sys.stderr)
    except OSError as e:
        print(f"cd: {target}: {e.strerror}", file=sys.stderr)
    # Indicate failure due to error
    return 1


@builtin("echo", redirects=True)
def builtin_echo(args, state) -> int:
    print(" ".join(args))
    return 0


@builtin("exit")
def builtin_exit(args, state):
    try:
        status = int(args[0]) if args else 0
    except ValueError:
        print(f"exit: {args[0]}: numeric argument required", file=sys.stderr)
        status = 2
    raise ShellExit(status)


@builtin("pwd")
def builtin_pwd(args, state):
    print(state.cwd)
    return 0


@builtin("type")
def builtin_type(args, state):
    """
    type NAME...
    Reports whether each NAME is a builtin, an executable on PATH, or unknown.
    """
    rc = 0
    for name in args:
        if is_builtin(name):
            print(f"{name} is a shell builtin")
            continue

        path = find_in_path(name, state)
        if path:
            print(f"{name} is {path}")
        else:
            print(f"{name}: not found")
            rc = 1
    return rc
