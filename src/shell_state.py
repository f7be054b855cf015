""" Current state of the shell. """
import os

from constants import HOME_VAR, PATH_VAR


class ShellState:
    """
    Everything that outlives a single command line.

    The working directory is the process-wide one; all changes to it go
    through chdir() so there is one place that owns it.
    """
    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ
        self.last_status = 0

    def get_var(self, name, default=""):
        return self.environ.get(name, default)

    @property
    def search_path(self) -> str:
        return self.get_var(PATH_VAR)

    @property
    def home(self) -> str:
        return self.get_var(HOME_VAR) or "/"

    @property
    def cwd(self) -> str:
        return os.getcwd()

    def chdir(self, target: str):
        """ Change the working directory. Raises OSError on failure. """
        os.chdir(target)

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0
