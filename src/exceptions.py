""" Exceptions used to signal the shell loop. """


class ShellExit(Exception):
    """ Raised by the exit builtin to stop the read-evaluate loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status
