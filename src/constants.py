PROMPT = "$ "

# Characters that end a token outside any quote.
WHITESPACE = frozenset(" \t")

# Every spelling the lexer recognizes as a redirection operator.
REDIRECT_SPELLINGS = (">", ">>", "1>", "1>>", "2>", "2>>")
# Characters that can begin one of the spellings above.
REDIRECT_START_CHARS = frozenset("12>")
# Longest spelling, used to bound lookahead.
REDIRECT_MAX_LEN = max(len(s) for s in REDIRECT_SPELLINGS)

BUILTIN_NAMES = frozenset({"echo", "exit", "type", "pwd", "cd"})

PATH_VAR = "PATH"
HOME_VAR = "HOME"
LOG_LEVEL_VAR = "PYSH_LOG_LEVEL"

STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
