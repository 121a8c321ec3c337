import logging
import re
import sys

logger = logging.getLogger(__name__)

INTEGER = re.compile(r"\s*([+-]?[0-9]+)(.*)", re.DOTALL)

# Range of a 32-bit int; anything outside does not count as an integer
INT_MIN = -2**31
INT_MAX = 2**31 - 1

WELCOME_TEXT = (
    "Welcome to ForceViz!\n"
    "This program uses a force-directed graph layout algorithm\n"
    "to render sleek, snazzy pictures of various graphs.\n"
)

REPEAT_PROMPT = ('Type "yes" and hit ENTER to load a new graph '
                 'or press ENTER to finish the program: ')


class IntegerParse:
    """Outcome of parsing one line as an integer."""
    OK = 'ok'
    NOT_AN_INTEGER = 'not_an_integer'
    TRAILING_GARBAGE = 'trailing_garbage'

    def __init__(self, kind, value=None, unexpected=None):
        self.kind = kind
        self.value = value
        self.unexpected = unexpected  # first stray character, if any

    @property
    def ok(self):
        return self.kind == IntegerParse.OK


def parse_integer(text):
    match = INTEGER.match(text)
    if not match:
        return IntegerParse(IntegerParse.NOT_AN_INTEGER)

    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        return IntegerParse(IntegerParse.NOT_AN_INTEGER)

    remaining = match.group(2).strip()
    if remaining:
        return IntegerParse(IntegerParse.TRAILING_GARBAGE, unexpected=remaining[0])
    return IntegerParse(IntegerParse.OK, value=value)


class Console:
    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def writeln(self, text=""):
        self.write(text + "\n")

    def welcome(self):
        self.writeln(WELCOME_TEXT)

    def get_line(self):
        """Reads one line without its newline. Raises EOFError when input ends."""
        line = self.stdin.readline()
        if not line:
            raise EOFError("console input closed")
        return line[:-1] if line.endswith("\n") else line

    def get_integer(self):
        while True:
            result = parse_integer(self.get_line())
            if result.ok:
                return result.value
            if result.kind == IntegerParse.TRAILING_GARBAGE:
                self.writeln(f"Unexpected character: {result.unexpected}")
            else:
                self.writeln("Please enter an integer.")
            self.write("Retry: ")

    def get_positive_integer(self):
        while True:
            value = self.get_integer()
            if value > 0:
                return value
            self.writeln("Not a positive integer.")
            self.write("Please enter a positive integer: ")

    def prompt_for_file_name(self):
        """Asks until the user names a file that can be opened for reading."""
        while True:
            self.write("Please enter a graph file to import: ")
            file_name = self.get_line()
            try:
                with open(file_name, 'r'):
                    pass
            except OSError as e:
                logger.debug("Cannot open %r: %s", file_name, e)
                self.writeln(f"{file_name} is an invalid file name.")
                continue
            return file_name

    def prompt_for_time(self):
        self.write("Enter an integer number of seconds to run the algorithm: ")
        return self.get_positive_integer()

    def prompt_for_repeat(self):
        self.write(REPEAT_PROMPT)
        return self.get_line() == "yes"
