from _bfup.errors import NestingError, OutputError
from _bfup.streams import takes_stream
from _bfup.tokenizer.token import Group, Number, Operator


class LineCounter:
    """
    Length of the current output line, shared by every level of
    write_tokens so that lines are wrapped at the same width
    regardless of how deeply the operators were nested.
    """

    def __init__(self, width):
        """
        :param width: Maximal number of characters in a line, at least 1.
        """
        if width < 1:
            raise ValueError(f"Line width must be positive, got {width}")
        self.width = width
        self.length = 0

    def advance(self, sink):
        """
        Count one written character, and end the line
        when it reaches the width.
        """
        self.length += 1
        if self.length == self.width:
            write_string(sink, "\n")
            self.length = 0


def write_string(sink, string):
    try:
        sink.write(string)
    except (OSError, ValueError) as err:
        raise OutputError() from err


def write_tokens(sink, tokens, line_counter=None):
    """
    Writes the operators in tokens to the sink.

    A Number multiplies the token following it, a multiplied Group
    is written repeatedly as a whole. A Number directly followed by
    another Number is overridden by it.

    :param sink: Text stream to write to.
    :param tokens: Iterable of tokens, as read by the Lexer.
    :param line_counter: LineCounter used to wrap the output,
        or None to write everything on one line.
    :raises OutputError: If writing to the sink fails.
    """
    multiplier = 1
    for token in tokens:
        if isinstance(token, Number):
            multiplier = token.value
            continue

        if isinstance(token, Group):
            for _ in range(multiplier):
                write_tokens(sink, token.tokens, line_counter)
        elif isinstance(token, Operator):
            for _ in range(multiplier):
                write_string(sink, token.operator)
                if line_counter is not None:
                    line_counter.advance(sink)
        else:
            raise TypeError(f"Can not write {token!r}")
        multiplier = 1


@takes_stream(0, "w")
def write(filelike, tokens, line_width=None):
    """
    Writes the given tokens to the file.

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param tokens: Tokens, as returned by _bfup.reading.tokenize.
    :param line_width: If given, a newline is written after every
        line_width operators.
    :raises OutputError: If writing to the file fails.
    :raises NestingError: If groups are nested too deeply to be written.
    """
    line_counter = None if line_width is None else LineCounter(line_width)
    try:
        write_tokens(filelike, tokens, line_counter)
    except RecursionError as err:
        raise NestingError("groups are nested too deeply to be written") from err
