import logging

from _bfup.config import Config
from _bfup.reading import tokenize
from _bfup.writing import write

logger = logging.getLogger(__name__)


def preprocess(source, sink, config=None, line_width=None):
    """
    Preprocesses source, writing the result to sink.

    The following rules are applied, from most important to least:

     1. Macros are expanded.
     2. The escape prefix skips the next character.
     3. A number prefix followed by a number n multiplies the
        next token n times.
     4. A macro prefix followed by a character and a token defines
        the character as a macro evaluating to that token.
     5. Tokens enclosed in group delimiters are treated as one token.
     6. Operators are copied to the output.
     7. Every other character is skipped.

    The whole source is read before anything is written, so nothing
    is written when the source contains errors.

    :param source: A file-like object to read, (string to path,
        pathlib.Path or opened text stream).
    :param sink: A file-like object to write to, (string to path,
        pathlib.Path or opened text stream).
    :param config: The Config to use, defaults to Config().
    :param line_width: If given, the output is aligned in lines
        of line_width characters.
    :raises ValueError: If line_width is not positive.
    :raises InputError: If reading the source fails.
    :raises ErrorGroup: Containing every syntax error in the source.
    :raises OutputError: If writing to the sink fails.
    :raises NestingError: If groups are nested too deeply to be processed.
    """
    if line_width is not None and line_width < 1:
        raise ValueError(f"Line width must be positive, got {line_width}")
    if config is None:
        config = Config()

    logger.debug("preprocessing with %r, line width %s", config, line_width)
    tokens = tokenize(source, config)
    logger.debug("read %d top level tokens", len(tokens))
    write(sink, tokens, line_width)
