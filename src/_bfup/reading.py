from _bfup.config import Config
from _bfup.errors import NestingError
from _bfup.streams import iter_chars, takes_stream
from _bfup.tokenizer import Lexer


@takes_stream(0, "r")
def tokenize(filelike, config=None):
    """
    Reads all tokens of a file, ie. tokens = tokenize("/my/file.bf")

    :param filelike: A file-like object, (string to path, pathlib.Path or
        opened text stream).
    :param config: The Config to use, defaults to Config().
    :returns: The list of tokens in the file.
    :raises InputError: If reading the file fails.
    :raises ErrorGroup: Containing every syntax error in the file.
    :raises NestingError: If groups are nested too deeply to be read.
    """
    if config is None:
        config = Config()
    try:
        return Lexer(iter_chars(filelike), config).read_all_tokens()
    except RecursionError as err:
        raise NestingError("groups are nested too deeply to be read") from err
