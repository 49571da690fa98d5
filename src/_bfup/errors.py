class BfupError(Exception):
    """
    Base class of every error raised by bfup.
    """

    pass


class InputError(BfupError):
    """
    Raised when reading a character from the input fails. Fatal: the
    lexer stops immediately and everything read so far is discarded.
    The underlying exception is available as __cause__.
    """

    def __str__(self):
        if self.__cause__ is not None:
            return f"failed to read input: {self.__cause__}"
        return super().__str__()


class OutputError(BfupError):
    """
    Raised when writing the preprocessed output fails.
    """

    def __str__(self):
        if self.__cause__ is not None:
            return f"failed to write output: {self.__cause__}"
        return super().__str__()


class NestingError(BfupError):
    """
    Raised when groups are nested deeper than the interpreter's
    recursion limit allows them to be read or written.
    """

    pass
