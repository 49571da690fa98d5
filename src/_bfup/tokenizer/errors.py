from _bfup.errors import BfupError


class TokenizationError(BfupError):
    """
    Base class for recoverable syntax errors. The lexer collects these
    and keeps reading, so that a single run reports every problem found
    in the input (see ErrorGroup).

    Every error except ErrorGroup carries the line and column where it
    occurred.
    """

    def __init__(self, lineno, colno):
        super().__init__(lineno, colno)
        self.lineno = lineno
        self.colno = colno

    @property
    def message(self):
        raise NotImplementedError

    def __str__(self):
        return f"[{self.lineno}:{self.colno}]: {self.message}."


class DelimiterUnopenedError(TokenizationError):
    def __init__(self, lineno, colno, group_start_delimiter, group_end_delimiter):
        super().__init__(lineno, colno)
        self.group_start_delimiter = group_start_delimiter
        self.group_end_delimiter = group_end_delimiter

    @property
    def message(self):
        return (
            f"'{self.group_end_delimiter}' must have "
            f"a preceding '{self.group_start_delimiter}'"
        )


class DelimiterUnclosedError(TokenizationError):
    def __init__(self, lineno, colno, group_start_delimiter, group_end_delimiter):
        super().__init__(lineno, colno)
        self.group_start_delimiter = group_start_delimiter
        self.group_end_delimiter = group_end_delimiter

    @property
    def message(self):
        return f"expected '{self.group_end_delimiter}'"


class GroupEmptyError(TokenizationError):
    def __init__(self, lineno, colno, group_start_delimiter, group_end_delimiter):
        super().__init__(lineno, colno)
        self.group_start_delimiter = group_start_delimiter
        self.group_end_delimiter = group_end_delimiter

    @property
    def message(self):
        return (
            "group is empty "
            f"('{self.group_start_delimiter}{self.group_end_delimiter}')"
        )


class NumberMissingError(TokenizationError):
    def __init__(self, lineno, colno, number_prefix):
        super().__init__(lineno, colno)
        self.number_prefix = number_prefix

    @property
    def message(self):
        return f"number prefix '{self.number_prefix}' must be followed by number"


class NumberOverflowError(TokenizationError):
    """
    The digits following a number prefix denote a value larger
    than the maximal multiplier.
    """

    def __init__(self, lineno, colno, number_prefix, digits, maximum):
        super().__init__(lineno, colno)
        self.number_prefix = number_prefix
        self.digits = digits
        self.maximum = maximum

    @property
    def message(self):
        return (
            f"number '{self.number_prefix}{self.digits}' "
            f"is larger than {self.maximum}"
        )


class MacroMissingError(TokenizationError):
    def __init__(self, lineno, colno, macro_prefix):
        super().__init__(lineno, colno)
        self.macro_prefix = macro_prefix

    @property
    def message(self):
        return (
            f"macro prefix '{self.macro_prefix}' must be followed "
            "by a character and a token"
        )


class ErrorGroup(TokenizationError):
    """
    A non-empty group of TokenizationErrors found in one scope (a group
    or the whole input). When displayed, every error is printed on its
    own line.

    Nested ErrorGroups are flattened on construction, so errors is
    always a flat tuple.
    """

    def __init__(self, errors):
        flattened = []
        for error in errors:
            if isinstance(error, ErrorGroup):
                flattened.extend(error.errors)
            elif isinstance(error, TokenizationError):
                flattened.append(error)
            else:
                raise TypeError(f"ErrorGroup can not contain {error!r}")
        if not flattened:
            raise ValueError("ErrorGroup must contain at least one error")

        BfupError.__init__(self, *flattened)
        self.errors = tuple(flattened)

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __str__(self):
        return "\n".join(str(error) for error in self.errors)
