import logging
import sys

from _bfup.errors import InputError
from _bfup.tokenizer.errors import (
    DelimiterUnclosedError,
    DelimiterUnopenedError,
    ErrorGroup,
    GroupEmptyError,
    MacroMissingError,
    NumberMissingError,
    NumberOverflowError,
    TokenizationError,
)
from _bfup.tokenizer.role import Role
from _bfup.tokenizer.token import Group, Number, Operator

logger = logging.getLogger(__name__)

# Largest value accepted after a number prefix.
MAX_NUMBER = sys.maxsize


class _GroupEnd:
    def __repr__(self):
        return "GROUP_END"


# Returned by Lexer.read_item when a group end delimiter is read.
GROUP_END = _GroupEnd()

_NOTHING = object()


class Lexer:
    """
    Reads tokens from an iterable of characters.

    The Lexer recognizes the following structures:

     * Operators, yielded verbatim as Operator tokens.
     * Numbers, a number prefix followed by decimal digits.
     * Groups, tokens enclosed in group delimiters, yielded as a whole.
     * Macro definitions, a macro prefix followed by a character and
       a token. After the definition, every occurrence of the character
       is replaced by the token, even if the character is an operator,
       prefix or delimiter.
     * Escapes, an escape prefix skips the following character.

    Any other character is skipped.

    >>> lexer = Lexer("#3(+-)", Config())
    >>> lexer.read_all_tokens()
    [Number(value=3), Group(tokens=(Operator(operator='+'), Operator(operator='-')))]

    Exceptions raised by the character iterable are wrapped in InputError
    and abort reading immediately. Syntax errors are subclasses of
    TokenizationError, read_all_tokens collects all of them into one
    ErrorGroup.
    """

    def __init__(self, chars, config):
        """
        :param chars: Iterable of characters, e.g. a string or
            _bfup.streams.iter_chars(stream).
        :param config: The Config giving the roles of characters.
        """
        self.config = config
        self.chars = iter(chars)
        self.macros = {}
        self.lineno = 1
        self.colno = 0
        self._lookahead = _NOTHING

    def __iter__(self):
        while True:
            token = self.read_token()
            if token is None:
                return
            yield token

    def read_all_tokens(self):
        """
        Read every token until the end of input.

        :returns: List of all tokens read.
        :raises InputError: As soon as reading the input fails.
        :raises ErrorGroup: At the end of input, if any syntax errors
            were found.
        """
        tokens = []
        errors = []
        while True:
            try:
                token = self.read_token()
            except TokenizationError as err:
                errors.append(err)
                continue
            if token is None:
                break
            tokens.append(token)

        if errors:
            raise ErrorGroup(errors)
        return tokens

    def read_token(self):
        """
        :returns: The next token or None at end of input.
        :raises DelimiterUnopenedError: If a group end delimiter is read.
        """
        item = self.read_item()
        if item is GROUP_END:
            raise self._delimiter_error(DelimiterUnopenedError)
        return item

    def read_item(self):
        """
        Read the next token, GROUP_END if a group end delimiter was
        read, or None at end of input.
        """
        while True:
            char = self.next_char()
            if char is None:
                return None

            if char in self.macros:
                return self.macros[char]

            role = self.config.role_of(char)
            if role == Role.ESCAPE_PREFIX:
                self.next_char()
            elif role == Role.NUMBER_PREFIX:
                return self.read_number()
            elif role == Role.MACRO_PREFIX:
                if self.read_macro_definition() is GROUP_END:
                    return GROUP_END
            elif role == Role.GROUP_START_DELIMITER:
                return self.read_group()
            elif role == Role.GROUP_END_DELIMITER:
                return GROUP_END
            elif role == Role.OPERATOR:
                return Operator(char)

    def read_number(self):
        """
        Read the decimal digits following a number prefix. Errors are
        reported at the position of the prefix.
        """
        lineno, colno = self.lineno, self.colno
        number_prefix = self.config.char_for(Role.NUMBER_PREFIX)

        digits = []
        while is_digit(self.peek_char()):
            digits.append(self.next_char())

        if not digits:
            raise NumberMissingError(lineno, colno, number_prefix)

        digits = "".join(digits)
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(str(MAX_NUMBER)) or int(significant) > MAX_NUMBER:
            raise NumberOverflowError(lineno, colno, number_prefix, digits, MAX_NUMBER)
        return Number(int(significant))

    def read_macro_definition(self):
        """
        Read the symbol and body of a macro and bind them in self.macros.

        :returns: GROUP_END if a group end delimiter was read in place of
            the body, None otherwise.
        """
        symbol = self.next_char()
        if symbol is None:
            raise self._macro_missing()

        body = self.read_item()
        if body is None:
            raise self._macro_missing()
        if body is GROUP_END:
            return GROUP_END

        logger.debug(
            "[%d:%d]: binding macro %r to %r", self.lineno, self.colno, symbol, body
        )
        self.macros[symbol] = body
        return None

    def read_group(self):
        """
        Read the tokens following a group start delimiter, up to and
        including the matching group end delimiter.

        Reading continues after errors inside the group, so that every
        error in it is reported.

        :raises ErrorGroup: If any token in the group was erroneous or
            the group was never closed.
        :raises GroupEmptyError: If the group contains no tokens.
        """
        tokens = []
        errors = []
        while True:
            try:
                item = self.read_item()
            except TokenizationError as err:
                errors.append(err)
                continue
            if item is GROUP_END:
                break
            if item is None:
                errors.append(self._delimiter_error(DelimiterUnclosedError))
                break
            tokens.append(item)

        if errors:
            raise ErrorGroup(errors)
        if not tokens:
            raise self._delimiter_error(GroupEmptyError)
        return Group(tuple(tokens))

    def peek_char(self):
        """
        :returns: The next character without consuming it, or None at
            end of input.
        """
        if self._lookahead is _NOTHING:
            self._lookahead = self._pull()
        return self._lookahead

    def next_char(self):
        """
        Consume the next character and update the position.

        :returns: The character or None at end of input.
        """
        if self._lookahead is _NOTHING:
            char = self._pull()
        else:
            char = self._lookahead
            self._lookahead = _NOTHING

        if char is None:
            return None
        if char == "\n":
            self.lineno += 1
            self.colno = 0
        else:
            self.colno += 1
        return char

    def _pull(self):
        try:
            return next(self.chars)
        except StopIteration:
            return None
        except (OSError, ValueError) as err:
            raise InputError() from err

    def _delimiter_error(self, error_type):
        return error_type(
            self.lineno,
            self.colno,
            self.config.char_for(Role.GROUP_START_DELIMITER),
            self.config.char_for(Role.GROUP_END_DELIMITER),
        )

    def _macro_missing(self):
        return MacroMissingError(
            self.lineno, self.colno, self.config.char_for(Role.MACRO_PREFIX)
        )


def is_digit(char):
    return char is not None and "0" <= char <= "9"
