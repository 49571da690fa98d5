"""
In this module, the lexer reads characters from an iterable and generates
tokens: operators, numbers and groups of tokens. Which characters are
operators, delimiters and prefixes is given by a Config.

The lexer keeps reading after a syntax error so that all errors in the
input are reported at once: errors inside a group are collected and raised
as one ErrorGroup when the group ends, and Lexer.read_all_tokens collects
the errors of the whole input the same way. Only errors reading the input
itself (InputError) stop the lexer immediately.

Groups are read recursively. Each level of recursion consumes exactly the
group end delimiter that closes it, a group end delimiter met outside of
any group is an error.
"""

from .errors import (
    DelimiterUnclosedError,
    DelimiterUnopenedError,
    ErrorGroup,
    GroupEmptyError,
    MacroMissingError,
    NumberMissingError,
    NumberOverflowError,
    TokenizationError,
)
from .lexer import MAX_NUMBER, Lexer
from .role import Role
from .token import Group, Number, Operator

__all__ = [
    "DelimiterUnclosedError",
    "DelimiterUnopenedError",
    "ErrorGroup",
    "Group",
    "GroupEmptyError",
    "Lexer",
    "MacroMissingError",
    "MAX_NUMBER",
    "Number",
    "NumberMissingError",
    "NumberOverflowError",
    "Operator",
    "Role",
    "TokenizationError",
]
