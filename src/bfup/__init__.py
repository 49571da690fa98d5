import bfup.version
from _bfup.config import Config, ConfigError, read_config
from _bfup.errors import BfupError, InputError, NestingError, OutputError
from _bfup.preprocessing import preprocess
from _bfup.reading import tokenize
from _bfup.tokenizer import (
    DelimiterUnclosedError,
    DelimiterUnopenedError,
    ErrorGroup,
    Group,
    GroupEmptyError,
    Lexer,
    MacroMissingError,
    Number,
    NumberMissingError,
    NumberOverflowError,
    Operator,
    Role,
    TokenizationError,
)
from _bfup.writing import write

__author__ = """Łukasz Dragon"""
__email__ = "lukasz.b.dragon@gmail.com"

__version__ = bfup.version.version

__all__ = [
    "BfupError",
    "Config",
    "ConfigError",
    "DelimiterUnclosedError",
    "DelimiterUnopenedError",
    "ErrorGroup",
    "Group",
    "GroupEmptyError",
    "InputError",
    "Lexer",
    "MacroMissingError",
    "NestingError",
    "Number",
    "NumberMissingError",
    "NumberOverflowError",
    "Operator",
    "OutputError",
    "Role",
    "TokenizationError",
    "preprocess",
    "read_config",
    "tokenize",
    "write",
]
