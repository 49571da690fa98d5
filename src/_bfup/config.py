"""
The symbol configuration tells the lexer which characters are operators,
group delimiters and prefixes. Every character has at most one role, only
operators may be given by more than one character.
"""

import json
import warnings

from _bfup.errors import BfupError
from _bfup.streams import takes_stream
from _bfup.tokenizer.role import Role

DEFAULT_OPERATORS = "+-<>[].,"
DEFAULT_GROUP_START_DELIMITER = "("
DEFAULT_GROUP_END_DELIMITER = ")"
DEFAULT_NUMBER_PREFIX = "#"
DEFAULT_MACRO_PREFIX = "$"
DEFAULT_ESCAPE_PREFIX = "\\"

CONFIG_KEYS = (
    "operators",
    "group_start_delimiter",
    "group_end_delimiter",
    "number_prefix",
    "macro_prefix",
    "escape_prefix",
)


class ConfigError(BfupError, ValueError):
    """
    Raised when a configuration is invalid, ie. when a character
    is given more than one role.
    """

    pass


def check_single_character(value, role):
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"{role} must be a single character, got {value!r}.")


class Config:
    """
    Mapping between characters and their Role.

    >>> config = Config(operators="+-")
    >>> config.role_of("+")
    <Role.OPERATOR: 1>
    >>> config.char_for(Role.NUMBER_PREFIX)
    '#'

    :raises ConfigError: If a character is given more than one role,
        or a symbol is not a single character.
    """

    def __init__(
        self,
        operators=DEFAULT_OPERATORS,
        group_start_delimiter=DEFAULT_GROUP_START_DELIMITER,
        group_end_delimiter=DEFAULT_GROUP_END_DELIMITER,
        number_prefix=DEFAULT_NUMBER_PREFIX,
        macro_prefix=DEFAULT_MACRO_PREFIX,
        escape_prefix=DEFAULT_ESCAPE_PREFIX,
    ):
        roles = {}
        ordered_operators = []
        for operator in operators:
            check_single_character(operator, Role.OPERATOR)
            if operator not in roles:
                ordered_operators.append(operator)
            roles[operator] = Role.OPERATOR

        for char, role in (
            (group_start_delimiter, Role.GROUP_START_DELIMITER),
            (group_end_delimiter, Role.GROUP_END_DELIMITER),
            (number_prefix, Role.NUMBER_PREFIX),
            (macro_prefix, Role.MACRO_PREFIX),
            (escape_prefix, Role.ESCAPE_PREFIX),
        ):
            check_single_character(char, role)
            if char in roles:
                raise ConfigError(f"{role} cannot be {roles[char]}.")
            roles[char] = role

        self._roles = roles
        self._chars = {
            role: char for char, role in roles.items() if role != Role.OPERATOR
        }
        self._operators = "".join(ordered_operators)

    @property
    def operators(self):
        return self._operators

    def role_of(self, char):
        """
        :returns: The Role of the character or None if it has no role.
        """
        return self._roles.get(char)

    def char_for(self, role):
        """
        :returns: The character configured for the given role. For
            Role.OPERATOR the first configured operator is returned.
        :raises KeyError: If there are no operators and Role.OPERATOR
            is given.
        """
        if role == Role.OPERATOR:
            if not self._operators:
                raise KeyError(role)
            return self._operators[0]
        return self._chars[role]

    def as_dict(self):
        return {
            "operators": self.operators,
            "group_start_delimiter": self.char_for(Role.GROUP_START_DELIMITER),
            "group_end_delimiter": self.char_for(Role.GROUP_END_DELIMITER),
            "number_prefix": self.char_for(Role.NUMBER_PREFIX),
            "macro_prefix": self.char_for(Role.MACRO_PREFIX),
            "escape_prefix": self.char_for(Role.ESCAPE_PREFIX),
        }

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self._roles == other._roles

    def __repr__(self):
        arguments = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"Config({arguments})"


@takes_stream(0, "r")
def read_config(filelike):
    """
    Reads a Config from a json file, ie. config = read_config("bf.json")
    where bf.json contains

        {"operators": "+-<>[].,", "number_prefix": "*"}

    Keys that are not given take the default values, unknown keys
    are ignored with a warning.

    :param filelike: A file-like object, (string to path, pathlib.Path
        or opened text stream).
    :raises ConfigError: If the file is not a json object or the resulting
        configuration is invalid.
    """
    try:
        values = json.load(filelike)
    except json.JSONDecodeError as err:
        raise ConfigError(f"[{err.lineno}:{err.colno}]: {err.msg}.") from err

    if not isinstance(values, dict):
        raise ConfigError(
            f"Expected config to be a json object, got {type(values).__name__}."
        )

    for key in values:
        if key not in CONFIG_KEYS:
            warnings.warn(f"Ignoring unknown config key {key!r}", stacklevel=3)

    if not isinstance(values.get("operators", ""), str):
        raise ConfigError(
            f"Expected operators to be a string, got {values['operators']!r}."
        )

    return Config(**{k: v for k, v in values.items() if k in CONFIG_KEYS})
