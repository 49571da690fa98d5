from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Number:
    """
    Decimal number preceded by the number prefix, multiplies the
    following token.
    """

    value: int


@dataclass(frozen=True)
class Operator:
    """
    A configured operator character, copied verbatim to the output.
    """

    operator: str


@dataclass(frozen=True)
class Group:
    """
    Tokens enclosed in group delimiters, multiplied as a whole.

    Tokens are immutable, so the same Group object can be handed out
    for every occurrence of a macro bound to it.
    """

    tokens: Tuple["Token", ...]

    def __len__(self):
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)


Token = Union[Number, Operator, Group]
