from enum import Enum, auto, unique


@unique
class Role(Enum):
    """
    The role a configured character plays for the lexer.
    """

    OPERATOR = auto()
    GROUP_START_DELIMITER = auto()
    GROUP_END_DELIMITER = auto()
    NUMBER_PREFIX = auto()
    MACRO_PREFIX = auto()
    ESCAPE_PREFIX = auto()

    @classmethod
    def single_character_roles(cls):
        return (
            cls.GROUP_START_DELIMITER,
            cls.GROUP_END_DELIMITER,
            cls.NUMBER_PREFIX,
            cls.MACRO_PREFIX,
            cls.ESCAPE_PREFIX,
        )

    @property
    def description(self):
        return self.name.lower().replace("_", " ")

    def __str__(self):
        return self.description
