"""Enumerations exchanged with the server as uppercase tokens.

Internally every enumeration is an ``IntEnum``; on the wire the server expects
the token of the member instead of its ordinal. Ordinal 0 of every
enumeration is the ``Unknown`` sentinel: it never appears in server responses
but gives every field a safe zero value.
"""

from collections.abc import Sequence
from enum import IntEnum
from typing import Self

from perfrepo_client.errors import EnumParseError

UNKNOWN_TOKEN = "Unknown"


class WireEnum(IntEnum):
    """IntEnum whose members encode to their name, the sentinel to ``Unknown``."""

    @property
    def token(self) -> str:
        return UNKNOWN_TOKEN if self.value == 0 else self.name

    @classmethod
    def tokens(cls) -> Sequence[str]:
        """Token table ordered by ordinal."""
        return tuple(member.token for member in cls)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Decode a token into its member.

        Raises:
            EnumParseError: If ``text`` matches no token of this enumeration

        """
        for member in cls:
            if member.token == text:
                return member
        raise EnumParseError(f"Unable to parse {text!r} as {cls.__name__}")


class Comparator(WireEnum):
    """Whether lower or higher results of a metric are better."""

    UNKNOWN = 0
    LB = 1
    HB = 2


class GroupFilter(WireEnum):
    UNKNOWN = 0
    MY_GROUPS = 1
    ALL_GROUPS = 2


class OrderBy(WireEnum):
    UNKNOWN = 0
    DATE_ASC = 1
    DATE_DESC = 2
    PARAMETER_ASC = 3
    PARAMETER_DESC = 4
    VERSION_ASC = 5
    VERSION_DESC = 6
    NAME_ASC = 7
    NAME_DESC = 8
    UID_ASC = 9
    UID_DESC = 10
    GROUP_ID_ASC = 11
    GROUP_ID_DESC = 12


class AccessType(WireEnum):
    UNKNOWN = 0
    READ = 1
    WRITE = 2


class AccessLevel(WireEnum):
    UNKNOWN = 0
    USER = 1
    GROUP = 2
    PUBLIC = 3
