"""
Member visibility (accessibility) levels.

License: MIT
"""

from enum import IntEnum
from typing import Optional


class MemberVisibility(IntEnum):
    """
    Simplified accessibility levels of a type member, least to most accessible.

    Attributes:
        UNKNOWN: Invalid or unrecognised member definition (the default value)
        PRIVATE: Declaring type and its nested types only
        PRIVATE_PROTECTED: Subtypes within the same or a granted compilation unit
        PROTECTED: Subtypes in any compilation unit
        PROTECTED_INTERNAL: Subtypes, or anything in the same or a granted unit
        INTERNAL: Anything in the same or a granted compilation unit
        PUBLIC: Unrestricted
    """

    UNKNOWN = 0
    PRIVATE = 1
    PRIVATE_PROTECTED = 2
    PROTECTED = 3
    PROTECTED_INTERNAL = 4
    INTERNAL = 5
    PUBLIC = 6

    @classmethod
    def default(cls) -> "MemberVisibility":
        return cls.UNKNOWN

    @property
    def keyword(self) -> str:
        """Source keyword for this level ("" for UNKNOWN)."""
        return _KEYWORDS[self]

    @classmethod
    def from_access_mask(cls, mask: int) -> "MemberVisibility":
        """
        Map a runtime member access mask to a visibility level.

        Only the low three bits (the member access field) are read.

        Args:
            mask: Member attribute flags

        Returns:
            Matching level, or UNKNOWN for 0 (compiler-controlled) and 7
        """
        return _ACCESS_MASK.get(mask & 0x7, cls.UNKNOWN)


_KEYWORDS = {
    MemberVisibility.UNKNOWN: "",
    MemberVisibility.PRIVATE: "private",
    MemberVisibility.PRIVATE_PROTECTED: "private protected",
    MemberVisibility.PROTECTED: "protected",
    MemberVisibility.PROTECTED_INTERNAL: "protected internal",
    MemberVisibility.INTERNAL: "internal",
    MemberVisibility.PUBLIC: "public",
}

# Private, FamANDAssem, Assembly, Family, FamORAssem, Public
_ACCESS_MASK = {
    1: MemberVisibility.PRIVATE,
    2: MemberVisibility.PRIVATE_PROTECTED,
    3: MemberVisibility.INTERNAL,
    4: MemberVisibility.PROTECTED,
    5: MemberVisibility.PROTECTED_INTERNAL,
    6: MemberVisibility.PUBLIC,
}


def get_highest_visibility(*visibilities: Optional[MemberVisibility]) -> MemberVisibility:
    """
    Return the most accessible of the given levels.

    None entries are skipped and the result is never below PRIVATE, which is
    what a property or event with only private accessors reports.

    Example:
        >>> get_highest_visibility(MemberVisibility.PRIVATE, None, MemberVisibility.INTERNAL)
        <MemberVisibility.INTERNAL: 5>
    """
    highest = MemberVisibility.PRIVATE
    for visibility in visibilities:
        if visibility is None:
            continue
        if visibility == MemberVisibility.PUBLIC:
            return MemberVisibility.PUBLIC
        if visibility > highest:
            highest = MemberVisibility(visibility)
    return highest
