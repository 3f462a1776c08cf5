"""Sky culture records and the enums derived from descriptor strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BoundariesKind(IntEnum):
    UNSPECIFIED = -1
    GENERIC = 0
    OWN = 1


class ClassificationKind(IntEnum):
    UNDEFINED = 0
    SCIENTIFIC = 1
    TRADITIONAL = 2
    SINGLE = 3
    PERSONAL = 4


# Match order matters: the first keyword found in the raw string wins.
_BOUNDARIES_KEYWORDS = [
    ("generic", BoundariesKind.GENERIC),
    ("own", BoundariesKind.OWN),
]

_CLASSIFICATION_KEYWORDS = [
    ("scientific", ClassificationKind.SCIENTIFIC),
    ("traditional", ClassificationKind.TRADITIONAL),
    ("single", ClassificationKind.SINGLE),
    ("personal", ClassificationKind.PERSONAL),
]


def parse_boundaries(raw: str | None) -> BoundariesKind:
    """Map a raw ``boundaries`` value to a kind by case-insensitive substring.

    Anything that mentions neither "generic" nor "own" is UNSPECIFIED.
    """
    text = (raw or "").casefold()
    for keyword, kind in _BOUNDARIES_KEYWORDS:
        if keyword in text:
            return kind
    return BoundariesKind.UNSPECIFIED


def parse_classification(raw: str | None) -> ClassificationKind:
    """Map a raw ``classification`` value to a kind by case-insensitive substring.

    Unrecognized or empty input is UNDEFINED.
    """
    text = (raw or "").casefold()
    for keyword, kind in _CLASSIFICATION_KEYWORDS:
        if keyword in text:
            return kind
    return ClassificationKind.UNDEFINED


@dataclass(frozen=True)
class CultureRecord:
    """Metadata parsed from one sky culture's descriptor."""

    english_name: str = ""
    author: str = ""
    license: str = ""
    boundaries: BoundariesKind = BoundariesKind.UNSPECIFIED
    classification: ClassificationKind = ClassificationKind.UNDEFINED
