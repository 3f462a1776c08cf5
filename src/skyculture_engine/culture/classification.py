"""Presentation of sky culture classifications."""

from __future__ import annotations

from dataclasses import dataclass

from skyculture_engine.culture.record import ClassificationKind
from skyculture_engine.i18n import Translator

CLASSIFICATION_CONTEXT = "sky culture classification"
BULLET = "●"


@dataclass(frozen=True)
class ClassificationStyle:
    color: str
    label: str
    description: str


CLASSIFICATION_STYLES: dict[ClassificationKind, ClassificationStyle] = {
    ClassificationKind.SCIENTIFIC: ClassificationStyle(
        color="#33ff33",  # green
        label="scientific",
        description=(
            "Provided by ethnographic researchers based on interviews of indigenous "
            "people or based on historical written sources from a (usually short) "
            "period of the past."
        ),
    ),
    ClassificationKind.TRADITIONAL: ClassificationStyle(
        color="#ccff33",  # green/yellow
        label="traditional",
        description=(
            "Content represents 'common' knowledge by several members of an ethnic "
            "community, and the sky culture has been developed by members of such "
            "community."
        ),
    ),
    ClassificationKind.SINGLE: ClassificationStyle(
        color="#ffff33",  # yellow
        label="single",
        description=(
            "Represents a single source like a historical atlas, or publications "
            "of a single author."
        ),
    ),
    ClassificationKind.PERSONAL: ClassificationStyle(
        color="#ff6633",  # red
        label="personal",
        description=(
            "This is a personally developed sky culture which is not funded in "
            "published historical or ethnological research. Stellarium may include "
            "it when it is 'pretty enough' without really approving its contents."
        ),
    ),
    ClassificationKind.UNDEFINED: ClassificationStyle(
        color="#000000",
        label="undefined",
        description="",
    ),
}


def classification_style(kind: ClassificationKind | int) -> ClassificationStyle:
    """Look up the style row for a kind. Unknown ordinals map to UNDEFINED."""
    try:
        return CLASSIFICATION_STYLES[ClassificationKind(kind)]
    except ValueError:
        return CLASSIFICATION_STYLES[ClassificationKind.UNDEFINED]


def classification_html(
    kind: ClassificationKind | int,
    translator: Translator | None = None,
) -> str:
    """Render the classification as a definition-list fragment.

    Returns an empty string when the classification carries no description.
    """
    tr = translator or Translator("en")
    style = classification_style(kind)
    description = tr.gettext(style.description)
    if not description:
        return ""

    label = tr.pgettext(CLASSIFICATION_CONTEXT, style.label)
    heading = tr.gettext("Classification")
    return (
        f"<dl><dt><span style='color:{style.color};'>{BULLET}</span> "
        f"<strong>{heading}: {label}</strong></dt>"
        f"<dd><em>{description}</em></dd></dl>"
    )
