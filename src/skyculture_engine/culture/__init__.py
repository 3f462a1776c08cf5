"""Culture module — discover, parse, and select sky cultures."""

from skyculture_engine.culture.classification import classification_html
from skyculture_engine.culture.discover import discover_culture_dirs
from skyculture_engine.culture.reader import parse_record, read_descriptor
from skyculture_engine.culture.record import (
    BoundariesKind,
    ClassificationKind,
    CultureRecord,
    parse_boundaries,
    parse_classification,
)
from skyculture_engine.culture.registry import SkyCultureRegistry

__all__ = [
    "BoundariesKind",
    "ClassificationKind",
    "CultureRecord",
    "SkyCultureRegistry",
    "classification_html",
    "discover_culture_dirs",
    "parse_boundaries",
    "parse_classification",
    "parse_record",
    "read_descriptor",
]
