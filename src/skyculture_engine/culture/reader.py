"""Parse sky culture info.ini descriptors."""

import configparser
from pathlib import Path

from skyculture_engine.culture.record import (
    CultureRecord,
    parse_boundaries,
    parse_classification,
)

INFO_SECTION = "info"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def read_descriptor(path: Path | str) -> dict[str, str]:
    """Read the ``[info]`` section of a descriptor file.

    Args:
        path: Path to info.ini.

    Returns:
        Mapping of key to unquoted value. Empty if there is no [info] section.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        configparser.Error: If the INI content is malformed.
    """
    descriptor = Path(path)
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # keep key case as written
    with open(descriptor, encoding="utf-8") as f:
        parser.read_file(f, source=str(descriptor))

    if not parser.has_section(INFO_SECTION):
        return {}
    return {key: _unquote(value) for key, value in parser.items(INFO_SECTION)}


def parse_record(info: dict[str, str]) -> CultureRecord:
    """Build a CultureRecord from a parsed [info] section."""
    return CultureRecord(
        english_name=info.get("name", ""),
        author=info.get("author", ""),
        license=info.get("license", ""),
        boundaries=parse_boundaries(info.get("boundaries", "none")),
        classification=parse_classification(info.get("classification", "none")),
    )
