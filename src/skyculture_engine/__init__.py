"""skyculture-engine: sky culture metadata registry for planetarium data."""

__version__ = "0.1.0"
