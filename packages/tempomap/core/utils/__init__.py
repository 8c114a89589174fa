"""Shared utilities for tempomap."""

from tempomap.core.utils.compare import compare_to
from tempomap.core.utils.json import read_json, write_json
from tempomap.core.utils.search import EqualRange, equal_range, insert_sorted, replace_sorted

# Note: logging module not imported here to keep the stdlib name unshadowed
# Import directly: from tempomap.core.utils.logging import configure_logging

__all__ = [
    "EqualRange",
    "compare_to",
    "equal_range",
    "insert_sorted",
    "read_json",
    "replace_sorted",
    "write_json",
]
