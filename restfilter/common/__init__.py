"""Common utilities shared across the library.

This package contains foundational utilities with no dependency on the
parameter layer. Keep dependencies minimal.
"""

from .json_node import JsonNode
from .validation import NameValidator

__all__ = [
    "JsonNode",
    "NameValidator",
]
