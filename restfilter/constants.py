"""Constants for the restfilter package.

This module provides the catalog of supported parameter type tags, the
native integer bounds used for ``integer`` parameters, and the key names
used when a parameter is serialized.
"""

import sys
from typing import FrozenSet


class ParameterTypes:
    """Supported parameter type tags."""

    STRING = "string"
    INTEGER = "integer"
    EMAIL = "email"
    FLOAT = "float"
    URL = "url"
    BOOLEAN = "boolean"
    ARRAY = "array"


# Closed set of valid type tags (always lowercase)
TYPES: FrozenSet[str] = frozenset(
    {
        ParameterTypes.STRING,
        ParameterTypes.INTEGER,
        ParameterTypes.EMAIL,
        ParameterTypes.FLOAT,
        ParameterTypes.URL,
        ParameterTypes.BOOLEAN,
        ParameterTypes.ARRAY,
    }
)

# Native signed integer range of the interpreter (Py_ssize_t, 64-bit on
# 64-bit platforms)
INT_MAX: int = sys.maxsize
INT_MIN: int = -sys.maxsize - 1

# Fallbacks used when a parameter is constructed with invalid arguments
DEFAULT_PARAMETER_NAME = "a-parameter"
DEFAULT_PARAMETER_TYPE = ParameterTypes.STRING


class JsonKeys:
    """Key names of a serialized request parameter."""

    NAME = "name"
    TYPE = "type"
    IS_OPTIONAL = "is-optional"
    DEFAULT = "default"
    MIN_VAL = "min-val"
    MAX_VAL = "max-val"


__all__ = [
    "ParameterTypes",
    "TYPES",
    "INT_MAX",
    "INT_MIN",
    "DEFAULT_PARAMETER_NAME",
    "DEFAULT_PARAMETER_TYPE",
    "JsonKeys",
]
