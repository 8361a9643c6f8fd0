"""
restfilter - Request parameter definitions for API input validation.

restfilter models the named, typed parameters an API endpoint accepts so
that incoming request fields can be validated before they reach application
logic, and describes them as ordered JSON for introspection and API
documentation.

Main Exports (Import from top level):
    Parameters:
        - RequestParameter: A named, typed request parameter
        - ParameterDescription: Pydantic model of a serialized parameter

    Serialization:
        - JsonNode: Ordered JSON node builder
        - JsonSerializable: Protocol for objects that serialize to a JsonNode

    Constants:
        - TYPES: Supported type tags
        - ParameterTypes: Named type tag constants
        - INT_MIN / INT_MAX: Default range of integer parameters

    Logging:
        - configure_logging: Attach a console handler to the package logger

Example:
    >>> from restfilter import RequestParameter
    >>>
    >>> age = RequestParameter("age", "integer")
    >>> age.set_min_val(0)
    True
    >>> age.set_max_val(150)
    True
    >>> age.serialize().to_json()
    '{"name": "age", "type": "integer", "is-optional": false, "min-val": 0, "max-val": 150}'
"""

__version__ = "1.1.0"

from .common import JsonNode, NameValidator
from .constants import INT_MAX, INT_MIN, TYPES, JsonKeys, ParameterTypes
from .logging import configure_logging, get_logging_config
from .parameters import ParameterDescription, RequestParameter
from .protocols import JsonSerializable

__all__ = [
    "__version__",
    # Parameters
    "RequestParameter",
    "ParameterDescription",
    # Serialization
    "JsonNode",
    "JsonSerializable",
    "NameValidator",
    # Constants
    "TYPES",
    "ParameterTypes",
    "JsonKeys",
    "INT_MIN",
    "INT_MAX",
    # Logging
    "configure_logging",
    "get_logging_config",
]
