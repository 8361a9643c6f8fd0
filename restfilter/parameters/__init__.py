"""Request parameter definitions."""

from .model import ParameterDescription
from .parameter import RequestParameter

__all__ = [
    "ParameterDescription",
    "RequestParameter",
]
