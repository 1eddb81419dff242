"""Shared types, errors and settings for fputil."""

from fputil.core.config import Settings
from fputil.core.errors import MappingError
from fputil.core.types import SupportsAdd, SupportsLessThan

__all__ = [
    "Settings",
    "MappingError",
    "SupportsAdd",
    "SupportsLessThan",
]
