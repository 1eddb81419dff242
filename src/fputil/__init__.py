"""Generic collection utilities: map, filter, reduce, sort, min/max and composition."""

from fputil.core.errors import MappingError
from fputil.functional import *  # noqa: F401,F403
from fputil.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = ["MappingError", *_functional_all]
