"""
Validation error types exposed at the package level.
"""

from .errors import Encodable, ErrorSet, FieldError, new_error_set
from .internal import Internal, InternalError, is_internal, mark_as_internal

__all__ = [
    "Encodable",
    "ErrorSet",
    "FieldError",
    "Internal",
    "InternalError",
    "is_internal",
    "mark_as_internal",
    "new_error_set",
]
