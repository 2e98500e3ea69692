"""
errorset public package initialization.

Ordered, nestable aggregation of validation errors keyed by field name,
map key or slice index, with JSON and YAML encoding.
"""

from .encoders import (  # noqa: F401
    EncoderConfigurationError,
    EncoderOptions,
    EncodingError,
    encode,
    get_encoder,
)
from .validation import (  # noqa: F401
    Encodable,
    ErrorSet,
    FieldError,
    Internal,
    InternalError,
    is_internal,
    mark_as_internal,
    new_error_set,
)

__version__ = "0.1.0"

__all__ = [
    "Encodable",
    "EncoderConfigurationError",
    "EncoderOptions",
    "EncodingError",
    "ErrorSet",
    "FieldError",
    "Internal",
    "InternalError",
    "encode",
    "get_encoder",
    "is_internal",
    "mark_as_internal",
    "new_error_set",
]
