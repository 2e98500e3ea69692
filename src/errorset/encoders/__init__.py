"""
Encoder strategy registry.
"""

from .base import Encoder, EncoderConfigurationError, EncoderError, EncoderOptions, EncodingError
from .json_encoder import JSONEncoder
from .registry import available_encoders, encode, get_encoder
from .yaml_encoder import YAMLEncoder

__all__ = [
    "Encoder",
    "EncoderConfigurationError",
    "EncoderError",
    "EncoderOptions",
    "EncodingError",
    "JSONEncoder",
    "YAMLEncoder",
    "available_encoders",
    "encode",
    "get_encoder",
]
