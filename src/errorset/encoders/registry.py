"""
Encoder lookup and the top-level encode entry point.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..utils.logging import get_logger, time_call
from ..validation.errors import ErrorSet
from .base import Encoder, EncoderConfigurationError, EncoderOptions, EncodingError
from .json_encoder import JSONEncoder
from .yaml_encoder import YAMLEncoder

logger = get_logger("encoders")

_ENCODERS: Dict[str, Callable[[EncoderOptions | None], Encoder]] = {
    JSONEncoder.name: JSONEncoder,
    YAMLEncoder.name: YAMLEncoder,
}


def available_encoders() -> list[str]:
    return list(_ENCODERS)


def get_encoder(name: str, options: EncoderOptions | None = None) -> Encoder:
    try:
        factory = _ENCODERS[name.lower()]
    except KeyError as exc:
        known = ", ".join(_ENCODERS)
        raise EncoderConfigurationError(f"Unknown encoder '{name}'; expected one of: {known}") from exc
    return factory(options)


def encode(error_set: ErrorSet, fmt: str = "json", options: EncoderOptions | None = None) -> bytes:
    """
    Serialize ``error_set`` with the named encoder.

    Failures while building the document (for example a custom leaf whose
    ``to_document`` raises) and failures of the encoder itself are raised as
    ``EncodingError`` chained to the original exception.
    """
    encoder = get_encoder(fmt, options)
    threshold = (options or EncoderOptions()).warn_threshold_ms
    with time_call(f"encode[{encoder.name}]", logger, entries=len(error_set), threshold_ms=threshold):
        try:
            document = error_set.to_document()
        except EncodingError:
            raise
        except Exception as exc:
            raise EncodingError(f"Unable to build error document: {exc}") from exc
        return encoder.encode(document)
