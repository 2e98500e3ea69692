"""
JSON encoder implementation.
"""

from __future__ import annotations

import json
from typing import Any, Final, Mapping

from .base import EncoderOptions, EncodingError


class JSONEncoder:
    """
    Serializes documents as UTF-8 JSON, keeping key order.
    """

    name: Final[str] = "json"
    media_type: Final[str] = "application/json"

    def __init__(self, options: EncoderOptions | None = None) -> None:
        self.options = options or EncoderOptions()

    def encode(self, document: Mapping[str, Any]) -> bytes:
        separators = (",", ":") if self.options.indent is None else (",", ": ")
        try:
            text = json.dumps(
                document,
                indent=self.options.indent,
                ensure_ascii=self.options.ensure_ascii,
                separators=separators,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Unable to encode error document as JSON: {exc}") from exc
        return text.encode("utf-8")
