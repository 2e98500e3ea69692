"""
YAML encoder implementation.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

import yaml

from .base import EncoderConfigurationError, EncoderOptions, EncodingError

# PyYAML silently ignores block indents outside this range.
MIN_INDENT: Final[int] = 2
MAX_INDENT: Final[int] = 9


class YAMLEncoder:
    """
    Serializes documents as UTF-8 block-style YAML without sorting keys.

    ``options.indent`` must be ``None`` (PyYAML's default of 2) or between
    ``MIN_INDENT`` and ``MAX_INDENT``.
    """

    name: Final[str] = "yaml"
    media_type: Final[str] = "application/yaml"

    def __init__(self, options: EncoderOptions | None = None) -> None:
        self.options = options or EncoderOptions()
        indent = self.options.indent
        if indent is not None and not MIN_INDENT <= indent <= MAX_INDENT:
            raise EncoderConfigurationError(
                f"YAML indent must be between {MIN_INDENT} and {MAX_INDENT}, got {indent}"
            )

    def encode(self, document: Mapping[str, Any]) -> bytes:
        try:
            text = yaml.safe_dump(
                document,
                sort_keys=False,
                allow_unicode=not self.options.ensure_ascii,
                indent=self.options.indent,
                default_flow_style=False,
            )
        except yaml.YAMLError as exc:
            raise EncodingError(f"Unable to encode error document as YAML: {exc}") from exc
        return text.encode("utf-8")
