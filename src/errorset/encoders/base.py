"""
Encoder strategy interfaces and options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class EncoderError(ValueError):
    """Base error for encoder-related failures."""


class EncodingError(EncoderError):
    """Raised when an error document cannot be serialized."""


class EncoderConfigurationError(EncoderError):
    """Raised when an encoder name or option is invalid."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise EncoderConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise EncoderConfigurationError(f"Invalid integer value for '{key}': {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise EncoderConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


@dataclass(frozen=True)
class EncoderOptions:
    """
    Serialization settings shared by all encoders.

    ``indent`` of ``None`` produces compact output.
    """

    indent: int | None = None
    ensure_ascii: bool = False
    warn_threshold_ms: int = 100

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EncoderOptions":
        remaining = dict(values)
        kwargs: dict[str, Any] = {}
        if "indent" in remaining:
            raw = remaining.pop("indent")
            if raw is None or str(raw).strip().lower() in {"", "none"}:
                kwargs["indent"] = None
            else:
                indent = _parse_int(raw, key="indent")
                if indent < 0:
                    raise EncoderConfigurationError(f"'indent' must not be negative: {raw!r}")
                kwargs["indent"] = indent
        if "ensure_ascii" in remaining:
            kwargs["ensure_ascii"] = _parse_bool(remaining.pop("ensure_ascii"), key="ensure_ascii")
        if "warn_threshold_ms" in remaining:
            kwargs["warn_threshold_ms"] = _parse_int(
                remaining.pop("warn_threshold_ms"), key="warn_threshold_ms"
            )
        if remaining:
            unknown = ", ".join(sorted(remaining))
            raise EncoderConfigurationError(f"Unknown encoder option(s): {unknown}")
        return cls(**kwargs)


class Encoder(Protocol):
    """
    Strategy interface turning a structured error document into bytes.
    """

    @property
    def name(self) -> str: ...

    @property
    def media_type(self) -> str: ...

    def encode(self, document: Mapping[str, Any]) -> bytes: ...
