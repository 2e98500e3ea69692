"""
Validation error containers for errorset.

``ErrorSet`` aggregates failures keyed by field name, map key or slice index
and keeps them in the order they were recorded. ``FieldError`` is the leaf
error the library ships for rule failures carrying a stable code.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Protocol, Tuple, Union, runtime_checkable

from ..utils.logging import get_logger

logger = get_logger("validation")

ErrorValue = Union[BaseException, "ErrorSet", None]


@runtime_checkable
class Encodable(Protocol):
    """
    Values that build their own structured document when encoded.
    """

    def to_document(self) -> Any: ...


class FieldError(Exception):
    """
    Leaf validation failure with a stable code and a message template.

    ``params`` are substituted into ``message`` with ``str.format_map`` when the
    error is rendered, e.g. ``FieldError("length_too_short",
    "must be at least {min} characters", {"min": 3})``. Instances are
    read-only; the ``with_*`` helpers return modified copies.
    """

    def __init__(self, code: str, message: str, params: Mapping[str, Any] | None = None) -> None:
        super().__init__(code, message)
        self._code = code
        self._message = message
        self._params: Dict[str, Any] = dict(params or {})

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def params(self) -> Mapping[str, Any]:
        return MappingProxyType(self._params)

    def __str__(self) -> str:
        if not self._params:
            return self._message
        try:
            return self._message.format_map(self._params)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError):
            return self._message

    def __repr__(self) -> str:
        return f"FieldError(code={self._code!r}, message={self._message!r}, params={dict(self._params)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self._code, self._message, dict(self._params)) == (
            other._code,
            other._message,
            dict(other._params),
        )

    def __hash__(self) -> int:
        return hash((self._code, self._message))

    def with_code(self, code: str) -> "FieldError":
        return FieldError(code, self._message, self._params)

    def with_message(self, message: str) -> "FieldError":
        return FieldError(self._code, message, self._params)

    def with_params(self, params: Mapping[str, Any]) -> "FieldError":
        return FieldError(self._code, self._message, params)

    def add_param(self, name: str, value: Any) -> "FieldError":
        params = dict(self._params)
        params[name] = value
        return FieldError(self._code, self._message, params)


class ErrorSet(Exception):
    """
    Insertion-ordered mapping of key to error, nested ErrorSet, or ``None``.

    Keys are stringified on every access so slice indices and map keys share
    one namespace with struct field names. ``None`` values are tombstones for
    entries that passed; ``filter()`` removes them and collapses an empty set
    to ``None``.

    An empty ErrorSet renders as ``""``. Call ``filter()`` before raising or
    returning one so callers never see an empty aggregate.

    The set is owned by a single validation pass and is not locked; treat it
    as read-only once it has been handed to a caller.
    """

    def __init__(
        self,
        entries: Mapping[Any, ErrorValue] | Iterable[Tuple[Any, ErrorValue]] | None = None,
    ) -> None:
        super().__init__()
        self._entries: Dict[str, ErrorValue] = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                self[key] = value

    # Mapping protocol ----------------------------------------------------

    def __setitem__(self, key: Any, value: ErrorValue) -> None:
        if value is not None and not isinstance(value, BaseException):
            raise TypeError(
                f"ErrorSet values must be exceptions, ErrorSets or None; "
                f"got {type(value).__name__} for key {key!r}"
            )
        self._entries[str(key)] = value

    def __getitem__(self, key: Any) -> ErrorValue:
        return self._entries[str(key)]

    def __delitem__(self, key: Any) -> None:
        del self._entries[str(key)]

    def __contains__(self, key: object) -> bool:
        return str(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Any, default: ErrorValue = None) -> ErrorValue:
        return self._entries.get(str(key), default)

    def keys(self) -> list[str]:
        return list(self._entries)

    def items(self) -> list[Tuple[str, ErrorValue]]:
        return list(self._entries.items())

    # Rendering -----------------------------------------------------------

    def render_message(self) -> str:
        if not self._entries:
            return ""
        segments = []
        for key, value in self._entries.items():
            if isinstance(value, ErrorSet):
                segments.append(f"{key}: ({value.render_message()})")
            else:
                segments.append(f"{key}: {value}")
        return "; ".join(segments) + "."

    def __str__(self) -> str:
        return self.render_message()

    def __repr__(self) -> str:
        return f"ErrorSet({self._entries!r})"

    # Finalization --------------------------------------------------------

    def filter(self) -> "ErrorSet | None":
        """
        Drop ``None`` entries in place and return ``None`` if nothing is left.
        """
        pruned = [key for key, value in self._entries.items() if value is None]
        for key in pruned:
            del self._entries[key]
        if pruned:
            logger.debug("Pruned %d passing entries; %d errors remain", len(pruned), len(self._entries))
        if not self._entries:
            return None
        return self

    # Structured encoding -------------------------------------------------

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {}
        for key, value in self._entries.items():
            if isinstance(value, Encodable):
                document[key] = value.to_document()
            else:
                document[key] = str(value)
        return document


def new_error_set() -> ErrorSet:
    return ErrorSet()
