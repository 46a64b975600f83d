"""
Type-safe reads out of untyped payload mappings.

Every value that arrives from the other side of the handshake is read through
`TypeSafeDictionaryValues`. A key that is missing and a key whose value has
the wrong shape look the same to callers: both come back as ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlsplit

LOGGER = logging.getLogger(__name__)

Number = Union[int, float]


class TypeSafeDictionaryValues:
    """Read values of an expected kind from a mapping, failing soft."""

    def __init__(self, dictionary: Optional[Mapping[str, Any]] = None) -> None:
        self._dictionary: Mapping[str, Any] = (
            dictionary if isinstance(dictionary, Mapping) else {}
        )

    def _value(self, key: str, expected: str) -> Any:
        value = self._dictionary.get(key)
        if value is None:
            return None
        LOGGER.debug(
            "xextensionitem.typesafe.read key=%s expected=%s type=%s",
            key,
            expected,
            type(value).__name__,
        )
        return value

    def _mismatch(self, key: str, expected: str, value: Any) -> None:
        LOGGER.debug(
            "xextensionitem.typesafe.mismatch key=%s expected=%s got=%s",
            key,
            expected,
            type(value).__name__,
        )

    def string_for_key(self, key: str) -> Optional[str]:
        value = self._value(key, "string")
        if value is None:
            return None
        if isinstance(value, str):
            return value
        self._mismatch(key, "string", value)
        return None

    def url_for_key(self, key: str) -> Optional[str]:
        """Return the value if it is a non-empty string parseable as a URI reference.

        Relative references such as ``icon.png`` are kept unchanged.
        """
        value = self._value(key, "url")
        if value is None:
            return None
        if not isinstance(value, str):
            self._mismatch(key, "url", value)
            return None
        if not value.strip():
            self._mismatch(key, "url", value)
            return None
        try:
            urlsplit(value)
        except ValueError:
            self._mismatch(key, "url", value)
            return None
        return value

    def number_for_key(self, key: str) -> Optional[Number]:
        value = self._value(key, "number")
        if value is None:
            return None
        # bool is an int subclass but never a meaningful number on the wire
        if isinstance(value, bool):
            self._mismatch(key, "number", value)
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)
        self._mismatch(key, "number", value)
        return None

    def array_for_key(self, key: str) -> Optional[List[Any]]:
        value = self._value(key, "array")
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return list(value)
        self._mismatch(key, "array", value)
        return None

    def string_array_for_key(self, key: str) -> Optional[List[str]]:
        """Like `array_for_key`, but absent unless every element is a string."""
        values = self.array_for_key(key)
        if values is None:
            return None
        if all(isinstance(v, str) for v in values):
            return values
        self._mismatch(key, "string array", values)
        return None

    def dictionary_for_key(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._value(key, "dictionary")
        if value is None:
            return None
        if isinstance(value, Mapping):
            return dict(value)
        self._mismatch(key, "dictionary", value)
        return None


__all__ = ["TypeSafeDictionaryValues", "Number"]
