"""
Generic share payload exchanged between a host app and its extensions.

`ExtensionItem` is a plain key/value payload. Its title, content text and
attachments are not separate storage: they live in ``user_info`` under the
well-known native keys, next to whatever else the producer put there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

ATTRIBUTED_TITLE_KEY = "NSExtensionItemAttributedTitleKey"
ATTRIBUTED_CONTENT_TEXT_KEY = "NSExtensionItemAttributedContentTextKey"
ATTACHMENTS_KEY = "NSExtensionItemAttachmentsKey"

NATIVE_KEYS = (ATTRIBUTED_TITLE_KEY, ATTRIBUTED_CONTENT_TEXT_KEY, ATTACHMENTS_KEY)


@dataclass(frozen=True)
class ItemProvider:
    """Opaque media attachment handle; never inspected by the protocol."""

    item: Any
    type_identifier: Optional[str] = None


class ExtensionItem:
    """Mutable generic payload.

    Assigning ``user_info`` replaces the whole mapping, so it has to happen
    before the native field setters are used.
    """

    def __init__(self, user_info: Optional[Dict[str, Any]] = None) -> None:
        self._user_info: Dict[str, Any] = dict(user_info or {})

    @property
    def user_info(self) -> Dict[str, Any]:
        return self._user_info

    @user_info.setter
    def user_info(self, value: Optional[Dict[str, Any]]) -> None:
        self._user_info = dict(value or {})

    def _set_native(self, key: str, value: Any) -> None:
        if value is None:
            self._user_info.pop(key, None)
        else:
            self._user_info[key] = value

    @property
    def attributed_title(self) -> Any:
        return self._user_info.get(ATTRIBUTED_TITLE_KEY)

    @attributed_title.setter
    def attributed_title(self, value: Any) -> None:
        self._set_native(ATTRIBUTED_TITLE_KEY, value)

    @property
    def attributed_content_text(self) -> Any:
        return self._user_info.get(ATTRIBUTED_CONTENT_TEXT_KEY)

    @attributed_content_text.setter
    def attributed_content_text(self, value: Any) -> None:
        self._set_native(ATTRIBUTED_CONTENT_TEXT_KEY, value)

    @property
    def attachments(self) -> Optional[List[Any]]:
        return self._user_info.get(ATTACHMENTS_KEY)

    @attachments.setter
    def attachments(self, value: Optional[List[Any]]) -> None:
        self._set_native(ATTACHMENTS_KEY, list(value) if value is not None else None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtensionItem):
            return NotImplemented
        return self._user_info == other._user_info

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ExtensionItem(user_info={self._user_info!r})"


__all__ = [
    "ExtensionItem",
    "ItemProvider",
    "ATTRIBUTED_TITLE_KEY",
    "ATTRIBUTED_CONTENT_TEXT_KEY",
    "ATTACHMENTS_KEY",
    "NATIVE_KEYS",
]
