"""
Consumer side of the handshake.

Wrap each incoming item from an extension's input items:

    for input_item in input_items:
        extension_item = XExtensionItem(input_item)
        title = extension_item.attributed_title
        tags = extension_item.tags
        custom_url = extension_item.user_info.get("tumblr-custom-url")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, List, Optional, Union

from .exceptions import parameter_assert
from .item import NATIVE_KEYS, ExtensionItem
from .models.referrer import XExtensionItemReferrer
from .source import (
    PARAMETER_KEY_SOURCE_URL,
    PARAMETER_KEY_TAGS,
    PARAMETER_KEY_X_EXTENSION_ITEM,
)
from .typesafe import TypeSafeDictionaryValues

LOGGER = logging.getLogger(__name__)


class XExtensionItem:
    """Read-only, typed view over a received extension item."""

    def __init__(self, extension_item: Union[ExtensionItem, Mapping[str, Any]]) -> None:
        parameter_assert(extension_item is not None, "extension_item")

        if isinstance(extension_item, ExtensionItem):
            raw = extension_item.user_info
        else:
            raw = extension_item
        self._item = ExtensionItem(dict(raw))

        parameters = TypeSafeDictionaryValues(self._item.user_info).dictionary_for_key(
            PARAMETER_KEY_X_EXTENSION_ITEM
        )
        values = TypeSafeDictionaryValues(parameters)

        self._tags: Optional[List[str]] = values.string_array_for_key(PARAMETER_KEY_TAGS)
        self._source_url: Optional[str] = values.url_for_key(PARAMETER_KEY_SOURCE_URL)
        self._referrer = XExtensionItemReferrer.from_dict(parameters)

        LOGGER.debug(
            "xextensionitem.item.decoded namespace=%s tags=%s source_url=%s referrer=%s",
            parameters is not None,
            bool(self._tags),
            bool(self._source_url),
            self._referrer is not None,
        )

    # Proxied generic payload fields

    @property
    def attachments(self) -> Optional[List[Any]]:
        attachments = self._item.attachments
        return list(attachments) if attachments is not None else None

    @property
    def attributed_title(self) -> Any:
        return self._item.attributed_title

    @property
    def attributed_content_text(self) -> Any:
        return self._item.attributed_content_text

    @property
    def user_info(self) -> Mapping[str, Any]:
        """Everything received, including the library's own reserved keys."""
        return MappingProxyType(self._item.user_info)

    # Namespaced fields

    @property
    def tags(self) -> Optional[List[str]]:
        return list(self._tags) if self._tags is not None else None

    @property
    def source_url(self) -> Optional[str]:
        return self._source_url

    @property
    def referrer(self) -> Optional[XExtensionItemReferrer]:
        return self._referrer

    def __repr__(self) -> str:
        parts = [f"attachments: {self.attachments!r}"]

        if self.attributed_title is not None:
            parts.append(f"attributed_title: {self.attributed_title!r}")
        if self.attributed_content_text is not None:
            parts.append(f"attributed_content_text: {self.attributed_content_text!r}")
        if self._tags is not None:
            parts.append(f"tags: {self._tags!r}")
        if self._source_url is not None:
            parts.append(f"source_url: {self._source_url!r}")
        if self._referrer is not None:
            parts.append(f"referrer: {self._referrer!r}")

        # Fields surfaced above are not repeated
        user_info = {
            k: v
            for k, v in self._item.user_info.items()
            if k not in NATIVE_KEYS and k != PARAMETER_KEY_X_EXTENSION_ITEM
        }
        parts.append(f"user_info: {user_info!r}")

        return f"<{type(self).__name__} {{ {', '.join(parts)} }}>"


__all__ = ["XExtensionItem"]
