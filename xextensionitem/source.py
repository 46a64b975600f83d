"""
Producer side of the handshake.

An `XExtensionItemSource` is populated with everything an app would like to
share and handed to the host's share sheet as a single item. The host asks it
once per candidate activity what to deliver; see `item_for_activity_type`.

Usage:

    source = XExtensionItemSource(
        "https://apple.com/featured",
        attachments=[ItemProvider("https://apple.com/featured", "public.url")],
    )
    source.attributed_title = "Tumblr featured on Apple.com!"
    source.tags = ["tumblr", "featured", "so cool"]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .activity import DEFAULT_POLICY, ActivityPolicy
from .exceptions import parameter_assert
from .item import ExtensionItem
from .models.referrer import XExtensionItemReferrer
from .models.serializing import DictionarySerializing

LOGGER = logging.getLogger(__name__)

PARAMETER_KEY_X_EXTENSION_ITEM = "x-extension-item"
PARAMETER_KEY_SOURCE_URL = "source-url"
PARAMETER_KEY_TAGS = "tags"

Size = Tuple[float, float]
ItemProvidingBlock = Callable[[], Any]
ThumbnailProvidingBlock = Callable[[Size], Any]


class XExtensionItemSource:
    """Item source exposing one placeholder type to the host share sheet.

    Only activities that support the placeholder's type are offered to the
    user, but whichever one is picked receives every attachment and all the
    metadata below, unless the activity is known not to understand extension
    items.
    """

    def __init__(
        self,
        placeholder_item: Any,
        attachments: Optional[Sequence[Any]] = None,
        *,
        policy: Optional[ActivityPolicy] = None,
    ) -> None:
        parameter_assert(placeholder_item is not None, "placeholder_item")

        self._placeholder_item = placeholder_item
        self._data_type_identifier: Optional[str] = None
        self._attachments: List[Any] = list(attachments or [])
        self._policy = policy or DEFAULT_POLICY

        self.attributed_title: Any = None
        self.attributed_content_text: Any = None
        self.tags: Optional[List[str]] = None
        self.source_url: Optional[str] = None
        self.referrer: Optional[XExtensionItemReferrer] = None
        self._user_info: Dict[str, Any] = {}

        self._activity_types_to_item_providers: Dict[str, ItemProvidingBlock] = {}
        self._activity_types_to_subjects: Dict[str, str] = {}
        self._activity_types_to_thumbnail_providers: Dict[
            str, ThumbnailProvidingBlock
        ] = {}

    @classmethod
    def with_placeholder_data(
        cls,
        placeholder_data: Any,
        data_type_identifier: str,
        attachments: Optional[Sequence[Any]] = None,
        *,
        policy: Optional[ActivityPolicy] = None,
    ) -> "XExtensionItemSource":
        """Source whose placeholder is raw data of an explicit type (e.g. a UTI)."""
        parameter_assert(data_type_identifier, "data_type_identifier")

        source = cls(placeholder_data, attachments, policy=policy)
        source._data_type_identifier = data_type_identifier
        return source

    # Read-only state

    @property
    def placeholder_item(self) -> Any:
        return self._placeholder_item

    @property
    def attachments(self) -> List[Any]:
        return list(self._attachments)

    @property
    def policy(self) -> ActivityPolicy:
        return self._policy

    # User info

    @property
    def user_info(self) -> Dict[str, Any]:
        """Custom keys and values for extensions that know to look for them.

        Keys should not start with ``x-extension-item``; that prefix is
        reserved for this library. A producer value under the reserved key
        itself is never delivered: it is replaced by the namespaced metadata,
        or dropped when there is none.
        """
        return dict(self._user_info)

    @user_info.setter
    def user_info(self, value: Optional[Dict[str, Any]]) -> None:
        user_info = dict(value or {})
        reserved = [
            k
            for k in user_info
            if isinstance(k, str) and k.startswith(PARAMETER_KEY_X_EXTENSION_ITEM)
        ]
        if reserved:
            LOGGER.warning(
                "xextensionitem.source.reserved_user_info_keys keys=%s", reserved
            )
        self._user_info = user_info

    def add_entries_to_user_info(self, serializable: DictionarySerializing) -> None:
        """Merge a dictionary-serializable object's entries into ``user_info``."""
        parameter_assert(serializable is not None, "serializable")

        user_info = self.user_info
        user_info.update(serializable.dictionary_representation)
        self.user_info = user_info

    # Per-activity overrides

    def register_item_provider(
        self, item_provider: ItemProvidingBlock, activity_type: str
    ) -> None:
        """Deliver ``item_provider()`` to ``activity_type`` instead of the default."""
        parameter_assert(item_provider, "item_provider")
        parameter_assert(callable(item_provider), "item_provider", "must be callable")
        parameter_assert(activity_type, "activity_type")

        self._activity_types_to_item_providers[activity_type] = item_provider

    def register_subject(self, subject: str, activity_type: str) -> None:
        parameter_assert(subject, "subject")
        parameter_assert(activity_type, "activity_type")

        self._activity_types_to_subjects[activity_type] = subject

    def register_thumbnail_provider(
        self, thumbnail_provider: ThumbnailProvidingBlock, activity_type: str
    ) -> None:
        """Provider receives the host's suggested size and must return promptly."""
        parameter_assert(thumbnail_provider, "thumbnail_provider")
        parameter_assert(
            callable(thumbnail_provider), "thumbnail_provider", "must be callable"
        )
        parameter_assert(activity_type, "activity_type")

        self._activity_types_to_thumbnail_providers[activity_type] = thumbnail_provider

    # Host callbacks

    def subject_for_activity_type(self, activity_type: str) -> Optional[str]:
        return self._activity_types_to_subjects.get(activity_type)

    def thumbnail_for_activity_type(
        self, activity_type: str, suggested_size: Size
    ) -> Any:
        thumbnail_provider = self._activity_types_to_thumbnail_providers.get(
            activity_type
        )
        if thumbnail_provider is None:
            return None
        return thumbnail_provider(suggested_size)

    def data_type_identifier_for_activity_type(
        self, activity_type: str
    ) -> Optional[str]:
        return self._data_type_identifier

    def item_for_activity_type(self, activity_type: str) -> Any:
        """Return what ``activity_type`` should receive.

        A registered item provider always wins. Activities known not to
        process extension items get the placeholder item. Everything else
        gets an `ExtensionItem` carrying the attachments, title, content text,
        custom user info and the namespaced metadata.
        """
        item_provider = self._activity_types_to_item_providers.get(activity_type)
        if item_provider is not None:
            LOGGER.debug("xextensionitem.source.override activity=%s", activity_type)
            return item_provider()

        if not self._policy.accepts_extension_item(activity_type):
            LOGGER.debug("xextensionitem.source.placeholder activity=%s", activity_type)
            return self._placeholder_item

        LOGGER.debug("xextensionitem.source.extension_item activity=%s", activity_type)
        return self.extension_item_representation()

    def extension_item_representation(self) -> ExtensionItem:
        item = ExtensionItem()

        user_info = dict(self._user_info)
        parameters = self._parameters()
        if parameters:
            user_info[PARAMETER_KEY_X_EXTENSION_ITEM] = parameters
        else:
            # The reserved key is only ever present with protocol content
            user_info.pop(PARAMETER_KEY_X_EXTENSION_ITEM, None)

        # `user_info` must be assigned before the native field setters below,
        # which only populate keys inside it
        item.user_info = user_info
        item.attachments = self._attachments
        item.attributed_title = self.attributed_title
        item.attributed_content_text = self.attributed_content_text
        return item

    def _parameters(self) -> Dict[str, Any]:
        parameters: Dict[str, Any] = {}
        if self.tags:
            parameters[PARAMETER_KEY_TAGS] = list(self.tags)
        if self.source_url and str(self.source_url).strip():
            parameters[PARAMETER_KEY_SOURCE_URL] = str(self.source_url)
        if self.referrer is not None:
            parameters.update(self.referrer.to_dict())
        return parameters

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(placeholder_item={self._placeholder_item!r}, "
            f"attachments={len(self._attachments)})"
        )


__all__ = [
    "XExtensionItemSource",
    "PARAMETER_KEY_X_EXTENSION_ITEM",
    "PARAMETER_KEY_SOURCE_URL",
    "PARAMETER_KEY_TAGS",
    "Size",
]
