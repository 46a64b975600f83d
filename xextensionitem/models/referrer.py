"""Pydantic model describing the application a payload was shared from."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..typesafe import TypeSafeDictionaryValues

LOGGER = logging.getLogger(__name__)

# Wire keys, flattened into the reserved `x-extension-item` sub-mapping
REFERRER_KEY_APP_NAME = "referrer-app-name"
REFERRER_KEY_APP_STORE_ID = "referrer-app-store-id"
REFERRER_KEY_ICON_URL = "referrer-icon-url"

# Bundle info keys consulted by `from_bundle_info`, most specific first
BUNDLE_NAME_KEYS = ("CFBundleDisplayName", "CFBundleName")


class XExtensionItemReferrer(BaseModel):
    """Information about the application where shared content came from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    app_name: str = Field(..., alias=REFERRER_KEY_APP_NAME, min_length=1)
    """Display name of the referring application."""

    app_store_id: Optional[int] = Field(None, alias=REFERRER_KEY_APP_STORE_ID)
    """Numeric App Store identifier of the referring application."""

    icon_url: Optional[str] = Field(None, alias=REFERRER_KEY_ICON_URL)
    """Location of the referring application's icon."""

    @field_validator("icon_url")
    @classmethod
    def _check_icon_url(cls, v):
        # Only values the decoder reads back are accepted
        if v is not None and TypeSafeDictionaryValues({"url": v}).url_for_key("url") is None:
            raise ValueError("icon_url must be a non-empty URI reference")
        return v

    @classmethod
    def from_dict(
        cls, dictionary: Optional[Mapping[str, Any]]
    ) -> Optional["XExtensionItemReferrer"]:
        """Decode a referrer, or return ``None`` when no app name is present."""
        values = TypeSafeDictionaryValues(dictionary)

        app_name = values.string_for_key(REFERRER_KEY_APP_NAME)
        if not app_name:
            return None

        app_store_id = values.number_for_key(REFERRER_KEY_APP_STORE_ID)
        if isinstance(app_store_id, float):
            app_store_id = int(app_store_id) if app_store_id.is_integer() else None

        referrer = cls(
            app_name=app_name,
            app_store_id=app_store_id,
            icon_url=values.url_for_key(REFERRER_KEY_ICON_URL),
        )
        LOGGER.debug("xextensionitem.referrer.decoded %r", referrer)
        return referrer

    @classmethod
    def from_bundle_info(
        cls,
        info: Mapping[str, Any],
        app_store_id: Optional[int] = None,
        icon_url: Optional[str] = None,
    ) -> Optional["XExtensionItemReferrer"]:
        """Build a referrer named after an application bundle's info mapping."""
        values = TypeSafeDictionaryValues(info)
        for key in BUNDLE_NAME_KEYS:
            name = values.string_for_key(key)
            if name:
                return cls(app_name=name, app_store_id=app_store_id, icon_url=icon_url)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Flat wire representation; absent fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def dictionary_representation(self) -> Dict[str, Any]:
        return self.to_dict()


__all__ = [
    "XExtensionItemReferrer",
    "REFERRER_KEY_APP_NAME",
    "REFERRER_KEY_APP_STORE_ID",
    "REFERRER_KEY_ICON_URL",
]
