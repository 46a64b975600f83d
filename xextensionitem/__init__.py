"""Structured metadata for items passed between apps and share extensions."""

from .activity import (
    DEFAULT_POLICY,
    ActivityClassification,
    ActivityPolicy,
    ActivityType,
    classify_activity_type,
    is_extension_item_input_accepted,
)
from .exceptions import ParameterAssertionError, XExtensionItemException
from .extension_item import XExtensionItem
from .item import ExtensionItem, ItemProvider
from .models import DictionarySerializing, XExtensionItemReferrer
from .source import PARAMETER_KEY_X_EXTENSION_ITEM, XExtensionItemSource
from .typesafe import TypeSafeDictionaryValues

__all__ = [
    "XExtensionItemSource",
    "XExtensionItem",
    "XExtensionItemReferrer",
    "DictionarySerializing",
    "ExtensionItem",
    "ItemProvider",
    "TypeSafeDictionaryValues",
    "ActivityType",
    "ActivityClassification",
    "ActivityPolicy",
    "DEFAULT_POLICY",
    "classify_activity_type",
    "is_extension_item_input_accepted",
    "PARAMETER_KEY_X_EXTENSION_ITEM",
    "XExtensionItemException",
    "ParameterAssertionError",
]
