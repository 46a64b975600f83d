"""Public exports for xextensionitem data models."""

from __future__ import annotations

from .referrer import XExtensionItemReferrer
from .serializing import DictionarySerializing

__all__ = [
    "DictionarySerializing",
    "XExtensionItemReferrer",
]
