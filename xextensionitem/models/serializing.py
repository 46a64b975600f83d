"""
Dictionary-serializing seam.

Anything that can contribute entries to a source's ``user_info`` implements
`DictionarySerializing`. Apps use it to ship their own custom parameters
(e.g. a custom URL slug for their share extension) alongside the protocol's
namespaced fields.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class DictionarySerializing(Protocol):
    """An object with a flat dictionary representation."""

    @property
    def dictionary_representation(self) -> Dict[str, Any]: ...
