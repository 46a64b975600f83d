"""
Which activities can receive an `ExtensionItem`.

Share extensions take extension items as input, and some system activities do
as well, but some do not. A system activity handed an extension item it
doesn't understand receives no data at all, so those activities get the
source's placeholder item instead. Anything not known to reject extension
items is assumed to accept them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable


class ActivityType(str, Enum):
    """Well-known system activity identifiers."""

    POST_TO_FACEBOOK = "com.apple.UIKit.activity.PostToFacebook"
    POST_TO_TWITTER = "com.apple.UIKit.activity.PostToTwitter"
    POST_TO_WEIBO = "com.apple.UIKit.activity.PostToWeibo"
    POST_TO_TENCENT_WEIBO = "com.apple.UIKit.activity.TencentWeibo"
    POST_TO_FLICKR = "com.apple.UIKit.activity.PostToFlickr"
    POST_TO_VIMEO = "com.apple.UIKit.activity.PostToVimeo"
    MESSAGE = "com.apple.UIKit.activity.Message"
    MAIL = "com.apple.UIKit.activity.Mail"
    PRINT = "com.apple.UIKit.activity.Print"
    COPY_TO_PASTEBOARD = "com.apple.UIKit.activity.CopyToPasteboard"
    ASSIGN_TO_CONTACT = "com.apple.UIKit.activity.AssignToContact"
    SAVE_TO_CAMERA_ROLL = "com.apple.UIKit.activity.SaveToCameraRoll"
    ADD_TO_READING_LIST = "com.apple.UIKit.activity.AddToReadingList"
    AIR_DROP = "com.apple.UIKit.activity.AirDrop"


class ActivityClassification(str, Enum):
    REJECTING = "rejecting"
    ACCEPTING = "accepting"
    DEFAULT = "default"


REJECTING_ACTIVITY_TYPES: FrozenSet[str] = frozenset(
    a.value
    for a in (
        ActivityType.MESSAGE,
        ActivityType.MAIL,
        ActivityType.PRINT,
        ActivityType.COPY_TO_PASTEBOARD,
        ActivityType.ASSIGN_TO_CONTACT,
        ActivityType.SAVE_TO_CAMERA_ROLL,
        ActivityType.ADD_TO_READING_LIST,
        ActivityType.AIR_DROP,
    )
)

# These display system share sheets that consume `attributed_content_text`.
# If the official Facebook or Flickr apps are installed they take precedence
# over the system sheets and do *not* consume it.
ACCEPTING_ACTIVITY_TYPES: FrozenSet[str] = frozenset(
    a.value
    for a in (
        ActivityType.POST_TO_TWITTER,
        ActivityType.POST_TO_VIMEO,
        ActivityType.POST_TO_WEIBO,
        ActivityType.POST_TO_TENCENT_WEIBO,
        ActivityType.POST_TO_FACEBOOK,
        ActivityType.POST_TO_FLICKR,
    )
)


def _identifiers(activity_types: Iterable[str]) -> FrozenSet[str]:
    # Normalise enum members to their identifier strings
    return frozenset(
        a.value if isinstance(a, ActivityType) else str(a) for a in activity_types
    )


@dataclass(frozen=True)
class ActivityPolicy:
    rejecting: FrozenSet[str] = REJECTING_ACTIVITY_TYPES
    accepting: FrozenSet[str] = ACCEPTING_ACTIVITY_TYPES

    def classify(self, activity_type: str) -> ActivityClassification:
        key = activity_type.value if isinstance(activity_type, ActivityType) else activity_type
        if key in self.rejecting:
            return ActivityClassification.REJECTING
        if key in self.accepting:
            return ActivityClassification.ACCEPTING
        return ActivityClassification.DEFAULT

    def accepts_extension_item(self, activity_type: str) -> bool:
        return self.classify(activity_type) is not ActivityClassification.REJECTING

    def extended(
        self,
        rejecting: Iterable[str] = (),
        accepting: Iterable[str] = (),
    ) -> "ActivityPolicy":
        """Return a copy with additional activity types classified.

        An activity type added to one set is removed from the other.
        """
        add_rejecting = _identifiers(rejecting)
        add_accepting = _identifiers(accepting)
        return ActivityPolicy(
            rejecting=(self.rejecting - add_accepting) | add_rejecting,
            accepting=(self.accepting - add_rejecting) | add_accepting,
        )


DEFAULT_POLICY = ActivityPolicy()


def classify_activity_type(activity_type: str) -> ActivityClassification:
    return DEFAULT_POLICY.classify(activity_type)


def is_extension_item_input_accepted(activity_type: str) -> bool:
    return DEFAULT_POLICY.accepts_extension_item(activity_type)


__all__ = [
    "ActivityType",
    "ActivityClassification",
    "ActivityPolicy",
    "DEFAULT_POLICY",
    "REJECTING_ACTIVITY_TYPES",
    "ACCEPTING_ACTIVITY_TYPES",
    "classify_activity_type",
    "is_extension_item_input_accepted",
]
