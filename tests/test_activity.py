"""Tests for the activity acceptance policy."""

import unittest

from xextensionitem.activity import (
    ACCEPTING_ACTIVITY_TYPES,
    DEFAULT_POLICY,
    REJECTING_ACTIVITY_TYPES,
    ActivityClassification,
    ActivityType,
    classify_activity_type,
    is_extension_item_input_accepted,
)


class ActivityPolicyTest(unittest.TestCase):
    def test_rejecting(self):
        self.assertEqual(len(REJECTING_ACTIVITY_TYPES), 8)
        for activity_type in REJECTING_ACTIVITY_TYPES:
            self.assertEqual(
                classify_activity_type(activity_type), ActivityClassification.REJECTING
            )
            self.assertFalse(is_extension_item_input_accepted(activity_type))

    def test_accepting(self):
        for activity_type in ACCEPTING_ACTIVITY_TYPES:
            self.assertEqual(
                classify_activity_type(activity_type), ActivityClassification.ACCEPTING
            )
            self.assertTrue(is_extension_item_input_accepted(activity_type))

    def test_unknown_defaults_to_accepting(self):
        self.assertEqual(
            classify_activity_type("com.example.unknown.extension"),
            ActivityClassification.DEFAULT,
        )
        self.assertTrue(is_extension_item_input_accepted("com.example.unknown.extension"))
        self.assertTrue(is_extension_item_input_accepted(""))

    def test_enum_members(self):
        self.assertFalse(is_extension_item_input_accepted(ActivityType.PRINT))
        self.assertTrue(is_extension_item_input_accepted(ActivityType.POST_TO_TWITTER))
        self.assertFalse(
            is_extension_item_input_accepted("com.apple.UIKit.activity.Print")
        )

    def test_extended(self):
        policy = DEFAULT_POLICY.extended(
            rejecting=["com.example.legacy"],
            accepting=[ActivityType.MAIL],
        )
        self.assertFalse(policy.accepts_extension_item("com.example.legacy"))
        self.assertEqual(
            policy.classify(ActivityType.MAIL.value), ActivityClassification.ACCEPTING
        )
        # The default policy is untouched
        self.assertFalse(is_extension_item_input_accepted(ActivityType.MAIL.value))
        self.assertTrue(is_extension_item_input_accepted("com.example.legacy"))


if __name__ == "__main__":
    unittest.main()
