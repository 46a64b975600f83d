"""Tests for the consumer-side decoded item."""

import unittest

from xextensionitem import (
    ExtensionItem,
    ItemProvider,
    ParameterAssertionError,
    XExtensionItem,
    XExtensionItemReferrer,
)
from xextensionitem.item import (
    ATTACHMENTS_KEY,
    ATTRIBUTED_CONTENT_TEXT_KEY,
    ATTRIBUTED_TITLE_KEY,
)


class XExtensionItemTest(unittest.TestCase):
    def setUp(self):
        self.attachment = ItemProvider("https://example.com", "public.url")
        self.user_info = {
            ATTACHMENTS_KEY: [self.attachment],
            ATTRIBUTED_TITLE_KEY: "Title",
            ATTRIBUTED_CONTENT_TEXT_KEY: "Content",
            "tumblr-custom-url-slug": "want-this",
            "x-extension-item": {
                "tags": ["a", "b"],
                "source-url": "https://example.com",
                "referrer-app-name": "App",
                "referrer-icon-url": "https://example.com/icon.png",
            },
        }

    def test_decodes_mapping(self):
        item = XExtensionItem(self.user_info)
        self.assertEqual(item.attachments, [self.attachment])
        self.assertEqual(item.attributed_title, "Title")
        self.assertEqual(item.attributed_content_text, "Content")
        self.assertEqual(item.tags, ["a", "b"])
        self.assertEqual(item.source_url, "https://example.com")
        self.assertEqual(
            item.referrer,
            XExtensionItemReferrer(
                app_name="App", icon_url="https://example.com/icon.png"
            ),
        )
        self.assertEqual(item.user_info["tumblr-custom-url-slug"], "want-this")
        self.assertIn("x-extension-item", item.user_info)

    def test_decodes_extension_item(self):
        item = XExtensionItem(ExtensionItem(self.user_info))
        self.assertEqual(item.tags, ["a", "b"])

    def test_missing_namespace(self):
        item = XExtensionItem({"custom": 1})
        self.assertIsNone(item.tags)
        self.assertIsNone(item.source_url)
        self.assertIsNone(item.referrer)
        self.assertIsNone(item.attachments)
        self.assertIsNone(item.attributed_title)

    def test_malformed_namespace(self):
        item = XExtensionItem({"x-extension-item": ["not", "a", "mapping"]})
        self.assertIsNone(item.tags)
        self.assertIsNone(item.referrer)

        item = XExtensionItem(
            {"x-extension-item": {"tags": 5, "source-url": 7, "referrer-app-name": None}}
        )
        self.assertIsNone(item.tags)
        self.assertIsNone(item.source_url)
        self.assertIsNone(item.referrer)

    def test_non_ascii_store_id_decodes_softly(self):
        item = XExtensionItem(
            {
                "x-extension-item": {
                    "referrer-app-name": "App",
                    "referrer-app-store-id": "\u00b2",
                }
            }
        )
        self.assertEqual(item.referrer, XExtensionItemReferrer(app_name="App"))

    def test_none_rejected(self):
        with self.assertRaises(ParameterAssertionError):
            XExtensionItem(None)

    def test_immutable_snapshot(self):
        item = XExtensionItem(self.user_info)
        self.user_info["late"] = True
        self.assertNotIn("late", item.user_info)

        with self.assertRaises(TypeError):
            item.user_info["new"] = 1
        item.tags.append("c")
        self.assertEqual(item.tags, ["a", "b"])

    def test_repr_strips_surfaced_keys(self):
        description = repr(XExtensionItem(self.user_info))
        self.assertIn("attributed_title: 'Title'", description)
        self.assertIn("tags: ['a', 'b']", description)
        self.assertIn("source_url: 'https://example.com'", description)
        self.assertIn("referrer: ", description)
        self.assertIn("user_info: {'tumblr-custom-url-slug': 'want-this'}", description)
        self.assertNotIn(ATTRIBUTED_TITLE_KEY, description)
        self.assertNotIn("x-extension-item", description)

    def test_repr_omits_absent_fields(self):
        description = repr(XExtensionItem({}))
        self.assertIn("attachments: None", description)
        self.assertNotIn("tags", description)
        self.assertNotIn("referrer", description)
        self.assertIn("user_info: {}", description)


class ExtensionItemTest(unittest.TestCase):
    def test_native_fields_live_in_user_info(self):
        item = ExtensionItem()
        item.user_info = {"custom": 1}
        item.attributed_title = "Title"
        item.attachments = []
        self.assertEqual(
            item.user_info, {"custom": 1, ATTRIBUTED_TITLE_KEY: "Title", ATTACHMENTS_KEY: []}
        )

        item.attributed_title = None
        self.assertNotIn(ATTRIBUTED_TITLE_KEY, item.user_info)

    def test_assigning_user_info_replaces_native_fields(self):
        item = ExtensionItem()
        item.attributed_title = "Title"
        item.user_info = {"custom": 1}
        self.assertIsNone(item.attributed_title)


if __name__ == "__main__":
    unittest.main()
