"""Tests for the referrer model."""

import unittest

from pydantic import ValidationError

from xextensionitem import XExtensionItemReferrer


class ReferrerTest(unittest.TestCase):
    def test_round_trip_full(self):
        referrer = XExtensionItemReferrer(
            app_name="Tumblr",
            app_store_id=305343404,
            icon_url="https://tumblr.com/icon.png",
        )
        self.assertEqual(XExtensionItemReferrer.from_dict(referrer.to_dict()), referrer)

    def test_round_trip_partial(self):
        referrer = XExtensionItemReferrer(app_name="App")
        self.assertEqual(XExtensionItemReferrer.from_dict(referrer.to_dict()), referrer)

    def test_round_trip_relative_icon(self):
        referrer = XExtensionItemReferrer(app_name="App", icon_url="icon.png")
        self.assertEqual(XExtensionItemReferrer.from_dict(referrer.to_dict()), referrer)

    def test_undecodable_icon_url_rejected(self):
        for icon_url in ("", "   ", "http://[::1"):
            with self.assertRaises(ValidationError):
                XExtensionItemReferrer(app_name="App", icon_url=icon_url)

    def test_absent_fields_are_omitted(self):
        referrer = XExtensionItemReferrer(app_name="App", app_store_id=12345)
        self.assertEqual(
            referrer.to_dict(),
            {"referrer-app-name": "App", "referrer-app-store-id": 12345},
        )

    def test_missing_app_name_decodes_to_none(self):
        self.assertIsNone(XExtensionItemReferrer.from_dict({}))
        self.assertIsNone(XExtensionItemReferrer.from_dict(None))
        self.assertIsNone(
            XExtensionItemReferrer.from_dict(
                {
                    "referrer-app-store-id": 12345,
                    "referrer-icon-url": "https://example.com/icon.png",
                }
            )
        )
        self.assertIsNone(XExtensionItemReferrer.from_dict({"referrer-app-name": 7}))

    def test_malformed_optional_fields_are_dropped(self):
        referrer = XExtensionItemReferrer.from_dict(
            {
                "referrer-app-name": "App",
                "referrer-app-store-id": "not a number",
                "referrer-icon-url": 42,
            }
        )
        self.assertEqual(referrer, XExtensionItemReferrer(app_name="App"))

    def test_integral_float_store_id(self):
        referrer = XExtensionItemReferrer.from_dict(
            {"referrer-app-name": "App", "referrer-app-store-id": 12345.0}
        )
        self.assertEqual(referrer.app_store_id, 12345)

    def test_unusable_store_ids_are_dropped(self):
        for store_id in (1.5, True, "\u00b2", "-12", ""):
            referrer = XExtensionItemReferrer.from_dict(
                {"referrer-app-name": "App", "referrer-app-store-id": store_id}
            )
            self.assertEqual(referrer, XExtensionItemReferrer(app_name="App"))

    def test_digit_string_store_id(self):
        referrer = XExtensionItemReferrer.from_dict(
            {"referrer-app-name": "App", "referrer-app-store-id": "12345"}
        )
        self.assertEqual(referrer.app_store_id, 12345)

    def test_empty_app_name_rejected(self):
        with self.assertRaises(ValidationError):
            XExtensionItemReferrer(app_name="")

    def test_immutable(self):
        referrer = XExtensionItemReferrer(app_name="App")
        with self.assertRaises(ValidationError):
            referrer.app_name = "Other"

    def test_from_bundle_info(self):
        referrer = XExtensionItemReferrer.from_bundle_info(
            {"CFBundleName": "Example", "CFBundleDisplayName": "Example App"},
            app_store_id=12345,
        )
        self.assertEqual(referrer.app_name, "Example App")
        self.assertEqual(referrer.app_store_id, 12345)

        referrer = XExtensionItemReferrer.from_bundle_info({"CFBundleName": "Example"})
        self.assertEqual(referrer.app_name, "Example")

        self.assertIsNone(XExtensionItemReferrer.from_bundle_info({}))

    def test_dictionary_representation(self):
        referrer = XExtensionItemReferrer(app_name="App")
        self.assertEqual(referrer.dictionary_representation, referrer.to_dict())


if __name__ == "__main__":
    unittest.main()
