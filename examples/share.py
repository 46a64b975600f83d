"""Example of a share handshake between an app and an extension."""

import argparse
import logging

from rich import inspect, pretty
from rich.console import Console
from rich.traceback import install

from xextensionitem import (
    ActivityType,
    ExtensionItem,
    ItemProvider,
    XExtensionItem,
    XExtensionItemReferrer,
    XExtensionItemSource,
)

install(show_locals=True)
pretty.install()

console = Console()


class TumblrCustomShareParameters:
    """Custom parameters only Tumblr's share extension knows to look for."""

    def __init__(self, custom_url_slug: str) -> None:
        self.custom_url_slug = custom_url_slug

    @property
    def dictionary_representation(self):
        return {"tumblr-custom-url-slug": self.custom_url_slug}


def build_source() -> XExtensionItemSource:
    url = "https://www.apple.com/ipad-air-2/"
    source = XExtensionItemSource(url, attachments=[ItemProvider(url, "public.url")])
    source.attributed_title = "Apple"
    source.attributed_content_text = "iPad Air 2. Change is in the air"
    source.tags = ["apple", "ipad", "ios"]
    source.source_url = "http://apple.com"
    source.referrer = XExtensionItemReferrer.from_bundle_info(
        {"CFBundleDisplayName": "XExtensionItem Example"},
        app_store_id=12345,
        icon_url="http://tumblr.com/icon.png",
    )
    source.add_entries_to_user_info(TumblrCustomShareParameters("want-this-for-xmas"))
    source.register_subject("Check this out", ActivityType.MAIL.value)
    return source


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Share handshake example.")
    parser.add_argument(
        "--activity",
        default="com.tumblr.tumblr.Tumblr-Share-Extension",
        help="Activity type the user picked.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    source = build_source()
    item = source.item_for_activity_type(args.activity)

    if not isinstance(item, ExtensionItem):
        console.print(f"[yellow]{args.activity} receives the placeholder:[/yellow] {item}")
        return

    console.rule("Received by extension")
    inspect(XExtensionItem(item))


if __name__ == "__main__":
    main()
