"""Preview command: show what each activity would receive from a source."""

import json
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from xextensionitem import ExtensionItem, XExtensionItemReferrer, XExtensionItemSource
from xextensionitem.activity import ActivityType
from xextensionitem.utils import to_serializable

app = typer.Typer(help="Preview per-activity payloads for a share")
console = Console()

DEFAULT_ACTIVITIES = [
    ActivityType.POST_TO_TWITTER.value,
    ActivityType.MAIL.value,
    ActivityType.PRINT.value,
    ActivityType.COPY_TO_PASTEBOARD.value,
    "com.tumblr.tumblr.Tumblr-Share-Extension",
]


@app.callback(invoke_without_command=True)
def main(
    placeholder: str = typer.Option(..., help="Placeholder item, e.g. a URL"),
    tag: Optional[List[str]] = typer.Option(None, "--tag", help="Tag (repeatable)"),
    source_url: Optional[str] = typer.Option(None, help="Source URL of the content"),
    referrer_name: Optional[str] = typer.Option(None, help="Referring app name"),
    app_store_id: Optional[int] = typer.Option(None, help="Referring app's App Store ID"),
    icon_url: Optional[str] = typer.Option(None, help="Referring app's icon URL"),
    title: Optional[str] = typer.Option(None, help="Item title"),
    content_text: Optional[str] = typer.Option(None, help="Item content text"),
    activity: Optional[List[str]] = typer.Option(
        None, "--activity", help="Activity type to resolve (repeatable)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Resolve the item each activity type would receive."""
    source = XExtensionItemSource(placeholder)
    source.attributed_title = title
    source.attributed_content_text = content_text
    source.tags = tag or None
    source.source_url = source_url

    if referrer_name:
        try:
            source.referrer = XExtensionItemReferrer(
                app_name=referrer_name, app_store_id=app_store_id, icon_url=icon_url
            )
        except ValidationError as e:
            console.print(f"[bold red]Error:[/bold red] Invalid referrer: {escape(str(e))}")
            raise typer.Exit(1)

    results = {}
    for activity_type in activity or DEFAULT_ACTIVITIES:
        item = source.item_for_activity_type(activity_type)
        if isinstance(item, ExtensionItem):
            results[activity_type] = {
                "kind": "extension_item",
                "user_info": to_serializable(item),
            }
        else:
            results[activity_type] = {"kind": "placeholder", "value": to_serializable(item)}

    if as_json:
        typer.echo(json.dumps(results, indent=2))
        return

    table = Table(title="Per-activity items")
    table.add_column("Activity type")
    table.add_column("Receives")
    table.add_column("Payload")
    for activity_type, result in results.items():
        if result["kind"] == "extension_item":
            payload = json.dumps(result["user_info"], sort_keys=True)
            table.add_row(activity_type, "[green]extension item[/green]", escape(payload))
        else:
            table.add_row(activity_type, "[yellow]placeholder[/yellow]", escape(str(result["value"])))
    console.print(table)
