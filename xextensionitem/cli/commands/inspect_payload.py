"""Inspect command: decode a received payload."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from xextensionitem import XExtensionItem
from xextensionitem.utils import to_serializable

app = typer.Typer(help="Decode a JSON user info payload")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    path: Path = typer.Argument(..., help="JSON file holding the item's user info"),
    as_json: bool = typer.Option(False, "--json", help="Print decoded fields as JSON"),
):
    """Decode the x-extension-item namespace of a payload."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            user_info = json.load(f)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Could not read payload: {escape(str(e))}")
        raise typer.Exit(1)

    if not isinstance(user_info, dict):
        console.print("[bold red]Error:[/bold red] Payload must be a JSON object")
        raise typer.Exit(1)

    item = XExtensionItem(user_info)

    if as_json:
        typer.echo(
            json.dumps(
                to_serializable(
                    {
                        "attachments": item.attachments,
                        "attributed_title": item.attributed_title,
                        "attributed_content_text": item.attributed_content_text,
                        "tags": item.tags,
                        "source_url": item.source_url,
                        "referrer": item.referrer,
                    }
                ),
                indent=2,
            )
        )
        return

    console.print("[bold]Extension Item:[/bold]")
    console.print(f"Title: {escape(str(item.attributed_title or ''))}")
    console.print(f"Content text: {escape(str(item.attributed_content_text or ''))}")
    console.print(f"Attachments: {len(item.attachments or [])}")
    console.print(f"Tags: {escape(', '.join(item.tags or []))}")
    console.print(f"Source URL: {escape(item.source_url or '')}")
    if item.referrer:
        referrer = item.referrer
        console.print(f"Referrer: [bold]{escape(referrer.app_name)}[/bold]")
        if referrer.app_store_id is not None:
            console.print(f"  App Store ID: {referrer.app_store_id}")
        if referrer.icon_url:
            console.print(f"  Icon URL: {escape(referrer.icon_url)}")
    else:
        console.print("Referrer: [yellow]none[/yellow]")
