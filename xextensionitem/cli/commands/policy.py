"""Policy command: classify activity types."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from xextensionitem.activity import (
    ACCEPTING_ACTIVITY_TYPES,
    REJECTING_ACTIVITY_TYPES,
    ActivityClassification,
    classify_activity_type,
)

app = typer.Typer(help="Classify activity types")
console = Console()

_STYLES = {
    ActivityClassification.REJECTING: "red",
    ActivityClassification.ACCEPTING: "green",
    ActivityClassification.DEFAULT: "cyan",
}


@app.callback(invoke_without_command=True)
def main(
    activity_type: Optional[str] = typer.Argument(
        None, help="Activity type identifier to classify"
    ),
):
    """Show whether an activity receives extension items or the placeholder."""
    if activity_type:
        classification = classify_activity_type(activity_type)
        receives = (
            "placeholder"
            if classification is ActivityClassification.REJECTING
            else "extension item"
        )
        style = _STYLES[classification]
        console.print(
            f"{activity_type}: [{style}]{classification.value}[/{style}] ({receives})",
            soft_wrap=True,
        )
        return

    table = Table(title="Known activity types")
    table.add_column("Activity type")
    table.add_column("Classification")
    for known in sorted(REJECTING_ACTIVITY_TYPES | ACCEPTING_ACTIVITY_TYPES):
        classification = classify_activity_type(known)
        style = _STYLES[classification]
        table.add_row(known, f"[{style}]{classification.value}[/{style}]")
    console.print(table)
