#!/usr/bin/env python
"""Command line tools for inspecting and previewing extension item payloads."""

import logging

import typer

from xextensionitem.cli.commands import inspect_payload, policy, preview

app = typer.Typer(help="Inspect and preview XExtensionItem payloads")

# Add command groups
app.add_typer(inspect_payload.app, name="inspect")
app.add_typer(preview.app, name="preview")
app.add_typer(policy.app, name="policy")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Work with the x-extension-item share metadata protocol."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
