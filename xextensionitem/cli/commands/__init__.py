"""Command modules for the xextensionitem CLI."""

from xextensionitem.cli.commands import inspect_payload, policy, preview

__all__ = ["inspect_payload", "policy", "preview"]
