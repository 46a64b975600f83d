"""Command line interface for xextensionitem."""
