"""Command-line interface for the cash drawer reconciler."""
