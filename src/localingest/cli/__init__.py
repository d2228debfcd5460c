"""Command-line interface for localingest."""
