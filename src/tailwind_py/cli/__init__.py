"""Command-line interface for tailwind-py."""
