"""Command-line interface for discord-ansi."""
