"""CLI command implementations for the boxforge application."""

from boxforge.cli.commands.validate import validate_command

__all__ = ["validate_command"]
