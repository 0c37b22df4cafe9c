"""CLI command implementations for the cutstock application.

This package contains subcommands for the cutstock CLI, including:
- validate: Validate a job file
"""

from cutstock.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
