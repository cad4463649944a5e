"""smsbridge CLI: Typer-based command-line interface.

Provides the ``smsbridge`` command with subcommands for sending single
and batch SMS, checking permission, and normalizing phone numbers.

All output uses Rich for formatted terminal display.
"""
