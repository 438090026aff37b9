"""pushsource CLI: Typer-based command-line interface.

Provides the ``pushsource`` command for replaying recorded host events
through the push source and inspecting the effective configuration.

All output uses Rich for formatted terminal display.
"""
