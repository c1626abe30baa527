"""CLI commands for Pomorock."""
