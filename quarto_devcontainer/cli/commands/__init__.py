"""CLI commands for Quarto DevContainer."""
