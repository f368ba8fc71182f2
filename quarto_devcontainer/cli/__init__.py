"""Command line interface for Quarto DevContainer."""
