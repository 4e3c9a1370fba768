"""Command modules registered on the shared Typer app."""
