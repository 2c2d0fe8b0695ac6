"""Typer command modules."""
