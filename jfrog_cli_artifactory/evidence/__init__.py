"""Evidence creation commands."""
