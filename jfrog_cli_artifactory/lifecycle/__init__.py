"""Release bundle lifecycle helpers."""
