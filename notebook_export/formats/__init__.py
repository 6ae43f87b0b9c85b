"""Output formats for parsed notebooks."""
