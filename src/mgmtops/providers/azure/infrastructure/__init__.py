"""Azure provider infrastructure."""
