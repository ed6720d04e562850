"""Interface layer: CLI command handlers returning plain dictionaries."""
