"""Azure resource-manager provider."""
