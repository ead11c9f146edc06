"""Voice control command handlers."""
