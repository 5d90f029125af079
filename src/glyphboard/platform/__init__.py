"""Platform backends for display and input."""
