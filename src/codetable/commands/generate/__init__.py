"""Generate command."""
