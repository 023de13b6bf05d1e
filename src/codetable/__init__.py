"""Generate Go constants from the multicodec table."""
