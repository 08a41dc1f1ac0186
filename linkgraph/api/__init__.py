"""HTTP API for the link graph."""
