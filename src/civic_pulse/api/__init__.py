"""HTTP API for Civic Pulse."""
