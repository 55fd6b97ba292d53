"""HTTP API for the route optimizer."""
