"""HTTP API for leadernet."""
