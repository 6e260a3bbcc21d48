"""Command-line tools for leadernet."""
