"""leadernet: political leader network analysis service."""

__version__ = "0.1.0"
