"""Musical lotto room server."""

__version__ = "1.0.0"
