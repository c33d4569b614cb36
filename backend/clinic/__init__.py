"""In-memory clinical records core: repositories, services and scheduling."""

__version__ = "1.0.0"
