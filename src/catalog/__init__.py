"""Product catalog service with soft-deletable categories and products."""

__version__ = "0.1.0"
