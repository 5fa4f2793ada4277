"""SafeRoute: incident-exposure scoring and ranking for candidate travel routes."""

__version__ = "0.1.0"
