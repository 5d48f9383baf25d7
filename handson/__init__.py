"""Hands-on exercises: a coffee-brewing simulation and a household account book."""

__version__ = "0.1.0"

__all__ = [
    "coffee",
    "textbook",
    "accountbook",
    "entry",
    "cli",
]