"""Core module containing the organizer orchestrator."""

from .organizer import CategorySummary, Organizer, RunSummary

__all__ = [
    "Organizer",
    "RunSummary",
    "CategorySummary",
]
