"""Kanban board ordering and filtering engine."""

__version__ = "0.1.0"
