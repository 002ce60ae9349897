"""Repository implementations."""

from .credit_line_repository import InMemoryCreditLineRepository

__all__ = [
    "InMemoryCreditLineRepository",
]
