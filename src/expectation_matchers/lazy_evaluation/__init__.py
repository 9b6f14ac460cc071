"""Lazy evaluation domain exports."""

from .expression import Expression

__all__ = ["Expression"]
