"""Data models for lift."""

from .movement import Movement

__all__ = ["Movement"]
