"""
Chapter 6 - the secret life of objects.

This package provides:
- a de-duplicating collection with strict-equality membership (Group)
- an immutable two-dimensional vector value type (Vector2D)
- a runner for the chapter's demonstration expressions
"""

__all__ = ["collections", "geometry"]
