"""Identifier adapters."""

from .uuid_generator import UuidIdGenerator

__all__ = ["UuidIdGenerator"]
