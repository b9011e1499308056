"""Shared data models for gist."""

from gist.models.profile import Profile

__all__ = ["Profile"]
