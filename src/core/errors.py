"""
Error taxonomy shared by the forumkit components.

Two families:

- InvalidArgumentError: the caller handed us bad input (page size, page
  indicator, image size). Reported back per request.
- ConfigurationError: a transform, storage backend, theme root or rules file
  is missing or broken. Fatal at the call site, never a per-item error.

Storage backend failures are not wrapped here; they propagate as raised.
"""

from __future__ import annotations


class ForumKitError(Exception):
    """Base class for forumkit errors."""


class InvalidArgumentError(ForumKitError, ValueError):
    """Raised when an argument is outside its documented domain."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class ConfigurationError(ForumKitError):
    """Raised when a required collaborator is missing or misconfigured."""
