from __future__ import annotations


class InvalidInputError(ValueError):
    """Caller input outside of what the operation accepts. Raised before any transaction opens."""


class NotFoundError(LookupError):
    """The referenced row (or membership pair) does not exist."""
