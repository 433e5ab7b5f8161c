"""Core domain logic for the Inkwell publishing system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    Article,
    ArticleId,
    Clock,
    Comment,
    EntityId,
    User,
    UserId,
    utc_now,
)

__all__ = [
    "Article",
    "ArticleId",
    "Clock",
    "Comment",
    "EntityId",
    "User",
    "UserId",
    "utc_now",
]
