"""Domain models for the Inkwell publishing system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Self, TypeAlias

Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current time in UTC."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class EntityId:
    """Opaque identity token shared by all aggregate identifiers.

    Equality is by value and by concrete type, so an ArticleId never
    equals a UserId even when both wrap the same token.
    """

    value: str

    def __post_init__(self) -> None:
        """Reject empty tokens."""
        if not self.value:
            raise ValueError(f"{type(self).__name__} cannot be empty")

    @classmethod
    def create(cls) -> Self:
        """Generate a brand-new random identity."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Rebuild an identity from its stored string representation."""
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ArticleId(EntityId):
    """Identifier of an Article."""


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier of a User."""


@dataclass
class Article:
    """A piece of written content owned by an author.

    Title and content are never empty. ``updated_at`` moves on every
    successful change and never falls behind ``created_at``. Timestamps,
    and the readings of any injected clock, must be timezone-aware.

    Note: This dataclass is intentionally mutable; use change_title and
    change_content rather than assigning fields directly so the
    invariants and the update timestamp are maintained.
    """

    id: ArticleId
    author_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    clock: Clock = field(default=utc_now, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate article invariants on creation."""
        if not self.title:
            raise ValueError("Title cannot be empty")
        if not self.content:
            raise ValueError("Content cannot be empty")
        if self.created_at.tzinfo is None or self.updated_at.tzinfo is None:
            raise ValueError("Article timestamps must be timezone-aware")
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot precede created_at")

    @classmethod
    def create(
        cls,
        author_id: str,
        title: str,
        content: str,
        id: ArticleId | None = None,
        clock: Clock | None = None,
    ) -> "Article":
        """Create a new article, generating an identifier when none is given."""
        clock = clock or utc_now
        now = clock()
        return cls(
            id=id or ArticleId.create(),
            author_id=author_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    def change_title(self, new_title: str) -> None:
        """Replace the title and register the update time.

        Raises:
            ValueError: If the new title is empty. State is left unchanged.
        """
        if not new_title:
            raise ValueError("Title cannot be empty")
        self.title = new_title
        self._touch()

    def change_content(self, new_content: str) -> None:
        """Replace the content and register the update time.

        Raises:
            ValueError: If the new content is empty. State is left unchanged.
        """
        if not new_content:
            raise ValueError("Content cannot be empty")
        self.content = new_content
        self._touch()

    def _touch(self) -> None:
        self.updated_at = max(self.clock(), self.updated_at)


@dataclass
class User:
    """An actor that writes articles and comments.

    The name is fixed at creation; the email may change but is never empty.
    """

    id: UserId
    name: str
    email: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate user invariants on creation."""
        if not self.name:
            raise ValueError("Name cannot be empty")
        if not self.email:
            raise ValueError("Email cannot be empty")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        id: UserId | None = None,
        clock: Clock | None = None,
    ) -> "User":
        """Create a new user, generating an identifier when none is given."""
        return cls(
            id=id or UserId.create(),
            name=name,
            email=email,
            created_at=(clock or utc_now)(),
        )

    def change_email(self, new_email: str) -> None:
        """Update the email if a different one is provided.

        Setting the current address again is a no-op.

        Raises:
            ValueError: If the new email is empty.
        """
        if not new_email:
            raise ValueError("Email cannot be empty")
        if new_email == self.email:
            return
        self.email = new_email


@dataclass(frozen=True)
class Comment:
    """A comment left by a user on an article."""

    article_id: ArticleId
    user_id: UserId
    content: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.content:
            raise ValueError("Comment content cannot be empty")
