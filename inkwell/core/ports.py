"""Port interfaces for the Inkwell publishing system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; test doubles live in tests/doubles/.

Port Interface Categories:

1. **Persistence Ports**
   - ArticleRepositoryPort: Persist and query articles
   - UserRepositoryPort: Persist and query users

2. **Collaborator Ports** (optional dependencies of the services)
   - NotificationPort: Tell people about things that happened
   - CommentPort: Attach comments to articles
   - LoggerPort: Human-readable audit lines
"""

from abc import ABC, abstractmethod

from .models import Article, ArticleId, User, UserId


# ============================================================================
# PERSISTENCE PORTS
# ============================================================================


class ArticleRepositoryPort(ABC):
    """Persistence boundary for the Article aggregate.

    Implementations can connect to any storage engine. The interface is
    kept minimal so test doubles stay small.
    """

    @abstractmethod
    async def save(self, article: Article) -> None:
        """Persist a new or updated article.

        An existing article with the same identity is overwritten.

        Raises:
            Exception: If the storage engine rejects the write.
        """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        """Retrieve an article by identifier.

        Returns:
            The article, or None when not found.
        """

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Return every stored article, in no particular order."""

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> None:
        """Remove an article. No-op when the id does not exist."""


class UserRepositoryPort(ABC):
    """Persistence boundary for the User aggregate."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by identifier, or None when not found."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return every stored user."""

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Remove a user. No-op when the id does not exist."""


# ============================================================================
# COLLABORATOR PORTS
# ============================================================================


class NotificationPort(ABC):
    """Port for notifying people about domain events.

    A production adapter might send e-mail or push notifications.
    Failures propagate to the calling service; nothing is retried.
    """

    @abstractmethod
    async def notify_article_published(
        self, author_id: str, article_id: ArticleId, title: str
    ) -> None:
        """Tell an author that their article went live."""

    @abstractmethod
    async def notify_comment_added(
        self, author_id: str, article_id: ArticleId, commenter_name: str
    ) -> None:
        """Tell an author that someone commented on their article."""

    @abstractmethod
    async def notify_user_email_changed(self, user_id: str, message: str) -> None:
        """Tell a user that their e-mail address was updated.

        Args:
            user_id: String form of the user's identifier.
            message: Human-readable description of the change.
        """

    @abstractmethod
    async def notify_user_registered(self, user_id: str, email: str) -> None:
        """Welcome a newly registered user."""


class CommentPort(ABC):
    """Contract that defines how comments are added to articles."""

    @abstractmethod
    async def add_comment(
        self, article_id: ArticleId, user_id: UserId, content: str
    ) -> None:
        """Add a comment authored by ``user_id`` to the given article."""


class LoggerPort(ABC):
    """Line-oriented logger consumed by services as an optional collaborator.

    Only ``log`` is required; ``warn`` and ``error`` fall back to it.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Record an informational message."""

    def warn(self, message: str) -> None:
        self.log(message)

    def error(self, message: str) -> None:
        self.log(message)
