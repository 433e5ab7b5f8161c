"""In-memory store adapters.

Process-local implementations of the persistence and comment ports.
Nothing survives a restart; these exist so the composition root can run
without a database.
"""

import logging

from inkwell.core.models import (
    Article,
    ArticleId,
    Clock,
    Comment,
    User,
    UserId,
    utc_now,
)
from inkwell.core.ports import (
    ArticleRepositoryPort,
    CommentPort,
    NotificationPort,
    UserRepositoryPort,
)

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepositoryPort):
    """Dictionary-backed article repository keyed by identity token."""

    def __init__(self):
        self._articles: dict[str, Article] = {}

    async def save(self, article: Article) -> None:
        self._articles[str(article.id)] = article
        logger.debug(f"Stored article {article.id}")

    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        return self._articles.get(str(article_id))

    async def find_all(self) -> list[Article]:
        return list(self._articles.values())

    async def delete(self, article_id: ArticleId) -> None:
        self._articles.pop(str(article_id), None)


class InMemoryUserRepository(UserRepositoryPort):
    """Dictionary-backed user repository keyed by identity token."""

    def __init__(self, initial_users: list[User] | None = None):
        self._users: dict[str, User] = {
            str(user.id): user for user in initial_users or []
        }

    async def save(self, user: User) -> None:
        self._users[str(user.id)] = user
        logger.debug(f"Stored user {user.id}")

    async def find_by_id(self, user_id: UserId) -> User | None:
        return self._users.get(str(user_id))

    async def find_all(self) -> list[User]:
        return list(self._users.values())

    async def delete(self, user_id: UserId) -> None:
        self._users.pop(str(user_id), None)


class InMemoryCommentService(CommentPort):
    """Stores comments in memory and tells article authors about them.

    When both repositories and a notifier are supplied, the author of the
    commented article is notified with the commenter's name.
    """

    def __init__(
        self,
        articles: ArticleRepositoryPort | None = None,
        users: UserRepositoryPort | None = None,
        notification: NotificationPort | None = None,
        clock: Clock | None = None,
    ):
        self.articles = articles
        self.users = users
        self.notification = notification
        self.clock = clock or utc_now
        self._comments: list[Comment] = []

    async def add_comment(
        self, article_id: ArticleId, user_id: UserId, content: str
    ) -> None:
        """Store a comment and notify the article's author when possible.

        Raises:
            ValueError: If the content is empty.
        """
        comment = Comment(
            article_id=article_id,
            user_id=user_id,
            content=content,
            created_at=self.clock(),
        )
        self._comments.append(comment)

        if self.notification is None or self.articles is None or self.users is None:
            return

        article = await self.articles.find_by_id(article_id)
        commenter = await self.users.find_by_id(user_id)
        if article is None or commenter is None:
            logger.warning(
                "Comment stored without notification",
                extra={"article_id": str(article_id), "user_id": str(user_id)},
            )
            return

        await self.notification.notify_comment_added(
            article.author_id, article_id, commenter.name
        )

    def comments_for(self, article_id: ArticleId) -> list[Comment]:
        """Return comments on an article in the order they were added."""
        return [c for c in self._comments if c.article_id == article_id]
