"""Article publisher: creates, persists and announces new articles.

Publishing involves more than instantiating the entity: the article is
persisted and, when configured, the author is notified and a summary line
is written to the injected logger.
"""

import logging

from .models import Article, Clock
from .ports import ArticleRepositoryPort, LoggerPort, NotificationPort

logger = logging.getLogger(__name__)


class ArticlePublisher:
    """Publishes brand-new articles through the configured repository."""

    def __init__(
        self,
        repository: ArticleRepositoryPort,
        logger_port: LoggerPort | None = None,
        notification: NotificationPort | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the publisher.

        Args:
            repository: ArticleRepositoryPort implementation for persistence.
            logger_port: Optional LoggerPort that receives a summary line.
            notification: Optional NotificationPort told about each publication.
            clock: Optional time source handed to new articles.
        """
        self.repository = repository
        self.logger_port = logger_port
        self.notification = notification
        self.clock = clock

    async def publish(self, author_id: str, title: str, content: str) -> Article:
        """Publish a new article.

        Args:
            author_id: Identifier of the authoring user.
            title: Non-empty article title.
            content: Non-empty article body.

        Returns:
            The created and persisted Article.

        Raises:
            ValueError: If title or content is empty.
            Exception: If the repository, notifier or logger fails.
        """
        article = Article.create(
            author_id=author_id,
            title=title,
            content=content,
            clock=self.clock,
        )

        await self.repository.save(article)
        logger.debug(
            f"Article {article.id} saved",
            extra={"article_id": str(article.id), "author_id": author_id},
        )

        if self.notification is not None:
            await self.notification.notify_article_published(
                article.author_id, article.id, article.title
            )

        if self.logger_port is not None:
            self.logger_port.log(
                f"Article published: {article.id} by {article.author_id} - {article.title}"
            )

        return article
