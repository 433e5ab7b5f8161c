"""CLI command implementations for Inkwell.

Maps CLI commands onto ArticlePublisher, UserService and CommentPort
operations. Handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from inkwell.core.article_publisher import ArticlePublisher
from inkwell.core.models import Article, ArticleId, User, UserId
from inkwell.core.ports import ArticleRepositoryPort, CommentPort
from inkwell.core.user_service import UserService

logger = logging.getLogger(__name__)


def _article_to_dict(article: Article) -> dict[str, Any]:
    return {
        "id": str(article.id),
        "author_id": article.author_id,
        "title": article.title,
        "content": article.content,
        "created_at": article.created_at.isoformat(),
        "updated_at": article.updated_at.isoformat(),
    }


def _user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "created_at": user.created_at.isoformat(),
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to the core services.

    Validation and not-found failures are reported as an error result
    rather than raised; anything else propagates.
    """

    def __init__(
        self,
        publisher: ArticlePublisher,
        users: UserService,
        articles: ArticleRepositoryPort,
        comments: CommentPort,
    ):
        """Initialize the CLI command handler.

        Args:
            publisher: ArticlePublisher used by ``publish``.
            users: UserService used by the user commands.
            articles: ArticleRepositoryPort used by ``list-articles``.
            comments: CommentPort used by ``comment``.
        """
        self.publisher = publisher
        self.users = users
        self.articles = articles
        self.comments = comments

    async def publish_article(
        self, author_id: str, title: str, content: str
    ) -> dict[str, Any]:
        """Publish an article via CLI.

        Returns:
            Dictionary with status and the published article.
        """
        try:
            article = await self.publisher.publish(
                author_id=author_id, title=title, content=content
            )
            return {
                "status": "success",
                "operation": "publish",
                "data": _article_to_dict(article),
            }
        except ValueError as e:
            logger.error(f"Failed to publish article: {e}")
            return {"status": "error", "operation": "publish", "message": str(e)}

    async def register_user(self, name: str, email: str) -> dict[str, Any]:
        """Register a user via CLI."""
        try:
            user = await self.users.register_user(name=name, email=email)
            return {
                "status": "success",
                "operation": "register",
                "data": _user_to_dict(user),
            }
        except ValueError as e:
            logger.error(f"Failed to register user: {e}")
            return {"status": "error", "operation": "register", "message": str(e)}

    async def update_email(self, user_id: str, email: str) -> dict[str, Any]:
        """Change a user's e-mail via CLI.

        Args:
            user_id: String form of the user's identifier.
            email: Replacement address.

        Returns:
            Dictionary with status and the updated user, or an error message.
        """
        try:
            user = await self.users.update_user_email(user_id, email)
            return {
                "status": "success",
                "operation": "update-email",
                "data": _user_to_dict(user),
            }
        except ValueError as e:
            logger.error(f"Failed to update email: {e}")
            return {
                "status": "error",
                "operation": "update-email",
                "user_id": user_id,
                "message": str(e),
            }

    async def add_comment(
        self, article_id: str, user_id: str, content: str
    ) -> dict[str, Any]:
        """Comment on an article via CLI."""
        try:
            await self.comments.add_comment(
                ArticleId.from_string(article_id),
                UserId.from_string(user_id),
                content,
            )
            return {
                "status": "success",
                "operation": "comment",
                "article_id": article_id,
                "message": f"Comment added to article {article_id}",
            }
        except ValueError as e:
            logger.error(f"Failed to add comment: {e}")
            return {"status": "error", "operation": "comment", "message": str(e)}

    async def list_users(self) -> dict[str, Any]:
        users = await self.users.get_all_users()
        return {
            "status": "success",
            "operation": "list-users",
            "count": len(users),
            "data": [_user_to_dict(u) for u in users],
        }

    async def list_articles(self) -> dict[str, Any]:
        articles = await self.articles.find_all()
        return {
            "status": "success",
            "operation": "list-articles",
            "count": len(articles),
            "data": [_article_to_dict(a) for a in articles],
        }
