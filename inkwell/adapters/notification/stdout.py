"""Stdout notification adapter.

Implements NotificationPort by printing the messages a real e-mail
sender would deliver. Useful for local runs of the composition root.
"""

import asyncio
import logging

from inkwell.core.models import ArticleId
from inkwell.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class StdoutNotificationAdapter(NotificationPort):
    """Prints notifications to stdout, one line per message."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notification adapter.

        Args:
            verbose: If True, frame each message with a separator line.
        """
        self.verbose = verbose

    async def notify_article_published(
        self, author_id: str, article_id: ArticleId, title: str
    ) -> None:
        """Announce a publication to its author."""
        await self._emit(
            author_id,
            f'Your article "{article_id}" with title: "{title}" has been published!',
        )

    async def notify_comment_added(
        self, author_id: str, article_id: ArticleId, commenter_name: str
    ) -> None:
        """Announce a new comment to the article's author."""
        await self._emit(
            author_id, f"{commenter_name} commented on your article {article_id}."
        )

    async def notify_user_email_changed(self, user_id: str, message: str) -> None:
        await self._emit(user_id, message)

    async def notify_user_registered(self, user_id: str, email: str) -> None:
        await self._emit(user_id, f"Welcome aboard! Your account uses {email}.")

    async def _emit(self, recipient: str, body: str) -> None:
        text = self._format_message(recipient, body, self.verbose)
        await asyncio.to_thread(print, text)
        logger.debug("Notification printed", extra={"recipient": recipient})

    @staticmethod
    def _format_message(recipient: str, body: str, verbose: bool) -> str:
        """Format a single notification line."""
        line = f"Sending email to {recipient}: {body}"
        if not verbose:
            return line
        return "\n".join(["-" * 80, line, "-" * 80])
