"""User service: registration, e-mail updates and listing.

Demonstrates how one required repository and several optional
collaborators are used together.
"""

import logging

from .models import Clock, User, UserId
from .ports import LoggerPort, NotificationPort, UserRepositoryPort

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user workflows over a UserRepositoryPort."""

    def __init__(
        self,
        user_repository: UserRepositoryPort,
        notification: NotificationPort | None = None,
        logger_port: LoggerPort | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the user service.

        Args:
            user_repository: UserRepositoryPort implementation for persistence.
            notification: Optional NotificationPort for user-facing messages.
            logger_port: Optional LoggerPort for summary lines.
            clock: Optional time source handed to new users.
        """
        self.user_repository = user_repository
        self.notification = notification
        self.logger_port = logger_port
        self.clock = clock

    async def register_user(self, name: str, email: str) -> User:
        """Create and persist a new user, then welcome them.

        Raises:
            ValueError: If name or email is empty.
        """
        user = User.create(name=name, email=email, clock=self.clock)
        await self.user_repository.save(user)

        if self.notification is not None:
            await self.notification.notify_user_registered(str(user.id), user.email)

        if self.logger_port is not None:
            self.logger_port.log(f"User registered: {user.id} ({user.name})")

        logger.info(
            f"User {user.id} registered",
            extra={"user_id": str(user.id)},
        )
        return user

    async def update_user_email(self, user_id: str, new_email: str) -> User:
        """Update a user's e-mail and notify them of the change.

        The notification is sent even when the address did not change.

        Args:
            user_id: String form of the user's identifier.
            new_email: Replacement address.

        Returns:
            The updated User.

        Raises:
            ValueError: If the user doesn't exist or the new email is empty.
        """
        user = await self.user_repository.find_by_id(UserId.from_string(user_id))
        if user is None:
            raise ValueError(f"User with id {user_id} not found")

        old_email = user.email
        user.change_email(new_email)

        await self.user_repository.save(user)

        if self.notification is not None:
            await self.notification.notify_user_email_changed(
                str(user.id), f"Email changed from {old_email} to {new_email}"
            )

        logger.info(
            f"User {user_id} email updated",
            extra={"user_id": user_id, "changed": old_email != new_email},
        )
        return user

    async def get_all_users(self) -> list[User]:
        """Retrieve all users and log the count."""
        users = await self.user_repository.find_all()

        if self.logger_port is not None:
            self.logger_port.log(f"Retrieved {len(users)} users from repository")

        return users
