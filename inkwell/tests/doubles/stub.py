"""Stub UserRepositoryPort implementation for testing."""

from inkwell.core.models import User, UserId
from inkwell.core.ports import UserRepositoryPort


class UserRepositoryStub(UserRepositoryPort):
    """Always answers with the pre-configured user.

    find_by_id ignores the requested id. save and delete are no-ops.
    Nothing is recorded and nothing fails.
    """

    def __init__(self, user: User):
        self.user = user

    async def save(self, user: User) -> None:
        pass

    async def find_by_id(self, user_id: UserId) -> User | None:
        return self.user

    async def find_all(self) -> list[User]:
        return [self.user]

    async def delete(self, user_id: UserId) -> None:
        pass
