"""Test doubles for the core ports.

Five independent doubles, one per verification style:

- DummyLogger: No-op LoggerPort that only satisfies the signature
- UserRepositoryStub: Canned UserRepositoryPort answers
- ArticleRepositoryFake: Working in-memory ArticleRepositoryPort
- NotificationServiceSpy: Records NotificationPort calls for later queries
- CommentServiceMock: Ordered CommentPort expectations checked by verify()
"""

from .dummy import DummyLogger
from .fake import ArticleRepositoryFake
from .mock import CommentServiceMock
from .spy import NotificationServiceSpy
from .stub import UserRepositoryStub

__all__ = [
    "ArticleRepositoryFake",
    "CommentServiceMock",
    "DummyLogger",
    "NotificationServiceSpy",
    "UserRepositoryStub",
]
