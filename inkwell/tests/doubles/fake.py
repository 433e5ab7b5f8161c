"""Fake ArticleRepositoryPort implementation for testing."""

from inkwell.core.models import Article, ArticleId
from inkwell.core.ports import ArticleRepositoryPort


class ArticleRepositoryFake(ArticleRepositoryPort):
    """In-memory article repository for testing.

    A lightweight but consistent store: save is last-write-wins, delete of
    an unknown id is a no-op, and none of the port operations raise. Can be
    seeded with articles so tests can start from a known state.
    """

    def __init__(self, initial_articles: list[Article] | None = None):
        """Initialize the store, optionally pre-seeded."""
        self.articles: dict[str, Article] = {}
        for article in initial_articles or []:
            self.articles[str(article.id)] = article

    async def save(self, article: Article) -> None:
        self.articles[str(article.id)] = article

    async def find_by_id(self, article_id: ArticleId) -> Article | None:
        return self.articles.get(str(article_id))

    async def find_all(self) -> list[Article]:
        return list(self.articles.values())

    async def delete(self, article_id: ArticleId) -> None:
        self.articles.pop(str(article_id), None)

    def get_saved_article_by_id(self, article_id: ArticleId) -> Article | None:
        """Get the stored article for an id, if any."""
        return self.articles.get(str(article_id))

    def get_all_saved(self) -> list[Article]:
        """Get all stored articles."""
        return list(self.articles.values())

    def was_saved(self, article_id: ArticleId) -> bool:
        """Check whether an article with the given id is stored."""
        return str(article_id) in self.articles

    def reset(self) -> None:
        """Clear all stored articles."""
        self.articles.clear()
