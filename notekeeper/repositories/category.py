"""Category repository."""

from sqlalchemy.orm import Query

from notekeeper.models.category import Category
from notekeeper.repositories.base import Repository


class CategoryRepository(Repository[Category]):
    """Category persistence."""

    model = Category

    def query_all(self) -> Query:
        """All categories, most recently updated first."""
        return self.query().order_by(Category.updated_at.desc(), Category.id.desc())

    def find_by_id_for_update(self, category_id: int) -> Category | None:
        """Get a category and lock its row until the transaction ends.

        While the lock is held, inserting a note or task that references the
        category blocks on the foreign-key check. SQLite ignores the lock.
        """
        return self.query().filter(Category.id == category_id).with_for_update().first()

    def find_by_slug(self, slug: str) -> Category | None:
        """Get a category by slug."""
        return self.query().filter(Category.slug == slug).first()
