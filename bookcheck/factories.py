import secrets
from dataclasses import dataclass, field

from bookcheck.schemas.book_schema import BookCreate, BookUpdate
from bookcheck.schemas.category_schema import CategoryCreate, CategoryUpdate


def _suffix() -> str:
    return secrets.token_hex(4)


class CategoryFactory:
    def __init__(self, title: str = "Fictional Literature", update_prefix: str = "Updated ", unique: bool = True):
        self.title = title
        self.update_prefix = update_prefix
        self.unique = unique

    def build(self) -> CategoryCreate:
        title = f"{self.title} {_suffix()}" if self.unique else self.title
        return CategoryCreate(title=title)

    def build_update(self, created: CategoryCreate) -> CategoryUpdate:
        return CategoryUpdate(title=f"{self.update_prefix}{created.title}")


class BookFactory:
    def __init__(
        self,
        title: str = "Pride and Prejudice",
        author: str = "Jane Austen",
        description: str = "A beautiful book",
        price: float = 12.80,
        pages: int = 500,
        updated_title_suffix: str = " 2",
        updated_author: str = "J. David Salinger",
        unique: bool = True,
    ):
        self.title = title
        self.author = author
        self.description = description
        self.price = price
        self.pages = pages
        self.updated_title_suffix = updated_title_suffix
        self.updated_author = updated_author
        self.unique = unique

    def build(self, category_id: str, **overrides) -> BookCreate:
        data = {
            "title": f"{self.title} {_suffix()}" if self.unique else self.title,
            "author": self.author,
            "description": self.description,
            "price": self.price,
            "pages": self.pages,
            "category": category_id,
        }
        data.update(overrides)
        return BookCreate(**data)

    def build_update(self, book: BookCreate) -> BookUpdate:
        return BookUpdate(title=f"{book.title}{self.updated_title_suffix}", author=self.updated_author)


@dataclass
class Factories:
    categories: CategoryFactory = field(default_factory=CategoryFactory)
    books: BookFactory = field(default_factory=BookFactory)
