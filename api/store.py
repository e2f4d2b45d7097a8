"""
In-memory book store for the FastAPI application.
"""

import threading
from typing import Iterable, List, Optional

import structlog

from api.errors import BookNotFoundError
from api.models import Book, BookRequest

logger = structlog.get_logger(__name__)


def seed_books() -> List[Book]:
    """Sample books loaded into the store at startup."""
    return [
        Book(id=1, title="Computer Science Pro", author="Chad Darby", category="Computer Science", rating=5),
        Book(id=2, title="Java Spring Master", author="Eric Roby", category="Computer Science", rating=5),
        Book(id=3, title="Why 1+1 rocks", author="Adil A.", category="Math", rating=5),
        Book(id=4, title="How Bears Hibernate", author="Bob B.", category="Science", rating=2),
        Book(id=5, title="A pirate's treasure", author="Curt C.", category="History", rating=3),
        Book(id=6, title="Why 2+2 is better", author="Dan D.", category="Math", rating=5),
    ]


class BookStore:
    """Ordered in-memory collection of books.

    Books keep insertion order. Every read returns a copy of the list and
    every mutation runs under a lock, so the store can be shared by the
    threads FastAPI uses for synchronous endpoints.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = list(books or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list(self, category: Optional[str] = None) -> List[Book]:
        """
        Get all books, or only those whose category equals ``category``.

        Args:
            category: Exact, case-sensitive category to filter on

        Returns:
            Snapshot of the matching books in insertion order
        """
        with self._lock:
            if category is None:
                return list(self._books)
            return [book for book in self._books if book.category == category]

    def find_by_id(self, book_id: int) -> Book:
        """
        Get a single book by ID.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        raise BookNotFoundError(book_id)

    def create(self, request: BookRequest) -> Book:
        """
        Append a new book built from ``request``.

        The id is the last book's id plus one, or 1 for an empty store. Ids
        freed by deleting the last book are therefore handed out again.
        """
        with self._lock:
            book_id = self._books[-1].id + 1 if self._books else 1
            book = Book.from_request(book_id, request)
            self._books.append(book)

        logger.info("Book created", book_id=book.id, category=book.category)
        return book

    def update(self, book_id: int, request: BookRequest) -> Book:
        """
        Replace every field except the id of the book with ``book_id``.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            for index, current in enumerate(self._books):
                if current.id == book_id:
                    book = Book.from_request(book_id, request)
                    self._books[index] = book
                    break
            else:
                raise BookNotFoundError(book_id)

        logger.info("Book updated", book_id=book_id)
        return book

    def delete(self, book_id: int) -> None:
        """
        Remove the book with ``book_id``.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            remaining = [book for book in self._books if book.id != book_id]
            if len(remaining) == len(self._books):
                raise BookNotFoundError(book_id)
            self._books = remaining

        logger.info("Book deleted", book_id=book_id)
