"""
Domain entities for the bookshelf.

A Book is an immutable record ordered by title. A BookShelf owns the books
added to it and derives sorted and grouped views from them without ever
changing the order in which they were stored.
"""

from dataclasses import dataclass
from datetime import date
from functools import cmp_to_key
import logging
from typing import Callable, Dict, Hashable, Iterator, List, Optional, TypeVar

from .value_objects import BookList

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class Book:
    """
    Represents a book on a shelf.

    Equality and hashing cover every field. Ordering compares titles only,
    case-sensitively, so sorting books sorts them by title.
    """

    title: str
    """Book title"""

    author: str
    """Author name"""

    published_on: date
    """Publication date"""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title < other.title

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title <= other.title

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title > other.title

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title >= other.title

    def get_published_year(self) -> int:
        """Extract the publication year."""
        return self.published_on.year


class BookShelf:
    """
    An ordered collection of books.

    Books are kept in insertion order. The shelf only grows: ``add`` is the
    one operation that changes its contents, and every query returns either
    a read-only view or a new container.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def __repr__(self) -> str:
        return f"BookShelf(books={self._books!r})"

    def add(self, *books: Book) -> None:
        """
        Append books to the end of the shelf, in the order given.

        Calling it with no books does nothing. Duplicates are kept.
        """
        self._books.extend(books)
        if books:
            logger.debug(f"Added {len(books)} books, shelf now holds {len(self._books)}")

    def books(self) -> BookList:
        """Return a read-only view of the books in insertion order."""
        return BookList(self._books)

    def arrange(self, criteria: Optional[Callable[[Book, Book], int]] = None) -> List[Book]:
        """
        Return the books sorted without touching the shelf's own order.

        The sort is stable, so books that compare equal keep their insertion
        order.

        Args:
            criteria: Comparison function returning a negative number, zero
                or a positive number. Defaults to the natural title order.

        Returns:
            A new list holding every book on the shelf
        """
        if criteria is None:
            arranged = sorted(self._books)
        else:
            arranged = sorted(self._books, key=cmp_to_key(criteria))

        logger.debug(f"Arranged {len(arranged)} books")
        return arranged

    def group_by(self, key_fn: Callable[[Book], K]) -> Dict[K, List[Book]]:
        """
        Partition the books by a key derived from each one.

        Args:
            key_fn: Function computing the group key of a book

        Returns:
            Mapping from key to the books sharing it, in insertion order.
            Keys appear in order of their first book; no group is empty.
        """
        groups: Dict[K, List[Book]] = {}
        for book in self._books:
            groups.setdefault(key_fn(book), []).append(book)

        logger.debug(f"Grouped {len(self._books)} books into {len(groups)} groups")
        return groups

    def group_by_publication_year(self) -> Dict[int, List[Book]]:
        """Group the books by the year they were published."""
        return self.group_by(Book.get_published_year)
