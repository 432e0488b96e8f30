"""
Value objects for the domain layer.

Value objects represent descriptive aspects of the domain with no
conceptual identity. Callers can read them but never change the shelf
through them.
"""

from collections.abc import Sequence
import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, NoReturn, Union

from .errors import UnsupportedOperationError

if TYPE_CHECKING:
    from .entities import Book

logger = logging.getLogger(__name__)


class BookList(Sequence):
    """
    Read-only view over the books stored on a shelf.

    The view shares the shelf's underlying list, so it reflects books added
    after it was obtained. Every mutating list method raises
    UnsupportedOperationError.
    """

    __slots__ = ("_books",)

    def __init__(self, books: List["Book"]) -> None:
        self._books = books

    def __getitem__(self, index: Union[int, slice]) -> Union["Book", List["Book"]]:
        """Return a book, or a new plain list for slices."""
        return self._books[index]

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator["Book"]:
        return iter(self._books)

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def __eq__(self, other: object) -> bool:
        """Compare element-wise with another BookList, list or tuple."""
        if isinstance(other, BookList):
            return self._books == other._books
        if isinstance(other, (list, tuple)):
            return self._books == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"BookList({self._books!r})"

    def _reject(self, operation: str) -> NoReturn:
        logger.debug(f"Rejected '{operation}' on read-only book list")
        raise UnsupportedOperationError(operation)

    def __setitem__(self, index: Union[int, slice], value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: Union[int, slice]) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, other: Iterable["Book"]) -> NoReturn:
        self._reject("__iadd__")

    def __imul__(self, other: int) -> NoReturn:
        self._reject("__imul__")

    def append(self, book: "Book") -> NoReturn:
        self._reject("append")

    def extend(self, books: Iterable["Book"]) -> NoReturn:
        self._reject("extend")

    def insert(self, index: int, book: "Book") -> NoReturn:
        self._reject("insert")

    def remove(self, book: "Book") -> NoReturn:
        self._reject("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")

    def reverse(self) -> NoReturn:
        self._reject("reverse")
