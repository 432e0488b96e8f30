"""
Comparison functions for arranging books.

A criteria is a two-argument function returning a negative number, zero or
a positive number, like the ``cmp`` functions accepted by
``functools.cmp_to_key``. Titles compare case-sensitively by code point.
"""

from typing import Callable, Iterable

from .entities import Book

Criteria = Callable[[Book, Book], int]


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def natural_order(a: Book, b: Book) -> int:
    """Compare two books by title."""
    return _compare(a.title, b.title)


def by_author(a: Book, b: Book) -> int:
    """Compare two books by author name."""
    return _compare(a.author, b.author)


def by_published_on(a: Book, b: Book) -> int:
    """Compare two books by publication date."""
    return _compare(a.published_on, b.published_on)


def reverse_order(criteria: Criteria = natural_order) -> Criteria:
    """
    Invert a criteria.

    Args:
        criteria: Comparison function to invert (defaults to title order)

    Returns:
        A criteria that orders books the opposite way
    """

    def reversed_criteria(a: Book, b: Book) -> int:
        return criteria(b, a)

    return reversed_criteria


def is_sorted(books: Iterable[Book], criteria: Criteria = natural_order) -> bool:
    """Check that every adjacent pair of books satisfies the criteria."""
    items = list(books)
    return all(criteria(prev, nxt) <= 0 for prev, nxt in zip(items, items[1:]))
