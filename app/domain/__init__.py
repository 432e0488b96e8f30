"""
Domain layer - Books and the shelf that holds them.

This layer contains the entities, value objects and ordering criteria of
the bookshelf.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book, BookShelf
from .errors import UnsupportedOperationError
from .value_objects import BookList

__all__ = [
    # Entities
    "Book",
    "BookShelf",
    # Value Objects
    "BookList",
    # Errors
    "UnsupportedOperationError",
]
