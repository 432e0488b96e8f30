"""
Converters between domain entities and presentation schemas.

This module centralizes all conversion logic between the domain layer
and the presentation layer, maintaining clean separation of concerns.
"""

from dataclasses import asdict
from typing import Dict, Hashable, List

from app.domain import entities as domain
from app.presentation import schemas as view


def domain_book_to_schema(book: domain.Book) -> view.Book:
    """
    Convert a domain Book entity to a presentation Book model.

    Args:
        book: Domain Book entity

    Returns:
        Presentation Book model
    """
    return view.Book(**asdict(book))


def schema_book_to_domain(book: view.Book) -> domain.Book:
    """
    Convert a presentation Book model back to a domain Book entity.

    Args:
        book: Presentation Book model

    Returns:
        Domain Book entity
    """
    return domain.Book(
        title=book.title,
        author=book.author,
        published_on=book.published_on,
    )


def domain_shelf_to_schema(
    shelf: domain.BookShelf,
    *,
    arranged: bool = False,
) -> view.BookShelf:
    """
    Convert a domain BookShelf to a presentation snapshot.

    Args:
        shelf: Domain BookShelf
        arranged: Whether to list the books in title order instead of
            insertion order

    Returns:
        Presentation BookShelf model
    """
    books = shelf.arrange() if arranged else shelf.books()
    return view.BookShelf(
        books=[domain_book_to_schema(b) for b in books],
        size=len(shelf),
    )


def domain_groups_to_schema(
    groups: Dict[Hashable, List[domain.Book]],
) -> List[view.BookGroup]:
    """
    Convert the result of BookShelf.group_by to presentation groups.

    Args:
        groups: Mapping from group key to books

    Returns:
        List of BookGroup models, in the mapping's key order
    """
    return [
        view.BookGroup(
            key=str(key),
            books=[domain_book_to_schema(b) for b in books],
        )
        for key, books in groups.items()
    ]
