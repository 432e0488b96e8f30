"""
Display/export models for a bookshelf.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Presentation representation of a Book entity.

    Maps from the domain Book for display and export.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    published_on: date = Field(description="Publication date")


class BookShelf(BaseModel):
    """
    Snapshot of the books on a shelf.
    """
    books: list[Book] = Field(default_factory=list, description="Books, in shelf or arranged order")
    size: int = Field(default=0, ge=0, description="Number of books on the shelf")


class BookGroup(BaseModel):
    """
    One group of books sharing a key (e.g. a publication year or an author).
    """
    key: str = Field(description="Group key rendered as text")
    books: list[Book] = Field(description="Books in the group, in insertion order")
