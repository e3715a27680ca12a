"""
Place your record types here
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Genre(Enum):
    """Book genres shown through their human-readable label."""

    NOVEL = "novel"
    ESSAY = "essay"
    POETRY = "poetry"

    def __str__(self) -> str:
        return self.value


@dataclass
class Address:
    """Postal address nested inside an author."""

    street: str = ""
    city: str = ""


@dataclass
class Author:
    """Author with a nested address."""

    id: int = 0
    name: str = ""
    email: str | None = None
    active: bool = True
    address: Address = field(default_factory=Address)


@dataclass
class Chapter:
    """One chapter of a book."""

    title: str = ""
    pages: int = 0


@dataclass
class Book:
    """Book with a list of nested chapters."""

    id: int = 0
    title: str = ""
    genre: Genre = Genre.NOVEL
    price: float = 0.0
    published: date | None = None
    chapters: list[Chapter] = field(default_factory=list)


__all__ = ["Address", "Author", "Book", "Chapter", "Genre"]


# The End
