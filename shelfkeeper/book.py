"""A single book held by the library."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Mapping, TextIO

_REQUIRED_KEYS = ("title", "author", "year", "available")


@dataclass
class Book:
    """A book with an automatically assigned, session-unique id."""

    title: str = ""
    author: str = ""
    year: int = 0
    available: bool = True
    id: int = field(init=False)

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    def __post_init__(self) -> None:
        self.id = next(Book._ids)

    def describe(self) -> str:
        """Return the one-line description of this book."""
        availability = "Yes" if self.available else "No"
        return (
            f"(id:{self.id}) Title: {self.title}, Author: {self.author}, "
            f"Year: {self.year}, Availability: {availability}"
        )

    def show(self, stream: TextIO | None = None) -> None:
        """Write the description of this book, followed by a newline."""
        out = sys.stdout if stream is None else stream
        out.write(self.describe() + "\n")

    def to_dict(self) -> dict[str, Any]:
        """Return the stored form of this book; the id is not stored."""
        return {
            "title": self.title,
            "author": self.author,
            "year": self.year,
            "available": self.available,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Book:
        """Build a new book, with a fresh id, from its stored form."""
        if not isinstance(data, Mapping):
            raise ValueError("book data must be an object")
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ValueError(f"book data is missing: {', '.join(missing)}")

        title, author = data["title"], data["author"]
        year, available = data["year"], data["available"]
        if not isinstance(title, str):
            raise ValueError("title must be a string")
        if not isinstance(author, str):
            raise ValueError("author must be a string")
        if isinstance(year, bool) or not isinstance(year, int) or year < 0:
            raise ValueError("year must be a non-negative integer")
        if not isinstance(available, bool):
            raise ValueError("available must be a boolean")
        return cls(title, author, year, available)