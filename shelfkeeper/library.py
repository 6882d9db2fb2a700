"""The collection of books and its persistence."""

from __future__ import annotations

import json
import sys
from enum import IntEnum
from typing import Iterable, Iterator, TextIO

from shelfkeeper.book import Book

_LOAD_ERROR = "[ERROR] Error while loading library data."
_SAVE_ERROR = "[ERROR] Error while saving library data."

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class LibraryError(Exception):
    """Raised when library data cannot be loaded or saved."""


class SearchCriteria(IntEnum):
    """Field a search is made on."""

    ID = 0
    TITLE = 1
    AUTHOR = 2
    YEAR = 3
    AVAILABLE = 4


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class Library:
    """An ordered collection of books."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self.books: list[Book] = list(books)

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def add_book(self, book: Book) -> None:
        """Append a book to the library."""
        self.books.append(book)

    def remove_book(self, book_id: int) -> bool:
        """Remove books with the given id; return whether any were removed."""
        kept = [book for book in self.books if book.id != book_id]
        removed = len(kept) != len(self.books)
        self.books = kept
        return removed

    def load(self, path: str) -> None:
        """Replace the books with those stored in the JSON file at path."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
            if not isinstance(data, list):
                raise ValueError("library data must be an array")
            books = [Book.from_dict(item) for item in data]
        except (OSError, ValueError) as exc:
            raise LibraryError(_LOAD_ERROR) from exc
        self.books = books

    def save(self, path: str) -> None:
        """Write the books to path as indented JSON."""
        text = json.dumps(
            [book.to_dict() for book in self.books],
            indent=4,
            sort_keys=True,
            ensure_ascii=False,
        )
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise LibraryError(_SAVE_ERROR) from exc

    def change_availability(self, book_id: int, available: bool) -> bool | None:
        """Set a book's availability.

        Returns True if it changed, False if it already had that value,
        and None if no book has the id.
        """
        for book in self.books:
            if book.id == book_id:
                if book.available == available:
                    return False
                book.available = available
                return True
        return None

    def show(self, stream: TextIO | None = None) -> None:
        """Write every book, or "Empty" when there are none."""
        out = sys.stdout if stream is None else stream
        if not self.books:
            out.write("Empty\n")
        for book in self.books:
            book.show(out)

    def show_conditional(
        self, indexes: Iterable[int], stream: TextIO | None = None
    ) -> None:
        """Write the books at the given positions, ignoring ones out of range."""
        out = sys.stdout if stream is None else stream
        indexes = list(indexes)
        if not self.books or not indexes:
            out.write("Empty\n")
        for index in indexes:
            if 0 <= index < len(self.books):
                self.books[index].show(out)

    def search_books(
        self, criteria: SearchCriteria | int, value: int | str | bool
    ) -> list[int]:
        """Return the positions of the books matching value on criteria.

        Title and author match case-insensitively on substrings; an id
        search stops at the first match. An unknown criteria matches nothing.
        """
        try:
            criteria = SearchCriteria(criteria)
        except ValueError:
            return []

        if criteria in (SearchCriteria.TITLE, SearchCriteria.AUTHOR):
            if not isinstance(value, str):
                raise TypeError(f"{criteria.name.lower()} search needs a string")
            needle = _lower(value)
            attr = "title" if criteria is SearchCriteria.TITLE else "author"
            return [
                index
                for index, book in enumerate(self.books)
                if needle in _lower(getattr(book, attr))
            ]

        if criteria is SearchCriteria.AVAILABLE:
            if not isinstance(value, bool):
                raise TypeError("availability search needs a boolean")
            return [
                index
                for index, book in enumerate(self.books)
                if book.available == value
            ]

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{criteria.name.lower()} search needs an integer")

        if criteria is SearchCriteria.ID:
            return next(
                (
                    [index]
                    for index, book in enumerate(self.books)
                    if book.id == value
                ),
                [],
            )
        return [
            index for index, book in enumerate(self.books) if book.year == value
        ]