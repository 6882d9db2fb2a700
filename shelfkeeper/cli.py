"""Terminal menus and validated reading of user input."""

from __future__ import annotations

import re
import sys
from typing import TextIO

GREEN = "\033[1;32m"
RESET = "\033[0m"

_C_WHITESPACE = frozenset(" \t\n\v\f\r")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_INT_INPUT = 2500

_ADD_BOOK_STEPS = {
    1: f"{GREEN}======  Add Book  ======={RESET}\n\n",
    2: "Title: ",
    3: "Author: ",
    4: "Release year: ",
    5: f"{GREEN}New Book ========{RESET}\n",
    6: f"{GREEN}================={RESET}\n",
    7: (
        f"{GREEN}Do you want to add this book?{RESET}\n"
        "1. Yes\n"
        "2. No\n\n"
        f"{GREEN}Choose an option: {RESET}\n"
    ),
}


def is_whitespace_only(text: str) -> bool:
    """Return True if text holds nothing but blank characters (or nothing)."""
    return all(char in _C_WHITESPACE for char in text)


class CommandLineInterface:
    """Writes the menus and reads user input.

    Readers return None when the input is invalid and raise EOFError
    when the input stream is exhausted.
    """

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    # menus

    def start_menu(self) -> None:
        """Write the main menu and its prompt."""
        self._write(
            f"{GREEN}==============================\n"
            "  Library Management System\n"
            f"=============================={RESET}\n\n"
            "1. Add a new book\n"
            "2. Remove book\n"
            "3. List all books\n"
            "4. List available books\n"
            "5. List unavailable (borrowed) books\n"
            "6. Search for a book\n"
            "7. Borrow a book\n"
            "8. Return a book\n"
            "9. Save\n"
            "0. Exit\n\n"
            f"{GREEN}Choose an option: {RESET}"
        )

    def list_books(self) -> None:
        """Write the heading of a book listing."""
        self._write(f"{GREEN}======  List of Books  ======={RESET}\n")

    def line_break(self) -> None:
        """Write a separator line."""
        self._write(f"{GREEN}=============================={RESET}\n")

    def exit_menu(self) -> None:
        """Write the save-before-exit question."""
        self._write(
            "Do you wish to save before closing?\n"
            "1. Yes\n"
            "2. No\n\n"
            f"{GREEN}Choose an option: {RESET}"
        )

    def add_book_menu(self, step: int) -> None:
        """Write the text of one step of adding a book; unknown steps write nothing."""
        text = _ADD_BOOK_STEPS.get(step)
        if text is not None:
            self._write(text)

    def remove_book(self) -> None:
        """Write the remove-book heading and id prompt."""
        self._write(f"{GREEN}======  Remove Book  ======={RESET}\n\nBook id: ")

    def search_menu(self, with_title: bool) -> None:
        """Write the search menu, with its heading if with_title is true."""
        heading = f"{GREEN}======  Search Book  ======={RESET}\n\n" if with_title else ""
        self._write(
            heading
            + "Search by:\n"
            "1. Id\n"
            "2. Title\n"
            "3. Author\n"
            "4. Year\n\n"
            f"{GREEN}Choose an option: {RESET}"
        )

    def search_result(self) -> None:
        """Write the search results heading."""
        self._write(f"{GREEN}======  Search Results  ======={RESET}\n\n")

    def borrow_book(self) -> None:
        """Write the borrow-book heading."""
        self._write(f"{GREEN}======  Borrow Book  ======={RESET}\n")

    def return_book(self) -> None:
        """Write the return-book heading."""
        self._write(f"{GREEN}======  Return Book  ======={RESET}\n")

    # input

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\n")

    def _read_leading_int(self) -> int | None:
        """Read the integer that starts the next non-blank line; the rest is dropped."""
        line = self._read_line()
        while is_whitespace_only(line):
            line = self._read_line()
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else None

    def get_menu_selection(self, min_value: int, max_value: int) -> int | None:
        """Read a menu choice; None if it is not an integer in [min_value, max_value]."""
        value = self._read_leading_int()
        if value is None or not _INT_MIN <= value <= _INT_MAX:
            return None
        if value < min_value or value > max_value:
            return None
        return value

    def get_string_input(self) -> str | None:
        """Read a whole line; None if it is blank."""
        line = self._read_line()
        if is_whitespace_only(line):
            return None
        return line

    def get_int_input(self) -> int | None:
        """Read a non-negative integer no greater than 2500; None otherwise."""
        value = self._read_leading_int()
        if value is None or value < 0 or value > _MAX_INT_INPUT:
            return None
        return value