"""The interactive application loop and its actions."""

from __future__ import annotations

import argparse
import os
from typing import Callable, TypeVar

from shelfkeeper.book import Book
from shelfkeeper.cli import GREEN, RESET, CommandLineInterface
from shelfkeeper.library import Library, LibraryError, SearchCriteria

DEFAULT_DATA_PATH = "../data/lib.json"

RED = "\033[1;31m"

_T = TypeVar("_T")


def _error(message: str) -> str:
    return f"\n{RED}ERROR:{RESET} {message}\n"


def _success(message: str) -> str:
    return f"\n{GREEN}SUCCESS:{RESET} {message}\n"


class SystemController:
    """Runs the menus against a library stored at data_path."""

    def __init__(
        self,
        data_path: str,
        cli: CommandLineInterface | None = None,
        library: Library | None = None,
    ) -> None:
        self.data_path = data_path
        self.cli = CommandLineInterface() if cli is None else cli
        self.library = Library() if library is None else library
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_book,
            2: self.remove_book,
            3: self._list_all_books,
            4: lambda: self.list_books_by_availability(True),
            5: lambda: self.list_books_by_availability(False),
            6: self.search,
            7: self.borrow_book,
            8: self.return_book,
            9: self._save,
        }

    # helpers

    def _say(self, text: str) -> None:
        self.cli.stdout.write(text)
        self.cli.stdout.flush()

    def _ask(
        self,
        read: Callable[[], _T | None],
        retry_message: str,
        reprompt: Callable[[], None],
    ) -> _T:
        value = read()
        while value is None:
            self._say(retry_message)
            reprompt()
            value = read()
        return value

    def _ask_int(self, label: str) -> int:
        return self._ask(
            self.cli.get_int_input,
            _error("Invalid input, please try again."),
            lambda: self._say(f"{label}: "),
        )

    def _ask_string(self, label: str) -> str:
        return self._ask(
            self.cli.get_string_input,
            _error("Invalid input, please try again."),
            lambda: self._say(f"{label}: "),
        )

    def _save(self) -> None:
        try:
            self.library.save(self.data_path)
        except LibraryError:
            self._say(_error("Failed to save data."))
        else:
            self._say(_success("Saved data successfully."))

    def _list_all_books(self) -> None:
        self._say("\n")
        self.cli.list_books()
        self.library.show(self.cli.stdout)
        self.cli.line_break()

    def _show_results(self, results: list[int]) -> None:
        self._say("\n")
        self.cli.search_result()
        self.library.show_conditional(results, self.cli.stdout)

    # main logic

    def setup(self) -> None:
        """Load the stored library if there is one; otherwise start empty."""
        if os.path.isfile(self.data_path):
            try:
                self.library.load(self.data_path)
                return
            except LibraryError:
                pass
        self._say(f"{RED}ERROR:{RESET} Failed to load data.\n")

    def main_loop(self) -> None:
        """Show the main menu and run the chosen actions until exit is chosen."""
        choice = -1
        while True:
            self._say("\n")
            self.cli.start_menu()
            selection = self.cli.get_menu_selection(0, 7)
            if selection is None:
                self._say(_error("Invalid input."))
            else:
                choice = selection
                action = self._actions.get(choice)
                if action is not None:
                    action()
            if choice == 0:
                break
        self.exit()

    def exit(self) -> None:
        """Offer to save, then announce shutdown."""
        self.cli.line_break()
        answer = self._ask(
            lambda: self.cli.get_menu_selection(1, 2),
            _error("Invalid input."),
            self.cli.exit_menu,
        ) if self._exit_prompt() else None
        if answer == 1:
            self._save()
        self._say(f"\n{GREEN}Library Management System shut down.{RESET}\n")

    def _exit_prompt(self) -> bool:
        self.cli.exit_menu()
        return True

    def add_book(self) -> None:
        """Ask for a new book's details and add it once confirmed."""
        self._say("\n")
        self.cli.add_book_menu(1)

        retry = _error("Invalid input, please try again.")
        self.cli.add_book_menu(2)
        title = self._ask(
            self.cli.get_string_input, retry, lambda: self.cli.add_book_menu(2)
        )
        self.cli.add_book_menu(3)
        author = self._ask(
            self.cli.get_string_input, retry, lambda: self.cli.add_book_menu(3)
        )
        self.cli.add_book_menu(4)
        year = self._ask(
            self.cli.get_int_input,
            _error("Invalid input."),
            lambda: self.cli.add_book_menu(4),
        )

        self._say("\n")
        self.cli.add_book_menu(5)
        self._say(f"Title: {title}\nAuthor: {author}\nYear: {year}\n")
        self.cli.add_book_menu(6)

        self.cli.add_book_menu(7)
        answer = self._ask(
            lambda: self.cli.get_menu_selection(1, 2),
            _error("Invalid input."),
            lambda: self.cli.add_book_menu(7),
        )
        if answer == 1:
            self.library.add_book(Book(title, author, year))
            self._say(_success("Book added to library."))

    def remove_book(self) -> None:
        """Ask for a book id and remove that book."""
        self._say("\n")
        self.cli.remove_book()
        book_id = self._ask(
            self.cli.get_int_input,
            _error("Invalid input."),
            lambda: self._say("Book id: "),
        )
        if self.library.remove_book(book_id):
            self._say(_success(f"Book {book_id} was removed."))
        else:
            self._say(_error(f"Book {book_id} not possible to remove."))

    def search(self) -> None:
        """Ask for a search field and run that search."""
        self._say("\n")
        self.cli.search_menu(True)
        choice = self._ask(
            lambda: self.cli.get_menu_selection(1, 4),
            _error("Invalid input.") + "\n",
            lambda: self.cli.search_menu(False),
        )
        {
            1: self.search_by_id,
            2: self.search_by_title,
            3: self.search_by_author,
            4: self.search_by_year,
        }[choice]()

    def _change_availability(self, available: bool) -> None:
        self._say("\n")
        if available:
            self.cli.return_book()
        else:
            self.cli.borrow_book()
        shown = self.library.search_books(SearchCriteria.AVAILABLE, not available)
        self.library.show_conditional(shown, self.cli.stdout)
        self._say("\nBook id: ")
        book_id = self._ask_int("Book id")

        result = self.library.change_availability(book_id, available)
        done, already = (
            ("returned", "already available") if available
            else ("borrowed", "already borrowed")
        )
        if result is True:
            self._say(_success(f"Book {book_id} was {done}."))
        elif result is False:
            self._say(_error(f"Book {book_id} is {already}."))
        else:
            self._say(_error(f"Book {book_id} does not exist."))

    def borrow_book(self) -> None:
        """List available books and mark the chosen one as borrowed."""
        self._change_availability(False)

    def return_book(self) -> None:
        """List borrowed books and mark the chosen one as available."""
        self._change_availability(True)

    def list_books_by_availability(self, available: bool) -> None:
        """List the books whose availability equals available."""
        self._say("\n")
        self.cli.list_books()
        results = self.library.search_books(SearchCriteria.AVAILABLE, available)
        self.library.show_conditional(results, self.cli.stdout)
        self.cli.line_break()

    def search_by_id(self) -> None:
        """Ask for an id and show the book with it."""
        self._say("Book id: ")
        book_id = self._ask_int("Book id")
        self._show_results(self.library.search_books(SearchCriteria.ID, book_id))

    def search_by_title(self) -> None:
        """Ask for a title fragment and show matching books."""
        self._say("Title: ")
        title = self._ask_string("Title")
        self._show_results(self.library.search_books(SearchCriteria.TITLE, title))

    def search_by_author(self) -> None:
        """Ask for an author fragment and show matching books."""
        self._say("Author: ")
        author = self._ask_string("Author")
        self._show_results(self.library.search_books(SearchCriteria.AUTHOR, author))

    def search_by_year(self) -> None:
        """Ask for a year and show books released in it."""
        self._say("Year: ")
        year = self._ask_int("Year")
        self._show_results(self.library.search_books(SearchCriteria.YEAR, year))


def main(argv: list[str] | None = None) -> int:
    """Start the library application."""
    parser = argparse.ArgumentParser(description="Manage a library of books.")
    parser.add_argument(
        "data_path",
        nargs="?",
        default=DEFAULT_DATA_PATH,
        help="JSON file holding the library data",
    )
    args = parser.parse_args(argv)
    controller = SystemController(args.data_path)
    controller.setup()
    try:
        controller.main_loop()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0