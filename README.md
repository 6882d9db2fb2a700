# shelfkeeper

An interactive terminal application for keeping a small library catalogue.
You can add and remove books, list them, search for them and record when
they are borrowed. The catalogue is stored as a JSON file.

## Installation

```
pip install .
```

## Running

```
shelfkeeper [DATA_PATH]
```

`DATA_PATH` is the JSON file that holds the catalogue. If it is not given,
`../data/lib.json` (relative to the current directory) is used.

At startup the catalogue is loaded from the data file. If the file is
missing or cannot be read, `ERROR: Failed to load data.` is printed and you
start with an empty library. A menu then lists these actions:

```
1. Add a new book
2. Remove book
3. List all books
4. List available books
5. List unavailable (borrowed) books
6. Search for a book
7. Borrow a book
8. Return a book
9. Save
0. Exit
```

The menu accepts only the choices 0 to 7. Choosing 8 or 9 is reported as
invalid input, so books cannot be returned from the menu, and the catalogue
is saved only through the question asked on exit: "Do you wish to save
before closing?"

Menu choices, ids and years are read as the whole number at the start of
the line; anything after it on the line is ignored. Ids and release years
must be whole numbers from 0 to 2500. Titles and authors may not be blank.

Search works by id, title, author or release year. Title and author
searches ignore the case of ASCII letters and match any part of the text.

If the input ends, the command stops with exit status 1; after a normal
exit the status is 0.

## Data file

The catalogue is a JSON array of book objects. It is written with an
indent of four spaces and with the keys in alphabetical order:

```json
[
    {
        "author": "J. R. R. Tolkien",
        "available": true,
        "title": "The Hobbit",
        "year": 1937
    }
]
```

Every object must have all four keys: `title` and `author` strings, `year`
a non-negative integer and `available` a boolean. Ids are not stored in
the file. Every `Book` created in a process gets the next id from a single
counter starting at 1, so in the application the loaded books are numbered
from 1 in file order and new books continue from there.

## Using the library from Python

```python
from shelfkeeper.book import Book
from shelfkeeper.library import Library, SearchCriteria

library = Library()
library.add_book(Book("The Hobbit", "J. R. R. Tolkien", 1937))
matches = library.search_books(SearchCriteria.TITLE, "hobbit")
library.show_conditional(matches)
library.save("lib.json")
```

- `Book` has `title`, `author`, `year`, `available` and an automatic `id`,
  with `describe()`, `show(stream)`, `to_dict()` and `Book.from_dict(data)`
  (which raises `ValueError` on bad data).
- `Library` holds `books` and provides `add_book`, `remove_book(book_id)`,
  `change_availability(book_id, available)` (returns `True` if changed,
  `False` if already so, `None` if no such book), `show`,
  `show_conditional(indexes)`, `search_books(criteria, value)` (returns
  positions in `books`), `load(path)` and `save(path)`.
- `load` and `save` raise `LibraryError` when the file cannot be read,
  parsed or written.
- `shelfkeeper.cli.CommandLineInterface` and
  `shelfkeeper.controller.SystemController` take optional input and output
  streams and a library, so the menus can be driven from code.

## Limits

There is no way to edit a book once it has been added; remove it and add
it again instead. The catalogue is kept in one local JSON file with no
locking, so it is meant for a single user at a time.

## Tests

```
pip install .[test]
pytest
```