import io
import json

import pytest

from shelfkeeper.book import Book
from shelfkeeper.library import Library, LibraryError, SearchCriteria


@pytest.fixture
def library():
    lib = Library()
    lib.add_book(Book("Dune", "Frank Herbert", 1965))
    lib.add_book(Book("Dune Messiah", "Frank Herbert", 1969, False))
    lib.add_book(Book("Emma", "Jane Austen", 1815))
    return lib


def test_add_book_appends(library):
    book = Book("New", "Writer", 2020)
    library.add_book(book)
    assert library.books[-1] is book
    assert len(library) == 4


def test_remove_existing_book(library):
    target = library.books[1]
    assert library.remove_book(target.id) is True
    assert target not in library.books
    assert len(library) == 2


def test_remove_missing_book(library):
    ids = [book.id for book in library]
    assert library.remove_book(max(ids) + 1000) is False
    assert len(library) == 3


def test_change_availability_results(library):
    available, borrowed = library.books[0], library.books[1]
    assert library.change_availability(available.id, False) is True
    assert available.available is False
    assert library.change_availability(borrowed.id, False) is False
    missing = max(book.id for book in library) + 1000
    assert library.change_availability(missing, True) is None


def test_search_by_title_is_case_insensitive(library):
    assert library.search_books(SearchCriteria.TITLE, "dUnE") == [0, 1]


def test_search_by_author_substring(library):
    assert library.search_books(SearchCriteria.AUTHOR, "austen") == [2]


def test_search_by_id_finds_one(library):
    target = library.books[2]
    assert library.search_books(SearchCriteria.ID, target.id) == [2]


def test_search_by_year(library):
    assert library.search_books(SearchCriteria.YEAR, 1969) == [1]
    assert library.search_books(SearchCriteria.YEAR, 1) == []


def test_search_by_availability(library):
    assert library.search_books(SearchCriteria.AVAILABLE, True) == [0, 2]
    assert library.search_books(SearchCriteria.AVAILABLE, False) == [1]


def test_search_accepts_plain_int_criteria(library):
    assert library.search_books(4, False) == [1]


def test_search_unknown_criteria_matches_nothing(library):
    assert library.search_books(9, "anything") == []


def test_search_wrong_value_type(library):
    with pytest.raises(TypeError):
        library.search_books(SearchCriteria.TITLE, 5)
    with pytest.raises(TypeError):
        library.search_books(SearchCriteria.YEAR, "1965")


def test_show_empty():
    stream = io.StringIO()
    Library().show(stream)
    assert stream.getvalue() == "Empty\n"


def test_show_lists_all(library):
    stream = io.StringIO()
    library.show(stream)
    assert stream.getvalue().splitlines() == [b.describe() for b in library]


def test_show_conditional_skips_out_of_range(library):
    stream = io.StringIO()
    library.show_conditional([2, 17], stream)
    assert stream.getvalue() == library.books[2].describe() + "\n"


def test_show_conditional_empty_indexes(library):
    stream = io.StringIO()
    library.show_conditional([], stream)
    assert stream.getvalue() == "Empty\n"


def test_save_and_load_round_trip(library, tmp_path):
    path = tmp_path / "lib.json"
    library.save(str(path))
    loaded = Library()
    loaded.load(str(path))
    assert [b.to_dict() for b in loaded] == [b.to_dict() for b in library]


def test_saved_file_is_array_of_objects(library, tmp_path):
    path = tmp_path / "lib.json"
    library.save(str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0] == {
        "title": "Dune",
        "author": "Frank Herbert",
        "year": 1965,
        "available": True,
    }


def test_load_missing_file(tmp_path):
    with pytest.raises(LibraryError, match="loading"):
        Library().load(str(tmp_path / "absent.json"))


@pytest.mark.parametrize(
    "content",
    ["not json", '{"title": "x"}', '[{"title": "x"}]'],
)
def test_load_bad_content_keeps_books(library, tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    before = list(library.books)
    with pytest.raises(LibraryError):
        library.load(str(path))
    assert library.books == before


def test_save_to_missing_directory(library, tmp_path):
    with pytest.raises(LibraryError, match="saving"):
        library.save(str(tmp_path / "nowhere" / "lib.json"))