"""Keep a catalogue of books in a JSON file and track borrowing from the terminal."""

__version__ = "1.0.0"