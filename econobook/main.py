"""
econobook: build a personalized children's book about economics, one reviewed chapter at a time.

Local run with: python3 -m econobook.main   (or the installed `econobook` command)
"""

import logging
import os
import sys

from econobook.cli import display
from econobook.cli.configure_book import configure_new_book
from econobook.cli.manage_book import manage_book
from econobook.cli.prompts import ask_text, confirm, select
from econobook.libs.constants import BOOKS_DIR
from econobook.libs.logger import configure_logging
from econobook.libs.utils import safe_book_name
from econobook.modules.book_state import (
    create_book_directory,
    delete_book_directory,
    initialize_book_state,
    list_books,
)
from econobook.modules.utils import BookStateError

logger = logging.getLogger(__name__)

MAIN_MENU_CHOICES = [
    ("Create a new book", "create"),
    ("Open existing book", "open"),
    ("Delete a book", "delete"),
    ("Exit", "exit"),
]


def _validate_book_name(value):
    return "Book name cannot be empty" if not value.strip() else None


def create_book(books_dir=BOOKS_DIR):
    """Ask for a name, create the book directory and configure it. Returns the book path or None."""
    book_name = ask_text("Enter a name for the new book", validate=_validate_book_name)
    name = safe_book_name(book_name)
    if not name:
        display.error("Book name contains no valid characters")
        return None

    display.info(f"Creating book with filename: {name}")
    try:
        book_dir = create_book_directory(books_dir, name, initialize_book_state(name))
    except BookStateError as e:
        display.error(f"Error creating book {name}:", e)
        return None
    display.success(f"Created new book: {name}")

    if not configure_new_book(book_dir):
        try:
            delete_book_directory(books_dir, name)
        except BookStateError as e:
            display.error(f"Could not remove unconfigured book {name}:", e)
            return None
        display.warning(f"Removed unconfigured book: {name}")
        return None
    return book_dir


def open_book(books_dir=BOOKS_DIR):
    books = list_books(books_dir)
    if not books:
        display.warning("No books found. Create one first!")
        return None
    selected = select("Select a book to open:", [(display.escape(b), b) for b in books])
    return os.path.join(books_dir, selected)


def delete_book(books_dir=BOOKS_DIR):
    books = list_books(books_dir)
    if not books:
        display.warning("No books to delete!")
        return False

    selected = select("Select a book to delete:", [(display.escape(b), b) for b in books])
    if not confirm("Are you sure you want to delete this book? This cannot be undone.", default=False):
        return False
    try:
        delete_book_directory(books_dir, selected)
    except BookStateError as e:
        display.error(f"Error deleting book {selected}:", e)
        return False
    display.success(f"Deleted book: {selected}")
    return True


def main_menu(books_dir=BOOKS_DIR):
    while True:
        action = select("What would you like to do?", MAIN_MENU_CHOICES)

        if action == "create":
            book_dir = create_book(books_dir)
            if book_dir:
                manage_book(book_dir)
        elif action == "open":
            book_dir = open_book(books_dir)
            if book_dir:
                manage_book(book_dir)
        elif action == "delete":
            delete_book(books_dir)
        elif action == "exit":
            display.info("Goodbye!")
            return


def main():
    configure_logging()
    display.header("📚 Welcome to the Book Generator CLI!")
    os.makedirs(BOOKS_DIR, exist_ok=True)
    logger.info(f"Using books directory {os.path.abspath(BOOKS_DIR)}")

    try:
        main_menu()
    except (KeyboardInterrupt, EOFError):
        display.blank()
        display.info("Goodbye!")
    except Exception as e:
        logger.exception("Fatal error")
        display.error("Fatal error:", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
