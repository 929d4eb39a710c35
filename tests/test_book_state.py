import json
import os
import tempfile
import unittest
from unittest.mock import patch

from econobook.libs.chapters import BOOK_CONTENT
from econobook.libs.utils import safe_book_name
from econobook.modules.book_state import (
    ACCEPTED,
    GENERATED,
    NOT_GENERATED,
    WIP,
    Chapter,
    ChapterImage,
    accept_chapter,
    accept_image,
    book_progress,
    create_book_directory,
    delete_book_directory,
    initialize_book_state,
    list_books,
    load_book_state,
    next_chapter,
    save_book_state,
    set_chapter_status,
    set_image_status,
    transition,
)
from econobook.modules.utils import BookStateError, InvalidTransitionError


class TestStatusTransitions(unittest.TestCase):

    def test_allowed_moves(self):
        self.assertEqual(transition(NOT_GENERATED, GENERATED), GENERATED)
        for current in (GENERATED, WIP):
            for target in (GENERATED, WIP, ACCEPTED):
                self.assertEqual(transition(current, target), target)
        self.assertEqual(transition(ACCEPTED, ACCEPTED), ACCEPTED)

    def test_refused_moves(self):
        refused = [
            (NOT_GENERATED, ACCEPTED),
            (NOT_GENERATED, WIP),
            (NOT_GENERATED, NOT_GENERATED),
            (ACCEPTED, WIP),
            (ACCEPTED, GENERATED),
            (ACCEPTED, NOT_GENERATED),
            (GENERATED, NOT_GENERATED),
            (GENERATED, "published"),
        ]
        for current, target in refused:
            with self.assertRaises(InvalidTransitionError):
                transition(current, target)

    def test_set_status_leaves_entity_unchanged_on_refusal(self):
        chapter = Chapter(id="introduction", topic="Introduction")
        with self.assertRaises(InvalidTransitionError):
            set_chapter_status(chapter, ACCEPTED)
        self.assertEqual(chapter.status, NOT_GENERATED)

        image = ChapterImage()
        set_image_status(image, GENERATED)
        set_image_status(image, WIP)
        self.assertEqual(image.status, WIP)


class TestInitializeBookState(unittest.TestCase):

    def test_chapter_sequence(self):
        state = initialize_book_state("my-book")
        ids = [c.id for c in state.chapters]
        topic_count = sum(len(category["topics"]) for category in BOOK_CONTENT)

        self.assertEqual(ids[0], "introduction")
        self.assertEqual(ids[-1], "conclusion")
        self.assertEqual(len(ids), topic_count + 2)
        self.assertEqual(ids[1], "basicConcepts_knowingWhatABusinessIs")
        self.assertEqual(len(ids), len(set(ids)))
        self.assertTrue(all(c.status == NOT_GENERATED and c.text is None for c in state.chapters))
        self.assertIsNone(state.chapters[0].lesson_context)
        self.assertEqual(state.chapters[1].lesson_context["summary"],
                         BOOK_CONTENT[0]["topics"][0]["summary"])

    def test_is_deterministic(self):
        first = [c.id for c in initialize_book_state("a").chapters]
        second = [c.id for c in initialize_book_state("b").chapters]
        self.assertEqual(first, second)

    def test_custom_lesson_table(self):
        content = [{"id": "c", "title": "C", "description": "", "order": 1,
                    "topics": [{"key": "k", "title": "K", "example": "e", "summary": "s"}]}]
        ids = [c.id for c in initialize_book_state("x", content).chapters]
        self.assertEqual(ids, ["introduction", "c_k", "conclusion"])


class TestBookPersistence(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.books_dir = self.tmp.name
        self.state = initialize_book_state("my-book")
        self.book_dir = create_book_directory(self.books_dir, "my-book", self.state)

    def tearDown(self):
        self.tmp.cleanup()

    def read_content(self):
        with open(os.path.join(self.book_dir, "content.md"), encoding="utf-8") as f:
            return f.read()

    def test_create_book_layout(self):
        self.assertTrue(os.path.isdir(os.path.join(self.book_dir, "images")))
        self.assertEqual(self.read_content(), "")
        with open(os.path.join(self.book_dir, "book-state.json"), encoding="utf-8") as f:
            data = json.load(f)
        self.assertEqual(data["title"], "my-book")
        self.assertIn("createdAt", data)
        self.assertEqual(data["chapters"][0]["image"]["status"], NOT_GENERATED)

    def test_create_existing_book_raises(self):
        with self.assertRaises(BookStateError):
            create_book_directory(self.books_dir, "my-book", self.state)

    def test_save_and_load_round_trip(self):
        chapter = self.state.chapters[1]
        set_chapter_status(chapter, GENERATED)
        chapter.text = "Once upon a time."
        chapter.generation_config = {"initialPrompt": "p", "model": "gpt-4"}
        chapter.image.attempts = 2
        self.state.chat_config = {"chatModel": "gpt-4", "temperature": 0.7}
        save_book_state(self.book_dir, self.state)

        loaded = load_book_state(self.book_dir)
        self.assertEqual(loaded.to_dict(), self.state.to_dict())
        self.assertEqual(loaded.chapters[1].image.attempts, 2)

    def test_load_missing_or_corrupt_state_raises(self):
        with self.assertRaises(BookStateError):
            load_book_state(os.path.join(self.books_dir, "missing"))

        with open(os.path.join(self.book_dir, "book-state.json"), "w", encoding="utf-8") as f:
            f.write("{not json")
        with self.assertRaises(BookStateError):
            load_book_state(self.book_dir)

    def test_accept_chapter_appends_every_time(self):
        chapter = self.state.chapters[1]
        set_chapter_status(chapter, GENERATED)
        chapter.text = "Bart opened a stand."

        accept_chapter(self.book_dir, self.state, chapter)
        section = f"\n\n## {chapter.topic}\n\nBart opened a stand.\n"
        self.assertEqual(self.read_content(), section)
        self.assertEqual(chapter.status, ACCEPTED)
        self.assertEqual(self.state.current_context,
                         f'In "{chapter.topic}": {chapter.lesson_context["summary"].rstrip(".")}.')

        accept_chapter(self.book_dir, self.state, chapter)
        self.assertEqual(self.read_content(), section * 2)
        self.assertEqual(len(self.state.current_context.splitlines()), 2)

        loaded = load_book_state(self.book_dir)
        self.assertEqual(loaded.chapters[1].status, ACCEPTED)

    def test_accept_introduction_uses_first_sentence(self):
        chapter = self.state.chapters[0]
        set_chapter_status(chapter, GENERATED)
        chapter.text = "Bart wondered about money. Then he asked Lisa."

        accept_chapter(self.book_dir, self.state, chapter)
        self.assertEqual(self.state.current_context, 'In "Introduction": Bart wondered about money.')

    def test_accept_not_generated_chapter_is_refused(self):
        chapter = self.state.chapters[2]
        chapter.text = "Draft"
        with self.assertRaises(InvalidTransitionError):
            accept_chapter(self.book_dir, self.state, chapter)
        self.assertEqual(self.read_content(), "")
        self.assertEqual(chapter.status, NOT_GENERATED)

    def test_failed_append_leaves_chapter_unaccepted(self):
        chapter = self.state.chapters[1]
        set_chapter_status(chapter, GENERATED)
        chapter.text = "Bart opened a stand."
        content_path = os.path.join(self.book_dir, "content.md")
        os.remove(content_path)
        os.mkdir(content_path)

        with self.assertRaises(BookStateError):
            accept_chapter(self.book_dir, self.state, chapter)

        self.assertEqual(chapter.status, GENERATED)
        self.assertEqual(self.state.current_context, "")
        save_book_state(self.book_dir, self.state)
        self.assertEqual(load_book_state(self.book_dir).chapters[1].status, GENERATED)

    def test_failed_save_rolls_back_acceptance(self):
        chapter = self.state.chapters[1]
        set_chapter_status(chapter, GENERATED)
        chapter.text = "Bart opened a stand."

        with patch("econobook.modules.book_state.save_book_state", side_effect=BookStateError("disk full")):
            with self.assertRaises(BookStateError):
                accept_chapter(self.book_dir, self.state, chapter)

        self.assertEqual(chapter.status, GENERATED)
        self.assertEqual(self.state.current_context, "")
        self.assertEqual(self.read_content(), "")

    def test_unserializable_state_keeps_previous_file(self):
        state_path = os.path.join(self.book_dir, "book-state.json")
        with open(state_path, encoding="utf-8") as f:
            before = f.read()

        self.state.chat_config = {"chatModel": object()}
        with self.assertRaises(BookStateError):
            save_book_state(self.book_dir, self.state)

        with open(state_path, encoding="utf-8") as f:
            self.assertEqual(f.read(), before)

    def test_accept_image_copies_into_book(self):
        chapter = self.state.chapters[0]
        temp_path = os.path.join(self.books_dir, "tmp_attempt1.png")
        with open(temp_path, "wb") as f:
            f.write(b"png-bytes")
        set_image_status(chapter.image, GENERATED)
        chapter.image.temp_path = temp_path
        chapter.image.attempts = 1

        final_path = accept_image(self.book_dir, self.state, chapter)

        self.assertEqual(final_path, os.path.join(self.book_dir, "images", "chapter_introduction_image.png"))
        with open(final_path, "rb") as f:
            self.assertEqual(f.read(), b"png-bytes")
        self.assertEqual(chapter.image.status, ACCEPTED)
        self.assertEqual(load_book_state(self.book_dir).chapters[0].image.local_path, final_path)

    def test_accept_image_without_file_raises(self):
        chapter = self.state.chapters[0]
        set_image_status(chapter.image, GENERATED)
        with self.assertRaises(BookStateError):
            accept_image(self.book_dir, self.state, chapter)

    def test_list_and_delete_books(self):
        os.mkdir(os.path.join(self.books_dir, ".hidden"))
        with open(os.path.join(self.books_dir, "notes.txt"), "w") as f:
            f.write("x")

        self.assertEqual(list_books(self.books_dir), ["my-book"])
        delete_book_directory(self.books_dir, "my-book")
        self.assertEqual(list_books(self.books_dir), [])
        with self.assertRaises(BookStateError):
            delete_book_directory(self.books_dir, "my-book")


class TestQueries(unittest.TestCase):

    def test_next_chapter_and_progress(self):
        state = initialize_book_state("b")
        self.assertIs(next_chapter(state), state.chapters[0])
        self.assertEqual(book_progress(state)[:2], (0, len(state.chapters)))

        for chapter in state.chapters[:3]:
            chapter.status = ACCEPTED
        accepted, total, percent = book_progress(state)
        self.assertIs(next_chapter(state), state.chapters[3])
        self.assertEqual(accepted, 3)
        self.assertAlmostEqual(percent, 3 / total * 100)

        for chapter in state.chapters:
            chapter.status = ACCEPTED
        self.assertIsNone(next_chapter(state))
        self.assertEqual(book_progress(state)[2], 100.0)


class TestSafeBookName(unittest.TestCase):

    def test_safe_book_name(self):
        self.assertEqual(safe_book_name("  My First Book! "), "my-first-book")
        self.assertEqual(safe_book_name("Bart's   Money\tBook"), "barts-money-book")
        self.assertEqual(safe_book_name("¡¿!!"), "")


if __name__ == "__main__":
    unittest.main()
