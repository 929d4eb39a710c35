"""Book and chapter menus for an opened book."""

import logging
from datetime import datetime

from openai import OpenAIError

from econobook.cli import display
from econobook.cli.configure_book import configure_image_generator, configure_openai, configure_story_variables
from econobook.cli.generate_chapter import generate_chapter_content, handle_image_generation
from econobook.cli.prompts import pause, select
from econobook.modules.book_state import (
    ACCEPTED,
    NOT_GENERATED,
    WIP,
    accept_chapter,
    book_progress,
    load_book_state,
    next_chapter,
    save_book_state,
    set_chapter_status,
)
from econobook.modules.utils import (
    BookStateError,
    ConfigurationError,
    ImageGenerationError,
    InvalidTransitionError,
    get_openai_client,
)

logger = logging.getLogger(__name__)

BOOK_MENU_CHOICES = [
    ("Review/Generate Next Chapter", "next_chapter"),
    ("Select Specific Chapter to Review", "select_chapter"),
    ("View Book Status", "status"),
    ("Modify Story Variables", "modify_variables"),
    ("Update OpenAI Configuration", "update_config"),
    ("Update Image Generation Configuration", "update_image_config"),
    ("Return to Main Menu", "exit"),
]

NO_CONTENT = "No content yet"


def chapter_menu_choices(chapter):
    """Chapter actions with the ones that make no sense for the chapter's status disabled."""
    no_content = NO_CONTENT if chapter.status == NOT_GENERATED else False
    accepted = "Already accepted" if chapter.status == ACCEPTED else False
    image_blocked = (
        "Accept the chapter first" if chapter.status != ACCEPTED
        else "Image already accepted" if chapter.image.status == ACCEPTED
        else False
    )
    return [
        {"name": "Generate/Regenerate Content", "value": "generate", "disabled": accepted},
        {"name": "Review Current Content", "value": "review", "disabled": no_content},
        {"name": "Mark as Work in Progress", "value": "mark_wip", "disabled": no_content or accepted},
        {"name": "Mark as Accepted", "value": "mark_accepted", "disabled": no_content},
        {"name": "Generate Illustration", "value": "generate_image", "disabled": image_blocked},
        {"name": "Back to Book Menu", "value": "back"},
    ]


def format_created(created_at):
    try:
        return datetime.fromisoformat(created_at).strftime("%Y-%m-%d %H:%M:%S")
    except (TypeError, ValueError):
        return created_at or "unknown"


def display_book_status(state):
    display.header("Book Status")
    display.info(f"{display.label('Title:')} {display.escape(state.title)}", markup=True)
    display.info(f"{display.label('Created:')} {format_created(state.created_at)}", markup=True)
    display.title("\nChapters:")

    for chapter in state.chapters:
        display.info(display.format_chapter(chapter.topic, chapter.status), markup=True)
        display.info(f"  Image: {display.status_tag(chapter.image.status)}", markup=True)

    accepted, total, percent = book_progress(state)
    display.title(f"\nProgress: {percent:.1f}% ({accepted}/{total} chapters completed)")
    pause()


def select_chapter(state):
    chapter_id = select(
        "Select a chapter to review:",
        [(display.format_chapter(c.topic, c.status), c.id) for c in state.chapters],
    )
    return state.find_chapter(chapter_id)


class BookSession:
    """An opened book: its directory, loaded state and a lazily created OpenAI client."""

    def __init__(self, book_dir, client=None):
        self.book_dir = book_dir
        self.state = load_book_state(book_dir)
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    def save(self):
        save_book_state(self.book_dir, self.state)

    def handle_chapter(self, chapter):
        while True:
            display.header(f"Chapter: {chapter.topic}")
            if chapter.lesson_context:
                display.title("Context:")
                display.info(f"{display.label('Example:')} {display.escape(chapter.lesson_context['example'])}",
                             markup=True)
                display.info(f"{display.label('Summary:')} {display.escape(chapter.lesson_context['summary'])}",
                             markup=True)

            action = select("What would you like to do with this chapter?", chapter_menu_choices(chapter))
            if action == "back":
                return

            try:
                if self.run_chapter_action(chapter, action):
                    return
            except (ConfigurationError, BookStateError, InvalidTransitionError,
                    ImageGenerationError, OpenAIError) as e:
                logger.error(f"Chapter action {action} failed for {chapter.id}: {e}")
                display.error(f"Could not {action.replace('_', ' ')}:", e)

    def run_chapter_action(self, chapter, action):
        """Run one chapter menu action. Returns True when the chapter menu should close."""
        if action == "generate":
            generate_chapter_content(self.client, chapter, self.state, self.book_dir)
        elif action == "review":
            display.show_text(chapter.text, heading="Current Content")
            if chapter.image.local_path or chapter.image.temp_path:
                display.info(f"{display.label('Image:')} "
                             f"{display.escape(chapter.image.local_path or chapter.image.temp_path)} "
                             f"({display.status_tag(chapter.image.status)})", markup=True)
        elif action == "mark_wip":
            set_chapter_status(chapter, WIP)
            self.save()
            display.success("Chapter marked as work in progress.")
        elif action == "mark_accepted":
            accept_chapter(self.book_dir, self.state, chapter)
            display.success("Chapter marked as accepted.")
            return True
        elif action == "generate_image":
            handle_image_generation(self.client, chapter, self.state, self.book_dir)
        return False

    def run(self):
        while True:
            action = select("Book Management Menu:", BOOK_MENU_CHOICES)
            if action == "exit":
                return
            try:
                self.run_book_action(action)
            except (ConfigurationError, BookStateError, InvalidTransitionError,
                    ImageGenerationError, OpenAIError) as e:
                logger.error(f"Book action {action} failed for {self.book_dir}: {e}")
                display.error("Error managing book:", e)

    def run_book_action(self, action):
        if action == "next_chapter":
            chapter = next_chapter(self.state)
            if chapter:
                self.handle_chapter(chapter)
            else:
                display.success("All chapters are completed!")
        elif action == "select_chapter":
            self.handle_chapter(select_chapter(self.state))
        elif action == "status":
            display_book_status(self.state)
        elif action == "modify_variables":
            display.title("Updating story variables:")
            self.state.story_variables = configure_story_variables(self.state.story_variables)
            self.save()
            display.success("Story variables updated successfully!")
        elif action == "update_config":
            display.title("Updating OpenAI configuration:")
            self.state.chat_config = configure_openai(self.state.chat_config)
            self.save()
            display.success("OpenAI configuration updated successfully!")
        elif action == "update_image_config":
            display.title("Updating image generation configuration:")
            self.state.image_config = configure_image_generator(self.state.image_config)
            self.save()
            display.success("Image generation configuration updated successfully!")


def manage_book(book_dir, client=None):
    try:
        session = BookSession(book_dir, client=client)
    except BookStateError as e:
        display.error(f"Could not open book at {book_dir}:", e)
        return
    session.run()
