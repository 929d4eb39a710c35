"""
Book State Store

Persists one book as a directory holding book-state.json, an append-only
content.md and an images/ folder, and enforces the status workflow shared by
chapters and their images:

    not_generated -> generated -> wip -> accepted

Single writer: the interactive tool is the only process touching a book.
"""

import json
import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from econobook.libs.chapters import BOOK_CONTENT, ordered_categories
from econobook.libs.constants import BOOK_STATE_FILE, CONTENT_FILE, IMAGES_DIR
from econobook.libs.story_variables import empty_story_variables
from econobook.libs.utils import now_iso
from econobook.modules.utils import BookStateError, InvalidTransitionError

logger = logging.getLogger(__name__)

NOT_GENERATED = "not_generated"
GENERATED = "generated"
WIP = "wip"
ACCEPTED = "accepted"

STATUSES = (NOT_GENERATED, GENERATED, WIP, ACCEPTED)

ALLOWED_TRANSITIONS = {
    NOT_GENERATED: {GENERATED},
    GENERATED: {GENERATED, WIP, ACCEPTED},
    WIP: {GENERATED, WIP, ACCEPTED},
    ACCEPTED: {ACCEPTED},
}

INTRODUCTION_ID = "introduction"
CONCLUSION_ID = "conclusion"


@dataclass
class ChapterImage:
    """Illustration attached to a chapter, with its own status track"""
    status: str = NOT_GENERATED
    prompt: Optional[str] = None
    temp_path: Optional[str] = None
    attempts: int = 0
    style: Optional[str] = None
    preset: Optional[str] = None
    timestamp: Optional[str] = None
    local_path: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {"status": self.status, "prompt": self.prompt, "attempts": self.attempts}
        optional = {
            "tempPath": self.temp_path,
            "style": self.style,
            "preset": self.preset,
            "timestamp": self.timestamp,
            "localPath": self.local_path,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "ChapterImage":
        data = data or {}
        return cls(
            status=data.get("status", NOT_GENERATED),
            prompt=data.get("prompt"),
            temp_path=data.get("tempPath"),
            attempts=data.get("attempts") or 0,
            style=data.get("style"),
            preset=data.get("preset"),
            timestamp=data.get("timestamp"),
            local_path=data.get("localPath"),
        )


@dataclass
class Chapter:
    """One unit of the book: the introduction, a lesson topic or the conclusion"""
    id: str
    topic: str
    status: str = NOT_GENERATED
    text: Optional[str] = None
    lesson_context: Optional[Dict[str, str]] = None
    image: ChapterImage = field(default_factory=ChapterImage)
    generation_config: Optional[Dict] = None

    @property
    def subtopics(self) -> List[str]:
        return [self.lesson_context["summary"]] if self.lesson_context else []

    def to_dict(self) -> Dict:
        data = {
            "id": self.id,
            "topic": self.topic,
            "status": self.status,
            "text": self.text,
        }
        if self.lesson_context is not None:
            data["lessonContext"] = dict(self.lesson_context)
        data["image"] = self.image.to_dict()
        if self.generation_config is not None:
            data["generationConfig"] = self.generation_config
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "Chapter":
        return cls(
            id=data["id"],
            topic=data["topic"],
            status=data.get("status", NOT_GENERATED),
            text=data.get("text"),
            lesson_context=data.get("lessonContext"),
            image=ChapterImage.from_dict(data.get("image")),
            generation_config=data.get("generationConfig"),
        )


@dataclass
class BookState:
    """Everything persisted for one book"""
    title: str
    created_at: str
    chapters: List[Chapter]
    chat_config: Optional[Dict] = None
    image_config: Optional[Dict] = None
    story_variables: Dict = field(default_factory=empty_story_variables)
    current_context: str = ""

    def find_chapter(self, chapter_id: str) -> Optional[Chapter]:
        return next((c for c in self.chapters if c.id == chapter_id), None)

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "createdAt": self.created_at,
            "chatConfig": self.chat_config,
            "imageConfig": self.image_config,
            "storyVariables": self.story_variables,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
            "currentContext": self.current_context,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "BookState":
        return cls(
            title=data["title"],
            created_at=data.get("createdAt", ""),
            chapters=[Chapter.from_dict(c) for c in data.get("chapters", [])],
            chat_config=data.get("chatConfig"),
            image_config=data.get("imageConfig"),
            story_variables=data.get("storyVariables") or empty_story_variables(),
            current_context=data.get("currentContext") or "",
        )


# === Status workflow ===

def transition(current, target):
    """Validate a status move and return the new status.

    Raises:
        InvalidTransitionError: If either status is unknown or the move is not allowed.
    """
    if current not in ALLOWED_TRANSITIONS or target not in STATUSES:
        raise InvalidTransitionError(f"Unknown status in transition {current!r} -> {target!r}")
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(f"Cannot move from {current} to {target}")
    return target


def set_chapter_status(chapter: Chapter, status: str) -> Chapter:
    chapter.status = transition(chapter.status, status)
    return chapter


def set_image_status(image: ChapterImage, status: str) -> ChapterImage:
    image.status = transition(image.status, status)
    return image


# === Construction and persistence ===

def initialize_chapters(book_content=BOOK_CONTENT) -> List[Chapter]:
    """Introduction, one chapter per lesson topic in category order, then the conclusion."""
    chapters = [Chapter(id=INTRODUCTION_ID, topic="Introduction")]

    for category in ordered_categories(book_content):
        for topic in category["topics"]:
            chapters.append(Chapter(
                id=f"{category['id']}_{topic['key']}",
                topic=topic["title"],
                lesson_context={"example": topic["example"], "summary": topic["summary"]},
            ))

    chapters.append(Chapter(id=CONCLUSION_ID, topic="Conclusion"))
    return chapters


def initialize_book_state(title, book_content=BOOK_CONTENT) -> BookState:
    return BookState(
        title=title,
        created_at=now_iso(),
        chapters=initialize_chapters(book_content),
    )


def load_book_state(book_dir) -> BookState:
    state_path = os.path.join(book_dir, BOOK_STATE_FILE)
    try:
        with open(state_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return BookState.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise BookStateError(f"Failed to load book state: {e}") from e


def save_book_state(book_dir, state: BookState) -> None:
    state_path = os.path.join(book_dir, BOOK_STATE_FILE)
    try:
        payload = json.dumps(state.to_dict(), ensure_ascii=False, indent=2)
        with open(state_path, "w", encoding="utf-8") as f:
            f.write(payload)
    except (OSError, TypeError, ValueError) as e:
        raise BookStateError(f"Failed to save book state: {e}") from e
    logger.debug(f"Saved book state to {state_path}")


# === Acceptance ===

def _continuity_line(chapter: Chapter) -> str:
    if chapter.lesson_context and chapter.lesson_context.get("summary"):
        gist = chapter.lesson_context["summary"]
    else:
        text = (chapter.text or "").strip()
        gist = text.split(". ")[0].strip() if text else ""
    gist = gist.rstrip(".")
    return f'In "{chapter.topic}": {gist}.' if gist else f'In "{chapter.topic}".'


def accept_chapter(book_dir, state: BookState, chapter: Chapter) -> Chapter:
    """Accept a chapter, append its text to content.md and extend the story context.

    Not idempotent: accepting an already accepted chapter appends its section again.
    On failure the chapter, the story context and content.md are left as they were.
    """
    if not chapter.text:
        raise InvalidTransitionError(f"Chapter '{chapter.id}' has no text to accept")
    transition(chapter.status, ACCEPTED)

    content_path = os.path.join(book_dir, CONTENT_FILE)
    try:
        content_size = os.path.getsize(content_path) if os.path.exists(content_path) else 0
        with open(content_path, "a", encoding="utf-8") as f:
            f.write(f"\n\n## {chapter.topic}\n\n{chapter.text}\n")
    except OSError as e:
        raise BookStateError(f"Failed to update {CONTENT_FILE}: {e}") from e

    previous_status, previous_context = chapter.status, state.current_context
    chapter.status = ACCEPTED
    state.current_context = f"{state.current_context}\n{_continuity_line(chapter)}".strip()
    try:
        save_book_state(book_dir, state)
    except BookStateError:
        chapter.status, state.current_context = previous_status, previous_context
        try:
            with open(content_path, "r+", encoding="utf-8") as f:
                f.truncate(content_size)
        except OSError as e:
            logger.error(f"Could not roll back {content_path} after a failed save: {e}")
        raise

    logger.info(f"Accepted chapter {chapter.id}")
    return chapter


def chapter_image_path(book_dir, chapter: Chapter) -> str:
    return os.path.join(book_dir, IMAGES_DIR, f"chapter_{chapter.id}_image.png")


def accept_image(book_dir, state: BookState, chapter: Chapter) -> str:
    """Copy the chapter's temporary image into the book and mark it accepted."""
    image = chapter.image
    if not image.temp_path or not os.path.exists(image.temp_path):
        raise BookStateError(f"No generated image to accept for chapter '{chapter.id}'")
    transition(image.status, ACCEPTED)

    final_path = chapter_image_path(book_dir, chapter)
    try:
        os.makedirs(os.path.dirname(final_path), exist_ok=True)
        shutil.copyfile(image.temp_path, final_path)
    except OSError as e:
        raise BookStateError(f"Failed to copy image: {e}") from e

    previous_status, previous_path = image.status, image.local_path
    image.status = ACCEPTED
    image.local_path = final_path
    try:
        save_book_state(book_dir, state)
    except BookStateError:
        image.status, image.local_path = previous_status, previous_path
        raise
    logger.info(f"Accepted image for chapter {chapter.id}: {final_path}")
    return final_path


# === Queries ===

def next_chapter(state: BookState) -> Optional[Chapter]:
    return next((c for c in state.chapters if c.status != ACCEPTED), None)


def book_progress(state: BookState):
    """Return (accepted, total, percent) for the book's chapters."""
    total = len(state.chapters)
    accepted = sum(1 for c in state.chapters if c.status == ACCEPTED)
    percent = (accepted / total * 100) if total else 0.0
    return accepted, total, percent


# === Book directories ===

def list_books(books_dir) -> List[str]:
    if not os.path.isdir(books_dir):
        return []
    return sorted(
        entry for entry in os.listdir(books_dir)
        if not entry.startswith(".") and os.path.isdir(os.path.join(books_dir, entry))
    )


def create_book_directory(books_dir, name, state: BookState) -> str:
    """Create books_dir/name with images/, the state file and an empty content.md."""
    book_dir = os.path.join(books_dir, name)
    try:
        os.makedirs(books_dir, exist_ok=True)
        os.mkdir(book_dir)
        os.mkdir(os.path.join(book_dir, IMAGES_DIR))
        with open(os.path.join(book_dir, CONTENT_FILE), "w", encoding="utf-8"):
            pass
    except FileExistsError as e:
        raise BookStateError(f"A book named '{name}' already exists") from e
    except OSError as e:
        raise BookStateError(f"Failed to create book '{name}': {e}") from e

    save_book_state(book_dir, state)
    logger.info(f"Created book directory {book_dir}")
    return book_dir


def delete_book_directory(books_dir, name) -> None:
    book_dir = os.path.join(books_dir, name)
    try:
        shutil.rmtree(book_dir)
    except OSError as e:
        raise BookStateError(f"Failed to delete book '{name}': {e}") from e
    logger.info(f"Deleted book directory {book_dir}")
