"""Sectioned prompt editor: the prompt is split on blank lines and each section is edited in $EDITOR."""

import logging
import os
import re
import shlex
import subprocess
import tempfile
from dataclasses import dataclass
from typing import List

from econobook.cli import display
from econobook.cli.prompts import pause, select
from econobook.libs.constants import DEFAULT_EDITOR

logger = logging.getLogger(__name__)


@dataclass
class Section:
    id: int
    title: str
    content: str


def split_into_sections(prompt) -> List[Section]:
    """Split a prompt on blank lines; each section is titled by its first line without ':', '#' or '-'."""
    parts = [part.strip() for part in re.split(r"\n\s*\n", prompt or "") if part.strip()]
    sections = []
    for index, part in enumerate(parts, 1):
        first_line = part.splitlines()[0]
        heading = re.sub(r"[:#-]", "", first_line).strip()
        sections.append(Section(id=index, title=heading or f"Section {index}", content=part))
    return sections


def combine_sections(sections: List[Section]) -> str:
    return "\n\n".join(section.content for section in sections)


def get_editor_command():
    return os.getenv("EDITOR") or os.getenv("VISUAL") or DEFAULT_EDITOR


def edit_in_editor(text, suffix=".md"):
    """Open text in the user's editor and return the saved result."""
    with tempfile.NamedTemporaryFile("w", suffix=suffix, delete=False, encoding="utf-8") as f:
        f.write(text)
        path = f.name
    try:
        command = shlex.split(get_editor_command()) + [path]
        logger.info(f"Opening editor: {command}")
        subprocess.run(command, check=True)
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    finally:
        os.remove(path)


def edit_prompt(original_prompt):
    """Interactive section editor. Returns the edited prompt, or the original one if editing is cancelled."""
    sections = split_into_sections(original_prompt)

    while True:
        display.title("Current Prompt Structure:")
        for section in sections:
            display.console.print(f"\n{display.label(section.title)}:")
            display.console.print(section.content, markup=False, highlight=False)

        action = select("What would you like to do?", [
            ("Edit a section", "edit"),
            ("Preview complete prompt", "preview"),
            ("Save and finish", "save"),
            ("Cancel editing", "cancel"),
        ])

        if action == "cancel":
            return original_prompt
        if action == "save":
            return combine_sections(sections)
        if action == "preview":
            display.show_text(combine_sections(sections), heading="Complete Prompt Preview")
            pause()
            continue

        if not sections:
            display.warning("The prompt is empty, nothing to edit.")
            continue

        section_id = select("Which section would you like to edit?",
                            [(display.label(s.title), s.id) for s in sections])
        section = next(s for s in sections if s.id == section_id)

        try:
            edited = edit_in_editor(section.content).strip()
        except (OSError, subprocess.CalledProcessError) as e:
            display.error("Could not run the editor.", e)
            continue

        if not edited:
            display.warning("Content cannot be empty; section left unchanged.")
            continue
        section.content = edited
