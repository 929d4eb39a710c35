# filename: scene_selector.py
"""Module to pick the most illustratable moment of a chapter."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from econobook.libs.constants import DEFAULT_CHAT_MODEL, DEFAULT_TEMPERATURE, MAX_SCENE_TOKENS
from econobook.libs.logger import log_error, log_request, log_response

logger = logging.getLogger(__name__)

SERVICE = "scene-selection"

SYSTEM_PROMPT = (
    "You are a visual storytelling assistant. Your job is to read the input chapter and identify the most "
    "visually compelling moment that illustrates its main idea. You must focus on choosing a moment with strong "
    "visual potential and emotional impact, not just importance in the narrative."
)

_TAG_PATTERN = re.compile(r"^(SCENE|SUMMARY)\s*:\s*(.*)$", re.IGNORECASE)


@dataclass
class Scene:
    """Scene chosen for a chapter illustration"""
    scene: str
    summary: str


def build_scene_prompt(chapter_text, topic):
    return (
        f'Please analyze this chapter about "{topic}" and:\n'
        "1. Select the most visually compelling scene that reflects the main educational message.\n"
        "2. Describe that scene vividly in 2-3 sentences, focusing on setting, characters, and actions, "
        "using sensory and visual language.\n"
        "3. Write a final one-sentence description optimized for image generation (avoiding abstract concepts, "
        "using concrete visual terms, no text in image).\n"
        "\n"
        "Answer with exactly two lines:\n"
        "SCENE: <the vivid 2-3 sentence description>\n"
        "SUMMARY: <the one-sentence image description>\n"
        "\n"
        f"Chapter text:\n{chapter_text}"
    )


def _read_tag(line):
    match = _TAG_PATTERN.match(line.replace("*", "").strip())
    return (match.group(1).upper(), match.group(2).strip()) if match else None


def parse_scene_response(content) -> Optional[Scene]:
    """Read SCENE:/SUMMARY: tagged lines. A tag alone on its line takes the next line as its value.
    A missing tag falls back to the first (scene) or last (summary) untagged line,
    or to the other tag when every line is tagged."""
    lines = [line.strip() for line in (content or "").splitlines() if line.strip()]
    if not lines:
        return None

    tagged = {}
    untagged = []
    for index, line in enumerate(lines):
        tag = _read_tag(line)
        if tag is None:
            untagged.append(line)
            continue
        name, value = tag
        if not value and index + 1 < len(lines) and _read_tag(lines[index + 1]) is None:
            value = lines[index + 1]
        if value and name not in tagged:
            tagged[name] = value

    scene = tagged.get("SCENE") or (untagged[0] if untagged else tagged.get("SUMMARY"))
    summary = tagged.get("SUMMARY") or (untagged[-1] if untagged else tagged.get("SCENE"))
    if not scene:
        return None
    return Scene(scene=scene, summary=summary)


def select_scene(client, chapter_text, topic, model=DEFAULT_CHAT_MODEL, temperature=DEFAULT_TEMPERATURE):
    """Ask the chat model for the chapter's most visual moment.

    Returns:
        Scene or None: None when there is no chapter text (no API call is made) or the reply is empty.
    """
    if not chapter_text:
        return None

    request_details = {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_scene_prompt(chapter_text, topic)},
        ],
        "temperature": temperature,
        "max_tokens": MAX_SCENE_TOKENS,
    }

    log_request(SERVICE, request_details)
    try:
        response = client.chat.completions.create(**request_details)
    except Exception as e:
        logger.error(f"Scene selection failed for '{topic}': {e}")
        log_error(SERVICE, e, request_details)
        raise

    content = response.choices[0].message.content
    log_response(SERVICE, {
        "model": model,
        "temperature": temperature,
        "content": content,
        "usage": getattr(response, "usage", None),
    })

    scene = parse_scene_response(content)
    if scene is None:
        logger.warning(f"Scene selection returned no text for '{topic}'")
    return scene
