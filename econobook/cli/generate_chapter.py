"""Interactive chapter generation: prompt review, draft, personalization, review and the illustration flow."""

import logging
import os
from dataclasses import replace

from openai import OpenAIError
from PIL import Image

from econobook.cli import display
from econobook.cli.prompt_editor import edit_prompt
from econobook.cli.prompts import select
from econobook.libs.constants import DEFAULT_CHAT_MODEL, DEFAULT_TEMPERATURE, TMP_DIR
from econobook.libs.image_styles import (
    DEFAULT_STYLE,
    IMAGE_STYLE_PRESETS,
    get_illustration_prompt,
    style_names,
)
from econobook.libs.utils import epoch_ms, now_iso, safe_file_stem
from econobook.modules.book_state import (
    ACCEPTED,
    CONCLUSION_ID,
    GENERATED,
    INTRODUCTION_ID,
    WIP,
    accept_chapter,
    accept_image,
    save_book_state,
    set_chapter_status,
    set_image_status,
    transition,
)
from econobook.modules.chapter_generator import SAMPLING_PARAMETERS, generate_chapter
from econobook.modules.image_generator import generate_image
from econobook.modules.prompt_builder import (
    build_chapter_prompt,
    build_conclusion_prompt,
    build_introduction_prompt,
    personalize_chapter_content,
    personalize_conclusion_content,
    personalize_introduction_content,
)
from econobook.modules.scene_selector import select_scene
from econobook.modules.utils import BookStateError, ConfigurationError, ImageGenerationError

logger = logging.getLogger(__name__)


def _chat_settings(state):
    chat_config = state.chat_config or {}
    model = chat_config.get("chatModel") or DEFAULT_CHAT_MODEL
    temperature = chat_config.get("temperature", DEFAULT_TEMPERATURE)
    sampling = {name: chat_config.get(name) for name in SAMPLING_PARAMETERS}
    return model, temperature, sampling


def _minimal_variables(state):
    characters = (state.story_variables or {}).get("characters") or {}
    return {"characters": {
        "protagonistName": characters.get("protagonistName", ""),
        "protagonistAge": characters.get("protagonistAge", ""),
    }}


def build_initial_prompt(chapter, state):
    if chapter.id == INTRODUCTION_ID:
        return build_introduction_prompt(_minimal_variables(state))
    if chapter.id == CONCLUSION_ID:
        return build_conclusion_prompt(_minimal_variables(state), state.current_context)
    return build_chapter_prompt(chapter.topic, chapter.subtopics, state.story_variables, state.current_context)


def build_personalization_prompt(chapter, content, state):
    if chapter.id == INTRODUCTION_ID:
        return personalize_introduction_content(content, state.story_variables)
    if chapter.id == CONCLUSION_ID:
        return personalize_conclusion_content(content, state.story_variables)
    return personalize_chapter_content(content, state.story_variables, accepted_lessons_before(chapter, state))


def accepted_lessons_before(chapter, state):
    """Title and lesson summary of every accepted lesson chapter that comes before chapter."""
    lessons = []
    for earlier in state.chapters:
        if earlier.id == chapter.id:
            break
        if earlier.status == ACCEPTED and earlier.lesson_context:
            lessons.append({"title": earlier.topic, "summary": earlier.lesson_context["summary"].rstrip(".")})
    return lessons


def review_prompt(prompt):
    """Show the prompt and let the user use, edit or cancel it. Returns the prompt to send or None."""
    display.show_text(prompt, heading="Generated Prompt")
    action = select("Would you like to:", [
        ("Use this prompt", "use"),
        ("Modify the prompt", "modify"),
        ("Cancel generation", "cancel"),
    ])
    if action == "modify":
        return edit_prompt(prompt)
    return prompt if action == "use" else None


def review_content(content):
    display.show_text(content, heading="Generated Content")
    return select("What would you like to do with this content?", [
        ("Accept and proceed to image generation", "accept"),
        ("Regenerate with same prompt", "regenerate"),
        ("Modify prompt and regenerate", "modify"),
        ("Mark as work in progress and return", "wip"),
    ])


def generate_chapter_content(client, chapter, state, book_dir):
    """Run the text generation loop for one chapter. Returns True once the chapter is accepted."""
    model, temperature, sampling = _chat_settings(state)
    prompt = review_prompt(build_initial_prompt(chapter, state))
    if not prompt:
        return False

    while True:
        try:
            display.progress("Generating content...")
            initial_content = generate_chapter(
                client,
                "Introduction" if chapter.id == INTRODUCTION_ID else chapter.topic,
                chapter.subtopics,
                _minimal_variables(state),
                state.current_context,
                model=model,
                temperature=temperature,
                prompt=prompt,
                **sampling,
            )

            personalization_prompt = build_personalization_prompt(chapter, initial_content, state)
            display.progress("Personalizing content with story details...")
            personalized = generate_chapter(
                client,
                "Content Personalization",
                [],
                state.story_variables,
                personalization_prompt,
                model=model,
                temperature=temperature,
                **sampling,
            )
        except OpenAIError as e:
            logger.error(f"Generation failed for chapter {chapter.id}: {e}")
            display.error("Error generating chapter:", e)
            return False

        previous = (chapter.status, chapter.text, chapter.generation_config)
        chapter.status = transition(chapter.status, GENERATED)
        chapter.text = personalized
        chapter.generation_config = {
            "initialPrompt": prompt,
            "personalizationPrompt": personalization_prompt,
            "model": model,
            "temperature": temperature,
            "timestamp": now_iso(),
        }
        try:
            save_book_state(book_dir, state)
        except BookStateError:
            chapter.status, chapter.text, chapter.generation_config = previous
            raise

        action = review_content(personalized)
        if action == "accept":
            accept_chapter(book_dir, state, chapter)
            display.success(f"Chapter '{chapter.topic}' accepted and added to the book.")
            handle_image_generation(client, chapter, state, book_dir)
            return True

        set_chapter_status(chapter, WIP)
        save_book_state(book_dir, state)
        if action == "wip":
            display.info("Chapter marked as work in progress.")
            return False
        if action == "modify":
            prompt = edit_prompt(prompt)


def temp_image_path(state, chapter, attempt):
    file_name = f"{safe_file_stem(state.title)}_{chapter.id}_attempt{attempt}_{epoch_ms()}.png"
    return os.path.join(TMP_DIR, file_name)


def preview_image(path):
    try:
        with Image.open(path) as img:
            display.info(f"{img.width}x{img.height} {img.format} image, opening viewer...")
            img.show()
    except OSError as e:
        display.error(f"Could not open {path}", e)


def choose_scene_description(client, chapter, state):
    model, temperature, _ = _chat_settings(state)
    scene = None
    display.progress("Analyzing chapter to select a scene...")
    try:
        scene = select_scene(client, chapter.text, chapter.topic, model=model, temperature=temperature)
    except OpenAIError as e:
        display.warning(f"Scene selection failed, using the chapter text instead: {e}")

    if scene is not None:
        display.show_text(scene.scene, heading="Selected Scene")
        display.show_text(scene.summary, heading="Summary for Image Generation")
        action = select("Would you like to use this scene?", [
            ("Use this scene", "use"),
            ("Skip scene selection and use full context", "skip"),
        ])
        if action == "use":
            return scene.summary

    if chapter.text:
        return f"{chapter.topic}: {chapter.text[:200]}..."
    return f"{chapter.topic}: {(chapter.lesson_context or {}).get('summary', '')}"


def handle_image_generation(client, chapter, state, book_dir):
    """Illustration flow for an accepted chapter. Returns True if an image was accepted."""
    if chapter.image.status == ACCEPTED:
        display.info(f"Chapter already has an accepted image: {chapter.image.local_path}")
        return True

    image_config = state.image_config or {}
    style = select(
        "Choose a visual style:",
        style_names(),
        default=image_config.get("imageStyle") or DEFAULT_STYLE,
    )
    preset = select(
        "Choose a scene composition:",
        [(f"{p['name']}: {p['description']}", key) for key, p in IMAGE_STYLE_PRESETS.items()],
    )

    description = choose_scene_description(client, chapter, state)
    visual = ((state.story_variables or {}).get("characters") or {}).get("visualDescription")
    prompt = get_illustration_prompt(f"{visual} {description}" if visual else description, style, preset)

    display.show_text(prompt, heading="Generated Image Prompt")
    action = select("Would you like to:", [
        ("Use this prompt", "use"),
        ("Modify the prompt", "modify"),
        ("Skip image generation", "skip"),
    ])
    if action == "skip":
        return False
    if action == "modify":
        prompt = edit_prompt(prompt)

    while True:
        os.makedirs(TMP_DIR, exist_ok=True)
        attempt = chapter.image.attempts + 1
        display.progress("Generating image...")
        try:
            output_path = generate_image(image_config, prompt, temp_image_path(state, chapter, attempt),
                                         openai_client=client)
        except (ImageGenerationError, ConfigurationError) as e:
            logger.error(f"Image generation failed for chapter {chapter.id}: {e}")
            display.error("Error in image generation:", e)
            return False

        image = chapter.image
        previous_image = replace(image)
        set_image_status(image, GENERATED)
        image.prompt = prompt
        image.temp_path = output_path
        image.attempts = attempt
        image.style = style
        image.preset = preset
        image.timestamp = now_iso()
        try:
            save_book_state(book_dir, state)
        except BookStateError:
            chapter.image = previous_image
            raise

        display.success("Image generated and saved!")
        display.info(f"{display.label('Temp Path:')} {output_path}", markup=True)

        image_action = "preview"
        while image_action == "preview":
            image_action = select("What would you like to do with this image?", [
                ("Accept image", "accept"),
                ("Preview image", "preview"),
                ("Regenerate with same prompt", "regenerate"),
                ("Modify prompt and regenerate", "modify"),
                ("Skip image for now", "skip"),
            ])
            if image_action == "preview":
                preview_image(output_path)

        if image_action == "accept":
            try:
                final_path = accept_image(book_dir, state, chapter)
            except BookStateError as e:
                display.error("Could not accept the image:", e)
                return False
            display.success(f"Image saved to {final_path}")
            return True
        if image_action == "skip":
            set_image_status(image, WIP)
            save_book_state(book_dir, state)
            return False
        if image_action == "modify":
            prompt = edit_prompt(prompt)
