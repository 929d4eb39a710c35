"""Interactive configuration of a book: chat model, image provider and story variables."""

import copy
import logging

from econobook.cli import display
from econobook.cli.prompts import ask_list, ask_number, ask_text, confirm, select
from econobook.libs.image_styles import DEFAULT_IMAGE_STYLE_PROMPT, DEFAULT_STYLE
from econobook.libs.model_config import (
    CHAT_PARAMETER_RANGES,
    IMAGE_PROVIDERS,
    IMAGE_SIZES,
    MYSTIC_ENGINES,
    MYSTIC_MODELS,
    MYSTIC_RESOLUTIONS,
    OPENAI_CHAT_MODELS,
    OPENAI_IMAGE_MODELS,
    find_chat_model,
    find_image_model,
)
from econobook.libs.constants import MYSTIC_DEFAULT_CREATIVE_DETAILING, MYSTIC_DEFAULT_RESOLUTION
from econobook.libs.story_variables import FIELD_LABELS, SECTION_TITLES, empty_story_variables
from econobook.modules.book_state import load_book_state, save_book_state
from econobook.modules.utils import BookStateError

logger = logging.getLogger(__name__)


def configure_openai(current=None):
    """Ask for the chat model and, optionally, custom sampling parameters. Returns the chatConfig dict."""
    current = current or {}
    chat_model = select(
        "Select the chat model to use for generating text:",
        [(m["name"], m["value"]) for m in OPENAI_CHAT_MODELS],
        default=current.get("chatModel"),
    )
    selected = find_chat_model(chat_model)
    defaults = selected["defaults"]

    display.title(f"Default generation parameters for {selected['name']}:")
    for name, (low, high, hint) in CHAT_PARAMETER_RANGES.items():
        display.console.print(
            f"  {display.SYMBOLS['bullet']} " + display.with_explanation(f"{name}: {defaults[name]}",
                                                                       f"{low}-{high}, {hint}")
        )
    display.blank()

    params = dict(defaults)
    if confirm("Would you like to customize these generation parameters?", default=False):
        for name, (low, high, hint) in CHAT_PARAMETER_RANGES.items():
            params[name] = ask_number(
                f"Set {name.replace('_', ' ')} ({low} to {high}, {hint})",
                default=defaults[name],
                minimum=low,
                maximum=high,
            )

    return {"chatModel": chat_model, **params}


def configure_image_generator(current=None):
    """Ask for the image provider, its options and the default illustration style. Returns the imageConfig dict."""
    current = current or {}
    provider = select(
        "Select the image generation provider:",
        [(p["name"], p["value"]) for p in IMAGE_PROVIDERS],
        default=current.get("provider"),
    )
    config = {"provider": provider}

    if provider == "openai":
        model = select("Select the DALL-E model to use:", [(m["name"], m["value"]) for m in OPENAI_IMAGE_MODELS])
        size = select(
            "Select the image size:",
            [(s["name"], s["value"]) for s in IMAGE_SIZES[model]],
            default=find_image_model(model)["default_size"],
        )
        config["openai"] = {"model": model, "size": size}
    else:
        model = select("Select the Mystic model to use:",
                       [(f"{m['name']} - {m['description']}", m["value"]) for m in MYSTIC_MODELS])
        engine = select("Select the Mystic engine to use:",
                        [(f"{e['name']} - {e['description']}", e["value"]) for e in MYSTIC_ENGINES])
        resolution = select("Select the image resolution:",
                            [(r["name"], r["value"]) for r in MYSTIC_RESOLUTIONS],
                            default=MYSTIC_DEFAULT_RESOLUTION)
        creative_detailing = ask_number("Set the creative detailing level (0-100)",
                                        default=MYSTIC_DEFAULT_CREATIVE_DETAILING,
                                        minimum=0, maximum=100, integer=True)
        config["mystic"] = {
            "model": model,
            "engine": engine,
            "resolution": resolution,
            "creative_detailing": creative_detailing,
        }

    config["imageStyle"] = select(
        "Select the default illustration style:",
        [(f"{s['name']} - {s['prompt'][:60]}...", s["name"]) for s in DEFAULT_IMAGE_STYLE_PROMPT],
        default=current.get("imageStyle") or DEFAULT_STYLE,
    )
    return config


def _validate_age(value):
    if not value:
        return None
    if not value.isdigit() or not 0 < int(value) < 18:
        return "Age must be between 1 and 17"
    return None


def _ask_siblings(current):
    default = ", ".join(f"{pair[0]}:{pair[1]}" if len(pair) > 1 else pair[0] for pair in current or [])
    raw = ask_text(f"{FIELD_LABELS['siblingsNamesAges']} (comma-separated)", default=default)
    siblings = []
    for item in raw.split(","):
        name, _, age = item.partition(":")
        if name.strip():
            siblings.append([name.strip(), age.strip()])
    return siblings


def ask_story_field(key, current):
    label = FIELD_LABELS.get(key, key)
    if key == "siblingsNamesAges":
        return _ask_siblings(current)
    if isinstance(current, list):
        return ask_list(label, default=current)
    if key == "protagonistGender":
        return select(label, ["male", "female", "other"], default=current or "male")
    if key == "protagonistAge":
        return ask_text(label, default=current or "", validate=_validate_age)
    if key == "visualDescription":
        display.info("Describe hair, eyes, skin tone, build, usual clothing and any distinguishing features.")
    return ask_text(label, default=current or "")


def _is_blank(value):
    return value == "" or value == [] or value is None


def configure_story_variables(current=None):
    """Walk the story-variable sections, offering to fill each one. Existing values are the defaults."""
    story_variables = empty_story_variables()
    for section, fields in (current or {}).items():
        if isinstance(fields, dict):
            story_variables.setdefault(section, {}).update(copy.deepcopy(fields))

    for section, fields in story_variables.items():
        empty = [key for key, value in fields.items() if _is_blank(value)]
        section_title = SECTION_TITLES.get(section, section)

        if empty:
            display.title(f"The {section_title} section has the following empty fields:")
            for key in empty:
                display.list_item(FIELD_LABELS.get(key, key))
            question = f"Would you like to fill these {len(empty)} fields?"
        else:
            display.title(f"The {section_title} section is complete.")
            question = "Would you like to change it?"

        if not confirm(question, default=False):
            continue
        for key in list(fields):
            if empty and key not in empty:
                continue
            fields[key] = ask_story_field(key, fields[key])

    return story_variables


def configure_new_book(book_dir):
    """Run the full configuration of a freshly created book. Returns False if it could not complete."""
    display.header("Let's configure your new book!")
    try:
        state = load_book_state(book_dir)

        display.title("First, let's set up the chat model configuration:")
        state.chat_config = configure_openai()

        display.title("Now, let's set up the image generation configuration:")
        state.image_config = configure_image_generator()

        display.title("Finally, let's set up the story variables:")
        state.story_variables = configure_story_variables()

        save_book_state(book_dir, state)
    except (BookStateError, KeyboardInterrupt, EOFError) as e:
        logger.error(f"Book configuration failed for {book_dir}: {e!r}")
        display.error("Error during book configuration:", e)
        return False

    display.success("Book configuration completed successfully!")
    return True
