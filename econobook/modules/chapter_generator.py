# filename: chapter_generator.py
"""Module to draft and personalize chapter text with OpenAI chat completions."""

import logging

from econobook.libs.constants import DEFAULT_CHAT_MODEL, DEFAULT_TEMPERATURE, MAX_CHAPTER_TOKENS
from econobook.libs.logger import log_error, log_request, log_response
from econobook.modules.prompt_builder import build_chapter_prompt, is_personalization_prompt

logger = logging.getLogger(__name__)

AUTHOR_PERSONA = (
    "You are a successful children's book author writing. Use a friendly and engaging tone, practical examples "
    "that children can relate to, and maintain consistency with the provided characters and situations "
    "throughout the story."
)
EDITOR_PERSONA = (
    "You are an expert editor specializing in children's literature. Your task is to naturally incorporate "
    "character and story details while preserving the educational content and narrative flow."
)

SAMPLING_PARAMETERS = ("top_p", "frequency_penalty", "presence_penalty")


def generate_chapter(client, topic, subtopics, story_variables, previous_context="",
                     model=DEFAULT_CHAT_MODEL, temperature=DEFAULT_TEMPERATURE, prompt=None, **sampling):
    """Generate chapter text with a single chat completion.

    Args:
        client: OpenAI client.
        topic (str): Chapter title.
        subtopics (list): Concepts the chapter covers.
        story_variables (dict): Book story variables.
        previous_context (str): A personalization prompt (sent as-is to the editor persona)
            or the accumulated story context used when building a fresh draft prompt.
        model (str): Chat model name.
        temperature (float): Sampling temperature.
        prompt (str or None): Draft prompt to send instead of building one, e.g. after the user edited it.
        **sampling: Optional top_p, frequency_penalty and presence_penalty.

    Returns:
        str: The stripped completion text.
    """
    if is_personalization_prompt(previous_context):
        full_prompt = previous_context
        system_prompt = EDITOR_PERSONA
    else:
        full_prompt = prompt or build_chapter_prompt(topic, subtopics, story_variables, previous_context)
        system_prompt = AUTHOR_PERSONA

    request_details = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": full_prompt},
        ],
        "max_tokens": MAX_CHAPTER_TOKENS,
        "temperature": temperature,
    }
    for name in SAMPLING_PARAMETERS:
        if sampling.get(name) is not None:
            request_details[name] = sampling[name]

    logger.info(f"Generating chapter text for '{topic}' with {model}")
    log_request("chat", request_details)
    try:
        response = client.chat.completions.create(**request_details)
    except Exception as e:
        logger.error(f"Chat completion failed for '{topic}': {e}")
        log_error("chat", e, request_details)
        raise

    content = response.choices[0].message.content
    log_response("chat", {
        "model": model,
        "temperature": temperature,
        "content": content,
        "usage": _usage_dict(response),
    })
    return (content or "").strip()


def _usage_dict(response):
    usage = getattr(response, "usage", None)
    if usage is None:
        return None
    if hasattr(usage, "model_dump"):
        return usage.model_dump()
    return {
        "prompt_tokens": getattr(usage, "prompt_tokens", None),
        "completion_tokens": getattr(usage, "completion_tokens", None),
        "total_tokens": getattr(usage, "total_tokens", None),
    }
