"""Exceptions shared across econobook and the OpenAI client factory."""

import os

from dotenv import load_dotenv
from openai import OpenAI

load_dotenv()


class ConfigurationError(ValueError):
    """A required API key, image provider or book setting is missing or unknown."""


class ImageGenerationError(RuntimeError):
    """An image provider call, task poll or download failed."""


class BookStateError(RuntimeError):
    """The book directory, state file or content file could not be read or written."""


class InvalidTransitionError(ValueError):
    """A chapter or image status move that the workflow does not allow."""


def get_openai_client():
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY not set.")
    return OpenAI(api_key=api_key)
