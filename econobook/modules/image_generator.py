# filename: image_generator.py
"""Module to generate chapter illustrations with OpenAI DALL·E or Freepik Mystic and save them locally."""

import json
import logging
import os
import time

import requests
from dotenv import load_dotenv

from econobook.libs.constants import (
    HTTP_TIMEOUT,
    MYSTIC_API_URL,
    MYSTIC_ASPECT_RATIO,
    MYSTIC_DEFAULT_CREATIVE_DETAILING,
    MYSTIC_DEFAULT_RESOLUTION,
    MYSTIC_MAX_ATTEMPTS,
    MYSTIC_POLL_INTERVAL,
)
from econobook.libs.logger import log_error, log_request, log_response
from econobook.modules.utils import ConfigurationError, ImageGenerationError, get_openai_client

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

SERVICE = "image"


def generate_image(config, prompt, output_path, openai_client=None):
    """Generate one image for prompt with the configured provider and write it to output_path.

    Args:
        config (dict): The book's imageConfig, e.g.
            {"provider": "mystic", "mystic": {"model": "realism", "engine": "automatic", ...}}
        prompt (str): Full illustration prompt.
        output_path (str): Where to write the image file.
        openai_client: OpenAI client for the "openai" provider; built from OPENAI_API_KEY when omitted.

    Returns:
        str: output_path.
    """
    provider = (config or {}).get("provider")
    if not provider:
        raise ConfigurationError("No image provider configured")

    if provider == "openai":
        return _generate_with_openai(config.get("openai") or {}, prompt, output_path, openai_client)
    elif provider == "mystic":
        return _generate_with_mystic(config.get("mystic") or {}, prompt, output_path)
    raise ConfigurationError(f"Unknown provider: {provider}")


def _generate_with_openai(config, prompt, output_path, client=None):
    client = client or get_openai_client()
    request_details = {
        "model": config.get("model"),
        "prompt": prompt,
        "n": 1,
        "size": config.get("size"),
    }

    logger.info(f"Generating image with {request_details['model']} ({request_details['size']})")
    log_request(SERVICE, {"provider": "openai", **request_details})
    try:
        response = client.images.generate(**request_details)
        image_url = response.data[0].url
        log_response(SERVICE, {"provider": "openai", "url": image_url})
        download_image(image_url, output_path)
    except Exception as e:
        log_error(SERVICE, e, request_details)
        raise ImageGenerationError(f"OpenAI generation failed: {e}") from e

    return output_path


def _mystic_headers(api_key):
    return {
        "Content-Type": "application/json",
        "x-freepik-api-key": api_key,
        "Accept": "application/json",
    }


def _generate_with_mystic(config, prompt, output_path):
    api_key = os.getenv("FREEPIK_API_KEY")
    if not api_key:
        raise ConfigurationError("FREEPIK_API_KEY not found in environment")

    payload = {
        "prompt": prompt,
        "resolution": config.get("resolution") or MYSTIC_DEFAULT_RESOLUTION,
        "aspect_ratio": MYSTIC_ASPECT_RATIO,
        "model": config.get("model"),
        "engine": config.get("engine"),
        "creative_detailing": config.get("creative_detailing") or MYSTIC_DEFAULT_CREATIVE_DETAILING,
        "fixed_generation": False,
        "filter_nsfw": True,
    }

    logger.info(f"Creating Mystic task with model {payload['model']} and engine {payload['engine']}")
    log_request(SERVICE, {"provider": "mystic", **payload})
    try:
        response = requests.post(MYSTIC_API_URL, json=payload, headers=_mystic_headers(api_key),
                                 timeout=HTTP_TIMEOUT)
        response.raise_for_status()
        task_id = (response.json().get("data") or {}).get("task_id")
    except (requests.RequestException, ValueError, AttributeError) as e:
        log_error(SERVICE, e, payload)
        raise ImageGenerationError(f"Mystic generation failed: {e}") from e

    if not task_id:
        raise ImageGenerationError("Mystic generation failed: No task ID in Mystic response")

    image_url = check_mystic_task_status(api_key, MYSTIC_API_URL, task_id)
    log_response(SERVICE, {"provider": "mystic", "task_id": task_id, "url": image_url})
    download_image(image_url, output_path)
    return output_path


def check_mystic_task_status(api_key, api_url, task_id, max_attempts=MYSTIC_MAX_ATTEMPTS,
                             interval=MYSTIC_POLL_INTERVAL):
    """Poll a Mystic task until it completes.

    Returns:
        str: URL of the first generated image.

    Raises:
        ImageGenerationError: On a FAILED task, a failed status request, or after max_attempts polls.
    """
    for attempt in range(max_attempts):
        try:
            response = requests.get(f"{api_url}/{task_id}", headers=_mystic_headers(api_key), timeout=HTTP_TIMEOUT)
            response.raise_for_status()
            body = response.json()
            data = body["data"]
            status = data.get("status")
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
            log_error(SERVICE, e, {"provider": "mystic", "task_id": task_id, "poll": attempt + 1})
            raise ImageGenerationError(f"Error checking task status: {e}") from e

        logger.info(f"Task {task_id} status: {status} (poll {attempt + 1}/{max_attempts})")

        if status == "COMPLETED" and data.get("generated"):
            return data["generated"][0]
        elif status == "FAILED":
            error = ImageGenerationError(f"Task failed: {json.dumps(body)}")
            log_error(SERVICE, error, {"provider": "mystic", "task_id": task_id})
            raise error

        if attempt < max_attempts - 1:
            time.sleep(interval)

    error = ImageGenerationError(f"Timeout after {max_attempts} attempts")
    log_error(SERVICE, error, {"provider": "mystic", "task_id": task_id})
    raise error


def download_image(url, output_path):
    """Fetch url and write the raw bytes to output_path, creating parent folders."""
    try:
        response = requests.get(url, timeout=HTTP_TIMEOUT)
        response.raise_for_status()
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(response.content)
    except (requests.RequestException, OSError) as e:
        log_error(SERVICE, e, {"url": url, "output_path": output_path})
        raise ImageGenerationError(f"Failed to download image: {e}") from e

    logger.info(f"Saved image to {output_path}")
    return output_path
