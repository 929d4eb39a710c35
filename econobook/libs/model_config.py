"""Static tables of the chat models, image providers and provider options offered when configuring a book."""

IMAGE_PROVIDERS = [
    {"name": "OpenAI DALL-E (Traditional illustration styles)", "value": "openai"},
    {"name": "Freepik Mystic (Modern and artistic styles)", "value": "mystic"},
]

# temperature [0.0-2.0], top_p [0.0-1.0], frequency/presence penalty [0.0-2.0]
_CHAT_DEFAULTS = {
    "temperature": 0.7,
    "top_p": 1.0,
    "frequency_penalty": 0.4,
    "presence_penalty": 0.4,
}

OPENAI_CHAT_MODELS = [
    {
        "name": "GPT-4 (Most capable, slower, more expensive)",
        "value": "gpt-4",
        "defaults": dict(_CHAT_DEFAULTS),
    },
    {
        "name": "GPT-4 Turbo (Faster, slightly less accurate)",
        "value": "gpt-4-turbo-preview",
        "defaults": dict(_CHAT_DEFAULTS),
    },
    {
        "name": "GPT-3.5 Turbo (Fast, less expensive)",
        "value": "gpt-3.5-turbo",
        "defaults": dict(_CHAT_DEFAULTS),
    },
]

CHAT_PARAMETER_RANGES = {
    "temperature": (0.0, 2.0, "higher = more creative"),
    "top_p": (0.0, 1.0, "lower = more focused"),
    "frequency_penalty": (0.0, 2.0, "higher = less repetition"),
    "presence_penalty": (0.0, 2.0, "higher = more topic diversity"),
}

OPENAI_IMAGE_MODELS = [
    {"name": "DALL-E 3 (Highest quality, most accurate)", "value": "dall-e-3", "default_size": "1024x1024"},
    {"name": "DALL-E 2 (Faster, less expensive)", "value": "dall-e-2", "default_size": "1024x1024"},
]

IMAGE_SIZES = {
    "dall-e-3": [
        {"name": "1024x1024 (Square)", "value": "1024x1024", "aspect": "square"},
        {"name": "1792x1024 (Landscape)", "value": "1792x1024", "aspect": "landscape"},
        {"name": "1024x1792 (Portrait)", "value": "1024x1792", "aspect": "portrait"},
    ],
    "dall-e-2": [
        {"name": "256x256 (Small)", "value": "256x256", "aspect": "square"},
        {"name": "512x512 (Medium)", "value": "512x512", "aspect": "square"},
        {"name": "1024x1024 (Large)", "value": "1024x1024", "aspect": "square"},
    ],
}

MYSTIC_MODELS = [
    {
        "name": "Realism",
        "value": "realism",
        "description": "More realistic color palette, tries to give an extra boost of reality to images. "
                       "Works well with photographs and illustrations.",
    },
    {
        "name": "Fluid",
        "value": "fluid",
        "description": "Best prompt adherence and great average quality. "
                       "Can generate creative images and will always follow your input.",
    },
    {
        "name": "Zen",
        "value": "zen",
        "description": "Smoother, basic, and cleaner results. Fewer objects in the scene "
                       "and less intricate details. Softer looking.",
    },
]

MYSTIC_ENGINES = [
    {
        "name": "Automatic",
        "value": "automatic",
        "description": "Default choice that automatically selects the best engine for your prompt.",
    },
    {
        "name": "Illusio",
        "value": "magnific_illusio",
        "description": "Better for smoother illustrations, landscapes, and nature. The softer looking one.",
    },
    {
        "name": "Sharpy",
        "value": "magnific_sharpy",
        "description": "Better for realistic images and photographs. Provides the sharpest and most detailed images.",
    },
    {
        "name": "Sparkle",
        "value": "magnific_sparkle",
        "description": "Good for realistic images. A middle ground between Illusio and Sharpy.",
    },
]

MYSTIC_RESOLUTIONS = [
    {"name": "1K (Faster, less expensive)", "value": "1k"},
    {"name": "2K (Better quality, more expensive)", "value": "2k"},
    {"name": "4K (Highest quality, most expensive)", "value": "4k"},
]


def find_chat_model(value):
    return next((m for m in OPENAI_CHAT_MODELS if m["value"] == value), None)


def find_image_model(value):
    return next((m for m in OPENAI_IMAGE_MODELS if m["value"] == value), None)
