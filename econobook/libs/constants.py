import os

from dotenv import load_dotenv

load_dotenv()

BOOKS_DIR = os.getenv("ECONOBOOK_BOOKS_DIR", "books")
TMP_DIR = os.getenv("ECONOBOOK_TMP_DIR", "tmp") # scratch space for unaccepted images
LOG_LEVEL = os.getenv("ECONOBOOK_LOG_LEVEL", "INFO")

BOOK_STATE_FILE = "book-state.json"
CONTENT_FILE = "content.md"
IMAGES_DIR = "images"

APP_LOG_FILE = "econobook.log"
API_LOG_FILE = "openai.log"

DEFAULT_EDITOR = "nano"

DEFAULT_CHAT_MODEL = "gpt-4"
DEFAULT_TEMPERATURE = 0.7
MAX_CHAPTER_TOKENS = 4000  # fixed ceiling, long chapters get truncated by the provider
MAX_SCENE_TOKENS = 1000

MYSTIC_API_URL = "https://api.freepik.com/v1/ai/mystic"
MYSTIC_ASPECT_RATIO = "square_1_1"
MYSTIC_DEFAULT_RESOLUTION = "1k"
MYSTIC_DEFAULT_CREATIVE_DETAILING = 33
MYSTIC_POLL_INTERVAL = 5  # seconds
MYSTIC_MAX_ATTEMPTS = 60  # 5 minute ceiling with the default interval

HTTP_TIMEOUT = 60
