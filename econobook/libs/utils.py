import re
import time
from datetime import datetime, timezone


def safe_book_name(name):
    """Directory name for a book title: lower-case, whitespace to "-", only [a-z0-9-] kept."""
    name = re.sub(r"\s+", "-", name.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", name)


def safe_file_stem(title):
    return re.sub(r"[^a-zA-Z0-9]", "_", title)


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def epoch_ms():
    return int(time.time() * 1000)
