import math
import re
from pathlib import Path

from app.errors import NotFound

_SEGMENT_SPLIT = re.compile(r"[\\/]")


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def safe_join(root: Path, name: str) -> Path:
    """
    Resolve an untrusted relative name under root.
    Raises NotFound for anything that could land outside of it.
    """
    if not name or "\x00" in name:
        raise NotFound(name, "empty or invalid name")
    if name.startswith(("/", "\\")) or Path(name).is_absolute():
        raise NotFound(name, "absolute path rejected")
    if ".." in _SEGMENT_SPLIT.split(name):
        raise NotFound(name, "parent directory traversal rejected")

    base = root.resolve()
    candidate = (base / name).resolve()
    if candidate != base and base not in candidate.parents:
        raise NotFound(name, "path escapes its root")
    return candidate
