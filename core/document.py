import logging
from typing import Optional

logger = logging.getLogger(__name__)


def load_text(path: str) -> Optional[str]:
    """Read a text file for the editor buffer, one newline-terminated line each.

    Returns None if the file can't be read.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return "".join(line.rstrip("\r\n") + "\n" for line in f)
    except OSError as e:
        logger.error("Failed to open '%s' for reading: %s", path, e)
    except UnicodeDecodeError as e:
        logger.error("An error occurred while loading content for '%s': %s", path, e)
    return None


def save_text(path: str, text: str) -> bool:
    if not path:
        return False
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return True
    except OSError as e:
        logger.error("Failed to open '%s' for writing: %s", path, e)
        return False
