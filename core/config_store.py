# --- START OF FILE core/config_store.py ---
"""Flat two-line store for the editor font size and window geometry.

File layout::

    <font size>
    <x> <y> <width> <height> <fullscreen 0|1>

The second line is optional. Every rewrite reads the field it is not
changing first, so updating one value never drops the other.
"""
import os
import re
import shutil
import logging
import tempfile
import contextlib
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

CONFIG_PATH = "editor.cfg"

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
MIN_FONT_SIZE = 4  # exclusive
DEFAULT_FONT_SIZE = 15

_INT_RE = re.compile(r'^[+-]?[0-9]+$')
# digits in INT32_MIN
_MAX_DIGITS = 10

logger = logging.getLogger(__name__)


class ConfigIssue(Enum):
    FILE_UNAVAILABLE = "FileUnavailable"
    MALFORMED_VALUE = "MalformedValue"
    OUT_OF_RANGE = "OutOfRange"
    TRUNCATED_RECORD = "TruncatedRecord"


@dataclass(frozen=True)
class Geometry:
    x: int
    y: int
    width: int
    height: int
    fullscreen: bool = False

    def to_line(self) -> str:
        return f"{self.x} {self.y} {self.width} {self.height} {int(self.fullscreen)}"


@dataclass(frozen=True)
class ConfigRecord:
    font_size: int
    geometry: Optional[Geometry] = None


def _parse_int(text: str) -> Optional[int]:
    text = text.strip()
    if not _INT_RE.match(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        # far outside int32, callers report it as out of range
        return INT32_MAX + 1
    try:
        return int(text)
    except ValueError:
        return None


def is_valid_font_size(size: int) -> bool:
    return MIN_FONT_SIZE < size < INT32_MAX


class ConfigStore:
    """Reads and rewrites the config file, recovering from every failure.

    No method raises: missing files, missing lines and malformed values are
    reported on ``log`` and replaced by fallbacks, or the write is skipped.
    """

    def __init__(self, path: str = CONFIG_PATH, log: Optional[logging.Logger] = None) -> None:
        self.path = path
        self.log = log or logger

    def _report(self, issue: ConfigIssue, msg: str, *args) -> None:
        self.log.warning("[%s] " + msg, issue.value, *args)

    def _read_lines(self) -> Optional[List[str]]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return f.read().splitlines()
        except OSError as e:
            self._report(ConfigIssue.FILE_UNAVAILABLE, "Failed to open %s for reading: %s", self.path, e)
            return None
        except UnicodeDecodeError as e:
            self._report(ConfigIssue.MALFORMED_VALUE, "%s is not valid text: %s", self.path, e)
            return []

    def _write_in_place(self, text: str) -> bool:
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(text)
            return True
        except OSError as e:
            self._report(ConfigIssue.FILE_UNAVAILABLE, "Failed to write %s: %s", self.path, e)
            return False

    def _write_lines(self, lines: List[str]) -> bool:
        text = "\n".join(lines)
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".editor-", suffix=".tmp", dir=directory)
        except OSError as e:
            self.log.info("Cannot create a temporary file next to %s (%s), writing in place", self.path, e)
            return self._write_in_place(text)

        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            if os.path.exists(self.path):
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
            return True
        except OSError as e:
            self._report(ConfigIssue.FILE_UNAVAILABLE, "Failed to write %s: %s", self.path, e)
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
            return False

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def ensure_exists(self, overwrite: bool = False) -> None:
        """Create the file holding only the default font size.

        With ``overwrite`` an existing file is replaced too, discarding its
        geometry line. Used as repair when the font size is unreadable.
        """
        if self.exists() and not overwrite:
            return
        if overwrite:
            self.log.warning("Resetting %s to the default font size %d", self.path, DEFAULT_FONT_SIZE)
        self._write_lines([str(DEFAULT_FONT_SIZE)])

    def _font_size_from(self, lines: List[str]) -> Optional[int]:
        if not lines or not lines[0].strip():
            self._report(ConfigIssue.TRUNCATED_RECORD, "No font size line in %s", self.path)
            return None
        size = _parse_int(lines[0])
        if size is None:
            self._report(ConfigIssue.MALFORMED_VALUE, "Font size %r in %s is not an integer", lines[0], self.path)
            return None
        if not is_valid_font_size(size):
            self._report(ConfigIssue.OUT_OF_RANGE, "Font size %d in %s is out of range", size, self.path)
            return None
        return size

    def load_font_size(self) -> int:
        lines = self._read_lines()
        if lines is None:
            return DEFAULT_FONT_SIZE
        size = self._font_size_from(lines)
        if size is None:
            self.log.info("Using default font size %d", DEFAULT_FONT_SIZE)
            return DEFAULT_FONT_SIZE
        return size

    def save_font_size(self, size: int) -> None:
        lines = self._read_lines()
        if lines is None:
            self.log.warning("Font size %d not saved", size)
            return
        new_lines = [str(size)]
        # geometry line is kept verbatim, not reparsed
        if len(lines) > 1 and lines[1]:
            new_lines.append(lines[1])
        self._write_lines(new_lines)

    def load_geometry(self) -> Optional[Geometry]:
        lines = self._read_lines()
        if lines is None:
            return None

        if self._font_size_from(lines) is None:
            self.ensure_exists(overwrite=True)
            return None

        if len(lines) < 2 or not lines[1].strip():
            self.log.info("No window geometry stored in %s", self.path)
            return None

        tokens = lines[1].split()
        if len(tokens) < 5:
            self._report(ConfigIssue.TRUNCATED_RECORD, "Geometry line %r in %s has %d of 5 values",
                         lines[1], self.path, len(tokens))
            return None

        values = []
        for token in tokens[:5]:
            value = _parse_int(token)
            if value is None:
                self._report(ConfigIssue.MALFORMED_VALUE, "Geometry value %r in %s is not an integer", token, self.path)
                return None
            if not INT32_MIN <= value <= INT32_MAX:
                self._report(ConfigIssue.OUT_OF_RANGE, "Geometry value %d in %s is out of range", value, self.path)
                return None
            values.append(value)

        x, y, w, h, flag = values
        return Geometry(x, y, w, h, flag != 0)

    def save_geometry(self, geometry: Geometry) -> None:
        lines = self._read_lines()
        if lines and lines[0].strip():
            font_line = lines[0]
        else:
            self._report(ConfigIssue.TRUNCATED_RECORD, "No font size to keep in %s, writing default %d",
                         self.path, DEFAULT_FONT_SIZE)
            font_line = str(DEFAULT_FONT_SIZE)
        self._write_lines([font_line, geometry.to_line()])

    def load_record(self) -> ConfigRecord:
        return ConfigRecord(self.load_font_size(), self.load_geometry())
# --- END OF FILE core/config_store.py ---
