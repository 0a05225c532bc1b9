"""Key file — a group-keyed key/value store backed by ``configparser``.

The on-disk format is the conventional INI style::

    [Search]
    match_case=false
    num_results=10000

Keys keep their case, values are raw strings (no ``%`` interpolation) and
``#`` / ``;`` start a comment line. Typed getters raise the field-level
errors from :mod:`fsearch_settings.domain.errors`; loading and saving raise
the store-level ones.
"""

from __future__ import annotations

import configparser
import os
import tempfile
from pathlib import Path

from fsearch_settings.domain.errors import (
    GroupNotFoundError,
    InvalidValueError,
    KeyNotFoundError,
    StoreOpenError,
    StoreParseError,
    StoreWriteError,
)

# A literal [DEFAULT] group in a hand-edited file must stay an ordinary group.
_NO_DEFAULT_SECTION = "__keyfile_no_default__"

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "t": "\t", "r": "\r", "s": " "}


def _escape(value: str) -> str:
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
    # configparser strips surrounding blanks, so protect them.
    stripped = escaped.lstrip(" ")
    escaped = "\\s" * (len(escaped) - len(stripped)) + stripped
    stripped = escaped.rstrip(" ")
    return stripped + "\\s" * (len(escaped) - len(stripped))


def _unescape(value: str) -> str:
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        # Unknown escapes are kept literally so hand-written paths survive.
        out.append(_UNESCAPES.get(nxt, ch + nxt))
    return "".join(out)


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        default_section=_NO_DEFAULT_SECTION,
        strict=False,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


class KeyFile:
    """In-memory key/value store grouped by section name."""

    def __init__(self) -> None:
        self._parser = _new_parser()

    # -- Loading -------------------------------------------------------------

    @classmethod
    def load_from_file(cls, path: str | Path) -> "KeyFile":
        """Parse the whole file at *path*.

        Raises:
            StoreOpenError: If the file cannot be opened or read.
            StoreParseError: If the top-level syntax is malformed.
        """
        path = Path(path)
        try:
            # Non-UTF-8 path bytes survive as surrogates, as os.fsdecode gives them.
            text = path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise StoreOpenError(f"Cannot read key file {path}: {exc}") from exc
        return cls.load_from_string(text, source=str(path))

    @classmethod
    def load_from_string(cls, text: str, source: str = "<string>") -> "KeyFile":
        """Parse key file *text*; *source* is only used in error messages.

        Leading blanks on a line are ignored, so an indented line is a key of
        its own rather than a continuation. A repeated group is merged into
        the first one and a repeated key keeps its last value.
        """
        key_file = cls()
        text = "\n".join(line.lstrip() for line in text.split("\n"))
        try:
            key_file._parser.read_string(text, source=source)
        except configparser.Error as exc:
            raise StoreParseError(f"Malformed key file {source}: {exc}") from exc
        return key_file

    # -- Introspection -------------------------------------------------------

    def groups(self) -> list[str]:
        """Return group names in file order."""
        return self._parser.sections()

    def has_group(self, group: str) -> bool:
        return self._parser.has_section(group)

    def has_key(self, group: str, key: str) -> bool:
        return self._parser.has_option(group, key)

    def keys(self, group: str) -> list[str]:
        """Return the keys of *group* in file order."""
        if not self._parser.has_section(group):
            raise GroupNotFoundError(f"Key file does not have group '{group}'")
        return list(self._parser[group])

    # -- Typed getters -------------------------------------------------------

    def get_string(self, group: str, key: str) -> str:
        if not self._parser.has_section(group):
            raise GroupNotFoundError(f"Key file does not have group '{group}'")
        if not self._parser.has_option(group, key):
            raise KeyNotFoundError(f"Key file does not have key '{key}' in group '{group}'")
        return _unescape(self._parser.get(group, key))

    def get_boolean(self, group: str, key: str) -> bool:
        """Accept ``true/false``, ``1/0``, ``yes/no`` and ``on/off``."""
        raw = self.get_string(group, key)
        try:
            return configparser.ConfigParser.BOOLEAN_STATES[raw.lower()]
        except KeyError as exc:
            raise InvalidValueError(
                f"Value '{raw}' of key '{key}' in group '{group}' is not a boolean"
            ) from exc

    def get_integer(self, group: str, key: str) -> int:
        """Accept an optionally signed run of decimal digits."""
        raw = self.get_string(group, key)
        try:
            digits = raw.lstrip("+-")
            if not (digits.isascii() and digits.isdecimal()):
                raise ValueError(raw)
            return int(raw, 10)
        except ValueError as exc:
            raise InvalidValueError(
                f"Value '{raw}' of key '{key}' in group '{group}' is not an integer"
            ) from exc

    # -- Setters -------------------------------------------------------------

    def set_string(self, group: str, key: str, value: str) -> None:
        if not self._parser.has_section(group):
            self._parser.add_section(group)
        self._parser.set(group, key, _escape(value))

    def set_boolean(self, group: str, key: str, value: bool) -> None:
        self.set_string(group, key, "true" if value else "false")

    def set_integer(self, group: str, key: str, value: int) -> None:
        self.set_string(group, key, str(int(value)))

    def remove_group(self, group: str) -> bool:
        """Drop *group* and all of its keys; return False if it was absent."""
        return self._parser.remove_section(group)

    # -- Serialisation -------------------------------------------------------

    def to_string(self) -> str:
        """Return the textual form; groups and keys keep insertion order."""
        lines: list[str] = []
        for group in self._parser.sections():
            if lines:
                lines.append("")
            lines.append(f"[{group}]")
            for key, value in self._parser.items(group):
                lines.append(f"{key}={value}")
        return "\n".join(lines) + "\n" if lines else ""

    def save_to_file(self, path: str | Path) -> None:
        """Commit the store to *path* atomically (write to temp, then rename).

        Raises:
            StoreWriteError: If the file cannot be written. Any existing
                file at *path* is left untouched.
        """
        path = Path(path)
        data = self.to_string()
        try:
            tmp_fd, tmp_path = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
            )
        except OSError as exc:
            raise StoreWriteError(f"Cannot write key file {path}: {exc}") from exc

        try:
            with open(tmp_fd, "w", encoding="utf-8", errors="surrogateescape") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            Path(tmp_path).replace(path)
        except (OSError, UnicodeError) as exc:
            Path(tmp_path).unlink(missing_ok=True)
            raise StoreWriteError(f"Cannot write key file {path}: {exc}") from exc
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
