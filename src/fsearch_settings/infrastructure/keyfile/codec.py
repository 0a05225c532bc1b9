"""Field codecs — typed values and the location list over a ``KeyFile``.

Readers never fail: a missing group or key, or a value that does not parse
as the requested type, yields the caller's default. The returned
``FieldRead`` records whether that happened so the loader can report it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable, NamedTuple

from fsearch_settings.domain.errors import FieldError, InvalidValueError
from fsearch_settings.infrastructure.keyfile.store import KeyFile

logger = logging.getLogger(__name__)

DATABASE_GROUP = "Database"
LOCATION_KEY_PREFIX = "location_"


class FieldRead(NamedTuple):
    """A value read from the store, or the default that replaced it.

    ``reason`` is ``"missing"`` when the group or key is absent and
    ``"invalid"`` when the stored text could not be parsed.
    """

    value: Any
    defaulted: bool = False
    reason: str | None = None


class FieldSpec(NamedTuple):
    """Maps one scalar ``Settings`` attribute to its place in the store."""

    group: str
    key: str
    section: str
    kind: type


# Order here is the order keys are written to the file.
FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Interface", "enable_list_tooltips", "interface", bool),
    FieldSpec("Interface", "enable_dark_theme", "interface", bool),
    FieldSpec("Interface", "show_menubar", "interface", bool),
    FieldSpec("Interface", "show_statusbar", "interface", bool),
    FieldSpec("Interface", "show_filter", "interface", bool),
    FieldSpec("Interface", "show_search_button", "interface", bool),
    FieldSpec("Search", "match_case", "search", bool),
    FieldSpec("Search", "enable_regex", "search", bool),
    FieldSpec("Search", "search_in_path", "search", bool),
    FieldSpec("Search", "limit_results", "search", bool),
    FieldSpec("Search", "num_results", "search", int),
)


# ---------------------------------------------------------------------------
# Typed field codec
# ---------------------------------------------------------------------------


def _read(
    getter: Callable[[str, str], Any],
    group: str,
    key: str,
    default: Any,
) -> FieldRead:
    try:
        return FieldRead(getter(group, key))
    except InvalidValueError as exc:
        logger.warning("load_config: invalid value: %s", exc)
        return FieldRead(default, True, "invalid")
    except FieldError as exc:
        # New config or older version: use the default, nothing to report.
        logger.debug("load_config: using default for %s.%s: %s", group, key, exc)
        return FieldRead(default, True, "missing")


def read_boolean(store: KeyFile, group: str, key: str, default: bool) -> FieldRead:
    return _read(store.get_boolean, group, key, default)


def read_integer(
    store: KeyFile,
    group: str,
    key: str,
    default: int,
    minimum: int | None = 0,
) -> FieldRead:
    """Read an integer; values below *minimum* count as invalid.

    Pass ``minimum=None`` for signed fields.
    """
    result = _read(store.get_integer, group, key, default)
    if not result.defaulted and minimum is not None and result.value < minimum:
        logger.warning(
            "load_config: invalid value: %s.%s = %d is below %d",
            group,
            key,
            result.value,
            minimum,
        )
        return FieldRead(default, True, "invalid")
    return result


def read_string(store: KeyFile, group: str, key: str, default: str | None) -> FieldRead:
    return _read(store.get_string, group, key, default)


def write_boolean(store: KeyFile, group: str, key: str, value: bool) -> None:
    store.set_boolean(group, key, value)


def write_integer(store: KeyFile, group: str, key: str, value: int) -> None:
    store.set_integer(group, key, value)


def write_string(store: KeyFile, group: str, key: str, value: str) -> None:
    store.set_string(group, key, value)


READERS: dict[type, Callable[..., FieldRead]] = {
    bool: read_boolean,
    int: read_integer,
    str: read_string,
}
WRITERS: dict[type, Callable[..., None]] = {
    bool: write_boolean,
    int: write_integer,
    str: write_string,
}


# ---------------------------------------------------------------------------
# Location list codec
# ---------------------------------------------------------------------------


def location_key(index: int) -> str:
    """Return the key for the 1-based *index*, e.g. ``location_3``."""
    return f"{LOCATION_KEY_PREFIX}{index}"


def read_locations(store: KeyFile) -> list[str]:
    """Read ``location_1``, ``location_2``, ... until the first missing key.

    Keys after a gap are never reached: ``location_1`` and ``location_3``
    without ``location_2`` yields only the first entry.
    """
    locations: list[str] = []
    index = 1
    while True:
        result = read_string(store, DATABASE_GROUP, location_key(index), None)
        if result.defaulted:
            break
        locations.append(result.value)
        index += 1
    return locations


def write_locations(store: KeyFile, locations: Iterable[str]) -> None:
    """Write *locations* as ``location_1 .. location_n`` under ``[Database]``.

    The group is cleared first, so entries from an earlier, longer list
    do not survive. An empty list leaves no ``[Database]`` group.
    """
    store.remove_group(DATABASE_GROUP)
    for index, location in enumerate(locations, start=1):
        write_string(store, DATABASE_GROUP, location_key(index), location)
