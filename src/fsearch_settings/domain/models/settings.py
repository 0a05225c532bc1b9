"""Settings model for the file search application.

This module defines the ``Settings`` Pydantic model that the host
application loads at startup, mutates from its preferences UI and saves on
exit. Sub-models mirror the groups of ``fsearch.conf``.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Sub-models by group
# ---------------------------------------------------------------------------


class InterfaceSettings(BaseModel):
    """Preferences for the main window (``[Interface]`` group)."""

    enable_list_tooltips: bool = Field(
        default=True,
        description="Show tooltips on result list rows.",
    )
    enable_dark_theme: bool = Field(
        default=False,
        description="Prefer the dark variant of the desktop theme.",
    )
    show_menubar: bool = Field(default=True, description="Show the menu bar.")
    show_statusbar: bool = Field(default=True, description="Show the status bar.")
    show_filter: bool = Field(default=True, description="Show the filter selector.")
    show_search_button: bool = Field(
        default=True,
        description="Show the search button next to the query entry.",
    )


class SearchSettings(BaseModel):
    """Preferences for query matching (``[Search]`` group)."""

    match_case: bool = Field(default=False, description="Case-sensitive matching.")
    enable_regex: bool = Field(default=False, description="Treat queries as regexes.")
    search_in_path: bool = Field(
        default=False,
        description="Match against the full path instead of the file name.",
    )
    limit_results: bool = Field(
        default=True,
        description="Stop after ``num_results`` matches.",
    )
    num_results: int = Field(
        default=10000,
        ge=0,
        description="Maximum number of results when ``limit_results`` is set.",
    )


# ---------------------------------------------------------------------------
# Root settings model
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    """Root settings — persisted to ``fsearch.conf``.

    ``locations`` are the directories the indexer treats as search roots.
    Order is significant and duplicates are kept as-is.
    """

    interface: InterfaceSettings = Field(default_factory=InterfaceSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    locations: list[str] = Field(default_factory=list)


def build_defaults() -> Settings:
    """Return a fully populated ``Settings`` with factory defaults."""
    return Settings()


class LoadResult(NamedTuple):
    """Outcome of loading settings from a store.

    ``ok`` is False only when the store could not be opened or parsed; in
    that case ``settings`` holds factory defaults. ``defaulted`` lists the
    dotted names (``"search.num_results"``) of fields that fell back to
    their default because the key was missing or held an invalid value.
    """

    settings: Settings
    ok: bool
    defaulted: tuple[str, ...] = ()
