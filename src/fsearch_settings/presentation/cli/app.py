"""Thin CLI wrapper — Typer commands that delegate to the settings store.

All wiring goes through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from fsearch_settings.presentation.cli.formatters import (
    error_message,
    locations_table,
    settings_table,
    success_panel,
)

app = typer.Typer(
    name="fsearch-settings",
    help="⚙️  Inspect and edit FSearch settings (fsearch.conf)",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for location commands
location_app = typer.Typer(
    name="location",
    help="📁 Manage the search locations",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(location_app, name="location")


def _container(ctx: typer.Context):
    from fsearch_settings.bootstrap import Container

    return Container(config_root=ctx.obj.get("config_root") if ctx.obj else None)


@app.callback()
def main(
    ctx: typer.Context,
    config_root: Annotated[
        Optional[Path],
        typer.Option(
            "--config-root",
            envvar="FSEARCH_CONFIG_ROOT",
            help="User configuration root (default: platform config dir)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """FSearch settings tool."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    ctx.obj = {"config_root": config_root}


# ---------------------------------------------------------------------------
# fsearch-settings path / show / init / validate
# ---------------------------------------------------------------------------


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the path of the settings file."""
    typer.echo(str(_container(ctx).paths.config_path))


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the active settings (defaults are marked)."""
    container = _container(ctx)
    result = container.settings_store.load()
    if not result.ok:
        error_message(f"Cannot load settings from {container.paths.config_path}")
        raise typer.Exit(code=1)
    settings_table(result)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
) -> None:
    """Write the default settings to the settings file."""
    from fsearch_settings.domain.models.settings import build_defaults

    container = _container(ctx)
    dest = container.paths.config_path
    if dest.exists() and not force:
        error_message(f"File already exists: {dest} (use --force to overwrite)")
        raise typer.Exit(code=1)

    if not container.settings_store.save(build_defaults()):
        error_message(f"Cannot write settings to {dest}")
        raise typer.Exit(code=1)
    success_panel(f"✅ Default settings written to: [bold green]{dest}[/]")


@app.command()
def validate(
    config_file: Annotated[Path, typer.Argument(help="Settings file to check")],
) -> None:
    """Check a settings file and list the keys that fall back to defaults."""
    from fsearch_settings.infrastructure.config.settings_store import load_settings

    if not config_file.exists():
        error_message(f"File not found: {config_file}")
        raise typer.Exit(code=1)

    result = load_settings(config_file)
    if not result.ok:
        error_message(f"Not a valid settings file: {config_file}")
        raise typer.Exit(code=1)

    defaulted = "\n".join(f"  • {name}" for name in result.defaulted) or "  none"
    success_panel(
        f"✅ Settings file is readable\n\n"
        f"  Locations: [cyan]{len(result.settings.locations)}[/]\n"
        f"  Defaulted keys:\n{defaulted}",
        title="✅ Validation",
    )


# ---------------------------------------------------------------------------
# fsearch-settings location list / add / remove / move
# ---------------------------------------------------------------------------


def _load_locations(ctx: typer.Context):
    """Load the use case, refusing to touch a file that exists but is broken."""
    container = _container(ctx)
    uc = container.manage_locations()
    uc.load()
    if not uc.loaded and container.paths.config_path.exists():
        error_message(f"Cannot load settings from {container.paths.config_path}")
        raise typer.Exit(code=1)
    return uc


def _save_locations(uc) -> None:
    if not uc.save():
        error_message("Cannot save settings")
        raise typer.Exit(code=1)
    locations_table(uc.locations)


@location_app.command("list")
def location_list(ctx: typer.Context) -> None:
    """List the search locations in order."""
    locations_table(_load_locations(ctx).locations)


@location_app.command("add")
def location_add(
    ctx: typer.Context,
    location: Annotated[str, typer.Argument(help="Directory to add")],
) -> None:
    """Append a search location."""
    uc = _load_locations(ctx)
    uc.add(location)
    _save_locations(uc)


@location_app.command("remove")
def location_remove(
    ctx: typer.Context,
    index: Annotated[int, typer.Argument(help="Index shown by 'location list'")],
) -> None:
    """Remove a search location by index."""
    from fsearch_settings.domain.errors import LocationNotFoundError

    uc = _load_locations(ctx)
    try:
        uc.remove(index)
    except LocationNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    _save_locations(uc)


@location_app.command("move")
def location_move(
    ctx: typer.Context,
    index: Annotated[int, typer.Argument(help="Current index")],
    new_index: Annotated[int, typer.Argument(help="New index")],
) -> None:
    """Move a search location to another position."""
    from fsearch_settings.domain.errors import LocationNotFoundError

    uc = _load_locations(ctx)
    try:
        uc.move(index, new_index)
    except LocationNotFoundError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    _save_locations(uc)


if __name__ == "__main__":
    app()
