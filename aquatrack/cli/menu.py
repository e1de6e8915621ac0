"""
aquatrack/cli/menu.py
─────────────────────
Interactive menu shell.

Each action takes the collection and the data file path; parse and storage
failures are reported and the loop carries on. Exit (menu 0, or end of
input) saves before leaving.
"""
from __future__ import annotations

import logging
from pathlib import Path

import click

from aquatrack.analytics.stats import risk_level_breakdown, summarize
from aquatrack.data import store
from aquatrack.data.collection import ReadingCollection
from aquatrack.data.errors import ReadingParseError, StorageError
from aquatrack.data.models import ReadingSchema
from config.settings import settings

BANNER = """\
+------------------+
|   AQUA TRACK     |
+------------------+"""

MENU = """\
1) Add reading
2) List readings
3) Stats
4) Remove by id
5) Save
0) Exit"""


def _ask(label: str, suffix: str = ": ") -> str:
    return click.prompt(label, default="", show_default=False, prompt_suffix=suffix).strip()


# ── Actions ───────────────────────────────────────────────────────────────────

def add_reading(readings: ReadingCollection, path: Path) -> None:
    model = readings.schema.model
    values = {name: _ask(label) for name, label in model.FIELD_LABELS.items()}
    try:
        reading = model.create(**values)
    except ReadingParseError as exc:
        click.echo(f"Bad input: {exc}")
        return
    readings.insert_back(reading)
    click.echo(f"Added: {reading}")


def list_readings(readings: ReadingCollection, path: Path) -> None:
    if not readings:
        click.echo("no readings")
        return
    click.echo("readings:")
    for reading in readings:
        click.echo(reading.format())


def show_stats(readings: ReadingCollection, path: Path) -> None:
    if not readings:
        click.echo("no readings")
        return
    stats = summarize(readings)
    if readings.schema is ReadingSchema.CONTAMINATION:
        click.echo(
            f"count={stats.count} avgRisk={stats.average:.1f} "
            f"min={stats.minimum} max={stats.maximum}"
        )
        levels = risk_level_breakdown(readings)
        click.echo("levels: " + " ".join(f"{level}={n}" for level, n in levels.items()))
    else:
        click.echo(
            f"count={stats.count} avg={stats.average:.3f} "
            f"min={stats.minimum} max={stats.maximum}"
        )


def remove_by_id(readings: ReadingCollection, path: Path) -> None:
    target = _ask("id")
    removed = readings.remove_where(lambda r: r.id == target)
    click.echo("removed" if removed else "not found")


def save_readings(readings: ReadingCollection, path: Path) -> None:
    try:
        store.save(readings, path)
    except StorageError as exc:
        click.echo(f"Save failed: {exc}")
        return
    click.echo(f"Saved to {path}")


ACTIONS = {
    "1": add_reading,
    "2": list_readings,
    "3": show_stats,
    "4": remove_by_id,
    "5": save_readings,
}


def run_menu(readings: ReadingCollection, path: Path) -> None:
    """Loop until 0 or end of input, then save."""
    while True:
        click.echo(BANNER)
        click.echo(f"AquaTrack - water monitoring ({readings.schema.value})")
        click.echo(MENU)
        try:
            choice = _ask("", suffix="> ")
            if choice == "0":
                break
            action = ACTIONS.get(choice)
            if action is None:
                click.echo("Invalid option")
                continue
            action(readings, path)
        except click.Abort:
            # stdin closed or Ctrl-C
            click.echo()
            break
    save_readings(readings, path)
    click.echo("Bye.")


# ── Entry point ───────────────────────────────────────────────────────────────

@click.command()
def main() -> None:
    """AquaTrack: record water-quality sensor readings."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        schema = ReadingSchema(settings.READING_SCHEMA)
    except ValueError:
        choices = ", ".join(s.value for s in ReadingSchema)
        raise click.ClickException(
            f"Unknown READING_SCHEMA {settings.READING_SCHEMA!r} (expected one of: {choices})"
        ) from None

    path = Path(settings.DATA_FILE)
    readings = ReadingCollection(schema)
    error = store.hydrate(readings, path)
    if error is not None:
        click.echo(f"Warning: could not load {path} ({error}); starting with no readings.", err=True)

    run_menu(readings, path)
