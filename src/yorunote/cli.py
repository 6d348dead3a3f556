"""Yorunote CLI - Nightly Reflection Journal."""

import json
import logging
import sys
import threading
import time
from datetime import date

import click

from .config import load_config
from .core.ritual import QUESTIONS, can_begin_ritual
from .core.shredder import Shredder, ShredderState
from .ports.entry_store import EntryNotFoundError, PersistenceError
from .workflows import ErrorMessages, get_store, open_ritual, submit_ritual

logger = logging.getLogger(__name__)

# Typed alone while editing, empties an answer instead of keeping it.
CLEAR_ANSWER = "-"

date_option = click.option(
    "--date", "-d", "target_date", default=None,
    help="Day to use (YYYY-MM-DD), defaults to today",
)


def _parse_day(target_date: str | None) -> date:
    if not target_date:
        return date.today()
    try:
        return date.fromisoformat(target_date)
    except ValueError:
        raise click.BadParameter(f"Invalid date: {target_date}", param_hint="--date") from None


def _open_store():
    """Open the configured store or exit with the generic load notice."""
    try:
        return get_store(load_config())
    except PersistenceError:
        click.echo(ErrorMessages.LOAD_FAILURE, err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="yorunote")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Yorunote - nightly reflection journal."""
    level = "DEBUG" if debug else load_config().log_level
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


@main.command()
@date_option
def home(target_date: str | None):
    """Show whether a day has been recorded."""
    target = _parse_day(target_date)
    store = _open_store()

    try:
        entry = store.find_for_day(target)
    except PersistenceError:
        click.echo(ErrorMessages.LOAD_FAILURE, err=True)
        sys.exit(1)

    click.echo(f"{target.strftime('%A, %b %d')}\n")
    if entry is not None:
        click.echo("[Recorded]")
        click.echo(f"What happened: {entry.preview()}")
        click.echo("\nRun 'yorunote show' to read it or 'yorunote ritual' to edit.")
        return

    click.echo("No entry for this day.")
    if can_begin_ritual(target, entry):
        click.echo("\nRun 'yorunote ritual' to begin tonight's ritual.")


@main.command()
@date_option
def show(target_date: str | None):
    """Read the entry for a day."""
    target = _parse_day(target_date)
    store = _open_store()

    try:
        entry = store.find_for_day(target)
    except PersistenceError:
        click.echo(ErrorMessages.LOAD_FAILURE, err=True)
        sys.exit(1)

    if entry is None:
        click.echo(f"No entry for {target.strftime('%A, %b %d')}.")
        return

    click.echo(f"Entry for {target.strftime('%A, %b %d')}")
    for field_name, question in QUESTIONS:
        click.echo(f"\n## {question}\n")
        click.echo(getattr(entry, field_name))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def entries(as_json: bool):
    """List all entries, most recent first."""
    store = _open_store()

    try:
        all_entries = store.fetch_all()
    except PersistenceError:
        click.echo(ErrorMessages.LOAD_FAILURE, err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": e.id,
                        "day": e.day_key.isoformat(),
                        "timestamp": e.timestamp.isoformat(),
                        "event_text": e.event_text,
                        "feeling_text": e.feeling_text,
                        "future_text": e.future_text,
                    }
                    for e in all_entries
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    if not all_entries:
        click.echo("No entries yet.")
        return

    for entry in all_entries:
        click.echo(f"{entry.day_key.isoformat()}  {entry.preview()}")


@main.command()
@date_option
def ritual(target_date: str | None):
    """Record (or edit) the nightly ritual."""
    target = _parse_day(target_date)
    store = _open_store()

    try:
        draft = open_ritual(store, target)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except PersistenceError:
        click.echo(ErrorMessages.LOAD_FAILURE, err=True)
        sys.exit(1)

    mode = "Editing" if draft.is_editing else "Tonight's ritual"
    click.echo(f"{mode} for {target.strftime('%A, %b %d')}")
    if draft.is_editing:
        click.echo(f"Press Enter to keep an answer, or type '{CLEAR_ANSWER}' to clear it.")
    click.echo()

    for field_name, question in QUESTIONS:
        click.echo(question)
        current = getattr(draft, field_name)
        answer = click.prompt(">", default=current, show_default=False)
        if draft.is_editing and answer == CLEAR_ANSWER:
            answer = ""
        draft.answer(field_name, answer)
        click.echo()

    if not draft.can_save:
        click.echo("Nothing to save.")
        return

    if not click.confirm("Save this entry?", default=True):
        draft.cancel()
        click.echo("Discarded.")
        return

    while True:
        try:
            entry = submit_ritual(store, draft)
            break
        except PersistenceError:
            click.echo(ErrorMessages.SAVE_FAILURE, err=True)
            if not click.confirm("Try again?", default=True):
                sys.exit(1)
        except EntryNotFoundError:
            click.echo(ErrorMessages.SYSTEM_ERROR, err=True)
            sys.exit(1)

    click.echo(f"✓ Saved entry for {entry.day_key.isoformat()}")


@main.command()
@click.option("--seconds", "-s", type=click.IntRange(min=1), default=None,
              help="Countdown length, defaults to SHREDDER_SECONDS")
def shred(seconds: int | None):
    """Write it out for a minute, then throw it away."""
    config = load_config()
    shredder = Shredder(seconds if seconds is not None else config.shredder_seconds)

    click.echo(f"{shredder.seconds} seconds. Type freely; an empty line shreds early.\n")

    # The timer thread and the prompt loop both advance the shredder.
    lock = threading.Lock()
    timer = None

    def expire():
        with lock:
            if not shredder.is_running:
                return
            shredder.tick(shredder.remaining)
        logger.info("Shredder countdown elapsed")
        click.echo("\nTime's up. Press Enter to close.")

    try:
        last = time.monotonic()
        while True:
            line = click.prompt(f"[{int(shredder.remaining)}s]", default="", show_default=False)
            with lock:
                if shredder.state == ShredderState.SHREDDED:
                    break
                now = time.monotonic()
                shredded = shredder.tick(now - last)
                last = now

                if shredded:
                    click.echo("\nTime's up.")
                    break
                if not line:
                    if shredder.can_shred:
                        shredder.shred()
                        break
                    continue
                started = not shredder.is_running
                shredder.append(line + "\n")

            if started:
                timer = threading.Timer(shredder.remaining, expire)
                timer.daemon = True
                timer.start()
    finally:
        if timer is not None:
            timer.cancel()

    logger.info("Shredder buffer discarded")
    click.echo("🗑️  Shredded. Your head is a little lighter now.")


if __name__ == "__main__":
    main()
