"""
Command-line interface for art-event-manager.

Provides commands to parse a post into an event record and to explain
how a post was classified.

Usage:
    art-events parse post.txt --origin https://x.com/u/status/1
    cat post.txt | art-events parse --now 2024-03-01T12:00:00
    art-events check post.txt
"""

import json
import os
import sys
from datetime import datetime

import click

from src.config.settings import get_settings
from src.observability.logging import bind_context, clear_context, get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Art Event Manager - detect art contest announcements in posts."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--origin", default="", help="Origin reference (post URL)")
@click.option("--image", "images", multiple=True, help="Image URL (can repeat)")
@click.option(
    "--now",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]),
    default=None,
    help="Reference instant for year inference (default: current local time)",
)
@click.option(
    "--mode",
    type=click.Choice(["full", "lean"]),
    default=None,
    help="Parser profile (default: ART_EVENTS_MODE or full)",
)
@click.option("--manual", is_flag=True, help="Skip the event classifier (manual collection)")
def parse(
    source,
    origin: str,
    images: tuple[str, ...],
    now: datetime | None,
    mode: str | None,
    manual: bool,
) -> None:
    """Parse a post and print its event record as JSON."""
    from src.art_events import ArtEventsConfig, EventRecordBuilder

    text = source.read()
    config = ArtEventsConfig(mode=mode) if mode else ArtEventsConfig()
    builder = EventRecordBuilder.from_config(config)
    now = now or datetime.now()

    bind_context(origin_ref=origin, mode=config.mode)
    try:
        if manual:
            record = builder.collect(text, origin, images=list(images), now=now)
        else:
            record = builder.build(text, origin, images=list(images), now=now)

        if record is None:
            logger.debug("Post is not an event")
            click.echo("null")
            sys.exit(1)

        logger.debug("Post parsed", event_name=record.event_name, deadline=record.deadline)
        click.echo(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    finally:
        clear_context()


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--mode",
    type=click.Choice(["full", "lean"]),
    default=None,
    help="Parser profile (default: ART_EVENTS_MODE or full)",
)
def check(source, mode: str | None) -> None:
    """Explain how a post is classified."""
    from src.art_events import ArtEventsConfig, EventRecordBuilder

    config = ArtEventsConfig(mode=mode) if mode else ArtEventsConfig()
    builder = EventRecordBuilder.from_config(config)
    result = builder.classifier.classify(source.read())

    click.echo("\n=== Classification ===")
    click.echo(f"  Event:   {'yes' if result.is_event else 'no'}")
    click.echo(f"  Tier:    {result.tier}")
    if result.matched:
        click.echo(f"  Matched: {', '.join(result.matched)}")


if __name__ == "__main__":
    main()
