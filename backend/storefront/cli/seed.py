"""Flask CLI commands for seeding the storefront database."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from storefront.core.database import ensure_ready, sync
from storefront.core.extensions import db
from storefront.seeds import seed_data

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for seed modules when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("storefront.seeds").setLevel(level)
    LOGGER.setLevel(level)


def _echo_summary(summary: dict[str, dict[str, int]]) -> None:
    """Pretty-print a tabular summary of seed results."""
    click.echo("Seed summary:")
    if not summary:
        click.echo("  (no changes)")
        return
    width = max(len(name) for name in summary)
    for table, counters in summary.items():
        if counters.get("aborted"):
            click.echo(f"  {table.ljust(width)}  FAILED (see log)")
            continue
        created = counters.get("created", 0)
        failed = counters.get("failed", 0)
        click.echo(f"  {table.ljust(width)}  created={created:>2}  failed={failed:>2}")


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    app_env = str(config.get("APP_ENV", "")).lower()
    if app_env == "production" or not (config.get("DEBUG") or config.get("TESTING")):
        raise click.UsageError(
            "The 'flask seed fresh' command is restricted to non-production environments."
        )


def _run_seed() -> dict[str, dict[str, int]]:
    try:
        results = seed_data.seed_everything(db)
    except Exception as exc:  # pragma: no cover - CLI safeguard
        db.session.rollback()
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    return seed_data.summarize(results)


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for seeding.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Collection of database seeding commands."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@seed_cli.command("run")
@with_appcontext
def run_command() -> None:
    """Seed users, things and favorites into the current schema."""
    _echo_summary(_run_seed())


@seed_cli.command("fresh")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def fresh_command(yes: bool) -> None:
    """Drop all tables, recreate the schema, and seed the catalogue."""
    _ensure_non_production()
    if not yes:
        click.confirm(
            "This will DROP all storefront tables and recreate them. Continue?",
            abort=True,
        )
    try:
        ensure_ready(db, attempts=current_app.config.get("SEED_READY_ATTEMPTS", 5))
    except RuntimeError as exc:
        raise click.ClickException(str(exc)) from exc
    sync(db, force=True)
    _echo_summary(_run_seed())
