"""Flask CLI commands for FinTrack."""

from __future__ import annotations

import json
from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

import click
from flask import Flask, current_app
from flask.cli import with_appcontext

from .errors import ValidationError
from .extensions import EXTENSION_KEY, transaction_repository
from .infra.database import init_database
from .models.timestamps import utc_today
from .models.transaction import TransactionType
from .services import ledger
from .services.trends import Window, resolve_window

# (days ago, description, amount, type, category)
_DEMO_ROWS: tuple[tuple[int, str, str, TransactionType, str], ...] = (
    (1, "Monthly salary", "4200.00", TransactionType.INCOME, "salary"),
    (2, "Groceries", "125.34", TransactionType.EXPENSE, "food"),
    (5, "Electric bill", "89.50", TransactionType.EXPENSE, "utilities"),
    (12, "Weekend dinner", "230.00", TransactionType.EXPENSE, "food"),
    (18, "Design gig", "150.00", TransactionType.INCOME, "freelance"),
    (33, "Monthly salary", "4100.00", TransactionType.INCOME, "salary"),
    (41, "Groceries", "118.75", TransactionType.EXPENSE, "food"),
    (95, "Train tickets", "64.20", TransactionType.EXPENSE, "travel"),
    (200, "Dividend payout", "48.10", TransactionType.INCOME, "investment"),
)


def init_app(app: Flask) -> None:
    """Register CLI commands on the Flask app."""

    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)
    app.cli.add_command(summary_command)
    app.cli.add_command(trends_command)


@click.command("init-db")
@with_appcontext
def init_db_command() -> None:
    """Create database tables."""

    init_database(current_app.extensions[EXTENSION_KEY]["engine"])
    click.echo("Database initialized.")


@click.command("seed-demo")
@with_appcontext
def seed_demo_command() -> None:
    """Insert a handful of demo transactions dated relative to today."""

    repo = transaction_repository()
    today = datetime.combine(utc_today(), time.min, tzinfo=timezone.utc)
    for days_ago, description, amount, kind, category in _DEMO_ROWS:
        ledger.record_transaction(
            repo,
            description=description,
            amount=Decimal(amount),
            type=kind,
            category=category,
            occurred_on=today - timedelta(days=days_ago),
        )
    click.echo(f"Seeded {len(_DEMO_ROWS)} demo transactions.")


@click.command("summary")
@with_appcontext
def summary_command() -> None:
    """Print income, expense and net totals as JSON."""

    click.echo(json.dumps(ledger.summarize(transaction_repository()).to_dict(), indent=2))


@click.command("trends")
@click.option(
    "--window",
    default=Window.SHORT.value,
    show_default=True,
    help="short (1 month), medium (6 months) or long (1 year); 1M/6M/1Y also accepted.",
)
@with_appcontext
def trends_command(window: str) -> None:
    """Print the bucketed income/expense series for a window."""

    try:
        resolved = resolve_window(window)
    except ValidationError as exc:
        raise click.BadParameter(exc.errors["window"][0], param_hint="--window") from exc
    date_range, series = ledger.trend_series(transaction_repository(), resolved)
    click.echo(f"{resolved.value}: {date_range.start_date} .. {date_range.end_date}")
    for point in series:
        click.echo(f"{point.label:>10}  income {point.income:>12.2f}  expenses {point.expenses:>12.2f}")
