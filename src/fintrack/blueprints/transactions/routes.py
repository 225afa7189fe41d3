"""Transaction JSON routes."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify, request

from ...errors import NotFoundError, ValidationError
from ...extensions import transaction_repository
from ...services import ledger
from ...services.trends import resolve_window
from . import bp
from .forms import DateRangeForm, TransactionForm

# Largest value a 64-bit signed INTEGER primary key can hold.
MAX_ID = 2**63 - 1


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError({"body": ["Expected a JSON object"]})
    return payload


def _parse_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError({"id": ["Invalid transaction ID"]}, message="Invalid transaction ID") from None
    if not 1 <= value <= MAX_ID:
        raise NotFoundError("Transaction not found")
    return value


@bp.get("")
def list_transactions():
    """Return every transaction, newest first, optionally for one category."""

    category = (request.args.get("category") or "").strip() or None
    rows = transaction_repository().list_all(category=category)
    return jsonify([tx.to_dict() for tx in rows])


@bp.get("/summary")
def summary():
    return jsonify(ledger.summarize(transaction_repository()).to_dict())


@bp.get("/range")
def list_range():
    """Return transactions dated within ``startDate``..``endDate`` inclusive."""

    form = DateRangeForm.from_mapping(request.args).validated()
    rows = transaction_repository().list_by_date_range(form.start_date, form.end_date)
    return jsonify([tx.to_dict() for tx in rows])


@bp.get("/trends")
def trends():
    """Chart-ready income/expense buckets for a short, medium or long window."""

    window = resolve_window(request.args.get("window"))
    date_range, series = ledger.trend_series(transaction_repository(), window)
    return jsonify(
        {
            "window": window.value,
            **date_range.to_dict(),
            "series": [point.to_dict() for point in series],
        }
    )


@bp.get("/<transaction_id>")
def get_transaction(transaction_id: str):
    transaction = ledger.get_transaction(transaction_repository(), _parse_id(transaction_id))
    return jsonify(transaction.to_dict())


@bp.post("")
def create_transaction():
    """Validate and persist a new transaction."""

    form = TransactionForm.from_mapping(_json_body()).validated()
    transaction = ledger.record_transaction(
        transaction_repository(),
        description=form.description,
        amount=form.amount,
        type=form.type,
        category=form.category,
        occurred_on=form.occurred_on,
    )
    return jsonify(transaction.to_dict()), 201


@bp.delete("/<transaction_id>")
def delete_transaction(transaction_id: str):
    ledger.remove_transaction(transaction_repository(), _parse_id(transaction_id))
    return Response(status=204)
