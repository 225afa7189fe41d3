"""Category vocabulary blueprint."""

from __future__ import annotations

from flask import Blueprint, jsonify

from ...constants.categories import SUGGESTED_CATEGORIES

bp = Blueprint("categories", __name__, url_prefix="/categories")


@bp.get("")
def list_categories():
    """Suggested categories for input forms; the store accepts any token."""

    return jsonify([category.to_dict() for category in SUGGESTED_CATEGORIES])


__all__ = ["bp"]
