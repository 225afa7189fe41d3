"""User profile routes."""

from __future__ import annotations

from flask import current_app, jsonify, request

from ...config import BaseConfig
from ...errors import ValidationError
from ...extensions import user_repository
from ...models.user import UserProfile
from ...services import profile as profile_service
from . import bp
from .forms import ProfileUpdateForm


def _current_user(repo) -> UserProfile:
    """Resolve the configured single-tenant user."""

    config: BaseConfig = current_app.config["FINTRACK_CONFIG"]
    return profile_service.resolve_current_user(
        repo,
        username=config.DEFAULT_USERNAME,
        auto_provision=config.AUTO_PROVISION_PROFILE,
    )


@bp.get("/profile")
def get_profile():
    repo = user_repository()
    user = _current_user(repo)
    return jsonify(profile_service.get_profile(repo, user.id).to_dict())


@bp.put("/profile")
def update_profile():
    """Apply a partial profile update; omitted keys are left untouched."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError({"body": ["Expected a JSON object"]})

    update = ProfileUpdateForm.from_mapping(payload).to_update()
    repo = user_repository()
    user = _current_user(repo)
    updated = profile_service.update_profile(repo, user.id, update)
    return jsonify(updated.to_dict())
