"""User profile provisioning and partial updates."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Optional, Union

from argon2 import PasswordHasher

from ..domain.repositories.user import UserRepository
from ..errors import NotFoundError
from ..logging_config import get_logger
from ..models.user import UserProfile

logger = get_logger(__name__)

_hasher = PasswordHasher()


class _Unset:
    """Marker for a profile field the caller did not send."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile change. ``UNSET`` means "leave alone"; ``None`` clears the field."""

    full_name: Union[str, None, _Unset] = UNSET
    email: Union[str, None, _Unset] = UNSET
    phone: Union[str, None, _Unset] = UNSET
    avatar: Union[str, None, _Unset] = UNSET
    occupation: Union[str, None, _Unset] = UNSET
    monthly_income: Union[Decimal, None, _Unset] = UNSET

    def changes(self) -> dict[str, Any]:
        """Only the fields that were explicitly provided."""

        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not UNSET
        }


def ensure_default_profile(repo: UserRepository, *, username: str) -> UserProfile:
    """Return the profile for ``username``, creating it on first use."""

    existing = repo.get_by_username(username)
    if existing is not None:
        return existing

    # Nobody signs in as the provisioned user; the credential only has to be unguessable.
    placeholder = _hasher.hash(secrets.token_urlsafe(16))
    user = repo.create(
        UserProfile(
            username=username,
            password_hash=placeholder,
            full_name="Demo User",
            email=f"{username}@example.com",
        )
    )
    logger.info("Provisioned default profile", extra={"user_id": user.id, "username": username})
    return user


def resolve_current_user(
    repo: UserRepository, *, username: str, auto_provision: bool = True
) -> UserProfile:
    """Look up the configured single-tenant user, provisioning when allowed."""

    if auto_provision:
        return ensure_default_profile(repo, username=username)
    user = repo.get_by_username(username)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_profile(repo: UserRepository, user_id: int) -> UserProfile:
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(repo: UserRepository, user_id: int, update: ProfileUpdate) -> UserProfile:
    """Apply the provided fields of ``update`` and return the stored profile."""

    changes = update.changes()
    if not changes:
        return get_profile(repo, user_id)

    user = repo.update_fields(user_id, changes)
    if user is None:
        raise NotFoundError("User not found")
    logger.info("Profile updated", extra={"user_id": user_id, "fields": sorted(changes)})
    return user


__all__ = [
    "ProfileUpdate",
    "UNSET",
    "ensure_default_profile",
    "get_profile",
    "resolve_current_user",
    "update_profile",
]
