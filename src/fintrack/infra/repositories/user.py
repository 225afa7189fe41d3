"""SQLModel implementation of the user profile repository."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlmodel import select

from ...models.timestamps import utcnow
from ...models.user import EDITABLE_PROFILE_FIELDS, UserProfile
from ..database import SessionFactory


class SQLModelUserRepository:
    """SQLModel-based user profile repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        with self.session_factory() as session:
            user = session.get(UserProfile, user_id)
            if user:
                session.expunge(user)
            return user

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        with self.session_factory() as session:
            user = session.exec(
                select(UserProfile).where(UserProfile.username == username.strip())
            ).first()
            if user:
                session.expunge(user)
            return user

    def create(self, user: UserProfile) -> UserProfile:
        with self.session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    def update_fields(self, user_id: int, changes: Mapping[str, Any]) -> Optional[UserProfile]:
        """Apply editable field changes and bump ``updated_at``."""
        unknown = set(changes) - set(EDITABLE_PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Profile fields are not editable: {sorted(unknown)}")
        with self.session_factory() as session:
            user = session.get(UserProfile, user_id)
            if user is None:
                return None
            for name, value in changes.items():
                setattr(user, name, value)
            user.updated_at = utcnow()
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user


__all__ = ["SQLModelUserRepository"]
