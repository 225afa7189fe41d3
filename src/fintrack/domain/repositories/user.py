"""User profile repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.user import UserProfile


class UserRepository(Protocol):
    """Persistence operations for user profiles."""

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        ...

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        ...

    def create(self, user: UserProfile) -> UserProfile:
        ...

    def update_fields(self, user_id: int, changes: Mapping[str, Any]) -> Optional[UserProfile]:
        """Apply ``changes`` to the stored profile; None when the user is missing."""
        ...
