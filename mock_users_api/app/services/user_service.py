"""
In-memory user store.

``UserStore`` owns the ordered list of user records and is the only
object that mutates it.  Records are plain dictionaries; every public
method returns copies so that callers cannot change stored data
without going through the store.

Identifiers are assigned as one more than the highest id the store has
ever held, so ids of deleted users are never handed out again.
"""

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from mock_users_api.app.schemas.user import UserRead


logger = logging.getLogger(__name__)

User = Dict[str, Any]


def default_users() -> List[User]:
    """Return the records a fresh store is seeded with."""
    seed = [
        UserRead(id=1, username="anson", displayName="Anson"),
        UserRead(id=2, username="jack", displayName="Jack"),
        UserRead(id=3, username="adam", displayName="Adam"),
        UserRead(id=4, username="tina", displayName="Tina"),
        UserRead(id=5, username="jason", displayName="Jason"),
        UserRead(id=6, username="henry", displayName="Henry"),
        UserRead(id=7, username="marilyn", displayName="Marilyn"),
    ]
    return [user.model_dump() for user in seed]


def _without_id(fields: Mapping[str, Any]) -> User:
    return {key: value for key, value in fields.items() if key != "id"}


class UserStore:
    """Ordered, lock-protected collection of user records.

    Positions returned by :meth:`find` are valid until the next
    :meth:`remove`.  Callers resolve and act on a position within the
    same request.
    """

    def __init__(self, users: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        if users is None:
            users = default_users()
        self._lock = threading.Lock()
        self._users: List[User] = [dict(user) for user in users]
        self._last_id = max((user["id"] for user in self._users), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def all(self) -> List[User]:
        with self._lock:
            return copy.deepcopy(self._users)

    def get(self, index: int) -> User:
        with self._lock:
            return copy.deepcopy(self._users[index])

    def find(self, user_id: int) -> Optional[int]:
        """Return the position of the user with ``user_id`` or ``None``."""
        with self._lock:
            for index, user in enumerate(self._users):
                if user.get("id") == user_id:
                    return index
        return None

    def filter(self, field: str, value: str) -> List[User]:
        """Return users whose ``field`` equals ``value``, ignoring case.

        Only string fields are compared; records where the field is
        missing or holds another type never match.
        """
        needle = value.lower()
        with self._lock:
            matches = [
                user
                for user in self._users
                if isinstance(user.get(field), str) and user[field].lower() == needle
            ]
            return copy.deepcopy(matches)

    def insert(self, fields: Mapping[str, Any]) -> User:
        """Append a new user built from ``fields`` and return it."""
        with self._lock:
            self._last_id = max([self._last_id, *(user["id"] for user in self._users)]) + 1
            user = {"id": self._last_id, **_without_id(fields)}
            self._users.append(user)
            logger.info("Created user %s", user["id"])
            return copy.deepcopy(user)

    def replace(self, index: int, user_id: int, fields: Mapping[str, Any]) -> User:
        """Replace the record at ``index`` entirely, keeping ``user_id``."""
        with self._lock:
            user = {"id": user_id, **_without_id(fields)}
            self._users[index] = user
            logger.info("Replaced user %s", user_id)
            return copy.deepcopy(user)

    def merge(self, index: int, fields: Mapping[str, Any]) -> User:
        """Shallow-merge ``fields`` into the record at ``index``."""
        with self._lock:
            user = {**self._users[index], **_without_id(fields)}
            self._users[index] = user
            logger.info("Updated user %s", user["id"])
            return copy.deepcopy(user)

    def remove(self, index: int) -> User:
        """Delete the record at ``index`` and return it."""
        with self._lock:
            user = self._users.pop(index)
            logger.info("Deleted user %s", user["id"])
            return user
