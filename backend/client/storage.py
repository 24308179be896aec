"""
Client-side session cache.

Holds the bearer token and the last known user profile between calls. The
cache lives in memory, or in a small JSON file when a path is given so a
session survives restarts of the calling program.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "user_data"


class TokenStore:
    """
    Key/value cache for the token and user.

    Usage:
        store = TokenStore("~/.accountkit/session.json")
        store.set_token(token)
        store.get_token()  # token
        store.clear()
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path).expanduser() if path is not None else None
        self._data: dict[str, Any] = self._read()

    def _read(self) -> dict[str, Any]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session cache %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed session cache %s", self.path)
            return {}
        return data

    def _write(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def _set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._write()

    def _remove(self, *keys: str) -> None:
        for key in keys:
            self._data.pop(key, None)
        self._write()

    def set_token(self, token: str) -> None:
        self._set(TOKEN_KEY, token)

    def get_token(self) -> Optional[str]:
        token = self._data.get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def remove_token(self) -> None:
        self._remove(TOKEN_KEY)

    def set_user(self, user: dict[str, Any]) -> None:
        self._set(USER_KEY, user)

    def get_user(self) -> Optional[dict[str, Any]]:
        user = self._data.get(USER_KEY)
        return user if isinstance(user, dict) else None

    def remove_user(self) -> None:
        self._remove(USER_KEY)

    def clear(self) -> None:
        """Forget both the token and the user."""
        self._remove(TOKEN_KEY, USER_KEY)
