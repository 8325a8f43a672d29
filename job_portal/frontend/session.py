"""
Client-side authentication state.

The session lives in client-local persistent storage and is never re-validated
against the server; a stale token is only noticed when a protected call fails.
Page guards built on it are a convenience, the API enforces access.
"""
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_SESSION_FILE = Path.home() / ".job_portal" / "session.json"


@dataclass(frozen=True)
class Session:
    token: Optional[str] = None
    email: Optional[str] = None
    is_admin: bool = False

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token)

    @property
    def is_user(self) -> bool:
        """Logged in with a regular (non-admin) account."""
        return self.is_logged_in and not self.is_admin


ANONYMOUS = Session()


class MemoryStorage:
    """Keeps the session for the lifetime of the process."""

    def __init__(self):
        self._data: Dict[str, object] = {}

    def read(self) -> Dict[str, object]:
        return dict(self._data)

    def write(self, data: Dict[str, object]) -> None:
        self._data = dict(data)

    def clear(self) -> None:
        self._data = {}


class FileStorage:
    """Persists the session as a small JSON file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_SESSION_FILE):
        self.path = Path(path)

    def read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring session file %s: expected an object", self.path)
            return {}
        return data

    def write(self, data: Dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


class SessionManager:
    """Loads, stores and clears the session in the given storage."""

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else MemoryStorage()

    def load(self) -> Session:
        data = self.storage.read()
        if not data.get("token"):
            return ANONYMOUS
        return Session(
            token=data["token"],
            email=data.get("email"),
            is_admin=bool(data.get("is_admin", False)),
        )

    def set_auth(self, token: str, email: str, is_admin: bool = False) -> Session:
        session = Session(token=token, email=email, is_admin=is_admin)
        self.storage.write(asdict(session))
        return session

    def clear(self) -> Session:
        self.storage.clear()
        return ANONYMOUS
