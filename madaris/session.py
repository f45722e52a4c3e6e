"""Session store: the authenticated identity and bearer credential.

A SessionStore is constructed explicitly and handed to whatever needs the
credential (the directory client, the dashboard). Memory and durable storage
always change together: both `user` and `userToken` are written on login and
both are removed on logout.
"""

import json

import requests

from madaris.config import (
    API_BASE_URL,
    DEFAULT_USER_ID,
    DEFAULT_USER_NAME,
    LOGIN_PATH,
    TOKEN_KEY,
    USER_KEY,
)
from madaris.schema import Identity, Session
from madaris.utils import post


def _extract_token(data) -> str | None:
    """Return the token of a successful login body, or None for any other shape."""
    if not isinstance(data, dict) or not data.get("success"):
        return None
    results = data.get("results")
    if not isinstance(results, dict):
        return None
    token = results.get("token")
    if not isinstance(token, str) or not token:
        return None
    return token


class SessionStore:
    def __init__(self, storage, *, base_url: str = API_BASE_URL) -> None:
        self.storage = storage
        self.base_url = base_url.rstrip("/")
        self._session: Session | None = None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def identity(self) -> Identity | None:
        return self._session.identity if self._session else None

    @property
    def credential(self) -> str | None:
        return self._session.credential if self._session else None

    def login(self, username: str, password: str) -> bool:
        """Authenticate against the API.

        Returns True and persists the session when the response carries
        ``success`` and ``results.token``. Any other response, or a transport
        failure, returns False and leaves the current state untouched.
        """
        try:
            response = post(
                f"{self.base_url}{LOGIN_PATH}",
                json={"username": username, "password": password},
                check=False,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"WARNING: Login request failed: {e}")
            return False

        token = _extract_token(data)
        if token is None:
            return False

        identity = Identity(id=DEFAULT_USER_ID, username=username, name=DEFAULT_USER_NAME)
        try:
            self.storage.set_many({
                USER_KEY: json.dumps(identity.to_dict(), ensure_ascii=False),
                TOKEN_KEY: token,
            })
        except OSError as e:
            print(f"WARNING: Could not save session: {e}")
            return False
        self._session = Session(identity=identity, credential=token)
        return True

    def logout(self) -> None:
        """Forget the session in memory and in storage. Safe to call when logged out."""
        self._session = None
        try:
            self.storage.remove_many([USER_KEY, TOKEN_KEY])
        except OSError as e:
            print(f"WARNING: Could not clear saved session: {e}")

    def restore_on_start(self) -> bool:
        """Rebuild the session from storage when both entries are present."""
        saved_user = self.storage.get(USER_KEY)
        token = self.storage.get(TOKEN_KEY)
        if not saved_user or not token:
            self._session = None
            return False
        try:
            data = json.loads(saved_user)
        except ValueError:
            self._session = None
            return False
        if not isinstance(data, dict):
            self._session = None
            return False
        self._session = Session(identity=Identity.from_dict(data), credential=token)
        return True
