from __future__ import annotations

from typing import MutableMapping, Optional

TOKEN_KEY = "admin_token"


class AdminSession:
    """
    Admin credential for the current browser session.
    Wraps the signed session cookie (request.session); created on login, cleared on logout or 401.
    """

    def __init__(self, store: MutableMapping[str, object]):
        self._store = store

    @property
    def token(self) -> Optional[str]:
        tok = self._store.get(TOKEN_KEY)
        return tok if isinstance(tok, str) and tok else None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, token: str) -> None:
        self._store[TOKEN_KEY] = token

    def clear(self) -> None:
        self._store.pop(TOKEN_KEY, None)

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
