"""The process-wide record of who is logged in."""

from __future__ import annotations


class UserSession:
    """Holds the e-mail of the logged-in user; one shared instance."""

    _instance: UserSession | None = None

    def __init__(self) -> None:
        self._email = ""

    @classmethod
    def instance(cls) -> UserSession:
        """Return the shared session, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def login(self, email: str) -> None:
        self._email = email

    def logout(self) -> None:
        self._email = ""

    def is_logged_in(self) -> bool:
        return bool(self._email)

    def logged_in_email(self) -> str:
        return self._email