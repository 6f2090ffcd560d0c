"""Navigation between the application's pages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum

from .session import UserSession


class Page(IntEnum):
    """The application's pages, numbered in display-stack order."""

    LOGIN = 0
    REGISTER = 1
    OWNER_LISTINGS = 2
    DASHBOARD = 3
    RENTER_BROWSE = 4
    PROFILE = 5


class UIMediator(ABC):
    """Receives events from UI components."""

    @abstractmethod
    def notify(self, sender: str, event: str) -> None:
        """Handle ``event`` raised by the component named ``sender``."""


_BACK_TO_DASHBOARD_SENDERS = frozenset(
    {"MainMenuUI", "RenterBrowseUI", "UserProfileUI", "MessageUI"}
)

_ROUTES: dict[tuple[str, str], Page] = {
    ("LoginWindow", "login_success"): Page.DASHBOARD,
    ("LoginWindow", "go_to_register"): Page.REGISTER,
    ("Dashboard", "go_to_owner"): Page.OWNER_LISTINGS,
    ("Dashboard", "go_to_renter"): Page.RENTER_BROWSE,
    ("RegisterWindow", "back_to_login"): Page.LOGIN,
    ("Dashboard", "go_to_profile"): Page.PROFILE,
}


class DriveShareUIMediator(UIMediator):
    """Switches the current page in response to UI events.

    ``show_page`` is called with each page switched to; ``clear_listings``
    is called on logout so the owner's listing view forgets its rows.
    """

    def __init__(
        self,
        show_page: Callable[[Page], None] | None = None,
        clear_listings: Callable[[], None] | None = None,
    ) -> None:
        self.current_page = Page.LOGIN
        self._show_page = show_page
        self._clear_listings = clear_listings

    def _switch(self, page: Page) -> None:
        self.current_page = page
        if self._show_page is not None:
            self._show_page(page)

    def notify(self, sender: str, event: str) -> None:
        page = _ROUTES.get((sender, event))
        if page is not None and event != "logout":
            self._switch(page)
        elif event == "logout":
            UserSession.instance().logout()
            if self._clear_listings is not None:
                self._clear_listings()
            self._switch(Page.LOGIN)
        elif sender in _BACK_TO_DASHBOARD_SENDERS and event == "back_to_dashboard":
            self._switch(Page.DASHBOARD)