"""Observer interfaces and the subjects that broadcast to them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BookingObserver(ABC):
    """Receives a message whenever a booking is made."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Handle a booking message."""


class ConsoleNotifier(BookingObserver):
    """Prints booking messages to standard output."""

    def update(self, message: str) -> None:
        print(f"[Notification] {message}")


class Observer(ABC):
    """Receives general notifications from a subject."""

    @abstractmethod
    def on_notify(self, message: str) -> None:
        """Handle a notification."""


class Subject:
    """Keeps a list of observers and broadcasts messages to them."""

    def __init__(self) -> None:
        self._observers: list[Observer | None] = []

    def add_observer(self, observer: Observer | None) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer | None) -> None:
        """Remove every registration of ``observer``."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_all(self, message: str) -> None:
        for observer in self._observers:
            if observer is not None:
                observer.on_notify(message)


class NotificationCenter(Subject):
    """The application's shared notification hub."""