"""Plain data records: cars, bookings, chat messages and users."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_car_ids = itertools.count(1)


def _next_car_id() -> int:
    return next(_car_ids)


@dataclass
class Car:
    """A car listing.

    Each new car takes the next id from a process-wide counter. The id is
    replaced by the database id once the car has been stored.
    """

    model: str = ""
    year: int = 0
    mileage: int = 0
    location: str = ""
    price_per_day: float = 0.0
    availability: str = ""
    owner_email: str = ""
    id: int = field(default_factory=_next_car_id)


@dataclass
class Booking:
    """A renter's booking of a car for a date range."""

    car_id: int
    renter_email: str
    start_date: str
    end_date: str


@dataclass
class Message:
    """A chat message between two users about one car."""

    sender: str
    receiver: str
    content: str
    timestamp: str
    car_id: int


@dataclass
class User:
    """A registered user with security questions and an account balance."""

    email: str
    password: str
    security_questions: list[str]
    security_answers: list[str]
    balance: float = 1000.0