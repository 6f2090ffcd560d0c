"""Storage and search of car listings, plus in-memory date bookings."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from os import PathLike

from .models import Booking, Car
from .observers import BookingObserver

_SELECT_CARS = (
    "SELECT id, model, year, mileage, location, price_per_day, availability, owner_email "
    "FROM cars"
)


def is_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """Return whether two inclusive ISO date ranges share at least one day."""
    return not (end1 < start2 or end2 < start1)


def _car_from_row(row: Sequence) -> Car:
    car_id, model, year, mileage, location, price, availability, owner = row
    return Car(
        model=model or "",
        year=int(year or 0),
        mileage=int(mileage or 0),
        location=location or "",
        price_per_day=float(price or 0.0),
        availability=availability or "",
        owner_email=owner or "",
        id=int(car_id),
    )


class CarManager:
    """Keeps car listings in the ``cars`` table of an SQLite database.

    Date-range bookings made through :meth:`book_car` are held in memory
    and announced to the attached booking observers.
    """

    def __init__(self, db_path: str | PathLike[str]) -> None:
        self._conn = sqlite3.connect(db_path, isolation_level=None)
        self._bookings: list[Booking] = []
        self._observers: list[BookingObserver] = []

    def __enter__(self) -> CarManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def create_car_table(self) -> None:
        """Create the ``cars`` table if it does not exist yet."""
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS cars (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                owner_email TEXT,
                model TEXT,
                year INTEGER,
                mileage INTEGER,
                location TEXT,
                availability TEXT,
                price_per_day REAL
            )
            """
        )

    def add_car(self, car: Car) -> int:
        """Store a new listing and return the id the database gave it."""
        cursor = self._conn.execute(
            "INSERT INTO cars (owner_email, model, year, mileage, location, "
            "availability, price_per_day) VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                car.owner_email,
                car.model,
                car.year,
                car.mileage,
                car.location,
                car.availability,
                car.price_per_day,
            ),
        )
        return int(cursor.lastrowid)

    def search_available_cars(self, location: str, start_date: str, end_date: str) -> list[Car]:
        """Return the stored cars at ``location`` free over the given dates."""
        rows = self._conn.execute(f"{_SELECT_CARS} WHERE location = ?", (location,))
        cars = [_car_from_row(row) for row in rows]
        return [car for car in cars if self.is_car_available(car.id, start_date, end_date)]

    def get_cars_by_owner(self, email: str) -> list[Car]:
        """Return every listing owned by ``email``."""
        rows = self._conn.execute(f"{_SELECT_CARS} WHERE owner_email = ?", (email,))
        return [_car_from_row(row) for row in rows]

    def get_available_cars_excluding_user(
        self, user_email: str, location_filter: str = ""
    ) -> list[Car]:
        """Return unbooked listings of other owners whose location contains the filter."""
        rows = self._conn.execute(
            f"{_SELECT_CARS} WHERE owner_email != ? AND availability != 'Booked' "
            "AND location LIKE ?",
            (user_email, f"%{location_filter}%"),
        )
        return [_car_from_row(row) for row in rows]

    def is_car_available(self, car_id: int, start_date: str, end_date: str) -> bool:
        """Return whether no in-memory booking of the car overlaps the dates."""
        return not any(
            booking.car_id == car_id
            and is_overlap(booking.start_date, booking.end_date, start_date, end_date)
            for booking in self._bookings
        )

    def book_car(self, car_id: int, start_date: str, end_date: str, renter_email: str) -> bool:
        """Book the car for the dates; return False if they clash with a booking."""
        if not self.is_car_available(car_id, start_date, end_date):
            print("Booking conflict: Car is not available for the selected dates.")
            return False
        self._bookings.append(Booking(car_id, renter_email, start_date, end_date))
        message = f"Car ID {car_id} booked from {start_date} to {end_date} by {renter_email}"
        print(message)
        self.notify_observers(message)
        return True

    def attach_observer(self, observer: BookingObserver) -> None:
        self._observers.append(observer)

    def notify_observers(self, message: str) -> None:
        for observer in self._observers:
            observer.update(message)

    def delete_car_by_id(self, car_id: int) -> None:
        """Delete the listing with the given id, if there is one."""
        self._conn.execute("DELETE FROM cars WHERE id = ?", (car_id,))

    def update_car_by_id(self, car: Car) -> None:
        """Overwrite the stored listing whose id matches ``car.id``."""
        self._conn.execute(
            "UPDATE cars SET model = ?, year = ?, mileage = ?, location = ?, "
            "price_per_day = ?, availability = ? WHERE id = ?",
            (
                car.model,
                car.year,
                car.mileage,
                car.location,
                car.price_per_day,
                car.availability,
                car.id,
            ),
        )