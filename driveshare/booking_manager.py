"""Storage of confirmed bookings."""

from __future__ import annotations

import logging
import sqlite3
from os import PathLike

from .models import Booking

logger = logging.getLogger(__name__)

DEFAULT_START_DATE = "2025-04-10"
DEFAULT_END_DATE = "2025-04-11"


class BookingManager:
    """Keeps bookings in the ``bookings`` table of an SQLite database."""

    def __init__(self, db_path: str | PathLike[str]) -> None:
        self._conn = sqlite3.connect(db_path, isolation_level=None)

    def __enter__(self) -> BookingManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def create_booking_table(self) -> None:
        """Create the ``bookings`` table if it does not exist yet."""
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS bookings (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                car_id INTEGER,
                renter_email TEXT,
                start_date TEXT,
                end_date TEXT
            )
            """
        )

    def book_car(self, car_id: int, renter_email: str) -> None:
        """Record a booking of the car over the standard booking dates."""
        self._conn.execute(
            "INSERT INTO bookings (car_id, renter_email, start_date, end_date) "
            "VALUES (?, ?, ?, ?)",
            (car_id, renter_email, DEFAULT_START_DATE, DEFAULT_END_DATE),
        )

    def mark_car_as_unavailable(self, car_id: int) -> None:
        """Set the car's availability to ``Booked`` in the ``cars`` table."""
        self._conn.execute("UPDATE cars SET availability = 'Booked' WHERE id = ?", (car_id,))

    def get_bookings_by_renter(self, renter_email: str) -> list[Booking]:
        """Return every booking made by ``renter_email``."""
        logger.debug("getBookingsByRenter() for: %s", renter_email)
        rows = self._conn.execute(
            "SELECT car_id, renter_email, start_date, end_date FROM bookings "
            "WHERE renter_email = ?",
            (renter_email,),
        )
        bookings = [
            Booking(int(car_id), email or "", start or "", end or "")
            for car_id, email, start, end in rows
        ]
        logger.debug("Returning bookings count: %d", len(bookings))
        return bookings