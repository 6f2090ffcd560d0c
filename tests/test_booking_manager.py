import sqlite3

import pytest

from driveshare.booking_manager import BookingManager
from driveshare.car_manager import CarManager
from driveshare.models import Booking, Car

RENTER = "renter@example.com"
OTHER = "other@example.com"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "driveshare.db"


@pytest.fixture
def bookings(db_path):
    with BookingManager(db_path) as bm:
        bm.create_booking_table()
        yield bm


def test_book_and_fetch(bookings):
    bookings.book_car(4, RENTER)
    assert bookings.get_bookings_by_renter(RENTER) == [
        Booking(4, RENTER, "2025-04-10", "2025-04-11")
    ]


def test_only_renters_own_bookings(bookings):
    bookings.book_car(1, RENTER)
    bookings.book_car(2, OTHER)
    bookings.book_car(3, RENTER)
    assert [b.car_id for b in bookings.get_bookings_by_renter(RENTER)] == [1, 3]
    assert [b.car_id for b in bookings.get_bookings_by_renter(OTHER)] == [2]


def test_no_bookings_gives_empty_list(bookings):
    assert bookings.get_bookings_by_renter(RENTER) == []


def test_create_table_is_idempotent(bookings):
    bookings.book_car(9, RENTER)
    bookings.create_booking_table()
    assert len(bookings.get_bookings_by_renter(RENTER)) == 1


def test_mark_car_as_unavailable(db_path, bookings):
    with CarManager(db_path) as cars:
        cars.create_car_table()
        car_id = cars.add_car(
            Car(model="Golf", location="Springfield", availability="Available",
                owner_email=OTHER)
        )
        other_id = cars.add_car(
            Car(model="Polo", location="Springfield", availability="Available",
                owner_email=OTHER)
        )
        bookings.mark_car_as_unavailable(car_id)
        states = {c.id: c.availability for c in cars.get_cars_by_owner(OTHER)}
        assert states == {car_id: "Booked", other_id: "Available"}
        assert [c.id for c in cars.get_available_cars_excluding_user(RENTER)] == [other_id]


def test_mark_without_cars_table_raises(bookings):
    with pytest.raises(sqlite3.OperationalError):
        bookings.mark_car_as_unavailable(1)


def test_book_without_table_raises(db_path):
    with BookingManager(db_path) as bm:
        with pytest.raises(sqlite3.OperationalError):
            bm.book_car(1, RENTER)