"""Step-by-step construction of car listings."""

from __future__ import annotations

import dataclasses

from .models import Car
from .session import UserSession


class CarBuilder:
    """Fluent builder that fills in one car and hands out copies of it."""

    def __init__(self) -> None:
        self._car = Car()

    def set_model(self, model: str) -> CarBuilder:
        self._car.model = model
        return self

    def set_year(self, year: int) -> CarBuilder:
        self._car.year = year
        return self

    def set_mileage(self, mileage: int) -> CarBuilder:
        self._car.mileage = mileage
        return self

    def set_availability(self, availability: str) -> CarBuilder:
        self._car.availability = availability
        return self

    def set_location(self, location: str) -> CarBuilder:
        self._car.location = location
        return self

    def set_price_per_day(self, price: float) -> CarBuilder:
        self._car.price_per_day = float(price)
        return self

    def set_owner_email(self, email: str) -> CarBuilder:
        self._car.owner_email = email
        return self

    def build(self) -> Car:
        """Return a copy of the car built so far."""
        return dataclasses.replace(self._car)


class CarDirector:
    """Drives a builder through the full set of listing fields."""

    def __init__(self, builder: CarBuilder) -> None:
        self._builder = builder

    def construct_car(
        self,
        email: str,
        model: str,
        year: int,
        mileage: int,
        availability: str,
        location: str,
        price: float,
    ) -> Car:
        """Build a car owned by the logged-in user.

        The owner is always taken from the current session; ``email`` is
        accepted for the caller's convenience but not used.
        """
        owner_email = UserSession.instance().logged_in_email()
        return (
            self._builder.set_owner_email(owner_email)
            .set_model(model)
            .set_year(year)
            .set_mileage(mileage)
            .set_availability(availability)
            .set_location(location)
            .set_price_per_day(price)
            .build()
        )