import pytest

from driveshare.builder import CarBuilder, CarDirector
from driveshare.session import UserSession


@pytest.fixture
def session():
    current = UserSession.instance()
    current.logout()
    yield current
    current.logout()


def test_setters_return_builder():
    builder = CarBuilder()
    assert builder.set_model("Corolla") is builder
    assert builder.set_year(2020) is builder
    assert builder.set_price_per_day(30) is builder


def test_build_contains_all_fields():
    car = (
        CarBuilder()
        .set_model("Corolla")
        .set_year(2020)
        .set_mileage(15000)
        .set_availability("Available")
        .set_location("Denver")
        .set_price_per_day(45.0)
        .set_owner_email("owner@example.com")
        .build()
    )
    assert car.model == "Corolla"
    assert car.year == 2020
    assert car.mileage == 15000
    assert car.availability == "Available"
    assert car.location == "Denver"
    assert car.price_per_day == 45.0
    assert car.owner_email == "owner@example.com"


def test_price_is_stored_as_float():
    car = CarBuilder().set_price_per_day(30).build()
    assert isinstance(car.price_per_day, float)
    assert car.price_per_day == 30


def test_build_returns_independent_copies():
    builder = CarBuilder().set_model("Golf")
    first = builder.build()
    first.model = "Changed"
    second = builder.build()
    assert second.model == "Golf"
    assert first.id == second.id


def test_director_uses_session_owner(session):
    session.login("owner@example.com")
    director = CarDirector(CarBuilder())
    car = director.construct_car(
        "other@example.com", "Model 3", 2022, 8000, "Available", "Seattle", 99.0
    )
    assert car.owner_email == "owner@example.com"
    assert car.model == "Model 3"
    assert car.year == 2022
    assert car.mileage == 8000
    assert car.availability == "Available"
    assert car.location == "Seattle"
    assert car.price_per_day == 99.0


def test_director_without_login_leaves_owner_empty(session):
    director = CarDirector(CarBuilder())
    car = director.construct_car(
        "other@example.com", "Model 3", 2022, 8000, "Available", "Seattle", 99.0
    )
    assert car.owner_email == ""