from driveshare.models import Booking, Car, Message, User


def test_car_ids_increase_per_instance():
    first = Car()
    second = Car()
    assert second.id == first.id + 1


def test_default_car_is_empty():
    car = Car()
    assert (car.model, car.location, car.availability, car.owner_email) == ("", "", "", "")
    assert car.year == 0
    assert car.mileage == 0
    assert car.price_per_day == 0.0


def test_car_keeps_given_values_and_takes_new_id():
    before = Car()
    car = Car("Civic", 2019, 42000, "Austin", 55.5, "Available")
    assert car.model == "Civic"
    assert car.year == 2019
    assert car.mileage == 42000
    assert car.location == "Austin"
    assert car.price_per_day == 55.5
    assert car.availability == "Available"
    assert car.id > before.id


def test_car_fields_are_mutable():
    car = Car()
    car.id = 77
    car.owner_email = "owner@example.com"
    car.price_per_day = 12.0
    assert car.id == 77
    assert car.owner_email == "owner@example.com"
    assert car.price_per_day == 12.0


def test_booking_holds_fields():
    booking = Booking(3, "renter@example.com", "2025-04-10", "2025-04-11")
    assert booking.car_id == 3
    assert booking.renter_email == "renter@example.com"
    assert booking.start_date == "2025-04-10"
    assert booking.end_date == "2025-04-11"


def test_message_holds_fields():
    msg = Message("a@example.com", "b@example.com", "hi", "2025-01-01T10:00:00", 9)
    assert msg == Message("a@example.com", "b@example.com", "hi", "2025-01-01T10:00:00", 9)
    assert msg.car_id == 9
    assert msg.content == "hi"


def test_user_default_balance():
    password = "password"
    user = User("u@example.com", password, ["q1", "q2", "q3"], ["a1", "a2", "a3"])
    assert user.balance == 1000.0
    assert user.password == password
    assert user.security_questions == ["q1", "q2", "q3"]
    assert user.security_answers == ["a1", "a2", "a3"]


def test_user_balance_can_change():
    password = "password"
    user = User("u@example.com", password, [], [], 250.0)
    user.balance = 100.0
    assert user.balance == 100.0