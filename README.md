# driveshare

The core of a peer-to-peer car sharing service. Owners list their cars;
renters find them, book them and send messages to the owners. Listings,
bookings and messages are kept in an SQLite database file through Python's
built-in `sqlite3`. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `driveshare.models`

Dataclasses for the records the service deals in:

- `Car`: `model`, `year`, `mileage`, `location`, `price_per_day`,
  `availability`, `owner_email` and `id`. A new `Car` takes its `id` from a
  counter shared by the whole process, starting at 1; cars read back from
  the database carry the database id instead.
- `Booking`: `car_id`, `renter_email`, `start_date`, `end_date`.
- `Message`: `sender`, `receiver`, `content`, `timestamp`, `car_id`.
- `User`: `email`, `password`, `security_questions`, `security_answers` and
  `balance`, which defaults to 1000.0.

### `driveshare.session`

`UserSession.instance()` returns the one session shared by the process.
It offers `login(email)`, `logout()`, `is_logged_in()` and
`logged_in_email()` (an empty string when nobody is logged in).

### `driveshare.builder`

`CarBuilder` fills in a car through chained `set_model`, `set_year`,
`set_mileage`, `set_availability`, `set_location`, `set_price_per_day` and
`set_owner_email` calls; `build()` returns a copy of the car built so far.

`CarDirector(builder).construct_car(email, model, year, mileage,
availability, location, price)` sets every field in one call. The owner is
always the logged-in user from `UserSession`; the `email` argument is
accepted but not used.

### `driveshare.observers`

- `Observer` (abstract `on_notify(message)`) and `Subject`, which offers
  `add_observer`, `remove_observer` (drops every registration of that
  observer) and `notify_all` (skips `None` entries).
  `NotificationCenter` is a `Subject`.
- `BookingObserver` (abstract `update(message)`) and `ConsoleNotifier`,
  which prints `[Notification] <message>`.

### `driveshare.recovery`

`SecurityQuestionHandler(index, correct_answers)` checks the answer at
position `index` of the answers it is given, prints whether it was right,
and on success passes on to the handler set with `set_next_handler`. A chain
returns `True` only if every link accepts.

```python
from driveshare.recovery import SecurityQuestionHandler

correct = ["blue", "Rex", "Paris"]
first = SecurityQuestionHandler(0, correct)
second = SecurityQuestionHandler(1, correct)
third = SecurityQuestionHandler(2, correct)
first.set_next_handler(second)
second.set_next_handler(third)

first.handle(["blue", "Rex", "Paris"])   # True
first.handle(["blue", "Max", "Paris"])   # False
```

### `driveshare.car_manager`

`CarManager(db_path)` keeps listings in the `cars` table:

- `create_car_table()` creates the table if it is missing.
- `add_car(car)` stores a listing and returns the id the database gave it.
- `get_cars_by_owner(email)` returns that owner's listings.
- `get_available_cars_excluding_user(user_email, location_filter="")`
  returns listings of other owners that are not marked `Booked` and whose
  location contains the filter (SQL `LIKE`).
- `update_car_by_id(car)` overwrites the stored listing with `car.id`;
  `delete_car_by_id(car_id)` removes one.
- `search_available_cars(location, start_date, end_date)` returns stored
  cars at exactly that location with no clashing date booking.

Date-range bookings made with `book_car(car_id, start_date, end_date,
renter_email)` are held in memory only, for the life of the manager. A
booking that overlaps an earlier one for the same car is refused with
`False`; an accepted one is printed and passed to every `BookingObserver`
attached with `attach_observer`. `is_car_available` and the module-level
`is_overlap(start1, end1, start2, end2)` do the checking: dates are ISO
`YYYY-MM-DD` strings, ranges are inclusive, and two ranges overlap unless
one ends strictly before the other starts.

### `driveshare.booking_manager`

`BookingManager(db_path)` keeps bookings in the `bookings` table:
`create_booking_table()`, `book_car(car_id, renter_email)` (always records
the dates `DEFAULT_START_DATE` 2025-04-10 to `DEFAULT_END_DATE` 2025-04-11),
`mark_car_as_unavailable(car_id)` (sets the car's availability to `Booked`
in the `cars` table of the same database) and
`get_bookings_by_renter(renter_email)`.

### `driveshare.message_manager`

`MessageManager(db_path)` keeps chat messages in the `messages` table:
`create_message_table()`, `send_message(message)` and
`get_messages_between(user1, user2, car_id)`, which returns the messages
either way between the two users about that car, ordered by timestamp.

### `driveshare.mediator`

`DriveShareUIMediator` turns named UI events into the `Page` to show
(`LOGIN`, `REGISTER`, `OWNER_LISTINGS`, `DASHBOARD`, `RENTER_BROWSE`,
`PROFILE`). `notify(sender, event)` updates `current_page` and calls the
optional `show_page(page)` callback. A `logout` event from any sender logs
the session out, calls the optional `clear_listings()` callback and returns
to `LOGIN`. Events it does not know are ignored.

```python
from driveshare.mediator import DriveShareUIMediator, Page

mediator = DriveShareUIMediator(show_page=print)
mediator.notify("LoginWindow", "login_success")
assert mediator.current_page is Page.DASHBOARD
```

### Databases

All three managers open their own connection in autocommit mode, so they can
share one database file. Each has `close()` and works as a context manager.
Database errors are raised as `sqlite3.Error`.

## Example

```python
from driveshare.builder import CarBuilder, CarDirector
from driveshare.booking_manager import BookingManager
from driveshare.car_manager import CarManager
from driveshare.session import UserSession

session = UserSession.instance()
session.login("owner@example.com")

with CarManager("driveshare.db") as cars, BookingManager("driveshare.db") as bookings:
    cars.create_car_table()
    bookings.create_booking_table()

    car = CarDirector(CarBuilder()).construct_car(
        "owner@example.com", "Civic", 2020, 15000, "Available", "Springfield", 45.0
    )
    car_id = cars.add_car(car)

    session.login("renter@example.com")
    for listing in cars.get_available_cars_excluding_user("renter@example.com", "Spring"):
        print(listing.model, listing.price_per_day)

    bookings.book_car(car_id, "renter@example.com")
    bookings.mark_car_as_unavailable(car_id)
```

## What the package does not do

- It does not store user accounts: there is no registration, login check
  against stored passwords or password reset. `User` is only a record, and
  `UserSession` trusts whatever e-mail it is given.
- It moves no money: `User.balance` is a plain field and nothing charges or
  pays a balance when a car is booked.
- It has no screens and no command to run. The mediator only tracks which
  page should be shown; drawing pages is left to the caller.