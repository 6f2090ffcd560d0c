"""Car sharing core: listings, bookings, messages, session, recovery checks and navigation."""

__version__ = "0.1.0"