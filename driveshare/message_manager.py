"""Storage of chat messages between users."""

from __future__ import annotations

import sqlite3
from os import PathLike

from .models import Message


class MessageManager:
    """Keeps chat messages in the ``messages`` table of an SQLite database."""

    def __init__(self, db_path: str | PathLike[str]) -> None:
        self._conn = sqlite3.connect(db_path, isolation_level=None)

    def __enter__(self) -> MessageManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def create_message_table(self) -> None:
        """Create the ``messages`` table if it does not exist yet."""
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS messages (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                sender_email TEXT,
                receiver_email TEXT,
                message_text TEXT,
                timestamp TEXT,
                car_id INTEGER
            )
            """
        )

    def send_message(self, message: Message) -> None:
        """Store a message."""
        self._conn.execute(
            "INSERT INTO messages (sender_email, receiver_email, message_text, "
            "timestamp, car_id) VALUES (?, ?, ?, ?, ?)",
            (message.sender, message.receiver, message.content, message.timestamp,
             message.car_id),
        )

    def get_messages_between(self, user1: str, user2: str, car_id: int) -> list[Message]:
        """Return the conversation between two users about one car, oldest first."""
        rows = self._conn.execute(
            """
            SELECT sender_email, receiver_email, message_text, timestamp, car_id
            FROM messages
            WHERE car_id = ? AND (
                (sender_email = ? AND receiver_email = ?) OR
                (sender_email = ? AND receiver_email = ?)
            )
            ORDER BY timestamp ASC
            """,
            (car_id, user1, user2, user2, user1),
        )
        return [
            Message(sender or "", receiver or "", text or "", stamp or "", int(cid))
            for sender, receiver, text, stamp, cid in rows
        ]