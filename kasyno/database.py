"""SQLite storage for member wallets and cooldowns."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List, Union

from kasyno.models import Timeouts, User, UserData

PathLike = Union[str, Path]

TIMEOUT_COLUMNS = frozenset(
    {"last_crime", "last_rob", "last_slut", "last_work", "last_hazarded"}
)

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY,
        cash FLOAT NOT NULL DEFAULT 0,
        bank FLOAT NOT NULL DEFAULT 0
    )""",
    """CREATE TABLE IF NOT EXISTS timeouts (
        user_id INTEGER PRIMARY KEY,
        last_crime INTEGER NOT NULL DEFAULT 0,
        last_rob INTEGER NOT NULL DEFAULT 0,
        last_slut INTEGER NOT NULL DEFAULT 0,
        last_work INTEGER NOT NULL DEFAULT 0,
        last_hazarded INTEGER NOT NULL DEFAULT 0,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    )""",
)


class UnknownMemberError(LookupError):
    """Raised when an operation needs a member row that does not exist."""


class InsufficientFundsError(ValueError):
    """Raised when a member does not have enough money for an operation."""


def init_database(path: PathLike) -> None:
    """Create an empty database file at *path* with the casino schema."""
    Path(path).write_bytes(b"")
    conn = sqlite3.connect(path)
    try:
        with conn:
            for statement in _SCHEMA:
                conn.execute(statement)
    finally:
        conn.close()


class DbManager:
    """Access to member data stored in an SQLite database."""

    def __init__(self, path: PathLike) -> None:
        self._conn = sqlite3.connect(path)
        self._conn.execute("PRAGMA foreign_keys = ON")

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "DbManager":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def ensure_member(self, user_id: int) -> UserData:
        """Return the member's data, creating the member if needed."""
        user_row = self._conn.execute(
            "SELECT id, cash, bank FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        timeouts_row = self._conn.execute(
            "SELECT last_crime, last_rob, last_slut, last_work, last_hazarded "
            "FROM timeouts WHERE user_id = ?",
            (user_id,),
        ).fetchone()

        if user_row is not None and timeouts_row is not None:
            return UserData(user=User(*user_row), timeouts=Timeouts(*timeouts_row))

        with self._conn:
            self._conn.execute("INSERT OR IGNORE INTO users (id) VALUES (?)", (user_id,))
            self._conn.execute(
                "INSERT OR IGNORE INTO timeouts (user_id) VALUES (?)", (user_id,)
            )
        return UserData(user=User(id=user_id), timeouts=Timeouts())

    def update_timeout(self, user_id: int, activity: str, timestamp: int) -> None:
        """Record *timestamp* as the last time *activity* was done."""
        if activity not in TIMEOUT_COLUMNS:
            raise ValueError(f"unknown activity: {activity!r}")
        with self._conn:
            self._conn.execute(
                f"UPDATE timeouts SET {activity} = ? WHERE user_id = ?",
                (int(timestamp), user_id),
            )

    def change_cash(self, user_id: int, amount: float) -> None:
        """Add *amount* (possibly negative) to the member's cash."""
        with self._conn:
            self._conn.execute(
                "UPDATE users SET cash = cash + ? WHERE id = ?", (float(amount), user_id)
            )

    def add_cash(self, user_id: int, amount: float) -> None:
        self.change_cash(user_id, amount)

    def remove_cash(self, user_id: int, amount: float) -> None:
        self.change_cash(user_id, -amount)

    def get_top_members(self, limit: int) -> List[User]:
        """Richest members first, by cash plus bank."""
        rows = self._conn.execute(
            "SELECT id, cash, bank FROM users ORDER BY (cash + bank) DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [User(*row) for row in rows]

    def _balance(self, column: str, user_id: int) -> float:
        row = self._conn.execute(
            f"SELECT {column} FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        if row is None:
            raise UnknownMemberError(user_id)
        return row[0]

    def deposit(self, user_id: int, amount: float) -> bool:
        """Move cash to the bank; False if the member has too little cash."""
        with self._conn:
            if self._balance("cash", user_id) < amount:
                return False
            self._conn.execute(
                "UPDATE users SET cash = cash - ?, bank = bank + ? WHERE id = ?",
                (float(amount), float(amount), user_id),
            )
        return True

    def withdraw(self, user_id: int, amount: float) -> None:
        """Move money from the bank to cash."""
        with self._conn:
            if self._balance("bank", user_id) < amount:
                raise InsufficientFundsError("Insufficient funds")
            self._conn.execute(
                "UPDATE users SET cash = cash + ?, bank = bank - ? WHERE id = ?",
                (float(amount), float(amount), user_id),
            )

    def transfer(self, from_id: int, to_id: int, amount: float) -> None:
        """Move *amount* of cash from one member to another."""
        with self._conn:
            self._conn.execute(
                "UPDATE users SET cash = cash - ? WHERE id = ?", (float(amount), from_id)
            )
            self._conn.execute(
                "UPDATE users SET cash = cash + ? WHERE id = ?", (float(amount), to_id)
            )

    def process_purchase(self, user_id: int, cost: float) -> bool:
        """Take *cost* from the member's cash if they can afford it."""
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE users SET cash = cash - ? WHERE id = ? AND cash >= ?",
                (float(cost), user_id, float(cost)),
            )
        return cursor.rowcount > 0