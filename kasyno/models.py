"""Plain data records shared across the casino package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    """A member's wallet: cash in hand and money in the bank."""

    id: int
    cash: float = 0.0
    bank: float = 0.0

    def total(self) -> float:
        """Cash and bank together."""
        return self.cash + self.bank


@dataclass
class Timeouts:
    """Unix timestamps of a member's last use of each cooldown-bound activity."""

    last_crime: int = 0
    last_rob: int = 0
    last_slut: int = 0
    last_work: int = 0
    last_hazarded: int = 0


@dataclass
class UserData:
    """A member's wallet together with their cooldown timestamps."""

    user: User
    timeouts: Timeouts = field(default_factory=Timeouts)


@dataclass(frozen=True)
class ShopItem:
    """Something that can be bought in the shop, optionally granting a role."""

    id: int
    name: str
    description: str
    price: int
    role_id: Optional[int] = None


@dataclass
class BotSettings:
    """The ``[bot]`` section of the configuration file."""

    prefix: str
    database_name: str
    token: str = ""


@dataclass
class Config:
    """Whole bot configuration."""

    bot: BotSettings