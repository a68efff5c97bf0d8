"""Bank and wallet commands: deposits, withdrawals, transfers, robbery, leaderboard, shop."""

from __future__ import annotations

import random
import re
import sqlite3
from datetime import datetime, timezone
from typing import Callable, Optional

from kasyno.database import DbManager, InsufficientFundsError
from kasyno.replies import CYAN, GOLD, GREEN, RED, YELLOW, Embed, Reply
from kasyno.shop import find_item, shop_registry

BANK_LIMIT = 100 * 1000
ROB_COOLDOWN = 3 * 60 * 60
LEADERBOARD_SIZE = 12

_INTEGER = re.compile(r"[+-]?\d+")

_INVALID_AMOUNT_TITLE = "❌ Ale ty jesteś pacanem..."
_INVALID_AMOUNT_DESCRIPTION = "Wpisuje się poprawną liczbę lub `all` kolego."


class GuildOnlyError(RuntimeError):
    """Raised when a command that needs a server is used outside of one."""


def _money(value: float) -> str:
    """Format an amount the way the bot displays money."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _invalid_amount_reply() -> Reply:
    return Reply(
        embed=Embed(
            title=_INVALID_AMOUNT_TITLE,
            description=_INVALID_AMOUNT_DESCRIPTION,
            color=RED,
        ),
        ephemeral=True,
    )


def _parse_positive_int(text: str) -> Optional[int]:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def _parse_positive_float(text: str) -> Optional[float]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if value > 0.0 else None


def deposit(db: DbManager, user_id: int, amount_text: str) -> Reply:
    """Move cash to the bank; *amount_text* is a whole number or ``all``."""
    user = db.ensure_member(user_id).user

    if amount_text.lower() == "all":
        amount: float = user.cash
    else:
        parsed = _parse_positive_int(amount_text)
        if parsed is None:
            return _invalid_amount_reply()
        amount = parsed

    if amount > user.cash:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=(
                    "Nie masz tyle gotówki w portfelu!\n"
                    f"Posiadasz: `{_money(user.cash)}` 💵"
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    if amount + user.bank > BANK_LIMIT:
        return Reply(
            embed=Embed(
                title="❌ Limit osiągnięty",
                description=(
                    "Nie możesz schować w banku więcej niż 100 tysięcy dolarów. "
                    "Niestety, reszta musi pozostać w portfelu."
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    if not db.deposit(user_id, amount):
        return Reply(content="Coś poszło nie tak podczas operacji bankowej. Spróbuj ponownie.")

    embed = Embed(
        title="🏦 Wpłata przyjęta",
        description="Pomyślnie wpłacono pieniądze do banku.",
        color=GREEN,
    )
    embed.add_field("Kwota", f"`{_money(amount)}` 💰", True)
    embed.add_field("Nowy stan konta", f"`{_money(user.bank + amount)}` 💳", True)
    return Reply(embed=embed)


def withdraw(db: DbManager, user_id: int, amount_text: str) -> Reply:
    """Move money from the bank to cash; *amount_text* is a number or ``all``."""
    user = db.ensure_member(user_id).user

    if amount_text.lower() == "all":
        amount = user.bank
    else:
        parsed = _parse_positive_float(amount_text)
        if parsed is None:
            return _invalid_amount_reply()
        amount = parsed

    if amount > user.bank:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=(
                    "Nie masz tyle kasy w banku, nędzarzu!\n"
                    f"W banku masz: `{_money(user.bank)}` 💳"
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    try:
        db.withdraw(user_id, amount)
    except (InsufficientFundsError, sqlite3.Error):
        return Reply(content="Bankier uciekł z Twoją kasą (błąd bazy danych).")

    embed = Embed(
        title="🏦 Wypłata zrealizowana",
        description="Właśnie wyciągnąłeś swoje ciężko (może nie?) zarobione pieniądze.",
        color=YELLOW,
    )
    embed.add_field("Kwota", f"`{_money(amount)}` 💵", True)
    embed.add_field("Reszta w banku", f"`{_money(user.bank - amount)}` 💳", True)
    return Reply(embed=embed)


def pay(db: DbManager, sender_id: int, receiver_id: int, amount: int) -> Reply:
    """Transfer cash from one member to another."""
    if amount <= 0:
        return _invalid_amount_reply()

    if sender_id == receiver_id:
        return Reply(
            embed=Embed(
                title="❌ Ale co ty odwalasz...",
                description=(
                    "Nie możesz przelać pieniędzy samemu sobie. "
                    "To nie pranie brudnych pieniędzy."
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    sender = db.ensure_member(sender_id).user

    if sender.cash < 0 or sender.bank < 0:
        return Reply(
            embed=Embed(
                title="❌ Najpierw napraw kasę",
                description=(
                    "Nie oszukasz mnie. Najpierw weź ustaw tak, byś ani w banku, "
                    "ani w portfelu nie miał ujemnych pieniędzy."
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    if sender.cash < amount:
        return Reply(
            embed=Embed(
                title="❌ Brak środków",
                description=(
                    "Nie masz tyle gotówki w portfelu! Brakuje Ci: "
                    f"**{_money(amount - sender.cash)}** 💰"
                ),
                color=RED,
            ),
            ephemeral=True,
        )

    db.ensure_member(receiver_id)
    db.transfer(sender_id, receiver_id, amount)

    embed = Embed(
        title="💸 Przelew wysłany!",
        description=f"Pomyślnie przekazałeś pieniądze użytkownikowi <@{receiver_id}>.",
        color=GREEN,
    )
    embed.add_field("Kwota", f"`{_money(amount)}` 💰", True)
    embed.add_field("Nadawca", f"<@{sender_id}>", True)
    return Reply(embed=embed)


def rob(db: DbManager, user_id: int, victim_id: int, rng: random.Random, now: int) -> Reply:
    """Try to steal part of another member's cash; getting caught costs a fine."""
    if user_id == victim_id:
        return Reply(content="Nie możesz okraść samego siebie, geniuszu.")

    thief = db.ensure_member(user_id)
    victim = db.ensure_member(victim_id)

    time_passed = now - thief.timeouts.last_rob
    if time_passed < ROB_COOLDOWN:
        remaining = ROB_COOLDOWN - time_passed
        return Reply(
            embed=Embed(
                title="❌ Co ty taki porywczy?",
                description=(
                    "Musisz się przyczaić. Następny skok może być bezpieczny dopiero za "
                    f"{remaining} sekund."
                ),
                color=GREEN,
            )
        )

    chance = rng.randrange(100)
    percent = rng.uniform(10.0, 25.0)
    stolen = victim.user.cash * percent / 100.0
    fine = rng.uniform(50.0, 350.0)

    db.update_timeout(user_id, "last_rob", now)

    if chance < 40:
        db.transfer(victim_id, user_id, stolen)
        return Reply(
            embed=Embed(
                title="🥷 Udany skok!",
                description=(
                    f"Zakradłeś się do portfela <@{victim_id}> i zwędziłeś mu "
                    f"**{_money(stolen)}** 💰!"
                ),
                color=GREEN,
            )
        )

    db.transfer(user_id, victim_id, fine)
    return Reply(
        embed=Embed(
            title="🚨 Złapany na gorącym uczynku!",
            description=(
                f"<@{victim_id}> cię zauważył! Podczas ucieczki upuściłeś portfel, a ofiara "
                f"znalazła w nim **{_money(fine)}** 💰 i zabrała jako odszkodowanie."
            ),
            color=RED,
        )
    )


def topmoney(db: DbManager) -> Reply:
    """The leaderboard of the richest members."""
    members = db.get_top_members(LEADERBOARD_SIZE)
    if not members:
        return Reply(
            content=(
                "tu był taki edge case co się raczej nie zdarzy więc nie robie embeda "
                "tym zjebanym sposobem 💔"
            )
        )

    text = "".join(
        f"{place}. <@{member.id}> - **`{_money(member.total())}`** 💰\n"
        for place, member in enumerate(members, start=1)
    )
    return Reply(
        embed=Embed(
            title="🏆 Janusze kasyna. Może też janusze biznesu.",
            description=text,
            color=GOLD,
            footer=(
                "Chcesz tu być? To masz problem, bo to nie jest miejsce dla ciebie. Nigdy "
                "nim nie miało być. No chyba, że trochę pookradasz ludzi... znaczy zarobisz, "
                "to sie zastanowię."
            ),
            timestamp=datetime.now(timezone.utc),
        )
    )


def shop_listing() -> Reply:
    """Everything for sale, with prices."""
    embed = Embed(
        title="🛒 Żabka",
        description=(
            "Drogo, ale można coś wydać przynajmiej... Używasz `buy` i potem item, "
            "by coś kupić."
        ),
        color=CYAN,
    )
    for item in shop_registry():
        embed.add_field(
            f"{item.id}. {item.name}",
            f"_{item.description}_\nZa jedyne: **{item.price} dolarów**",
            False,
        )
    return Reply(embed=embed)


def buy(
    db: DbManager,
    user_id: int,
    item_id: int,
    grant_role: Optional[Callable[[int], bool]],
) -> Reply:
    """Buy a shop item, granting its role through *grant_role*.

    *grant_role* is None outside a server; otherwise it receives the role id
    and returns whether the role was granted. A failed grant is refunded.
    """
    item = find_item(item_id)
    if item is None:
        return Reply(
            embed=Embed(
                title="❌ Błąd",
                description="Przedmiot o tym ID nie istnieje.",
                color=RED,
            )
        )

    if grant_role is None:
        raise GuildOnlyError("Ta komenda działa tylko na serwerze!")

    if not db.process_purchase(user_id, item.price):
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description="Nie masz wystarczającej ilości gotówki w portfelu!",
                color=RED,
            )
        )

    if item.role_id is not None and not grant_role(item.role_id):
        db.add_cash(user_id, item.price)
        return Reply(
            embed=Embed(
                title="❌ Błąd",
                description="Ktoś coś namieszał i nie mogłem dodać roli 🥀",
                color=RED,
            )
        )

    return Reply(
        embed=Embed(
            title="✅ Zakup udany!",
            description=f"Kupiłeś **{item.name}** za **{item.price}** dolarów!",
            color=GREEN,
        )
    )