"""Crash: a multiplier climbs until the member cashes out or it collapses."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Union

from kasyno.blackjack import GameOverError
from kasyno.database import DbManager
from kasyno.replies import GREEN, RED, YELLOW, Button, Embed, Reply
from kasyno.wagers import HAZARD_COOLDOWN

START_MULTIPLIER = 0.1
TICK_SECONDS = 0.25
CASH_OUT_TIMEOUT = 120

_TITLE = "🚀 Crash"


def crash_chance(multiplier: float) -> int:
    """Percent chance that the game collapses on the next tick."""
    if multiplier < 1.0:
        return 2
    if multiplier < 2.0:
        return 10
    if multiplier < 5.0:
        return 18
    return 30


def multiplier_step(multiplier: float) -> float:
    """How much the multiplier grows on a tick that does not crash."""
    if multiplier < 3.0:
        return 0.1
    if multiplier < 5.0:
        return 0.2
    return 0.5


@dataclass
class CrashGame:
    """A running crash round; the bet has already been taken from the member."""

    db: DbManager = field(repr=False)
    user_id: int
    bet: int
    multiplier: float = START_MULTIPLIER
    game_id: str = ""
    crashed: bool = False
    won: bool = False
    payout: int = 0
    ticks: int = 0

    @property
    def finished(self) -> bool:
        return self.crashed or self.won

    @property
    def stop_id(self) -> str:
        return f"{self.game_id}stop"

    def _ensure_running(self) -> None:
        if self.finished:
            raise GameOverError("the game is already over")

    def tick(self, rng: random.Random) -> Reply:
        """Advance one step: either crash or raise the multiplier."""
        self._ensure_running()
        if rng.randrange(100) < crash_chance(self.multiplier):
            self.crashed = True
        else:
            self.multiplier += multiplier_step(self.multiplier)
            self.ticks += 1
        return self.reply()

    def cash_out(self) -> Reply:
        """Stop the round and pay out the bet times the current multiplier."""
        self._ensure_running()
        self.won = True
        self.payout = int(self.bet * self.multiplier)
        self.db.add_cash(self.user_id, self.payout)
        return self.reply()

    def _running_profit(self) -> str:
        profit = self.bet * self.multiplier - self.bet
        if self.ticks == 0:
            return f"{profit + 0.0:.0f}"
        return str(int(profit))

    def reply(self) -> Reply:
        """The round as it looks now."""
        if not self.finished:
            embed = Embed(
                title=_TITLE,
                description=(
                    f"Mnożnik: **{self.multiplier:.2f}x**\n"
                    f"Zysk: **{self._running_profit()}** dolarów!"
                ),
                color=YELLOW,
            )
            return Reply(embed=embed, buttons=[Button(self.stop_id, "WYPŁAĆ", "success")])

        if self.won:
            if self.payout < self.bet:
                embed = Embed(
                    title="💥 Jesteś dzbanem!",
                    description=(
                        f"Wyszedłeś przy **{self.multiplier:.2f}x**, czyli straciłeś "
                        f"**{self.bet - self.payout}** dolarów."
                    ),
                    color=RED,
                )
            else:
                embed = Embed(
                    title="📈 Zysk!",
                    description=(
                        f"Wypłacono przy **{self.multiplier:.2f}x**!\n"
                        f"Wygrałeś **{self.payout - self.bet}** dolarów!"
                    ),
                    color=GREEN,
                )
            return Reply(embed=embed)

        embed = Embed(
            title="💥 BOOM!",
            description=(
                f"Wszystko się j*bło przy **{self.multiplier:.2f}x**!\n"
                f"Straciłeś **{self.bet}** dolarów, które użyłeś na ten zakład."
            ),
            color=RED,
        )
        return Reply(embed=embed)


def start_crash(db: DbManager, user_id: int, bet: int, now: int) -> Union[CrashGame, Reply]:
    """Take the bet and start a round, or return the reply explaining why not."""
    data = db.ensure_member(user_id)

    if data.user.cash < bet or bet <= 0:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny!",
                description="Nie masz tyle kasy, pajacu...",
                color=RED,
            )
        )

    time_passed = now - data.timeouts.last_hazarded
    if time_passed < HAZARD_COOLDOWN:
        remaining = HAZARD_COOLDOWN - time_passed
        return Reply(
            embed=Embed(
                title="⏳ Czekaj chwile",
                description=(
                    "Kasyno zawsze wygrywa. A przynajmniej tak ma być. "
                    f"Wróć za {remaining}s"
                ),
                color=RED,
            )
        )

    db.update_timeout(user_id, "last_hazarded", now)
    db.add_cash(user_id, -bet)
    return CrashGame(db=db, user_id=user_id, bet=bet, game_id=str(user_id))