"""Blackjack against the house dealer."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from kasyno.database import DbManager
from kasyno.replies import BLUE, GREEN, RED, Button, Embed, Reply
from kasyno.wagers import hazard_cooldown_reply

MIN_BET = 50
DEALER_STANDS_AT = 17
BLACKJACK = 21
TECHNICAL_DRAW_CHANCE = 5
WIN_PAYOUT = 0.95

_TITLE = "🃏 Blackjack"
_OPENING_STATUS = "Twoja tura: Dobierasz czy pasujesz?"


@dataclass(frozen=True)
class Card:
    """A card rank and the points it is worth (an ace counts 11 or 1)."""

    name: str
    value: int


DECK = (
    Card("2", 2),
    Card("3", 3),
    Card("4", 4),
    Card("5", 5),
    Card("6", 6),
    Card("7", 7),
    Card("8", 8),
    Card("9", 9),
    Card("T", 10),
    Card("J", 10),
    Card("Q", 10),
    Card("K", 10),
    Card("A", 11),
)


class GameOverError(RuntimeError):
    """Raised when a move is made in a finished game."""


def hand_sum(hand: Sequence[Card]) -> int:
    """Points of a hand, counting aces as 1 where 11 would bust."""
    total = sum(card.value for card in hand)
    aces = sum(1 for card in hand if card.name == "A")
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    return total


def format_hand(hand: Sequence[Card]) -> str:
    """Card names in brackets, e.g. ``[K, A]``."""
    return "[" + ", ".join(card.name for card in hand) + "]"


@dataclass
class BlackjackGame:
    """A running hand of blackjack; money is settled as the game ends."""

    db: DbManager = field(repr=False)
    user_id: int
    bet: int
    rng: random.Random = field(repr=False)
    player_hand: List[Card]
    dealer_hand: List[Card]
    game_id: str = ""
    status: str = _OPENING_STATUS
    game_over: bool = False

    @property
    def hit_id(self) -> str:
        return f"{self.game_id}hit"

    @property
    def stand_id(self) -> str:
        return f"{self.game_id}stand"

    def _draw(self) -> Card:
        return self.rng.choice(DECK)

    def _ensure_running(self) -> None:
        if self.game_over:
            raise GameOverError("the game is already over")

    def hit(self) -> Reply:
        """Take another card; going over 21 loses the bet."""
        self._ensure_running()
        self.player_hand.append(self._draw())
        if hand_sum(self.player_hand) > BLACKJACK:
            self.status = f"Fura! Przekroczyłeś 21. Przegrałeś **{self.bet}** 💰."
            self.game_over = True
            self.db.add_cash(self.user_id, -self.bet)
        return self.reply()

    def stand(self) -> Reply:
        """Stop drawing; the dealer plays out and the bet is settled."""
        self._ensure_running()
        self.game_over = True

        while hand_sum(self.dealer_hand) < DEALER_STANDS_AT:
            self.dealer_hand.append(self._draw())

        player = hand_sum(self.player_hand)
        dealer = hand_sum(self.dealer_hand)

        if dealer > BLACKJACK:
            self.status = f"Krupier fura ({dealer})! Wygrałeś **{self.bet}** dolarów!"
            self.db.add_cash(self.user_id, self.bet)
        elif player > dealer:
            if self.rng.randint(1, 100) <= TECHNICAL_DRAW_CHANCE:
                self.status = f"Remis techniczny! Krupier cudem wyrównał do `{player}`."
            else:
                win = int(self.bet * WIN_PAYOUT)
                self.status = (
                    f"Wygrałeś! `{player}` vs `{dealer}`. Zyskałeś **{win}** dolarów"
                )
                self.db.add_cash(self.user_id, win)
        elif player == dealer:
            half = self.bet // 2
            self.status = f"Remis! Tracisz połowę, czyli **{half}** dolarów."
            self.db.add_cash(self.user_id, -half)
        else:
            self.status = (
                f"Przegrałeś! Krupier ma `{dealer}`. Tracisz **{self.bet}** dolarów."
            )
            self.db.add_cash(self.user_id, -self.bet)

        return self.reply()

    def _color(self) -> int:
        if not self.game_over:
            return BLUE
        if "Wygrałeś" in self.status or "Remis" in self.status:
            return GREEN
        return RED

    def reply(self) -> Reply:
        """The table as it looks now; the dealer's second card stays hidden until the end."""
        embed = Embed(title=_TITLE, description=self.status, color=self._color())
        embed.add_field(
            "Twoje karty",
            f"{format_hand(self.player_hand)} (Suma: {hand_sum(self.player_hand)})",
            True,
        )
        if self.game_over:
            embed.add_field(
                "Karty krupiera",
                f"{format_hand(self.dealer_hand)} (Suma: {hand_sum(self.dealer_hand)})",
                True,
            )
            return Reply(embed=embed)

        embed.add_field("Karty krupiera", f"[{self.dealer_hand[0].name}, ?]", True)
        buttons = [
            Button(self.hit_id, "Dobierz", "primary"),
            Button(self.stand_id, "Pasuj", "secondary"),
        ]
        return Reply(embed=embed, buttons=buttons)


def start_blackjack(
    db: DbManager, user_id: int, bet: int, rng: random.Random, now: int
) -> Union[BlackjackGame, Reply]:
    """Deal a new game, or return the reply explaining why none can start."""
    if bet <= MIN_BET:
        return Reply(
            embed=Embed(
                title="❌ Za mała stawka",
                description="Minimum to 50 dolarów.",
                color=RED,
            )
        )

    data = db.ensure_member(user_id)
    if data.user.cash < bet:
        cash = float(data.user.cash)
        shown = str(int(cash)) if cash.is_integer() else repr(cash)
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=f"Masz zaledwie `{shown}` dolarów...",
                color=RED,
            )
        )

    waiting = hazard_cooldown_reply(data.timeouts.last_hazarded, now)
    if waiting is not None:
        return waiting

    db.update_timeout(user_id, "last_hazarded", now)

    player_hand = [rng.choice(DECK), rng.choice(DECK)]
    dealer_hand = [rng.choice(DECK), rng.choice(DECK)]
    return BlackjackGame(
        db=db,
        user_id=user_id,
        bet=bet,
        rng=rng,
        player_hand=player_hand,
        dealer_hand=dealer_hand,
        game_id=str(user_id),
    )