"""The slot machine."""

from __future__ import annotations

import random
from typing import Tuple

from kasyno.database import DbManager
from kasyno.replies import GREEN, RED, Button, Embed, Reply

SEVEN = "7️⃣"
DIAMOND = "💎"
SYMBOLS = ("🍎", "🍋", "🍒", "🍇", DIAMOND, SEVEN)
SPIN_SECONDS = 2
REPLAY_TIMEOUT = 30
SPIN_AGAIN_ID = "spin_again"

_LOSS_MESSAGE = (
    "💀 Pusto... Może następnym razem?\n\nPamiętaj, że 99.6% hazardzistów odchodzi przed "
    "pierwszą dużą wygraną! Ale ty nie odchodź! Ty dasz radę!"
)


def _money(value: float) -> str:
    """Format an amount the way the bot displays money."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def evaluate(first: str, second: str, third: str) -> Tuple[int, str]:
    """Payout multiplier and message for three reels."""
    if first == second == third == SEVEN:
        return 50, "🎰 JACKPOT!!! SIEDEM SIEDEM SIEDEM!"
    if first == second == third == DIAMOND:
        return 8, "💎 DIAMENTOWY STRZAŁ!"
    if first == second == third:
        return 5, "✨ Trzy w linii! Pięknie!"
    if first == second:
        return 2, "🍒 Dwa pierwsze pasują! Mały zysk."
    return 0, _LOSS_MESSAGE


def spin(db: DbManager, user_id: int, bet: int, rng: random.Random) -> Reply:
    """Spin the reels once and settle the bet."""
    user = db.ensure_member(user_id).user
    if user.cash < bet:
        return Reply(
            embed=Embed(
                title="🥀 Jesteś biedny",
                description=f"Masz tylko `{_money(user.cash)}` dolarów. Idź do pracy, czy coś.",
                color=RED,
            ),
            ephemeral=True,
        )

    reels = [rng.choice(SYMBOLS) for _ in range(3)]
    multiplier, message = evaluate(*reels)
    win_amount = bet * multiplier
    db.add_cash(user_id, win_amount - bet)

    embed = Embed(
        title="🎰 Maszynka do nieśmier... inwestycyjna!",
        description=(
            f"# **[ {reels[0]} | {reels[1]} | {reels[2]} ]**\n\n{message}\n\n"
            f"**Zakład:** {bet}\n**Zysk:** {win_amount}"
        ),
        color=GREEN if multiplier > 0 else RED,
    )
    return Reply(
        embed=embed,
        buttons=[Button(SPIN_AGAIN_ID, "Zagraj ponownie!", "success")],
    )