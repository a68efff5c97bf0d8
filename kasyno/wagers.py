"""Quick wagers: coin flip and the 1-100 dice."""

from __future__ import annotations

import random
from typing import Optional

from kasyno.database import DbManager
from kasyno.replies import GREEN, RED, Embed, Reply

HAZARD_COOLDOWN = 15
COINFLIP_MIN_BET = 5
COINFLIP_WEALTH_LIMIT = 1000
COINFLIP_WIN_CHANCE = 47
DICE_MIN_BET = 50
DICE_WIN_ABOVE = 60

HEADS_ALIASES = frozenset({"heads", "h", "o"})
TAILS_ALIASES = frozenset({"tails", "t", "r"})

_HEADS_DISPLAY = "🦅 **Orzeł**"
_TAILS_DISPLAY = "🪙 **Reszka**"


def _money(value: float) -> str:
    """Format an amount the way the bot displays money."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def hazard_cooldown_reply(last_hazarded: int, now: int) -> Optional[Reply]:
    """The waiting notice if gambling is still on cooldown, otherwise None."""
    time_passed = now - last_hazarded
    if time_passed >= HAZARD_COOLDOWN:
        return None
    remaining = HAZARD_COOLDOWN - time_passed
    return Reply(
        embed=Embed(
            title=":hourglass_flowing_sand: Czekaj chwilę",
            description=(
                "No ten... kasyno zawsze wygrywa. A przynajmniej tak ma być. Więc nie możesz "
                f"spamić hazardem. Pozdrawiam. Wróć za **{remaining} sekund**."
            ),
            color=RED,
        )
    )


def coinflip(
    db: DbManager, user_id: int, side: str, bet: int, rng: random.Random, now: int
) -> Reply:
    """Bet on heads or tails; only available while the member is still poor."""
    side_lower = side.lower()
    is_heads = side_lower in HEADS_ALIASES
    is_tails = side_lower in TAILS_ALIASES

    if not is_heads and not is_tails:
        return Reply(
            embed=Embed(
                title="❌ Wybierz stronę",
                description="Musisz wybrać `heads` (h) lub `tails` (t).",
                color=RED,
            )
        )

    if bet < COINFLIP_MIN_BET:
        return Reply(
            embed=Embed(
                title="❌ Za mało!",
                description="Minimalna stawka to 5 dolarów.",
                color=RED,
            )
        )

    data = db.ensure_member(user_id)
    member = data.user
    if member.cash < bet:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=f"Masz tylko `{_money(member.cash)}` dolarów.",
                color=RED,
            )
        )

    if member.total() > COINFLIP_WEALTH_LIMIT:
        return Reply(
            embed=Embed(
                title="❌ To jest zbyt OP",
                description=(
                    "Ta gra nie ma sensu, gdy wyszedłeś z początkowej fazy bo dość łatwo "
                    "jest dostać absurdalnie duże pieniądze."
                ),
                color=RED,
            )
        )

    waiting = hazard_cooldown_reply(data.timeouts.last_hazarded, now)
    if waiting is not None:
        return waiting

    db.update_timeout(user_id, "last_hazarded", now)

    player_won = rng.randint(1, 100) <= COINFLIP_WIN_CHANCE
    landed_heads = is_heads if player_won else not is_heads
    result_display = _HEADS_DISPLAY if landed_heads else _TAILS_DISPLAY

    if player_won:
        db.add_cash(user_id, bet)
        return Reply(
            embed=Embed(
                title="🎉 Wygrana!",
                description=f"Wynik: {result_display}\n\nWygrałeś **{bet}** dolarów!",
                color=GREEN,
            )
        )

    db.add_cash(user_id, -bet)
    return Reply(
        embed=Embed(
            title="💀 Przegrana",
            description=f"Wynik: {result_display}\n\nStraciłeś **{bet}** dolarów.",
            color=RED,
        )
    )


def dice(db: DbManager, user_id: int, bet: int, rng: random.Random, now: int) -> Reply:
    """Roll 1-100; anything above 60 doubles the stake."""
    if bet <= DICE_MIN_BET:
        return Reply(
            embed=Embed(
                title="❌ Weź chociaż trochę postaw...",
                description="Stawka musi być większa niż 50.",
                color=RED,
            )
        )

    data = db.ensure_member(user_id)
    if data.user.cash < bet:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=(
                    f"Nie masz tyle kasy! Posiadasz: `{_money(data.user.cash)}` dolarów."
                ),
                color=RED,
            )
        )

    waiting = hazard_cooldown_reply(data.timeouts.last_hazarded, now)
    if waiting is not None:
        return waiting

    db.update_timeout(user_id, "last_hazarded", now)

    roll = rng.randint(1, 100)
    embed = Embed(title="🎲 EDCM - Extended Dice Casino Machine (1-100)")

    if roll > DICE_WIN_ABOVE:
        db.add_cash(user_id, bet)
        embed.description = f"# {roll}\n\nGratulacje! Wygrałeś **{bet}** dolarów!"
        embed.color = GREEN
    else:
        db.add_cash(user_id, -bet)
        embed.description = (
            f"# {roll}\n\nNiestety, przegrałeś **{bet}** dolców. Musisz wyrzucić co "
            "najmniej 60.\n\n**Pamiętaj, że 99.6% hazardzistów odchodzi przed pierwszą "
            "dużą wygraną! Ty nie rezygnuj. Ty dasz radę!**"
        )
        embed.color = RED

    return Reply(embed=embed)