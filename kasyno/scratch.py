"""Scratch cards: seven random digits, every 7 wins its field's prize."""

from __future__ import annotations

import io
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from kasyno.database import DbManager
from kasyno.replies import GREEN, RED, Button, Embed, Reply
from kasyno.wagers import hazard_cooldown_reply

PathLike = Union[str, Path]

TICKET_PRICE = 2
WINNING_SYMBOL = "7"
PRIZE_RANGE = (3, 16)
SCRATCH_TIMEOUT = 45
SCRATCH_BUTTON_ID = "scratched"
CARD_IMAGE = "scratch_card.png"
SCRATCHED_IMAGE = "scratch_card_scratched.png"

POSITIONS = (
    (280, 65),
    (280, 110),
    (280, 160),
    (280, 200),
    (280, 250),
    (280, 300),
    (280, 345),
)
PRIZE_X = 375
SYMBOL_SIZE = 35
PRIZE_SIZE = 30

SYMBOL_WEIGHTS = tuple((str(digit), 0.1) for digit in range(10))

_RED_INK = (255, 0, 0, 255)
_BLACK_INK = (0, 0, 0, 255)
_GREY_INK = (100, 100, 100, 255)


@dataclass(frozen=True)
class ScratchCard:
    """The symbols and prizes printed on one ticket, and what it wins."""

    symbols: Tuple[str, ...]
    prizes: Tuple[int, ...]
    win: int


def _money(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def random_weighted_symbol(weights: Sequence[Tuple[str, float]], rng: random.Random) -> str:
    """Pick a symbol with the given probabilities; leftover mass goes to the last one."""
    if not weights:
        raise ValueError("no symbols to choose from")
    roll = rng.random()
    for symbol, weight in weights:
        if roll < weight:
            return symbol
        roll -= weight
    return weights[-1][0]


def draw_card(rng: random.Random) -> ScratchCard:
    """Fill every field of a ticket with a symbol and a prize."""
    symbols = []
    prizes = []
    for _ in POSITIONS:
        symbols.append(random_weighted_symbol(SYMBOL_WEIGHTS, rng))
        prizes.append(rng.randint(*PRIZE_RANGE))
    win = sum(prize for symbol, prize in zip(symbols, prizes) if symbol == WINNING_SYMBOL)
    return ScratchCard(symbols=tuple(symbols), prizes=tuple(prizes), win=win)


def _font(font_path: Optional[PathLike], size: int):
    if font_path is not None:
        return ImageFont.truetype(str(font_path), size)
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def render_card(
    card: ScratchCard, base_path: PathLike, font_path: Optional[PathLike] = None
) -> bytes:
    """Print the card onto the scratched-ticket image and return it as PNG bytes."""
    symbol_font = _font(font_path, SYMBOL_SIZE)
    prize_font = _font(font_path, PRIZE_SIZE)

    with Image.open(base_path) as base:
        image = base.convert("RGBA")

    draw = ImageDraw.Draw(image)
    for (x, y), symbol, prize in zip(POSITIONS, card.symbols, card.prizes):
        ink = _RED_INK if symbol == WINNING_SYMBOL else _BLACK_INK
        draw.text((x, y), symbol, fill=ink, font=symbol_font)
        draw.text((PRIZE_X, y), f"{prize}zl", fill=_GREY_INK, font=prize_font)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def start_scratch(db: DbManager, user_id: int, now: int) -> Reply:
    """Sell a ticket and show it unscratched, or explain why it cannot be bought."""
    data = db.ensure_member(user_id)
    if data.user.cash < TICKET_PRICE:
        return Reply(
            embed=Embed(
                title="❌ Jesteś biedny",
                description=f"Masz tylko `{_money(data.user.cash)}` dolarów.",
                color=RED,
            )
        )

    waiting = hazard_cooldown_reply(data.timeouts.last_hazarded, now)
    if waiting is not None:
        return waiting

    db.update_timeout(user_id, "last_hazarded", now)
    db.remove_cash(user_id, TICKET_PRICE)

    return Reply(
        embed=Embed(
            title="Zdrap zdrapke! 🎟️",
            description="Sprawdź czy wygrałeś w najnowszym lotto...",
            color=GREEN,
            image=f"attachment://{CARD_IMAGE}",
        ),
        attachment_name=CARD_IMAGE,
        buttons=[Button(SCRATCH_BUTTON_ID, "Zdrap!", "primary")],
    )


def scratch_reply(card: ScratchCard) -> Reply:
    """The result shown once the ticket is scratched."""
    won = card.win > 0
    return Reply(
        embed=Embed(
            title=f"{'😀' if won else '❌'} Twoja zdrapka!",
            description=(
                f"Symbole: {''.join(card.symbols)}\nWygrana: **{card.win} dolarów**"
            ),
            color=GREEN if won else RED,
            image=f"attachment://{SCRATCHED_IMAGE}",
        ),
        attachment_name=SCRATCHED_IMAGE,
    )