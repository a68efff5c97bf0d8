import io
import random

import pytest
from PIL import Image

from kasyno.database import DbManager, init_database
from kasyno.replies import GREEN, RED
from kasyno.scratch import (
    POSITIONS,
    PRIZE_RANGE,
    SCRATCH_BUTTON_ID,
    SYMBOL_WEIGHTS,
    TICKET_PRICE,
    WINNING_SYMBOL,
    ScratchCard,
    draw_card,
    random_weighted_symbol,
    render_card,
    scratch_reply,
    start_scratch,
)

NOW = 2_000_000


class FixedRandom:
    def __init__(self, roll, prize=PRIZE_RANGE[0]):
        self.roll = roll
        self.prize = prize

    def random(self):
        return self.roll

    def randint(self, low, high):
        return self.prize


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "casino.db"
    init_database(path)
    with DbManager(path) as manager:
        yield manager


@pytest.fixture
def base_image(tmp_path):
    path = tmp_path / "base.png"
    Image.new("RGBA", (500, 420), (255, 255, 255, 255)).save(path)
    return path


def test_weighted_symbol_low_roll_picks_first():
    assert random_weighted_symbol(SYMBOL_WEIGHTS, FixedRandom(0.0)) == "0"


def test_weighted_symbol_high_roll_picks_last_digit():
    assert random_weighted_symbol(SYMBOL_WEIGHTS, FixedRandom(0.95)) == "9"


def test_weighted_symbol_leftover_goes_to_last():
    weights = [("a", 0.1), ("b", 0.1)]
    assert random_weighted_symbol(weights, FixedRandom(0.5)) == "b"


def test_weighted_symbol_needs_symbols():
    with pytest.raises(ValueError):
        random_weighted_symbol([], FixedRandom(0.5))


@pytest.mark.parametrize("seed", range(10))
def test_drawn_card_invariants(seed):
    card = draw_card(random.Random(seed))
    assert len(card.symbols) == len(POSITIONS) == len(card.prizes)
    assert all(PRIZE_RANGE[0] <= prize <= PRIZE_RANGE[1] for prize in card.prizes)
    assert all(symbol.isdigit() for symbol in card.symbols)
    assert card.win == sum(
        prize for symbol, prize in zip(card.symbols, card.prizes) if symbol == WINNING_SYMBOL
    )


def test_all_sevens_wins_every_prize():
    card = draw_card(FixedRandom(0.75, prize=10))
    assert set(card.symbols) == {WINNING_SYMBOL}
    assert card.win == sum(card.prizes)


def test_no_sevens_wins_nothing():
    card = draw_card(FixedRandom(0.0))
    assert card.win == 0


def test_scratch_reply_for_win():
    card = ScratchCard(symbols=("7", "1"), prizes=(5, 4), win=5)
    reply = scratch_reply(card)
    assert reply.embed.title.startswith("😀")
    assert "Symbole: 71" in reply.embed.description
    assert "Wygrana: **5 dolarów**" in reply.embed.description
    assert reply.embed.color == GREEN
    assert reply.buttons == []


def test_scratch_reply_for_loss():
    card = ScratchCard(symbols=("1", "2"), prizes=(5, 4), win=0)
    reply = scratch_reply(card)
    assert reply.embed.title.startswith("❌")
    assert reply.embed.color == RED


def test_start_rejects_poor_member(db):
    reply = start_scratch(db, 1, NOW)
    assert reply.embed.title == "❌ Jesteś biedny"
    assert db.ensure_member(1).user.cash == 0


def test_start_respects_cooldown(db):
    db.ensure_member(1)
    db.add_cash(1, 50)
    db.update_timeout(1, "last_hazarded", NOW - 1)
    reply = start_scratch(db, 1, NOW)
    assert reply.embed.title == ":hourglass_flowing_sand: Czekaj chwilę"
    assert db.ensure_member(1).user.cash == 50


def test_start_sells_ticket(db):
    db.ensure_member(1)
    db.add_cash(1, 50)
    reply = start_scratch(db, 1, NOW)
    data = db.ensure_member(1)
    assert data.user.cash == 50 - TICKET_PRICE
    assert data.timeouts.last_hazarded == NOW
    assert [b.custom_id for b in reply.buttons] == [SCRATCH_BUTTON_ID]


def test_render_keeps_size_and_draws_text(base_image):
    card = ScratchCard(symbols=("1",) * 7, prizes=(3,) * 7, win=0)
    png = render_card(card, base_image)
    assert png.startswith(b"\x89PNG")
    rendered = Image.open(io.BytesIO(png))
    assert rendered.size == Image.open(base_image).size
    white = (255, 255, 255, 255)
    assert any(pixel != white for pixel in rendered.convert("RGBA").getdata())


def test_render_marks_sevens_in_red(base_image):
    card = ScratchCard(symbols=("7",) * 7, prizes=(3,) * 7, win=21)
    rendered = Image.open(io.BytesIO(render_card(card, base_image))).convert("RGBA")
    assert (255, 0, 0, 255) in set(rendered.getdata())


def test_render_without_sevens_has_no_red(base_image):
    card = ScratchCard(symbols=("1",) * 7, prizes=(3,) * 7, win=0)
    rendered = Image.open(io.BytesIO(render_card(card, base_image))).convert("RGBA")
    assert (255, 0, 0, 255) not in set(rendered.getdata())


def test_render_missing_base_image(tmp_path):
    card = ScratchCard(symbols=("1",) * 7, prizes=(3,) * 7, win=0)
    with pytest.raises(FileNotFoundError):
        render_card(card, tmp_path / "missing.png")


def test_render_missing_font(base_image, tmp_path):
    card = ScratchCard(symbols=("1",) * 7, prizes=(3,) * 7, win=0)
    with pytest.raises(OSError):
        render_card(card, base_image, tmp_path / "missing.ttf")