import random

import pytest

from kasyno.blackjack import GameOverError
from kasyno.crash import (
    START_MULTIPLIER,
    CrashGame,
    crash_chance,
    multiplier_step,
    start_crash,
)
from kasyno.database import DbManager, init_database

NOW = 1_000_000


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "casino.db"
    init_database(path)
    with DbManager(path) as manager:
        yield manager


def _cash(db, user_id):
    return db.ensure_member(user_id).user.cash


@pytest.mark.parametrize(
    "multiplier, expected",
    [(0.1, 2), (0.99, 2), (1.0, 10), (1.9, 10), (2.0, 18), (4.9, 18), (5.0, 30), (9.0, 30)],
)
def test_crash_chance_thresholds(multiplier, expected):
    assert crash_chance(multiplier) == expected


@pytest.mark.parametrize(
    "multiplier, expected",
    [(0.1, 0.1), (2.9, 0.1), (3.0, 0.2), (4.9, 0.2), (5.0, 0.5), (10.0, 0.5)],
)
def test_multiplier_step_thresholds(multiplier, expected):
    assert multiplier_step(multiplier) == expected


def test_start_rejects_non_positive_bet(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    reply = start_crash(db, 1, 0, NOW)
    assert reply.embed.title == "❌ Jesteś biedny!"
    assert _cash(db, 1) == 100


def test_start_rejects_bet_above_cash(db):
    reply = start_crash(db, 1, 10, NOW)
    assert reply.embed.title == "❌ Jesteś biedny!"


def test_start_respects_cooldown(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    db.update_timeout(1, "last_hazarded", NOW - 5)
    reply = start_crash(db, 1, 40, NOW)
    assert reply.embed.title == "⏳ Czekaj chwile"
    assert _cash(db, 1) == 100


def test_start_takes_bet_and_records_time(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    assert isinstance(game, CrashGame)
    assert game.multiplier == START_MULTIPLIER
    assert _cash(db, 1) == 60
    assert db.ensure_member(1).timeouts.last_hazarded == NOW


def test_running_reply_has_stop_button(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    reply = game.reply()
    assert [b.custom_id for b in reply.buttons] == [game.stop_id]
    assert game.stop_id.endswith("stop")
    assert "**0.10x**" in reply.embed.description


def test_tick_without_crash_raises_multiplier(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    game.tick(FixedRoll(99))
    assert game.multiplier == pytest.approx(START_MULTIPLIER + multiplier_step(START_MULTIPLIER))
    assert not game.finished


def test_crash_loses_bet(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    reply = game.tick(FixedRoll(0))
    assert game.crashed and game.finished
    assert reply.embed.title == "💥 BOOM!"
    assert reply.buttons == []
    assert _cash(db, 1) == 60


def test_early_cash_out_returns_less_than_bet(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    reply = game.cash_out()
    assert reply.embed.title == "💥 Jesteś dzbanem!"
    assert 60 <= _cash(db, 1) < 100
    assert _cash(db, 1) == 60 + game.payout


def test_late_cash_out_is_profit(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    while game.multiplier < 1.5:
        game.tick(FixedRoll(99))
    reply = game.cash_out()
    assert reply.embed.title == "📈 Zysk!"
    assert game.payout >= game.bet
    assert _cash(db, 1) >= 100


def test_moves_after_end_are_rejected(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    game.tick(FixedRoll(0))
    with pytest.raises(GameOverError):
        game.tick(FixedRoll(99))
    with pytest.raises(GameOverError):
        game.cash_out()


def test_seeded_game_eventually_crashes(db):
    db.ensure_member(1)
    db.add_cash(1, 100)
    game = start_crash(db, 1, 40, NOW)
    rng = random.Random(7)
    while not game.finished:
        game.tick(rng)
    assert game.crashed
    assert _cash(db, 1) == 60