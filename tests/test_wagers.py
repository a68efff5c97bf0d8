import pytest

from kasyno.database import DbManager, init_database
from kasyno.replies import GREEN, RED
from kasyno.wagers import HAZARD_COOLDOWN, coinflip, dice, hazard_cooldown_reply

NOW = 1_000_000
USER = 7
START_CASH = 500


class ScriptedRng:
    def __init__(self, *ints):
        self.ints = list(ints)

    def randint(self, a, b):
        value = self.ints.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "casino.db"
    init_database(path)
    with DbManager(path) as manager:
        manager.ensure_member(USER)
        manager.add_cash(USER, START_CASH)
        yield manager


def cash(db):
    return db.ensure_member(USER).user.cash


def test_cooldown_reply_none_once_passed():
    assert hazard_cooldown_reply(NOW - HAZARD_COOLDOWN, NOW) is None


def test_cooldown_reply_when_too_soon():
    reply = hazard_cooldown_reply(NOW - 1, NOW)
    assert reply.embed.color == RED
    assert f"**{HAZARD_COOLDOWN - 1} sekund**" in reply.embed.description


def test_coinflip_rejects_unknown_side(db):
    reply = coinflip(db, USER, "edge", 10, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ Wybierz stronę"
    assert cash(db) == START_CASH


def test_coinflip_rejects_small_bet(db):
    reply = coinflip(db, USER, "h", 4, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ Za mało!"


def test_coinflip_rejects_poor_player(db):
    reply = coinflip(db, USER, "h", START_CASH + 1, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ Jesteś biedny"


def test_coinflip_rejects_rich_player(db):
    db.add_cash(USER, 1000)
    reply = coinflip(db, USER, "h", 10, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ To jest zbyt OP"
    assert db.ensure_member(USER).timeouts.last_hazarded == 0


def test_coinflip_respects_cooldown(db):
    db.update_timeout(USER, "last_hazarded", NOW - 3)
    reply = coinflip(db, USER, "h", 10, ScriptedRng(), NOW)
    assert "Czekaj" in reply.embed.title
    assert cash(db) == START_CASH


def test_coinflip_win_on_heads(db):
    reply = coinflip(db, USER, "heads", 10, ScriptedRng(47), NOW)
    assert cash(db) == START_CASH + 10
    assert "Orzeł" in reply.embed.description
    assert reply.embed.color == GREEN
    assert db.ensure_member(USER).timeouts.last_hazarded == NOW


def test_coinflip_loss_on_tails_shows_heads(db):
    reply = coinflip(db, USER, "t", 10, ScriptedRng(48), NOW)
    assert cash(db) == START_CASH - 10
    assert "Orzeł" in reply.embed.description
    assert reply.embed.color == RED


@pytest.mark.parametrize("side", ["O", "H", "Heads", "R", "T", "TAILS"])
def test_coinflip_side_aliases_are_case_insensitive(db, side):
    reply = coinflip(db, USER, side, 10, ScriptedRng(1), NOW)
    assert reply.embed.title == "🎉 Wygrana!"


def test_dice_rejects_small_bet(db):
    reply = dice(db, USER, 50, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ Weź chociaż trochę postaw..."


def test_dice_rejects_poor_player(db):
    reply = dice(db, USER, START_CASH + 1, ScriptedRng(), NOW)
    assert reply.embed.title == "❌ Jesteś biedny"


def test_dice_win_above_sixty(db):
    reply = dice(db, USER, 100, ScriptedRng(61), NOW)
    assert cash(db) == START_CASH + 100
    assert reply.embed.description.startswith("# 61")
    assert reply.embed.color == GREEN


def test_dice_sixty_loses(db):
    reply = dice(db, USER, 100, ScriptedRng(60), NOW)
    assert cash(db) == START_CASH - 100
    assert reply.embed.description.startswith("# 60")
    assert reply.embed.color == RED


def test_dice_respects_cooldown(db):
    db.update_timeout(USER, "last_hazarded", NOW)
    reply = dice(db, USER, 100, ScriptedRng(), NOW)
    assert "Czekaj" in reply.embed.title
    assert cash(db) == START_CASH