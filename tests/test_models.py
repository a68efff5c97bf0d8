import dataclasses

import pytest

from kasyno.models import BotSettings, Config, ShopItem, Timeouts, User, UserData


def test_user_defaults_to_empty_wallet():
    user = User(id=7)
    assert user.cash == 0.0
    assert user.bank == 0.0
    assert user.total() == 0.0


def test_user_total_sums_cash_and_bank():
    user = User(id=1, cash=12.5, bank=30.0)
    assert user.total() == user.cash + user.bank
    assert user.total() == 42.5


def test_timeouts_default_to_zero():
    timeouts = Timeouts()
    assert dataclasses.astuple(timeouts) == (0, 0, 0, 0, 0)


def test_user_data_gets_fresh_timeouts():
    first = UserData(user=User(id=1))
    second = UserData(user=User(id=2))
    first.timeouts.last_work = 100
    assert second.timeouts.last_work == 0


def test_shop_item_is_immutable():
    item = ShopItem(id=1, name="miniVIP", description="x", price=5000)
    assert item.role_id is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.price = 1  # type: ignore[misc]


def test_bot_settings_token_defaults_to_empty():
    settings = BotSettings(prefix="!", database_name="casino.db")
    config = Config(bot=settings)
    assert config.bot.token == ""
    assert config.bot.prefix == "!"
    assert config.bot.database_name == "casino.db"