"""Command dispatch for the casino bot and its console entry point."""

from __future__ import annotations

import argparse
import configparser
import random
import re
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Set, Union

from kasyno.banking import (
    GuildOnlyError,
    buy,
    deposit,
    pay,
    rob,
    shop_listing,
    topmoney,
    withdraw,
)
from kasyno.blackjack import BlackjackGame, start_blackjack
from kasyno.crash import CrashGame, start_crash
from kasyno.database import DbManager, init_database
from kasyno.economy import balance, crime, help_reply, slut, work
from kasyno.models import BotSettings, Config
from kasyno.replies import (
    GREEN,
    RED,
    Embed,
    Reply,
    argument_count_error,
    argument_parse_error,
)
from kasyno.scratch import draw_card, render_card, scratch_reply, start_scratch
from kasyno.slots import spin
from kasyno.wagers import coinflip, dice

COMMAND_ALIASES: Dict[str, tuple] = {
    "ping": (),
    "work": (),
    "balance": ("bal",),
    "slut": (),
    "crime": (),
    "deposit": ("dep",),
    "withdraw": ("wd", "with"),
    "help": (),
    "rob": (),
    "pay": ("daj", "przelej", "give"),
    "topmoney": ("leaderboard", "topka", "top", "topeco"),
    "slots": ("slotmachine", "automat"),
    "coinflip": ("cf",),
    "blackjack": ("bj",),
    "shop": (),
    "buy": (),
    "dice": ("kostka", "d"),
    "crash": (),
    "scratch": (),
    # moves inside a running game, standing in for its buttons
    "hit": ("dobierz",),
    "stand": ("pasuj",),
    "cashout": ("wyplac", "wypłać", "stop"),
    "tick": ("dalej",),
    "zdrap": ("scratched",),
    "again": ("ponownie", "spin_again"),
}

NO_GAME_MESSAGE = "Nie masz żadnej rozpoczętej gry."
SCRATCH_ASSETS = Path("assets")

_INTEGER = re.compile(r"[+-]?\d+")
_MENTION = re.compile(r"<@!?(\d+)>|(\d+)")

Game = Union[BlackjackGame, CrashGame]


class _MissingArgument(Exception):
    pass


class _BadArgument(Exception):
    pass


class _Args:
    """Positional command arguments, consumed in order."""

    def __init__(self, words: Sequence[str]) -> None:
        self._words = list(words)

    def _next(self) -> str:
        if not self._words:
            raise _MissingArgument
        return self._words.pop(0)

    def text(self) -> str:
        return self._next()

    def integer(self) -> int:
        word = self._next()
        if not _INTEGER.fullmatch(word):
            raise _BadArgument
        return int(word)

    def user(self) -> int:
        match = _MENTION.fullmatch(self._next())
        if match is None:
            raise _BadArgument
        return int(match.group(1) or match.group(2))

    def optional_user(self) -> Optional[int]:
        return self.user() if self._words else None


def _lookup_table() -> Dict[str, str]:
    table: Dict[str, str] = {}
    for name, aliases in COMMAND_ALIASES.items():
        table[name] = name
        for alias in aliases:
            table[alias] = name
    return table


class CasinoBot:
    """Routes prefixed text commands to the casino's games and bank."""

    def __init__(self, db: DbManager, prefix: str, rng: Optional[random.Random] = None) -> None:
        self.db = db
        self.prefix = prefix
        self.rng = rng if rng is not None else random.Random()
        self.grant_role: Optional[Callable[[int], bool]] = None
        self.active_players: Set[int] = set()
        self._names = _lookup_table()
        self._games: Dict[int, Game] = {}
        self._pending_scratch: Set[int] = set()
        self._slot_bets: Dict[int, int] = {}
        self._handlers: Dict[str, Callable[[int, str, _Args], Reply]] = {
            "ping": self._ping,
            "work": lambda uid, _n, _a: work(self.db, uid, self.rng, self._now()),
            "balance": self._balance,
            "slut": lambda uid, _n, _a: slut(self.db, uid, self.rng, self._now()),
            "crime": lambda uid, _n, _a: crime(self.db, uid, self.rng, self._now()),
            "deposit": lambda uid, _n, a: deposit(self.db, uid, a.text()),
            "withdraw": lambda uid, _n, a: withdraw(self.db, uid, a.text()),
            "help": lambda _u, _n, _a: help_reply(),
            "rob": self._rob,
            "pay": self._pay,
            "topmoney": lambda _u, _n, _a: topmoney(self.db),
            "slots": self._slots,
            "coinflip": self._coinflip,
            "blackjack": self._blackjack,
            "shop": lambda _u, _n, _a: shop_listing(),
            "buy": self._buy,
            "dice": self._dice,
            "crash": self._crash,
            "scratch": self._scratch,
            "hit": self._hit,
            "stand": self._stand,
            "cashout": self._cashout,
            "tick": self._tick,
            "zdrap": self._zdrap,
            "again": self._again,
        }

    @staticmethod
    def _now() -> int:
        return int(time.time())

    def resolve(self, name: str) -> Optional[str]:
        """The command a name or alias stands for, or None."""
        return self._names.get(name)

    def begin_game(self, user_id: int) -> bool:
        """Mark the member as playing; False if they already are."""
        if user_id in self.active_players:
            return False
        self.active_players.add(user_id)
        return True

    def end_game(self, user_id: int) -> None:
        """Free the member to start another game."""
        self.active_players.discard(user_id)
        self._games.pop(user_id, None)

    def handle(self, user_id: int, user_name: str, line: str) -> Optional[Reply]:
        """Answer one line of chat; None if it is not a known command."""
        if not line.startswith(self.prefix):
            return None
        words = line[len(self.prefix):].split()
        if not words:
            return None
        command = self.resolve(words[0])
        if command is None:
            return None
        try:
            return self._handlers[command](user_id, user_name, _Args(words[1:]))
        except _MissingArgument:
            return argument_count_error()
        except _BadArgument:
            return argument_parse_error()
        except GuildOnlyError as error:
            return Reply(content=str(error))

    # plain commands

    def _ping(self, user_id: int, _name: str, _args: _Args) -> Reply:
        start = time.perf_counter()
        self.db.ensure_member(user_id)
        latency = int((time.perf_counter() - start) * 1000)
        return Reply(
            embed=Embed(title="🏓 Pong!", description=f"Opóźnienie: {latency} ms", color=GREEN)
        )

    def _balance(self, user_id: int, user_name: str, args: _Args) -> Reply:
        target = args.optional_user()
        if target is None:
            return balance(self.db, user_id, user_name, "")
        return balance(self.db, target, f"<@{target}>", "")

    def _rob(self, user_id: int, _name: str, args: _Args) -> Reply:
        return rob(self.db, user_id, args.user(), self.rng, self._now())

    def _pay(self, user_id: int, _name: str, args: _Args) -> Reply:
        receiver = args.user()
        return pay(self.db, user_id, receiver, args.integer())

    def _buy(self, user_id: int, _name: str, args: _Args) -> Reply:
        return buy(self.db, user_id, args.integer(), self.grant_role)

    def _coinflip(self, user_id: int, _name: str, args: _Args) -> Reply:
        side = args.text()
        return coinflip(self.db, user_id, side, args.integer(), self.rng, self._now())

    def _dice(self, user_id: int, _name: str, args: _Args) -> Reply:
        return dice(self.db, user_id, args.integer(), self.rng, self._now())

    # games with several moves

    def _start_game(self, user_id: int, started: Union[Game, Reply]) -> Reply:
        if isinstance(started, Reply):
            self.end_game(user_id)
            return started
        self._games[user_id] = started
        return started.reply()

    def _blackjack(self, user_id: int, _name: str, args: _Args) -> Reply:
        bet = args.integer()
        if not self.begin_game(user_id):
            return Reply(
                embed=Embed(
                    title="❌ Już grasz!",
                    description="Dokończ swoją poprzednią partię, zanim zaczniesz nową.",
                    color=RED,
                )
            )
        return self._start_game(
            user_id, start_blackjack(self.db, user_id, bet, self.rng, self._now())
        )

    def _crash(self, user_id: int, _name: str, args: _Args) -> Reply:
        bet = args.integer()
        if not self.begin_game(user_id):
            return Reply(
                embed=Embed(
                    title="❌ Ale co ty odwalasz?",
                    description="Dokończ tą poprzednią grę w tej chwili!",
                    color=RED,
                )
            )
        return self._start_game(user_id, start_crash(self.db, user_id, bet, self._now()))

    def _move(self, user_id: int, kind: type, move: Callable[[Game], Reply]) -> Reply:
        game = self._games.get(user_id)
        if not isinstance(game, kind):
            return Reply(content=NO_GAME_MESSAGE)
        reply = move(game)
        if game.game_over if isinstance(game, BlackjackGame) else game.finished:
            self.end_game(user_id)
        return reply

    def _hit(self, user_id: int, _name: str, _args: _Args) -> Reply:
        return self._move(user_id, BlackjackGame, lambda game: game.hit())

    def _stand(self, user_id: int, _name: str, _args: _Args) -> Reply:
        return self._move(user_id, BlackjackGame, lambda game: game.stand())

    def _cashout(self, user_id: int, _name: str, _args: _Args) -> Reply:
        return self._move(user_id, CrashGame, lambda game: game.cash_out())

    def _tick(self, user_id: int, _name: str, _args: _Args) -> Reply:
        return self._move(user_id, CrashGame, lambda game: game.tick(self.rng))

    def _scratch(self, user_id: int, _name: str, _args: _Args) -> Reply:
        reply = start_scratch(self.db, user_id, self._now())
        if reply.buttons:
            self._pending_scratch.add(user_id)
        return reply

    def _zdrap(self, user_id: int, _name: str, _args: _Args) -> Reply:
        if user_id not in self._pending_scratch:
            return Reply(content=NO_GAME_MESSAGE)
        self._pending_scratch.discard(user_id)
        card = draw_card(self.rng)
        reply = scratch_reply(card)
        base = SCRATCH_ASSETS / "images" / "scratch_card_scratched.png"
        font = SCRATCH_ASSETS / "fonts" / "zdrapka.ttf"
        if base.exists():
            reply.attachment = render_card(card, base, font if font.exists() else None)
        if card.win != 0:
            self.db.add_cash(user_id, card.win)
        return reply

    def _slots(self, user_id: int, _name: str, args: _Args) -> Reply:
        return self._spin(user_id, args.integer())

    def _again(self, user_id: int, _name: str, _args: _Args) -> Reply:
        bet = self._slot_bets.get(user_id)
        if bet is None:
            return Reply(content=NO_GAME_MESSAGE)
        return self._spin(user_id, bet)

    def _spin(self, user_id: int, bet: int) -> Reply:
        reply = spin(self.db, user_id, bet, self.rng)
        if reply.buttons:
            self._slot_bets[user_id] = bet
        else:
            self._slot_bets.pop(user_id, None)
        return reply


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _load_config(path: Union[str, Path]) -> Config:
    parser = configparser.ConfigParser()
    with open(path, encoding="utf-8") as handle:
        parser.read_file(handle)
    section = parser["bot"]
    return Config(
        bot=BotSettings(
            prefix=_unquote(section["prefix"]),
            database_name=_unquote(section["database_name"]),
            token=_unquote(section.get("token", "")),
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the casino on standard input, one command per line."""
    parser = argparse.ArgumentParser(prog="kasyno", description="Casino economy bot.")
    parser.add_argument("--config", default="Config.toml", help="configuration file")
    parser.add_argument("--user-id", type=int, default=1, help="id of the playing member")
    parser.add_argument("--user-name", default="gracz", help="name of the playing member")
    options = parser.parse_args(argv)

    print("Hello!")
    config = _load_config(options.config)

    database = Path(config.bot.database_name)
    if not database.exists():
        init_database(database)

    with DbManager(database) as db:
        bot = CasinoBot(db, config.bot.prefix, random.Random())
        for line in sys.stdin:
            reply = bot.handle(options.user_id, options.user_name, line.strip())
            if reply is not None:
                print(reply.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())