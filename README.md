# kasyno

A casino economy game played through short text commands. Every player has
cash in a wallet and money in a bank. They earn it with jobs and (mostly
illegal) side gigs, move it between wallet and bank, pay or rob each other,
spend it in the shop, and lose it at the tables (now and then they win). All
state lives in one SQLite file. The messages shown to players are in Polish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
kasyno
```

Options:

- `--config PATH`: the settings file (default `Config.toml`).
- `--user-id N`: the id of the playing member (default `1`).
- `--user-name NAME`: the name shown in `balance` (default `gracz`).

The settings file needs a `[bot]` section:

```toml
[bot]
prefix = "!"
database_name = "casino.db"
```

A `token` key is read if present, but nothing uses it. If the database file
does not exist, it is created with the `users` and `timeouts` tables. Each
line on standard input is then handled as one command that starts with the
prefix, for example `!work` or `!bj 100`. The reply is printed as plain text.
Lines without the prefix, and unknown commands, are ignored. A missing
argument or an argument that cannot be parsed gets a short error reply.
Players are given as `<@id>` or as a bare number.

## Commands

Economy:

- `balance` (`bal`) `[player]`: wallet, bank and total.
- `work`: a safe job, once every 30 seconds.
- `slut`: a risky side gig, once every 5 minutes. It unlocks once the player has 100 in total.
- `crime`: rarely succeeds but pays 3000–7000. Once an hour, and it unlocks at 100 in total.
- `deposit` (`dep`) `<amount|all>`: move cash to the bank. The bank holds at most 100 000.
- `withdraw` (`wd`, `with`) `<amount|all>`: move money from the bank to the wallet.
- `pay` (`daj`, `przelej`, `give`) `<player> <amount>`: send cash to another player.
- `rob` `<player>`: try to steal 10–25% of someone's cash, once every 3 hours. If caught, the thief pays a fine of 50–350.
- `topmoney` (`leaderboard`, `topka`, `top`, `topeco`): the twelve richest players.
- `shop`: the rank catalogue.
- `buy <id>`: buy a rank.
- `help`: an overview of the commands.
- `ping`: reports how long a database lookup took.

Games. All of them except slots share a 15-second cooldown:

- `blackjack` (`bj`) `<bet>`: play against the dealer. The bet must be above 50. Continue with `hit` (`dobierz`) or `stand` (`pasuj`).
- `coinflip` (`cf`) `<side> <bet>`: the side is `heads`/`h`/`o` or `tails`/`t`/`r`. The minimum bet is 5, and the game is only open to players with at most 1000 in total.
- `dice` (`kostka`, `d`) `<bet>`: roll 1–100. A roll above 60 wins. The bet must be above 50.
- `crash` `<bet>`: the bet is taken up front and the multiplier starts at 0.1x. Each `tick` (`dalej`) either raises the multiplier or crashes the round. `cashout` (`wyplac`, `wypłać`, `stop`) pays the bet times the multiplier.
- `slots` (`slotmachine`, `automat`) `<bet>`: three reels. Three sevens pay 50×, three diamonds 8×, any other three of a kind 5×, and two matching first reels 2×. `again` (`ponownie`, `spin_again`) spins again with the same bet.
- `scratch`: a scratch card for 2. Scratch it with `zdrap` (`scratched`). Every 7 among its seven fields wins that field's prize of 3–16. If `assets/images/scratch_card_scratched.png` exists, the card is also drawn onto that image. The image uses `assets/fonts/zdrapka.ttf` when that file is present.

A player can be in only one blackjack or crash game at a time.

## Using it as a library

The game logic does not depend on any chat service.

`kasyno.database.DbManager` wraps the SQLite file and works as a context
manager. `kasyno.database.init_database` creates a fresh database file.

The command functions live in `kasyno.economy`, `kasyno.banking`,
`kasyno.wagers`, `kasyno.blackjack`, `kasyno.crash`, `kasyno.slots` and
`kasyno.scratch`. They take a `DbManager`, a player id and, where chance is
involved, a `random.Random` and the current Unix time. Each returns a
`kasyno.replies.Reply`.

`start_blackjack` and `start_crash` instead return a `BlackjackGame` or a
`CrashGame` object whose methods make the moves.

```python
import random
import time

from kasyno.database import DbManager, init_database
from kasyno.economy import work

init_database("casino.db")
with DbManager("casino.db") as db:
    reply = work(db, 1, random.Random(), int(time.time()))
    print(reply.render())
```

`kasyno.bot.CasinoBot` ties it all together. It resolves command names and
aliases, keeps track of running games, and its `handle` method turns one
input line into a `Reply`.

## What it does not do

The package does not connect to any chat service. Play happens only through
the console command or through `CasinoBot` in your own code, with one player
per console session.

Buying a rank needs a way to grant roles. Set `CasinoBot.grant_role` to a
callable that takes a role id and returns whether the role was granted.
Without one, `buy` replies that the command only works on a server, and
the purchase does not happen.

In the console, crash does not advance on a timer; each `tick` is one step.
Images produced for scratch cards are attached to the reply but not shown.