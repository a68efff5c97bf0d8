"""Casino economy game: jobs, banking, a shop and gambling games on SQLite."""

__version__ = "0.1.0"

__all__ = [
    "banking",
    "blackjack",
    "bot",
    "crash",
    "database",
    "economy",
    "models",
    "replies",
    "scratch",
    "shop",
    "slots",
    "wagers",
]