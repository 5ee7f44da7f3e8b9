"""Configuration settings for the video poker game."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class GameConfig:
    """Game configuration."""

    starting_balance: int = 100
    num_decks: int = 1
    seed: int | None = None
    show_payout_table: bool = True


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    # Category name -> multiplier, overriding the default payout table
    payouts: dict[str, int] = field(default_factory=dict)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    from poker.payouts import category_from_name

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "game" in data:
        config.game = GameConfig(**data["game"])
    if "payouts" in data:
        payouts = data["payouts"] or {}
        for name, value in payouts.items():
            category_from_name(name)
            if int(value) < 0:
                raise ValueError(f"Payout for {name} must be >= 0, got {value}")
        config.payouts = {name: int(value) for name, value in payouts.items()}

    if config.game.starting_balance <= 0:
        raise ValueError(f"starting_balance must be positive, got {config.game.starting_balance}")

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": {
            "starting_balance": config.game.starting_balance,
            "num_decks": config.game.num_decks,
            "seed": config.game.seed,
            "show_payout_table": config.game.show_payout_table,
        },
        "payouts": dict(config.payouts),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
