"""Tests for YAML configuration (config/settings.py)."""

import pytest
import yaml

from config.settings import DEFAULT_CONFIG, Config, GameConfig, load_config, save_config


def test_defaults():
    assert DEFAULT_CONFIG.game.starting_balance == 100
    assert DEFAULT_CONFIG.game.num_decks == 1
    assert DEFAULT_CONFIG.game.seed is None
    assert DEFAULT_CONFIG.payouts == {}


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    config = Config(
        game=GameConfig(starting_balance=500, num_decks=2, seed=11, show_payout_table=False),
        payouts={"full_house": 8},
    )
    save_config(config, path)
    loaded = load_config(path)
    assert loaded == config


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"game": {"starting_balance": 40}}))
    loaded = load_config(path)
    assert loaded.game.starting_balance == 40
    assert loaded.game.num_decks == 1
    assert loaded.payouts == {}


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unknown_payout_category(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"payouts": {"five of a kind": 100}}))
    with pytest.raises(ValueError, match="Unknown hand category"):
        load_config(path)


def test_negative_payout_override(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"payouts": {"straight": -1}}))
    with pytest.raises(ValueError, match=">= 0"):
        load_config(path)


def test_unknown_game_setting(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"game": {"jokers": 2}}))
    with pytest.raises(TypeError):
        load_config(path)


def test_non_positive_balance(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"game": {"starting_balance": 0}}))
    with pytest.raises(ValueError, match="starting_balance"):
        load_config(path)
