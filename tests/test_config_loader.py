"""
Tests for YAML configuration loading.
"""

import logging
from pathlib import Path

import pytest
from werewolf.config import GameConfig, load_config, load_config_from_yaml


def test_default_config():
    config = load_config()
    assert config == GameConfig()
    assert config.player_count == 8
    assert config.random_seed is None
    assert config.max_rounds == 50
    assert config.use_narration


def test_load_config_returns_fresh_instance():
    first = load_config()
    first.player_count = 12
    assert load_config().player_count == 8


def test_load_from_yaml(tmp_path):
    path = tmp_path / "party.yaml"
    path.write_text("player_count: 12\nrandom_seed: 3\nuse_narration: false\nport: 8080\n")

    config = load_config(str(path))

    assert config.player_count == 12
    assert config.random_seed == 3
    assert not config.use_narration
    assert config.port == 8080
    # Untouched keys keep their defaults
    assert config.log_view_size == 10


def test_unknown_key_is_ignored_with_warning(tmp_path, caplog):
    path = tmp_path / "party.yaml"
    path.write_text("player_count: 6\nnum_mafia: 2\n")

    with caplog.at_level(logging.WARNING, logger="werewolf"):
        config = load_config_from_yaml(str(path))

    assert config.player_count == 6
    assert not hasattr(config, "num_mafia")
    assert "num_mafia" in caplog.text


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config_from_yaml(str(path)) == GameConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_web_section(tmp_path):
    path = tmp_path / "party.yaml"
    path.write_text("player_count: 9\nweb:\n  host: 0.0.0.0\n  port: 8080\n")

    config = load_config(str(path))

    assert config.player_count == 9
    assert config.host == "0.0.0.0"
    assert config.port == 8080


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- player_count\n- 8\n")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_bundled_party_config():
    path = Path(__file__).resolve().parent.parent / "configs" / "party.yaml"
    config = load_config(str(path))
    assert config.player_count == 8
    assert config.port == 5000
