import pytest

from sugar_token.config import DEFAULT_CONFIG, EngineConfig, load_config


def test_defaults():
    assert DEFAULT_CONFIG.base_token_price == 0.45
    assert DEFAULT_CONFIG.base_proxy_price == 38.0
    assert DEFAULT_CONFIG.token_floor == 0.01
    assert DEFAULT_CONFIG.proxy_floor == 30.0
    assert DEFAULT_CONFIG.tick_interval_seconds == 1.0
    assert DEFAULT_CONFIG.display_timezone is None


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("tick_interval_seconds: 3\ndisplay_timezone: Asia/Kolkata\ntick_jitter: [0.99, 1.01]\n")
    cfg = load_config(path)
    assert cfg.tick_interval_seconds == 3.0
    assert cfg.display_timezone == "Asia/Kolkata"
    assert cfg.tick_jitter == (0.99, 1.01)


def test_overrides_win_and_none_is_ignored(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("tick_interval_seconds: 3\n")
    assert load_config(path, tick_interval_seconds=0.5).tick_interval_seconds == 0.5
    assert load_config(path, tick_interval_seconds=None).tick_interval_seconds == 3.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize("kwargs", [
    {"token_floor": 0},
    {"proxy_floor": -1},
    {"base_proxy_price": 20.0},
    {"tick_interval_seconds": 0},
    {"tick_jitter": (1.1, 0.9)},
    {"generation_jitter": (0.0, 1.0)},
    {"proxy_step": 1.5},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)
