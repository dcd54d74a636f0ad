import json

import pytest

from anniversary_widget.config import Config, ConfigStore


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


def test_missing_file_gives_defaults(config_path):
    config = Config.load(config_path)
    assert config.notified == []
    assert config.position == (0, 0)


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"position": {"x": 1, "y": 2}}',
        '{"notification": {"notified": [1]}, "position": {"x": "a", "y": 2}}',
        '{"notification": {"notified": [true]}, "position": {"x": 1, "y": 2}}',
        '{"notification": {"notified": []}, "position": {"x": 99999999999, "y": 2}}',
    ],
)
def test_malformed_file_gives_defaults(config_path, content):
    config_path.write_text(content, encoding="utf-8")
    config = Config.load(config_path)
    assert config == Config()


def test_round_trip(config_path):
    Config(notified=[30, 7], position=(10, 20)).save(config_path)
    loaded = Config.load(config_path)
    assert loaded.notified == [30, 7]
    assert loaded.position == (10, 20)


def test_file_layout(config_path):
    Config(notified=[100], position=(3, 4)).save(config_path)
    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data == {"notification": {"notified": [100]}, "position": {"x": 3, "y": 4}}


def test_default_position_from_screen(config_path):
    store = ConfigStore(config_path)
    assert store.load_position((1920, 1080)) == (1920 - 285, 1080 - 150)


def test_saved_position_is_used(config_path):
    store = ConfigStore(config_path)
    store.save_position((40, 50))
    assert store.load_position((1920, 1080)) == (40, 50)


def test_save_position_keeps_notifications(config_path):
    store = ConfigStore(config_path)
    store.save_notification(7)
    store.save_position((5, 6))
    config = Config.load(config_path)
    assert config.notified == [7]
    assert config.position == (5, 6)


def test_notification_recorded(config_path):
    store = ConfigStore(config_path)
    assert not store.is_notified(30)
    store.save_notification(30)
    assert store.is_notified(30)
    assert Config.load(config_path).notified == [30]


def test_notifications_visible_to_new_store(config_path):
    ConfigStore(config_path).save_notification(0)
    fresh = ConfigStore(config_path)
    assert fresh.is_notified(0)
    assert not fresh.is_notified(7)