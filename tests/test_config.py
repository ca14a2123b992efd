from datetime import timedelta

import pytest

from shoporusni.api import DEFAULT_URL
from shoporusni import config as config_mod
from shoporusni.config import CONFIG_FILE_NAME, config_dir, load_config
from shoporusni.errors import CacheIOError, ConfigError


def test_missing_config_uses_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / CONFIG_FILE_NAME)
    assert cfg.api.url == DEFAULT_URL
    assert cfg.api.timeout_seconds == 30
    assert cfg.cache.ttl == timedelta(minutes=30)


def test_missing_required_config_fails(tmp_path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "other.toml", required=True)


def test_load_config_reads_sections(tmp_path) -> None:
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(
        '[api]\nurl = "https://example.test/latest"\ntimeout_seconds = 5\n'
        '[cache]\nrefresh = "1h"\n',
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.api.url == "https://example.test/latest"
    assert cfg.api.timeout_seconds == 5
    assert cfg.api.user_agent.startswith("shoporusni/")
    assert cfg.cache.ttl == timedelta(hours=1)


@pytest.mark.parametrize(
    "body",
    [
        "[api\n",
        "[api]\nbogus = 1\n",
        "api = 3\n",
        '[api]\ntimeout_seconds = "soon"\n',
        "[api]\ntimeout_seconds = 0\n",
        '[cache]\nrefresh = "forever"\n',
        "[cache]\nrefresh = 30\n",
        '[cache]\nrefresh = "99999999999y"\n',
        '[cach]\nrefresh = "1s"\n',
        'url = "https://example.test/latest"\n',
    ],
)
def test_load_config_rejects_bad_values(tmp_path, body: str) -> None:
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_dir_is_created(tmp_path, monkeypatch) -> None:
    target = tmp_path / "nested" / "shoporusni"
    monkeypatch.setattr(config_mod.typer, "get_app_dir", lambda _name: str(target))

    assert config_dir() == target
    assert target.is_dir()


def test_config_dir_creation_failure(tmp_path, monkeypatch) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(config_mod.typer, "get_app_dir", lambda _name: str(blocker / "sub"))

    with pytest.raises(CacheIOError):
        config_dir()
