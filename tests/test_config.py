"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from campusconnect.config import ServerConfig
from campusconnect.datasets.merge import MergePolicy


def test_defaults():
    config = ServerConfig.from_env({})

    assert config.data_dir == Path("data")
    assert config.public_dir == Path("public")
    assert config.port == 3000
    assert config.merge_policy is MergePolicy.PRIMARY_WINS


def test_overrides():
    config = ServerConfig.from_env(
        {
            "CAMPUSCONNECT_DATA_DIR": "/srv/data",
            "PORT": "8080",
            "CAMPUSCONNECT_MERGE_POLICY": "supplemental_wins",
        }
    )

    assert config.data_dir == Path("/srv/data")
    assert config.port == 8080
    assert config.merge_policy is MergePolicy.SUPPLEMENTAL_WINS


def test_unknown_merge_policy_is_an_error():
    with pytest.raises(ValueError):
        ServerConfig.from_env({"CAMPUSCONNECT_MERGE_POLICY": "field_level"})


def test_main_exits_without_api_key(monkeypatch):
    from campusconnect import server

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(SystemExit) as exc:
        server.main()
    assert exc.value.code == 1
