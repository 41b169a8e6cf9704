import pytest

from adamik_mcp.chains import DEFAULT_SUPPORTED_CHAINS
from adamik_mcp.config import (
    AdamikConfig,
    ConfigError,
    _load_supported_chains,
    _load_timeout,
    _parse_chain_list,
    load_api_key,
    validate_config,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("ADAMIK_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 10.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("ADAMIK_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_api_key_env_over_file(monkeypatch, tmp_path):
    monkeypatch.setenv("ADAMIK_API_KEY", "env-key")
    monkeypatch.setenv("ADAMIK_API_KEY_FILE", str(tmp_path / "apikey.txt"))
    assert load_api_key() == "env-key"


def test_load_api_key_from_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.delenv("ADAMIK_API_KEY", raising=False)
    monkeypatch.setenv("ADAMIK_API_KEY_FILE", str(key_file))
    assert load_api_key() == "file-key"


def test_load_api_key_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("ADAMIK_API_KEY", raising=False)
    monkeypatch.setenv("ADAMIK_API_KEY_FILE", str(tmp_path / "absent.txt"))
    assert load_api_key() is None


def test_parse_chain_list():
    raw = " ethereum , , bitcoin ,"
    assert _parse_chain_list(raw) == ["ethereum", "bitcoin"]
    assert _parse_chain_list(None) == []


def test_supported_chains_env_override(monkeypatch):
    monkeypatch.setenv("ADAMIK_SUPPORTED_CHAINS", "cosmoshub,osmosis")
    assert _load_supported_chains() == ["cosmoshub", "osmosis"]
    monkeypatch.delenv("ADAMIK_SUPPORTED_CHAINS")
    assert _load_supported_chains() == list(DEFAULT_SUPPORTED_CHAINS)


def test_openapi_url_strips_api_suffix():
    assert AdamikConfig(base_url="https://api.adamik.io/api").openapi_url == "https://api.adamik.io/openapi.json"
    assert AdamikConfig(base_url="https://api.adamik.io/api/").openapi_url == "https://api.adamik.io/openapi.json"
    assert AdamikConfig(base_url="http://localhost:3000").openapi_url == "http://localhost:3000/openapi.json"


def test_validate_config_accepts_complete_config(config):
    assert validate_config(config) is config


def test_validate_config_reports_every_problem():
    cfg = AdamikConfig(base_url="not a url", api_key="  ", supported_chains=["ethereum"])
    with pytest.raises(ConfigError) as excinfo:
        validate_config(cfg)
    problems = excinfo.value.problems
    assert len(problems) == 2
    assert any("ADAMIK_API_BASE_URL" in p for p in problems)
    assert any("ADAMIK_API_KEY" in p for p in problems)


def test_validate_config_rejects_missing_key():
    cfg = AdamikConfig(base_url="https://api.adamik.io/api", api_key=None)
    with pytest.raises(ConfigError, match="ADAMIK_API_KEY"):
        validate_config(cfg)


def test_signing_key_is_optional(config):
    assert config.starknet_private_key is None or isinstance(config.starknet_private_key, str)
    validate_config(AdamikConfig(base_url=config.base_url, api_key="k", starknet_private_key=None))
