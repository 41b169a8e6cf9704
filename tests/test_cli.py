from adamik_mcp import cli


def test_missing_api_key_exits_before_serving(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("ADAMIK_API_KEY", raising=False)
    monkeypatch.setenv("ADAMIK_API_KEY_FILE", str(tmp_path / "absent.txt"))
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)

    def fail_run(_config):
        raise AssertionError("transport must not start without configuration")

    monkeypatch.setattr(cli, "run_stdio", fail_run)

    assert cli.main([]) == 1
    err = capsys.readouterr().err
    assert "Configuration validation failed" in err
    assert "ADAMIK_API_KEY" in err


def test_valid_config_starts_stdio(monkeypatch):
    monkeypatch.setenv("ADAMIK_API_KEY", "k")
    monkeypatch.setattr(cli, "configure_logging", lambda config: None)
    started = []

    async def fake_run(config):
        started.append(config.api_key)

    monkeypatch.setattr(cli, "run_stdio", fake_run)

    assert cli.main([]) == 0
    assert started == ["k"]
