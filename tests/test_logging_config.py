import json
import logging

from adamik_mcp.config import AdamikConfig, default_config
from adamik_mcp.logging_config import JsonFormatter


def test_logging_level_config():
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_json_formatter_includes_tool_context():
    record = logging.LogRecord("adamik_mcp.registry", logging.WARNING, __file__, 1, "tool=%s outcome=error", ("listFeatures",), None)
    record.tool = "listFeatures"
    record.error = "Error: Chain dogecoin is not supported"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "tool=listFeatures outcome=error"
    assert payload["tool"] == "listFeatures"
    assert payload["error"].startswith("Error")
    assert "request_id" not in payload


def test_config_never_exposes_key_in_log_fields():
    cfg = AdamikConfig(api_key="secret-key")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "configured base_url=%s", (cfg.base_url,), None)
    assert "secret-key" not in JsonFormatter().format(record)
