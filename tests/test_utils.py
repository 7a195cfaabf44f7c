from __future__ import annotations

import json
import logging
import os

import pytest

from quantile_engine.utils import (
    ConfigurationError,
    InvalidInput,
    default_method,
    default_whis,
    get_config_value,
    load_config,
    log_function_call,
    setup_logging,
    validate_config,
)

pytestmark = pytest.mark.unit


def test_load_config_defaults():
    config = load_config()
    assert config["QUANTILE_ENGINE_METHOD"] == "linear"
    assert config["QUANTILE_ENGINE_WHIS"] == 1.5
    assert config["LOG_LEVEL"] == "INFO"
    assert "LOG_FILE" not in config
    assert validate_config(config) == []


def test_environment_overrides_config_file(tmp_path, monkeypatch):
    config_file = tmp_path / "quantiles.json"
    config_file.write_text(json.dumps({"QUANTILE_ENGINE_METHOD": "weibull", "QUANTILE_ENGINE_WHIS": 3}))

    assert load_config(config_file)["QUANTILE_ENGINE_METHOD"] == "weibull"
    assert default_whis(load_config(config_file)) == 3.0

    monkeypatch.setenv("QUANTILE_ENGINE_METHOD", "blom")
    assert load_config(config_file)["QUANTILE_ENGINE_METHOD"] == "blom"


def test_unreadable_config_file(tmp_path):
    config_file = tmp_path / "broken.json"
    config_file.write_text("{not json")
    with pytest.raises(ConfigurationError, match="Failed to load config file"):
        load_config(config_file)


def test_dotenv_file_is_read_without_touching_environment(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\nQUANTILE_ENGINE_METHOD=Cleveland\nUNRELATED=1\n")

    config = load_config(env_file=env_file)
    assert config["LOG_LEVEL"] == "DEBUG"
    assert default_method(config) == "Cleveland"
    assert "UNRELATED" not in config
    for key in ("LOG_LEVEL", "QUANTILE_ENGINE_METHOD", "UNRELATED"):
        assert key not in os.environ

    monkeypatch.setenv("QUANTILE_ENGINE_METHOD", "weibull")
    assert load_config(env_file=env_file)["QUANTILE_ENGINE_METHOD"] == "weibull"


def test_dotenv_file_is_only_read_when_asked(tmp_path):
    (tmp_path / ".env").write_text("QUANTILE_ENGINE_METHOD=Cleveland\n")
    assert get_config_value("QUANTILE_ENGINE_METHOD") == "linear"
    assert default_method() == "linear"


def test_get_config_value_default():
    assert get_config_value("MISSING_KEY", 42) == 42


def test_validate_config_reports_every_problem():
    errors = validate_config(
        {"QUANTILE_ENGINE_METHOD": "nearest", "QUANTILE_ENGINE_WHIS": "-2", "LOG_LEVEL": "LOUD"}
    )
    assert len(errors) == 3


@pytest.mark.parametrize("whis", ["abc", "-1", "inf"])
def test_default_whis_rejects_bad_values(whis):
    with pytest.raises(ConfigurationError):
        default_whis({"QUANTILE_ENGINE_WHIS": whis})


def test_default_method_rejects_unknown():
    with pytest.raises(ConfigurationError, match="Unknown quantile method"):
        default_method({"QUANTILE_ENGINE_METHOD": "nearest"})


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "engine.log"
    root = logging.getLogger()
    saved, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging("debug", str(log_file))
        logging.getLogger("quantile_engine.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved
        root.setLevel(saved_level)

    assert "quantile_engine.test - DEBUG - hello" in log_file.read_text()


def test_log_function_call_logs_and_reraises(caplog):
    @log_function_call
    def explode():
        raise ValueError("boom")

    @log_function_call
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG):
        assert add(1, 2) == 3
        with pytest.raises(ValueError):
            explode()

    messages = [r.getMessage() for r in caplog.records]
    assert "add completed successfully" in messages
    assert "explode failed with error: boom" in messages


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError, match="Invalid log level: verbose"):
        setup_logging("verbose")


def test_log_function_call_keeps_rejected_input_at_debug(caplog):
    @log_function_call
    def reject():
        raise InvalidInput("empty batch")

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(InvalidInput):
            reject()

    records = [(r.levelno, r.getMessage()) for r in caplog.records if "reject" in r.getMessage()]
    assert (logging.DEBUG, "reject rejected its input: empty batch") in records
    assert all(level < logging.ERROR for level, _ in records)
