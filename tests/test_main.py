"""Unit tests for config and entry point."""

import importlib
import pytest
from unittest.mock import patch
from pagelog import config, main as main_module
from pagelog.adapters import LoggingConsoleAdapter, StdoutConsoleAdapter

ENV_VARS = [
    "PAGELOG_TEXTAREA_ID",
    "PAGELOG_CONSOLE_ENABLED",
    "PAGELOG_TEXTAREA_ENABLED",
    "PAGELOG_TEXTAREA_ROWS",
    "PAGELOG_TEXTAREA_COLS",
    "PAGELOG_TEXTAREA_ATTRIBUTES",
    "PAGELOG_CONSOLE",
    "LOG_LEVEL",
]


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config against a clean environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config)


def test_config_defaults(reload_config):
    """Defaults match Log constructor defaults."""
    cfg = reload_config()

    assert cfg.TEXTAREA_ID == ""
    assert cfg.CONSOLE_ENABLED is True
    assert cfg.TEXTAREA_ENABLED is True
    assert cfg.CONSOLE_BACKEND == "stdout"
    assert cfg.DEFAULT_TEXTAREA_ID == "textlog"


def test_config_from_env(reload_config):
    """Environment overrides defaults."""
    cfg = reload_config(
        PAGELOG_TEXTAREA_ID="out",
        PAGELOG_CONSOLE_ENABLED="off",
        PAGELOG_TEXTAREA_ENABLED="YES",
        PAGELOG_CONSOLE="Logging",
    )

    assert cfg.TEXTAREA_ID == "out"
    assert cfg.CONSOLE_ENABLED is False
    assert cfg.TEXTAREA_ENABLED is True
    assert cfg.CONSOLE_BACKEND == "logging"
    assert cfg.DEFAULT_TEXTAREA_ID == "out"


def test_build_log_backends(reload_config):
    """Backend name selects the console adapter."""
    reload_config()
    assert isinstance(main_module.build_log().console, StdoutConsoleAdapter)

    reload_config(PAGELOG_CONSOLE="logging", PAGELOG_CONSOLE_ENABLED="0")
    log = main_module.build_log()
    assert isinstance(log.console, LoggingConsoleAdapter)
    assert log.console_logging_enabled is False


def test_build_log_unknown_backend(reload_config):
    """Unknown backend is rejected."""
    reload_config(PAGELOG_CONSOLE="syslog")

    with pytest.raises(ValueError):
        main_module.build_log()


def test_main_rejects_unknown_backend(reload_config, capsys):
    """Main exits early on bad backend."""
    reload_config(PAGELOG_CONSOLE="syslog")

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_rejects_bad_rows(reload_config, capsys):
    """Main exits early on non-integer rows."""
    reload_config(PAGELOG_TEXTAREA_ROWS="many")

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
    assert "ROWS/COLS" in capsys.readouterr().err


def test_main_renders_page(reload_config, capsys):
    """Main runs the self test and prints the page."""
    reload_config(PAGELOG_TEXTAREA_ROWS="5", PAGELOG_TEXTAREA_COLS="40")

    with patch('pagelog.main.logging.basicConfig'):
        main_module.main()

    out = capsys.readouterr().out
    assert '<textarea id="textlog" rows="5" cols="40">' in out
    assert "[Info] Info message to textarea and console" in out
    assert "Generic message to console\n" in out
