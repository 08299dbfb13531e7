#!/usr/bin/env python3
"""Test the command line entry point (nothing is launched)."""

import logging
from logging.handlers import RotatingFileHandler

from semaphurl.cli import main

CONFIG = r'''
ROUTING_RULES = [
    {"name": "GitHub", "pattern_type": "DomainEquals", "pattern": "github.com",
     "browser": "/opt/browsers/chromium", "arguments": "--new-window {url}"},
]
ENABLE_HISTORY = False
'''


def use_dirs(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.py").write_text(CONFIG)
    monkeypatch.setenv("SEMAPHURL_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "state"))


def teardown_function(function):
    # setup_logging installs file and stderr handlers on the root logger
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            handler.close()
            root.removeHandler(handler)


def test_dry_run_prints_decision(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    assert main(["--dry-run", "github.com/user/repo"]) == 0
    out = capsys.readouterr().out
    assert "Rule:      GitHub" in out
    assert "Browser:   /opt/browsers/chromium" in out
    assert "Arguments: --new-window https://github.com/user/repo" in out


def test_dry_run_unmatched_url_uses_system_handler(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    assert main(["--dry-run", "https://example.com"]) == 0
    out = capsys.readouterr().out
    assert "System default browser (fallback)" in out
    assert "(system handler)" in out


def test_placeholders(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    assert main(["--placeholders"]) == 0
    assert "{domain} - Domain/host" in capsys.readouterr().out


def test_history_listing(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    assert main(["--history"]) == 0
    assert capsys.readouterr().out == ""


def test_no_url_without_default_browser(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_bad_history_file_does_not_block_routing(tmp_path, monkeypatch, capsys):
    use_dirs(tmp_path, monkeypatch)
    (tmp_path / "config" / "config.py").write_text(CONFIG.replace("ENABLE_HISTORY = False", "ENABLE_HISTORY = True"))
    history_file = tmp_path / "state" / "semaphurl" / "history.json"
    history_file.parent.mkdir(parents=True)
    history_file.write_text(
        '{"entries": [{"url": "https://a.com", "browser_path": "System", '
        '"browser_name": "System Default", "timestamp": "2024-01-01T00:00:00"}]}'
    )

    assert main(["--dry-run", "https://example.com"]) == 0
    assert "System default browser (fallback)" in capsys.readouterr().out
