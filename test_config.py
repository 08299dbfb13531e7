#!/usr/bin/env python3
"""Test configuration loading."""

import tempfile
from pathlib import Path

from semaphurl.config import ConfigStore, load_config, rule_from_dict
from semaphurl.models import PatternType, RoutingRule

CONFIG = r'''
ROUTING_RULES = [
    {"name": "Work", "pattern_type": "DomainContains", "pattern": "slack.com",
     "browser": "/usr/bin/chromium", "arguments": "--profile-directory=Work {url}"},
    {"name": "Dev", "pattern_type": "port_range", "pattern": "3000-3999",
     "browser": "/usr/bin/firefox", "preset": "New Window", "order": -1},
    {"name": "Off", "pattern": "x", "enabled": False, "id": "fixed-id"},
]
DEFAULT_BROWSER = "/usr/bin/firefox"
LOG_LEVEL = "DEBUG"
ENABLE_HISTORY = False
'''


def test_config_loading():
    with tempfile.TemporaryDirectory() as tmpdir:
        directory = Path(tmpdir)
        (directory / "config.py").write_text(CONFIG)
        settings = load_config(directory)

        rules = settings.router.rules
        assert [r.name for r in rules] == ["Work", "Dev", "Off"]
        assert rules[0].browser_arguments_template == "--profile-directory=Work {url}"
        assert rules[0].order == 0
        assert rules[1].pattern_type == PatternType.PORT_RANGE
        assert rules[1].browser_arguments_template == '-new-window "{url}"'
        assert rules[1].order == -1
        assert rules[2].pattern_type == PatternType.DOMAIN_CONTAINS
        assert rules[2].enabled is False
        assert rules[2].id == "fixed-id"
        assert rules[2].browser_arguments_template == '"{url}"'

        assert settings.router.default_browser_path == "/usr/bin/firefox"
        assert settings.router.focus_browser_after_routing is True
        assert settings.log_level == "DEBUG"
        assert settings.enable_history is False
        assert settings.history_retention_days == 7


def test_missing_directory_creates_example():
    with tempfile.TemporaryDirectory() as tmpdir:
        directory = Path(tmpdir) / "semaphurl"
        settings = load_config(directory)
        assert settings.router.rules == ()
        assert (directory / "config.example.py").exists()
        assert not (directory / "config.py").exists()


def test_broken_config_uses_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        directory = Path(tmpdir)
        (directory / "config.py").write_text("ROUTING_RULES = [\n")
        settings = load_config(directory)
        assert settings.router.rules == ()
        assert settings.log_level == "INFO"


def test_malformed_rule_is_skipped_alone():
    config = r'''
ROUTING_RULES = [
    {"name": "Good", "pattern": "example.com", "browser": "/usr/bin/firefox"},
    {"name": "Bad", "pattern": "x.com", "browser": "/usr/bin/firefox", "order": "first"},
    "not a rule",
    {"name": "Also good", "pattern": "github.com", "browser": "/usr/bin/chromium"},
]
'''
    with tempfile.TemporaryDirectory() as tmpdir:
        directory = Path(tmpdir)
        (directory / "config.py").write_text(config)
        settings = load_config(directory)
        assert [r.name for r in settings.router.rules] == ["Good", "Also good"]
        assert settings.router.rules[1].order == 3


def test_unknown_pattern_type_is_kept_but_inert():
    rule = rule_from_dict({"name": "odd", "pattern_type": "Glob", "pattern": "*"})
    assert rule.pattern_type is None
    assert rule.id


def test_pattern_type_parse():
    assert PatternType.parse("HostPort") == PatternType.HOST_PORT
    assert PatternType.parse("host_port") == PatternType.HOST_PORT
    assert PatternType.parse("REGEX") == PatternType.REGEX
    assert PatternType.parse(PatternType.PORT_EQUALS) == PatternType.PORT_EQUALS
    assert PatternType.parse("nope") is None
    assert PatternType.parse(3) is None


def test_config_store_swaps_snapshots():
    store = ConfigStore()
    before = store.snapshot()
    rule = RoutingRule(name="A", pattern="a")
    after = store.replace_rule(rule)

    assert before.rules == ()
    assert after.rules == (rule,)

    edited = rule.edited(name="B")
    store.replace_rule(edited)
    assert [r.name for r in store.snapshot().rules] == ["B"]
    assert after.rules[0].name == "A"

    store.update(default_browser_path="/usr/bin/firefox")
    assert store.snapshot().default_browser_path == "/usr/bin/firefox"
    assert store.snapshot().rules == (edited,)
