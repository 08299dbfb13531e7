"""
Configuration: a Python file in the user's config directory.

Windows:  %APPDATA%\\SemaphURL\\config.py
Others:   $XDG_CONFIG_HOME/semaphurl/config.py (~/.config/semaphurl/config.py)

SEMAPHURL_CONFIG_DIR overrides the directory.
"""

import importlib.util
import logging
import os
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path

from . import presets
from .models import DEFAULT_ARGUMENTS_TEMPLATE, PatternType, RouterConfig, RoutingRule, new_rule_id

logger = logging.getLogger(__name__)

APP_NAME = "SemaphURL"

EXAMPLE_CONFIG = r'''"""
SemaphURL configuration file
Rename this to config.py and customize for your needs
"""

# Routing rules, evaluated by ascending "order"; the first match wins.
# pattern_type: DomainContains, DomainEquals, UrlContains, DomainStartsWith,
#               DomainEndsWith, Regex, HostPort, PortEquals, PortRange
# arguments may use {url} {domain} {path} {query} {scheme} {port}, or set
# "preset" to one of "Default", "Incognito/Private", "New Window" instead.
ROUTING_RULES = [
    {
        "name": "Work",
        "pattern_type": "DomainContains",
        "pattern": "slack.com",
        "browser": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
        "arguments": '--profile-directory="Profile 1" "{url}"',
    },
    {
        "name": "Local dev servers",
        "pattern_type": "PortRange",
        "pattern": "3000-9999",
        "browser": r"C:\Program Files\Mozilla Firefox\firefox.exe",
        "preset": "New Window",
    },
]

# Browser for URLs no rule matches. Leave empty to use the system handler.
DEFAULT_BROWSER = ""
DEFAULT_BROWSER_ARGUMENTS = '"{url}"'

# Bring the browser window to the front after routing (Windows only)
FOCUS_BROWSER_AFTER_ROUTING = True

# Keep a history of routed URLs
ENABLE_HISTORY = True
HISTORY_RETENTION_DAYS = 7

# Logging configuration
# Options: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
LOG_LEVEL = "INFO"
'''


@dataclass
class Settings:
    router: RouterConfig = field(default_factory=RouterConfig)
    log_level: str = "INFO"
    enable_history: bool = True
    history_retention_days: int = 7


def config_dir():
    override = os.environ.get("SEMAPHURL_CONFIG_DIR")
    if override:
        return Path(override)
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")) / APP_NAME
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME.lower()


def data_dir():
    """Directory for history and logs."""
    if sys.platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local")) / APP_NAME
    xdg_state_home = os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state")
    return Path(xdg_state_home) / APP_NAME.lower()


def rule_from_dict(data, index=0):
    """Build a RoutingRule from a ROUTING_RULES entry."""
    browser = data.get("browser", data.get("browser_path", ""))
    pattern_type = PatternType.parse(data.get("pattern_type", PatternType.DOMAIN_CONTAINS))
    if pattern_type is None:
        logger.warning(f"Unknown pattern type {data.get('pattern_type')!r} in rule "
                       f"'{data.get('name', '')}'; the rule will never match")

    if "arguments" in data:
        arguments = data["arguments"]
    elif "preset" in data:
        arguments = presets.get_arguments(data["preset"], browser)
    else:
        arguments = DEFAULT_ARGUMENTS_TEMPLATE

    return RoutingRule(
        name=data.get("name", ""),
        pattern_type=pattern_type,
        pattern=data.get("pattern", ""),
        browser_path=browser,
        browser_arguments_template=arguments,
        enabled=bool(data.get("enabled", True)),
        order=int(data.get("order", index)),
        id=str(data.get("id") or new_rule_id()),
    )


def rules_from_list(items):
    """Build rules from ROUTING_RULES, skipping entries that cannot be read."""
    rules = []
    for i, item in enumerate(items):
        try:
            rules.append(rule_from_dict(item, i))
        except Exception as e:
            name = item.get("name", "") if isinstance(item, dict) else item
            logger.warning(f"Skipping routing rule {i} ({name!r}): {e}")
    return rules


def settings_from_module(config):
    """Read settings from a loaded config module, defaulting missing names."""
    defaults = Settings()
    rules = rules_from_list(getattr(config, "ROUTING_RULES", []))
    router = RouterConfig(
        rules=tuple(rules),
        default_browser_path=getattr(config, "DEFAULT_BROWSER", "") or "",
        default_browser_arguments=getattr(config, "DEFAULT_BROWSER_ARGUMENTS", DEFAULT_ARGUMENTS_TEMPLATE),
        focus_browser_after_routing=bool(getattr(config, "FOCUS_BROWSER_AFTER_ROUTING", True)),
    )
    return Settings(
        router=router,
        log_level=getattr(config, "LOG_LEVEL", defaults.log_level),
        enable_history=bool(getattr(config, "ENABLE_HISTORY", defaults.enable_history)),
        history_retention_days=int(getattr(config, "HISTORY_RETENTION_DAYS", defaults.history_retention_days)),
    )


def load_config(directory=None):
    """Load settings from config.py in directory, or fall back to defaults."""
    directory = Path(directory) if directory else config_dir()
    config_file = directory / "config.py"

    if config_file.exists():
        try:
            spec = importlib.util.spec_from_file_location("semaphurl_config", config_file)
            config = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(config)
            return settings_from_module(config)
        except Exception as e:
            print(f"Error loading config from {config_file}: {e}", file=sys.stderr)
            print("Using default configuration", file=sys.stderr)
    elif not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        print(f"Created config directory: {directory}", file=sys.stderr)
        example_config = directory / "config.example.py"
        if not example_config.exists():
            example_config.write_text(EXAMPLE_CONFIG)
            print(f"Created example config: {example_config}", file=sys.stderr)
            print(f"Copy {example_config} to {config_file} and customize it", file=sys.stderr)

    return Settings()


class ConfigStore:
    """Holds the current RouterConfig; updates swap in a new snapshot."""

    def __init__(self, config=None):
        self._config = config or RouterConfig()
        self._lock = threading.Lock()

    def snapshot(self):
        return self._config

    def update(self, **changes):
        with self._lock:
            self._config = self._config.with_changes(**changes)
            return self._config

    def replace_rule(self, rule):
        """Swap in an edited rule with the same id, or append a new one."""
        with self._lock:
            rules = list(self._config.rules)
            for i, existing in enumerate(rules):
                if existing.id == rule.id:
                    rules[i] = rule
                    break
            else:
                rules.append(rule)
            self._config = self._config.with_changes(rules=tuple(rules))
            return self._config
