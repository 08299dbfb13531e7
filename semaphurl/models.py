"""
Routing data model: pattern types, rules, decisions and the config snapshot.
"""

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

DEFAULT_ARGUMENTS_TEMPLATE = '"{url}"'


class PatternType(str, Enum):
    """How a rule's pattern is compared against a URL."""
    # Basic
    DOMAIN_CONTAINS = "DomainContains"
    DOMAIN_EQUALS = "DomainEquals"
    URL_CONTAINS = "UrlContains"
    # Advanced
    REGEX = "Regex"
    DOMAIN_STARTS_WITH = "DomainStartsWith"
    DOMAIN_ENDS_WITH = "DomainEndsWith"
    # Developer (port based)
    HOST_PORT = "HostPort"
    PORT_EQUALS = "PortEquals"
    PORT_RANGE = "PortRange"

    @classmethod
    def parse(cls, name):
        """Look up a pattern type by value or member name, ignoring case.

        Returns None for anything unrecognized.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lower().replace("_", "")
        for member in cls:
            if key in (member.value.lower(), member.name.lower().replace("_", "")):
                return member
        return None


def new_rule_id():
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RoutingRule:
    name: str = ""
    pattern_type: Optional[PatternType] = PatternType.DOMAIN_CONTAINS
    pattern: str = ""
    browser_path: str = ""
    browser_arguments_template: str = DEFAULT_ARGUMENTS_TEMPLATE
    enabled: bool = True
    order: int = 0
    id: str = field(default_factory=new_rule_id)

    def edited(self, **changes):
        """Copy of this rule with changes applied; the id is kept."""
        changes.pop("id", None)
        return replace(self, **changes)


@dataclass(frozen=True)
class RoutingDecision:
    original_url: str
    target_path: str
    arguments: str = ""
    matched_rule: Optional[RoutingRule] = None
    is_default_browser: bool = False
    is_system_fallback: bool = False
    success: bool = True
    error_message: Optional[str] = None

    @classmethod
    def failed(cls, url, reason):
        return cls(original_url=url, target_path="", success=False, error_message=reason)

    def describe(self):
        if self.is_system_fallback:
            return "System default browser (fallback)"
        if self.is_default_browser:
            return "Default browser"
        return self.matched_rule.name if self.matched_rule else "Unknown rule"


@dataclass(frozen=True)
class RouterConfig:
    """Read-only view of the settings routing depends on.

    Settings edits produce a new instance; a route in progress keeps
    reading the instance it started with.
    """
    rules: Tuple[RoutingRule, ...] = ()
    default_browser_path: str = ""
    default_browser_arguments: str = DEFAULT_ARGUMENTS_TEMPLATE
    focus_browser_after_routing: bool = True

    def __post_init__(self):
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    def with_changes(self, **changes):
        return replace(self, **changes)

    def enabled_rules(self):
        """Enabled rules by ascending order; equal orders keep list position."""
        return sorted((r for r in self.rules if r.enabled), key=lambda r: r.order)
