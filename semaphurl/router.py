"""
Routing decision: which browser should open a URL.

route() is a pure function of the URL and a RouterConfig snapshot (plus a
file existence check for the default browser). It never launches anything;
see launcher.py for that.
"""

import logging
import os

from .matcher import parse_url, rule_matches
from .models import RoutingDecision
from .placeholders import resolve

logger = logging.getLogger(__name__)


def normalize_url(url):
    """Return (url, parts), prefixing https:// to scheme-less input.

    parts is None when the URL still does not parse.
    """
    url = url.strip()
    parts = parse_url(url)
    if parts is None and "://" not in url:
        url = "https://" + url
        parts = parse_url(url)
    return url, parts


def route(url, config, exists=os.path.isfile):
    """Decide how to open url under config."""
    if not url or not url.strip():
        return RoutingDecision.failed(url, "URL is empty")

    url, parts = normalize_url(url)
    if parts is None:
        logger.debug(f"Could not parse URL, only raw-string rules apply: {url}")

    for rule in config.enabled_rules():
        if rule_matches(rule, parts, url):
            logger.debug(f"Rule '{rule.name}' matched {url}")
            return RoutingDecision(
                original_url=url,
                target_path=rule.browser_path,
                arguments=resolve(rule.browser_arguments_template, url),
                matched_rule=rule,
            )

    default_path = config.default_browser_path
    if default_path and default_path.strip() and exists(default_path):
        return RoutingDecision(
            original_url=url,
            target_path=default_path,
            arguments=resolve(config.default_browser_arguments, url),
            is_default_browser=True,
        )

    # Hand the URL to whatever the OS opens links with
    return RoutingDecision(
        original_url=url,
        target_path=url,
        is_system_fallback=True,
    )


def preview_route(url, config, exists=os.path.isfile):
    """Same decision as route(), for previewing rules without launching."""
    return route(url, config, exists=exists)

