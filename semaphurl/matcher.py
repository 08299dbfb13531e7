"""
URL pattern matching for routing rules.

Every pattern type is case-insensitive. Host and port based types need a
parsed URL; UrlContains and Regex work on the raw string so they still
apply to input that failed to parse. Nothing in here raises: a broken
pattern is just a rule that never matches.
"""

import logging
import re
from urllib.parse import urlsplit

import regex

from .models import PatternType

logger = logging.getLogger(__name__)

REGEX_TIMEOUT = 1.0

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Schemes that are absolute without a //host part
OPAQUE_SCHEMES = {"mailto", "tel", "about", "data", "file", "javascript", "urn", "news"}

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+$")


def parse_url(text):
    """Parse an absolute URL, returning a SplitResult or None."""
    if not text or not text.strip():
        return None
    try:
        parts = urlsplit(text.strip())
        # Single-letter schemes are Windows drive letters, not URLs
        if not _SCHEME_RE.match(parts.scheme):
            return None
        if parts.netloc:
            if not parts.hostname:
                return None
            parts.port  # raises ValueError when out of range
        elif parts.scheme.lower() not in OPAQUE_SCHEMES:
            return None
        return parts
    except ValueError:
        return None


def effective_port(parts):
    """Explicit port, else the scheme default, else None."""
    if parts is None:
        return None
    if parts.port is not None:
        return parts.port
    return DEFAULT_PORTS.get(parts.scheme.lower())


def _host(parts):
    return (parts.hostname or "") if parts is not None else None


def _domain_contains(parts, url, pattern):
    host = _host(parts)
    return host is not None and pattern.lower() in host.lower()


def _domain_equals(parts, url, pattern):
    host = _host(parts)
    return host is not None and host.lower() == pattern.lower()


def _domain_starts_with(parts, url, pattern):
    host = _host(parts)
    return host is not None and host.lower().startswith(pattern.lower())


def _domain_ends_with(parts, url, pattern):
    host = _host(parts)
    return host is not None and host.lower().endswith(pattern.lower())


def _url_contains(parts, url, pattern):
    return pattern.lower() in (url or "").lower()


def _regex(parts, url, pattern):
    try:
        return regex.search(pattern, url or "", flags=regex.IGNORECASE, timeout=REGEX_TIMEOUT) is not None
    except TimeoutError:
        logger.warning(f"Regex pattern timed out after {REGEX_TIMEOUT}s: {pattern}")
        return False


def _host_port(parts, url, pattern):
    port = effective_port(parts)
    if port is None:
        return False
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}".lower() == pattern.strip().lower()


def _parse_port(text):
    """Plain ASCII digits only, else None."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _port_equals(parts, url, pattern):
    port = effective_port(parts)
    wanted = _parse_port(pattern)
    return port is not None and wanted is not None and port == wanted


def _port_range(parts, url, pattern):
    port = effective_port(parts)
    if port is None:
        return False
    bounds = pattern.split("-")
    if len(bounds) != 2:
        return False
    low, high = _parse_port(bounds[0]), _parse_port(bounds[1])
    if low is None or high is None:
        return False
    return low <= port <= high


_MATCHERS = {
    PatternType.DOMAIN_CONTAINS: _domain_contains,
    PatternType.DOMAIN_EQUALS: _domain_equals,
    PatternType.URL_CONTAINS: _url_contains,
    PatternType.REGEX: _regex,
    PatternType.DOMAIN_STARTS_WITH: _domain_starts_with,
    PatternType.DOMAIN_ENDS_WITH: _domain_ends_with,
    PatternType.HOST_PORT: _host_port,
    PatternType.PORT_EQUALS: _port_equals,
    PatternType.PORT_RANGE: _port_range,
}


def matches(parts, url, pattern_type, pattern):
    """Does the URL match pattern under pattern_type?

    parts is the result of parse_url(url) and may be None.
    """
    if not pattern or not pattern.strip():
        return False
    matcher = _MATCHERS.get(pattern_type) if isinstance(pattern_type, PatternType) else None
    if matcher is None:
        return False
    try:
        return matcher(parts, url, pattern)
    except Exception as e:
        logger.debug(f"Pattern {pattern_type.value} '{pattern}' failed on {url}: {e}")
        return False


def rule_matches(rule, parts, url):
    return matches(parts, url, rule.pattern_type, rule.pattern)
