"""
semaphurl - route URLs to the right browser by pattern rules
"""

from .__version__ import __version__
from .launcher import Launcher
from .matcher import matches, parse_url
from .models import PatternType, RouterConfig, RoutingDecision, RoutingRule
from .placeholders import resolve
from .router import preview_route, route

__all__ = [
    "__version__",
    "Launcher",
    "PatternType",
    "RouterConfig",
    "RoutingDecision",
    "RoutingRule",
    "matches",
    "parse_url",
    "preview_route",
    "resolve",
    "route",
]
