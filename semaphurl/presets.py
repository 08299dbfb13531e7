"""
Ready-made argument templates for common browsers.
"""

import ntpath
import os

from .models import DEFAULT_ARGUMENTS_TEMPLATE

PRESET_NAMES = ["Default", "Incognito/Private", "New Window"]

# Executable stem -> browser family
BROWSER_FAMILIES = {
    "chrome": "chrome",
    "google-chrome": "chrome",
    "google-chrome-stable": "chrome",
    "chromium": "chrome",
    "chromium-browser": "chrome",
    "msedge": "edge",
    "microsoft-edge": "edge",
    "firefox": "firefox",
    "brave": "brave",
    "brave-browser": "brave",
    "opera": "opera",
    "vivaldi": "vivaldi",
}

INCOGNITO_ARGS = {
    "chrome": '--incognito "{url}"',
    "edge": '--inprivate "{url}"',
    "firefox": '-private-window "{url}"',
    "brave": '--incognito "{url}"',
    "opera": '--private "{url}"',
    "vivaldi": '--incognito "{url}"',
}

NEW_WINDOW_ARGS = {
    "chrome": '--new-window "{url}"',
    "edge": '--new-window "{url}"',
    "firefox": '-new-window "{url}"',
    "brave": '--new-window "{url}"',
    "opera": '--new-window "{url}"',
    "vivaldi": '--new-window "{url}"',
}


def detect_browser_family(browser_path):
    if not browser_path:
        return None
    # Config files may carry Windows paths on any platform
    name = ntpath.basename(browser_path)
    stem = os.path.splitext(name)[0].lower()
    return BROWSER_FAMILIES.get(stem)


def get_arguments(preset_name, browser_path):
    """Argument template for a preset and browser executable."""
    family = detect_browser_family(browser_path)
    if preset_name == "Incognito/Private":
        return INCOGNITO_ARGS.get(family, DEFAULT_ARGUMENTS_TEMPLATE)
    if preset_name == "New Window":
        return NEW_WINDOW_ARGS.get(family, DEFAULT_ARGUMENTS_TEMPLATE)
    return DEFAULT_ARGUMENTS_TEMPLATE
