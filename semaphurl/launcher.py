"""
Carry out a routing decision: start the browser, or hand the URL to the OS.

Every failure on the way degrades to the system default handler. History
recording and window focus are emitted as post-launch events that run on a
background thread, so they can never change the result of execute().
"""

import logging
import ntpath
import os
import shlex
import subprocess
import sys
import threading
import time
import webbrowser

from .focus import focus_browser_window

logger = logging.getLogger(__name__)

FOCUS_DELAY = 0.3

SYSTEM_BROWSER_PATH = "System"
SYSTEM_BROWSER_NAME = "System Default"
FALLBACK_BROWSER_NAME = "System Default (Fallback)"


def spawn_browser(browser_path, arguments):
    """Start browser_path with an argument string from a template."""
    if os.name == "nt":
        # CreateProcess takes the command line as one string
        return subprocess.Popen(f'"{browser_path}" {arguments}'.rstrip())
    return subprocess.Popen([browser_path] + shlex.split(arguments or ""))


def open_with_system_default(url):
    """Open url with whatever the OS considers the default handler."""
    if sys.platform == "win32":
        os.startfile(url)
        return
    if not webbrowser.open(url):
        raise OSError(f"No system handler could open {url}")


def browser_display_name(browser_path):
    return os.path.splitext(ntpath.basename(browser_path))[0]


def run_in_thread(task):
    threading.Thread(target=task, name="semaphurl-post-launch").start()


class Launcher:
    """Executes RoutingDecisions.

    The OS facing pieces are plain callables so they can be swapped out:
    spawn(path, arguments), open_url(url), exists(path), and dispatch(task)
    which schedules post-launch work (a new thread by default).
    """

    def __init__(self, history=None, focus_browser=False, spawn=spawn_browser,
                 open_url=open_with_system_default, exists=os.path.isfile,
                 dispatch=run_in_thread, focus=focus_browser_window,
                 focus_delay=FOCUS_DELAY):
        self.history = history
        self.focus_browser = focus_browser
        self.spawn = spawn
        self.open_url = open_url
        self.exists = exists
        self.dispatch = dispatch
        self.focus = focus
        self.focus_delay = focus_delay
        self._handlers = {
            "history": self._record_history,
            "focus": self._focus_window,
        }

    def execute(self, decision):
        """Launch for decision. Returns True when some browser was asked to open the URL."""
        if not decision.success:
            logger.error(f"Routing failed: {decision.error_message}")
            return False

        url = decision.original_url
        rule_name = decision.matched_rule.name if decision.matched_rule else None

        try:
            if decision.is_system_fallback:
                log_routing(url, "System Fallback", SYSTEM_BROWSER_NAME)
                self.open_url(url)
                self.emit("history", url, SYSTEM_BROWSER_PATH, SYSTEM_BROWSER_NAME, None)
                return True

            browser_path = decision.target_path
            if not self.exists(browser_path):
                logger.error(f"Browser not found: {browser_path}, falling back to system handler")
                self.open_url(url)
                self.emit("history", url, SYSTEM_BROWSER_PATH, FALLBACK_BROWSER_NAME, rule_name)
                return True

            log_routing(url, rule_name, browser_path)
            self.spawn(browser_path, decision.arguments)

            if self.focus_browser:
                self.emit("focus", browser_path)
            self.emit("history", url, browser_path, browser_display_name(browser_path), rule_name)
            return True
        except Exception as e:
            logger.error(f"Failed to launch browser for URL: {url}: {e}")

        try:
            self.open_url(url)
        except Exception as e:
            logger.error(f"System fallback also failed: {e}")
            return False
        logger.info(f"Opened URL via system fallback: {url}")
        self.emit("history", url, SYSTEM_BROWSER_PATH, FALLBACK_BROWSER_NAME, None)
        return True

    def execute_in_background(self, decision):
        """Fire-and-forget execute(); returns the started thread."""
        thread = threading.Thread(target=self.execute, args=(decision,), name="semaphurl-launch")
        thread.start()
        return thread

    def emit(self, event, *args):
        """Schedule a post-launch event handler."""
        handler = self._handlers[event]

        def task():
            try:
                handler(*args)
            except Exception:
                logger.exception(f"Post-launch '{event}' handler failed")

        try:
            self.dispatch(task)
        except Exception as e:
            logger.error(f"Could not dispatch '{event}' event: {e}")

    def _record_history(self, url, browser_path, browser_name, rule_name):
        if self.history is not None:
            self.history.record(url, browser_path, browser_name, rule_name)

    def _focus_window(self, browser_path):
        # Give the browser a moment to create or raise its window
        time.sleep(self.focus_delay)
        self.focus(browser_path)


def log_routing(url, rule_name, browser_path):
    logger.info(f"URL: {url} | Rule: {rule_name or 'Default'} | Browser: {browser_path}")
