"""
URL history: a JSON file of recently routed URLs with a fixed retention window.
"""

import json
import logging
import threading
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

RETENTION_DAYS = 7


def _now():
    return datetime.now(timezone.utc)


def extract_domain(url):
    """Host of url without a leading www., or '' when it has none."""
    try:
        if "://" not in url:
            url = "https://" + url
        host = urlsplit(url).hostname or ""
    except ValueError:
        return ""
    if host.lower().startswith("www."):
        host = host[4:]
    return host


@dataclass
class HistoryEntry:
    url: str
    browser_path: str
    browser_name: str
    rule_name: Optional[str] = None
    domain: str = ""
    timestamp: str = field(default_factory=lambda: _now().isoformat())
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        if not self.domain:
            self.domain = extract_domain(self.url)

    @property
    def time(self):
        stamp = datetime.fromisoformat(self.timestamp)
        # Older files may carry naive timestamps; they were written in UTC
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return stamp


class UrlHistory:
    def __init__(self, path, retention_days=RETENTION_DAYS):
        self.path = path
        self.retention_days = retention_days
        self.entries = []
        self.last_cleanup = _now().isoformat()
        self._lock = threading.Lock()

    @property
    def entry_count(self):
        return len(self.entries)

    @property
    def last_entry(self):
        return max(reversed(self.entries), key=lambda e: e.time, default=None)

    def load(self):
        """Read the history file and drop expired entries."""
        try:
            if not self.path.exists():
                self.entries = []
                return
            data = json.loads(self.path.read_text(encoding="utf-8"))
            self.entries = self._read_entries(data.get("entries", []))
            self.last_cleanup = data.get("last_cleanup", self.last_cleanup)
            self._cleanup()
        except Exception as e:
            logger.error(f"Failed to load URL history from {self.path}: {e}")
            self.entries = []
            return
        logger.info(f"Loaded {len(self.entries)} URL history entries")

    def _read_entries(self, items):
        entries = []
        for item in items:
            try:
                entry = HistoryEntry(**item)
                entry.time
            except Exception as e:
                logger.warning(f"Dropping unreadable URL history entry {item!r}: {e}")
                continue
            entries.append(entry)
        return entries

    def save(self):
        try:
            with self._lock:
                data = {
                    "entries": [asdict(e) for e in self.entries],
                    "last_cleanup": self.last_cleanup,
                }
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except Exception as e:
            logger.error(f"Failed to save URL history: {e}")

    def add_entry(self, entry):
        with self._lock:
            self.entries.append(entry)
        self.save()
        return entry

    def record(self, url, browser_path, browser_name, rule_name=None):
        return self.add_entry(HistoryEntry(url, browser_path, browser_name, rule_name))

    def _newest_first(self, entries):
        # Later insertions first among equal timestamps
        return sorted(reversed(list(entries)), key=lambda e: e.time, reverse=True)

    def by_domain(self, domain):
        domain = domain.lower()
        return self._newest_first(e for e in self.entries if domain in e.domain.lower())

    def search(self, text):
        if not text or not text.strip():
            return self._newest_first(self.entries)
        text = text.lower()

        def hit(e):
            fields = (e.url, e.domain, e.rule_name or "", e.browser_name)
            return any(text in f.lower() for f in fields)

        return self._newest_first(e for e in self.entries if hit(e))

    def recent(self, count=5):
        return self._newest_first(self.entries)[:count]

    def delete(self, entry_id):
        with self._lock:
            self.entries = [e for e in self.entries if e.id != entry_id]
        self.save()

    def clear(self):
        with self._lock:
            self.entries = []
            self.last_cleanup = _now().isoformat()
        self.save()
        logger.info("URL history cleared")

    def _cleanup(self):
        cutoff = _now() - timedelta(days=self.retention_days)
        with self._lock:
            before = len(self.entries)
            self.entries = [e for e in self.entries if e.time >= cutoff]
            removed = before - len(self.entries)
            self.last_cleanup = _now().isoformat()
        if removed:
            logger.info(f"Cleaned up {removed} old URL history entries")
        if self.entries:
            self.save()
