"""
SemaphURL configuration file
Copy this to %APPDATA%\SemaphURL\config.py (Windows) or
~/.config/semaphurl/config.py and customize for your needs
"""

# Routing rules, evaluated by ascending "order" (list position when omitted).
# First matching rule wins; disabled rules are skipped.
ROUTING_RULES = [
    # Work
    {"name": "Slack", "pattern_type": "DomainContains", "pattern": "slack.com",
     "browser": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
     "arguments": '--profile-directory="Profile 1" "{url}"'},
    {"name": "Jira", "pattern_type": "DomainEndsWith", "pattern": ".atlassian.net",
     "browser": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
     "arguments": '--profile-directory="Profile 1" "{url}"'},

    # Personal
    {"name": "YouTube", "pattern_type": "DomainContains", "pattern": "youtube",
     "browser": r"C:\Program Files\Mozilla Firefox\firefox.exe"},

    # Banking - private window
    {"name": "Bank", "pattern_type": "Regex", "pattern": r"^https://([a-z]+\.)?(chase|wellsfargo)\.com",
     "browser": r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
     "preset": "Incognito/Private"},

    # Developer
    {"name": "React app", "pattern_type": "HostPort", "pattern": "localhost:3000",
     "browser": r"C:\Program Files\Google\Chrome\Application\chrome.exe",
     "preset": "New Window"},
    {"name": "Dev servers", "pattern_type": "PortRange", "pattern": "3000-9999",
     "browser": r"C:\Program Files\Mozilla Firefox\firefox.exe", "enabled": False},
]

# Default browser for unmatched URLs. Empty means the system URL handler.
DEFAULT_BROWSER = r"C:\Program Files\Mozilla Firefox\firefox.exe"
DEFAULT_BROWSER_ARGUMENTS = '"{url}"'

# Bring the browser window to the front after routing (Windows only)
FOCUS_BROWSER_AFTER_ROUTING = True

# URL history
ENABLE_HISTORY = True
HISTORY_RETENTION_DAYS = 7

# Options: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
LOG_LEVEL = "INFO"
