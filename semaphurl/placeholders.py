"""
Placeholder expansion for browser argument templates.

Supported tokens:
    {url}     full URL
    {domain}  host
    {path}    path
    {query}   query string without the leading '?'
    {scheme}  protocol
    {port}    port number, empty when the scheme default is used
"""

from .matcher import DEFAULT_PORTS, parse_url

PLACEHOLDERS = [
    ("{url}", "Full URL"),
    ("{domain}", "Domain/host"),
    ("{path}", "Path"),
    ("{query}", "Query string"),
    ("{scheme}", "Protocol"),
    ("{port}", "Port number"),
]


def available_placeholders():
    return [f"{token} - {label}" for token, label in PLACEHOLDERS]


def _port_text(parts):
    port = parts.port
    if port is None or port == DEFAULT_PORTS.get(parts.scheme.lower()):
        return ""
    return str(port)


def resolve(template, url):
    """Expand a browser argument template for url.

    Plain text replacement. Unknown tokens stay as they are, and a URL that
    does not parse only gets {url} substituted.
    """
    if not template or not template.strip():
        return f'"{url}"'

    parts = parse_url(url)
    if parts is None:
        return template.replace("{url}", url)

    path = parts.path
    if not path and parts.netloc:
        path = "/"

    values = {
        "{url}": url,
        "{domain}": parts.hostname or "",
        "{path}": path,
        "{query}": parts.query.lstrip("?"),
        "{scheme}": parts.scheme.lower(),
        "{port}": _port_text(parts),
    }
    result = template
    for token, value in values.items():
        result = result.replace(token, value)
    return result
