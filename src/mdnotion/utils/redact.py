"""Credential redaction for debug dumps and log lines.

Anything written to *stderr* or a log sink goes through :func:`redact`
first:

* values under a sensitive key (``token``, ``authorization``, ``secret``,
  ...) are masked, keeping at most the last four characters;
* the integration token is scrubbed wherever it appears in a string;
* ``Bearer <...>`` fragments are masked.
"""

from __future__ import annotations

import copy
import re
from typing import Any

# A key is sensitive when any of these substrings occurs in it
# (case-insensitive), e.g. ``notionToken``, ``api_secret``.
_SENSITIVE_KEY_PATTERNS: frozenset[str] = frozenset({
    "token",
    "secret",
    "password",
    "credential",
    "authorization",
    "cookie",
    "api_key",
    "api-key",
})

_BEARER_RE = re.compile(r"(Bearer\s+)\S+")


def _mask(value: str, token: str | None) -> str:
    if token and token in value:
        suffix = token[-4:] if len(token) >= 8 else "****"
        value = value.replace(token, f"<redacted:...{suffix}>")
    return _BEARER_RE.sub(lambda m: f"{m.group(1)}<redacted>", value)


def _redact_value(value: Any, token: str | None) -> Any:
    if isinstance(value, dict):
        return _redact_dict(value, token)
    if isinstance(value, list):
        return [_redact_value(item, token) for item in value]
    if isinstance(value, str):
        return _mask(value, token)
    return value


def _redact_dict(d: dict, token: str | None) -> dict:
    result: dict = {}
    for key, value in d.items():
        key_lower = key.lower() if isinstance(key, str) else ""
        if any(pat in key_lower for pat in _SENSITIVE_KEY_PATTERNS):
            result[key] = "<redacted>"
        else:
            result[key] = _redact_value(value, token)
    return result


def redact(payload: dict, token: str | None = None) -> dict:
    """Return a copy of *payload* with credentials removed.

    Parameters
    ----------
    payload:
        The dictionary to sanitize (a request body, a set of headers, a
        debug dump).
    token:
        The integration token.  If supplied, every occurrence of it in any
        string value is replaced.

    Returns
    -------
    dict
        A new dictionary; *payload* is never mutated.

    Examples
    --------
    >>> redact({"Authorization": "Bearer ntn_abc123"})
    {'Authorization': '<redacted>'}
    >>> redact({"title": "t", "notionToken": "ntn_abc123"})
    {'title': 't', 'notionToken': '<redacted>'}
    """
    return _redact_dict(copy.deepcopy(payload), token)
