"""Configuration for mdnotion.

:class:`MdNotionConfig` is a plain dataclass capturing every tuneable knob:
the Notion credentials and endpoint, the Markdown blank-line policy, the
append batch size, HTTP settings, and debug switches.  Instances are shared
by the converter, the transports, and both clients.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Literal

NOTION_MAX_CHILDREN: int = 100
"""Maximum number of blocks Notion accepts per ``append_children`` call."""


@dataclass
class MdNotionConfig:
    """Complete configuration for an mdnotion client.

    Parameters
    ----------
    token:
        Notion integration token.  Never logged.
    notion_version:
        Value of the ``Notion-Version`` header sent with every request.
    base_url:
        API root URL.  Override for proxy or testing environments.
    blank_lines:
        What the block scanner does with a blank Markdown line.

        * ``"paragraph"`` -- emit an empty paragraph block.
        * ``"skip"`` -- emit nothing.
    batch_size:
        Number of blocks sent per ``append_children`` request (1-100).
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~mdnotion.observability.MetricsHook` backend.
    debug_dump_blocks:
        Write the converted Notion block payload to *stderr* on each
        conversion.
    debug_dump_payload:
        Write a redacted dump of every API request/response to *stderr*.
    """

    # ── Core ────────────────────────────────────────────────────────────
    token: str = ""

    notion_version: str = "2022-06-28"

    base_url: str = "https://api.notion.com/v1"

    # ── Conversion ──────────────────────────────────────────────────────
    blank_lines: Literal["paragraph", "skip"] = "paragraph"

    batch_size: int = NOTION_MAX_CHILDREN

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_blocks: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing."
            )

        if self.blank_lines not in ("paragraph", "skip"):
            raise ValueError(
                f"blank_lines must be 'paragraph' or 'skip', got {self.blank_lines!r}"
            )
        if not 1 <= self.batch_size <= NOTION_MAX_CHILDREN:
            raise ValueError(
                f"batch_size must be between 1 and {NOTION_MAX_CHILDREN}, got {self.batch_size}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"MdNotionConfig({', '.join(parts)})"
