"""Metrics hook protocol and its no-op default.

mdnotion reports counters and timings around Notion API traffic.  Supply
any object satisfying :class:`MetricsHook` through
``MdNotionConfig(metrics=...)`` to forward them to StatsD, Prometheus,
Datadog, etc.

Emitted metric names:

* ``mdnotion.requests_total``          -- counter, tagged method/path/status
* ``mdnotion.request_duration_ms``     -- timing, tagged method/path/status
* ``mdnotion.blocks_created_total``    -- counter
* ``mdnotion.batches_appended_total``  -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol every metrics backend must satisfy.

    *tags* are string key/value pairs; backends map them onto their own
    tagging scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment the counter *name* by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds."""
        ...


class NoopMetricsHook:
    """Discards every data point.  Used when no backend is configured."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
