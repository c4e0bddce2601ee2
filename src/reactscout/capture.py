"""
Session activity capture for react.dev scenarios.

One ``SessionCapture`` per session handle. It listens to the page for
console output, uncaught page errors and network traffic, and the page
objects feed it an ``InteractionRecord`` for every probe, action and hard
wait. A failing scenario can then print a report that shows which probes
missed before the hard wait gave up.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

# Fragments that mean the page itself is broken, not just noisy
CRITICAL_PATTERNS = (
    "ReferenceError",
    "TypeError",
    "SyntaxError",
    "RangeError",
    "is not defined",
    "Cannot read properties",
    "Hydration failed",
    "Minified React error",
    "Maximum update depth exceeded",
    "Invalid hook call",
    "ChunkLoadError",
    "Loading chunk",
)

REPORT_WIDTH = 60


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    LOG = "log"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_console_type(cls, console_type: str) -> "LogLevel":
        if console_type == "warn":
            return cls.WARNING
        try:
            return cls(console_type)
        except ValueError:
            return cls.LOG


def _serialize(record) -> Dict[str, Any]:
    data = asdict(record)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
        elif isinstance(value, datetime):
            data[key] = value.isoformat()
    return data


@dataclass
class ConsoleLog:
    level: LogLevel
    text: str
    source: Optional[str] = None
    line: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return _serialize(self)


@dataclass
class NetworkRequest:
    url: str
    method: str
    status: Optional[int] = None
    failure_reason: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def failed(self) -> bool:
        return self.failure_reason is not None or (self.status or 0) >= 400

    def to_dict(self) -> Dict[str, Any]:
        data = _serialize(self)
        data["failed"] = self.failed
        return data


@dataclass
class InteractionRecord:
    """One page-object step: a probe, an action, a hard wait or a navigation."""

    kind: str
    target: str
    outcome: bool
    detail: Optional[str] = None
    timeout_ms: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def status(self) -> str:
        return "OK" if self.outcome else "MISS"

    def to_dict(self) -> Dict[str, Any]:
        data = _serialize(self)
        data["outcome"] = self.status
        return data

    def __str__(self) -> str:
        text = f"[{self.status}] {self.kind}: {self.target[:80]}"
        if self.detail:
            text += f" ({self.detail[:80]})"
        return text


@dataclass
class SessionCapture:
    """
    Everything observed on one session handle during a scenario.

    Usage:
        capture = SessionCapture()
        capture.attach_to_page(page)

        home = HomePage(page, capture=capture)
        # ... run scenario ...

        assert not capture.has_critical_errors(), capture.generate_report()
    """

    console_logs: List[ConsoleLog] = field(default_factory=list)
    network_requests: List[NetworkRequest] = field(default_factory=list)
    page_errors: List[str] = field(default_factory=list)
    interactions: List[InteractionRecord] = field(default_factory=list)

    # Page events

    def attach_to_page(self, page):
        """Subscribe to the page's console, pageerror, response and requestfailed events."""
        page.on("console", self._on_console)
        page.on("pageerror", self._on_page_error)
        page.on("response", self._on_response)
        page.on("requestfailed", self._on_request_failed)

    def _on_console(self, message):
        location = message.location or {}
        self.console_logs.append(ConsoleLog(
            level=LogLevel.from_console_type(message.type),
            text=message.text,
            source=location.get("url"),
            line=location.get("lineNumber"),
        ))

    def _on_page_error(self, error):
        logger.debug(f"Page error: {error}")
        self.page_errors.append(str(error))

    def _on_response(self, response):
        self.network_requests.append(NetworkRequest(
            url=response.url,
            method=response.request.method,
            status=response.status,
        ))

    def _on_request_failed(self, request):
        self.network_requests.append(NetworkRequest(
            url=request.url,
            method=request.method,
            failure_reason=request.failure or "Unknown",
        ))

    # Page-object steps

    def record(
        self,
        kind: str,
        target: str,
        outcome: bool,
        detail: Optional[str] = None,
        timeout_ms: Optional[int] = None,
    ) -> InteractionRecord:
        entry = InteractionRecord(kind, target, outcome, detail=detail, timeout_ms=timeout_ms)
        self.interactions.append(entry)
        return entry

    def interactions_of(self, kind: str) -> List[InteractionRecord]:
        return [r for r in self.interactions if r.kind == kind]

    def _misses(self, kind: str) -> int:
        return sum(1 for r in self.interactions_of(kind) if not r.outcome)

    # Queries

    @property
    def errors(self) -> List[str]:
        """Console errors followed by uncaught page errors."""
        return [log.text for log in self.console_logs if log.level is LogLevel.ERROR] + self.page_errors

    @property
    def warnings(self) -> List[str]:
        return [log.text for log in self.console_logs if log.level is LogLevel.WARNING]

    @property
    def network_errors(self) -> List[NetworkRequest]:
        return [r for r in self.network_requests if r.failed]

    def get_critical_errors(self) -> List[str]:
        return [e for e in self.errors if any(p in e for p in CRITICAL_PATTERNS)]

    def has_critical_errors(self) -> bool:
        return bool(self.get_critical_errors())

    def summary(self) -> Dict[str, Any]:
        return {
            "console_logs": len(self.console_logs),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "network_requests": len(self.network_requests),
            "network_errors": len(self.network_errors),
            "page_errors": len(self.page_errors),
            "interactions": len(self.interactions),
            "probe_misses": self._misses("probe"),
            "wait_failures": self._misses("wait"),
            "has_critical_errors": self.has_critical_errors(),
        }

    # Reporting

    @staticmethod
    def _section(title: str, items: Iterable[str], limit: int) -> List[str]:
        items = list(items)
        if not items:
            return []
        lines = [f"--- {title} ---"]
        lines.extend(f"  {item}" for item in items[:limit])
        if len(items) > limit:
            lines.append(f"  ... {len(items) - limit} more")
        lines.append("")
        return lines

    def generate_report(self) -> str:
        """Plain-text report: counts, then errors, then the interaction trail."""
        s = self.summary()
        lines = [
            "=" * REPORT_WIDTH,
            "REACTSCOUT SESSION REPORT",
            "=" * REPORT_WIDTH,
            f"Generated: {datetime.now().isoformat()}",
            "",
            f"Errors: {s['errors']} ({len(self.get_critical_errors())} critical)",
            f"Warnings: {s['warnings']}",
            f"Network: {s['network_requests']} requests, {s['network_errors']} failed",
            f"Interactions: {s['interactions']} "
            f"({s['probe_misses']} probe misses, {s['wait_failures']} wait failures)",
            "",
        ]
        lines += self._section("CRITICAL ERRORS", (f"- {e[:200]}" for e in self.get_critical_errors()), 10)
        lines += self._section("ERRORS", (f"- {e[:200]}" for e in self.errors), 20)
        lines += self._section("WARNINGS", (f"- {w[:200]}" for w in self.warnings), 10)
        lines += self._section(
            "NETWORK ERRORS",
            (f"- {r.status or 'FAIL'} {r.method} {r.url[:100]}" for r in self.network_errors),
            10,
        )
        lines += self._section("INTERACTIONS", (str(r) for r in self.interactions), 200)
        return "\n".join(lines)

    def save_report(self, filepath: str):
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_report())
        logger.info(f"Session report written to {path}")

    def reset(self):
        self.console_logs.clear()
        self.network_requests.clear()
        self.page_errors.clear()
        self.interactions.clear()
