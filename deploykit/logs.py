"""Log messages, log emitters and log streaming options."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, TextIO

BOLD = "\x1b[1m"
RESET = "\x1b[0m"

_NANOS_PER_SECOND = 1_000_000_000


@dataclass
class LogMessage:
    """A single log line from a log source."""

    source_type: str = ""
    source: str = ""
    stream: str = ""
    timestamp: Optional[datetime] = None
    message: str = ""


LogEmitter = Callable[[LogMessage], None]


def format_time(value: Optional[datetime]) -> str:
    """Format a timestamp for display; an absent timestamp formats as empty."""
    if value is None:
        return ""
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    zone = value.tzname()
    return f"{text} {zone}" if zone else text


def _fraction(whole: int, remainder: int, unit: int) -> str:
    digits = len(str(unit)) - 1
    frac = str(remainder).rjust(digits, "0").rstrip("0")
    return f"{whole}.{frac}" if frac else str(whole)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds in the compact style such as 1h2m3.5s or 250ms."""
    nanos = round(seconds * _NANOS_PER_SECOND)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < _NANOS_PER_SECOND:
        for unit, suffix in ((1, "ns"), (1_000, "µs"), (1_000_000, "ms")):
            if nanos < unit * 1000:
                whole, rem = divmod(nanos, unit)
                return f"{sign}{_fraction(whole, rem, unit)}{suffix}"
    hours, rem = divmod(nanos, 3600 * _NANOS_PER_SECOND)
    minutes, rem = divmod(rem, 60 * _NANOS_PER_SECOND)
    secs, frac = divmod(rem, _NANOS_PER_SECOND)
    sec_text = f"{_fraction(secs, frac, _NANOS_PER_SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{sec_text}"
    if minutes:
        return f"{sign}{minutes}m{sec_text}"
    return f"{sign}{sec_text}"


def writer_log_emitter(stream: TextIO, color: bool = False) -> LogEmitter:
    """Return an emitter that writes each message as one line to ``stream``."""

    def emit(message: LogMessage) -> None:
        prefix = f"[{message.stream}]"
        if color:
            prefix = f"{BOLD}{prefix}{RESET}"
        parts = [prefix]
        if message.timestamp is not None:
            parts.append(format_time(message.timestamp))
        parts.append(message.message)
        stream.write(" ".join(parts) + "\n")

    return emit


class LogInitError(Exception):
    """Failure to initialise a log source, carrying a message for display."""

    def __init__(
        self,
        source_type: str,
        source: str,
        message: str,
        err: Optional[BaseException] = None,
        timestamp: Optional[datetime] = None,
    ) -> None:
        self.source_type = source_type
        self.source = source
        self.message = message
        self.err = err
        self.timestamp = timestamp
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.err is not None:
            return f"{self.message}: {self.err}"
        return self.message

    def log_message(self) -> LogMessage:
        """Render this error as a log message with no stream."""
        return LogMessage(
            source_type=self.source_type,
            source=self.source,
            stream="",
            timestamp=self.timestamp,
            message=str(self),
        )


def new_log_init_error(
    source_type: str, source: str, message: str, err: Optional[BaseException]
) -> LogInitError:
    """Create a LogInitError stamped with the current time."""
    return LogInitError(source_type, source, message, err, timestamp=datetime.now())


def as_log_init_error(err: Optional[BaseException]) -> Optional[LogInitError]:
    """Find a LogInitError in ``err`` or the chain of errors it was raised from."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, LogInitError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


@dataclass
class LogStreamOptions:
    """Options controlling which logs are streamed and how often to poll.

    ``watch_interval`` is in seconds: 0 means the default of one second,
    a negative value disables watching.
    """

    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    pattern: Optional[str] = None
    watch_interval: float = 0.0
    emitter: Optional[LogEmitter] = field(default=None, repr=False)

    def query_time_message(self) -> str:
        """Describe the time window being queried."""
        if self.start_time is not None:
            if self.end_time is not None:
                return (
                    f"Querying logs between {format_time(self.start_time)}"
                    f" and {format_time(self.end_time)}"
                )
            return f"Querying logs starting {format_time(self.start_time)}"
        if self.end_time is not None:
            return f"Querying logs until {format_time(self.end_time)}"
        return "Querying all logs"

    def watch_message(self) -> str:
        """Describe whether and how often logs are watched."""
        interval = self.watch_interval
        if interval < 0:
            return "Not watching logs"
        if interval == 0:
            interval = 1.0
        return f"Watching logs (poll interval = {format_duration(interval)})"