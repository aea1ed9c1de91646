"""Structured logging with JSON and console output."""

from __future__ import annotations

import copy
import json
import re
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from itertools import pairwise
from typing import Any, Mapping, Optional, Tuple

TIME_FORMAT_UNIX = ""
TIME_FORMAT_UNIX_MS = "UNIXMS"
TIME_FORMAT_UNIX_MICRO = "UNIXMICRO"
TIME_FORMAT_UNIX_NANO = "UNIXNANO"


class Level(IntEnum):
    """Log levels, from most to least severe."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


class Env(IntEnum):
    """Environments; LOCAL selects human-readable console output."""

    TEST = 0
    LOCAL = 1
    DEV = 2
    PROD = 3


_NAMES = {
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
    Level.ERROR: "error",
    Level.WARN: "warn",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "trace",
}

_SHORT = {
    Level.PANIC: "PNC",
    Level.FATAL: "FTL",
    Level.ERROR: "ERR",
    Level.WARN: "WRN",
    Level.INFO: "INF",
    Level.DEBUG: "DBG",
    Level.TRACE: "TRC",
}

_VERB = re.compile(r"%[+#]?v|%t")
_NEEDS_QUOTE = re.compile(r"[\s\"\\=]|[^\x20-\x7e]")

Pairs = Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class TraceContext:
    """Identifiers of the trace, transaction and span a log line belongs to."""

    trace_id: str
    transaction_id: Optional[str] = None
    span_id: Optional[str] = None

    def _as_fields(self) -> Pairs:
        candidates = (
            ("trace.id", self.trace_id),
            ("transaction.id", self.transaction_id),
            ("span.id", self.span_id),
        )
        return tuple((key, value) for key, value in candidates if value)


class LoggerPanic(Exception):
    """Raised after a panic-level message has been logged."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _go_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _sprint(args: Tuple[Any, ...]) -> str:
    """Join values, with a space only between two non-string operands."""
    if not args:
        return ""
    pieces = [_go_value(args[0])]
    for previous, current in pairwise(args):
        if not isinstance(previous, str) and not isinstance(current, str):
            pieces.append(" ")
        pieces.append(_go_value(current))
    return "".join(pieces)


def _sprintln(args: Tuple[Any, ...]) -> str:
    return " ".join(_go_value(arg) for arg in args) + "\n"


def _sprintf(fmt: str, args: Tuple[Any, ...]) -> str:
    if not args:
        return fmt
    converted = _VERB.sub("%s", fmt)
    values = tuple(
        _go_value(arg) if isinstance(arg, bool) or arg is None else arg for arg in args
    )
    try:
        return converted % values
    except (TypeError, ValueError):
        return f"{fmt} {_sprintln(args).strip()}"


def _kitchen(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}{suffix}"


def _console_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False) if _NEEDS_QUOTE.search(value) else value
    return json.dumps(value, default=str, ensure_ascii=False)


class Logger:
    """A structured logger writing JSON lines or console lines to a writer."""

    def __init__(
        self,
        writer: Any = None,
        level: Level = Level.INFO,
        *,
        console: bool = False,
        timestamp: bool = True,
        time_field_format: str = TIME_FORMAT_UNIX,
        apm: bool = False,
    ) -> None:
        self._writer = writer
        self._level = Level(level)
        self._console = console
        self._timestamp = timestamp
        self._time_format = time_field_format
        self._apm = apm
        self._fields: Pairs = ()
        self._trace: Pairs = ()

    def _derive(self, **changes: Any) -> "Logger":
        child = copy.copy(self)
        for name, value in changes.items():
            setattr(child, f"_{name}", value)
        return child

    # --- output --------------------------------------------------------

    def _time_value(self, now_ns: int) -> Any:
        fmt = self._time_format
        if fmt == TIME_FORMAT_UNIX:
            return now_ns // 1_000_000_000
        if fmt == TIME_FORMAT_UNIX_MS:
            return now_ns // 1_000_000
        if fmt == TIME_FORMAT_UNIX_MICRO:
            return now_ns // 1_000
        if fmt == TIME_FORMAT_UNIX_NANO:
            return now_ns
        return datetime.fromtimestamp(now_ns / 1e9).astimezone().strftime(fmt)

    def _json_line(self, level: Level, message: str) -> str:
        entries = [("level", _NAMES[level]), *self._fields]
        if self._timestamp:
            entries.append(("time", self._time_value(time.time_ns())))
        entries.extend(self._trace)
        if message:
            entries.append(("message", message))
        body = ",".join(
            f"{json.dumps(str(key), ensure_ascii=False)}:"
            f"{json.dumps(value, default=str, ensure_ascii=False)}"
            for key, value in entries
        )
        return "{" + body + "}"

    def _console_line(self, level: Level, message: str) -> str:
        parts = [_kitchen(datetime.now()) if self._timestamp else "<nil>", _SHORT[level]]
        text = message.rstrip("\n")
        if text:
            parts.append(text)
        fields = sorted((*self._fields, *self._trace), key=lambda pair: str(pair[0]))
        parts.extend(f"{key}={_console_value(value)}" for key, value in fields)
        return " ".join(parts)

    def _log(self, level: Level, message: str) -> None:
        if level <= self._level and self._writer is not None:
            if self._console:
                line = self._console_line(level, message)
            else:
                line = self._json_line(level, message)
            self._writer.write(line + "\n")
        if level == Level.FATAL:
            raise SystemExit(1)
        if level == Level.PANIC:
            raise LoggerPanic(message)

    # --- plain ---------------------------------------------------------

    def trace(self, *args: Any) -> None:
        self._log(Level.TRACE, _sprint(args))

    def debug(self, *args: Any) -> None:
        self._log(Level.DEBUG, _sprint(args))

    def print(self, *args: Any) -> None:
        self._log(Level.INFO, _sprint(args))

    def info(self, *args: Any) -> None:
        self._log(Level.INFO, _sprint(args))

    def warn(self, *args: Any) -> None:
        self._log(Level.WARN, _sprint(args))

    def warning(self, *args: Any) -> None:
        self._log(Level.WARN, _sprint(args))

    def error(self, *args: Any) -> None:
        self._log(Level.ERROR, _sprint(args))

    def fatal(self, *args: Any) -> None:
        """Log, then exit with status 1 even when the level is disabled."""
        self._log(Level.FATAL, _sprint(args))

    def panic(self, *args: Any) -> None:
        """Log, then raise LoggerPanic."""
        self._log(Level.PANIC, _sprint(args))

    # --- printf-style --------------------------------------------------

    def tracef(self, fmt: str, *args: Any) -> None:
        self._log(Level.TRACE, _sprintf(fmt, args))

    def debugf(self, fmt: str, *args: Any) -> None:
        self._log(Level.DEBUG, _sprintf(fmt, args))

    def printf(self, fmt: str, *args: Any) -> None:
        self._log(Level.INFO, _sprintf(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._log(Level.INFO, _sprintf(fmt, args))

    def warnf(self, fmt: str, *args: Any) -> None:
        self._log(Level.WARN, _sprintf(fmt, args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self._log(Level.WARN, _sprintf(fmt, args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self._log(Level.ERROR, _sprintf(fmt, args))

    def fatalf(self, fmt: str, *args: Any) -> None:
        self._log(Level.FATAL, _sprintf(fmt, args))

    def panicf(self, fmt: str, *args: Any) -> None:
        self._log(Level.PANIC, _sprintf(fmt, args))

    # --- line-style ----------------------------------------------------

    def traceln(self, *args: Any) -> None:
        self._log(Level.TRACE, _sprintln(args))

    def debugln(self, *args: Any) -> None:
        self._log(Level.DEBUG, _sprintln(args))

    def println(self, *args: Any) -> None:
        self._log(Level.INFO, _sprintln(args))

    def infoln(self, *args: Any) -> None:
        self._log(Level.INFO, _sprintln(args))

    def warnln(self, *args: Any) -> None:
        self._log(Level.WARN, _sprintln(args))

    def warningln(self, *args: Any) -> None:
        self._log(Level.WARN, _sprintln(args))

    def errorln(self, *args: Any) -> None:
        self._log(Level.ERROR, _sprintln(args))

    def fatalln(self, *args: Any) -> None:
        self._log(Level.FATAL, _sprintln(args))

    def panicln(self, *args: Any) -> None:
        self._log(Level.PANIC, _sprintln(args))

    # --- context -------------------------------------------------------

    def with_field(self, key: str, value: Any) -> "Logger":
        """Return a logger that adds ``key`` to every entry."""
        return self._derive(fields=self._fields + ((key, value),))

    def with_fields(self, fields: Optional[Mapping[str, Any]]) -> "Logger":
        """Return a logger that adds all ``fields`` to every entry."""
        return self._derive(fields=self._fields + tuple((fields or {}).items()))

    def with_trace(self, ctx: Optional[TraceContext]) -> "Logger":
        """Attach trace identifiers; a no-op unless APM is enabled."""
        if not self._apm or ctx is None:
            return self
        return self._derive(trace=ctx._as_fields())


def new_logger(
    level: Level = Level.INFO,
    env: Env = Env.LOCAL,
    writer: Any = None,
    fields: Optional[Mapping[str, Any]] = None,
    apm: bool = False,
    time_field_format: str = TIME_FORMAT_UNIX,
) -> Logger:
    """Create a logger; ``writer`` of None discards all output.

    The LOCAL environment writes console lines, the others JSON lines.
    With ``apm`` enabled output is JSON without a timestamp.
    """
    if apm:
        base = Logger(
            writer,
            level,
            console=False,
            timestamp=False,
            time_field_format=time_field_format,
            apm=True,
        )
    else:
        base = Logger(
            writer,
            level,
            console=Env(env) == Env.LOCAL,
            timestamp=True,
            time_field_format=time_field_format,
        )
    return base.with_fields(fields)


class _StderrWriter:
    """Writes to whatever sys.stderr is at the time of writing."""

    def write(self, text: str) -> None:
        sys.stderr.write(text)


_STDERR = _StderrWriter()

ZERO_LOGGER = new_logger(
    level=Level.INFO, env=Env.LOCAL, writer=_STDERR, fields={"type": "default"}
)
ZERO_TEST_LOGGER = new_logger(level=Level.ERROR, env=Env.TEST, writer=_STDERR)
ZERO_DISCARD_LOGGER = new_logger()