"""Parsing of system journal output into log events.

The journal is read as a stream of ``json-seq`` records: each record may be
preceded by ASCII record-separator characters (0x1e) and ends with a newline.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

_log = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_RECORD_SEPARATOR = 0x1E
_PROCESS_FIELDS = ("_COMM", "_EXE", "SYSLOG_IDENTIFIER")


@dataclass(frozen=True)
class LogEvent:
    """One log message, with columns in table order."""

    time: datetime
    process: Any
    level: Any
    message: Any
    eventid: str | None = None


def parse_journal_record(text: str | bytes) -> LogEvent:
    """Turn one JSON journal record into a log event.

    Raises ``ValueError`` if the record is not valid JSON or lacks a usable
    ``__REALTIME_TIMESTAMP``.
    """
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to parse JSON data: {exc}") from exc

    if not isinstance(record, dict):
        raise ValueError("journal record is not a JSON object")

    try:
        raw_time = record["__REALTIME_TIMESTAMP"]
    except KeyError:
        raise ValueError("journal record lacks __REALTIME_TIMESTAMP") from None

    if not isinstance(raw_time, str):
        raise ValueError("__REALTIME_TIMESTAMP is not a string")
    try:
        microseconds = int(raw_time.strip())
    except ValueError:
        raise ValueError(f"invalid __REALTIME_TIMESTAMP: {raw_time!r}") from None

    process = next((record[field] for field in _PROCESS_FIELDS if field in record), None)

    return LogEvent(
        time=_EPOCH + timedelta(microseconds=microseconds),
        process=process,
        level=record.get("PRIORITY"),
        message=record.get("MESSAGE"),
        eventid=None,
    )


class JournalStreamParser:
    """Incrementally splits journal output into records and parses them.

    Data may arrive in arbitrary chunks; incomplete trailing records are kept
    until the rest arrives. Records that fail to parse are logged and skipped.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Data received but not yet forming a complete record."""
        return bytes(self._buffer)

    def feed(self, data: str | bytes) -> list[LogEvent]:
        """Add ``data`` to the stream and return the events it completes."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.extend(data)

        events: list[LogEvent] = []
        buffer = self._buffer
        cur = 0

        while cur < len(buffer):
            while cur < len(buffer) and buffer[cur] == _RECORD_SEPARATOR:
                cur += 1

            end = buffer.find(b"\n", cur)
            if end < 0:
                break

            chunk = bytes(buffer[cur:end])
            try:
                events.append(parse_journal_record(chunk.decode("utf-8", errors="replace")))
            except ValueError as exc:
                _log.warning("[system_logs] %s", exc)
            cur = end + 1

        del buffer[:cur]
        return events