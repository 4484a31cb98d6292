"""Table of the processes currently running on the endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

import psutil

_log = logging.getLogger(__name__)

# Position of the priority among the fields following the process name in
# /proc/<pid>/stat (the state, field 3, is at position 0; priority is field 18).
_PRIORITY_OFFSET = 15


@dataclass(frozen=True)
class ProcessRow:
    """One running process, with columns in table order."""

    name: str | None
    pid: int | None
    ppid: int | None
    uid: int | None
    gid: int | None
    ruid: int | None
    rgid: int | None
    priority: str | None
    startup: timedelta | None
    vsize: int | None
    rsize: int | None
    utime: timedelta | None
    stime: timedelta | None


def _stat_priority(stat_text: str) -> int:
    """Extract the kernel priority from the contents of a /proc/<pid>/stat file."""
    close = stat_text.rfind(")")
    if close < 0:
        raise ValueError("malformed stat record")
    fields = stat_text[close + 1 :].split()
    if len(fields) <= _PRIORITY_OFFSET:
        raise ValueError("malformed stat record")
    return int(fields[_PRIORITY_OFFSET])


def _priority(proc: psutil.Process) -> str:
    try:
        text = Path(f"/proc/{proc.pid}/stat").read_text()
        return str(_stat_priority(text))
    except (OSError, ValueError):
        return str(proc.nice())


def _whole_seconds(seconds: float) -> timedelta:
    return timedelta(seconds=int(seconds))


def processes() -> list[ProcessRow]:
    """Return one row per process visible at the time of the call.

    Processes that vanish or cannot be inspected are left out.
    """
    rows: list[ProcessRow] = []

    try:
        for proc in psutil.process_iter():
            try:
                with proc.oneshot():
                    name = proc.name()
                    ppid = proc.ppid()
                    uids = proc.uids()
                    gids = proc.gids()
                    memory = proc.memory_info()
                    times = proc.cpu_times()
                    priority = _priority(proc)
            except (psutil.Error, OSError):
                continue

            rows.append(
                ProcessRow(
                    name=name,
                    pid=proc.pid,
                    ppid=ppid,
                    uid=uids.effective,
                    gid=gids.effective,
                    ruid=uids.real,
                    rgid=gids.real,
                    priority=priority,
                    startup=None,
                    vsize=memory.vms,
                    rsize=memory.rss,
                    utime=_whole_seconds(times.user),
                    stime=_whole_seconds(times.system),
                )
            )
    except OSError:
        _log.warning("cannot read process table")

    return rows