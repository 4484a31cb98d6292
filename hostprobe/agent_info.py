"""Information about the endpoint: distribution, default interface, kernel."""

from __future__ import annotations

import os
from pathlib import Path

from .textutil import split, split1, trim


def _first_line(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            line = f.readline()
    except OSError:
        return None
    return line[:-1] if line.endswith("\n") else line


def key_from_file(path: str | os.PathLike, key: str) -> str | None:
    """Return the value of ``key`` in a ``KEY=value`` file, unquoted.

    Returns None if the file cannot be read or does not define the key.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError:
        return None

    for line in lines:
        line = trim(line)
        if not line:
            continue

        name, value = split1(line, "=")
        if trim(name) == key:
            value = trim(value)
            if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
                value = value[1:-1]
            return value

    return None


def distribution(root: str | os.PathLike = "/") -> str | None:
    """Return a readable name of the installed operating-system distribution."""
    etc = Path(root) / "etc"

    pretty = key_from_file(etc / "os-release", "PRETTY_NAME")
    if pretty is not None:
        return pretty

    lsb = etc / "lsb-release"
    description = key_from_file(lsb, "DISTRIB_DESCRIPTION")
    if description is not None:
        return description

    dist_id = key_from_file(lsb, "DISTRIB_ID")
    release = key_from_file(lsb, "DISTRIB_RELEASE")
    if dist_id is not None:
        return f"{dist_id} {release}" if release is not None else dist_id

    line = _first_line(etc / "redhat-release")
    if line:
        return trim(line)

    line = _first_line(etc / "debian_version")
    if line:
        return f"Debian {trim(line)}"

    return None


def default_interface(route_path: str | os.PathLike = "/proc/net/route") -> str | None:
    """Return the name of the interface carrying the default route, if any."""
    try:
        with open(route_path, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError:
        return None

    interface = ""
    for line in lines:
        fields = split(line)
        if len(fields) >= 2 and fields[1] == "00000000":
            interface = fields[0]

    return interface or None


def kernel_info() -> tuple[str, str, str] | None:
    """Return the kernel's (name, release, architecture), or None if unavailable."""
    try:
        info = os.uname()
    except (AttributeError, OSError):
        return None
    return info.sysname, info.release, info.machine