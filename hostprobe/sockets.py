"""Table of the IP sockets currently open on the endpoint."""

from __future__ import annotations

import logging
import os
import re
import socket
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping

from .helpers import cannot_be_reached

_log = logging.getLogger(__name__)

_PROC = Path("/proc")
_SOCKET_LINK = re.compile(r"socket:\[(\d+)\]")

IPPROTO_ICMP = 1
IPPROTO_TCP = 6
IPPROTO_UDP = 17
IPPROTO_ICMPV6 = 58
IPPROTO_UDPLITE = 136
IPPROTO_RAW = 255

# (file under /proc/net, protocol number, family label), in reporting order.
_TABLES = (
    ("icmp", IPPROTO_ICMP, "IPv4"),
    ("icmp6", IPPROTO_ICMPV6, "IPv6"),
    ("raw", IPPROTO_RAW, "IPv4"),
    ("raw6", IPPROTO_RAW, "IPv6"),
    ("tcp", IPPROTO_TCP, "IPv4"),
    ("tcp6", IPPROTO_TCP, "IPv6"),
    ("udp", IPPROTO_UDP, "IPv4"),
    ("udp6", IPPROTO_UDP, "IPv6"),
    ("udplite", IPPROTO_UDPLITE, "IPv4"),
    ("udplite6", IPPROTO_UDPLITE, "IPv4"),
)

_TCP_STATES = {
    1: "ESTABLISHED",
    2: "SYN_SENT",
    3: "SYN_RECEIVED",
    4: "FIN_WAIT_1",
    5: "FIN_WAIT_2",
    6: "TIME_WAIT",
    7: "CLOSED",
    8: "CLOSE_WAIT",
    9: "LAST_ACK",
    10: "LISTEN",
    11: "CLOSING",
}


@dataclass(frozen=True)
class SocketRow:
    """One open socket, with columns in table order."""

    pid: int | None
    process: str | None
    family: str
    protocol: int
    local_addr: str
    local_port: int
    remote_addr: str
    remote_port: int
    state: str | None


def tcp_state_name(status: int) -> str:
    """Return the textual name of a kernel TCP state number."""
    try:
        return _TCP_STATES[status]
    except KeyError:
        cannot_be_reached()


def _decode_address(text: str) -> str:
    raw = bytes.fromhex(text)
    if len(raw) == 4:
        return socket.inet_ntop(socket.AF_INET, raw[::-1])
    if len(raw) == 16:
        words = b"".join(raw[i : i + 4][::-1] for i in range(0, 16, 4))
        return socket.inet_ntop(socket.AF_INET6, words)
    raise ValueError(f"unexpected address length: {text}")


def _decode_endpoint(text: str) -> tuple[str, int]:
    addr, sep, port = text.partition(":")
    if not sep:
        raise ValueError(f"malformed endpoint: {text}")
    return _decode_address(addr), int(port, 16)


def _parse_table(
    text: str,
    protocol: int,
    family: str,
    inodes: Mapping[int, tuple[int, str]],
) -> Iterator[SocketRow]:
    """Yield the sockets listed in the contents of a /proc/net table."""
    for line in text.splitlines()[1:]:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 10:
            raise ValueError(f"malformed socket entry: {line}")

        local_addr, local_port = _decode_endpoint(fields[1])
        remote_addr, remote_port = _decode_endpoint(fields[2])
        status = int(fields[3], 16)
        inode = int(fields[9])

        pid, process = inodes.get(inode, (None, None))
        state = tcp_state_name(status) if protocol == IPPROTO_TCP else None

        yield SocketRow(
            pid=pid,
            process=process,
            family=family,
            protocol=protocol,
            local_addr=local_addr,
            local_port=local_port,
            remote_addr=remote_addr,
            remote_port=remote_port,
            state=state,
        )


def _socket_inodes(proc_root: Path) -> dict[int, tuple[int, str]]:
    """Map socket inodes to the (pid, process name) of the first process holding them."""
    inodes: dict[int, tuple[int, str]] = {}

    for entry in proc_root.iterdir():
        if not entry.name.isdigit():
            continue
        pid = int(entry.name)
        try:
            name = (entry / "comm").read_text().rstrip("\n")
            fds = list((entry / "fd").iterdir())
        except OSError:
            continue

        for fd in fds:
            try:
                target = os.readlink(fd)
            except OSError:
                continue
            match = _SOCKET_LINK.fullmatch(target)
            if match:
                inodes.setdefault(int(match.group(1)), (pid, name))

    return inodes


def sockets() -> list[SocketRow]:
    """Return one row per IP socket open at the time of the call."""
    rows: list[SocketRow] = []

    try:
        inodes = _socket_inodes(_PROC)
        for table, protocol, family in _TABLES:
            path = _PROC / "net" / table
            try:
                text = path.read_text()
            except FileNotFoundError:
                continue
            rows.extend(_parse_table(text, protocol, family, inodes))
    except OSError:
        _log.warning("cannot read /proc filesystem (system error)")
    except ValueError:
        _log.warning("cannot read /proc filesystem (runtime error)")

    return rows