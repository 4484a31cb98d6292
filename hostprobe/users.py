"""Table of the user accounts known to the operating system."""

from __future__ import annotations

import pwd
from dataclasses import dataclass


@dataclass(frozen=True)
class UserRow:
    """One user account, with columns in table order."""

    name: str
    full_name: str
    is_admin: bool
    is_system: bool | None
    uid: str
    gid: int
    home: str
    shell: str
    email: str | None


def users() -> list[UserRow]:
    """Return one row per account in the password database."""
    return [
        UserRow(
            name=entry.pw_name,
            full_name=entry.pw_gecos,
            is_admin=entry.pw_uid == 0,
            is_system=None,
            uid=str(entry.pw_uid),
            gid=entry.pw_gid,
            home=entry.pw_dir,
            shell=entry.pw_shell,
            email=None,
        )
        for entry in pwd.getpwall()
    ]